# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the TFVC SDK.

This module contains the operation namespace classes that organize
related operations under intuitive namespaces:
- BranchOperations: branch hierarchies and branch references
- ChangesetOperations: changesets, their changes and work items
- ItemOperations: item metadata and content streams
- LabelOperations: labels and labelled items
- ProjectInfoOperations: version control information per team project
- ShelvesetOperations: shelvesets, their changes and work items
"""

__all__ = []
