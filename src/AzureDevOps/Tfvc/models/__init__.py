# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models and type definitions for the TFVC SDK.

- :mod:`~AzureDevOps.Tfvc.models.tfvc`: Response contracts such as
  :class:`~AzureDevOps.Tfvc.models.tfvc.TfvcItem` and
  :class:`~AzureDevOps.Tfvc.models.tfvc.TfvcChangeset`, with dict-like access
  to the raw payload.
- :mod:`~AzureDevOps.Tfvc.models.request_data`: Request bodies, search criteria,
  version descriptors and the string enums they use.
- :mod:`~AzureDevOps.Tfvc.models.api_version`: API version and resource
  location models used by version negotiation.

Note:
    This ``__init__.py`` does NOT import/export models. Import directly from
    the specific module files to avoid duplicate entries in auto-generated
    documentation.
"""

__all__ = []
