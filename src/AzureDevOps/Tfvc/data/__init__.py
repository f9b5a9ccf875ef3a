# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level REST plumbing for the TFVC SDK.

Contains the shared Azure DevOps base client (resource location discovery,
API version negotiation, request building and error translation) and the
route/query helpers it uses. Nothing here is part of the public API.
"""

__all__ = []
