# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Authentication helpers for the TFVC SDK.

Two credential shapes are accepted:

- :class:`~azure.core.credentials.TokenCredential` (for example from ``azure-identity``):
  a Microsoft Entra bearer token is acquired for the Azure DevOps scope.
- :class:`~azure.core.credentials.AzureKeyCredential`: the key is treated as a
  personal access token and sent with HTTP basic authentication.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Union

from azure.core.credentials import AzureKeyCredential, TokenCredential

from ..common.constants import AZURE_DEVOPS_SCOPE


@dataclass
class _TokenPair:
    resource: str
    access_token: str


class _AuthManager:
    """Azure Identity-based authentication helper for Azure DevOps."""

    def __init__(self, credential: Union[TokenCredential, AzureKeyCredential]) -> None:
        if not isinstance(credential, (TokenCredential, AzureKeyCredential)):
            raise TypeError(
                "credential must implement azure.core.credentials.TokenCredential "
                "or be an azure.core.credentials.AzureKeyCredential holding a personal access token."
            )
        self.credential = credential

    def _acquire_token(self, scope: str = AZURE_DEVOPS_SCOPE) -> _TokenPair:
        """Acquire an access token for the given scope using Azure Identity."""
        token = self.credential.get_token(scope)
        return _TokenPair(resource=scope, access_token=token.token)

    def _authorization_header(self, scope: str = AZURE_DEVOPS_SCOPE) -> str:
        """Return the ``Authorization`` header value for the configured credential."""
        if isinstance(self.credential, AzureKeyCredential):
            raw = f":{self.credential.key}".encode("utf-8")
            return f"Basic {base64.b64encode(raw).decode('ascii')}"
        return f"Bearer {self._acquire_token(scope).access_token}"
