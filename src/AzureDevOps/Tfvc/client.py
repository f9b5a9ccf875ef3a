# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, Union

import requests
from azure.core.credentials import AzureKeyCredential, TokenCredential

from .core._auth import _AuthManager
from .core.config import TfvcConfig
from .data._vss import _VssClient
from .operations.branches import BranchOperations
from .operations.changesets import ChangesetOperations
from .operations.items import ItemOperations
from .operations.labels import LabelOperations
from .operations.projects import ProjectInfoOperations
from .operations.shelvesets import ShelvesetOperations


class TfvcClient:
    """
    High-level client for the Team Foundation Version Control (TFVC) REST API.

    This client provides a typed interface over the TFVC endpoints of Azure DevOps
    Services and Azure DevOps Server. It handles authentication via azure-core
    credentials and delegates HTTP operations to an internal
    :class:`~AzureDevOps.Tfvc.data._vss._VssClient`, which discovers resource
    locations and negotiates API versions with the server.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager ensures proper resource cleanup
        and enables connection pooling::

            with TfvcClient(collection_url, credential) as client:
                branches = client.branches.list(project="Fabrikam")
            # Resources automatically cleaned up

    **Without Context Manager**:
        Resources are created lazily on first use. Call ``close()`` when done::

            client = TfvcClient(collection_url, credential)
            try:
                item = client.items.get("$/Fabrikam/Main/README.md")
            finally:
                client.close()

    Operations are organized under namespaces:

    - ``client.branches``: branch hierarchies and references
    - ``client.changesets``: changesets, changes and associated work items
    - ``client.items``: item metadata and content streams
    - ``client.labels``: labels and labelled items
    - ``client.projects``: version control information per team project
    - ``client.shelvesets``: shelvesets, changes and associated work items

    :param base_url: Collection URL, for example ``"https://dev.azure.com/fabrikam"``
        or ``"https://tfs.fabrikam.com:8080/tfs/DefaultCollection"``. Trailing slash is removed.
    :type base_url: :class:`str`
    :param credential: An azure-core ``TokenCredential`` (Microsoft Entra ID) or an
        ``AzureKeyCredential`` holding a personal access token.
    :type credential: ~azure.core.credentials.TokenCredential or ~azure.core.credentials.AzureKeyCredential
    :param config: Optional configuration for timeouts, retries, method override and telemetry.
        If not provided, defaults are loaded from :meth:`~AzureDevOps.Tfvc.core.config.TfvcConfig.from_env`.
    :type config: ~AzureDevOps.Tfvc.core.config.TfvcConfig or None

    :raises ValueError: If ``base_url`` is missing or empty after trimming.
    :raises TypeError: If ``credential`` is not a supported credential type.

    Example::

        from azure.core.credentials import AzureKeyCredential
        from AzureDevOps.Tfvc.client import TfvcClient

        with TfvcClient("https://dev.azure.com/fabrikam", AzureKeyCredential(pat)) as client:
            for cs in client.changesets.list(project="Fabrikam", top=5):
                print(cs.changeset_id, cs.comment)
    """

    def __init__(
        self,
        base_url: str,
        credential: Union[TokenCredential, AzureKeyCredential],
        config: Optional[TfvcConfig] = None,
    ) -> None:
        self.auth = _AuthManager(credential)
        self._base_url = (base_url or "").strip().rstrip("/")
        if not self._base_url:
            raise ValueError("base_url is required.")
        self._config = config or TfvcConfig.from_env()
        self._vss: Optional[_VssClient] = None
        self._session: Optional[requests.Session] = None
        self._owns_session: bool = False

        # Initialize operation namespaces
        self.branches = BranchOperations(self)
        self.changesets = ChangesetOperations(self)
        self.items = ItemOperations(self)
        self.labels = LabelOperations(self)
        self.projects = ProjectInfoOperations(self)
        self.shelvesets = ShelvesetOperations(self)

    def __enter__(self) -> "TfvcClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling. All operations within
        the context reuse this session.

        :return: The client instance.
        :rtype: TfvcClient
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Explicitly close the client and release resources.

        Closes the internal REST client and the HTTP session (if owned). Safe to
        call multiple times. Called automatically by the context manager.
        """
        if self._vss is not None:
            self._vss.close()
            self._vss = None
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False

    def check_connection(self) -> bool:
        """
        Check that the collection URL answers REST requests.

        :return: ``True`` when ``_apis/connectiondata`` returns a non-empty success response.
        :rtype: bool
        """
        return self._get_vss().check_connection()

    def _get_vss(self) -> _VssClient:
        """
        Get or create the internal REST client.

        Deferring construction until the first API call keeps client creation free of
        network traffic. When a session exists (from the context manager) it is passed
        down for connection pooling.

        :rtype: ~AzureDevOps.Tfvc.data._vss._VssClient
        """
        if self._vss is None:
            self._vss = _VssClient(
                self.auth,
                self._base_url,
                self._config,
                session=self._session,
            )
        return self._vss

    @contextmanager
    def _scoped_vss(self) -> Iterator[_VssClient]:
        """Yield the low-level client while ensuring a session correlation scope is active."""
        vss = self._get_vss()
        with vss._call_scope():
            yield vss


__all__ = ["TfvcClient"]
