# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Item metadata and content operations namespace."""

from __future__ import annotations

import uuid
from typing import Any, List, Optional, Union, TYPE_CHECKING

from ..common.constants import (
    APPLICATION_JSON_TYPE,
    APPLICATION_OCTET_STREAM_TYPE,
    APPLICATION_ZIP_TYPE,
    LOCATION_ITEMS,
    LOCATION_ITEMS_BATCH,
    TEXT_PLAIN_TYPE,
    TFVC_API_VERSION,
)
from ..data._routing import QueryParameters, _project_label, _route_values
from ..data._vss import _unwrap_list
from ..models.request_data import TfvcItemRequestData, TfvcVersionDescriptor, VersionControlRecursionType
from ..models.tfvc import TfvcItem

if TYPE_CHECKING:
    from ..client import TfvcClient


def _item_query(
    path: Optional[str],
    file_name: Optional[str],
    download: Optional[bool],
    scope_path: Optional[str],
    recursion_level: Optional[VersionControlRecursionType],
    version_descriptor: Optional[TfvcVersionDescriptor],
) -> QueryParameters:
    params = QueryParameters()
    params.add_if_not_empty("path", path)
    params.add_if_not_empty("fileName", file_name)
    params.add_if_not_none("download", download)
    params.add_if_not_empty("scopePath", scope_path)
    params.add_if_not_none("recursionLevel", recursion_level)
    params.add_model(version_descriptor)
    return params


class ItemOperations:
    """
    TFVC item metadata and content.

    Accessed via ``client.items``. The content methods (:meth:`get_content`,
    :meth:`get_text`, :meth:`get_zip`) return the raw, unbuffered response
    stream; read it and close it when done.

    Example:
        Metadata::

            item = client.items.get("$/Fabrikam/Main/README.md", project="Fabrikam")
            print(item.version, item.size)

        Content at a given changeset::

            descriptor = TfvcVersionDescriptor(version="1234", version_type=TfvcVersionType.CHANGESET)
            stream = client.items.get_content("$/Fabrikam/Main/README.md", version_descriptor=descriptor)
            try:
                data = stream.read()
            finally:
                stream.close()
    """

    def __init__(self, client: "TfvcClient") -> None:
        self._client = client

    def get_batch(
        self,
        request_data: TfvcItemRequestData,
        project: Optional[Union[str, uuid.UUID]] = None,
    ) -> List[List[TfvcItem]]:
        """
        Retrieve a set of items given a list of paths. Allows for specifying the
        recursion level and version descriptor for each path.

        :param request_data: Item descriptors, sent as the JSON body.
        :type request_data: ~AzureDevOps.Tfvc.models.request_data.TfvcItemRequestData
        :param project: Team project name or GUID.
        :type project: str | uuid.UUID | None
        :return: One list of items per descriptor, in request order.
        :rtype: list[list[~AzureDevOps.Tfvc.models.tfvc.TfvcItem]]
        """
        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "POST",
                LOCATION_ITEMS_BATCH,
                TFVC_API_VERSION,
                route_values=_route_values(project=project),
                body=request_data,
                accept=APPLICATION_JSON_TYPE,
                content_type=APPLICATION_JSON_TYPE,
                operation="items.get_batch",
                project=_project_label(project),
            )
            body = vss._send_json(request)
        return [
            [TfvcItem.from_api_response(item) for item in group if isinstance(item, dict)]
            for group in _unwrap_list(body)
            if isinstance(group, list)
        ]

    def get(
        self,
        path: Optional[str] = None,
        project: Optional[Union[str, uuid.UUID]] = None,
        *,
        file_name: Optional[str] = None,
        download: Optional[bool] = None,
        scope_path: Optional[str] = None,
        recursion_level: Optional[VersionControlRecursionType] = None,
        version_descriptor: Optional[TfvcVersionDescriptor] = None,
    ) -> TfvcItem:
        """
        Get item metadata.

        :param path: Version control path of an individual item to return.
        :type path: str | None
        :param project: Team project name or GUID.
        :type project: str | uuid.UUID | None
        :param file_name: File name of the item returned.
        :type file_name: str | None
        :param download: If true, create a downloadable attachment.
        :type download: bool | None
        :param scope_path: Version control path of a folder to return multiple items.
        :type scope_path: str | None
        :param recursion_level: None (just the item), or OneLevel (contents of a folder).
        :type recursion_level: ~AzureDevOps.Tfvc.models.request_data.VersionControlRecursionType | None
        :param version_descriptor: Version of the item; its fields are flattened into the query string.
        :type version_descriptor: ~AzureDevOps.Tfvc.models.request_data.TfvcVersionDescriptor | None
        :return: The item.
        :rtype: ~AzureDevOps.Tfvc.models.tfvc.TfvcItem

        :raises ~AzureDevOps.Tfvc.core.errors.TfvcResourceNotFoundError: If the item does not exist.
        """
        body = self._get_item_json(
            "items.get", path, project, file_name, download, scope_path, recursion_level, version_descriptor
        )
        return TfvcItem.from_api_response(body or {})

    def get_content(
        self,
        path: Optional[str] = None,
        project: Optional[Union[str, uuid.UUID]] = None,
        *,
        file_name: Optional[str] = None,
        download: Optional[bool] = None,
        scope_path: Optional[str] = None,
        recursion_level: Optional[VersionControlRecursionType] = None,
        version_descriptor: Optional[TfvcVersionDescriptor] = None,
    ) -> Any:
        """
        Get item content as a binary stream (``application/octet-stream``).

        Takes the same arguments as :meth:`get`.

        :return: Raw response stream; the caller must close it.
        """
        return self._get_item_stream(
            "items.get_content",
            APPLICATION_OCTET_STREAM_TYPE,
            path,
            project,
            file_name,
            download,
            scope_path,
            recursion_level,
            version_descriptor,
        )

    def list(
        self,
        project: Optional[Union[str, uuid.UUID]] = None,
        *,
        scope_path: Optional[str] = None,
        recursion_level: Optional[VersionControlRecursionType] = None,
        include_links: Optional[bool] = None,
        version_descriptor: Optional[TfvcVersionDescriptor] = None,
    ) -> List[TfvcItem]:
        """
        Get a list of TFVC items.

        :param project: Team project name or GUID.
        :type project: str | uuid.UUID | None
        :param scope_path: Version control path of a folder to return multiple items.
        :type scope_path: str | None
        :param recursion_level: None (just the item), or OneLevel (contents of a folder).
        :type recursion_level: ~AzureDevOps.Tfvc.models.request_data.VersionControlRecursionType | None
        :param include_links: True to include links.
        :type include_links: bool | None
        :param version_descriptor: Version of the items.
        :type version_descriptor: ~AzureDevOps.Tfvc.models.request_data.TfvcVersionDescriptor | None
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.TfvcItem]
        """
        params = QueryParameters()
        params.add_if_not_empty("scopePath", scope_path)
        params.add_if_not_none("recursionLevel", recursion_level)
        params.add_if_not_none("includeLinks", include_links)
        params.add_model(version_descriptor)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_ITEMS,
                TFVC_API_VERSION,
                route_values=_route_values(project=project),
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="items.list",
                project=_project_label(project),
            )
            body = vss._send_json(request)
        return [TfvcItem.from_api_response(i) for i in _unwrap_list(body)]

    def get_text(
        self,
        path: Optional[str] = None,
        project: Optional[Union[str, uuid.UUID]] = None,
        *,
        file_name: Optional[str] = None,
        download: Optional[bool] = None,
        scope_path: Optional[str] = None,
        recursion_level: Optional[VersionControlRecursionType] = None,
        version_descriptor: Optional[TfvcVersionDescriptor] = None,
    ) -> Any:
        """
        Get item content as a text stream (``text/plain``).

        :return: Raw response stream; the caller must close it.
        """
        return self._get_item_stream(
            "items.get_text",
            TEXT_PLAIN_TYPE,
            path,
            project,
            file_name,
            download,
            scope_path,
            recursion_level,
            version_descriptor,
        )

    def get_zip(
        self,
        path: Optional[str] = None,
        project: Optional[Union[str, uuid.UUID]] = None,
        *,
        file_name: Optional[str] = None,
        download: Optional[bool] = None,
        scope_path: Optional[str] = None,
        recursion_level: Optional[VersionControlRecursionType] = None,
        version_descriptor: Optional[TfvcVersionDescriptor] = None,
    ) -> Any:
        """
        Get a folder (or item) as a zip archive stream (``application/zip``).

        :return: Raw response stream; the caller must close it.
        """
        return self._get_item_stream(
            "items.get_zip",
            APPLICATION_ZIP_TYPE,
            path,
            project,
            file_name,
            download,
            scope_path,
            recursion_level,
            version_descriptor,
        )

    # ----------------------------- Internals -----------------------------

    def _get_item_json(self, operation, path, project, file_name, download, scope_path, recursion_level, descriptor):
        params = _item_query(path, file_name, download, scope_path, recursion_level, descriptor)
        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_ITEMS,
                TFVC_API_VERSION,
                route_values=_route_values(project=project),
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation=operation,
                project=_project_label(project),
            )
            return vss._send_json(request)

    def _get_item_stream(
        self, operation, accept, path, project, file_name, download, scope_path, recursion_level, descriptor
    ):
        params = _item_query(path, file_name, download, scope_path, recursion_level, descriptor)
        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_ITEMS,
                TFVC_API_VERSION,
                route_values=_route_values(project=project),
                query_parameters=params,
                accept=accept,
                operation=operation,
                project=_project_label(project),
            )
            return vss._send_stream(request)
