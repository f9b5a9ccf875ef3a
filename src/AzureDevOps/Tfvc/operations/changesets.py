# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Changeset operations namespace."""

from __future__ import annotations

import uuid
from typing import List, Optional, Union, TYPE_CHECKING

from ..common.constants import (
    APPLICATION_JSON_TYPE,
    LOCATION_CHANGESET_CHANGES,
    LOCATION_CHANGESET_WORK_ITEMS,
    LOCATION_CHANGESETS,
    LOCATION_CHANGESETS_BATCH,
    TFVC_API_VERSION,
)
from ..data._routing import QueryParameters, _project_label, _route_values
from ..data._vss import _unwrap_list
from ..models.request_data import TfvcChangesetSearchCriteria, TfvcChangesetsRequestData
from ..models.tfvc import AssociatedWorkItem, TfvcChange, TfvcChangeset, TfvcChangesetRef

if TYPE_CHECKING:
    from ..client import TfvcClient


def _changeset_query(
    max_change_count: Optional[int],
    include_details: Optional[bool],
    include_work_items: Optional[bool],
    max_comment_length: Optional[int],
    include_source_rename: Optional[bool],
    skip: Optional[int],
    top: Optional[int],
    orderby: Optional[str],
    search_criteria: Optional[TfvcChangesetSearchCriteria],
) -> QueryParameters:
    params = QueryParameters()
    params.add_if_not_none("maxChangeCount", max_change_count)
    params.add_if_not_none("includeDetails", include_details)
    params.add_if_not_none("includeWorkItems", include_work_items)
    params.add_if_not_none("maxCommentLength", max_comment_length)
    params.add_if_not_none("includeSourceRename", include_source_rename)
    params.add_if_not_none("$skip", skip)
    params.add_if_not_none("$top", top)
    params.add_if_not_empty("$orderby", orderby)
    params.add_model(search_criteria)
    return params


class ChangesetOperations:
    """
    TFVC changeset queries.

    Accessed via ``client.changesets``.

    Example::

        cs = client.changesets.get(1234, project="Fabrikam", include_details=True)
        print(cs.comment)

        recent = client.changesets.list(
            project="Fabrikam",
            top=10,
            search_criteria=TfvcChangesetSearchCriteria(item_path="$/Fabrikam/Main"),
        )
    """

    def __init__(self, client: "TfvcClient") -> None:
        self._client = client

    def get_changes(
        self,
        id: Optional[int] = None,
        *,
        skip: Optional[int] = None,
        top: Optional[int] = None,
    ) -> List[TfvcChange]:
        """
        Retrieve TFVC changes for a given changeset.

        :param id: Changeset id.
        :type id: int | None
        :param skip: Number of results to skip.
        :type skip: int | None
        :param top: Maximum number of results to return.
        :type top: int | None
        :return: Changes in the changeset.
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.TfvcChange]
        """
        params = QueryParameters()
        params.add_if_not_none("$skip", skip)
        params.add_if_not_none("$top", top)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_CHANGESET_CHANGES,
                TFVC_API_VERSION,
                route_values=_route_values(id=id),
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="changesets.get_changes",
            )
            body = vss._send_json(request)
        return [TfvcChange.from_api_response(c) for c in _unwrap_list(body)]

    def get(
        self,
        id: int,
        project: Optional[Union[str, uuid.UUID]] = None,
        *,
        max_change_count: Optional[int] = None,
        include_details: Optional[bool] = None,
        include_work_items: Optional[bool] = None,
        max_comment_length: Optional[int] = None,
        include_source_rename: Optional[bool] = None,
        skip: Optional[int] = None,
        top: Optional[int] = None,
        orderby: Optional[str] = None,
        search_criteria: Optional[TfvcChangesetSearchCriteria] = None,
    ) -> TfvcChangeset:
        """
        Retrieve a TFVC changeset.

        :param id: Changeset id to retrieve.
        :type id: int
        :param project: Team project name or GUID.
        :type project: str | uuid.UUID | None
        :param max_change_count: Number of changes to return (maximum 100 changes).
        :param include_details: Include policy details and check-in notes in the response.
        :param include_work_items: Include work items.
        :param max_comment_length: Include details about associated work items in the response.
        :param include_source_rename: Include renames.
        :param skip: Number of results to skip.
        :param top: Maximum number of results to return.
        :param orderby: Results are sorted by id in descending order by default. Use ``"id asc"`` to sort ascending.
        :param search_criteria: Filters flattened into the query string.
        :type search_criteria: ~AzureDevOps.Tfvc.models.request_data.TfvcChangesetSearchCriteria | None
        :return: The changeset.
        :rtype: ~AzureDevOps.Tfvc.models.tfvc.TfvcChangeset

        :raises ~AzureDevOps.Tfvc.core.errors.TfvcResourceNotFoundError: If the changeset does not exist.
        """
        params = _changeset_query(
            max_change_count,
            include_details,
            include_work_items,
            max_comment_length,
            include_source_rename,
            skip,
            top,
            orderby,
            search_criteria,
        )

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_CHANGESETS,
                TFVC_API_VERSION,
                route_values=_route_values(project=project, id=id),
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="changesets.get",
                project=_project_label(project),
            )
            body = vss._send_json(request)
        return TfvcChangeset.from_api_response(body or {})

    def list(
        self,
        project: Optional[Union[str, uuid.UUID]] = None,
        *,
        max_change_count: Optional[int] = None,
        include_details: Optional[bool] = None,
        include_work_items: Optional[bool] = None,
        max_comment_length: Optional[int] = None,
        include_source_rename: Optional[bool] = None,
        skip: Optional[int] = None,
        top: Optional[int] = None,
        orderby: Optional[str] = None,
        search_criteria: Optional[TfvcChangesetSearchCriteria] = None,
    ) -> List[TfvcChangesetRef]:
        """
        Retrieve TFVC changesets.

        Takes the same filters as :meth:`get`, without the changeset id.

        :return: Changeset summaries.
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.TfvcChangesetRef]
        """
        params = _changeset_query(
            max_change_count,
            include_details,
            include_work_items,
            max_comment_length,
            include_source_rename,
            skip,
            top,
            orderby,
            search_criteria,
        )

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_CHANGESETS,
                TFVC_API_VERSION,
                route_values=_route_values(project=project),
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="changesets.list",
                project=_project_label(project),
            )
            body = vss._send_json(request)
        return [TfvcChangesetRef.from_api_response(c) for c in _unwrap_list(body)]

    def get_batch(self, request_data: TfvcChangesetsRequestData) -> List[TfvcChangesetRef]:
        """
        Retrieve several changesets by id in one request.

        :param request_data: Changeset ids and options, sent as the JSON body.
        :type request_data: ~AzureDevOps.Tfvc.models.request_data.TfvcChangesetsRequestData
        :return: Changeset summaries.
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.TfvcChangesetRef]
        """
        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "POST",
                LOCATION_CHANGESETS_BATCH,
                TFVC_API_VERSION,
                body=request_data,
                accept=APPLICATION_JSON_TYPE,
                content_type=APPLICATION_JSON_TYPE,
                operation="changesets.get_batch",
            )
            body = vss._send_json(request)
        return [TfvcChangesetRef.from_api_response(c) for c in _unwrap_list(body)]

    def get_work_items(self, id: Optional[int] = None) -> List[AssociatedWorkItem]:
        """
        Retrieve the work items associated with a changeset.

        :param id: Changeset id.
        :type id: int | None
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.AssociatedWorkItem]
        """
        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_CHANGESET_WORK_ITEMS,
                TFVC_API_VERSION,
                route_values=_route_values(id=id),
                accept=APPLICATION_JSON_TYPE,
                operation="changesets.get_work_items",
            )
            body = vss._send_json(request)
        return [AssociatedWorkItem.from_api_response(w) for w in _unwrap_list(body)]
