# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Shelveset operations namespace."""

from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from ..common.constants import (
    APPLICATION_JSON_TYPE,
    LOCATION_SHELVESET_CHANGES,
    LOCATION_SHELVESET_WORK_ITEMS,
    LOCATION_SHELVESETS,
    TFVC_API_VERSION,
)
from ..data._routing import QueryParameters
from ..data._vss import _unwrap_list
from ..models.request_data import TfvcShelvesetRequestData
from ..models.tfvc import AssociatedWorkItem, TfvcChange, TfvcShelveset, TfvcShelvesetRef

if TYPE_CHECKING:
    from ..client import TfvcClient


class ShelvesetOperations:
    """
    TFVC shelveset queries.

    Accessed via ``client.shelvesets``. Shelvesets are collection scoped, so
    none of these methods take a project. Shelveset ids have the form
    ``"name;owner"``.

    Example::

        mine = client.shelvesets.list(TfvcShelvesetRequestData(owner="jamal@fabrikam.com"), top=5)
        changes = client.shelvesets.get_changes(mine[0].id)
    """

    def __init__(self, client: "TfvcClient") -> None:
        self._client = client

    def get_changes(
        self,
        shelveset_id: Optional[str] = None,
        *,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> List[TfvcChange]:
        """
        Get changes included in a shelveset.

        :param shelveset_id: Shelveset's unique id.
        :type shelveset_id: str | None
        :param top: Max number of changes to return.
        :param skip: Number of changes to skip.
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.TfvcChange]
        """
        params = QueryParameters()
        params.add_if_not_empty("shelvesetId", shelveset_id)
        params.add_if_not_none("$top", top)
        params.add_if_not_none("$skip", skip)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_SHELVESET_CHANGES,
                TFVC_API_VERSION,
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="shelvesets.get_changes",
            )
            body = vss._send_json(request)
        return [TfvcChange.from_api_response(c) for c in _unwrap_list(body)]

    def get(
        self,
        shelveset_id: Optional[str] = None,
        request_data: Optional[TfvcShelvesetRequestData] = None,
    ) -> TfvcShelveset:
        """
        Get a single deep shelveset.

        :param shelveset_id: Shelveset's unique id.
        :type shelveset_id: str | None
        :param request_data: Detail switches (``include_details``, ``include_work_items`` ...),
            flattened into the query string.
        :type request_data: ~AzureDevOps.Tfvc.models.request_data.TfvcShelvesetRequestData | None
        :rtype: ~AzureDevOps.Tfvc.models.tfvc.TfvcShelveset
        """
        params = QueryParameters()
        params.add_if_not_empty("shelvesetId", shelveset_id)
        params.add_model(request_data)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_SHELVESETS,
                TFVC_API_VERSION,
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="shelvesets.get",
            )
            body = vss._send_json(request)
        return TfvcShelveset.from_api_response(body or {})

    def list(
        self,
        request_data: Optional[TfvcShelvesetRequestData] = None,
        *,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> List[TfvcShelvesetRef]:
        """
        Return a collection of shallow shelveset references.

        :param request_data: Name/owner filters and detail switches, flattened into the query string.
        :type request_data: ~AzureDevOps.Tfvc.models.request_data.TfvcShelvesetRequestData | None
        :param top: Max number of shelvesets to return.
        :param skip: Number of shelvesets to skip.
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.TfvcShelvesetRef]
        """
        params = QueryParameters()
        params.add_model(request_data)
        params.add_if_not_none("$top", top)
        params.add_if_not_none("$skip", skip)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_SHELVESETS,
                TFVC_API_VERSION,
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="shelvesets.list",
            )
            body = vss._send_json(request)
        return [TfvcShelvesetRef.from_api_response(s) for s in _unwrap_list(body)]

    def get_work_items(self, shelveset_id: Optional[str] = None) -> List[AssociatedWorkItem]:
        """
        Get work items associated with a shelveset.

        :param shelveset_id: Shelveset's unique id.
        :type shelveset_id: str | None
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.AssociatedWorkItem]
        """
        params = QueryParameters()
        params.add_if_not_empty("shelvesetId", shelveset_id)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_SHELVESET_WORK_ITEMS,
                TFVC_API_VERSION,
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="shelvesets.get_work_items",
            )
            body = vss._send_json(request)
        return [AssociatedWorkItem.from_api_response(w) for w in _unwrap_list(body)]
