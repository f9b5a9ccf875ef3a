# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Label operations namespace."""

from __future__ import annotations

import uuid
from typing import List, Optional, Union, TYPE_CHECKING

from ..common.constants import APPLICATION_JSON_TYPE, LOCATION_LABEL_ITEMS, LOCATION_LABELS, TFVC_API_VERSION
from ..data._routing import QueryParameters, _project_label, _route_values
from ..data._vss import _unwrap_list
from ..models.request_data import TfvcLabelRequestData
from ..models.tfvc import TfvcItem, TfvcLabel, TfvcLabelRef

if TYPE_CHECKING:
    from ..client import TfvcClient


class LabelOperations:
    """
    TFVC label queries.

    Accessed via ``client.labels``.

    Example::

        refs = client.labels.list(TfvcLabelRequestData(name="Release*"), project="Fabrikam", top=20)
        label = client.labels.get(str(refs[0].id), TfvcLabelRequestData(include_links=True))
    """

    def __init__(self, client: "TfvcClient") -> None:
        self._client = client

    def get_items(
        self,
        label_id: Optional[str] = None,
        *,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> List[TfvcItem]:
        """
        Get items under a label.

        :param label_id: Unique identifier of label.
        :type label_id: str | None
        :param top: Max number of items to return.
        :type top: int | None
        :param skip: Number of items to skip.
        :type skip: int | None
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.TfvcItem]
        """
        params = QueryParameters()
        params.add_if_not_none("$top", top)
        params.add_if_not_none("$skip", skip)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_LABEL_ITEMS,
                TFVC_API_VERSION,
                route_values=_route_values(labelId=label_id),
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="labels.get_items",
            )
            body = vss._send_json(request)
        return [TfvcItem.from_api_response(i) for i in _unwrap_list(body)]

    def get(
        self,
        label_id: str,
        request_data: Optional[TfvcLabelRequestData] = None,
        project: Optional[Union[str, uuid.UUID]] = None,
    ) -> TfvcLabel:
        """
        Get a single deep label.

        :param label_id: Unique identifier of label.
        :type label_id: str
        :param request_data: Label filters and switches, flattened into the query string.
        :type request_data: ~AzureDevOps.Tfvc.models.request_data.TfvcLabelRequestData | None
        :param project: Team project name or GUID.
        :type project: str | uuid.UUID | None
        :return: The label including its items.
        :rtype: ~AzureDevOps.Tfvc.models.tfvc.TfvcLabel
        """
        params = QueryParameters()
        params.add_model(request_data)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_LABELS,
                TFVC_API_VERSION,
                route_values=_route_values(project=project, labelId=label_id),
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="labels.get",
                project=_project_label(project),
            )
            body = vss._send_json(request)
        return TfvcLabel.from_api_response(body or {})

    def list(
        self,
        request_data: Optional[TfvcLabelRequestData] = None,
        project: Optional[Union[str, uuid.UUID]] = None,
        *,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> List[TfvcLabelRef]:
        """
        Get a collection of shallow label references.

        :param request_data: Label filters (name, owner, scope ...), flattened into the query string.
        :type request_data: ~AzureDevOps.Tfvc.models.request_data.TfvcLabelRequestData | None
        :param project: Team project name or GUID.
        :type project: str | uuid.UUID | None
        :param top: Max number of labels to return.
        :param skip: Number of labels to skip.
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.TfvcLabelRef]
        """
        params = QueryParameters()
        params.add_model(request_data)
        params.add_if_not_none("$top", top)
        params.add_if_not_none("$skip", skip)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_LABELS,
                TFVC_API_VERSION,
                route_values=_route_values(project=project),
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="labels.list",
                project=_project_label(project),
            )
            body = vss._send_json(request)
        return [TfvcLabelRef.from_api_response(label) for label in _unwrap_list(body)]
