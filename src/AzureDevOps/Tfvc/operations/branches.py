# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Branch operations namespace."""

from __future__ import annotations

import uuid
from typing import List, Optional, Union, TYPE_CHECKING

from ..common.constants import APPLICATION_JSON_TYPE, LOCATION_BRANCHES, TFVC_API_VERSION
from ..data._routing import QueryParameters, _project_label, _route_values
from ..data._vss import _unwrap_list
from ..models.tfvc import TfvcBranch, TfvcBranchRef

if TYPE_CHECKING:
    from ..client import TfvcClient


class BranchOperations:
    """
    TFVC branch queries.

    Accessed via ``client.branches``. Every method accepts an optional
    ``project`` (team project name or GUID); when omitted the request is
    scoped to the whole collection.

    Example::

        main = client.branches.get("$/Fabrikam/Main", project="Fabrikam", include_children=True)
        for ref in client.branches.list_refs("$/Fabrikam"):
            print(ref.path)
    """

    def __init__(self, client: "TfvcClient") -> None:
        """
        Initialize BranchOperations.

        :param client: Parent TfvcClient instance.
        :type client: TfvcClient
        """
        self._client = client

    def get(
        self,
        path: str,
        project: Optional[Union[str, uuid.UUID]] = None,
        *,
        include_parent: Optional[bool] = None,
        include_children: Optional[bool] = None,
    ) -> TfvcBranch:
        """
        Get a single branch hierarchy at the given path with parents or children as specified.

        :param path: Full path to the branch, e.g. ``"$/Fabrikam/Main"``.
        :type path: str
        :param project: Team project name or GUID.
        :type project: str | uuid.UUID | None
        :param include_parent: Return the parent branch, if there is one.
        :type include_parent: bool | None
        :param include_children: Return child branches, if there are any.
        :type include_children: bool | None
        :return: The branch.
        :rtype: ~AzureDevOps.Tfvc.models.tfvc.TfvcBranch

        :raises ~AzureDevOps.Tfvc.core.errors.HttpError: If the server rejects the request.
        """
        params = QueryParameters()
        params.add_if_not_empty("path", path)
        params.add_if_not_none("includeParent", include_parent)
        params.add_if_not_none("includeChildren", include_children)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_BRANCHES,
                TFVC_API_VERSION,
                route_values=_route_values(project=project),
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="branches.get",
                project=_project_label(project),
            )
            body = vss._send_json(request)
        return TfvcBranch.from_api_response(body or {})

    def list(
        self,
        project: Optional[Union[str, uuid.UUID]] = None,
        *,
        include_parent: Optional[bool] = None,
        include_children: Optional[bool] = None,
        include_deleted: Optional[bool] = None,
        include_links: Optional[bool] = None,
    ) -> List[TfvcBranch]:
        """
        Get a collection of branch roots: first-level children, branches with no parents.

        :param project: Team project name or GUID.
        :type project: str | uuid.UUID | None
        :param include_parent: Return the parent branch, if there is one.
        :param include_children: Return the child branches for each root branch.
        :param include_deleted: Return deleted branches.
        :param include_links: Return links.
        :return: Root branches.
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.TfvcBranch]
        """
        params = QueryParameters()
        params.add_if_not_none("includeParent", include_parent)
        params.add_if_not_none("includeChildren", include_children)
        params.add_if_not_none("includeDeleted", include_deleted)
        params.add_if_not_none("includeLinks", include_links)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_BRANCHES,
                TFVC_API_VERSION,
                route_values=_route_values(project=project),
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="branches.list",
                project=_project_label(project),
            )
            body = vss._send_json(request)
        return [TfvcBranch.from_api_response(b) for b in _unwrap_list(body)]

    def list_refs(
        self,
        scope_path: str,
        project: Optional[Union[str, uuid.UUID]] = None,
        *,
        include_deleted: Optional[bool] = None,
        include_links: Optional[bool] = None,
    ) -> List[TfvcBranchRef]:
        """
        Get branch hierarchies below the specified ``scope_path``.

        :param scope_path: Full path to the branch, e.g. ``"$/Fabrikam"``.
        :type scope_path: str
        :param project: Team project name or GUID.
        :type project: str | uuid.UUID | None
        :param include_deleted: Return deleted branches.
        :param include_links: Return links.
        :return: Branch references.
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.TfvcBranchRef]
        """
        params = QueryParameters()
        params.add_if_not_empty("scopePath", scope_path)
        params.add_if_not_none("includeDeleted", include_deleted)
        params.add_if_not_none("includeLinks", include_links)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_BRANCHES,
                TFVC_API_VERSION,
                route_values=_route_values(project=project),
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="branches.list_refs",
                project=_project_label(project),
            )
            body = vss._send_json(request)
        return [TfvcBranchRef.from_api_response(b) for b in _unwrap_list(body)]
