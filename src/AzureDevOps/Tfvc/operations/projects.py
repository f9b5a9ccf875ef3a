# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Version control project information namespace."""

from __future__ import annotations

import uuid
from typing import List, Optional, Union, TYPE_CHECKING

from ..common.constants import APPLICATION_JSON_TYPE, LOCATION_PROJECT_INFO, PROJECT_INFO_API_VERSION
from ..data._routing import QueryParameters, _project_label, _route_values
from ..data._vss import _unwrap_list
from ..models.tfvc import VersionControlProjectInfo

if TYPE_CHECKING:
    from ..client import TfvcClient


class ProjectInfoOperations:
    """
    Which version control systems a team project uses (preview API).

    Accessed via ``client.projects``.

    Example::

        for info in client.projects.list_infos():
            print(info.project_name, info.default_source_control_type)
    """

    def __init__(self, client: "TfvcClient") -> None:
        self._client = client

    def get_info(
        self,
        project_id: Optional[uuid.UUID] = None,
        project: Optional[Union[str, uuid.UUID]] = None,
    ) -> VersionControlProjectInfo:
        """
        Retrieve the version control information for a given team project.

        :param project_id: The id of the team project, sent as the ``projectId`` query parameter.
        :type project_id: uuid.UUID | None
        :param project: Team project name or GUID used in the route.
        :type project: str | uuid.UUID | None
        :rtype: ~AzureDevOps.Tfvc.models.tfvc.VersionControlProjectInfo
        """
        params = QueryParameters()
        params.add_if_not_none("projectId", project_id)

        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_PROJECT_INFO,
                PROJECT_INFO_API_VERSION,
                route_values=_route_values(project=project),
                query_parameters=params,
                accept=APPLICATION_JSON_TYPE,
                operation="projects.get_info",
                project=_project_label(project),
            )
            body = vss._send_json(request)
        return VersionControlProjectInfo.from_api_response(body or {})

    def list_infos(self, project: Optional[Union[str, uuid.UUID]] = None) -> List[VersionControlProjectInfo]:
        """
        Retrieve version control information for all team projects (or the given one).

        :param project: Team project name or GUID.
        :type project: str | uuid.UUID | None
        :rtype: list[~AzureDevOps.Tfvc.models.tfvc.VersionControlProjectInfo]
        """
        with self._client._scoped_vss() as vss:
            request = vss._create_request(
                "GET",
                LOCATION_PROJECT_INFO,
                PROJECT_INFO_API_VERSION,
                route_values=_route_values(project=project),
                accept=APPLICATION_JSON_TYPE,
                operation="projects.list_infos",
                project=_project_label(project),
            )
            body = vss._send_json(request)
        return [VersionControlProjectInfo.from_api_response(p) for p in _unwrap_list(body)]
