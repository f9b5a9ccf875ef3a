# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for ProjectInfoOperations namespace class."""

import unittest
import uuid
from unittest.mock import MagicMock

from azure.core.credentials import TokenCredential

from AzureDevOps.Tfvc.client import TfvcClient
from AzureDevOps.Tfvc.common.constants import LOCATION_PROJECT_INFO, PROJECT_INFO_API_VERSION
from AzureDevOps.Tfvc.models.tfvc import VersionControlProjectInfo


class TestProjectInfoOperations(unittest.TestCase):
    """Test cases for the ProjectInfoOperations namespace class."""

    def setUp(self):
        self.mock_credential = MagicMock(spec=TokenCredential)
        self.client = TfvcClient("https://dev.azure.com/fabrikam", self.mock_credential)
        self.client._vss = MagicMock()

    def test_get_info_uses_preview_version(self):
        project_id = uuid.UUID("11111111-2222-3333-4444-555555555555")
        self.client._vss._send_json.return_value = {
            "project": {"id": str(project_id), "name": "Fabrikam"},
            "defaultSourceControlType": "tfvc",
            "supportsTFVC": True,
        }

        result = self.client.projects.get_info(project_id)

        args, kwargs = self.client._vss._create_request.call_args
        self.assertEqual(args, ("GET", LOCATION_PROJECT_INFO, PROJECT_INFO_API_VERSION))
        self.assertEqual(PROJECT_INFO_API_VERSION, "2.0-preview.1")
        self.assertEqual(kwargs["query_parameters"], {"projectId": str(project_id)})
        self.assertEqual(kwargs["route_values"], {})
        self.assertIsInstance(result, VersionControlProjectInfo)
        self.assertTrue(result.supports_tfvc)
        self.assertEqual(result.project_name, "Fabrikam")

    def test_get_info_by_route_project(self):
        self.client._vss._send_json.return_value = {"project": {"name": "Fabrikam"}}

        self.client.projects.get_info(project="Fabrikam")

        kwargs = self.client._vss._create_request.call_args[1]
        self.assertEqual(kwargs["route_values"], {"project": "Fabrikam"})
        self.assertEqual(kwargs["query_parameters"], {})

    def test_list_infos(self):
        self.client._vss._send_json.return_value = {
            "count": 2,
            "value": [
                {"project": {"name": "Fabrikam"}, "supportsTFVC": True},
                {"project": {"name": "Contoso"}, "supportsGit": True},
            ],
        }

        result = self.client.projects.list_infos()

        kwargs = self.client._vss._create_request.call_args[1]
        self.assertEqual(kwargs["operation"], "projects.list_infos")
        self.assertEqual([p.project_name for p in result], ["Fabrikam", "Contoso"])
        self.assertTrue(result[1].supports_git)


if __name__ == "__main__":
    unittest.main()
