# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for BranchOperations namespace class."""

import unittest
import uuid
from unittest.mock import MagicMock

from azure.core.credentials import TokenCredential

from AzureDevOps.Tfvc.client import TfvcClient
from AzureDevOps.Tfvc.common.constants import APPLICATION_JSON_TYPE, LOCATION_BRANCHES, TFVC_API_VERSION
from AzureDevOps.Tfvc.models.tfvc import TfvcBranch, TfvcBranchRef


class TestBranchOperations(unittest.TestCase):
    """Test cases for the BranchOperations namespace class."""

    def setUp(self):
        self.mock_credential = MagicMock(spec=TokenCredential)
        self.client = TfvcClient("https://dev.azure.com/fabrikam", self.mock_credential)
        self.client._vss = MagicMock()

    def test_branches_namespace_exists(self):
        self.assertIsNotNone(self.client.branches)
        self.assertEqual(self.client.branches._client, self.client)

    def test_get_builds_request(self):
        """branches.get() routes by project and sends path and hierarchy switches."""
        self.client._vss._send_json.return_value = {
            "path": "$/Fabrikam/Main",
            "children": [{"path": "$/Fabrikam/Dev"}],
        }

        result = self.client.branches.get("$/Fabrikam/Main", "Fabrikam", include_children=True)

        args, kwargs = self.client._vss._create_request.call_args
        self.assertEqual(args, ("GET", LOCATION_BRANCHES, TFVC_API_VERSION))
        self.assertEqual(kwargs["route_values"], {"project": "Fabrikam"})
        self.assertEqual(kwargs["query_parameters"], {"path": "$/Fabrikam/Main", "includeChildren": "true"})
        self.assertEqual(kwargs["accept"], APPLICATION_JSON_TYPE)
        self.assertEqual(kwargs["operation"], "branches.get")
        self.assertEqual(kwargs["project"], "Fabrikam")
        self.client._vss._send_json.assert_called_once_with(self.client._vss._create_request.return_value)

        self.assertIsInstance(result, TfvcBranch)
        self.assertEqual(result.path, "$/Fabrikam/Main")
        self.assertEqual(result.children[0].path, "$/Fabrikam/Dev")

    def test_get_without_project(self):
        self.client._vss._send_json.return_value = {"path": "$/Fabrikam/Main"}

        self.client.branches.get("$/Fabrikam/Main")

        kwargs = self.client._vss._create_request.call_args[1]
        self.assertEqual(kwargs["route_values"], {})
        self.assertIsNone(kwargs["project"])

    def test_get_with_project_guid(self):
        project_id = uuid.UUID("11111111-2222-3333-4444-555555555555")
        self.client._vss._send_json.return_value = {"path": "$/Fabrikam/Main"}

        self.client.branches.get("$/Fabrikam/Main", project_id)

        kwargs = self.client._vss._create_request.call_args[1]
        self.assertEqual(kwargs["route_values"], {"project": "11111111-2222-3333-4444-555555555555"})

    def test_list_returns_roots(self):
        self.client._vss._send_json.return_value = {
            "count": 2,
            "value": [{"path": "$/Fabrikam/Main"}, {"path": "$/Fabrikam/Release"}],
        }

        result = self.client.branches.list("Fabrikam", include_deleted=False, include_links=True)

        kwargs = self.client._vss._create_request.call_args[1]
        self.assertEqual(kwargs["query_parameters"], {"includeDeleted": "false", "includeLinks": "true"})
        self.assertEqual(kwargs["operation"], "branches.list")
        self.assertEqual([b.path for b in result], ["$/Fabrikam/Main", "$/Fabrikam/Release"])
        self.assertTrue(all(isinstance(b, TfvcBranch) for b in result))

    def test_list_empty_response(self):
        self.client._vss._send_json.return_value = None
        self.assertEqual(self.client.branches.list(), [])

    def test_list_refs(self):
        self.client._vss._send_json.return_value = {"count": 1, "value": [{"path": "$/Fabrikam/Main"}]}

        result = self.client.branches.list_refs("$/Fabrikam", include_deleted=True)

        kwargs = self.client._vss._create_request.call_args[1]
        self.assertEqual(kwargs["query_parameters"], {"scopePath": "$/Fabrikam", "includeDeleted": "true"})
        self.assertEqual(len(result), 1)
        self.assertIsInstance(result[0], TfvcBranchRef)

    def test_call_scope_entered_per_operation(self):
        self.client._vss._send_json.return_value = {"value": []}

        self.client.branches.list()

        self.client._vss._call_scope.assert_called_once()


if __name__ == "__main__":
    unittest.main()
