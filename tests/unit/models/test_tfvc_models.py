# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Tests for TFVC response contracts."""

import pytest

from AzureDevOps.Tfvc.models.tfvc import (
    IdentityRef,
    TfvcBranch,
    TfvcBranchRef,
    TfvcChange,
    TfvcChangeset,
    TfvcChangesetRef,
    TfvcItem,
    TfvcLabel,
    TfvcShelveset,
    VersionControlProjectInfo,
)

OWNER = {"id": "u-1", "displayName": "Jamal Hartnett", "uniqueName": "fabrikamfiber4@hotmail.com"}


class TestDictAccess:
    """Dict-like access to the raw payload."""

    def test_getitem_and_get(self):
        item = TfvcItem.from_api_response({"path": "$/Fabrikam/a.txt", "encoding": 65001})
        assert item["encoding"] == 65001
        assert item.get("missing", "x") == "x"
        assert "path" in item
        assert set(item.keys()) == {"path", "encoding"}

    def test_getitem_missing_raises(self):
        item = TfvcItem.from_api_response({"path": "$/Fabrikam"})
        with pytest.raises(KeyError):
            item["nope"]

    def test_to_dict_is_copy(self):
        payload = {"path": "$/Fabrikam"}
        item = TfvcItem.from_api_response(payload)
        d = item.to_dict()
        d["path"] = "changed"
        assert item.path == "$/Fabrikam"
        assert item["path"] == "$/Fabrikam"

    def test_empty_payload_is_falsy(self):
        assert not TfvcItem.from_api_response({})


class TestTfvcItem:
    """Tests for TfvcItem."""

    def test_from_api_response(self):
        item = TfvcItem.from_api_response(
            {
                "path": "$/Fabrikam/Main/README.md",
                "version": 18,
                "changeDate": "2014-03-24T17:02:45.47Z",
                "size": 1024,
                "hashValue": "abc=",
                "isFolder": False,
                "url": "https://dev.azure.com/fabrikam/_apis/tfvc/items/$/Fabrikam/Main/README.md",
            }
        )
        assert item.path == "$/Fabrikam/Main/README.md"
        assert item.version == 18
        assert item.size == 1024
        assert item.is_folder is False
        assert item.is_branch is False
        assert item.change_date == "2014-03-24T17:02:45.47Z"

    def test_folder_flag(self):
        assert TfvcItem.from_api_response({"path": "$/Fabrikam", "isFolder": True}).is_folder is True


class TestTfvcBranch:
    """Tests for branch contracts."""

    def test_branch_ref(self):
        ref = TfvcBranchRef.from_api_response({"path": "$/Fabrikam/Main", "owner": OWNER, "isDeleted": True})
        assert ref.path == "$/Fabrikam/Main"
        assert isinstance(ref.owner, IdentityRef)
        assert ref.owner.display_name == "Jamal Hartnett"
        assert ref.is_deleted is True

    def test_branch_with_parent_and_children(self):
        branch = TfvcBranch.from_api_response(
            {
                "path": "$/Fabrikam/Dev",
                "parent": {"path": "$/Fabrikam/Main"},
                "children": [{"path": "$/Fabrikam/Dev-Feature", "children": []}],
                "relatedBranches": [{"path": "$/Fabrikam/Release"}],
            }
        )
        assert branch.parent == "$/Fabrikam/Main"
        assert len(branch.children) == 1
        assert isinstance(branch.children[0], TfvcBranch)
        assert branch.children[0].path == "$/Fabrikam/Dev-Feature"
        assert branch.children[0].children == []
        assert branch.related_branches == ["$/Fabrikam/Release"]

    def test_branch_without_optional_parts(self):
        branch = TfvcBranch.from_api_response({"path": "$/Fabrikam/Main"})
        assert branch.parent is None
        assert branch.children is None
        assert branch.related_branches is None
        assert branch.owner is None


class TestTfvcChangeset:
    """Tests for changeset contracts."""

    def test_changeset_ref(self):
        ref = TfvcChangesetRef.from_api_response(
            {"changesetId": 16, "author": OWNER, "checkedInBy": OWNER, "comment": "Fix", "commentTruncated": True}
        )
        assert ref.changeset_id == 16
        assert ref.author.unique_name == "fabrikamfiber4@hotmail.com"
        assert ref.comment_truncated is True

    def test_changeset_with_changes_and_work_items(self):
        changeset = TfvcChangeset.from_api_response(
            {
                "changesetId": 16,
                "changes": [{"changeType": "edit", "item": {"path": "$/Fabrikam/a.cs", "version": 16}}],
                "hasMoreChanges": True,
                "workItems": [{"id": 42, "title": "Bug", "workItemType": "Bug", "webUrl": "https://x"}],
            }
        )
        assert changeset.changeset_id == 16
        assert changeset.has_more_changes is True
        assert isinstance(changeset.changes[0], TfvcChange)
        assert changeset.changes[0].change_type == "edit"
        assert changeset.changes[0].item.version == 16
        assert changeset.work_items[0].id == 42
        assert changeset.work_items[0].work_item_type == "Bug"
        assert changeset.work_items[0].web_url == "https://x"

    def test_change_without_item(self):
        change = TfvcChange.from_api_response({"changeType": "delete"})
        assert change.item is None


class TestTfvcLabelAndShelveset:
    """Tests for label and shelveset contracts."""

    def test_label_items(self):
        label = TfvcLabel.from_api_response(
            {"id": 3, "name": "Release 1", "labelScope": "$/Fabrikam", "items": [{"path": "$/Fabrikam/a.cs"}]}
        )
        assert label.id == 3
        assert label.label_scope == "$/Fabrikam"
        assert label.items[0].path == "$/Fabrikam/a.cs"

    def test_shelveset(self):
        shelveset = TfvcShelveset.from_api_response(
            {
                "id": "My Shelveset;u-1",
                "name": "My Shelveset",
                "owner": OWNER,
                "notes": [{"name": "Code Reviewer", "value": "Norman"}],
                "changes": [{"changeType": "add", "item": {"path": "$/Fabrikam/b.cs"}}],
            }
        )
        assert shelveset.id == "My Shelveset;u-1"
        assert shelveset.owner.id == "u-1"
        assert shelveset.notes[0]["value"] == "Norman"
        assert shelveset.changes[0].item.path == "$/Fabrikam/b.cs"
        assert shelveset.work_items is None


class TestProjectInfo:
    """Tests for VersionControlProjectInfo."""

    def test_from_api_response(self):
        info = VersionControlProjectInfo.from_api_response(
            {
                "project": {"id": "11111111-2222-3333-4444-555555555555", "name": "Fabrikam"},
                "defaultSourceControlType": "tfvc",
                "supportsGit": False,
                "supportsTFVC": True,
            }
        )
        assert info.project_id == "11111111-2222-3333-4444-555555555555"
        assert info.project_name == "Fabrikam"
        assert info.default_source_control_type == "tfvc"
        assert info.supports_tfvc is True
        assert info.supports_git is False

    def test_missing_project(self):
        info = VersionControlProjectInfo.from_api_response({"supportsGit": True})
        assert info.project_id is None
        assert info.supports_git is True
