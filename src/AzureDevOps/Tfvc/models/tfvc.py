# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
TFVC response data contracts.

Each contract exposes the commonly used fields as attributes and keeps the full
JSON payload in ``data`` so that fields not modelled here remain reachable with
dict-like access::

    branch = client.branches.get("$/Fabrikam/Main")
    print(branch.path)            # structured access
    print(branch["description"])  # raw payload access
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional


class _ResponseModel:
    """Dict-like access to the raw payload of a response contract."""

    data: Dict[str, Any]

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def keys(self):
        return self.data.keys()

    def items(self):
        return self.data.items()

    def to_dict(self) -> Dict[str, Any]:
        """
        Return a copy of the raw JSON payload.

        :rtype: dict[str, Any]
        """
        return dict(self.data)


def _list_of(cls, values: Optional[List[Any]]) -> Optional[List[Any]]:
    if values is None:
        return None
    return [cls.from_api_response(v) for v in values if isinstance(v, dict)]


def _one_of(cls, value: Any) -> Any:
    return cls.from_api_response(value) if isinstance(value, dict) else None


@dataclass
class IdentityRef(_ResponseModel):
    """A user or group reference (author, owner, checked-in-by ...)."""

    id: Optional[str] = None
    display_name: Optional[str] = None
    unique_name: Optional[str] = None
    url: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "IdentityRef":
        return cls(
            id=response_data.get("id"),
            display_name=response_data.get("displayName"),
            unique_name=response_data.get("uniqueName"),
            url=response_data.get("url"),
            data=dict(response_data),
        )


@dataclass
class TfvcItem(_ResponseModel):
    """
    A file or folder in TFVC.

    :param path: Server path, e.g. ``"$/Fabrikam/Main/README.md"``.
    :type path: str | None
    :param version: Changeset in which the item was last changed.
    :type version: int | None
    :param is_folder: Whether the item is a folder.
    :type is_folder: bool
    :param is_branch: Whether the item is a branch root.
    :type is_branch: bool
    :param size: Content length in bytes (files only).
    :type size: int | None
    """

    path: Optional[str] = None
    version: Optional[int] = None
    change_date: Optional[str] = None
    is_folder: bool = False
    is_branch: bool = False
    is_pending_change: bool = False
    is_sym_link: bool = False
    deletion_id: Optional[int] = None
    hash_value: Optional[str] = None
    size: Optional[int] = None
    url: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "TfvcItem":
        """
        Create a TfvcItem from an API response.

        :param response_data: Raw API response dictionary.
        :type response_data: dict[str, Any]
        :return: TfvcItem instance.
        :rtype: TfvcItem
        """
        return cls(
            path=response_data.get("path"),
            version=response_data.get("version"),
            change_date=response_data.get("changeDate"),
            is_folder=bool(response_data.get("isFolder", False)),
            is_branch=bool(response_data.get("isBranch", False)),
            is_pending_change=bool(response_data.get("isPendingChange", False)),
            is_sym_link=bool(response_data.get("isSymLink", False)),
            deletion_id=response_data.get("deletionId"),
            hash_value=response_data.get("hashValue"),
            size=response_data.get("size"),
            url=response_data.get("url"),
            data=dict(response_data),
        )


@dataclass
class TfvcChange(_ResponseModel):
    """A single pending or committed change to an item."""

    change_type: Optional[str] = None
    item: Optional[TfvcItem] = None
    pending_version: Optional[int] = None
    data: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "TfvcChange":
        return cls(
            change_type=response_data.get("changeType"),
            item=_one_of(TfvcItem, response_data.get("item")),
            pending_version=response_data.get("pendingVersion"),
            data=dict(response_data),
        )


@dataclass
class AssociatedWorkItem(_ResponseModel):
    """A work item linked to a changeset or shelveset."""

    id: Optional[int] = None
    title: Optional[str] = None
    state: Optional[str] = None
    work_item_type: Optional[str] = None
    assigned_to: Optional[str] = None
    url: Optional[str] = None
    web_url: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "AssociatedWorkItem":
        return cls(
            id=response_data.get("id"),
            title=response_data.get("title"),
            state=response_data.get("state"),
            work_item_type=response_data.get("workItemType"),
            assigned_to=response_data.get("assignedTo"),
            url=response_data.get("url"),
            web_url=response_data.get("webUrl"),
            data=dict(response_data),
        )


@dataclass
class TfvcBranchRef(_ResponseModel):
    """
    Lightweight branch reference returned by branch ref listings.

    :param path: Branch root path.
    :type path: str | None
    :param is_deleted: Whether the branch has been deleted.
    :type is_deleted: bool
    """

    path: Optional[str] = None
    description: Optional[str] = None
    created_date: Optional[str] = None
    owner: Optional[IdentityRef] = None
    is_deleted: bool = False
    url: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def _ref_fields(cls, response_data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "path": response_data.get("path"),
            "description": response_data.get("description"),
            "created_date": response_data.get("createdDate"),
            "owner": _one_of(IdentityRef, response_data.get("owner")),
            "is_deleted": bool(response_data.get("isDeleted", False)),
            "url": response_data.get("url"),
            "data": dict(response_data),
        }

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "TfvcBranchRef":
        return cls(**cls._ref_fields(response_data))


@dataclass
class TfvcBranch(TfvcBranchRef):
    """
    A branch with its parent and (when requested) child branches.

    Example::

        branch = client.branches.get("$/Fabrikam/Main", include_children=True)
        for child in branch.children or []:
            print(child.path)
    """

    parent: Optional[str] = None
    children: Optional[List["TfvcBranch"]] = None
    mappings: Optional[List[Dict[str, Any]]] = None
    related_branches: Optional[List[str]] = None

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "TfvcBranch":
        """
        Create a TfvcBranch from an API response.

        ``parent`` and ``related_branches`` are reduced to their paths.

        :param response_data: Raw API response dictionary.
        :type response_data: dict[str, Any]
        :return: TfvcBranch instance.
        :rtype: TfvcBranch
        """
        parent = response_data.get("parent")
        related = response_data.get("relatedBranches")
        return cls(
            parent=parent.get("path") if isinstance(parent, dict) else None,
            children=_list_of(TfvcBranch, response_data.get("children")),
            mappings=response_data.get("mappings"),
            related_branches=[r.get("path") for r in related if isinstance(r, dict)] if related is not None else None,
            **cls._ref_fields(response_data),
        )


@dataclass
class TfvcChangesetRef(_ResponseModel):
    """Changeset summary as returned by changeset listings."""

    changeset_id: Optional[int] = None
    author: Optional[IdentityRef] = None
    checked_in_by: Optional[IdentityRef] = None
    comment: Optional[str] = None
    comment_truncated: bool = False
    created_date: Optional[str] = None
    url: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def _ref_fields(cls, response_data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "changeset_id": response_data.get("changesetId"),
            "author": _one_of(IdentityRef, response_data.get("author")),
            "checked_in_by": _one_of(IdentityRef, response_data.get("checkedInBy")),
            "comment": response_data.get("comment"),
            "comment_truncated": bool(response_data.get("commentTruncated", False)),
            "created_date": response_data.get("createdDate"),
            "url": response_data.get("url"),
            "data": dict(response_data),
        }

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "TfvcChangesetRef":
        return cls(**cls._ref_fields(response_data))


@dataclass
class TfvcChangeset(TfvcChangesetRef):
    """
    Full changeset including (when requested) its changes and work items.

    :param changes: Changes made by the changeset, limited by ``max_change_count``.
    :type changes: list[TfvcChange] | None
    :param has_more_changes: Whether more changes exist than were returned.
    :type has_more_changes: bool
    :param work_items: Associated work items, when ``include_work_items`` was set.
    :type work_items: list[AssociatedWorkItem] | None
    """

    changes: Optional[List[TfvcChange]] = None
    has_more_changes: bool = False
    work_items: Optional[List[AssociatedWorkItem]] = None
    checkin_notes: Optional[List[Dict[str, Any]]] = None
    policy_override: Optional[Dict[str, Any]] = None
    team_project_ids: Optional[List[str]] = None

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "TfvcChangeset":
        return cls(
            changes=_list_of(TfvcChange, response_data.get("changes")),
            has_more_changes=bool(response_data.get("hasMoreChanges", False)),
            work_items=_list_of(AssociatedWorkItem, response_data.get("workItems")),
            checkin_notes=response_data.get("checkinNotes"),
            policy_override=response_data.get("policyOverride"),
            team_project_ids=response_data.get("teamProjectIds"),
            **cls._ref_fields(response_data),
        )


@dataclass
class TfvcLabelRef(_ResponseModel):
    """Label summary as returned by label listings."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    label_scope: Optional[str] = None
    modified_date: Optional[str] = None
    owner: Optional[IdentityRef] = None
    url: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def _ref_fields(cls, response_data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": response_data.get("id"),
            "name": response_data.get("name"),
            "description": response_data.get("description"),
            "label_scope": response_data.get("labelScope"),
            "modified_date": response_data.get("modifiedDate"),
            "owner": _one_of(IdentityRef, response_data.get("owner")),
            "url": response_data.get("url"),
            "data": dict(response_data),
        }

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "TfvcLabelRef":
        return cls(**cls._ref_fields(response_data))


@dataclass
class TfvcLabel(TfvcLabelRef):
    """A label together with the items it covers."""

    items: Optional[List[TfvcItem]] = None

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "TfvcLabel":
        return cls(items=_list_of(TfvcItem, response_data.get("items")), **cls._ref_fields(response_data))


@dataclass
class TfvcShelvesetRef(_ResponseModel):
    """Shelveset summary as returned by shelveset listings."""

    id: Optional[str] = None
    name: Optional[str] = None
    owner: Optional[IdentityRef] = None
    comment: Optional[str] = None
    comment_truncated: bool = False
    created_date: Optional[str] = None
    url: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def _ref_fields(cls, response_data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": response_data.get("id"),
            "name": response_data.get("name"),
            "owner": _one_of(IdentityRef, response_data.get("owner")),
            "comment": response_data.get("comment"),
            "comment_truncated": bool(response_data.get("commentTruncated", False)),
            "created_date": response_data.get("createdDate"),
            "url": response_data.get("url"),
            "data": dict(response_data),
        }

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "TfvcShelvesetRef":
        return cls(**cls._ref_fields(response_data))


@dataclass
class TfvcShelveset(TfvcShelvesetRef):
    """
    A shelveset with its changes, notes and work items.

    Shelveset ids have the form ``"name;owner"``; use the ``id`` attribute as
    ``shelveset_id`` in follow-up calls.
    """

    changes: Optional[List[TfvcChange]] = None
    notes: Optional[List[Dict[str, Any]]] = None
    policy_override: Optional[Dict[str, Any]] = None
    work_items: Optional[List[AssociatedWorkItem]] = None

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "TfvcShelveset":
        return cls(
            changes=_list_of(TfvcChange, response_data.get("changes")),
            notes=response_data.get("notes"),
            policy_override=response_data.get("policyOverride"),
            work_items=_list_of(AssociatedWorkItem, response_data.get("workItems")),
            **cls._ref_fields(response_data),
        )


@dataclass
class VersionControlProjectInfo(_ResponseModel):
    """
    Which version control systems a team project supports.

    :param project_id: Team project GUID.
    :type project_id: str | None
    :param project_name: Team project name.
    :type project_name: str | None
    :param default_source_control_type: ``"tfvc"`` or ``"git"``.
    :type default_source_control_type: str | None
    """

    project_id: Optional[str] = None
    project_name: Optional[str] = None
    default_source_control_type: Optional[str] = None
    supports_git: bool = False
    supports_tfvc: bool = False
    data: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "VersionControlProjectInfo":
        project = response_data.get("project") or {}
        return cls(
            project_id=project.get("id"),
            project_name=project.get("name"),
            default_source_control_type=response_data.get("defaultSourceControlType"),
            supports_git=bool(response_data.get("supportsGit", False)),
            supports_tfvc=bool(response_data.get("supportsTFVC", False)),
            data=dict(response_data),
        )


__all__ = [
    "IdentityRef",
    "TfvcItem",
    "TfvcChange",
    "AssociatedWorkItem",
    "TfvcBranchRef",
    "TfvcBranch",
    "TfvcChangesetRef",
    "TfvcChangeset",
    "TfvcLabelRef",
    "TfvcLabel",
    "TfvcShelvesetRef",
    "TfvcShelveset",
    "VersionControlProjectInfo",
]
