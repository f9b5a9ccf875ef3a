# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request-side models for the TFVC Web API.

These dataclasses are sent either as JSON request bodies (batch operations) or
flattened into query string parameters (search criteria and version
descriptors). Field names are converted to camelCase on the wire and fields
left as ``None`` are omitted.
"""

from __future__ import annotations

import datetime as _dt
import uuid
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, List, Optional


class VersionControlRecursionType(str, Enum):
    """How deep an item listing descends below the requested path."""

    NONE = "none"
    ONE_LEVEL = "oneLevel"
    ONE_LEVEL_PLUS_NESTED_EMPTY_FOLDERS = "oneLevelPlusNestedEmptyFolders"
    FULL = "full"


class TfvcVersionOption(str, Enum):
    NONE = "none"
    PREVIOUS = "previous"
    USE_RENAME = "useRename"


class TfvcVersionType(str, Enum):
    """Kind of version string held by a :class:`TfvcVersionDescriptor`."""

    NONE = "none"
    CHANGESET = "changeset"
    SHELVESET = "shelveset"
    CHANGE = "change"
    DATE = "date"
    LATEST = "latest"
    TIP = "tip"
    MERGE_SOURCE = "mergeSource"


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (_dt.datetime, _dt.date)):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, _RequestModel):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    return value


class _RequestModel:
    """Mixin giving dataclass request models their wire representation."""

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the JSON payload shape expected by the server.

        :return: camelCase keys, ``None`` fields omitted.
        :rtype: dict[str, Any]
        """
        payload: Dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is None:
                continue
            payload[_to_camel(f.name)] = _serialize_value(value)
        return payload


@dataclass
class TfvcVersionDescriptor(_RequestModel):
    """
    Identifies a version of a TFVC item.

    :param version: Version string whose meaning depends on ``version_type``
        (a changeset number, a shelveset name, a date, ...).
    :type version: str | None
    :param version_option: Optional modifier applied to the version.
    :type version_option: TfvcVersionOption | None
    :param version_type: Kind of version given in ``version``.
    :type version_type: TfvcVersionType | None

    Example::

        descriptor = TfvcVersionDescriptor(version="1234", version_type=TfvcVersionType.CHANGESET)
        item = client.items.get("$/Fabrikam/README.md", version_descriptor=descriptor)
    """

    version: Optional[str] = None
    version_option: Optional[TfvcVersionOption] = None
    version_type: Optional[TfvcVersionType] = None


@dataclass
class TfvcChangesetSearchCriteria(_RequestModel):
    """
    Filters applied when listing changesets.

    ``from_date``/``to_date`` accept either a :class:`datetime.datetime` or a
    date string the server understands.
    """

    author: Optional[str] = None
    follow_renames: Optional[bool] = None
    from_date: Optional[Any] = None
    from_id: Optional[int] = None
    include_links: Optional[bool] = None
    item_path: Optional[str] = None
    to_date: Optional[Any] = None
    to_id: Optional[int] = None


@dataclass
class TfvcChangesetsRequestData(_RequestModel):
    """Body of the changesets batch request."""

    changeset_ids: Optional[List[int]] = None
    comment_length: Optional[int] = None
    include_links: Optional[bool] = None


@dataclass
class TfvcItemDescriptor(_RequestModel):
    """One entry of an items batch request."""

    path: Optional[str] = None
    recursion_level: Optional[VersionControlRecursionType] = None
    version: Optional[str] = None
    version_option: Optional[TfvcVersionOption] = None
    version_type: Optional[TfvcVersionType] = None


@dataclass
class TfvcItemRequestData(_RequestModel):
    """
    Body of the items batch request.

    :param item_descriptors: Paths (with optional version and recursion) to resolve.
    :type item_descriptors: list[TfvcItemDescriptor] | None
    :param include_content_metadata: Whether to return content metadata such as encoding.
    :type include_content_metadata: bool | None
    :param include_links: Whether to include ``_links`` in each item.
    :type include_links: bool | None
    """

    item_descriptors: Optional[List[TfvcItemDescriptor]] = None
    include_content_metadata: Optional[bool] = None
    include_links: Optional[bool] = None


@dataclass
class TfvcLabelRequestData(_RequestModel):
    include_links: Optional[bool] = None
    item_label_filter: Optional[str] = None
    label_scope: Optional[str] = None
    max_item_count: Optional[int] = None
    name: Optional[str] = None
    owner: Optional[str] = None


@dataclass
class TfvcShelvesetRequestData(_RequestModel):
    """Shelveset filters and detail switches for shelveset queries."""

    include_details: Optional[bool] = None
    include_links: Optional[bool] = None
    include_work_items: Optional[bool] = None
    max_change_count: Optional[int] = None
    max_comment_length: Optional[int] = None
    name: Optional[str] = None
    owner: Optional[str] = None


__all__ = [
    "VersionControlRecursionType",
    "TfvcVersionOption",
    "TfvcVersionType",
    "TfvcVersionDescriptor",
    "TfvcChangesetSearchCriteria",
    "TfvcChangesetsRequestData",
    "TfvcItemDescriptor",
    "TfvcItemRequestData",
    "TfvcLabelRequestData",
    "TfvcShelvesetRequestData",
]
