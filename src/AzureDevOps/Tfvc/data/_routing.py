# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Route template expansion and query string helpers."""

from __future__ import annotations

import datetime as _dt
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..common.constants import AREA_PARAMETER_NAME, RESOURCE_PARAMETER_NAME

_ROUTE_TEMPLATE_SEPARATOR = "/"


def _format_query_value(value: Any) -> str:
    """Render a value the way the server expects it in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (_dt.datetime, _dt.date)):
        return value.isoformat()
    return str(value)


class QueryParameters(dict):
    """
    Ordered ``name -> str`` mapping of query string parameters.

    Values are formatted on insertion; absent values are never added, so the
    mapping can be handed to :mod:`requests` as ``params`` unchanged.

    Example::

        params = QueryParameters()
        params.add_if_not_empty("path", path)
        params.add_if_not_none("includeParent", include_parent)
        params.add_model(version_descriptor)
    """

    def add_if_not_none(self, name: str, value: Any) -> "QueryParameters":
        """Add ``name`` unless ``value`` is ``None``. Used for booleans, numbers, enums and GUIDs."""
        if value is not None:
            self[name] = _format_query_value(value)
        return self

    def add_if_not_empty(self, name: str, value: Optional[str]) -> "QueryParameters":
        """Add ``name`` unless ``value`` is ``None`` or an empty string."""
        if value is not None and value != "":
            self[name] = _format_query_value(value)
        return self

    def add_model(self, model: Any) -> "QueryParameters":
        """
        Flatten a request model into top-level query parameters.

        Each non-empty camelCase property of the model becomes one parameter
        (``versionType=changeset``, ``author=...``). Nested values are not expanded.

        :param model: A request model exposing ``to_dict()``, a plain mapping, or ``None``.
        """
        if model is None:
            return self
        properties = model.to_dict() if hasattr(model, "to_dict") else dict(model)
        for name, value in properties.items():
            if value is None or isinstance(value, (dict, list)):
                continue
            formatted = _format_query_value(value)
            if formatted:
                self[name] = formatted
        return self


def _route_values(**values: Any) -> Dict[str, Any]:
    """Collect route values for an operation, leaving out the ones not supplied."""
    return {name: str(value) for name, value in values.items() if value is not None}


def _project_label(project: Any) -> Optional[str]:
    return None if project is None else str(project)


def _to_route_dictionary(
    route_values: Optional[Mapping[str, Any]],
    area: str,
    resource_name: str,
) -> Dict[str, str]:
    """Stringify route values, dropping ``None`` and defaulting ``area``/``resource``."""
    dictionary: Dict[str, str] = {}
    for name, value in (route_values or {}).items():
        if value is not None:
            dictionary[name] = str(value)
    dictionary.setdefault(AREA_PARAMETER_NAME, area)
    dictionary.setdefault(RESOURCE_PARAMETER_NAME, resource_name)
    return dictionary


def _replace_route_values(template: str, route_values: Mapping[str, str]) -> str:
    """
    Expand a location route template.

    ``{name}`` and ``{*name}`` segments are replaced by the matching route value
    and removed entirely when the value is missing or empty; literal segments
    are kept.

    Example::

        >>> _replace_route_values("{project}/_apis/{area}/{resource}/{*path}",
        ...                       {"area": "tfvc", "resource": "items"})
        '_apis/tfvc/items'
    """
    actual = []
    for segment in template.split(_ROUTE_TEMPLATE_SEPARATOR):
        if segment.startswith("{"):
            name = segment[2:-1] if segment.startswith("{*") else segment[1:-1]
            value = route_values.get(name)
            if value:
                actual.append(value)
        else:
            actual.append(segment)
    return _ROUTE_TEMPLATE_SEPARATOR.join(actual)


__all__ = ["QueryParameters"]
