# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
API version and resource location models.

Azure DevOps publishes every REST resource as an :class:`ApiResourceLocation`
under ``{collection}/_apis``. Each request names the location by its id and asks
for an :class:`ApiResourceVersion`; the client negotiates the version it actually
sends against the range the server advertises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from ..core._error_codes import VALIDATION_INVALID_API_VERSION
from ..core.errors import ValidationError

_VERSION_RE = re.compile(r"^\s*(?P<api>\d+(?:\.\d+)?)(?:-preview(?:\.(?P<resource>\d+))?)?\s*$", re.IGNORECASE)


def _version_key(value: Union[str, float, int, None]) -> Tuple[int, ...]:
    """Turn ``"2.0"`` (or ``2.0``) into ``(2, 0)`` for ordering comparisons."""
    if value is None:
        return (0, 0)
    text = str(value).strip()
    parts = text.split("-", 1)[0].split(".")
    try:
        numbers = tuple(int(p) for p in parts if p != "")
    except ValueError:
        raise ValidationError(
            f"Invalid API version number: {value!r}",
            subcode=VALIDATION_INVALID_API_VERSION,
        )
    if len(numbers) == 1:
        numbers = numbers + (0,)
    return numbers


@dataclass(frozen=True)
class ApiResourceVersion:
    """
    API version requested for (or negotiated with) a resource location.

    :param api_version: Numeric API version, e.g. ``"2.0"``.
    :type api_version: str
    :param resource_version: Resource revision within a preview, ``0`` when unspecified.
    :type resource_version: int
    :param is_preview: Whether the version is a preview version.
    :type is_preview: bool

    Example::

        >>> str(ApiResourceVersion.parse("2.0-preview.1"))
        '2.0-preview.1'
        >>> ApiResourceVersion.parse("2.0").is_preview
        False
    """

    api_version: str = "1.0"
    resource_version: int = 0
    is_preview: bool = False

    @classmethod
    def parse(cls, text: str) -> "ApiResourceVersion":
        """
        Parse ``"X.Y"``, ``"X.Y-preview"`` or ``"X.Y-preview.N"``.

        :raises ~AzureDevOps.Tfvc.core.errors.ValidationError: If the text is not a version string.
        """
        m = _VERSION_RE.match(text or "")
        if not m:
            raise ValidationError(
                f"Invalid API version string: {text!r}",
                subcode=VALIDATION_INVALID_API_VERSION,
            )
        api = m.group("api")
        if "." not in api:
            api = f"{api}.0"
        preview = "-preview" in text.lower()
        resource = int(m.group("resource")) if m.group("resource") else 0
        return cls(api_version=api, resource_version=resource, is_preview=preview)

    def __str__(self) -> str:
        if not self.is_preview:
            return self.api_version
        if self.resource_version > 0:
            return f"{self.api_version}-preview.{self.resource_version}"
        return f"{self.api_version}-preview"


DEFAULT_API_VERSION = ApiResourceVersion()


@dataclass(frozen=True)
class ApiResourceLocation:
    """
    A REST resource published by the server.

    :param id: Location identifier (lower-case GUID string).
    :param area: Area name, e.g. ``"tfvc"``.
    :param resource_name: Resource name, e.g. ``"branches"``.
    :param route_template: Template such as ``"{project}/_apis/{area}/{resource}/{*path}"``.
    :param resource_version: Latest resource revision the server supports.
    :param min_version: Oldest API version the server still accepts.
    :param max_version: Newest API version the server accepts.
    :param released_version: Newest non-preview API version.
    """

    id: str
    area: str
    resource_name: str
    route_template: str
    resource_version: int = 1
    min_version: str = "1.0"
    max_version: str = "1.0"
    released_version: str = "0.0"

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "ApiResourceLocation":
        """
        Create a location from one entry of the ``OPTIONS _apis`` response.

        :param response_data: Raw location dictionary.
        :type response_data: dict[str, Any]
        :return: ApiResourceLocation instance.
        :rtype: ApiResourceLocation
        """
        return cls(
            id=str(response_data.get("id", "")).lower(),
            area=response_data.get("area", "") or "",
            resource_name=response_data.get("resourceName", "") or "",
            route_template=response_data.get("routeTemplate", "") or "",
            resource_version=int(response_data.get("resourceVersion") or 0),
            min_version=str(response_data.get("minVersion") or "1.0"),
            max_version=str(response_data.get("maxVersion") or "1.0"),
            released_version=str(response_data.get("releasedVersion") or "0.0"),
        )


def negotiate_version(
    location: ApiResourceLocation,
    version: Optional[ApiResourceVersion],
) -> Optional[ApiResourceVersion]:
    """
    Pick the version to send for ``location`` given the client's requested ``version``.

    :return: The highest version both sides support, or ``None`` when the server
        no longer supports the requested version.
    :rtype: ApiResourceVersion | None
    """
    if version is None:
        return DEFAULT_API_VERSION

    requested = _version_key(version.api_version)

    if _version_key(location.min_version) > requested:
        # Client is older than the server; the resource was removed.
        return None

    if _version_key(location.max_version) < requested:
        # Client is newer than the server; fall back to the server's latest.
        max_api = ApiResourceVersion.parse(location.max_version).api_version
        is_preview = _version_key(location.released_version) < _version_key(location.max_version)
        return ApiResourceVersion(api_version=max_api, resource_version=0, is_preview=is_preview)

    resource_version = min(version.resource_version, location.resource_version)
    if _version_key(location.released_version) < requested:
        is_preview = True
    else:
        is_preview = version.is_preview
    return ApiResourceVersion(
        api_version=version.api_version,
        resource_version=resource_version,
        is_preview=is_preview,
    )


__all__ = ["ApiResourceVersion", "ApiResourceLocation", "DEFAULT_API_VERSION", "negotiate_version"]
