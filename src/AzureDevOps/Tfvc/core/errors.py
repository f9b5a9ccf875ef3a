# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured exceptions raised by the TFVC SDK.

All exceptions derive from :class:`TfvcError`, which carries a stable ``code``,
an optional ``subcode`` and a ``details`` dictionary suitable for logging.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional


class TfvcError(Exception):
    """Base structured error for the TFVC SDK."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(TfvcError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details, source="client")


class ResourceLocationNotFoundError(TfvcError):
    """The server did not publish the requested resource location under ``_apis``."""

    def __init__(self, location_id: str, base_url: str, *, subcode: Optional[str] = None) -> None:
        super().__init__(
            f"Resource location {location_id} is not available at {base_url}.",
            code="location_error",
            subcode=subcode,
            details={"location_id": location_id, "base_url": base_url},
            source="client",
        )
        self.location_id = location_id
        self.base_url = base_url


class UnsupportedApiVersionError(TfvcError):
    """The server no longer supports the API version requested for a location."""

    def __init__(self, location_id: str, requested: str, min_version: str) -> None:
        super().__init__(
            f"Resource location {location_id} requires API version {min_version} or later; client requested {requested}.",
            code="version_error",
            details={"location_id": location_id, "requested": requested, "min_version": min_version},
            source="client",
        )


class HttpError(TfvcError):
    def __init__(
        self,
        message: str,
        status_code: int,
        is_transient: bool = False,
        subcode: Optional[str] = None,
        type_key: Optional[str] = None,
        type_name: Optional[str] = None,
        activity_id: Optional[str] = None,
        session_id: Optional[str] = None,
        body_excerpt: Optional[str] = None,
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = details or {}
        if type_key is not None:
            d["type_key"] = type_key
        if type_name is not None:
            d["type_name"] = type_name
        if activity_id is not None:
            d["activity_id"] = activity_id
        if session_id is not None:
            d["session_id"] = session_id
        if body_excerpt is not None:
            d["body_excerpt"] = body_excerpt
        if retry_after is not None:
            d["retry_after"] = retry_after
        super().__init__(
            message,
            code="http_error",
            subcode=subcode,
            status_code=status_code,
            details=d,
            source="server",
            is_transient=is_transient,
        )


class TfvcResourceNotFoundError(HttpError):
    """A TFVC item, changeset, label, shelveset or project does not exist."""


class ProxyAuthenticationRequiredError(HttpError):
    """The proxy between the client and the server rejected the request (HTTP 407)."""

    def __init__(self, message: str = "Proxy authentication required.", **kwargs: Any) -> None:
        super().__init__(message, 407, **kwargs)


__all__ = [
    "TfvcError",
    "HttpError",
    "ValidationError",
    "ResourceLocationNotFoundError",
    "UnsupportedApiVersionError",
    "TfvcResourceNotFoundError",
    "ProxyAuthenticationRequiredError",
]
