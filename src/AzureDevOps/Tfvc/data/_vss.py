# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level Azure DevOps REST client shared by all TFVC operations.

:class:`_VssClient` discovers the resource locations published under
``{collection}/_apis``, expands their route templates, negotiates the API
version for every request, sends it through :class:`~AzureDevOps.Tfvc.core._http._HttpClient`
and translates error responses into :class:`~AzureDevOps.Tfvc.core.errors.HttpError`
subclasses.
"""

from __future__ import annotations

import json
import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional
from urllib.parse import unquote_plus

import requests

from ..common.constants import (
    API_VERSION_PARAMETER_NAME,
    APPLICATION_JSON_TYPE,
    CHARSET_PARAMETER_NAME,
    CONNECTION_DATA_RELATIVE_PATH,
    HEADER_ACCEPT,
    HEADER_ACTIVITY_ID,
    HEADER_AUTHORIZATION,
    HEADER_CLIENT_REQUEST_ID,
    HEADER_CONTENT_TYPE,
    HEADER_HTTP_METHOD_OVERRIDE,
    HEADER_RETRY_AFTER,
    HEADER_TFS_SERVICE_ERROR,
    HEADER_TFS_SESSION,
    HEADER_USER_AGENT,
    OPTIONS_RELATIVE_PATH,
    UTF8_CHARSET,
)
from ..core._auth import _AuthManager
from ..core._error_codes import (
    LOCATION_DISCOVERY_FAILED,
    LOCATION_NOT_PUBLISHED,
    NOT_FOUND_TYPE_KEYS,
    VALIDATION_UNSUPPORTED_HTTP_METHOD,
    _http_subcode,
    _is_transient_status,
)
from ..core._http import _HttpClient
from ..core.config import TfvcConfig
from ..core.errors import (
    HttpError,
    ProxyAuthenticationRequiredError,
    ResourceLocationNotFoundError,
    TfvcError,
    TfvcResourceNotFoundError,
    UnsupportedApiVersionError,
    ValidationError,
)
from ..core.telemetry import create_telemetry_manager
from ..models.api_version import ApiResourceLocation, ApiResourceVersion, negotiate_version
from ._routing import _replace_route_values, _to_route_dictionary

_logger = logging.getLogger(__name__)

# Verbs that may be tunnelled through POST with X-HTTP-Method-Override
_OVERRIDABLE_METHODS = {"PATCH", "PUT", "DELETE", "OPTIONS"}
_SUPPORTED_METHODS = {"GET", "POST", "HEAD"} | _OVERRIDABLE_METHODS

_BODY_EXCERPT_LENGTH = 200

# X-TFS-Session value shared by every request issued inside one _call_scope()
_CALL_SESSION_ID: ContextVar[Optional[str]] = ContextVar("tfvc_call_session_id", default=None)


def _media_type(base: Optional[str], parameters: Mapping[str, str]) -> str:
    value = base or APPLICATION_JSON_TYPE
    for name, param in parameters.items():
        value = f"{value};{name}={param}"
    return value


@dataclass
class _VssRequest:
    """A fully resolved request ready to be sent."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    operation: str = ""
    project: Optional[str] = None


class _VssClient:
    """
    Azure DevOps REST client: location discovery, version negotiation and error translation.

    :param auth: Authentication manager producing the ``Authorization`` header.
    :type auth: ~AzureDevOps.Tfvc.core._auth._AuthManager
    :param base_url: Collection URL, e.g. ``"https://dev.azure.com/fabrikam"``.
    :type base_url: str
    :param config: Optional configuration. Defaults to :meth:`TfvcConfig.from_env`.
    :type config: ~AzureDevOps.Tfvc.core.config.TfvcConfig | None
    :param session: Optional ``requests.Session`` reused for connection pooling.
    :type session: requests.Session | None
    """

    def __init__(
        self,
        auth: _AuthManager,
        base_url: str,
        config: Optional[TfvcConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.auth = auth
        self.base_url = (base_url or "").strip().rstrip("/")
        if not self.base_url:
            raise ValueError("base_url is required.")
        self.config = config or TfvcConfig.from_env()
        self._http = _HttpClient(
            retries=self.config.http_retries,
            backoff=self.config.http_backoff,
            timeout=self.config.http_timeout,
            max_backoff=self.config.http_max_backoff,
            jitter=self.config.http_jitter,
            retry_transient_errors=self.config.http_retry_transient_errors,
            session=session,
        )
        self._telemetry = create_telemetry_manager(self.config.telemetry)
        # Cache: lower-case location id -> ApiResourceLocation (loaded once from OPTIONS _apis)
        self._locations: Optional[Dict[str, ApiResourceLocation]] = None

    # ----------------------------- Scope / headers -----------------------------

    @contextmanager
    def _call_scope(self) -> Iterator[str]:
        """Share one ``X-TFS-Session`` id across all requests issued inside the block."""
        token = _CALL_SESSION_ID.set(str(uuid.uuid4()))
        try:
            yield _CALL_SESSION_ID.get()
        finally:
            _CALL_SESSION_ID.reset(token)

    def _resolve(self, relative: str) -> str:
        relative = relative.lstrip("/")
        return f"{self.base_url}/{relative}" if relative else self.base_url

    def _headers(self) -> Dict[str, str]:
        """Standard headers sent with every request."""
        return {
            HEADER_AUTHORIZATION: self.auth._authorization_header(),
            HEADER_USER_AGENT: self.config.user_agent,
        }

    # ----------------------------- Transport -----------------------------

    def _request(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        project: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        **kwargs: Any,
    ) -> requests.Response:
        """
        Send one request and raise a structured error for non-success responses.

        :param method: HTTP verb actually put on the wire.
        :param url: Absolute target URL.
        :param operation: Operation name used for telemetry, e.g. ``"branches.get"``.
        :param project: Team project, recorded on the telemetry span.
        :param headers: Request specific headers merged over the standard ones.
        :raises ~AzureDevOps.Tfvc.core.errors.HttpError: On any non-2xx response.
        """
        merged = self._headers()
        merged.update(self._telemetry.get_additional_headers())
        if headers:
            merged.update(headers)

        client_request_id = str(uuid.uuid4())
        session_id = _CALL_SESSION_ID.get() or str(uuid.uuid4())
        merged[HEADER_CLIENT_REQUEST_ID] = client_request_id
        merged[HEADER_TFS_SESSION] = session_id

        with self._telemetry.trace_request(
            operation, method.upper(), url, client_request_id, session_id, project=project
        ) as ctx:
            response = self._http._request(method, url, headers=merged, **kwargs)
            activity_id = (response.headers or {}).get(HEADER_ACTIVITY_ID)
            try:
                self._handle_response(response, session_id=session_id)
            except HttpError as e:
                self._telemetry.record_response(ctx, response.status_code, activity_id=activity_id, error=e)
                raise
            self._telemetry.record_response(ctx, response.status_code, activity_id=activity_id)
        return response

    def _handle_response(self, response: requests.Response, *, session_id: Optional[str] = None) -> None:
        """
        Translate a non-success response into an exception.

        The message prefers the URL-encoded ``X-TFS-ServiceError`` header, then the
        ``message`` of the wrapped server exception in the JSON body, then the
        HTTP reason phrase.
        """
        status = response.status_code
        headers = response.headers or {}
        activity_id = headers.get(HEADER_ACTIVITY_ID)

        if status == 407:
            raise ProxyAuthenticationRequiredError(
                subcode=_http_subcode(status),
                activity_id=activity_id,
                session_id=session_id,
            )
        if 200 <= status < 300:
            return

        wrapped: Dict[str, Any] = {}
        body_text = getattr(response, "text", "") or ""
        try:
            body = response.json() if body_text else None
            if isinstance(body, dict):
                wrapped = body
        except ValueError:
            pass

        message: Optional[str] = None
        service_error = headers.get(HEADER_TFS_SERVICE_ERROR)
        if service_error:
            message = unquote_plus(service_error)
        elif wrapped.get("message"):
            message = str(wrapped["message"])
        else:
            message = getattr(response, "reason", None) or f"HTTP {status}"

        retry_after: Optional[int] = None
        if HEADER_RETRY_AFTER in headers:
            try:
                retry_after = int(headers[HEADER_RETRY_AFTER])
            except (TypeError, ValueError):
                retry_after = None

        type_key = wrapped.get("typeKey")
        error_cls = TfvcResourceNotFoundError if type_key in NOT_FOUND_TYPE_KEYS else HttpError
        raise error_cls(
            message,
            status_code=status,
            is_transient=_is_transient_status(status),
            subcode=_http_subcode(status),
            type_key=type_key,
            type_name=wrapped.get("typeName"),
            activity_id=activity_id,
            session_id=session_id,
            body_excerpt=None if wrapped else (body_text[:_BODY_EXCERPT_LENGTH] or None),
            retry_after=retry_after,
        )

    # ----------------------------- Locations -----------------------------

    def _load_locations(self) -> Dict[str, ApiResourceLocation]:
        """Fetch the location collection with ``OPTIONS {collection}/_apis``."""
        response = self._request(
            "OPTIONS",
            self._resolve(OPTIONS_RELATIVE_PATH),
            operation="locations",
            headers={HEADER_ACCEPT: APPLICATION_JSON_TYPE},
        )
        body = response.json()
        entries = body.get("value", []) if isinstance(body, dict) else []
        locations: Dict[str, ApiResourceLocation] = {}
        for entry in entries:
            if isinstance(entry, dict) and entry.get("id"):
                location = ApiResourceLocation.from_api_response(entry)
                locations[location.id] = location
        return locations

    def _get_location(self, location_id: str) -> ApiResourceLocation:
        """
        Return the published location for ``location_id``, loading the cache on first use.

        :raises ~AzureDevOps.Tfvc.core.errors.ResourceLocationNotFoundError: When discovery
            fails or the server does not publish the location.
        """
        key = str(location_id).lower()
        if self._locations is None:
            try:
                self._locations = self._load_locations()
            except (TfvcError, requests.exceptions.RequestException, ValueError) as e:
                _logger.error("Resource location discovery failed for %s: %s", self.base_url, e)
                raise ResourceLocationNotFoundError(
                    key, self.base_url, subcode=LOCATION_DISCOVERY_FAILED
                ) from e
        location = self._locations.get(key)
        if location is None:
            raise ResourceLocationNotFoundError(key, self.base_url, subcode=LOCATION_NOT_PUBLISHED)
        return location

    def _negotiate(self, location: ApiResourceLocation, api_version: Optional[str]) -> ApiResourceVersion:
        requested = ApiResourceVersion.parse(api_version) if api_version else None
        negotiated = negotiate_version(location, requested)
        if negotiated is None:
            raise UnsupportedApiVersionError(location.id, str(requested), location.min_version)
        return negotiated

    # ----------------------------- Request building -----------------------------

    def _create_request(
        self,
        method: str,
        location_id: str,
        api_version: Optional[str],
        route_values: Optional[Mapping[str, Any]] = None,
        query_parameters: Optional[Mapping[str, str]] = None,
        body: Any = None,
        accept: str = APPLICATION_JSON_TYPE,
        content_type: str = APPLICATION_JSON_TYPE,
        *,
        operation: str = "",
        project: Optional[str] = None,
    ) -> _VssRequest:
        """
        Build a request for a published resource location.

        :param method: Logical HTTP verb (``"GET"``, ``"POST"``, ``"PATCH"`` ...).
        :param location_id: Location GUID naming the server route template.
        :param api_version: Requested API version, e.g. ``"2.0"``; ``None`` uses ``1.0``.
        :param route_values: Values substituted into the route template; missing values drop their segment.
        :param query_parameters: Query string parameters, already formatted.
        :param body: Object serialized as the JSON body. Request models are converted with ``to_dict()``.
        :param accept: Media type for the ``Accept`` header.
        :param content_type: Media type of the body.
        :param operation: Operation name used for telemetry.
        :param project: Team project recorded on telemetry.
        :return: The resolved request.
        :rtype: _VssRequest
        :raises ~AzureDevOps.Tfvc.core.errors.ValidationError: If ``method`` is not an HTTP verb.
        """
        verb = (method or "").upper()
        if verb not in _SUPPORTED_METHODS:
            raise ValidationError(
                f"Unsupported HTTP method: {method!r}",
                subcode=VALIDATION_UNSUPPORTED_HTTP_METHOD,
            )

        location = self._get_location(location_id)
        version = self._negotiate(location, api_version)
        route = _to_route_dictionary(route_values, location.area, location.resource_name)
        url = self._resolve(_replace_route_values(location.route_template, route))

        headers = {
            HEADER_ACCEPT: _media_type(
                accept,
                {API_VERSION_PARAMETER_NAME: str(version), CHARSET_PARAMETER_NAME: UTF8_CHARSET},
            ),
        }
        if verb in _OVERRIDABLE_METHODS and self.config.method_override_enabled:
            headers[HEADER_HTTP_METHOD_OVERRIDE] = verb
            verb = "POST"

        payload: Optional[bytes] = None
        if verb in ("POST", "PUT", "PATCH"):
            if body is None:
                payload = b""
            elif isinstance(body, (bytes, bytearray)):
                payload = bytes(body)
            else:
                data = body.to_dict() if hasattr(body, "to_dict") else body
                if isinstance(data, list):
                    data = [d.to_dict() if hasattr(d, "to_dict") else d for d in data]
                payload = json.dumps(data).encode(UTF8_CHARSET)
            headers[HEADER_CONTENT_TYPE] = _media_type(content_type, {CHARSET_PARAMETER_NAME: UTF8_CHARSET})

        return _VssRequest(
            method=verb,
            url=url,
            headers=headers,
            params=dict(query_parameters or {}),
            body=payload,
            operation=operation,
            project=project,
        )

    # ----------------------------- Sending -----------------------------

    def _send(self, request: _VssRequest, *, stream: bool = False) -> requests.Response:
        kwargs: Dict[str, Any] = {}
        if request.params:
            kwargs["params"] = request.params
        if request.body is not None:
            kwargs["data"] = request.body
        if stream:
            kwargs["stream"] = True
        return self._request(
            request.method,
            request.url,
            operation=request.operation,
            project=request.project,
            headers=request.headers,
            **kwargs,
        )

    def _send_json(self, request: _VssRequest) -> Any:
        """
        Send ``request`` and return the decoded JSON body (``None`` when empty).

        :raises ~AzureDevOps.Tfvc.core.errors.HttpError: On non-success responses.
        """
        response = self._send(request)
        if not response.text:
            return None
        return response.json()

    def _send_stream(self, request: _VssRequest) -> Any:
        """
        Send ``request`` without buffering and return the raw response stream.

        Content sent with ``Content-Encoding: gzip`` or ``deflate`` is decoded
        while reading. The caller must read and close the returned stream.
        """
        response = self._send(request, stream=True)
        response.raw.decode_content = True
        return response.raw

    # ----------------------------- Utilities -----------------------------

    def check_connection(self) -> bool:
        """
        Probe ``{collection}/_apis/connectiondata``.

        :return: ``True`` when the server answers with a non-empty 2xx body.
        :rtype: bool
        """
        try:
            response = self._request(
                "GET",
                self._resolve(CONNECTION_DATA_RELATIVE_PATH),
                operation="connection_data",
                headers={HEADER_ACCEPT: APPLICATION_JSON_TYPE},
            )
        except (TfvcError, requests.exceptions.RequestException) as e:
            _logger.warning("Connection check against %s failed: %s", self.base_url, e)
            return False
        return bool(response.text)

    def close(self) -> None:
        """Release the HTTP client. Safe to call multiple times."""
        self._http.close()


def _unwrap_list(body: Any) -> list:
    """Return the ``value`` array of a ``{"count": n, "value": [...]}`` envelope."""
    if body is None:
        return []
    if isinstance(body, dict):
        value = body.get("value")
        return value if isinstance(value, list) else []
    if isinstance(body, list):
        return body
    return []


__all__ = []
