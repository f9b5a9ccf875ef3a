# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Telemetry infrastructure for the TFVC SDK.

Provides OpenTelemetry-based tracing, metrics, and logging with
extensible hook system for custom telemetry providers.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Generator,
    List,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)

from opentelemetry import metrics, trace
from opentelemetry.trace import Status, StatusCode

from ..common.constants import (
    OTEL_ATTR_HTTP_METHOD,
    OTEL_ATTR_HTTP_STATUS_CODE,
    OTEL_ATTR_HTTP_URL,
    OTEL_ATTR_RPC_METHOD,
    OTEL_ATTR_RPC_SYSTEM,
    OTEL_ATTR_TFVC_ACTIVITY_ID,
    OTEL_ATTR_TFVC_PROJECT,
    OTEL_ATTR_TFVC_REQUEST_ID,
    OTEL_ATTR_TFVC_SESSION_ID,
)

_INSTRUMENTATION_NAME = "AzureDevOps.Tfvc"
_SCHEMA_URL = "https://opentelemetry.io/schemas/1.21.0"


# ============================================================================
# Configuration
# ============================================================================


@dataclass(frozen=True)
class TelemetryConfig:
    """Configuration for SDK telemetry and observability.

    Telemetry is opt-in. When enabled, the SDK produces OpenTelemetry-compatible
    traces, metrics, and logs that can be exported to any OTel-compatible backend.

    Example:
        Request logging::

            config = TfvcConfig(
                telemetry=TelemetryConfig(enable_logging=True, log_level="DEBUG")
            )

        Custom hook::

            config = TfvcConfig(
                telemetry=TelemetryConfig(
                    hooks=[MyCustomTelemetryHook()]
                )
            )
    """

    # Signal toggles
    enable_tracing: bool = False
    enable_metrics: bool = False
    enable_logging: bool = False

    # Logging configuration
    log_level: str = "WARNING"
    logger_name: str = "AzureDevOps.Tfvc"

    # Custom hooks
    hooks: List["TelemetryHook"] = field(default_factory=list)


# ============================================================================
# Context Objects
# ============================================================================


@dataclass
class RequestContext:
    """Context passed to telemetry hooks for each HTTP request."""

    # Identifiers
    client_request_id: str
    session_id: str

    # Request details
    method: str  # GET, POST, OPTIONS
    url: str
    operation: str  # e.g., "branches.get", "items.get_content"
    project: Optional[str] = None

    # Timing
    start_time: float = field(default_factory=time.perf_counter)

    # Custom data bag for hooks to share state
    custom_data: Dict[str, Any] = field(default_factory=dict)

    # Internal: span reference for adding response attributes
    _span: Any = field(default=None, repr=False)


@dataclass
class ResponseContext:
    """Response information passed to telemetry hooks."""

    status_code: int
    duration_ms: float
    activity_id: Optional[str] = None
    error: Optional[Exception] = None


# ============================================================================
# Hook Protocol
# ============================================================================


@runtime_checkable
class TelemetryHook(Protocol):
    """Protocol for custom telemetry hooks.

    Implement this protocol to create custom telemetry integrations.
    All methods are optional - implement only what you need.

    Example:
        class StatsdHook:
            def __init__(self, statsd):
                self.statsd = statsd

            def on_request_end(self, request: RequestContext, response: ResponseContext):
                self.statsd.timing(
                    f"tfvc.{request.operation}.duration",
                    response.duration_ms
                )
    """

    def on_request_start(self, context: RequestContext) -> None:
        """Called before each HTTP request is sent."""
        ...

    def on_request_end(self, request: RequestContext, response: ResponseContext) -> None:
        """Called after each HTTP request completes."""
        ...

    def on_request_error(self, request: RequestContext, error: Exception) -> None:
        """Called when an unhandled exception occurs."""
        ...

    def get_additional_headers(self) -> Dict[str, str]:
        """Return additional headers to include in requests."""
        ...


# ============================================================================
# Telemetry Manager
# ============================================================================


class TelemetryManager:
    """Manages telemetry instrumentation for the TFVC SDK.

    This class is internal and not part of the public API.
    """

    def __init__(self, config: Optional[TelemetryConfig] = None) -> None:
        self._config = config or TelemetryConfig()
        self._tracer: Optional[Any] = None
        self._meter: Optional[Any] = None
        self._logger: Optional[logging.Logger] = None
        self._hooks = list(self._config.hooks)

        # Metric instruments
        self._request_duration: Optional[Any] = None
        self._request_count: Optional[Any] = None
        self._error_count: Optional[Any] = None

        self._initialize()

    @property
    def is_tracing_enabled(self) -> bool:
        return self._config.enable_tracing

    @property
    def is_metrics_enabled(self) -> bool:
        return self._config.enable_metrics

    def _initialize(self) -> None:
        """Initialize telemetry components based on configuration."""
        if self._config.enable_tracing:
            self._tracer = trace.get_tracer(_INSTRUMENTATION_NAME, schema_url=_SCHEMA_URL)

        if self._config.enable_metrics:
            self._meter = metrics.get_meter(_INSTRUMENTATION_NAME, schema_url=_SCHEMA_URL)
            self._setup_metrics()

        if self._config.enable_logging:
            self._logger = logging.getLogger(self._config.logger_name)
            self._logger.setLevel(getattr(logging, self._config.log_level.upper()))

    def _setup_metrics(self) -> None:
        """Create metric instruments."""
        if not self._meter:
            return

        self._request_duration = self._meter.create_histogram(
            name="tfvc.client.request.duration",
            description="Duration of TFVC API requests",
            unit="ms",
        )

        self._request_count = self._meter.create_counter(
            name="tfvc.client.request.count",
            description="Number of TFVC API requests",
            unit="1",
        )

        self._error_count = self._meter.create_counter(
            name="tfvc.client.error.count",
            description="Number of TFVC API errors",
            unit="1",
        )

    @contextmanager
    def trace_request(
        self,
        operation: str,
        method: str,
        url: str,
        client_request_id: str,
        session_id: str,
        project: Optional[str] = None,
    ) -> Generator[RequestContext, None, None]:
        """Create a traced request context.

        Usage:
            with telemetry.trace_request("branches.get", "GET", url, req_id, session_id) as ctx:
                response = self._http._request(...)
                telemetry.record_response(ctx, response.status_code)
        """
        ctx = RequestContext(
            client_request_id=client_request_id,
            session_id=session_id,
            method=method,
            url=url,
            operation=operation,
            project=project,
        )

        self._dispatch_request_start(ctx)

        span = None
        if self._tracer:
            span_name = f"Tfvc {operation}"
            if project:
                span_name = f"{span_name} {project}"

            span = self._tracer.start_span(
                span_name,
                kind=trace.SpanKind.CLIENT,
                attributes={
                    OTEL_ATTR_RPC_SYSTEM: "tfvc",
                    OTEL_ATTR_RPC_METHOD: operation,
                    OTEL_ATTR_HTTP_METHOD: method,
                    OTEL_ATTR_HTTP_URL: url,
                    OTEL_ATTR_TFVC_REQUEST_ID: client_request_id,
                    OTEL_ATTR_TFVC_SESSION_ID: session_id,
                    **({OTEL_ATTR_TFVC_PROJECT: project} if project else {}),
                },
            )
            ctx._span = span

        try:
            yield ctx
        except Exception as e:
            if span:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                span.record_exception(e)
            self._dispatch_request_error(ctx, e)
            raise
        finally:
            if span:
                span.end()

    def record_response(
        self,
        ctx: RequestContext,
        status_code: int,
        activity_id: Optional[str] = None,
        error: Optional[Exception] = None,
    ) -> None:
        """Record response metrics and dispatch to hooks."""
        duration_ms = (time.perf_counter() - ctx.start_time) * 1000

        response = ResponseContext(
            status_code=status_code,
            duration_ms=duration_ms,
            activity_id=activity_id,
            error=error,
        )

        if ctx._span:
            ctx._span.set_attribute(OTEL_ATTR_HTTP_STATUS_CODE, status_code)
            if activity_id:
                ctx._span.set_attribute(OTEL_ATTR_TFVC_ACTIVITY_ID, activity_id)

        if self._request_duration:
            attributes = {
                "operation": ctx.operation,
                "method": ctx.method,
                "status_code": status_code,
            }
            self._request_duration.record(duration_ms, attributes)
            self._request_count.add(1, attributes)

            if status_code >= 400:
                self._error_count.add(1, attributes)

        if self._logger:
            level = logging.WARNING if status_code >= 400 else logging.DEBUG
            self._logger.log(
                level,
                f"{ctx.operation} {ctx.method} {status_code} {duration_ms:.1f}ms",
                extra={
                    "client_request_id": ctx.client_request_id,
                    "activity_id": activity_id,
                },
            )

        self._dispatch_request_end(ctx, response)

    def _dispatch_request_start(self, ctx: RequestContext) -> None:
        for hook in self._hooks:
            if hasattr(hook, "on_request_start"):
                try:
                    hook.on_request_start(ctx)
                except Exception:
                    pass  # Hooks must not break requests

    def _dispatch_request_end(self, request: RequestContext, response: ResponseContext) -> None:
        for hook in self._hooks:
            if hasattr(hook, "on_request_end"):
                try:
                    hook.on_request_end(request, response)
                except Exception:
                    pass

    def _dispatch_request_error(self, request: RequestContext, error: Exception) -> None:
        for hook in self._hooks:
            if hasattr(hook, "on_request_error"):
                try:
                    hook.on_request_error(request, error)
                except Exception:
                    pass

    def get_additional_headers(self) -> Dict[str, str]:
        """Collect additional headers from all hooks."""
        headers: Dict[str, str] = {}
        for hook in self._hooks:
            if hasattr(hook, "get_additional_headers"):
                try:
                    hook_headers = hook.get_additional_headers()
                    if hook_headers:
                        headers.update(hook_headers)
                except Exception:
                    pass
        return headers


# ============================================================================
# No-op Manager for when telemetry is disabled
# ============================================================================


class NoOpTelemetryManager:
    """No-op telemetry manager when telemetry is disabled."""

    @contextmanager
    def trace_request(
        self,
        operation: str,
        method: str,
        url: str,
        client_request_id: str,
        session_id: str,
        project: Optional[str] = None,
    ) -> Generator[RequestContext, None, None]:
        yield RequestContext(
            client_request_id=client_request_id,
            session_id=session_id,
            method=method,
            url=url,
            operation=operation,
            project=project,
        )

    def record_response(self, *args: Any, **kwargs: Any) -> None:
        pass

    def get_additional_headers(self) -> Dict[str, str]:
        return {}


def create_telemetry_manager(
    config: Optional[TelemetryConfig],
) -> Union[TelemetryManager, NoOpTelemetryManager]:
    """Factory to create appropriate telemetry manager."""
    if config is None:
        return NoOpTelemetryManager()

    has_any_enabled = config.enable_tracing or config.enable_metrics or config.enable_logging or config.hooks

    if not has_any_enabled:
        return NoOpTelemetryManager()

    return TelemetryManager(config)


__all__ = [
    "TelemetryConfig",
    "TelemetryHook",
    "TelemetryManager",
    "NoOpTelemetryManager",
    "RequestContext",
    "ResponseContext",
    "create_telemetry_manager",
]
