# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from ..common.constants import DEFAULT_USER_AGENT, VSS_HTTP_METHOD_OVERRIDE_ENV
from .telemetry import TelemetryConfig


@dataclass(frozen=True)
class TfvcConfig:
    """
    Configuration settings for TFVC client operations.

    :param http_retries: Maximum number of attempts for HTTP requests (default: 5).
    :type http_retries: int or None
    :param http_backoff: Base delay in seconds for exponential backoff (default: 0.5).
    :type http_backoff: float or None
    :param http_max_backoff: Maximum delay between retry attempts in seconds (default: 60.0).
    :type http_max_backoff: float or None
    :param http_timeout: Request timeout in seconds (default: method-dependent).
    :type http_timeout: float or None
    :param http_jitter: Whether to add jitter to retry delays (default: True).
    :type http_jitter: bool or None
    :param http_retry_transient_errors: Whether to retry 429, 502, 503 and 504 responses (default: True).
    :type http_retry_transient_errors: bool or None
    :param http_method_override: Whether PATCH, PUT, DELETE and OPTIONS requests are tunnelled
        through POST with ``X-HTTP-Method-Override`` (default: True).
    :type http_method_override: bool or None
    :param user_agent: Value sent in the ``User-Agent`` header.
    :type user_agent: str
    :param telemetry: Optional telemetry configuration. Telemetry is disabled when None.
    :type telemetry: ~AzureDevOps.Tfvc.core.telemetry.TelemetryConfig or None
    """

    # HTTP retry and resilience configuration
    http_retries: Optional[int] = None
    http_backoff: Optional[float] = None
    http_max_backoff: Optional[float] = None
    http_timeout: Optional[float] = None
    http_jitter: Optional[bool] = None
    http_retry_transient_errors: Optional[bool] = None

    http_method_override: Optional[bool] = None
    user_agent: str = DEFAULT_USER_AGENT
    telemetry: Optional[TelemetryConfig] = None

    @property
    def method_override_enabled(self) -> bool:
        return True if self.http_method_override is None else self.http_method_override

    @classmethod
    def from_env(cls) -> "TfvcConfig":
        """
        Create a configuration instance with default settings.

        When ``VSS_HTTP_METHOD_OVERRIDE`` is set, method override is enabled only
        if its value is ``true`` (case-insensitive). Unset keeps the default.

        :return: Configuration instance with default values.
        :rtype: ~AzureDevOps.Tfvc.core.config.TfvcConfig
        """
        override = os.environ.get(VSS_HTTP_METHOD_OVERRIDE_ENV)
        return cls(
            http_retries=None,  # Will default to 5 in _HttpClient
            http_backoff=None,  # Will default to 0.5 in _HttpClient
            http_max_backoff=None,  # Will default to 60.0 in _HttpClient
            http_timeout=None,  # Will use method-dependent defaults in _HttpClient
            http_jitter=None,  # Will default to True in _HttpClient
            http_retry_transient_errors=None,  # Will default to True in _HttpClient
            http_method_override=(override.strip().lower() == "true") if override else None,
        )
