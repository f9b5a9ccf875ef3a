# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the TFVC SDK.

This module contains the foundational components including authentication,
configuration, HTTP client, telemetry and error handling.
"""

from .config import TfvcConfig
from .errors import (
    TfvcError,
    HttpError,
    ValidationError,
    ResourceLocationNotFoundError,
    UnsupportedApiVersionError,
    TfvcResourceNotFoundError,
    ProxyAuthenticationRequiredError,
)
from .telemetry import TelemetryConfig

__all__ = [
    "TfvcConfig",
    "TelemetryConfig",
    "TfvcError",
    "HttpError",
    "ValidationError",
    "ResourceLocationNotFoundError",
    "UnsupportedApiVersionError",
    "TfvcResourceNotFoundError",
    "ProxyAuthenticationRequiredError",
]
