# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_407 = "http_407"
HTTP_409 = "http_409"
HTTP_412 = "http_412"
HTTP_415 = "http_415"
HTTP_429 = "http_429"
HTTP_500 = "http_500"
HTTP_502 = "http_502"
HTTP_503 = "http_503"
HTTP_504 = "http_504"

ALL_HTTP_SUBCODES = {
    HTTP_400,
    HTTP_401,
    HTTP_403,
    HTTP_404,
    HTTP_407,
    HTTP_409,
    HTTP_412,
    HTTP_415,
    HTTP_429,
    HTTP_500,
    HTTP_502,
    HTTP_503,
    HTTP_504,
}

TRANSIENT_STATUS_CODES = {429, 502, 503, 504}

# Location subcodes
LOCATION_DISCOVERY_FAILED = "location_discovery_failed"
LOCATION_NOT_PUBLISHED = "location_not_published"

# Validation subcodes
VALIDATION_UNSUPPORTED_HTTP_METHOD = "validation_unsupported_http_method"
VALIDATION_INVALID_API_VERSION = "validation_invalid_api_version"

# Server exception type keys that map to TfvcResourceNotFoundError
NOT_FOUND_TYPE_KEYS = {
    "ItemNotFoundException",
    "ChangesetNotFoundException",
    "LabelNotFoundException",
    "ShelvesetNotFoundException",
    "ProjectDoesNotExistWithNameException",
    "ProjectDoesNotExistException",
}


def _http_subcode(status: int) -> str:
    """Return the ``http_<status>`` subcode for a response status."""
    return f"http_{status}"


def _is_transient_status(status: int) -> bool:
    return status in TRANSIENT_STATUS_CODES
