# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for the TFVC Web API.

These constants define media types, header names, resource location
identifiers and telemetry attribute names shared across the SDK.
"""

# Media types used for content negotiation
APPLICATION_JSON_TYPE = "application/json"
APPLICATION_OCTET_STREAM_TYPE = "application/octet-stream"
APPLICATION_ZIP_TYPE = "application/zip"
TEXT_PLAIN_TYPE = "text/plain"

# Media type parameters
API_VERSION_PARAMETER_NAME = "api-version"
CHARSET_PARAMETER_NAME = "charset"
UTF8_CHARSET = "utf-8"

# Request/response headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_AGENT = "User-Agent"
HEADER_HTTP_METHOD_OVERRIDE = "X-HTTP-Method-Override"
HEADER_TFS_SESSION = "X-TFS-Session"
HEADER_TFS_SERVICE_ERROR = "X-TFS-ServiceError"
HEADER_CLIENT_REQUEST_ID = "x-ms-client-request-id"
HEADER_ACTIVITY_ID = "ActivityId"
HEADER_RETRY_AFTER = "Retry-After"

# Relative paths resolved against the collection URL
OPTIONS_RELATIVE_PATH = "_apis"
CONNECTION_DATA_RELATIVE_PATH = "_apis/connectiondata"

# Route value names filled from the resource location when not supplied
AREA_PARAMETER_NAME = "area"
RESOURCE_PARAMETER_NAME = "resource"

# Environment switch for X-HTTP-Method-Override
VSS_HTTP_METHOD_OVERRIDE_ENV = "VSS_HTTP_METHOD_OVERRIDE"

# Azure DevOps resource scope for Microsoft Entra tokens
AZURE_DEVOPS_SCOPE = "499b84ac-1321-427f-aa17-267ca6975798/.default"

DEFAULT_USER_AGENT = "AzureDevOps-Tfvc-Python"

# TFVC resource locations (route keys published by the server under _apis)
LOCATION_BRANCHES = "bc1f417e-239d-42e7-85e1-76e80cb2d6eb"
LOCATION_CHANGESET_CHANGES = "f32b86f2-15b9-4fe6-81b1-6f8938617ee5"
LOCATION_CHANGESETS = "0bc8f0a4-6bfb-42a9-ba84-139da7b99c49"
LOCATION_CHANGESETS_BATCH = "b7e7c173-803c-4fea-9ec8-31ee35c5502a"
LOCATION_CHANGESET_WORK_ITEMS = "64ae0bea-1d71-47c9-a9e5-fe73f5ea0ff4"
LOCATION_ITEMS_BATCH = "fe6f827b-5f64-480f-b8af-1eca3b80e833"
LOCATION_ITEMS = "ba9fc436-9a38-4578-89d6-e4f3241f5040"
LOCATION_LABEL_ITEMS = "06166e34-de17-4b60-8cd1-23182a346fda"
LOCATION_LABELS = "a5d9bd7f-b661-4d0e-b9be-d9c16affae54"
LOCATION_PROJECT_INFO = "252d9c40-0643-41cf-85b2-044d80f9b675"
LOCATION_SHELVESET_CHANGES = "dbaf075b-0445-4c34-9e5b-82292f856522"
LOCATION_SHELVESETS = "e36d44fb-e907-4b0a-b194-f83f1ed32ad3"
LOCATION_SHELVESET_WORK_ITEMS = "a7a0c1c1-373e-425a-b031-a519474d743d"

# API versions requested per operation family
TFVC_API_VERSION = "2.0"
PROJECT_INFO_API_VERSION = "2.0-preview.1"

# OpenTelemetry semantic convention attribute names
OTEL_ATTR_RPC_SYSTEM = "rpc.system"
OTEL_ATTR_RPC_METHOD = "rpc.method"
OTEL_ATTR_HTTP_METHOD = "http.request.method"
OTEL_ATTR_HTTP_URL = "url.full"
OTEL_ATTR_HTTP_STATUS_CODE = "http.response.status_code"
OTEL_ATTR_TFVC_PROJECT = "tfvc.project"
OTEL_ATTR_TFVC_REQUEST_ID = "tfvc.client_request_id"
OTEL_ATTR_TFVC_SESSION_ID = "tfvc.session_id"
OTEL_ATTR_TFVC_ACTIVITY_ID = "tfvc.activity_id"
