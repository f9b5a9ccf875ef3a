# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Tests for API version parsing and negotiation."""

import pytest

from AzureDevOps.Tfvc.core.errors import ValidationError
from AzureDevOps.Tfvc.models.api_version import (
    DEFAULT_API_VERSION,
    ApiResourceLocation,
    ApiResourceVersion,
    negotiate_version,
)


def _location(**overrides):
    values = dict(
        id="bc1f417e-239d-42e7-85e1-76e80cb2d6eb",
        area="tfvc",
        resource_name="branches",
        route_template="{project}/_apis/{area}/{resource}/{*path}",
        resource_version=1,
        min_version="1.0",
        max_version="3.0",
        released_version="2.0",
    )
    values.update(overrides)
    return ApiResourceLocation(**values)


class TestApiResourceVersion:
    """Tests for ApiResourceVersion."""

    def test_parse_released(self):
        version = ApiResourceVersion.parse("2.0")
        assert version.api_version == "2.0"
        assert version.is_preview is False
        assert version.resource_version == 0
        assert str(version) == "2.0"

    def test_parse_preview_with_resource(self):
        version = ApiResourceVersion.parse("2.0-preview.1")
        assert version.is_preview is True
        assert version.resource_version == 1
        assert str(version) == "2.0-preview.1"

    def test_parse_preview_without_resource(self):
        assert str(ApiResourceVersion.parse("4.1-Preview")) == "4.1-preview"

    def test_parse_major_only(self):
        assert ApiResourceVersion.parse("2").api_version == "2.0"

    def test_parse_invalid(self):
        with pytest.raises(ValidationError):
            ApiResourceVersion.parse("latest")

    def test_default_is_one_zero(self):
        assert str(DEFAULT_API_VERSION) == "1.0"


class TestApiResourceLocation:
    """Tests for ApiResourceLocation.from_api_response."""

    def test_from_api_response(self):
        location = ApiResourceLocation.from_api_response(
            {
                "id": "BC1F417E-239D-42E7-85E1-76E80CB2D6EB",
                "area": "tfvc",
                "resourceName": "branches",
                "routeTemplate": "{project}/_apis/{area}/{resource}/{*path}",
                "resourceVersion": 1,
                "minVersion": "1.0",
                "maxVersion": "5.1",
                "releasedVersion": "5.0",
            }
        )
        assert location.id == "bc1f417e-239d-42e7-85e1-76e80cb2d6eb"
        assert location.resource_name == "branches"
        assert location.max_version == "5.1"
        assert location.released_version == "5.0"

    def test_missing_fields_default(self):
        location = ApiResourceLocation.from_api_response({"id": "abc"})
        assert location.resource_version == 0
        assert location.min_version == "1.0"
        assert location.released_version == "0.0"


class TestNegotiateVersion:
    """Tests for negotiate_version."""

    def test_none_requested_uses_default(self):
        assert negotiate_version(_location(), None) == DEFAULT_API_VERSION

    def test_requested_below_minimum(self):
        assert negotiate_version(_location(min_version="2.0"), ApiResourceVersion.parse("1.0")) is None

    def test_requested_above_maximum_falls_back_to_max(self):
        version = negotiate_version(_location(), ApiResourceVersion.parse("4.0"))
        assert str(version) == "3.0-preview"

    def test_above_maximum_released(self):
        version = negotiate_version(_location(released_version="3.0"), ApiResourceVersion.parse("4.0"))
        assert str(version) == "3.0"

    def test_released_version_in_range(self):
        assert str(negotiate_version(_location(), ApiResourceVersion.parse("2.0"))) == "2.0"

    def test_unreleased_version_becomes_preview(self):
        version = negotiate_version(_location(), ApiResourceVersion.parse("2.1"))
        assert version.is_preview is True
        assert str(version) == "2.1-preview"

    def test_resource_version_capped_by_server(self):
        version = negotiate_version(_location(resource_version=2), ApiResourceVersion.parse("3.0-preview.5"))
        assert str(version) == "3.0-preview.2"

    def test_preview_request_stays_preview(self):
        version = negotiate_version(_location(), ApiResourceVersion.parse("2.0-preview.1"))
        assert str(version) == "2.0-preview.1"
