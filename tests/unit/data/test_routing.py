# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Tests for route template expansion and query parameter formatting."""

import datetime
import uuid

from AzureDevOps.Tfvc.data._routing import (
    QueryParameters,
    _format_query_value,
    _project_label,
    _replace_route_values,
    _route_values,
    _to_route_dictionary,
)
from AzureDevOps.Tfvc.models.request_data import (
    TfvcChangesetSearchCriteria,
    TfvcVersionDescriptor,
    TfvcVersionType,
    VersionControlRecursionType,
)


class TestFormatQueryValue:
    """Tests for _format_query_value."""

    def test_booleans_are_lowercase(self):
        assert _format_query_value(True) == "true"
        assert _format_query_value(False) == "false"

    def test_enum_uses_wire_value(self):
        assert _format_query_value(VersionControlRecursionType.ONE_LEVEL) == "oneLevel"

    def test_datetime_is_iso(self):
        value = datetime.datetime(2024, 1, 2, 3, 4, 5)
        assert _format_query_value(value) == "2024-01-02T03:04:05"

    def test_numbers_and_uuid(self):
        guid = uuid.UUID("11111111-2222-3333-4444-555555555555")
        assert _format_query_value(42) == "42"
        assert _format_query_value(guid) == "11111111-2222-3333-4444-555555555555"


class TestQueryParameters:
    """Tests for QueryParameters."""

    def test_add_if_not_none_skips_none_only(self):
        params = QueryParameters()
        params.add_if_not_none("includeParent", None)
        params.add_if_not_none("includeChildren", False)
        params.add_if_not_none("$top", 0)

        assert params == {"includeChildren": "false", "$top": "0"}

    def test_add_if_not_empty_skips_empty_strings(self):
        params = QueryParameters()
        params.add_if_not_empty("path", "")
        params.add_if_not_empty("scopePath", None)
        params.add_if_not_empty("fileName", "README.md")

        assert params == {"fileName": "README.md"}

    def test_methods_chain(self):
        params = QueryParameters().add_if_not_none("a", 1).add_if_not_empty("b", "x")
        assert params == {"a": "1", "b": "x"}

    def test_insertion_order_preserved(self):
        params = QueryParameters()
        params.add_if_not_none("$skip", 5)
        params.add_if_not_none("$top", 10)

        assert list(params) == ["$skip", "$top"]

    def test_add_model_flattens_descriptor(self):
        descriptor = TfvcVersionDescriptor(version="1234", version_type=TfvcVersionType.CHANGESET)
        params = QueryParameters().add_model(descriptor)

        assert params == {"version": "1234", "versionType": "changeset"}

    def test_add_model_formats_search_criteria(self):
        criteria = TfvcChangesetSearchCriteria(
            author="jamal",
            follow_renames=True,
            from_id=10,
            item_path="$/Fabrikam",
        )
        params = QueryParameters().add_model(criteria)

        assert params == {
            "author": "jamal",
            "followRenames": "true",
            "fromId": "10",
            "itemPath": "$/Fabrikam",
        }

    def test_add_model_skips_nested_and_empty_values(self):
        params = QueryParameters().add_model({"name": "", "nested": {"a": 1}, "ids": [1, 2], "owner": "me"})
        assert params == {"owner": "me"}

    def test_add_model_none_is_noop(self):
        assert QueryParameters().add_model(None) == {}


class TestRouteValues:
    """Tests for route value helpers."""

    def test_route_values_drop_none_and_stringify(self):
        guid = uuid.UUID("11111111-2222-3333-4444-555555555555")
        assert _route_values(project=guid, id=None, labelId="7") == {
            "project": "11111111-2222-3333-4444-555555555555",
            "labelId": "7",
        }

    def test_project_label(self):
        assert _project_label(None) is None
        assert _project_label("Fabrikam") == "Fabrikam"

    def test_route_dictionary_defaults_area_and_resource(self):
        route = _to_route_dictionary({"project": "Fabrikam", "id": None}, "tfvc", "changesets")
        assert route == {"project": "Fabrikam", "area": "tfvc", "resource": "changesets"}

    def test_route_dictionary_keeps_explicit_area(self):
        route = _to_route_dictionary({"area": "custom"}, "tfvc", "items")
        assert route["area"] == "custom"
        assert route["resource"] == "items"


class TestReplaceRouteValues:
    """Tests for _replace_route_values."""

    TEMPLATE = "{project}/_apis/{area}/{resource}/{id}"

    def test_all_values_present(self):
        url = _replace_route_values(
            self.TEMPLATE, {"project": "Fabrikam", "area": "tfvc", "resource": "changesets", "id": "42"}
        )
        assert url == "Fabrikam/_apis/tfvc/changesets/42"

    def test_missing_segments_removed(self):
        url = _replace_route_values(self.TEMPLATE, {"area": "tfvc", "resource": "changesets"})
        assert url == "_apis/tfvc/changesets"

    def test_empty_value_removes_segment(self):
        url = _replace_route_values(self.TEMPLATE, {"project": "", "area": "tfvc", "resource": "changesets"})
        assert url == "_apis/tfvc/changesets"

    def test_wildcard_segment(self):
        url = _replace_route_values("_apis/{area}/{*path}", {"area": "tfvc", "path": "Main"})
        assert url == "_apis/tfvc/Main"

    def test_literal_segments_kept(self):
        url = _replace_route_values(
            "_apis/{area}/labels/{labelId}/items", {"area": "tfvc", "labelId": "3"}
        )
        assert url == "_apis/tfvc/labels/3/items"
