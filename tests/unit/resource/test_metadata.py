from unittest.mock import Mock

import pytest

from folio.exceptions import TypeMismatchError
from folio.resource.metadata import MetadataMap


def test_explicit_value_is_returned_without_consulting_resolver():
    resolver = Mock(return_value="fallback")
    meta = MetadataMap({"title": "Hello"}, resolver=resolver)

    assert meta["title"] == "Hello"
    assert meta.get("title") == "Hello"
    resolver.assert_not_called()


def test_missing_key_is_resolved_on_every_lookup_and_never_stored():
    resolver = Mock(side_effect=["first", "second"])
    meta = MetadataMap({}, resolver=resolver)

    assert meta["layout"] == "first"
    assert meta.get("layout") == "second"
    assert resolver.call_count == 2
    assert "layout" not in meta
    assert dict(meta) == {}


def test_assignment_shadows_the_default_permanently():
    """
    Given a key answered by the resolver
    When the key is assigned explicitly
    Then later lookups return the assigned value and the resolver is not asked again.
    """
    resolver = Mock(return_value="Default Title")
    meta = MetadataMap({}, resolver=resolver)
    assert meta.get("title") == "Default Title"
    resolver.reset_mock()

    meta["title"] = "Mine"

    assert meta.get("title") == "Mine"
    assert meta["title"] == "Mine"
    resolver.assert_not_called()


def test_get_falls_back_to_default_argument_when_nothing_resolves():
    meta = MetadataMap({}, resolver=lambda key: None)
    assert meta.get("missing", "x") == "x"
    assert meta["missing"] is None


def test_map_without_resolver_returns_none_for_missing_keys():
    meta = MetadataMap()
    assert meta["anything"] is None
    assert meta.get("anything") is None


def test_explicit_returns_only_assigned_keys_in_order():
    meta = MetadataMap({"b": 1, "a": 2}, resolver=lambda key: "default")
    meta["c"] = 3
    assert list(meta.explicit()) == ["b", "a", "c"]


def test_non_mapping_data_raises_type_mismatch_naming_the_owner():
    with pytest.raises(TypeMismatchError, match="Resource metadata should be of type MetadataMap") as excinfo:
        MetadataMap([("title", "x")], owner="Resource")

    assert excinfo.value.owner == "Resource"
    assert excinfo.value.received == "list"
