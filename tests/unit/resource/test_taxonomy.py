import pytest

from folio.config.settings import TaxonomySettings
from folio.resource.metadata import MetadataMap
from folio.resource.taxonomy import TaxonomyType, pluralized_list_from_mapping, terms_from_value


@pytest.mark.parametrize(
    ("mapping", "expected"),
    [
        ({"category": "news"}, ["news"]),
        ({"categories": "news sports"}, ["news", "sports"]),
        ({"categories": ["news", None, "sports"]}, ["news", "sports"]),
        ({"category": "news", "categories": ["sports"]}, ["news"]),
        ({"category": None, "categories": "news sports"}, ["news", "sports"]),
        ({"category": ["a", "b"]}, ["a", "b"]),
        ({}, []),
    ],
)
def test_pluralized_list_from_mapping(mapping, expected):
    assert pluralized_list_from_mapping(mapping, "category", "categories") == expected


def test_pluralized_list_reads_resolved_defaults():
    meta = MetadataMap({}, resolver=lambda key: "from-defaults" if key == "tags" else None)
    assert pluralized_list_from_mapping(meta, "tag", "tags") == ["from-defaults"]


def test_terms_from_value_wraps_scalars():
    assert terms_from_value("news") == ["news"]
    assert terms_from_value(["a", None, "b"]) == ["a", "b"]
    assert terms_from_value(None) == []


def test_taxonomy_type_from_settings_titles_label():
    taxonomy = TaxonomyType.from_settings("genre", TaxonomySettings(key="genres"))
    assert taxonomy == TaxonomyType(label="genre", key="genres", title="Genre")
