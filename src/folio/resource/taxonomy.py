"""Taxonomy types and terms derived from resource metadata."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from folio.config.settings import TaxonomySettings
    from folio.resource.base import Resource


@dataclass(frozen=True, slots=True)
class TaxonomyType:
    """A classification axis such as categories or tags.

    ``label`` names the axis (``category``) and ``key`` is the metadata key its
    terms are read from (``categories``).
    """

    label: str
    key: str
    title: str | None = None

    @classmethod
    def from_settings(cls, label: str, settings: TaxonomySettings) -> TaxonomyType:
        return cls(label=label, key=settings.key, title=settings.title or label.title())


@dataclass(frozen=True, slots=True, eq=False)
class TaxonomyTerm:
    """A single term of a taxonomy, linked to the resource that declares it."""

    resource: Resource
    label: str
    type: TaxonomyType

    def __repr__(self) -> str:
        return f"<TaxonomyTerm {self.type.label}:{self.label}>"


@dataclass(slots=True)
class TaxonomyEntry:
    type: TaxonomyType
    terms: list[TaxonomyTerm] = field(default_factory=list)

    @property
    def labels(self) -> list[str]:
        return [term.label for term in self.terms]


def _plural_value(mapping: Mapping[str, Any], key: str) -> list[Any]:
    value = mapping.get(key)
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple)):
        return [item for item in value if item is not None]
    return []


def _flatten(values: list[Any]) -> list[Any]:
    flat: list[Any] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            flat.extend(_flatten(list(value)))
        elif value is not None:
            flat.append(value)
    return flat


def pluralized_list_from_mapping(mapping: Mapping[str, Any], singular_key: str, plural_key: str) -> list[Any]:
    """Normalize the singular or plural spelling of a metadata key into one list.

    The singular value wins when it is set; otherwise the plural value is used,
    splitting a plural string on whitespace.

    >>> pluralized_list_from_mapping({"category": "news"}, "category", "categories")
    ['news']
    >>> pluralized_list_from_mapping({"tags": "a b"}, "tag", "tags")
    ['a', 'b']
    """
    value = mapping.get(singular_key)
    if value is not None:
        return _flatten([value])
    return _flatten([_plural_value(mapping, plural_key)])


def terms_from_value(value: Any) -> list[Any]:
    """Wrap a scalar metadata value in a list; ``None`` yields no terms."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [item for item in value if item is not None]
    return [value]
