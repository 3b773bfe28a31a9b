"""Configuration models and loading."""

from folio.config.settings import (
    CollectionSettings,
    DefaultsRule,
    DefaultsScope,
    FolioSettings,
    TaxonomySettings,
)

__all__ = [
    "CollectionSettings",
    "DefaultsRule",
    "DefaultsScope",
    "FolioSettings",
    "TaxonomySettings",
]
