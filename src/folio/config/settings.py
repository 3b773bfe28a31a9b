"""Site configuration for folio.

Settings come from ``folio.toml`` in the site root, overridden by environment
variables of the form ``FOLIO_SECTION__KEY`` (e.g. ``FOLIO_URL`` or
``FOLIO_COLLECTIONS__POSTS__OUTPUT``).
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from folio.exceptions import ConfigLoadError

CONFIG_FILENAME = "folio.toml"


def _deep_merge(destination: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and key in destination and isinstance(destination[key], Mapping):
            destination[key] = _deep_merge(dict(destination[key]), dict(value))
        else:
            destination[key] = value
    return destination


class CollectionSettings(BaseModel):
    """Per-collection configuration."""

    output: bool = Field(default=False, description="Whether resources of the collection are written")
    permalink: str | None = Field(default=None, description="Permalink style or template")


class TaxonomySettings(BaseModel):
    """A taxonomy axis, keyed in metadata by ``key``."""

    key: str
    title: str | None = None


class DefaultsScope(BaseModel):
    path: str = ""
    collection: str | None = None


class DefaultsRule(BaseModel):
    """Front matter values applied to every resource within ``scope``."""

    scope: DefaultsScope = Field(default_factory=DefaultsScope)
    values: dict[str, Any] = Field(default_factory=dict)


def _default_collections() -> dict[str, CollectionSettings]:
    return {
        "posts": CollectionSettings(output=True, permalink="pretty"),
        "pages": CollectionSettings(output=True, permalink="/:path/"),
        "data": CollectionSettings(output=False),
    }


def _default_taxonomies() -> dict[str, TaxonomySettings]:
    return {
        "category": TaxonomySettings(key="categories", title="Category"),
        "tag": TaxonomySettings(key="tags", title="Tag"),
    }


class FolioSettings(BaseSettings):
    """Root configuration of a folio site.

    All relative paths are resolved against ``site_root``.
    """

    site_root: Path = Field(default_factory=Path.cwd)
    source: Path = Field(default=Path("src"), description="Directory holding one folder per collection")
    destination: Path = Field(default=Path("output"), description="Directory written to by the build")
    url: str = Field(default="", description="Scheme and host prepended to absolute URLs")
    base_path: str = Field(default="/", description="Path prefix the site is served under")
    timezone: str | None = None
    future: bool = Field(default=False, description="Publish resources dated after the build time")
    unpublished: bool = Field(default=False, description="Publish resources marked 'published: false'")
    render_templates: bool = Field(default=True, description="Render resource content as a Jinja2 template")
    markdown_ext: list[str] = Field(default_factory=lambda: [".md", ".markdown"])
    collections: dict[str, CollectionSettings] = Field(default_factory=_default_collections)
    taxonomies: dict[str, TaxonomySettings] = Field(default_factory=_default_taxonomies)
    defaults: list[DefaultsRule] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="FOLIO_",
        env_nested_delimiter="__",
    )

    @property
    def abs_source(self) -> Path:
        return self._resolve(self.source)

    @property
    def abs_destination(self) -> Path:
        return self._resolve(self.destination)

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path

    @classmethod
    def load(cls, site_root: Path | None = None) -> FolioSettings:
        """Load configuration from ``folio.toml`` and environment variables.

        Priority (highest to lowest):
        1. Environment variables (FOLIO_SECTION__KEY)
        2. Config file (folio.toml)
        3. Defaults
        """
        root_path = site_root if site_root is not None else Path.cwd()
        config_file = root_path / CONFIG_FILENAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            try:
                with config_file.open("rb") as f:
                    file_settings = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                raise ConfigLoadError(str(config_file), str(exc)) from exc

        try:
            env_settings = cls().model_dump(exclude_unset=True)
            merged_config = _deep_merge(file_settings, env_settings)
            merged_config["site_root"] = root_path
            return cls.model_validate(merged_config)
        except (ValidationError, SettingsError) as exc:
            raise ConfigLoadError(str(config_file), str(exc)) from exc
