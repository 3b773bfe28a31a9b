import os
from pathlib import Path
from unittest.mock import patch

import pytest

from folio.config.settings import CONFIG_FILENAME, FolioSettings
from folio.exceptions import ConfigLoadError


def test_defaults_without_config_file(tmp_path):
    settings = FolioSettings.load(tmp_path)

    assert settings.site_root == tmp_path
    assert settings.abs_source == tmp_path / "src"
    assert settings.abs_destination == tmp_path / "output"
    assert settings.collections["posts"].permalink == "pretty"
    assert settings.collections["data"].output is False
    assert settings.taxonomies["category"].key == "categories"
    assert settings.defaults == []


def test_load_reads_folio_toml(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text(
        """
url = "https://example.org"
destination = "public"
future = true

[collections.docs]
output = true
permalink = "/docs/:path/"

[[defaults]]
scope = { path = "_docs", collection = "docs" }
values = { layout = "doc" }
""",
        encoding="utf-8",
    )

    settings = FolioSettings.load(tmp_path)

    assert settings.url == "https://example.org"
    assert settings.abs_destination == tmp_path / "public"
    assert settings.future is True
    assert list(settings.collections) == ["docs"]
    assert settings.collections["docs"].permalink == "/docs/:path/"
    assert settings.defaults[0].scope.collection == "docs"
    assert settings.defaults[0].values == {"layout": "doc"}


def test_environment_overrides_config_file(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text('url = "https://from-file.org"\n', encoding="utf-8")

    with patch.dict(os.environ, {"FOLIO_URL": "https://from-env.org"}):
        settings = FolioSettings.load(tmp_path)

    assert settings.url == "https://from-env.org"


def test_invalid_toml_raises_config_load_error(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text("url = \n", encoding="utf-8")

    with pytest.raises(ConfigLoadError, match=CONFIG_FILENAME):
        FolioSettings.load(tmp_path)


def test_invalid_values_raise_config_load_error(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text('future = "sometimes"\n', encoding="utf-8")

    with pytest.raises(ConfigLoadError):
        FolioSettings.load(tmp_path)


def test_absolute_paths_are_kept(tmp_path):
    elsewhere = tmp_path / "elsewhere"
    settings = FolioSettings(site_root=Path("/srv/site"), destination=elsewhere)

    assert settings.abs_destination == elsewhere
    assert settings.abs_source == Path("/srv/site/src")


def test_invalid_environment_values_raise_config_load_error(tmp_path):
    with patch.dict(os.environ, {"FOLIO_FUTURE": "sometimes"}), pytest.raises(ConfigLoadError):
        FolioSettings.load(tmp_path)
