"""Shared fixtures: a throwaway site rooted in ``tmp_path``."""

from __future__ import annotations

from pathlib import Path

import pytest

from folio.config.settings import FolioSettings
from folio.hooks import HookBus
from folio.site import Site
from tests.helpers import BUILD_TIME


@pytest.fixture
def settings(tmp_path: Path) -> FolioSettings:
    return FolioSettings(site_root=tmp_path, url="https://example.com")


@pytest.fixture
def hooks() -> HookBus:
    return HookBus()


@pytest.fixture
def site(settings: FolioSettings, hooks: HookBus) -> Site:
    return Site(settings, time=BUILD_TIME, hooks=hooks)
