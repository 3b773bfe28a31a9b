"""Helpers for building sources and resources in tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from folio.resource.base import Resource
from folio.site import Site

BUILD_TIME = datetime(2025, 6, 1, 12, 0, 0, tzinfo=UTC)


def write_source(site: Site, relative_path: str, text: str) -> Path:
    """Create a source file under the site's source directory."""
    path = site.source / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def make_resource(site: Site, relative_path: str, text: str = "", collection: str = "posts") -> Resource:
    """Write a source file and build an unread resource for it."""
    path = write_source(site, relative_path, text)
    return Resource.new_from_path(path, site=site, collection=site.collections[collection])
