"""Origins read the raw source of a resource from the file system."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml

from folio.exceptions import SourceReadError
from folio.resource.metadata import MetadataMap

if TYPE_CHECKING:
    from folio.collection import Collection
    from folio.resource.base import Resource

logger = logging.getLogger(__name__)

DATA_EXTENSIONS = (".yml", ".yaml", ".json")

_FRONT_MATTER_START = re.compile(rb"---[ \t]*\r?\n")


def has_front_matter(path: Path) -> bool:
    """Return whether the file at ``path`` opens with a YAML front matter fence."""
    try:
        with path.open("rb") as f:
            head = f.read(8)
    except OSError as exc:
        raise SourceReadError(str(path), str(exc)) from exc
    return _FRONT_MATTER_START.match(head) is not None


def parse_frontmatter(content: str, *, path: str) -> tuple[dict[str, Any], str]:
    """Split YAML front matter from a document body using python-frontmatter.

    Raises:
        SourceReadError: If the front matter is not valid YAML or not a mapping.

    """
    try:
        parsed = frontmatter.loads(content)
    except (yaml.YAMLError, ValueError) as exc:
        raise SourceReadError(path, f"invalid front matter: {exc}") from exc

    metadata = parsed.metadata or {}
    if not isinstance(metadata, dict):
        raise SourceReadError(path, f"front matter is not a mapping: {type(metadata).__name__}")

    body = parsed.content if isinstance(parsed.content, str) else str(parsed.content)
    return dict(metadata), body


def parse_data_file(content: str, *, path: str, suffix: str) -> dict[str, Any]:
    """Parse a YAML or JSON data file; top-level lists are exposed under ``rows``."""
    try:
        data = json.loads(content) if suffix == ".json" else yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SourceReadError(path, f"invalid data file: {exc}") from exc

    if data is None:
        return {}
    if isinstance(data, list):
        return {"rows": data}
    if not isinstance(data, dict):
        raise SourceReadError(path, f"data file must hold a mapping or a list, got {type(data).__name__}")
    return data


class FileOrigin:
    """Reads a resource from a file inside the site source directory."""

    def __init__(self, collection: Collection, original_path: str | Path) -> None:
        self.collection = collection
        self.original_path = Path(original_path)
        self.resource: Resource | None = None

    def attach_resource(self, resource: Resource) -> FileOrigin:
        self.resource = resource
        return self

    @property
    def relative_path(self) -> PurePath:
        try:
            return self.original_path.relative_to(self.collection.site.source)
        except ValueError:
            return self.original_path

    def read(self) -> None:
        if self.resource is None:
            msg = "FileOrigin must be attached to a resource before reading"
            raise RuntimeError(msg)

        path = str(self.original_path)
        logger.debug("Reading: %s", path)
        try:
            raw = self.original_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(path, str(exc)) from exc

        suffix = self.original_path.suffix.lower()
        if self.collection.is_data and suffix in DATA_EXTENSIONS:
            self.resource.metadata = MetadataMap(parse_data_file(raw, path=path, suffix=suffix))
            self.resource.content = ""
        else:
            metadata, body = parse_frontmatter(raw, path=path)
            self.resource.metadata = MetadataMap(metadata)
            self.resource.content = body

    def __str__(self) -> str:
        return f"file origin at {self.original_path}"

    def __repr__(self) -> str:
        return f"<FileOrigin {self.original_path}>"
