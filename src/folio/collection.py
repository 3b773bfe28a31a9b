"""Collections group the resources of a site."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from folio.config.settings import CollectionSettings
from folio.resource.base import Resource
from folio.resource.ordering import sort_resources
from folio.resource.origin import DATA_EXTENSIONS, has_front_matter
from folio.resource.transformer import HTML_EXTENSIONS
from folio.static_file import StaticFile

if TYPE_CHECKING:
    from folio.site import Site

logger = logging.getLogger(__name__)

PAGES_LABEL = "pages"
DATA_LABEL = "data"


class Collection:
    """A labelled set of resources read from one source folder.

    ``pages`` live directly in the source directory (skipping ``_`` and ``.``
    prefixed folders); every other collection lives in ``_<label>``.

    Markdown, HTML and data files become resources, as does any file opening
    with front matter. Other files of collections with output are kept as
    :class:`StaticFile` and copied unchanged.
    """

    def __init__(self, site: Site, label: str, settings: CollectionSettings | None = None) -> None:
        self.site = site
        self.label = label
        self.settings = settings or CollectionSettings()
        self.resources: list[Resource] = []
        self.static_files: list[StaticFile] = []

    @property
    def is_data(self) -> bool:
        return self.label == DATA_LABEL

    @property
    def output(self) -> bool:
        return self.settings.output and not self.is_data

    @property
    def directory(self) -> Path:
        if self.label == PAGES_LABEL:
            return self.site.source
        return self.site.source / f"_{self.label}"

    def _source_files(self) -> list[Path]:
        directory = self.directory
        if not directory.is_dir():
            return []
        files = []
        for path in sorted(directory.rglob("*")):
            if not path.is_file():
                continue
            relative_parts = path.relative_to(directory).parts
            if any(part.startswith((".", "_")) for part in relative_parts):
                continue
            files.append(path)
        return files

    def is_resource_file(self, path: Path) -> bool:
        suffix = path.suffix.lower()
        markdown_ext = [ext.lower() for ext in self.site.settings.markdown_ext]
        if suffix in markdown_ext or suffix in HTML_EXTENSIONS:
            return True
        if self.is_data and suffix in DATA_EXTENSIONS:
            return True
        return has_front_matter(path)

    def read(self) -> Collection:
        """Build, read and sort the resources found in :attr:`directory`."""
        resources = []
        static_files = []
        for path in self._source_files():
            if self.is_resource_file(path):
                resource = Resource.new_from_path(path, site=self.site, collection=self)
                resources.append(resource.read())
            elif self.output:
                static_files.append(StaticFile(self, path))
        self.resources = sort_resources(resources)
        self.static_files = static_files
        logger.debug(
            "Read %d resources and %d static files into collection %s",
            len(self.resources),
            len(self.static_files),
            self.label,
        )
        return self

    def filtered_resources(self) -> list[Resource]:
        """Resources that will be written in this build."""
        return [resource for resource in self.resources if resource.is_writable]

    def __repr__(self) -> str:
        return f"<Collection {self.label} ({len(self.resources)} resources)>"
