"""Build-wide state shared by every resource."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from folio.collection import Collection
from folio.config.settings import FolioSettings
from folio.defaults import FrontmatterDefaults
from folio.hooks import HookBus
from folio.publisher import Publisher
from folio.resource.base import Resource
from folio.resource.ordering import sort_resources
from folio.resource.taxonomy import TaxonomyType

logger = logging.getLogger(__name__)


class Site:
    """Holds configuration, collections and the collaborators resources use.

    The site is only read from while resources are processed.
    """

    def __init__(
        self,
        settings: FolioSettings,
        *,
        time: datetime | None = None,
        hooks: HookBus | None = None,
    ) -> None:
        self.settings = settings
        self.time = time or datetime.now(ZoneInfo(settings.timezone) if settings.timezone else UTC)
        self.hooks = hooks or HookBus()
        self.frontmatter_defaults = FrontmatterDefaults(settings.defaults)
        self.publisher = Publisher(self)
        self.taxonomy_types: dict[str, TaxonomyType] = {
            label: TaxonomyType.from_settings(label, taxonomy) for label, taxonomy in settings.taxonomies.items()
        }
        self.collections: dict[str, Collection] = {
            label: Collection(self, label, collection) for label, collection in settings.collections.items()
        }

    @property
    def source(self) -> Path:
        return self.settings.abs_source

    @property
    def destination(self) -> Path:
        return self.settings.abs_destination

    def in_dest_dir(self, path: str) -> Path:
        """Return ``path`` resolved inside the destination directory."""
        relative = str(path).lstrip("/")
        return self.destination / relative if relative else self.destination

    @property
    def resources(self) -> list[Resource]:
        """All resources of every collection in site order."""
        return sort_resources(
            resource for collection in self.collections.values() for resource in collection.resources
        )

    def read(self) -> None:
        for collection in self.collections.values():
            collection.read()
        logger.info("Read %d resources", len(self.resources))

    def transform(self) -> None:
        for collection in self.collections.values():
            for resource in collection.resources:
                resource.transform()

    def write(self) -> int:
        written = 0
        copied = 0
        for collection in self.collections.values():
            for resource in collection.filtered_resources():
                resource.write()
                written += 1
            for static_file in collection.static_files:
                static_file.write()
                copied += 1
        logger.info("Wrote %d resources and copied %d static files to %s", written, copied, self.destination)
        return written + copied

    def process(self) -> int:
        """Read, transform and write the whole site; return the number of files written."""
        self.read()
        self.transform()
        return self.write()
