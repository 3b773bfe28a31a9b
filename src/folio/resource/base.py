"""The content resource and its build lifecycle.

A resource is created bound to an origin and a site, then moves through
``read`` -> ``transform`` -> ``write``. Hooks fire on the collection's label and
on the global ``resources`` owner at each step.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, datetime
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Any

from dateutil import parser as date_parser

from folio.exceptions import DestinationNotBoundError, TypeMismatchError
from folio.resource.destination import Destination, format_url
from folio.resource.inference import match_date_and_slug, parse_date, strip_date_prefix
from folio.resource.metadata import MetadataMap
from folio.resource.ordering import compare
from folio.resource.origin import FileOrigin
from folio.resource.taxonomy import TaxonomyEntry, TaxonomyTerm, pluralized_list_from_mapping, terms_from_value
from folio.resource.transformer import Transformer

if TYPE_CHECKING:
    from folio.resource.ports import Collection, HookTrigger, Origin, Site

logger = logging.getLogger(__name__)

GLOBAL_HOOK_OWNER = "resources"


class Resource:
    """A single document moving through the build pipeline."""

    def __init__(self, *, site: Site, origin: Origin, hooks: HookTrigger | None = None) -> None:
        self.site = site
        self.hooks = hooks if hooks is not None else site.hooks
        self._origin = origin.attach_resource(self)
        self._destination: Destination | None = None
        self._transformer: Transformer | None = None
        self._taxonomies: dict[str, TaxonomyEntry] | None = None

        self.content: str | None = None
        self.untransformed_content: str | None = None
        self.output: str | None = None
        self.metadata = MetadataMap()

        self.trigger_hooks("post_init")

    @classmethod
    def new_from_path(cls, path: str | Path, *, site: Site, collection: Collection) -> Resource:
        return cls(site=site, origin=FileOrigin(collection=collection, original_path=path))

    # --- collaborators -------------------------------------------------

    @property
    def origin(self) -> Origin:
        return self._origin

    @property
    def destination(self) -> Destination | None:
        return self._destination

    @property
    def collection(self) -> Collection:
        return self._origin.collection

    @property
    def relative_path(self) -> PurePath:
        return self._origin.relative_path

    @property
    def transformer(self) -> Transformer:
        if self._transformer is None:
            self._transformer = Transformer(self)
        return self._transformer

    @property
    def metadata(self) -> MetadataMap:
        return self._metadata

    @metadata.setter
    def metadata(self, new_metadata: MetadataMap) -> None:
        if not isinstance(new_metadata, MetadataMap):
            raise TypeMismatchError(type(self).__name__, type(new_metadata).__name__)
        new_metadata.resolver = self._resolve_default
        self._metadata = new_metadata

    def _resolve_default(self, key: str) -> Any:
        value = self.site.frontmatter_defaults.find(str(self.relative_path), self.collection.label, key)
        if value is None and key == "date":
            return self.site.time
        return value

    # --- lifecycle -----------------------------------------------------

    def read(self) -> Resource:
        self._origin.read()

        if not self.collection.is_data:
            self.untransformed_content = self.content
            self.determine_slug_and_date()
            self.normalize_categories_and_tags()
            self.import_taxonomies_from_metadata()

        if self.requires_destination:
            self._destination = Destination(self)

        self.trigger_hooks("post_read")
        return self

    def transform(self) -> None:
        if not self.collection.is_data:
            self.transformer.process()

    def write(self) -> None:
        """Write the rendered output to the bound destination."""
        if self._destination is None:
            raise DestinationNotBoundError(self.path)

        path = Path(self._destination.output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.debug("Writing: %s", path)
        output = self.output or ""
        path.write_bytes(output.encode("utf-8") if isinstance(output, str) else output)

        self.trigger_hooks("post_write")

    # --- derived metadata ----------------------------------------------

    def determine_slug_and_date(self) -> None:
        matched = match_date_and_slug(self.relative_path)
        if matched is None:
            return

        date_string, slug = matched
        self.modify_date(date_string)
        if "slug" not in self.metadata:
            self.metadata["slug"] = slug

    def modify_date(self, date_string: str) -> None:
        current = self.metadata.get("date")
        if current is None or self._is_build_time(current):
            self.metadata["date"] = parse_date(
                date_string,
                path=str(self.relative_path),
                origin=str(self._origin),
                tz=self.site.time.tzinfo,
            )

    def _is_build_time(self, value: Any) -> bool:
        if not isinstance(value, datetime):
            return False
        return int(value.timestamp()) == int(self.site.time.timestamp())

    def normalize_categories_and_tags(self) -> None:
        self.metadata["categories"] = pluralized_list_from_mapping(self.metadata, "category", "categories")
        self.metadata["tags"] = pluralized_list_from_mapping(self.metadata, "tag", "tags")

    @property
    def taxonomies(self) -> dict[str, TaxonomyEntry]:
        if self._taxonomies is None:
            self._taxonomies = {
                label: TaxonomyEntry(type=taxonomy) for label, taxonomy in self.site.taxonomy_types.items()
            }
        return self._taxonomies

    def import_taxonomies_from_metadata(self) -> None:
        for entry in self.taxonomies.values():
            for term in terms_from_value(self.metadata.get(entry.type.key)):
                entry.terms.append(TaxonomyTerm(resource=self, label=str(term), type=entry.type))

    # --- hooks ---------------------------------------------------------

    def trigger_hooks(self, event: str, *args: Any) -> None:
        collection = self._origin.collection
        if collection is not None:
            self.hooks.trigger(collection.label, event, self, *args)
        self.hooks.trigger(GLOBAL_HOOK_OWNER, event, self, *args)

    @contextmanager
    def around_hook(self, suffix: str) -> Iterator[None]:
        self.trigger_hooks(f"pre_{suffix}")
        yield
        self.trigger_hooks(f"post_{suffix}")

    # --- paths and URLs ------------------------------------------------

    @property
    def path(self) -> str:
        original_path = getattr(self._origin, "original_path", None)
        return str(original_path if original_path is not None else self.relative_path)

    @property
    def basename_without_ext(self) -> str:
        return PurePath(self.relative_path).stem

    @property
    def extname(self) -> str:
        return PurePath(self.relative_path).suffix

    def relative_path_basename_without_prefix(self) -> str:
        """Relative path without ``_``-prefixed folders, date prefixes or extension."""
        parts = [
            strip_date_prefix(part) for part in PurePath(self.relative_path).parts if not part.startswith("_")
        ]
        if not parts:
            return ""
        path = PurePath(*parts)
        return path.with_suffix("").as_posix() if path.suffix else path.as_posix()

    @property
    def permalink(self) -> str | None:
        return self.metadata.get("permalink")

    @property
    def absolute_url(self) -> str:
        return format_url(self._destination.absolute_url if self._destination else None)

    @property
    def relative_url(self) -> str:
        return format_url(self._destination.relative_url if self._destination else None)

    @property
    def id(self) -> str:
        return self.relative_url

    @property
    def date(self) -> datetime | date:
        value = self.metadata.get("date")
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            try:
                return date_parser.parse(value)
            except (ValueError, OverflowError):
                logger.warning("Ignoring unparseable date %r in %s", value, self.relative_path)
        return self.site.time

    # --- publishing ----------------------------------------------------

    @property
    def requires_destination(self) -> bool:
        return bool(self.collection.output)

    @property
    def is_writable(self) -> bool:
        return bool(self.collection is not None and self.collection.output and self.site.publisher.publish(self))

    # --- neighbours ----------------------------------------------------

    def _position(self) -> int | None:
        for index, item in enumerate(self.collection.resources):
            if item is self:
                return index
        return None

    def next_resource(self) -> Resource | None:
        resources = self.collection.resources
        pos = self._position()
        if pos is not None and pos < len(resources) - 1:
            return resources[pos + 1]
        return None

    def previous_resource(self) -> Resource | None:
        pos = self._position()
        if pos:
            return self.collection.resources[pos - 1]
        return None

    # --- comparison ----------------------------------------------------

    def __lt__(self, other: object) -> bool:
        cmp = compare(self, other)
        return NotImplemented if cmp is None else cmp < 0

    def __le__(self, other: object) -> bool:
        cmp = compare(self, other)
        return NotImplemented if cmp is None else cmp <= 0

    def __gt__(self, other: object) -> bool:
        cmp = compare(self, other)
        return NotImplemented if cmp is None else cmp > 0

    def __ge__(self, other: object) -> bool:
        cmp = compare(self, other)
        return NotImplemented if cmp is None else cmp >= 0

    def __str__(self) -> str:
        return self.output or self.content or ""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {PurePath(self.relative_path).as_posix()}>"
