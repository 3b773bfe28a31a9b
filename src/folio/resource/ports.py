from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from folio.config.settings import FolioSettings
    from folio.resource.base import Resource
    from folio.resource.taxonomy import TaxonomyType


@runtime_checkable
class Collection(Protocol):
    """A group of resources sharing output and data semantics."""

    label: str

    @property
    def output(self) -> bool: ...

    @property
    def is_data(self) -> bool: ...

    @property
    def resources(self) -> Sequence[Resource]: ...


@runtime_checkable
class Origin(Protocol):
    """Locates and reads the raw source of a resource."""

    @property
    def collection(self) -> Collection: ...

    @property
    def relative_path(self) -> PurePath: ...

    def attach_resource(self, resource: Resource) -> Origin: ...

    def read(self) -> None:
        """Populate the attached resource's content and metadata.

        Raises ``SourceReadError`` when the source cannot be read.
        """
        ...


@runtime_checkable
class DefaultsResolver(Protocol):
    def find(self, path: str, collection_label: str, key: str) -> Any: ...


@runtime_checkable
class Publisher(Protocol):
    def publish(self, resource: Resource) -> bool: ...


@runtime_checkable
class HookTrigger(Protocol):
    def trigger(self, owner: str, event: str, resource: Any, *args: Any) -> None: ...


@runtime_checkable
class Site(Protocol):
    """Build-wide state a resource reads from."""

    time: datetime
    settings: FolioSettings
    frontmatter_defaults: DefaultsResolver
    taxonomy_types: dict[str, TaxonomyType]
    publisher: Publisher
    hooks: HookTrigger

    def in_dest_dir(self, path: str) -> Path: ...


@runtime_checkable
class Transformer(Protocol):
    @property
    def final_ext(self) -> str: ...

    def process(self) -> None: ...
