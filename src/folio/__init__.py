"""folio: content resources for static site builds."""

from folio.collection import Collection
from folio.config.settings import FolioSettings
from folio.exceptions import FolioError
from folio.hooks import HookBus
from folio.resource import MetadataMap, Resource, compare, sort_resources
from folio.site import Site

__all__ = [
    "Collection",
    "FolioError",
    "FolioSettings",
    "HookBus",
    "MetadataMap",
    "Resource",
    "Site",
    "compare",
    "sort_resources",
]
