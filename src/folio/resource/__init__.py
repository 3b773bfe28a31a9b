"""Content resources and the pieces derived from their metadata."""

from folio.resource.base import Resource
from folio.resource.destination import Destination, format_url
from folio.resource.metadata import MetadataMap
from folio.resource.ordering import compare, sort_resources
from folio.resource.origin import FileOrigin
from folio.resource.taxonomy import TaxonomyEntry, TaxonomyTerm, TaxonomyType
from folio.resource.transformer import Transformer

__all__ = [
    "Destination",
    "FileOrigin",
    "MetadataMap",
    "Resource",
    "TaxonomyEntry",
    "TaxonomyTerm",
    "TaxonomyType",
    "Transformer",
    "compare",
    "format_url",
    "sort_resources",
]
