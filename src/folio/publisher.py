"""Decides whether a resource should be published in this build."""

from __future__ import annotations

from datetime import UTC, date, datetime, time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from folio.resource.base import Resource
    from folio.site import Site


def _timestamp(value: date) -> float:
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.timestamp()


class Publisher:
    def __init__(self, site: Site) -> None:
        self.site = site

    def publish(self, resource: Resource) -> bool:
        return self.can_be_published(resource) and not self.hidden_in_the_future(resource)

    def can_be_published(self, resource: Resource) -> bool:
        return resource.metadata.get("published", True) is not False or self.site.settings.unpublished

    def hidden_in_the_future(self, resource: Resource) -> bool:
        if self.site.settings.future:
            return False
        return int(_timestamp(resource.date)) > int(_timestamp(self.site.time))
