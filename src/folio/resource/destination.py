"""Output location and public URLs of a resource.

A :class:`Destination` is bound to a resource while it is read, and only when
the resource's collection produces output. URLs come from the resource's
``permalink`` metadata or from the permalink style configured for its
collection.
"""

from __future__ import annotations

import re
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING
from urllib.parse import unquote

from folio.utils import slugify

if TYPE_CHECKING:
    from folio.resource.base import Resource

PERMALINK_STYLES: dict[str, str] = {
    "pretty": "/:categories/:year/:month/:day/:slug/",
    "simple": "/:categories/:slug/",
    "none": "/:categories/:slug.html",
}

_PLACEHOLDER = re.compile(r":([a-z_]+)")
_INDEX_SUFFIX = re.compile(r"index\.html?$")
_HTML_SUFFIX = re.compile(r"\.html?$")


def format_url(url: str | None) -> str:
    """Drop a trailing ``index.html`` or ``.html`` from ``url``.

    >>> format_url("/blog/post/index.html")
    '/blog/post/'
    >>> format_url("/about.html")
    '/about'
    """
    if not url:
        return ""
    return _HTML_SUFFIX.sub("", _INDEX_SUFFIX.sub("", url))


class Destination:
    """Computes where a resource is written and the URLs it is served at."""

    def __init__(self, resource: Resource) -> None:
        self.resource = resource
        self.output_ext = self._permalink_ext() or resource.transformer.final_ext

    def _permalink_ext(self) -> str:
        permalink = self.resource.permalink
        if not permalink or permalink in PERMALINK_STYLES or permalink.endswith("/"):
            return ""
        return PurePosixPath(permalink).suffix

    @property
    def permalink_template(self) -> str:
        explicit = self.resource.permalink
        if explicit:
            return PERMALINK_STYLES.get(explicit, explicit)

        collection = self.resource.collection
        settings = self.resource.site.settings.collections.get(collection.label)
        style = settings.permalink if settings else None
        if style:
            return PERMALINK_STYLES.get(style, style)
        if collection.label == "pages":
            return "/:path/"
        return "/:collection/:path/"

    def _placeholder_values(self) -> dict[str, str]:
        resource = self.resource
        date = resource.date
        path = resource.relative_path_basename_without_prefix()
        if path == "index" or path.endswith("/index"):
            path = path[: -len("index")]
        slug = resource.metadata.get("slug") or slugify(Path(path or "index").name)
        title = resource.metadata.get("title")
        categories = resource.metadata.get("categories") or []
        if isinstance(categories, str):
            categories = categories.split()

        return {
            "year": f"{date.year:04d}",
            "month": f"{date.month:02d}",
            "day": f"{date.day:02d}",
            "slug": str(slug),
            "title": slugify(str(title)) if title else str(slug),
            "categories": "/".join(slugify(str(category)) for category in categories),
            "collection": resource.collection.label,
            "path": path,
            "name": slugify(resource.basename_without_ext),
            "output_ext": self.output_ext,
        }

    @property
    def relative_url(self) -> str:
        values = self._placeholder_values()
        url = _PLACEHOLDER.sub(lambda match: values.get(match.group(1), match.group(0)), self.permalink_template)
        url = "/" + re.sub(r"/{2,}", "/", url).lstrip("/")

        base_path = self.resource.site.settings.base_path.strip("/")
        if base_path:
            url = f"/{base_path}{url}"
        return url

    @property
    def absolute_url(self) -> str:
        return self.resource.site.settings.url.rstrip("/") + self.relative_url

    @property
    def output_path(self) -> Path:
        relative_url = self.relative_url
        path = unquote(relative_url)

        base_path = self.resource.site.settings.base_path.strip("/")
        if base_path and path.startswith(f"/{base_path}/"):
            path = path[len(base_path) + 1 :]

        output = self.resource.site.in_dest_dir(path)
        if relative_url.endswith("/"):
            return output / "index.html"
        if self.output_ext and not output.name.endswith(self.output_ext):
            output = output.with_name(output.name + self.output_ext)
        return output
