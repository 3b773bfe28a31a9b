"""Rendering of resource content into output."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jinja2 import Environment, StrictUndefined, TemplateError
from markdown_it import MarkdownIt

from folio.exceptions import TransformError
from folio.utils import slugify

if TYPE_CHECKING:
    from folio.resource.base import Resource

logger = logging.getLogger(__name__)

HTML_EXTENSIONS = (".html", ".htm")

_md = MarkdownIt("commonmark", {"html": True})


def _build_environment() -> Environment:
    env = Environment(autoescape=False, undefined=StrictUndefined, keep_trailing_newline=True)
    env.filters["slugify"] = slugify
    return env


_env = _build_environment()


class Transformer:
    """Renders a resource's content as a Jinja2 template, then as Markdown.

    ``process`` fires ``pre_render`` and ``post_render`` hooks on the resource.
    """

    def __init__(self, resource: Resource) -> None:
        self.resource = resource

    @property
    def markdown_ext(self) -> list[str]:
        return [ext.lower() for ext in self.resource.site.settings.markdown_ext]

    @property
    def is_markdown(self) -> bool:
        return self.resource.extname.lower() in self.markdown_ext

    @property
    def final_ext(self) -> str:
        ext = self.resource.extname.lower()
        if ext in self.markdown_ext or ext in HTML_EXTENSIONS:
            return ".html"
        return self.resource.extname

    def render_template(self, content: str) -> str:
        resource = self.resource
        try:
            template = _env.from_string(content)
            return template.render(resource=resource, metadata=resource.metadata, site=resource.site)
        except TemplateError as exc:
            logger.error("Template error in %s: %s", resource.relative_path, exc)
            raise TransformError(str(resource.relative_path), f"template error: {exc}") from exc

    def process(self) -> None:
        resource = self.resource
        with resource.around_hook("render"):
            content = resource.content or ""
            if resource.site.settings.render_templates and resource.metadata.get("render_with_templates", True):
                content = self.render_template(content)
            if self.is_markdown:
                content = _md.render(content)
            resource.content = content
            resource.output = content
