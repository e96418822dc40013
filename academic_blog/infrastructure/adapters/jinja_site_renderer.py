"""Jinja2 site renderer adapter.

Infrastructure adapter that implements ISiteRenderer with Jinja2 layouts
and Python-Markdown.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence

import markdown
from academic_blog.domain.interfaces import ISiteRenderer
from academic_blog.domain.value_objects import Document, SiteConfig
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_TEMPLATES_PATH = Path(__file__).parent.parent / "templates"

MARKDOWN_EXTENSIONS = ("fenced_code", "tables", "toc")


class RenderError(Exception):
    """Raised when a document or layout cannot be rendered."""

    pass


class JinjaSiteRenderer(ISiteRenderer):
    """Renders documents to HTML pages.

    The Markdown body is itself treated as a Jinja2 template, so notebooks
    can embed values produced at build time (e.g. ``{{ training.final_loss }}``)
    before it is converted to HTML and wrapped in its layout.
    """

    INDEX_TEMPLATE = "index.html"

    def __init__(self, templates_path: str | Path | None = None) -> None:
        """Initialize the renderer.

        Args:
            templates_path: Directory with layout templates (optional)
        """
        self._templates_path = Path(templates_path or DEFAULT_TEMPLATES_PATH)
        self._env = Environment(
            loader=FileSystemLoader(str(self._templates_path)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Bodies are Markdown, escaping would mangle code blocks
        self._body_env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["format_date"] = _format_date
        self._body_env.filters["format_date"] = _format_date

    def expand_body(self, source: str, context: dict[str, Any] | None = None) -> str:
        """Expand the template expressions of a Markdown body.

        Returns:
            Markdown source with every expression filled in
        """
        try:
            return self._body_env.from_string(source).render(**(context or {}))
        except TemplateError as e:
            raise RenderError(f"Failed to render document body: {e}") from e

    def render_markdown(self, source: str, context: dict[str, Any] | None = None) -> str:
        """Render a Markdown body (with template expressions) to HTML.

        Args:
            source: Markdown source
            context: Template variables

        Returns:
            HTML fragment
        """
        expanded = self.expand_body(source, context)
        return markdown.markdown(expanded, extensions=list(MARKDOWN_EXTENSIONS))

    def render_document(
        self,
        document: Document,
        site: SiteConfig,
        context: dict[str, Any] | None = None,
    ) -> str:
        """Render a document inside the layout named by its front matter."""
        template_context: dict[str, Any] = {
            "site": site,
            "page": document,
            "training": None,
            "comparison": None,
        }
        template_context.update(context or {})

        content = self.render_markdown(document.body, template_context)
        template_name = f"{document.front_matter.layout}.html"

        _LOGGER.debug("Rendering %s with layout %s", document.slug, template_name)
        return self._render_template(template_name, content=content, **template_context)

    def render_index(self, documents: Sequence[Document], site: SiteConfig) -> str:
        """Render the post listing."""
        return self._render_template(
            self.INDEX_TEMPLATE,
            site=site,
            posts=list(documents),
            page=None,
        )

    def _render_template(self, template_name: str, **context: Any) -> str:
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise RenderError(
                f"Layout template not found: {template_name} in {self._templates_path}"
            ) from e
        try:
            return template.render(generated_at=datetime.now(), **context)
        except TemplateError as e:
            raise RenderError(f"Failed to render {template_name}: {e}") from e


def _format_date(value: Any, fmt: str = "%B %d, %Y") -> str:
    return value.strftime(fmt)
