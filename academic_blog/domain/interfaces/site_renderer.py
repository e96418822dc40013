"""Site renderer interface.

Contract for turning documents into HTML.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from academic_blog.domain.value_objects import Document, SiteConfig


class ISiteRenderer(ABC):
    """Contract for HTML rendering operations."""

    @abstractmethod
    def render_document(
        self,
        document: Document,
        site: SiteConfig,
        context: dict[str, Any] | None = None,
    ) -> str:
        """Render a document inside its layout.

        Args:
            document: Document to render
            site: Site configuration exposed to templates
            context: Extra template variables (e.g. training results)

        Returns:
            Complete HTML page

        Raises:
            RenderError: If the body or layout template fails
        """
        pass

    @abstractmethod
    def render_index(self, documents: Sequence[Document], site: SiteConfig) -> str:
        """Render the list of posts.

        Args:
            documents: Posts to list, in display order
            site: Site configuration

        Returns:
            Complete HTML page
        """
        pass
