"""Content repository interface.

Contract for loading site configuration and documents.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from academic_blog.domain.value_objects import Document, SiteConfig


class IContentRepository(ABC):
    """Contract for content loading operations."""

    @abstractmethod
    def load_site_config(self) -> SiteConfig:
        """Load the site-wide configuration.

        Raises:
            ContentNotFoundError: If no site configuration exists
        """
        pass

    @abstractmethod
    def list_documents(self, include_drafts: bool = False) -> list[Document]:
        """List all pages, posts and notebooks.

        Args:
            include_drafts: Whether to include documents marked as drafts

        Returns:
            Documents ordered by slug
        """
        pass

    @abstractmethod
    def get_document(self, slug: str) -> Document:
        """Load a single document by slug.

        Raises:
            ContentNotFoundError: If no document has this slug
        """
        pass

    @abstractmethod
    def asset_paths(self) -> list[tuple[Path, Path]]:
        """List static assets.

        Returns:
            Pairs of (absolute source path, path relative to the site root)
        """
        pass
