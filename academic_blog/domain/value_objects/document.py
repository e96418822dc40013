"""Document value objects.

A document is one Markdown source file: a page, a post or a notebook.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .front_matter import FrontMatter

INDEX_SLUG = "index"


class DocumentKind(Enum):
    """Kind of document, derived from its layout."""

    PAGE = "page"
    POST = "post"
    NOTEBOOK = "notebook"


@dataclass(frozen=True)
class Document:
    """A content document with its metadata.

    Attributes:
        slug: URL-safe identifier, unique across the site
        front_matter: Parsed metadata
        body: Raw Markdown body (may contain template expressions)
        source_path: File the document was loaded from (optional)
    """

    slug: str
    front_matter: FrontMatter
    body: str
    source_path: Path | None = None

    def __post_init__(self) -> None:
        """Validate document values."""
        if not self.slug:
            raise ValueError("slug cannot be empty")
        if "/" in self.slug or self.slug.startswith("."):
            raise ValueError(f"slug must be a single path segment, got {self.slug!r}")

    @property
    def kind(self) -> DocumentKind:
        """Return the document kind."""
        return DocumentKind(self.front_matter.layout)

    @property
    def is_post(self) -> bool:
        """Posts and notebooks are listed on the index page."""
        return self.kind in (DocumentKind.POST, DocumentKind.NOTEBOOK)

    @property
    def url(self) -> str:
        """Return the site-relative URL of the rendered document."""
        if self.slug == INDEX_SLUG:
            return "/"
        return f"/{self.slug}/"

    @property
    def output_path(self) -> Path:
        """Return the output file path relative to the site root."""
        if self.slug == INDEX_SLUG:
            return Path("index.html")
        return Path(self.slug) / "index.html"
