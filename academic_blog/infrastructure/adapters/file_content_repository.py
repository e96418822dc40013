"""File-based content repository adapter.

Infrastructure adapter that implements IContentRepository on a directory of
Markdown files with YAML front matter:

    content/
        site.yaml
        pages/about.md
        posts/2024-03-15-weight-decay-regularization.md
        assets/...
"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml
from academic_blog.domain.interfaces import IContentRepository
from academic_blog.domain.value_objects import Document, FrontMatter, SiteConfig

_LOGGER = logging.getLogger(__name__)

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
_DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}-")
_SLUG_RE = re.compile(r"[^a-z0-9]+")


class ContentNotFoundError(Exception):
    """Raised when a document or the site configuration is missing."""

    pass


class FrontMatterError(Exception):
    """Raised when a document's front matter is missing or invalid."""

    pass


def slugify(name: str) -> str:
    """Turn a file stem into a URL slug, dropping any date prefix."""
    stem = _DATE_PREFIX_RE.sub("", name)
    return _SLUG_RE.sub("-", stem.lower()).strip("-")


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split a Markdown source into its front matter and body.

    Args:
        text: Full file contents

    Returns:
        Tuple of (front matter mapping, body)

    Raises:
        FrontMatterError: If there is no front matter block or it is not a
            YAML mapping
    """
    text = text.lstrip("\ufeff")
    match = _FRONT_MATTER_RE.match(text)
    if match is None:
        raise FrontMatterError("Document does not start with a '---' front matter block")

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid YAML in front matter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )

    return data, text[match.end():]


class FileContentRepository(IContentRepository):
    """File system implementation of the content repository."""

    SITE_CONFIG_FILE = "site.yaml"
    PAGES_DIR = "pages"
    POSTS_DIR = "posts"
    ASSETS_DIR = "assets"
    DOCUMENT_SUFFIX = ".md"

    def __init__(self, content_path: str | Path) -> None:
        """Initialize the repository.

        Args:
            content_path: Root directory of the site content
        """
        self._content_path = Path(content_path)

    @property
    def content_path(self) -> Path:
        return self._content_path

    def load_site_config(self) -> SiteConfig:
        """Load site.yaml from the content root."""
        config_path = self._content_path / self.SITE_CONFIG_FILE
        if not config_path.exists():
            raise ContentNotFoundError(f"Site configuration not found: {config_path}")

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ContentNotFoundError(f"Failed to read {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ContentNotFoundError(f"{config_path} must contain a mapping")

        site = SiteConfig.from_mapping(data)
        _LOGGER.debug("Loaded site configuration: %s", site.title)
        return site

    def list_documents(self, include_drafts: bool = False) -> list[Document]:
        """Load every page and post, ordered by slug."""
        documents: dict[str, Document] = {}

        for directory, default_layout in (
            (self.PAGES_DIR, "page"),
            (self.POSTS_DIR, "post"),
        ):
            for path in sorted((self._content_path / directory).glob(f"*{self.DOCUMENT_SUFFIX}")):
                document = self._load_document(path, default_layout)
                if document.front_matter.draft and not include_drafts:
                    _LOGGER.debug("Skipping draft: %s", path.name)
                    continue
                if document.slug in documents:
                    raise FrontMatterError(
                        f"Duplicate slug '{document.slug}': {documents[document.slug].source_path} "
                        f"and {path}"
                    )
                documents[document.slug] = document

        _LOGGER.info("Loaded %d documents from %s", len(documents), self._content_path)
        return [documents[slug] for slug in sorted(documents)]

    def get_document(self, slug: str) -> Document:
        """Find a document by slug, drafts included."""
        for document in self.list_documents(include_drafts=True):
            if document.slug == slug:
                return document
        raise ContentNotFoundError(f"Document not found: {slug}")

    def asset_paths(self) -> list[tuple[Path, Path]]:
        """List files under the assets directory."""
        assets_dir = self._content_path / self.ASSETS_DIR
        if not assets_dir.is_dir():
            return []
        return [
            (path, Path(self.ASSETS_DIR) / path.relative_to(assets_dir))
            for path in sorted(assets_dir.rglob("*"))
            if path.is_file()
        ]

    def _load_document(self, path: Path, default_layout: str) -> Document:
        """Parse one Markdown file into a Document."""
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ContentNotFoundError(f"Failed to read {path}: {e}") from e

        try:
            data, body = split_front_matter(text)
            front_matter = FrontMatter.from_mapping(data, default_layout=default_layout)
        except (FrontMatterError, ValueError) as e:
            raise FrontMatterError(f"{path}: {e}") from e

        slug = str(data.get("slug") or slugify(path.stem))
        return Document(slug=slug, front_matter=front_matter, body=body, source_path=path)
