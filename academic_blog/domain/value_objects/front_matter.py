"""Front matter value object.

Immutable metadata block found at the top of every Markdown document.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping

VALID_LAYOUTS = ("page", "post", "notebook")

_KNOWN_KEYS = frozenset(
    {"title", "date", "categories", "layout", "description", "image", "draft"}
)


def parse_date(value: Any) -> date:
    """Coerce a front matter date value to a date.

    Args:
        value: date, datetime or ISO 8601 string

    Returns:
        The calendar date

    Raises:
        ValueError: If the value cannot be interpreted as a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as e:
            raise ValueError(f"Invalid date: {value!r}") from e
    raise ValueError(f"Invalid date: {value!r}")


def parse_categories(value: Any) -> tuple[str, ...]:
    """Normalize categories given as a list or a separated string."""
    if value is None:
        return ()
    if isinstance(value, str):
        items = re.split(r"[,\s]+", value)
    elif isinstance(value, (list, tuple)):
        items = [str(item) for item in value]
    else:
        raise ValueError(f"categories must be a list or string, got {type(value).__name__}")

    categories: list[str] = []
    for item in items:
        item = item.strip()
        if item and item not in categories:
            categories.append(item)
    return tuple(categories)


@dataclass(frozen=True)
class FrontMatter:
    """Metadata of a page, post or notebook.

    Attributes:
        title: Document title
        date: Publication date
        categories: Categories/tags, in declaration order
        layout: Layout template name (page, post or notebook)
        description: Optional short summary
        image: Optional image path or URL
        draft: Drafts are skipped unless explicitly included
        extra: Any additional keys (e.g. the notebook training section)
    """

    title: str
    date: date
    categories: tuple[str, ...] = ()
    layout: str = "page"
    description: str | None = None
    image: str | None = None
    draft: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate front matter values."""
        if not self.title or not self.title.strip():
            raise ValueError("title cannot be empty")
        if self.layout not in VALID_LAYOUTS:
            raise ValueError(
                f"layout must be one of {', '.join(VALID_LAYOUTS)}, got {self.layout!r}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default_layout: str = "page") -> "FrontMatter":
        """Create FrontMatter from a parsed YAML mapping.

        Args:
            data: Parsed front matter
            default_layout: Layout used when the mapping has none

        Returns:
            A validated FrontMatter

        Raises:
            ValueError: If title or date are missing or invalid
        """
        if "title" not in data:
            raise ValueError("front matter is missing 'title'")
        if "date" not in data:
            raise ValueError("front matter is missing 'date'")

        return cls(
            title=str(data["title"]),
            date=parse_date(data["date"]),
            categories=parse_categories(data.get("categories")),
            layout=str(data.get("layout") or default_layout),
            description=data.get("description"),
            image=data.get("image"),
            draft=bool(data.get("draft", False)),
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )
