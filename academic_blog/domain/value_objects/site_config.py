"""Site configuration value objects.

Immutable description of the site and its author.
"""

from dataclasses import dataclass
from typing import Any, Mapping

_LINK_SCHEMES = ("http://", "https://", "mailto:")


@dataclass(frozen=True)
class SocialLink:
    """A link to one of the author's profiles.

    Attributes:
        label: Display label (e.g. "GitHub")
        url: Absolute URL or mailto: address
        icon: Optional icon name used by the layout
    """

    label: str
    url: str
    icon: str | None = None

    def __post_init__(self) -> None:
        """Validate link values."""
        if not self.label:
            raise ValueError("label cannot be empty")
        if not self.url.startswith(_LINK_SCHEMES):
            raise ValueError(f"url must be absolute or mailto:, got {self.url!r}")


@dataclass(frozen=True)
class AuthorProfile:
    """The author shown on the about page and in the site header.

    Attributes:
        name: Full name
        bio: Short biography
        image: Profile image path relative to the site root
        links: Social links, in display order
        email: Optional contact address
        affiliation: Optional institution or employer
    """

    name: str
    bio: str = ""
    image: str | None = None
    links: tuple[SocialLink, ...] = ()
    email: str | None = None
    affiliation: str | None = None

    def __post_init__(self) -> None:
        """Validate author values."""
        if not self.name or not self.name.strip():
            raise ValueError("author name cannot be empty")


@dataclass(frozen=True)
class SiteConfig:
    """Site-wide settings.

    Attributes:
        title: Site title
        base_url: Public URL of the site, without trailing slash
        author: Site author
        description: Optional site description
        language: HTML language code
    """

    title: str
    base_url: str
    author: AuthorProfile
    description: str = ""
    language: str = "en"

    def __post_init__(self) -> None:
        """Validate site config values."""
        if not self.title:
            raise ValueError("site title cannot be empty")
        if self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SiteConfig":
        """Create SiteConfig from a parsed YAML mapping.

        Raises:
            ValueError: If required keys are missing or invalid
        """
        author_data = data.get("author")
        if not isinstance(author_data, Mapping):
            raise ValueError("site config must contain an 'author' mapping")

        links = []
        for link in author_data.get("links") or []:
            if not isinstance(link, Mapping):
                raise ValueError(f"invalid social link: {link!r}")
            links.append(
                SocialLink(
                    label=str(link.get("label", "")),
                    url=str(link.get("url", "")),
                    icon=link.get("icon"),
                )
            )

        author = AuthorProfile(
            name=str(author_data.get("name", "")),
            bio=str(author_data.get("bio", "")).strip(),
            image=author_data.get("image"),
            links=tuple(links),
            email=author_data.get("email"),
            affiliation=author_data.get("affiliation"),
        )

        return cls(
            title=str(data.get("title", "")),
            base_url=str(data.get("base_url", "")),
            author=author,
            description=str(data.get("description", "")).strip(),
            language=str(data.get("language", "en")),
        )
