"""Content model for the profile site.

This module holds the fixed, read-only data every renderer consumes:
the site identity and the curated catalog of outbound links.

Key classes:
- SiteIdentity: Name, canonical URL, bio and avatar of the site owner.
- LinkEntry: A single outbound link with an optional reveal description.
- LinkGroup: A named, ordered group of links.
- LinkCatalog: The ordered sequence of groups rendered in the link section.

All classes are frozen dataclasses validated on construction, so a malformed
model fails at startup instead of producing invalid markup.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


class ContentError(ValueError):
    """Raised when the content model violates one of its invariants."""


@dataclass(frozen=True)
class SiteIdentity:
    """Identity of the site owner.

    Attributes:
        name: Display name.
        url: Canonical absolute URL, must start with https://.
        description: Short bio used for meta tags and structured data.
        avatar_path: Root-relative avatar path, must start with /.
    """

    name: str
    url: str
    description: str
    avatar_path: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ContentError("Site name must not be empty")
        if not self.url or not self.url.startswith("https://"):
            raise ContentError(f"Site url must start with https://, got {self.url!r}")
        if not self.description:
            raise ContentError("Site description must not be empty")
        if not self.avatar_path.startswith("/"):
            raise ContentError(
                f"Avatar path must be root-relative, got {self.avatar_path!r}"
            )

    @property
    def avatar_url(self) -> str:
        """Fully-qualified avatar URL used by Open Graph and JSON-LD."""
        return f"{self.url}{self.avatar_path}"

    @property
    def avatar_alt(self) -> str:
        return f"{self.name} avatar"


@dataclass(frozen=True)
class LinkEntry:
    """A single outbound profile link.

    Attributes:
        label: Display text.
        href: Absolute URL the link points to.
        description: Optional text revealed on hover/focus.
    """

    label: str
    href: str
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.href:
            raise ContentError(f"Link {self.label!r} has an empty href")

    @property
    def title(self) -> str:
        """Tooltip text, falling back to the label."""
        return self.description or self.label


@dataclass(frozen=True)
class LinkGroup:
    """A named group of related links, rendered in declaration order."""

    name: str
    links: tuple[LinkEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "links", tuple(self.links))


@dataclass(frozen=True)
class LinkCatalog:
    """Ordered sequence of link groups.

    Group order is curated and never sorted. Group names are unique.
    """

    groups: tuple[LinkGroup, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", tuple(self.groups))
        seen: set[str] = set()
        for group in self.groups:
            if group.name in seen:
                raise ContentError(f"Duplicate link group name: {group.name!r}")
            seen.add(group.name)

    def __iter__(self) -> Iterator[LinkGroup]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def links(self) -> list[LinkEntry]:
        """All links across groups, in catalog order."""
        return [link for group in self.groups for link in group.links]

    @property
    def hrefs(self) -> list[str]:
        return [link.href for link in self.links]


_MISSING = object()


def _text(data: Mapping[str, Any], key: str, where: str, default: Any = _MISSING) -> str:
    """Return ``data[key]``, requiring a string.

    Raises:
        ContentError: If the key is missing without a default, or the value
            is not a string.
    """
    if key not in data:
        if default is _MISSING:
            raise ContentError(f"{where} is missing required key '{key}'")
        return default
    value = data[key]
    if not isinstance(value, str):
        raise ContentError(
            f"{where} field '{key}' must be a string, got {type(value).__name__}"
        )
    return value


def identity_from_data(data: Mapping[str, Any]) -> SiteIdentity:
    """Build a SiteIdentity from a plain mapping (e.g. parsed YAML).

    Args:
        data: Mapping with name, url, description and avatar_path keys.

    Returns:
        Validated SiteIdentity.

    Raises:
        ContentError: If the mapping is not a dict, a key is missing or a
            value is not a string.
    """
    if not isinstance(data, Mapping):
        raise ContentError("identity must be a mapping")
    return SiteIdentity(
        name=_text(data, "name", "identity"),
        url=_text(data, "url", "identity"),
        description=_text(data, "description", "identity"),
        avatar_path=_text(data, "avatar_path", "identity"),
    )


def catalog_from_data(data: Sequence[Mapping[str, Any]]) -> LinkCatalog:
    """Build a LinkCatalog from a list of group mappings.

    Each group is ``{"name": str, "links": [{"label", "href", "description"?}]}``.
    A missing label renders as empty text; a missing description means no
    reveal text.

    Args:
        data: Sequence of group mappings, in render order.

    Returns:
        Validated LinkCatalog.

    Raises:
        ContentError: If the structure is malformed.
    """
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise ContentError("links must be a list of groups")
    groups = []
    for raw_group in data:
        if not isinstance(raw_group, Mapping):
            raise ContentError("each link group must be a mapping")
        name = _text(raw_group, "name", "link group")
        links = []
        for raw_link in raw_group.get("links") or []:
            if not isinstance(raw_link, Mapping):
                raise ContentError(f"links in group {name!r} must be mappings")
            where = f"link in group {name!r}"
            description = raw_link.get("description")
            if description is not None and not isinstance(description, str):
                raise ContentError(f"{where} field 'description' must be a string")
            links.append(
                LinkEntry(
                    label=_text(raw_link, "label", where, default=""),
                    href=_text(raw_link, "href", where),
                    description=description or None,
                )
            )
        groups.append(LinkGroup(name=name, links=tuple(links)))
    return LinkCatalog(tuple(groups))


DEFAULT_IDENTITY = SiteIdentity(
    name="EverythingSings",
    url="https://everythingsings.art",
    description=(
        "Formless art brand for the future. "
        "Exploring AI, art, and sovereign technology."
    ),
    avatar_path="/avatar.png",
)

# Original work first, social presence last.
DEFAULT_CATALOG = LinkCatalog(
    (
        LinkGroup(
            "Create",
            (
                LinkEntry(
                    "Lumimenta",
                    "https://lumimenta.everythingsings.art",
                    "Physical trading card photography series",
                ),
                LinkEntry("Sigil", "https://sigil.everythingsings.art", "Explore Sigil"),
                LinkEntry(
                    "Music",
                    "https://music.apple.com/artist/1704503690",
                    "Listen on Apple Music",
                ),
            ),
        ),
        LinkGroup(
            "Think",
            (
                LinkEntry(
                    "Substack",
                    "https://everythingsings.substack.com",
                    "Writing on AI, art, and technology",
                ),
            ),
        ),
        LinkGroup(
            "Build",
            (
                LinkEntry("GitHub", "https://github.com/EverythingSings", "Code is art"),
                LinkEntry(
                    "Sovereign Tools",
                    "https://github.com/sovereign-composable-tools",
                    "Local-first tools for open protocols",
                ),
            ),
        ),
        LinkGroup(
            "Support",
            (
                LinkEntry(
                    "Shop",
                    "https://bedim.redbubble.com",
                    "AI art prints and merchandise",
                ),
            ),
        ),
        LinkGroup(
            "Connect",
            (
                LinkEntry(
                    "Mastodon",
                    "https://mastodon.social/@everythingsings",
                    "Follow on Mastodon",
                ),
                LinkEntry(
                    "Nostr",
                    "https://primal.net/p/nprofile1qqsvxa6ez4lr32zrhk98xwj8pka3kjjy9v4c823m6pt4gvw8d49vfggjfvjru",
                    "Follow on Nostr",
                ),
                LinkEntry("X", "https://x.com/systemicwisdom_", "Follow on X"),
            ),
        ),
    )
)
