"""Head metadata generation.

This module renders the ``<head>`` block: charset and viewport, title and
description, canonical URL, icons and manifest, Open Graph and Twitter Card
tags, the RSS alternate link, the JSON-LD Person block and the stylesheet.

Open Graph uses ``property=`` attributes, so the head is rendered from its
own template rather than built as part of the body tree.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from jinja2.utils import htmlsafe_json_dumps
from markupsafe import Markup

from .config import DEFAULT_CONFIG
from .content import SiteIdentity
from .templates import TemplateEngine, get_engine

TITLE_SUFFIX = "Digital Artist"
SCHEMA_CONTEXT = "https://schema.org"


def build_json_ld(identity: SiteIdentity, same_as: Sequence[str] = ()) -> dict[str, Any]:
    """Build the schema.org Person object for the page.

    Args:
        identity: Site owner identity.
        same_as: Profile URLs for the ``sameAs`` property.

    Returns:
        Dictionary ready for JSON serialization.
    """
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Person",
        "name": identity.name,
        "url": identity.url,
        "description": identity.description,
        "image": identity.avatar_url,
        "sameAs": list(same_as),
    }


def render_json_ld(identity: SiteIdentity, same_as: Sequence[str] = ()) -> Markup:
    """Serialize the Person object for embedding in a script block.

    ``<``, ``>``, ``&`` and ``'`` are emitted as ``\\u`` escapes, so no
    field value can close the surrounding ``<script>`` element.

    Returns:
        Markup-safe JSON text.
    """
    return htmlsafe_json_dumps(
        build_json_ld(identity, same_as), indent=2, ensure_ascii=False
    )


def render_head(
    identity: SiteIdentity,
    same_as: Sequence[str] = (),
    theme_color: str = DEFAULT_CONFIG["theme_color"],
    stylesheet_href: str = "/main.css",
    feed_href: str = "/feed.xml",
    manifest_href: str = "/site.webmanifest",
    background_script: str | None = None,
    engine: TemplateEngine | None = None,
) -> Markup:
    """Render the complete ``<head>`` element.

    Args:
        identity: Site owner identity.
        same_as: Profile URLs listed in the JSON-LD ``sameAs`` property.
        theme_color: Browser chrome color.
        stylesheet_href: Stylesheet URL.
        feed_href: RSS feed URL.
        manifest_href: Web app manifest URL.
        background_script: Optional deferred script URL.
        engine: Optional template engine.

    Returns:
        Markup-safe ``<head>`` fragment.
    """
    engine = engine or get_engine()
    return engine.render(
        "head.html.jinja",
        identity=identity,
        title_suffix=TITLE_SUFFIX,
        theme_color=theme_color,
        stylesheet_href=stylesheet_href,
        feed_href=feed_href,
        manifest_href=manifest_href,
        background_script=background_script,
        json_ld=render_json_ld(identity, same_as),
    )
