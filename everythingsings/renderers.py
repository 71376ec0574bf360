"""Body fragment renderers.

Each renderer is a pure function from content-model values to a
Markup fragment. Output is HTML annotated three ways at once:

- Microformats2 classes (``h-card``, ``p-name``, ``p-note``, ``u-photo``, ``u-url``)
- Schema.org microdata (``itemscope``, ``itemtype``, ``itemprop``)
- ``rel="me"`` identity assertions for IndieWeb verification

JSON-LD, the third structured encoding, lives in the head (see head.py).
"""

from __future__ import annotations

from markupsafe import Markup

from .content import LinkCatalog, SiteIdentity
from .templates import TemplateEngine, get_engine

# Rendered width and height of the avatar, in pixels
AVATAR_SIZE = 128


def render_link_catalog(
    catalog: LinkCatalog, engine: TemplateEngine | None = None
) -> Markup:
    """Render the link catalog as grouped, accessible navigation.

    Groups keep catalog order. Each group is a ``section.link-group`` with an
    ``h2.link-group-label`` heading, so the two markers never overlap. Each
    link carries ``rel="me noopener"`` and ``itemprop="sameAs"``; the
    ``span.link-description`` reveal text is emitted only when the link has
    a description.

    Args:
        catalog: Link catalog to render.
        engine: Optional template engine.

    Returns:
        Markup-safe ``<nav>`` fragment.
    """
    engine = engine or get_engine()
    return engine.render("link_catalog.html.jinja", catalog=catalog)


def render_profile(identity: SiteIdentity, engine: TemplateEngine | None = None) -> Markup:
    """Render the h-card / schema.org Person profile card.

    Args:
        identity: Site owner identity.
        engine: Optional template engine.

    Returns:
        Markup-safe ``<article>`` fragment.
    """
    engine = engine or get_engine()
    return engine.render(
        "profile.html.jinja", identity=identity, avatar_size=AVATAR_SIZE
    )


def render_body(
    identity: SiteIdentity,
    catalog: LinkCatalog,
    background_script: str | None = None,
    engine: TemplateEngine | None = None,
) -> Markup:
    """Render the ``<body>`` element: WebPage scope, profile, links, footer.

    Args:
        identity: Site owner identity.
        catalog: Link catalog.
        background_script: When set, a background canvas is included for the
            script the head loads.
        engine: Optional template engine.

    Returns:
        Markup-safe ``<body>`` fragment.
    """
    engine = engine or get_engine()
    return engine.render(
        "body.html.jinja",
        profile=render_profile(identity, engine),
        links=render_link_catalog(catalog, engine),
        background_script=background_script,
    )
