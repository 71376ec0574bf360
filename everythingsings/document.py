"""Document assembly.

Joins the head and body fragments into the final HTML document string.
``render_document`` is the single entry point the build uses: it renders
every fragment from a SiteConfig and assembles them.
"""

from __future__ import annotations

from .config import SiteConfig
from .content import ContentError
from .head import render_head
from .renderers import render_body
from .templates import TemplateEngine

DOCTYPE = "<!DOCTYPE html>"
LANG = "en"


def assemble_document(head: str, body: str) -> str:
    """Concatenate head and body into a complete HTML document.

    Output is doctype, ``<html lang="en">``, head, body and the closing
    root tag, in that order. The function is pure: identical inputs give
    byte-identical output.

    Args:
        head: Rendered ``<head>`` fragment.
        body: Rendered ``<body>`` fragment.

    Returns:
        Complete HTML document.

    Raises:
        ContentError: If either fragment is empty.
    """
    if not head or not head.strip():
        raise ContentError("Cannot assemble a document without a head fragment")
    if not body or not body.strip():
        raise ContentError("Cannot assemble a document without a body fragment")
    return f'{DOCTYPE}\n<html lang="{LANG}">\n{head}\n{body}\n</html>\n'


def render_document(config: SiteConfig, engine: TemplateEngine | None = None) -> str:
    """Render the full profile page for a configuration.

    Args:
        config: Validated site configuration.
        engine: Optional template engine.

    Returns:
        Complete HTML document.
    """
    head = render_head(
        config.identity,
        same_as=config.same_as,
        theme_color=config.theme_color,
        stylesheet_href=config.stylesheet_href,
        feed_href=config.feed_href,
        manifest_href=config.manifest_href,
        background_script=config.background_script,
        engine=engine,
    )
    body = render_body(
        config.identity,
        config.catalog,
        background_script=config.background_script,
        engine=engine,
    )
    return assemble_document(str(head), str(body))
