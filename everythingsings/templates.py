"""Template rendering engine for the profile generator.

This module wraps a Jinja2 environment over the fragment templates shipped
inside the package. Templates are internal: they are the markup skeleton of
each fragment, and every interpolated value is autoescaped.

Key class:
- TemplateEngine: Loads package templates and renders them to Markup.

Key function:
- get_engine: Shared engine instance used by the renderers.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

__all__ = ["TEMPLATES_DIR", "TemplateEngine", "get_engine"]

# Path to the fragment templates bundled with the package
TEMPLATES_DIR = Path(__file__).parent / "templates"


class TemplateEngine:
    """Template rendering engine using Jinja2.

    Attributes:
        templates_dir: Directory containing the fragment templates.
        env: Jinja2 environment.
    """

    def __init__(self, templates_dir: Path | None = None):
        """Initialize the template engine.

        Args:
            templates_dir: Optional template directory, defaults to the
                templates bundled with the package.
        """
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader([self.templates_dir]),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            enable_async=False,
        )

    def render(self, name: str, **context: Any) -> Markup:
        """Render a template to a markup fragment.

        Args:
            name: Template filename relative to the templates directory.
            **context: Variables made available to the template.

        Returns:
            Markup-safe rendered fragment.
        """
        template = self.env.get_template(name)
        return Markup(template.render(**context))


@functools.lru_cache(maxsize=None)
def get_engine() -> TemplateEngine:
    """Return the shared engine for the bundled templates."""
    return TemplateEngine()
