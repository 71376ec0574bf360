"""Companion file generation.

The head links a web app manifest and an RSS feed, and crawlers look for a
sitemap. This module generates those files from the site configuration.
Generators follow a small ABC so new formats can be registered without
touching the build.

Classes:
    FeedGenerator: Base class for generated companion files.
    SitemapGenerator: Generates sitemap.xml.
    RSSGenerator: Generates the RSS channel linked from the head.
    ManifestGenerator: Generates the web app manifest.
    FeedRegistry: Registry for managing generators.

Functions:
    create_default_feed_registry: Create a registry with default generators.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Collection
from pathlib import Path
from xml.sax.saxutils import escape

from .config import SiteConfig


class FeedGenerator(ABC):
    """Abstract base class for companion file generators.

    Generated files are rewritten on every build, except where the public
    directory supplied a file of the same name during this build.
    """

    @abstractmethod
    def filename(self, config: SiteConfig) -> str:
        """Return the output filename, relative to the output root."""
        ...

    @abstractmethod
    def generate(self, config: SiteConfig) -> str:
        """Generate the file content.

        Args:
            config: Site configuration.

        Returns:
            File content as a string.
        """
        ...

    def write(
        self,
        output_dir: Path,
        config: SiteConfig,
        keep: Collection[Path] = (),
    ) -> Path | None:
        """Generate and write the file unless it is one of ``keep``.

        Args:
            output_dir: Build output directory.
            config: Site configuration.
            keep: Paths copied from the public directory in this build.

        Returns:
            Path written, or None if a public file was kept.
        """
        output_path = output_dir / self.filename(config)
        if output_path in keep:
            return None
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.generate(config), encoding="utf-8")
        return output_path


def _href_to_filename(href: str, default: str) -> str:
    # Only root-relative URLs map to a file in the output directory
    if not href.startswith("/") or href.startswith("//"):
        return default
    return href.lstrip("/") or default


class SitemapGenerator(FeedGenerator):
    """Generates a one-entry sitemap for the canonical URL."""

    def filename(self, config: SiteConfig) -> str:
        return "sitemap.xml"

    def generate(self, config: SiteConfig) -> str:
        loc = escape(config.identity.url.rstrip("/") + "/")
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
            f"  <url><loc>{loc}</loc></url>",
            "</urlset>",
        ]
        return "\n".join(lines) + "\n"


class RSSGenerator(FeedGenerator):
    """Generates the RSS 2.0 channel advertised by the head's alternate link.

    The channel carries the site title, link and description. It has no
    items because the site is a single page.
    """

    def filename(self, config: SiteConfig) -> str:
        return _href_to_filename(config.feed_href, "feed.xml")

    def generate(self, config: SiteConfig) -> str:
        identity = config.identity
        rss = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<rss version="2.0"><channel>',
            f"<title>{escape(identity.name)}</title>",
            f"<link>{escape(identity.url)}</link>",
            f"<description>{escape(identity.description)}</description>",
            "</channel></rss>",
        ]
        return "\n".join(rss) + "\n"


class ManifestGenerator(FeedGenerator):
    """Generates the web app manifest linked from the head."""

    def filename(self, config: SiteConfig) -> str:
        return _href_to_filename(config.manifest_href, "site.webmanifest")

    def generate(self, config: SiteConfig) -> str:
        identity = config.identity
        manifest = {
            "name": identity.name,
            "short_name": identity.name,
            "description": identity.description,
            "start_url": "/",
            "display": "standalone",
            "theme_color": config.theme_color,
            "background_color": config.theme_color,
            "icons": [
                {"src": "/favicon.svg", "type": "image/svg+xml", "sizes": "any"},
                {"src": "/apple-touch-icon.png", "type": "image/png", "sizes": "180x180"},
            ],
        }
        return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"


class FeedRegistry:
    """Registry for managing companion file generators.

    Attributes:
        _generators: List of registered generators.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._generators: list[FeedGenerator] = []

    def register(self, generator: FeedGenerator) -> None:
        """Register a generator.

        Args:
            generator: Generator to register.
        """
        self._generators.append(generator)

    def generate_all(
        self,
        output_dir: Path,
        config: SiteConfig,
        keep: Collection[Path] = (),
    ) -> list[Path]:
        """Run all registered generators.

        Args:
            output_dir: Build output directory.
            config: Site configuration.
            keep: Paths copied from the public directory in this build.

        Returns:
            Paths of the files that were written.
        """
        keep = set(keep)
        generated = []
        for generator in self._generators:
            written = generator.write(output_dir, config, keep)
            if written is not None:
                generated.append(written)
        return generated


def create_default_feed_registry() -> FeedRegistry:
    """Create a registry with the sitemap, RSS and manifest generators."""
    registry = FeedRegistry()
    registry.register(SitemapGenerator())
    registry.register(RSSGenerator())
    registry.register(ManifestGenerator())
    return registry
