"""Site configuration for the profile generator.

Configuration is an explicit, validated object built once at startup and
passed to the renderers. Defaults describe the EverythingSings site; an
optional ``everythingsings.yaml`` in the project root overrides them.

Example ``everythingsings.yaml``::

    output_dir: dist
    theme_color: "#101010"
    identity:
      name: Jane Doe
      url: https://jane.example
      description: Painter.
      avatar_path: /me.png
    links:
      - name: Connect
        links:
          - label: Mastodon
            href: https://mastodon.social/@jane
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .content import (
    DEFAULT_CATALOG,
    DEFAULT_IDENTITY,
    LinkCatalog,
    SiteIdentity,
    catalog_from_data,
    identity_from_data,
)

CONFIG_FILENAME = "everythingsings.yaml"


class ConfigError(ValueError):
    """Raised when the configuration file cannot be used."""


DEFAULT_CONFIG: dict[str, Any] = {
    "output_dir": "target/site",
    "public_dir": "public",
    "stylesheet": "style/main.css",
    "stylesheet_href": "/main.css",
    "feed_href": "/feed.xml",
    "manifest_href": "/site.webmanifest",
    "background_script": "/js/shader-bg.js",
    "theme_color": "#0d0d0d",
    "json_ld_same_as": True,
}

# Options that may be set to null to switch the feature off
NULLABLE_OPTIONS = frozenset({"background_script"})


@dataclass(frozen=True)
class SiteConfig:
    """Everything the renderers and the build need to know.

    Attributes:
        identity: Site owner identity.
        catalog: Outbound link catalog.
        theme_color: Browser chrome color.
        output_dir: Output directory, relative to the project root.
        public_dir: Static assets copied verbatim into the output root.
        stylesheet: Source stylesheet copied to ``main.css``.
        stylesheet_href: URL of the stylesheet in the document.
        feed_href: URL of the RSS alternate link.
        manifest_href: URL of the web app manifest.
        background_script: Deferred background script URL, or None to omit
            both the script and its canvas.
        json_ld_same_as: Whether JSON-LD ``sameAs`` lists the catalog links.
    """

    identity: SiteIdentity = DEFAULT_IDENTITY
    catalog: LinkCatalog = DEFAULT_CATALOG
    theme_color: str = DEFAULT_CONFIG["theme_color"]
    output_dir: str = DEFAULT_CONFIG["output_dir"]
    public_dir: str = DEFAULT_CONFIG["public_dir"]
    stylesheet: str = DEFAULT_CONFIG["stylesheet"]
    stylesheet_href: str = DEFAULT_CONFIG["stylesheet_href"]
    feed_href: str = DEFAULT_CONFIG["feed_href"]
    manifest_href: str = DEFAULT_CONFIG["manifest_href"]
    background_script: str | None = DEFAULT_CONFIG["background_script"]
    json_ld_same_as: bool = DEFAULT_CONFIG["json_ld_same_as"]

    @property
    def same_as(self) -> list[str]:
        """Profile URLs listed in JSON-LD ``sameAs``."""
        return self.catalog.hrefs if self.json_ld_same_as else []


def load_config(project_root: Path) -> SiteConfig:
    """Load site configuration from everythingsings.yaml.

    Args:
        project_root: Root directory of the project.

    Returns:
        SiteConfig with file values applied over the defaults.

    Raises:
        ConfigError: If the file is not a mapping, has unknown keys or an
            option has the wrong type.
        ContentError: If the identity or links in the file are malformed.
    """
    config_path = project_root / CONFIG_FILENAME
    if not config_path.exists():
        return SiteConfig()
    with open(config_path, encoding="utf-8") as f:
        try:
            loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"{config_path}: invalid YAML: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ConfigError(f"{config_path}: expected a mapping at the top level")
    return config_from_data(loaded)


def config_from_data(data: dict[str, Any]) -> SiteConfig:
    """Build a SiteConfig from a parsed configuration mapping.

    Args:
        data: Mapping of option names to values.

    Returns:
        Validated SiteConfig.

    Raises:
        ConfigError: If an option is unknown or has the wrong type.
        ContentError: If the identity or links are malformed.
    """
    options = dict(data)
    identity = DEFAULT_IDENTITY
    catalog = DEFAULT_CATALOG
    if "identity" in options:
        identity = identity_from_data(options.pop("identity"))
    if "links" in options:
        catalog = catalog_from_data(options.pop("links"))

    unknown = sorted(set(options) - set(DEFAULT_CONFIG))
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    for key, value in options.items():
        if value is None and key in NULLABLE_OPTIONS:
            continue
        expected = type(DEFAULT_CONFIG[key])
        # bool is a subclass of int, so compare exact types
        if type(value) is not expected:
            raise ConfigError(
                f"Option '{key}' must be a {expected.__name__}, "
                f"got {type(value).__name__}"
            )

    merged = DEFAULT_CONFIG.copy()
    merged.update(options)
    return SiteConfig(identity=identity, catalog=catalog, **merged)
