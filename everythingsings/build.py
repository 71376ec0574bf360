"""Site building for the profile generator.

The build renders the document fully in memory, then performs the only
side effects of a run: writing ``index.html``, copying static assets and
writing the generated companion files.

Key functions:
- build_site: Build the site into the output directory.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from .assets import AssetPipeline
from .config import SiteConfig, load_config
from .document import render_document
from .feeds import FeedRegistry, create_default_feed_registry

INDEX_FILENAME = "index.html"


class BuildError(Exception):
    """Error during site build with file context.

    Attributes:
        path: Path that could not be written or copied.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        path: Path,
        message: str,
        original_error: Exception | None = None,
    ):
        self.path = path
        self.message = message
        self.original_error = original_error
        super().__init__(f"{path}: {message}")


@dataclass
class BuildResult:
    """Result of a site build operation.

    Attributes:
        index_path: Path of the written HTML document.
        output_dir: Directory where the site was built.
        assets: Copied static asset paths.
        generated: Companion files written by the feed registry.
    """

    index_path: Path
    output_dir: Path
    assets: list[Path] = field(default_factory=list)
    generated: list[Path] = field(default_factory=list)


def build_site(
    project_root: Path,
    config: SiteConfig | None = None,
    output_dir_override: Path | None = None,
    clean_output: bool = False,
    feed_registry: FeedRegistry | None = None,
) -> BuildResult:
    """Build the static profile site.

    Args:
        project_root: Root directory of the project.
        config: Optional configuration, loaded from the project when omitted.
        output_dir_override: Optional output path instead of config output_dir.
        clean_output: Whether to wipe the output directory before writing.
        feed_registry: Optional registry of companion file generators.

    Returns:
        BuildResult describing everything that was written.

    Raises:
        BuildError: If the output cannot be written or an asset cannot be copied.
    """
    config = config or load_config(project_root)
    output_dir = output_dir_override or (project_root / config.output_dir)

    # Render before touching the filesystem
    html = render_document(config)

    try:
        _prepare_output_dir(output_dir, clean_output)
    except OSError as exc:
        raise BuildError(output_dir, _format_error_message(exc), exc) from exc

    index_path = output_dir / INDEX_FILENAME
    try:
        index_path.write_text(html, encoding="utf-8")
    except OSError as exc:
        raise BuildError(index_path, _format_error_message(exc), exc) from exc

    pipeline = AssetPipeline(
        project_root / config.public_dir,
        project_root / config.stylesheet,
        output_dir,
    )
    try:
        assets = pipeline.run()
    except OSError as exc:
        raise BuildError(
            Path(exc.filename) if exc.filename else output_dir,
            _format_error_message(exc),
            exc,
        ) from exc

    registry = feed_registry or create_default_feed_registry()
    try:
        generated = registry.generate_all(output_dir, config, keep=assets)
    except OSError as exc:
        raise BuildError(output_dir, _format_error_message(exc), exc) from exc

    return BuildResult(
        index_path=index_path,
        output_dir=output_dir,
        assets=assets,
        generated=generated,
    )


def _prepare_output_dir(output_dir: Path, clean: bool) -> None:
    """Create the output directory, emptying it first when requested."""
    if clean and output_dir.exists():
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)


def _format_error_message(exc: OSError) -> str:
    """Format an OS error into a user-friendly message.

    Args:
        exc: The exception to format.

    Returns:
        A human-readable error message.
    """
    if exc.strerror:
        return exc.strerror
    return f"{type(exc).__name__}: {exc}"
