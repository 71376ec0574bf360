"""Static asset copying.

This module copies the optional static assets into the output directory
after the document has been written:

- Every file under the public directory, recursively, into the output root.
- The stylesheet, copied to ``main.css`` in the output root.

Both sources are optional. A missing source is skipped, never an error.
"""

from __future__ import annotations

import shutil
from pathlib import Path

STYLESHEET_NAME = "main.css"


class AssetPipeline:
    """Copies static assets into the build output.

    Attributes:
        public_dir: Directory whose contents are copied verbatim.
        stylesheet: Stylesheet source file.
        output_dir: Directory where assets are written.
    """

    def __init__(self, public_dir: Path, stylesheet: Path, output_dir: Path):
        """Initialize the asset pipeline.

        Args:
            public_dir: Directory of static assets.
            stylesheet: Stylesheet to copy to ``main.css``.
            output_dir: Build output directory.
        """
        self.public_dir = public_dir
        self.stylesheet = stylesheet
        self.output_dir = output_dir

    def run(self) -> list[Path]:
        """Copy every available asset.

        Returns:
            Destination paths of the copied files, public assets first.

        Raises:
            OSError: If a file cannot be copied.
        """
        copied = self._copy_public()
        stylesheet = self._copy_stylesheet()
        if stylesheet is not None:
            copied.append(stylesheet)
        return copied

    def _copy_public(self) -> list[Path]:
        if not self.public_dir.is_dir():
            return []
        copied = []
        for item in sorted(self.public_dir.rglob("*")):
            if item.is_dir():
                continue
            dest = self.output_dir / item.relative_to(self.public_dir)
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(item, dest)
            copied.append(dest)
        return copied

    def _copy_stylesheet(self) -> Path | None:
        if not self.stylesheet.is_file():
            return None
        dest = self.output_dir / STYLESHEET_NAME
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(self.stylesheet, dest)
        return dest
