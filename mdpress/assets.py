"""Static asset copying for mdpress.

Every non-Markdown file in the content directory, and everything in the
optional static directory, is copied byte for byte into the output root at
the same relative path.

Key class:
- AssetCopier: Mirrors files into the output directory.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from .errors import SiteIOError


class AssetCopier:
    """Copies static files into the output directory.

    Attributes:
        output_dir: Directory where copied files are written.
    """

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir

    def copy(self, source: Path, dest_rel: Path) -> Path:
        """Copy a single file into the output directory.

        Args:
            source: File to copy.
            dest_rel: Destination path relative to the output root.

        Returns:
            Absolute path of the written copy.

        Raises:
            SiteIOError: If the file cannot be read or written.
        """
        dest = self.output_dir / dest_rel
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, dest)
        except OSError as exc:
            raise SiteIOError(f"Could not copy asset: {exc}", source, exc) from exc
        return dest

    def copy_tree(self, root: Path) -> list[Path]:
        """Mirror every file under a directory into the output root.

        A missing directory is skipped.

        Args:
            root: Directory whose contents are copied.

        Returns:
            List of written paths, in sorted source order.
        """
        if not root.is_dir():
            return []
        written: list[Path] = []
        for item in sorted(root.rglob("*")):
            if item.is_dir():
                continue
            written.append(self.copy(item, item.relative_to(root)))
        return written
