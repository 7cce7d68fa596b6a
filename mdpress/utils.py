"""Utility functions for mdpress.

Key functions:
    titleize: Convert filenames to human-readable titles.
    is_markdown: Check if a path is a Markdown file.
    output_path_for: Map a Markdown source path to its HTML output path.
    path_prefix_for: Relative prefix from a page back to the output root.
    ensure_clean_dir: Ensure a directory exists and is empty.
"""

from __future__ import annotations

import re
import shutil
from pathlib import Path

MARKDOWN_SUFFIXES = (".md", ".markdown")


def titleize(filename: str) -> str:
    """Convert a filename to a human-readable title.

    Removes date prefixes (YYYY-MM-DD), replaces hyphens and underscores
    with spaces, and capitalizes each word.

    Args:
        filename: Filename with or without extension.

    Returns:
        Human-readable title string.

    Examples:
        >>> titleize("2024-01-15-hello-world.md")
        'Hello World'

        >>> titleize("getting-started.md")
        'Getting Started'
    """
    base = Path(filename).stem
    if "-" in base:
        parts = base.split("-")
        if len(parts) >= 4 and all(p.isdigit() for p in parts[:3]):
            base = "-".join(parts[3:])
    words = re.split(r"[\s\-_]+", base)
    return " ".join(word.capitalize() for word in words if word) or "Untitled"


def is_markdown(path: Path) -> bool:
    """Check if a path is a Markdown file.

    Args:
        path: Path to check.

    Returns:
        True if the file has a .md or .markdown extension (case-insensitive).
    """
    return path.suffix.lower() in MARKDOWN_SUFFIXES


def output_path_for(relative_path: Path) -> Path:
    """Return the output path for a Markdown source, relative to the output root."""
    return relative_path.with_suffix(".html")


def path_prefix_for(relative_path: Path) -> str:
    """Return the relative prefix from a page back to the site root.

    Args:
        relative_path: Path of the page relative to the content root.

    Returns:
        "" for top-level pages, "../" for pages one folder deep, and so on.
    """
    return "../" * (len(relative_path.parts) - 1)


def is_within(path: Path, parent: Path) -> bool:
    """Check whether path is parent itself or lives somewhere below it."""
    path = path.resolve()
    parent = parent.resolve()
    return path == parent or parent in path.parents


def ensure_clean_dir(path: Path) -> None:
    """Ensure a directory exists and is empty.

    If the directory exists, removes all contents. Creates the
    directory if it doesn't exist.

    Args:
        path: Directory path to clean or create.
    """
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True, exist_ok=True)
