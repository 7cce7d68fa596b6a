"""Front matter parsing for mdpress.

A content file may open with a YAML block fenced by ``---`` lines::

    ---
    title: Home
    template: home
    ---
    # Hi

The block is decoded with PyYAML and must be a mapping. Files that do not
start with the marker have no front matter and are all body.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from .errors import ParseError

OPENING_RE = re.compile(r"\A---[ \t]*(?:\r?\n|\Z)")
CLOSING_RE = re.compile(r"^(?:---|\.\.\.)[ \t]*\r?$", re.MULTILINE)


def split_frontmatter(
    text: str, source: Path | None = None
) -> tuple[dict[str, Any], str]:
    """Split raw file content into front matter and body.

    Args:
        text: Raw file content.
        source: Path of the file, used for error context.

    Returns:
        Tuple of (front matter dict, remaining body text).

    Raises:
        ParseError: If the block is unterminated, is not valid YAML, or
            does not decode to a mapping.
    """
    text = text.lstrip("\ufeff")
    opening = OPENING_RE.match(text)
    if not opening:
        return {}, text

    closing = CLOSING_RE.search(text, opening.end())
    if not closing:
        raise ParseError("Unterminated front matter: missing closing '---'", source)

    block = text[opening.end() : closing.start()]
    body = text[closing.end() :]
    if body.startswith("\r\n"):
        body = body[2:]
    elif body.startswith("\n"):
        body = body[1:]

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise ParseError(f"Invalid front matter: {exc}", source, exc) from exc
    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise ParseError(
            f"Front matter must be a mapping of keys to values, got {type(data).__name__}",
            source,
        )
    return {str(key): value for key, value in data.items()}, body
