"""Error types raised while building a site.

Every failure that aborts a build derives from BuildError so the CLI can
report it with file context and exit non-zero.
"""

from __future__ import annotations

from pathlib import Path


class BuildError(Exception):
    """Error during site build with file context.

    Attributes:
        message: Human-readable error message.
        source_path: Path to the file that caused the error, if known.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        message: str,
        source_path: Path | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.source_path = source_path
        self.original_error = original_error
        if source_path is not None:
            super().__init__(f"{source_path}: {message}")
        else:
            super().__init__(message)


class SiteIOError(BuildError):
    """A file or directory could not be read, created or written."""


class ParseError(BuildError):
    """Front matter is malformed."""


class TemplateError(BuildError):
    """A template is missing, invalid, or references an undefined value."""
