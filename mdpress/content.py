"""Content discovery and page building for mdpress.

This module walks the content directory and turns Markdown sources into
Page objects: front matter is split off, the body is rendered to HTML and
the template name is resolved.

Key classes:
- Page: Immutable record of one rendered source file.
- ContentLoader: Discovers files under the content root.
- PageBuilder: Builds Page instances from Markdown sources.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import SiteIOError
from .frontmatter import split_frontmatter
from .renderers import MarkdownRenderer
from .utils import is_within, output_path_for, path_prefix_for, titleize


@dataclass(frozen=True)
class Page:
    """Represents one Markdown source and its rendered body.

    Attributes:
        source_path: Path to the source file.
        relative_path: Path of the source relative to the content root.
        title: Title from front matter, or derived from the filename.
        template: Name of the template used to render the page.
        body: Raw Markdown body after the front matter block.
        content: Rendered HTML fragment.
        frontmatter: Decoded front matter fields.
    """

    source_path: Path
    relative_path: Path
    title: str
    template: str
    body: str
    content: str
    frontmatter: dict[str, Any] = field(default_factory=dict)

    @property
    def output_path(self) -> Path:
        """Output path relative to the output root."""
        return output_path_for(self.relative_path)

    @property
    def path_prefix(self) -> str:
        """Relative prefix from the page back to the output root."""
        return path_prefix_for(self.relative_path)


class ContentLoader:
    """Discovers files in the content directory.

    Attributes:
        content_dir: Root directory of the site content.
        exclude: Directories whose files are skipped, such as a nested output root.
    """

    def __init__(self, content_dir: Path, exclude: list[Path] | None = None):
        self.content_dir = content_dir
        self.exclude = list(exclude or [])

    def iter_files(self) -> list[Path]:
        """Return every regular file under the content root.

        Files are sorted by their path relative to the root so builds
        visit them in a stable order.

        Raises:
            SiteIOError: If the content root does not exist.
        """
        if not self.content_dir.is_dir():
            raise SiteIOError(
                "Content directory does not exist", self.content_dir
            )
        files = [
            path
            for path in self.content_dir.rglob("*")
            if path.is_file()
            and not any(is_within(path, skip) for skip in self.exclude)
        ]
        return sorted(files, key=lambda p: p.relative_to(self.content_dir).as_posix())


class PageBuilder:
    """Builds Page objects from Markdown source files.

    Attributes:
        content_dir: Root directory of the site content.
        renderer: Markdown renderer.
        default_template: Template used when front matter names none.
    """

    def __init__(
        self,
        content_dir: Path,
        renderer: MarkdownRenderer | None = None,
        default_template: str = "default",
    ):
        self.content_dir = content_dir
        self.renderer = renderer or MarkdownRenderer()
        self.default_template = default_template

    def build(self, path: Path) -> Page:
        """Build a Page object from a source file.

        Args:
            path: Path to the Markdown source.

        Returns:
            Page object.

        Raises:
            SiteIOError: If the file cannot be read.
            ParseError: If the front matter is malformed.
        """
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SiteIOError(f"Could not read file: {exc}", path, exc) from exc

        frontmatter, body = split_frontmatter(raw, path)
        title = frontmatter.get("title")
        template = frontmatter.get("template") or self.default_template

        return Page(
            source_path=path,
            relative_path=path.relative_to(self.content_dir),
            title=str(title) if title is not None else titleize(path.name),
            template=str(template),
            body=body,
            content=self.renderer.render(body),
            frontmatter=frontmatter,
        )
