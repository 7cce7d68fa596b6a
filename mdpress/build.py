"""Site building functionality for mdpress.

This module contains the core build pipeline: discover content files,
parse front matter, render Markdown, apply templates and write the results,
copying every other file across unchanged.

Key functions:
- build_site: Main function to build the entire site.
- load_config: Loads site configuration from mdpress.yaml.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .assets import AssetCopier
from .content import ContentLoader, Page, PageBuilder
from .errors import ParseError, SiteIOError
from .templates import TemplateEngine
from .utils import ensure_clean_dir, is_markdown, is_within, output_path_for

CONFIG_FILENAME = "mdpress.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "content_dir": "content",
    "output_dir": "public",
    "templates_dir": "templates",
    "static_dir": "static",
    "default_template": "default",
    "clean_output": True,
}


@dataclass
class SiteConfig:
    """Settings for one build.

    Attributes:
        content_dir: Directory holding Markdown sources and assets.
        output_dir: Directory the site is written to.
        templates_dir: Directory holding Jinja2 templates.
        static_dir: Directory mirrored into the output root, if present.
        default_template: Template for pages whose front matter names none.
        clean_output: Whether to wipe the output directory before building.
    """

    content_dir: Path = Path("content")
    output_dir: Path = Path("public")
    templates_dir: Path = Path("templates")
    static_dir: Path | None = Path("static")
    default_template: str = "default"
    clean_output: bool = True


@dataclass
class BuildResult:
    """Result of a site build operation.

    Attributes:
        pages: Pages rendered during the build.
        output_dir: Directory where the site was built.
        assets: Output paths of copied static files.
    """

    pages: list[Page]
    output_dir: Path
    assets: list[Path] = field(default_factory=list)


def load_config(project_root: Path, **overrides: Any) -> SiteConfig:
    """Load site configuration from mdpress.yaml.

    Values are taken from the defaults, then the config file, then any
    override that is not None. Relative paths resolve against project_root.

    Args:
        project_root: Root directory of the project.
        **overrides: Values that take precedence over the config file.

    Returns:
        SiteConfig with defaults applied.

    Raises:
        ParseError: If the config file is not valid YAML.
    """
    config_path = project_root / CONFIG_FILENAME
    values = DEFAULT_CONFIG.copy()
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ParseError(f"Invalid config file: {exc}", config_path, exc) from exc
        if isinstance(loaded, dict):
            values.update({k: v for k, v in loaded.items() if k in DEFAULT_CONFIG})
    values.update({k: v for k, v in overrides.items() if v is not None})

    static_dir = values["static_dir"]
    return SiteConfig(
        content_dir=project_root / values["content_dir"],
        output_dir=project_root / values["output_dir"],
        templates_dir=project_root / values["templates_dir"],
        static_dir=project_root / static_dir if static_dir else None,
        default_template=str(values["default_template"]),
        clean_output=bool(values["clean_output"]),
    )


def build_site(
    config: SiteConfig,
    on_page: Callable[[Path], None] | None = None,
) -> BuildResult:
    """Build the entire static site.

    The first failing file aborts the build. Files already written stay in
    place, but a page is only written once it has rendered completely.

    Args:
        config: Build settings.
        on_page: Optional callback invoked with each Markdown source path
            before it is processed.

    Returns:
        BuildResult containing the rendered pages and copied assets.

    Raises:
        SiteIOError: On filesystem failures.
        ParseError: When a page has malformed front matter.
        TemplateError: When a template is missing or fails to render.
    """
    content_dir = config.content_dir
    output_dir = config.output_dir
    loader = ContentLoader(content_dir, exclude=[output_dir])
    files = loader.iter_files()

    if is_within(content_dir, output_dir):
        raise SiteIOError(
            "Output directory must not contain the content directory", output_dir
        )
    _check_output_collisions(files, content_dir)
    _prepare_output(output_dir, config.clean_output)

    engine = TemplateEngine(config.templates_dir, config.default_template)
    builder = PageBuilder(content_dir, default_template=config.default_template)
    copier = AssetCopier(output_dir)

    # Static files go first so content files win on conflicting paths.
    assets = copier.copy_tree(config.static_dir) if config.static_dir else []
    pages: list[Page] = []
    for path in files:
        if not is_markdown(path):
            assets.append(copier.copy(path, path.relative_to(content_dir)))
            continue
        if on_page is not None:
            on_page(path)
        page = builder.build(path)
        rendered = engine.render_page(page)
        _write_page(output_dir, page, rendered)
        pages.append(page)

    return BuildResult(pages=pages, output_dir=output_dir, assets=assets)


def _check_output_collisions(files: list[Path], content_dir: Path) -> None:
    """Ensure no two content files map to the same output path.

    Raises:
        SiteIOError: Naming both sources of the first collision found.
    """
    claimed: dict[Path, Path] = {}
    for path in files:
        rel = path.relative_to(content_dir)
        target = output_path_for(rel) if is_markdown(path) else rel
        if target in claimed:
            raise SiteIOError(
                f"Output {target.as_posix()} is produced by both "
                f"{claimed[target].relative_to(content_dir).as_posix()} and {rel.as_posix()}",
                path,
            )
        claimed[target] = path


def _prepare_output(output_dir: Path, clean: bool) -> None:
    """Create the output directory, wiping it first when clean is set."""
    try:
        if clean:
            ensure_clean_dir(output_dir)
        else:
            output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SiteIOError(
            f"Could not create output directory: {exc}", output_dir, exc
        ) from exc


def _write_page(output_dir: Path, page: Page, rendered: str) -> None:
    """Write a rendered page to the output directory.

    Args:
        output_dir: Base output directory.
        page: Page object containing metadata.
        rendered: Rendered HTML content.
    """
    target = output_dir / page.output_path
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            f.write(rendered)
    except OSError as exc:
        raise SiteIOError(f"Could not write page: {exc}", target, exc) from exc
