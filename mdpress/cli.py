"""Command-line interface for mdpress.

This module defines the CLI commands using Click framework.

Commands:
- new: Scaffold a new mdpress project.
- build: Build the site into the output directory.
"""

from __future__ import annotations

import shutil
from pathlib import Path

import click

from . import __version__

# Path to the project skeleton copied by `new`
_SKELETON_DIR = Path(__file__).parent / "skeleton"


@click.group()
@click.version_option(version=__version__, prog_name="mdpress")
def cli():
    """mdpress static site generator."""


@cli.command()
@click.argument("name")
def new(name: str):
    """Scaffold a new mdpress project."""
    target = Path(name).resolve()
    if target.exists() and any(target.iterdir()):
        raise click.ClickException(
            f"Refusing to initialize into non-empty directory: {target}"
        )
    _scaffold(target)
    click.echo(f"New mdpress site created at {target}")


@cli.command()
@click.option(
    "--input-dir",
    "-i",
    type=click.Path(path_type=Path),
    help="Directory containing Markdown files (default: content)",
)
@click.option(
    "--out-dir",
    "-o",
    type=click.Path(path_type=Path),
    help="Directory the site is written to (default: public)",
)
@click.option(
    "--templates-dir",
    "-t",
    type=click.Path(path_type=Path),
    help="Directory containing templates (default: templates)",
)
@click.option(
    "--static-dir",
    type=click.Path(path_type=Path),
    help="Directory copied verbatim into the output (default: static)",
)
@click.option("--default-template", help="Template for pages that name none")
@click.option(
    "--no-clean", is_flag=True, help="Keep existing files in the output directory"
)
@click.option("--verbose", "-v", is_flag=True, help="Print each page as it is built")
def build(
    input_dir: Path | None,
    out_dir: Path | None,
    templates_dir: Path | None,
    static_dir: Path | None,
    default_template: str | None,
    no_clean: bool,
    verbose: bool,
):
    """Build the site into the output directory."""
    project_root = Path.cwd()
    from .build import build_site, load_config
    from .errors import BuildError

    def report(path: Path) -> None:
        click.echo(f"Processing: {_display_path(path, project_root)}")

    try:
        config = load_config(
            project_root,
            content_dir=input_dir,
            output_dir=out_dir,
            templates_dir=templates_dir,
            static_dir=static_dir,
            default_template=default_template,
            clean_output=False if no_clean else None,
        )
        result = build_site(config, on_page=report if verbose else None)
    except BuildError as exc:
        # Display user-friendly error message
        click.echo(click.style("Build failed:", fg="red", bold=True), err=True)
        if exc.source_path is not None:
            rel_path = _display_path(exc.source_path, project_root)
            click.echo(click.style(f"  File: {rel_path}", fg="yellow"), err=True)
        click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
        raise SystemExit(1) from None
    click.echo(
        f"Built {len(result.pages)} pages and copied {len(result.assets)} files "
        f"into {_display_path(result.output_dir, project_root)}"
    )


def _display_path(path: Path, root: Path) -> str:
    """Return path relative to root when it lies below it."""
    try:
        return str(path.resolve().relative_to(root.resolve()))
    except ValueError:
        return str(path)


def main():
    """Entry point for the CLI application."""
    cli()


def _scaffold(root: Path) -> None:
    """Create the directory structure and files for a new mdpress project.

    Args:
        root: Root directory for the new project.
    """
    for src_path in _SKELETON_DIR.rglob("*"):
        if src_path.is_dir():
            continue
        rel_path = src_path.relative_to(_SKELETON_DIR)
        dest_path = root / rel_path
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src_path, dest_path)
