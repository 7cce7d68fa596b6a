"""mdpress static site generator.

This package turns a directory of Markdown files with YAML front matter into
a static HTML site, rendering each page through a Jinja2 template and copying
every other file across unchanged.

The main entry point is the CLI module, which provides commands for
scaffolding a new project and building a site.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
