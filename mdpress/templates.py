"""Template rendering engine for mdpress.

This module uses Jinja2 to render pages into full HTML documents. Templates
are looked up by name in the project's templates directory; the default
template falls back to a layout bundled with the package.

Key class:
- TemplateEngine: Handles template lookup and page rendering.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    PrefixLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)
from jinja2 import TemplateError as JinjaTemplateError
from markupsafe import Markup
from pygments.formatters import HtmlFormatter

from .content import Page
from .errors import TemplateError

__all__ = ["BUILTIN_TEMPLATE", "TemplateEngine", "pygments_css"]

# Name of the layout bundled with the package.
BUILTIN_TEMPLATE = "mdpress/default.html"


def pygments_css() -> Markup:
    """Return Pygments CSS styles for syntax highlighting.

    Returns:
        CSS string for the .highlight class.
    """
    return Markup(HtmlFormatter().get_style_defs(".highlight"))


class TemplateEngine:
    """Template rendering engine using Jinja2.

    Undefined placeholders raise instead of rendering as empty strings.

    Attributes:
        templates_dir: Directory containing project templates.
        default_template: Template name used for pages without one.
        env: Jinja2 environment.
    """

    def __init__(self, templates_dir: Path, default_template: str = "default"):
        """Initialize the template engine.

        Args:
            templates_dir: Directory with templates. It may not exist.
            default_template: Name of the default template.
        """
        self.templates_dir = templates_dir
        self.default_template = default_template
        self.env = Environment(
            loader=ChoiceLoader(
                [
                    FileSystemLoader(str(templates_dir)),
                    PrefixLoader({"mdpress": PackageLoader("mdpress", "layouts")}),
                ]
            ),
            autoescape=select_autoescape(["html", "htm", "xml", "jinja"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self.env.globals["pygments_css"] = pygments_css

    def get_template(self, name: str) -> Template:
        """Resolve a template by name.

        Tries ``name.html.jinja``, ``name.jinja``, ``name.html`` and ``name``
        in that order. The default template falls back to the bundled layout.

        Args:
            name: Template name, usually from front matter.

        Returns:
            Jinja2 Template object.

        Raises:
            TemplateError: If no template matches, or it fails to compile.
        """
        candidates = [f"{name}.html.jinja", f"{name}.jinja", f"{name}.html", name]
        if name == self.default_template:
            candidates.append(BUILTIN_TEMPLATE)
        for candidate in candidates:
            try:
                return self.env.get_template(candidate)
            except TemplateNotFound:
                continue
            except TemplateSyntaxError as exc:
                raise TemplateError(
                    f"Template syntax error in {candidate} on line {exc.lineno}: {exc.message}",
                    original_error=exc,
                ) from exc
        raise TemplateError(f"Template not found: {name}")

    def context_for(self, page: Page) -> dict[str, Any]:
        """Build the template context for a page.

        Front matter fields come first; the reserved names ``title``,
        ``content``, ``path_prefix`` and ``page`` override them.
        """
        context = dict(page.frontmatter)
        context.update(
            title=page.title,
            content=Markup(page.content),
            path_prefix=page.path_prefix,
            page=page,
        )
        return context

    def render_page(self, page: Page) -> str:
        """Render a page with its template.

        Args:
            page: Page object to render.

        Returns:
            Rendered HTML string.

        Raises:
            TemplateError: If the template is missing or fails to render.
        """
        try:
            template = self.get_template(page.template)
            return self._render(template, self.context_for(page))
        except TemplateError as exc:
            raise TemplateError(
                exc.message, page.source_path, exc.original_error
            ) from exc

    def render_string(self, source: str, context: dict[str, Any]) -> str:
        """Render a template string.

        Args:
            source: Template string to render.
            context: Variables to make available in the template.

        Returns:
            Rendered string.
        """
        try:
            template = self.env.from_string(source)
        except TemplateSyntaxError as exc:
            raise TemplateError(
                f"Template syntax error on line {exc.lineno}: {exc.message}",
                original_error=exc,
            ) from exc
        return self._render(template, context)

    def _render(self, template: Template, context: dict[str, Any]) -> str:
        try:
            return template.render(context)
        except JinjaTemplateError as exc:
            raise TemplateError(
                _format_error_message(exc), original_error=exc
            ) from exc


def _format_error_message(exc: Exception) -> str:
    """Format a Jinja2 exception into a user-friendly error message.

    Args:
        exc: The exception to format.

    Returns:
        A human-readable error message.
    """
    error_type = type(exc).__name__
    error_msg = str(exc)

    if isinstance(exc, TemplateSyntaxError):
        return f"Template syntax error on line {exc.lineno}: {exc.message}"
    if error_type == "UndefinedError":
        return f"Undefined variable: {error_msg}"
    if isinstance(exc, TemplateNotFound):
        return f"Template not found: {exc.name}"

    return f"{error_type}: {error_msg}"
