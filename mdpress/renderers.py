"""Markdown rendering for mdpress.

Converts page bodies to HTML fragments with mistune. Fenced code blocks
that name a language are highlighted with Pygments.

Key classes:
- MarkdownRenderer: Renders Markdown to HTML.
"""

from __future__ import annotations

from pathlib import Path

import mistune
from markupsafe import escape
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .utils import is_markdown


class _HighlightRenderer(mistune.HTMLRenderer):
    """HTML renderer that passes raw HTML through and highlights code blocks."""

    def __init__(self):
        super().__init__(escape=False)

    def block_code(self, code: str, info: str | None = None) -> str:
        """Render a code block with Pygments syntax highlighting.

        Args:
            code: The code content.
            info: Info string of the fence; its first word is the language.

        Returns:
            HTML string with highlighted code.
        """
        lang = info.split()[0] if info and info.strip() else None
        if lang:
            try:
                lexer = get_lexer_by_name(lang, stripall=True)
            except ClassNotFound:
                lexer = None
            if lexer is not None:
                formatter = HtmlFormatter(nowrap=False, cssclass="highlight")
                return highlight(code, lexer, formatter)
        escaped = code.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
        lang_class = f' class="language-{escape(lang)}"' if lang else ""
        return f"<pre><code{lang_class}>{escaped}</code></pre>\n"


class MarkdownRenderer:
    """Renders Markdown content to HTML.

    Supports the standard block and inline syntax (headings, lists,
    emphasis, links, code) plus strikethrough and tables.
    """

    plugins = ["strikethrough", "table"]

    def can_render(self, path: Path) -> bool:
        """Check if this renderer can handle the given file."""
        return is_markdown(path)

    def render(self, content: str) -> str:
        """Render Markdown content to HTML.

        Args:
            content: Markdown source content.

        Returns:
            Rendered HTML fragment.
        """
        markdown = mistune.create_markdown(
            renderer=_HighlightRenderer(), plugins=self.plugins
        )
        return markdown(content)
