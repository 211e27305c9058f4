"""Render Markdown source documents into HTML fragments."""

from __future__ import annotations

from html import escape

from markdown_it import MarkdownIt
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

CODE_CSS_CLASS = "codehilite"


class HtmlContentRenderer:
    """Render CommonMark (plus tables) with Pygments-highlighted fenced code.

    Link validation is disabled, so ``file:///`` and other non-web schemes
    survive rendering.
    """

    def __init__(self, pygments_style: str = "default") -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, nowrap=True)
        self._md = MarkdownIt("commonmark", {"highlight": self._highlight})
        self._md.enable("table")
        self._md.validateLink = lambda url: True

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(f".{CODE_CSS_CLASS}")

    def markdown(self, text: str) -> str:
        """Render markdown into an HTML fragment."""
        if not text.strip():
            return ""
        return self._md.render(text)

    def _highlight(self, code: str, lang: str, _attrs: str) -> str:
        """Return a highlighted ``<pre>`` block, or ``""`` for plain rendering."""
        if not lang:
            return ""
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            return ""
        body = highlight(code, lexer, self._formatter)
        language = escape(lang, quote=True)
        return (
            f'<pre class="{CODE_CSS_CLASS}"><code class="language-{language}">'
            f"{body}</code></pre>"
        )


__all__ = ["CODE_CSS_CLASS", "HtmlContentRenderer"]
