"""Utilities for rendering docstrings and highlighting member signatures."""

from __future__ import annotations

import re
from html import escape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
IEX_BLOCK_PATTERN = re.compile(r'<pre><code(\s+class="")?>\s*iex&gt;')
BARE_BLOCK_PATTERN = re.compile(r'<pre><code(\s+class="")?>')
FIRST_PARAGRAPH_PATTERN = re.compile(r"\n\s*\n")
HIGHLIGHT_OPEN_TAG = re.compile(r'<div class="highlight">')


def pretty_codeblocks(html: str) -> str:
    """Tag plain ``<pre><code>`` blocks for client-side highlighting.

    Interactive session blocks (starting with ``iex>``) receive the
    ``"iex elixir"`` class and every other unclassed block receives
    ``"elixir"``. Blocks that already carry a non-empty class are left alone,
    so applying the function twice gives the same result as applying it once.

    Examples
    --------
    >>> pretty_codeblocks("<pre><code>iex&gt; 1 + 1</code></pre>")
    '<pre><code class="iex elixir">iex&gt; 1 + 1</code></pre>'
    >>> pretty_codeblocks('<pre><code class="ruby">x</code></pre>')
    '<pre><code class="ruby">x</code></pre>'
    """
    html = IEX_BLOCK_PATTERN.sub('<pre><code class="iex elixir">iex&gt;', html)
    return BARE_BLOCK_PATTERN.sub('<pre><code class="elixir">', html)


class HtmlContentRenderer:
    """Render markdown docstrings and signatures with consistent styling."""

    def __init__(self, language: str = "elixir", pygments_style: str = "monokai") -> None:
        """Initialize a renderer for ``language`` signatures.

        Parameters
        ----------
        language : str, optional
            Pygments lexer name used by :meth:`signature`. Unknown lexers fall
            back to plain text.
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        """
        self.language = language
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="highlight")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted signatures."""
        return self._formatter.get_style_defs(".highlight")

    def markdown(self, text: str | None) -> str:
        """Render markdown into HTML, leaving code blocks for the browser."""
        normalized = FENCED_INDENT_PATTERN.sub(r"\1", text or "")
        if not normalized.strip():
            return ""
        md = Markdown(extensions=["fenced_code", "tables", "sane_lists"])
        return md.convert(normalized)

    def summary(self, text: str | None) -> str:
        """Render only the first paragraph of ``text``."""
        if not text or not text.strip():
            return ""
        first = FIRST_PARAGRAPH_PATTERN.split(text.strip(), maxsplit=1)[0]
        return self.markdown(first)

    def signature(self, code: str) -> str:
        """Render a member signature as a highlighted block.

        Returns
        -------
        str
            HTML containing the highlighted signature with ``data-language``
            metadata applied.
        """
        try:
            lexer = get_lexer_by_name(self.language)
            lang = self.language
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
            lang = "text"
        html = highlight(code, lexer, self._formatter)
        safe_lang = escape(lang, quote=True)
        return HIGHLIGHT_OPEN_TAG.sub(
            f'<div class="highlight" data-language="{safe_lang}">', html, 1
        )


__all__ = ["HtmlContentRenderer", "pretty_codeblocks"]
