"""Unit tests for markdown rendering and code-block normalization."""

from __future__ import annotations

import pytest

from refdoc_pages.generator.renderer import HtmlContentRenderer, pretty_codeblocks

CODEBLOCK_SAMPLES = [
    "<pre><code>iex&gt;1+1</code></pre>",
    "<pre><code></code></pre>",
    '<pre><code class="">\n  iex&gt; x</code></pre>',
    '<pre><code class="ruby">x</code></pre>',
    '<p>text</p><pre><code>a</code></pre><pre><code class="iex elixir">iex&gt;</code></pre>',
    "no code at all",
]


def test_iex_block_tagged() -> None:
    html = pretty_codeblocks("<pre><code>iex&gt;1+1</code></pre>")
    assert 'class="iex elixir"' in html
    assert html == '<pre><code class="iex elixir">iex&gt;1+1</code></pre>'


def test_iex_block_with_empty_class_and_leading_whitespace() -> None:
    html = pretty_codeblocks('<pre><code class="">\n  iex&gt; x</code></pre>')
    assert html == '<pre><code class="iex elixir">iex&gt; x</code></pre>'


def test_bare_block_tagged() -> None:
    assert pretty_codeblocks("<pre><code></code></pre>") == (
        '<pre><code class="elixir"></code></pre>'
    )


def test_classed_block_untouched() -> None:
    html = '<pre><code class="ruby">x</code></pre>'
    assert pretty_codeblocks(html) == html


@pytest.mark.parametrize("html", CODEBLOCK_SAMPLES)
def test_pretty_codeblocks_is_idempotent(html: str) -> None:
    once = pretty_codeblocks(html)
    assert pretty_codeblocks(once) == once


def test_markdown_leaves_unlabelled_fences_unclassed() -> None:
    """Unlabelled fences stay bare so the normalization can tag them."""
    renderer = HtmlContentRenderer()
    html = renderer.markdown("```\niex> 1 + 1\n2\n```\n\n```python\nx = 1\n```\n")
    assert "<pre><code>iex&gt; 1 + 1" in html
    assert 'class="language-python"' in html
    tagged = pretty_codeblocks(html)
    assert '<pre><code class="iex elixir">iex&gt; 1 + 1' in tagged
    assert 'class="language-python"' in tagged


def test_markdown_of_blank_text_is_empty() -> None:
    renderer = HtmlContentRenderer()
    assert renderer.markdown(None) == ""
    assert renderer.markdown("  \n") == ""


def test_summary_renders_first_paragraph_only() -> None:
    renderer = HtmlContentRenderer()
    assert renderer.summary("First *part*.\n\nSecond part.") == (
        "<p>First <em>part</em>.</p>"
    )


def test_signature_highlights_with_language_metadata() -> None:
    renderer = HtmlContentRenderer(language="elixir")
    html = renderer.signature("run(opts)")
    assert html.startswith('<div class="highlight" data-language="elixir">')
    assert "run" in html


def test_signature_falls_back_to_text_for_unknown_lexer() -> None:
    renderer = HtmlContentRenderer(language="no-such-language")
    html = renderer.signature("run(opts)")
    assert 'data-language="text"' in html
