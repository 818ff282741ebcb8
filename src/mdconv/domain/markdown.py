"""CommonMark to HTML rendering via markdown-it-py."""

from __future__ import annotations

from typing import Literal

from markdown_it import MarkdownIt

MarkdownPreset = Literal["commonmark", "default", "zero"]


def build_renderer(preset: MarkdownPreset = "commonmark", *, html: bool = True) -> MarkdownIt:
    """Create a parser for *preset*.

    Args:
        preset: markdown-it preset name.
        html: Pass raw HTML in the source through unchanged. When False,
            HTML tags are escaped as text.
    """
    return MarkdownIt(preset, {"html": html})


def render_html(body: str, *, preset: MarkdownPreset = "commonmark", html: bool = True) -> str:
    """Render a markdown body to an HTML fragment."""
    return build_renderer(preset, html=html).render(body)
