"""Markdown rendering helpers for notes and certificates.

Notes are written in markdown by students and certificates are assembled as
markdown, so both go through the same MarkdownIt instance. Raw HTML in the
source is escaped unless the renderer is created with ``enable_html=True``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def wrap_document(self, body_html: str, title: str, css_class: str = "document") -> str:
        """Wrap a fragment inside a minimal standalone HTML document."""

        return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{escape(title)}</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 2rem; color: #1f2937; }}
      .certificate {{ text-align: center; border: 0.5rem double #4f46e5; padding: 3rem; }}
      .note {{ max-width: 48rem; line-height: 1.6; }}
    </style>
  </head>
  <body>
    <div class="{css_class}">{body_html}</div>
  </body>
</html>"""

    def render_full_document(self, markdown_text: str, title: str, css_class: str = "document") -> str:
        fragment = self.render_fragment(markdown_text)
        return self.wrap_document(fragment, title=title, css_class=css_class)


renderer = MarkdownRenderer()
