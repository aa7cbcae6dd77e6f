"""Markdown + LaTeX rendering shared by the question and result views.

Question and explanation texts are authored as Markdown with ``$...$`` math.
They are turned into HTML here and typeset by MathJax inside the
``QWebEngineView`` that displays them. Raw HTML in the source is escaped, so
text typed by participants or quiz authors cannot inject markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from markdown_it import MarkdownIt

_MATHJAX_SCRIPT = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"

_BASE_CSS = """
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem;
             background: {background}; color: {foreground}; font-size: {font_size}pt; line-height: 1.5; }}
      .notice {{ background: #fff7e6; color: #8a5a00; border: 1px solid #ffd591; border-radius: 6px; padding: 0.5rem 0.75rem; }}
      .required {{ color: #d13438; margin-left: 0.25rem; }}
      .meta {{ color: #666666; font-size: 0.9em; }}
"""


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Converts markdown-with-math into HTML fragments or full documents."""

    enable_html: bool = False
    background: str = "#FFFFFF"
    foreground: str = "#000000"
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str, empty_text: str = "No content provided.") -> str:
        """Render block markdown; empty input yields a placeholder paragraph."""
        cleaned = (markdown_text or "").strip()
        if not cleaned:
            return f"<p><em>{escape(empty_text)}</em></p>"
        return self._markdown.render(cleaned)

    def render_inline(self, markdown_text: str) -> str:
        """Render markdown without the surrounding paragraph."""
        return self._markdown.renderInline((markdown_text or "").strip())

    def wrap_document(
        self,
        body_html: str,
        title: str = "QuizTaker",
        font_size: int = 14,
        extra_css: str = "",
    ) -> str:
        """Embed a fragment in a minimal HTML page that loads MathJax."""
        css = _BASE_CSS.format(
            background=self.background,
            foreground=self.foreground,
            font_size=font_size,
        )
        return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{escape(title)}</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>{css}{extra_css}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }}, svg: {{ fontCache: 'global' }} }};
    </script>
    <script defer src="{_MATHJAX_SCRIPT}"></script>
  </head>
  <body>
{body_html}
  </body>
</html>"""


renderer = MarkdownMathRenderer()
# MarkdownIt is safe for concurrent read-only renders, so one instance serves
# the UI thread and the practice backend alike.
