from quiz_taker.core.markdown_math_renderer import MarkdownMathRenderer


def test_fragment_keeps_math_for_mathjax():
    html = MarkdownMathRenderer().render_fragment("Solve $x^2 = 4$ **now**")
    assert "$x^2 = 4$" in html
    assert "<strong>now</strong>" in html


def test_empty_fragment_shows_placeholder():
    assert "No content provided." in MarkdownMathRenderer().render_fragment("   ")


def test_raw_html_is_escaped():
    html = MarkdownMathRenderer().render_inline("<b>bold</b>")
    assert "<b>" not in html
    assert "&lt;b&gt;" in html


def test_document_uses_theme_colors():
    renderer = MarkdownMathRenderer(background="#2D2D2D", foreground="#F5F5F5")
    document = renderer.wrap_document("<p>x</p>", title="T", font_size=18)
    assert "background: #2D2D2D" in document
    assert "font-size: 18pt" in document
    assert "mathjax" in document
