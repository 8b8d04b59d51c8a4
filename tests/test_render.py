"""Tests for Markdown rendering and meta description generation."""

from swiftace_site.render import (
    escape_html,
    make_meta_description,
    render_markdown,
    render_template,
    strip_tags,
    truncate_at_space,
)


def test_render_markdown_blocks():
    html = render_markdown("## Heading\n\nSome *emphasis* and a [link](https://example.com).\n\n- one\n- two")
    assert "<h2>Heading</h2>" in html
    assert "<em>emphasis</em>" in html
    assert '<a href="https://example.com">link</a>' in html
    assert "<li>one</li>" in html


def test_render_markdown_fenced_code():
    html = render_markdown("```python\nprint('hi')\n```")
    assert '<code class="language-python">' in html


def test_leading_bom_is_stripped():
    assert render_markdown("\ufeff# Title") == "<h1>Title</h1>"


def test_leading_zero_width_space_is_stripped():
    assert render_markdown("\u200b# Title") == "<h1>Title</h1>"


def test_mid_document_bom_is_kept():
    html = render_markdown("Hello\ufeffworld")
    assert "\ufeff" in html


def test_only_one_leading_character_is_stripped():
    html = render_markdown("\ufeff\u200bText")
    assert "\u200b" in html
    assert "\ufeff" not in html


def test_strip_tags():
    assert strip_tags("<p>Hi <a href='x'>there</a></p>") == "Hi there"


def test_escape_html_order():
    assert escape_html("&lt; <b> \"q\" 'a'") == "&amp;lt; &lt;b&gt; &quot;q&quot; &#039;a&#039;"


def test_meta_description_uses_first_paragraph():
    assert make_meta_description("First **bold** line.\nSecond line.") == "First bold line."


def test_meta_description_without_spaces_is_not_truncated():
    text = "x" * 200
    assert make_meta_description(text, 160) == text


def test_meta_description_truncates_at_space():
    description = make_meta_description("word " * 40, 160)
    assert description.endswith("...")
    assert len(description) <= 160
    assert description == ("word " * 31).rstrip() + "..."


def test_meta_description_short_text_untouched():
    assert make_meta_description("Short text.") == "Short text."


def test_meta_description_has_no_raw_angle_brackets():
    description = make_meta_description("Use <div> & `a < b` in 'quotes' and \"more\".")
    assert "<" not in description
    assert ">" not in description
    assert "&amp;" in description
    assert "&#039;" in description
    assert "&quot;" in description


def test_meta_description_escapes_entities_once():
    assert make_meta_description("Fish & chips") == "Fish &amp; chips"


def test_truncate_boundary():
    text = "a" * 150 + " " + "b" * 20
    assert truncate_at_space(text, 160) == "a" * 150 + "..."
    assert truncate_at_space("ab", 160) == "ab"


def test_render_template_content_last():
    template = "<title>{{title}}</title>{{content}}"
    output = render_template(template, content="{{title}}", title="T")
    assert output == "<title>T</title>{{title}}"
