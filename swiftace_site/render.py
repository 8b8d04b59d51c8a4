from __future__ import annotations

import html
import re
from pathlib import Path

import markdown

# Only a single leading character is removed; mid-document occurrences are kept.
MARKDOWN_BAD_CHARS_RE = re.compile("\\A[\u200b\u200c\u200d\u200e\u200f\ufeff]")
TAG_RE = re.compile(r"<[^>]*>")
MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]
ELLIPSIS = "..."


def render_markdown(text: str) -> str:
    """Convert bundled Markdown to HTML.

    The result is inserted into pages verbatim. This is only acceptable because
    every document ships with the package; user-submitted Markdown must be
    sanitized before it reaches this function.
    """
    text = MARKDOWN_BAD_CHARS_RE.sub("", text)
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS)
    html_content = md.convert(text)
    md.reset()
    return html_content


def strip_tags(html_text: str) -> str:
    return TAG_RE.sub("", html_text)


def escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
    )


def first_paragraph(text: str) -> str:
    return text.partition("\n")[0]


def truncate_at_space(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    # Last space at or before index max_length - 3, leaving room for the ellipsis.
    cut = text.rfind(" ", 0, max_length - len(ELLIPSIS) + 1)
    if cut < 0:
        return text
    return text[:cut] + ELLIPSIS


def make_meta_description(text: str, max_length: int = 160) -> str:
    """Plain-text summary of the first paragraph, escaped for an attribute value.

    A paragraph without any space before the cut-off is returned whole.
    """
    paragraph = truncate_at_space(first_paragraph(text), max_length)
    plain = html.unescape(strip_tags(render_markdown(paragraph))).strip()
    return escape_html(plain)


def render_template(template: str, **context: str) -> str:
    output = template
    late_keys = {"content"}
    for key, value in context.items():
        if key in late_keys:
            continue
        output = output.replace(f"{{{{{key}}}}}", value)
    for key in late_keys:
        if key in context:
            output = output.replace(f"{{{{{key}}}}}", context[key])
    return output


def read_template(path: Path) -> str:
    return path.read_text(encoding="utf-8")
