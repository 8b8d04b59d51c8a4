from __future__ import annotations

import html
from pathlib import Path
from types import SimpleNamespace
from typing import Iterable

from .content import Document
from .render import make_meta_description, read_template, render_markdown, render_template

TEMPLATES_DIR = Path(__file__).parent / "templates"
BASE_TEMPLATE = read_template(TEMPLATES_DIR / "base.html")


def build_layout(site: SimpleNamespace, title: str, description: str, content: str) -> str:
    """Wrap page content in the shared shell.

    ``description`` must already be escaped (see ``make_meta_description``);
    ``content`` is inserted as-is.
    """
    return render_template(
        BASE_TEMPLATE,
        title=html.escape(title),
        description=description,
        site_name=html.escape(site.site_name),
        github_url=html.escape(site.github_url),
        content=content,
    )


def build_markdown(text: str) -> str:
    return f'<div class="markdown-body">{render_markdown(text)}</div>'


def build_post_item(post: Document) -> str:
    return (
        '<div class="post-item">'
        '<h2 class="post-title">'
        f'<a class="post-title-link" href="/posts/{html.escape(post.slug)}">{html.escape(post.title)}</a>'
        "</h2>"
        f'<div class="post-date">{html.escape(post.date)}</div>'
        "</div>"
    )


def build_home_page(site: SimpleNamespace, about: str, posts: Iterable[Document]) -> str:
    items = "\n".join(build_post_item(post) for post in posts)
    content = (
        f'<h1 class="page-heading">{html.escape(site.site_name)}</h1>'
        f"<div>{build_markdown(about)}</div>"
        "<div>"
        '<h2 class="page-subheading" id="devlog">Development Log</h2>'
        f"{items}"
        "</div>"
    )
    return build_layout(site, site.site_name, make_meta_description(about), content)


def build_post_page(site: SimpleNamespace, post: Document) -> str:
    content = (
        '<div class="post-page">'
        f'<h1 class="page-heading">{html.escape(post.title)}</h1>'
        f'<div class="post-date">{html.escape(post.date)} · {html.escape(post.author)}</div>'
        f"{build_markdown(post.content)}"
        "</div>"
    )
    return build_layout(
        site,
        f"{post.title} - {site.site_name}",
        make_meta_description(post.content),
        content,
    )
