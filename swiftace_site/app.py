"""HTTP surface: the home page and one page per post."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Iterable, Optional

from flask import Flask, Response

from .config import make_settings
from .content import Document, find_post, load_about, load_posts
from .pages import build_home_page, build_post_page

HTML_CONTENT_TYPE = "text/html;charset=UTF-8"

# The Content Store, built once when the server module is imported.
posts = load_posts()


def html_response(body: str, stale_while_revalidate: int) -> Response:
    return Response(
        body,
        status=200,
        content_type=HTML_CONTENT_TYPE,
        headers={"Cache-Control": f"stale-while-revalidate={stale_while_revalidate}"},
    )


def not_found_response() -> Response:
    return Response("not found", status=404, content_type="text/plain;charset=UTF-8")


def create_app(
    settings: Optional[SimpleNamespace] = None,
    documents: Optional[Iterable[Document]] = None,
    about: Optional[str] = None,
) -> Flask:
    site = settings if settings is not None else make_settings()
    documents = tuple(posts if documents is None else documents)
    about = load_about() if about is None else about

    app = Flask(__name__)
    app.config["SITE"] = site

    @app.errorhandler(404)
    def not_found(error) -> Response:
        return not_found_response()

    @app.get("/")
    def home() -> Response:
        return html_response(
            build_home_page(site, about, documents), site.stale_while_revalidate
        )

    @app.get("/posts/<slug>")
    def post(slug: str) -> Response:
        document = find_post(slug, documents)
        if document is None:
            return not_found_response()
        return html_response(build_post_page(site, document), site.stale_while_revalidate)

    return app
