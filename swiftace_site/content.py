from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

DATA_DIR = Path(__file__).parent / "data"
POSTS_DIR = DATA_DIR / "posts"
TITLE_PREFIX = "# "

# Newest first. This order is the display order on the home page.
POST_SOURCES = (
    ("authentication", "Aakash N S", "May 16, 2024", "authentication.md"),
    ("features", "Aakash N S", "May 15, 2024", "features.md"),
)


class MalformedDocument(ValueError):
    pass


@dataclass(frozen=True)
class Document:
    slug: str
    author: str
    title: str
    date: str
    content: str


def extract_title(raw: str) -> str:
    # A document without a line break has no title line at all.
    head, sep, _ = raw.partition("\n")
    first_line = head.strip() if sep else ""
    if not first_line:
        raise MalformedDocument("First line must not be empty")
    if not first_line.startswith(TITLE_PREFIX):
        raise MalformedDocument(f"First line must start with '{TITLE_PREFIX}'")
    return first_line[len(TITLE_PREFIX) :]


def extract_body(raw: str) -> str:
    _, sep, rest = raw.partition("\n")
    return (rest if sep else raw).strip()


def make_document(raw: str, *, slug: str, author: str, date: str) -> Document:
    return Document(
        slug=slug,
        author=author,
        title=extract_title(raw),
        date=date,
        content=extract_body(raw),
    )


def read_source(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def load_posts(
    sources: Iterable[tuple[str, str, str, str]] = POST_SOURCES,
    posts_dir: Path = POSTS_DIR,
) -> tuple[Document, ...]:
    documents = []
    seen: set[str] = set()
    for slug, author, date, filename in sources:
        if slug in seen:
            raise MalformedDocument(f"Duplicate slug: {slug}")
        seen.add(slug)
        raw = read_source(posts_dir / filename)
        try:
            documents.append(make_document(raw, slug=slug, author=author, date=date))
        except MalformedDocument as exc:
            raise MalformedDocument(f"{filename}: {exc}") from exc
    return tuple(documents)


def load_about(path: Path = DATA_DIR / "about.md") -> str:
    return read_source(path).strip()


def find_post(slug: str, documents: Iterable[Document]) -> Optional[Document]:
    for document in documents:
        if document.slug == slug:
            return document
    return None
