from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import DEFAULTS, load_config, make_settings, parse_bool, parse_int
from .content import POSTS_DIR, MalformedDocument, load_about, load_posts


def build_parser(config: dict, config_path: str) -> argparse.ArgumentParser:
    def cfg_value(key: str) -> object:
        value = config.get(key)
        return DEFAULTS[key] if value is None else value

    def cfg_str(key: str) -> str:
        return str(cfg_value(key))

    def cfg_bool(key: str) -> bool:
        return parse_bool(cfg_value(key))

    def cfg_int(key: str) -> int:
        return parse_int(cfg_value(key), DEFAULTS[key])

    parser = argparse.ArgumentParser(description="Serve the SwiftAce site.")
    parser.add_argument("--config", default=config_path, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument("--posts", default=str(POSTS_DIR), help="Directory containing Markdown posts.")
    parser.add_argument("--site-name", default=cfg_str("site_name"), help="Site title.")
    parser.add_argument("--github-url", default=cfg_str("github_url"), help="Project link shown in the navigation.")
    parser.add_argument("--host", default=cfg_str("host"), help="Interface to bind.")
    parser.add_argument("--port", default=cfg_int("port"), type=int, help="Port to listen on.")
    parser.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("debug"),
        help="Run the development server in debug mode.",
    )
    parser.add_argument(
        "--stale-while-revalidate",
        default=cfg_int("stale_while_revalidate"),
        type=int,
        help="Seconds clients may serve a stale page while revalidating.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the bundled posts and exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        default="site.toml",
        help="Path to site config file (TOML/YAML/JSON).",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)
    config = load_config(Path(pre_args.config))
    args = build_parser(config, pre_args.config).parse_args(argv)

    try:
        documents = load_posts(posts_dir=Path(args.posts))
    except MalformedDocument as exc:
        print(f"Malformed post {exc}", file=sys.stderr)
        sys.exit(1)

    if args.check:
        print(f"{len(documents)} posts OK.")
        return

    # Importing the server builds the bundled Content Store, so it waits until
    # the posts above have been validated.
    from .app import create_app

    settings = make_settings(
        site_name=args.site_name,
        github_url=args.github_url,
        host=args.host,
        port=args.port,
        debug=args.debug,
        stale_while_revalidate=args.stale_while_revalidate,
    )
    app = create_app(settings, documents=documents, about=load_about())
    print(f"Serving {len(documents)} posts on http://{settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
