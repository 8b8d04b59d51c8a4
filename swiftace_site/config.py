from __future__ import annotations

import json
import sys
import tomllib
from pathlib import Path
from types import SimpleNamespace

import yaml

DEFAULTS = {
    "site_name": "SwiftAce",
    "github_url": "https://github.com/swiftace-org/swiftace",
    "host": "127.0.0.1",
    "port": 8000,
    "debug": False,
    "stale_while_revalidate": 60,
}


def _fail(message: str) -> None:
    print(message, file=sys.stderr)
    sys.exit(1)


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".toml":
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            _fail(f"Invalid TOML in config file {path}: {exc}")
        return data
    if suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            _fail(f"Invalid YAML in config file {path}: {exc}")
        if data is None:
            return {}
        if not isinstance(data, dict):
            _fail(f"YAML config must be a mapping: {path}")
        return data
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        _fail(f"Invalid JSON in config file {path}: {exc}")
    if not isinstance(data, dict):
        _fail(f"JSON config must be a mapping: {path}")
    return data


def parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return False


def parse_int(value: object, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def make_settings(config: dict | None = None, **overrides: object) -> SimpleNamespace:
    """Merge defaults, a loaded config mapping and explicit overrides."""
    values = dict(DEFAULTS)
    for source in (config or {}, overrides):
        for key, value in source.items():
            if key in DEFAULTS and value is not None:
                values[key] = value
    values["port"] = parse_int(values["port"], DEFAULTS["port"])
    values["debug"] = parse_bool(values["debug"])
    values["stale_while_revalidate"] = max(
        0, parse_int(values["stale_while_revalidate"], DEFAULTS["stale_while_revalidate"])
    )
    values["site_name"] = str(values["site_name"])
    values["github_url"] = str(values["github_url"])
    values["host"] = str(values["host"])
    return SimpleNamespace(**values)
