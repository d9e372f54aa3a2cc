from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

from .errors import ConfigError
from .utils import parse_bool, parse_int

CONFIG_NAMES = ("blog.toml", "blog.yaml", "blog.yml", "blog.json")


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc
    elif suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in config file {path}: {exc}") from exc
        if data is None:
            return {}
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping: {path}")
    return data


@dataclass
class SiteConfig:
    base_url: str = ""
    site_name: str = "My Blog"
    site_description: str = ""
    author: str = ""
    language: str = "en"
    feed_count: int = 10
    index_count: int = 0
    url_shortener: bool = False
    blog_dir: str = "blog"
    content_dir: str = "content"
    resources_dir: str = "resources"
    templates_dir: str = "templates"

    @classmethod
    def from_mapping(cls, data: dict) -> "SiteConfig":
        # Keys may be written with dashes (base-url) or underscores.
        normalized = {str(key).strip().lower().replace("-", "_"): value for key, value in data.items()}
        values = {}
        for field in fields(cls):
            if field.name not in normalized or normalized[field.name] is None:
                continue
            value = normalized[field.name]
            if field.type == "int":
                values[field.name] = max(0, parse_int(value, field.default))
            elif field.type == "bool":
                values[field.name] = parse_bool(value)
            else:
                values[field.name] = str(value).strip()
        return cls(**values)


def find_config(directory: Path) -> Optional[Path]:
    for name in CONFIG_NAMES:
        candidate = directory / name
        if candidate.exists():
            return candidate
    return None


def load_site_config(directory: Path, filename: Optional[str] = None) -> SiteConfig:
    if filename:
        path = Path(filename)
        if not path.is_absolute():
            path = directory / path
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
    else:
        path = find_config(directory)
        if path is None:
            return SiteConfig()
    return SiteConfig.from_mapping(load_config(path))
