from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path

from .errors import BuildError

logger = logging.getLogger(__name__)

GENERATED_NAMES = {"feed.xml", "sitemap.xml", "goto.php"}
GENERATED_SUFFIXES = {".html"}


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


def iso_date(value: dt.datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def is_generated(path: Path) -> bool:
    return path.name in GENERATED_NAMES or path.suffix.lower() in GENERATED_SUFFIXES


def clean_output_dir(output_dir: Path, project_root: Path) -> int:
    """Delete files written by a previous build.

    Resource files copied into the output directory are kept, so that a
    rebuild never has to overwrite them. Directories left empty are removed.
    Returns the number of deleted files.
    """
    output_resolved = output_dir.resolve()
    root_resolved = project_root.resolve()
    if output_resolved == root_resolved:
        raise BuildError("Refusing to clean project root.")
    if root_resolved not in output_resolved.parents:
        raise BuildError("Refusing to clean output directory outside project root.")
    if not output_dir.exists():
        return 0

    removed = 0
    for path in sorted(output_dir.rglob("*"), key=lambda p: len(p.parts), reverse=True):
        if path.is_file() and is_generated(path):
            path.unlink()
            removed += 1
        elif path.is_dir() and not any(path.iterdir()):
            path.rmdir()
    logger.info("Cleaned %d generated files from %s", removed, output_dir)
    return removed
