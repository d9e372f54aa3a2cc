from __future__ import annotations

import re
from pathlib import Path

from .errors import RenderError

PLACEHOLDER_RE = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def placeholders(template: str) -> set[str]:
    return set(PLACEHOLDER_RE.findall(template))


def render_template(template: str, name: str = "template", **context: str) -> str:
    """Fill ``{{key}}`` placeholders of ``template`` with ``context`` values.

    Every placeholder must have a value. Substitution is a single pass over
    the template, so braces inside inserted post bodies are left alone.
    """
    missing = placeholders(template) - set(context)
    if missing:
        raise RenderError(f"Unresolved variables in {name}: {', '.join(sorted(missing))}")
    return PLACEHOLDER_RE.sub(lambda m: context[m.group(1)], template)


def read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RenderError(f"Template not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise RenderError(f"Cannot read template {path}: {exc}") from exc
