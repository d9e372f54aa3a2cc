from __future__ import annotations

import datetime as dt
import html as html_lib
import re
from typing import Optional

import markdown

TAG_RE = re.compile(r"<[^>]+>")
LIST_KEYS = {"categories", "category", "tags"}
MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "codehilite"]
MARKDOWN_EXTENSION_CONFIGS = {"codehilite": {"guess_lang": False}}
SUMMARY_LENGTH = 200


def slugify(text: str) -> str:
    text = text.lower()
    text = re.sub(r"[^\w]+", "-", text, flags=re.UNICODE)
    text = text.strip("-_").replace("_", "-")
    return text or "category"


def parse_list(value: str) -> list[str]:
    value = value.strip()
    if value.startswith("[") and value.endswith("]"):
        inner = value[1:-1]
        items = [item.strip().strip("'\"") for item in inner.split(",")]
    else:
        items = [item.strip() for item in value.split(",")]
    return [item for item in items if item]


def parse_front_matter(text: str) -> tuple[dict, str]:
    """Split a content file into its metadata and its Markdown body.

    The metadata block is optional. When present it starts on the first line
    with ``---``, ends with the next ``---`` line and holds ``key: value``
    lines. Raises ``ValueError`` for an unterminated block or a line that is
    not a ``key: value`` pair.
    """
    clean_text = text.lstrip("\ufeff")
    lines = clean_text.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, clean_text

    end = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end = i
            break
    if end is None:
        raise ValueError("metadata block is not closed with '---'")

    meta = {}
    for number, line in enumerate(lines[1:end], start=2):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if ":" not in line:
            raise ValueError(f"line {number}: expected 'key: value', got {line!r}")
        key, value = line.split(":", 1)
        key = key.strip().lower()
        if not key:
            raise ValueError(f"line {number}: empty metadata key")
        value = value.strip()
        if key in LIST_KEYS:
            meta[key] = parse_list(value)
        else:
            meta[key] = value
    body = "\n".join(lines[end + 1 :])
    return meta, body


def extract_title(meta: dict, body: str) -> tuple[str, str]:
    if meta.get("title"):
        return meta["title"], body
    lines = body.splitlines()
    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith("# "):
            title = stripped[2:].strip() or "Untitled"
            new_body = "\n".join(lines[i + 1 :]).lstrip()
            return title, new_body
        if stripped:
            break
    return "Untitled", body


def parse_datetime(value: str) -> Optional[dt.datetime]:
    value = value.strip()
    if not value:
        return None
    if "T" in value or " " in value:
        parsed = dt.datetime.fromisoformat(value)
        # Offsets are folded into naive UTC so every date compares with every other.
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(dt.timezone.utc).replace(tzinfo=None)
        return parsed
    return dt.datetime.combine(dt.date.fromisoformat(value), dt.time())


def get_created(meta: dict) -> Optional[dt.datetime]:
    return parse_datetime(meta.get("created") or meta.get("date") or "")


def get_modified(meta: dict) -> Optional[dt.datetime]:
    return parse_datetime(meta.get("modified") or meta.get("updated") or "")


def get_categories(meta: dict) -> list[str]:
    found = []
    for key in ("categories", "category", "tags"):
        for item in meta.get(key) or []:
            if item not in found:
                found.append(item)
    return found


def strip_tags(html_text: str) -> str:
    return TAG_RE.sub("", html_text)


def summarize(meta: dict, html_text: str) -> str:
    summary = meta.get("summary") or meta.get("description")
    if summary:
        return summary
    text = html_lib.unescape(strip_tags(html_text))
    text = " ".join(text.split())
    if len(text) > SUMMARY_LENGTH:
        return text[:SUMMARY_LENGTH] + "..."
    return text


def markdown_to_html(text: str) -> str:
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS, extension_configs=MARKDOWN_EXTENSION_CONFIGS)
    return md.convert(text)
