from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Optional

from .document import Document
from .errors import ShortenerError
from .links import normalize_base_url

logger = logging.getLogger(__name__)

SHORTENER_FILE = "goto.php"
URLS_MARKER = "$$URLS$$"


def short_id(short_link: str) -> str:
    return short_link.rstrip("/").rsplit("/", 1)[-1]


def build_redirects(posts: list[Document], base_url: str) -> list[str]:
    # Without a base URL the redirects point to the server root.
    base_url = normalize_base_url(base_url) or "/"
    lines = []
    for post in posts:
        if not post.short_link:
            logger.warning("Blog post %s has no short link, no redirect created", post.relative_path)
            continue
        url = base_url + post.output_path
        lines.append(f'case "{short_id(post.short_link)}": redirect("{url}");')
    return lines


def load_template(path: Optional[Path] = None) -> str:
    try:
        if path is not None:
            return path.read_text(encoding="utf-8")
        return (resources.files("blogbuilder") / "contrib" / SHORTENER_FILE).read_text(encoding="utf-8")
    except (OSError, ModuleNotFoundError) as exc:
        raise ShortenerError(f"Shortener template not available: {exc}") from exc


def render_shortener(template: str, redirects: list[str]) -> str:
    if URLS_MARKER not in template:
        raise ShortenerError(f"Shortener template has no {URLS_MARKER} marker")
    return template.replace(URLS_MARKER, "\n".join(redirects), 1)


def build_shortener(
    output_dir: Path, posts: list[Document], base_url: str, template_path: Optional[Path] = None
) -> Path:
    script = render_shortener(load_template(template_path), build_redirects(posts, base_url))
    path = output_dir / SHORTENER_FILE
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(script, encoding="utf-8")
    except OSError as exc:
        raise ShortenerError(f"Error while creating URL shortener: {exc}") from exc
    logger.info("URL shortener %s created", SHORTENER_FILE)
    return path
