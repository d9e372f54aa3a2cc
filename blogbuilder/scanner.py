from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from .content import (
    extract_title,
    get_categories,
    get_created,
    get_modified,
    markdown_to_html,
    parse_front_matter,
    summarize,
)
from .document import Document, DocumentKind
from .errors import ScanError
from .utils import parse_bool

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = {".md", ".markdown"}


def list_markdown_files(root: Path) -> list[Path]:
    files = [path for path in root.rglob("*") if path.is_file() and path.suffix.lower() in MARKDOWN_SUFFIXES]
    return sorted(files, key=lambda p: p.relative_to(root).as_posix())


def read_document(path: Path, root: Path) -> Document:
    """Parse one content file into a Document."""
    relative = PurePosixPath(path.relative_to(root).as_posix())
    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScanError(f"Cannot read {relative}: {exc}") from exc
    try:
        meta, body = parse_front_matter(raw_text)
        created = get_created(meta)
        modified = get_modified(meta)
    except ValueError as exc:
        raise ScanError(f"Malformed metadata in {relative}: {exc}") from exc

    kind = DocumentKind.BLOG_POST if parse_bool(meta.get("blog")) else DocumentKind.PAGE
    if kind is DocumentKind.BLOG_POST and created is None:
        raise ScanError(f"Blog post {relative} has no creation date")

    title, body = extract_title(meta, body)
    html_content = markdown_to_html(body)
    return Document(
        source_path=path,
        relative_path=relative,
        kind=kind,
        title=title,
        body=html_content,
        summary=summarize(meta, html_content),
        created=created if kind is DocumentKind.BLOG_POST else None,
        modified=modified,
        categories=get_categories(meta),
        short_link=(meta.get("shortlink") or "").strip(),
    )


def scan_directory(root: Path) -> list[Document]:
    if not root.is_dir():
        raise ScanError(f"Content directory not found: {root}")
    documents = []
    seen = {}
    for path in list_markdown_files(root):
        document = read_document(path, root)
        other = seen.get(document.output_path)
        if other is not None:
            raise ScanError(
                f"{document.relative_path} and {other.relative_path} both render to {document.output_path}"
            )
        seen[document.output_path] = document
        documents.append(document)
        logger.debug("Scanned %s (%s)", document.relative_path, document.kind.value)
    return documents
