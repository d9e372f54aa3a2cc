from __future__ import annotations

from pathlib import Path, PurePosixPath
from textwrap import dedent

from blogbuilder.document import Document, DocumentKind


def write_content(root: Path, relative: str, text: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dedent(text).lstrip(), encoding="utf-8")
    return path


def write_post(root: Path, relative: str, created: str, title: str = "", **meta: str) -> Path:
    title = title or Path(relative).stem
    lines = ["---", f"title: {title}", f"created: {created}", "blog: true"]
    lines.extend(f"{key}: {value}" for key, value in meta.items())
    lines.extend(["---", f"Body of {title}."])
    return write_content(root, relative, "\n".join(lines) + "\n")


def make_document(relative: str, created=None, kind=None, **fields) -> Document:
    if kind is None:
        kind = DocumentKind.BLOG_POST if created is not None else DocumentKind.PAGE
    fields.setdefault("title", PurePosixPath(relative).stem)
    return Document(
        source_path=Path("/content") / relative,
        relative_path=PurePosixPath(relative),
        kind=kind,
        created=created,
        **fields,
    )
