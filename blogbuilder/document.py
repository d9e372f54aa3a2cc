from __future__ import annotations

import datetime as dt
import enum
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Optional


class DocumentKind(enum.Enum):
    BLOG_POST = "blogpost"
    PAGE = "page"


@dataclass
class Document:
    """One content file: a dated blog post or a standalone page.

    ``relative_path`` is the source location below the content root and
    decides where the rendered file ends up in the output tree.
    """

    source_path: Path
    relative_path: PurePosixPath
    kind: DocumentKind
    title: str
    body: str = ""
    summary: str = ""
    created: Optional[dt.datetime] = None
    modified: Optional[dt.datetime] = None
    categories: list[str] = field(default_factory=list)
    short_link: str = ""
    previous_link: Optional[str] = None
    next_link: Optional[str] = None

    @property
    def is_blog(self) -> bool:
        return self.kind is DocumentKind.BLOG_POST

    @property
    def output_path(self) -> str:
        return self.relative_path.with_suffix(".html").as_posix()

    @property
    def last_modified(self) -> Optional[dt.datetime]:
        return self.modified or self.created
