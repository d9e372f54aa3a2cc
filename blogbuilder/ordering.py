from __future__ import annotations

import functools
import posixpath
from typing import Callable, Iterable

from .document import Document

Comparator = Callable[[Document, Document], int]


def compare_posts(first: Document, second: Document) -> int:
    """Newest post first; posts created at the same time are ordered by source path."""
    if first.created != second.created:
        return -1 if first.created > second.created else 1
    first_path = first.relative_path.as_posix()
    second_path = second.relative_path.as_posix()
    return (first_path > second_path) - (first_path < second_path)


def partition(documents: Iterable[Document]) -> tuple[list[Document], list[Document]]:
    posts = []
    pages = []
    for document in documents:
        (posts if document.is_blog else pages).append(document)
    return posts, pages


def sort_posts(posts: list[Document], compare: Comparator = compare_posts) -> list[Document]:
    return sorted(posts, key=functools.cmp_to_key(compare))


def relative_link(current: Document, other: Document) -> str:
    """Link from the output file of ``current`` to the output file of ``other``."""
    start = posixpath.dirname(current.output_path) or "."
    return posixpath.relpath(other.output_path, start)


def link_posts(posts: list[Document]) -> None:
    for i, post in enumerate(posts):
        post.next_link = relative_link(post, posts[i - 1]) if i > 0 else None
        post.previous_link = relative_link(post, posts[i + 1]) if i < len(posts) - 1 else None


def order_documents(documents: Iterable[Document]) -> tuple[list[Document], list[Document]]:
    posts, pages = partition(documents)
    posts = sort_posts(posts)
    link_posts(posts)
    return posts, pages
