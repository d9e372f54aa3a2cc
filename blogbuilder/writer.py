from __future__ import annotations

import html
import logging
from pathlib import Path

from .config import SiteConfig
from .content import slugify
from .document import Document
from .links import make_links_relative, relative_root
from .render import read_template, render_template
from .utils import write_text

logger = logging.getLogger(__name__)

DATE_FMT = "%Y-%m-%d"
BASE_TEMPLATE = "base.html"
POST_TEMPLATE = "blogpost.html"
PAGE_TEMPLATE = "page.html"
INDEX_TEMPLATE = "index.html"
CATEGORY_TEMPLATE = "category.html"
INDEX_PATH = "index.html"
CATEGORY_DIR = "category"


def format_date(document: Document) -> str:
    return document.created.strftime(DATE_FMT) if document.created else ""


def category_path(name: str) -> str:
    return f"{CATEGORY_DIR}/{slugify(name)}.html"


def build_category_links(document: Document) -> str:
    return ", ".join(
        f'<a class="category" href="{category_path(name)}">{html.escape(name)}</a>' for name in document.categories
    )


def build_navigation(document: Document) -> str:
    items = []
    if document.next_link:
        items.append(f'<a class="next" href="{html.escape(document.next_link)}">Newer post</a>')
    if document.previous_link:
        items.append(f'<a class="previous" href="{html.escape(document.previous_link)}">Older post</a>')
    if not items:
        return ""
    return f'<nav class="post-navigation">{"".join(items)}</nav>'


def build_post_list(posts: list[Document]) -> str:
    items = []
    for post in posts:
        items.append(
            '<article class="post-card">'
            f'<span class="post-date">{format_date(post)}</span>'
            f'<h2 class="post-title"><a href="{post.output_path}">{html.escape(post.title)}</a></h2>'
            f'<p class="post-summary">{html.escape(post.summary)}</p>'
            f'<p class="post-categories">{build_category_links(post)}</p>'
            "</article>"
        )
    return "\n".join(items)


def group_by_category(posts: list[Document]) -> dict[str, list[Document]]:
    # Labels sharing a slug share one page, named after the first label seen.
    names: dict[str, str] = {}
    category_map: dict[str, list[Document]] = {}
    for post in posts:
        for category in post.categories:
            name = names.setdefault(slugify(category), category)
            items = category_map.setdefault(name, [])
            if not items or items[-1] is not post:
                items.append(post)
    return dict(sorted(category_map.items(), key=lambda item: (item[0].lower(), item[0])))


class Writer:
    """Render documents and listing pages into the output directory.

    Every page is the content template of its type wrapped into
    ``base.html``. Links inside bodies and listings are written relative to
    the output root and then rewritten for the depth of the target file.
    """

    def __init__(self, output_dir: Path, templates_dir: Path, config: SiteConfig):
        self.output_dir = output_dir
        self.templates_dir = templates_dir
        self.config = config
        self._templates: dict[str, str] = {}

    def template(self, name: str) -> str:
        if name not in self._templates:
            self._templates[name] = read_template(self.templates_dir / name)
        return self._templates[name]

    def site_context(self) -> dict[str, str]:
        return {
            "site_name": html.escape(self.config.site_name),
            "site_description": html.escape(self.config.site_description),
            "author": html.escape(self.config.author),
            "language": html.escape(self.config.language),
        }

    def render(self, template_name: str, output_path: str, title: str, **context: str) -> str:
        shared = dict(self.site_context(), root=relative_root(output_path), title=html.escape(title))
        content = render_template(self.template(template_name), template_name, **context, **shared)
        return render_template(self.template(BASE_TEMPLATE), BASE_TEMPLATE, content=content, **shared)

    def write(self, output_path: str, text: str) -> None:
        write_text(self.output_dir / output_path, text)

    def write_blog_posts(self, posts: list[Document]) -> int:
        for post in posts:
            root = relative_root(post.output_path)
            page = self.render(
                POST_TEMPLATE,
                post.output_path,
                post.title,
                date=format_date(post),
                categories=make_links_relative(build_category_links(post), root),
                navigation=build_navigation(post),
                next=html.escape(post.next_link or ""),
                previous=html.escape(post.previous_link or ""),
                body=make_links_relative(post.body, root),
            )
            self.write(post.output_path, page)
        logger.info("%d blog posts written", len(posts))
        return len(posts)

    def write_pages(self, pages: list[Document]) -> int:
        for document in pages:
            root = relative_root(document.output_path)
            page = self.render(
                PAGE_TEMPLATE,
                document.output_path,
                document.title,
                body=make_links_relative(document.body, root),
            )
            self.write(document.output_path, page)
        logger.info("%d pages written", len(pages))
        return len(pages)

    def write_index(self, posts: list[Document]) -> None:
        if self.config.index_count > 0:
            posts = posts[: self.config.index_count]
        page = self.render(
            INDEX_TEMPLATE,
            INDEX_PATH,
            self.config.site_name,
            posts=make_links_relative(build_post_list(posts), relative_root(INDEX_PATH)),
        )
        self.write(INDEX_PATH, page)
        logger.info("Index page written")

    def write_category_pages(self, posts: list[Document]) -> int:
        category_map = group_by_category(posts)
        for name, items in category_map.items():
            output_path = category_path(name)
            page = self.render(
                CATEGORY_TEMPLATE,
                output_path,
                name,
                category=html.escape(name),
                posts=make_links_relative(build_post_list(items), relative_root(output_path)),
            )
            self.write(output_path, page)
        logger.info("%d category pages written", len(category_map))
        return len(category_map)
