from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import SiteConfig, load_site_config
from .document import Document
from .errors import ShortenerError
from .feeds import build_feed, build_sitemap
from .ordering import order_documents
from .resources import ResourceCopy
from .scanner import scan_directory
from .shortener import build_shortener
from .utils import clean_output_dir
from .writer import Writer

logger = logging.getLogger(__name__)


@dataclass
class BuildContext:
    directory: Path
    config: SiteConfig
    posts: list[Document] = field(default_factory=list)
    pages: list[Document] = field(default_factory=list)
    resources_copied: int = 0

    @property
    def output_dir(self) -> Path:
        return self.directory / self.config.blog_dir

    @property
    def content_dir(self) -> Path:
        return self.directory / self.config.content_dir

    @property
    def resources_dir(self) -> Path:
        return self.directory / self.config.resources_dir

    @property
    def templates_dir(self) -> Path:
        return self.directory / self.config.templates_dir


def scan(context: BuildContext) -> None:
    documents = scan_directory(context.content_dir)
    context.posts, context.pages = order_documents(documents)
    logger.info("Scan completed, found %d blog posts and %d pages", len(context.posts), len(context.pages))


def write_files(context: BuildContext) -> None:
    writer = Writer(context.output_dir, context.templates_dir, context.config)
    writer.write_blog_posts(context.posts)
    writer.write_pages(context.pages)
    writer.write_index(context.posts)
    writer.write_category_pages(context.posts)


def create_url_shortener(context: BuildContext) -> None:
    try:
        build_shortener(context.output_dir, context.posts, context.config.base_url)
    except ShortenerError as exc:
        logger.error("%s", exc)


def build_site(directory: Path, config: Optional[SiteConfig] = None) -> BuildContext:
    """Build the project in ``directory`` into its output directory.

    The steps run strictly one after another. Any ``BuildError`` other than
    a failing URL shortener aborts the build; files written up to that point
    are left in place.
    """
    if config is None:
        config = load_site_config(directory)
    context = BuildContext(directory=directory, config=config)
    clean_output_dir(context.output_dir, directory)
    context.output_dir.mkdir(parents=True, exist_ok=True)
    scan(context)
    write_files(context)
    context.resources_copied = ResourceCopy(context.resources_dir, context.output_dir).copy()
    build_feed(context.output_dir, context.posts, config)
    build_sitemap(context.output_dir, context.posts, context.pages, config)
    if config.url_shortener:
        create_url_shortener(context)
    logger.info("Build of %s completed", directory)
    return context
