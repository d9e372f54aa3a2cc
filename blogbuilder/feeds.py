from __future__ import annotations

import html
import logging
from pathlib import Path

from .config import SiteConfig
from .document import Document
from .links import absolute_url, make_links_absolute, normalize_base_url
from .utils import iso_date, write_text

logger = logging.getLogger(__name__)

FEED_FILE = "feed.xml"
SITEMAP_FILE = "sitemap.xml"


def build_feed_entry(post: Document, base_url: str) -> str:
    link = absolute_url(base_url, post.output_path)
    lines = [
        "<entry>",
        f"<title>{html.escape(post.title)}</title>",
        f'<link href="{html.escape(link)}" />',
        f"<id>{html.escape(link)}</id>",
        f"<published>{iso_date(post.created)}</published>",
        f"<updated>{iso_date(post.last_modified)}</updated>",
    ]
    lines.extend(f"<category term=\"{html.escape(name)}\" />" for name in post.categories)
    lines.extend(
        [
            f"<summary>{html.escape(post.summary)}</summary>",
            f'<content type="html">{html.escape(make_links_absolute(post.body, base_url))}</content>',
            "</entry>",
        ]
    )
    return "\n".join(lines)


def render_feed(posts: list[Document], config: SiteConfig) -> str:
    base_url = normalize_base_url(config.base_url)
    entries = posts[: config.feed_count]
    updated = max(post.last_modified for post in entries) if entries else None
    header = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<feed xmlns="http://www.w3.org/2005/Atom" xml:lang="{html.escape(config.language)}">',
        f"<title>{html.escape(config.site_name)}</title>",
    ]
    if config.site_description:
        header.append(f"<subtitle>{html.escape(config.site_description)}</subtitle>")
    header.extend(
        [
            f"<id>{html.escape(base_url)}</id>",
            f'<link href="{html.escape(absolute_url(base_url, FEED_FILE))}" rel="self" />',
            f'<link href="{html.escape(base_url)}" />',
        ]
    )
    if updated is not None:
        header.append(f"<updated>{iso_date(updated)}</updated>")
    if config.author:
        header.append(f"<author><name>{html.escape(config.author)}</name></author>")
    return "\n".join(header + [build_feed_entry(post, base_url) for post in entries] + ["</feed>"]) + "\n"


def build_feed(output_dir: Path, posts: list[Document], config: SiteConfig) -> bool:
    if not config.base_url:
        logger.warning("No base URL configured, feed not created")
        return False
    write_text(output_dir / FEED_FILE, render_feed(posts, config))
    logger.info("Feed created with %d entries", min(len(posts), config.feed_count))
    return True


def render_sitemap(posts: list[Document], pages: list[Document], base_url: str) -> str:
    items = []
    for document in [*posts, *pages]:
        lines = ["<url>", f"<loc>{html.escape(absolute_url(base_url, document.output_path))}</loc>"]
        if document.last_modified:
            lines.append(f"<lastmod>{document.last_modified.date().isoformat()}</lastmod>")
        lines.append("</url>")
        items.append("\n".join(lines))
    return (
        "\n".join(
            [
                '<?xml version="1.0" encoding="UTF-8"?>',
                '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
                *items,
                "</urlset>",
            ]
        )
        + "\n"
    )


def build_sitemap(output_dir: Path, posts: list[Document], pages: list[Document], config: SiteConfig) -> bool:
    if not config.base_url:
        logger.warning("No base URL configured, sitemap not created")
        return False
    write_text(output_dir / SITEMAP_FILE, render_sitemap(posts, pages, config.base_url))
    logger.info("Sitemap created with %d entries", len(posts) + len(pages))
    return True
