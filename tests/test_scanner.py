"""Tests for scanning the content directory into documents."""

from __future__ import annotations

import datetime as dt

import pytest

from blogbuilder.document import DocumentKind
from blogbuilder.errors import ScanError
from blogbuilder.ordering import order_documents
from blogbuilder.scanner import scan_directory
from helpers import write_content, write_post


class TestScanDirectory:
    def test_posts_and_pages(self, tmp_path):
        write_post(tmp_path, "2016/post.md", "2016-03-01", title="A post", categories="Java, Web")
        write_content(tmp_path, "about.md", "---\ntitle: About\n---\nAbout me.\n")

        documents = {doc.output_path: doc for doc in scan_directory(tmp_path)}

        post = documents["2016/post.html"]
        assert post.kind is DocumentKind.BLOG_POST
        assert post.created == dt.datetime(2016, 3, 1)
        assert post.categories == ["Java", "Web"]
        assert post.title == "A post"
        assert "<p>Body of A post.</p>" in post.body

        page = documents["about.html"]
        assert page.kind is DocumentKind.PAGE
        assert page.created is None

    def test_missing_blog_marker_is_page(self, tmp_path):
        write_content(tmp_path, "dated.md", "---\ntitle: Dated\ncreated: 2016-01-01\n---\nText\n")
        (document,) = scan_directory(tmp_path)
        assert document.kind is DocumentKind.PAGE
        assert not document.is_blog

    def test_blog_false_is_page(self, tmp_path):
        write_content(tmp_path, "p.md", "---\ntitle: P\nblog: no\n---\nText\n")
        assert scan_directory(tmp_path)[0].kind is DocumentKind.PAGE

    def test_non_markdown_files_ignored(self, tmp_path):
        write_post(tmp_path, "post.md", "2016-01-01")
        write_content(tmp_path, "notes.txt", "not content")
        write_content(tmp_path, "image.jpg", "binary")
        assert [doc.output_path for doc in scan_directory(tmp_path)] == ["post.html"]

    def test_markdown_extension(self, tmp_path):
        write_content(tmp_path, "page.markdown", "Text\n")
        assert scan_directory(tmp_path)[0].output_path == "page.html"

    def test_short_link(self, tmp_path):
        write_post(tmp_path, "post.md", "2016-01-01", shortlink="https://example.com/goto/7")
        assert scan_directory(tmp_path)[0].short_link == "https://example.com/goto/7"

    def test_traversal_order_is_sorted(self, tmp_path):
        for name in ("b.md", "a/z.md", "a.md"):
            write_content(tmp_path, name, "Text\n")
        assert [doc.output_path for doc in scan_directory(tmp_path)] == ["a.html", "a/z.html", "b.html"]


class TestScanErrors:
    def test_malformed_metadata(self, tmp_path):
        write_content(tmp_path, "bad.md", "---\ntitle: Bad\n")
        with pytest.raises(ScanError, match="bad.md"):
            scan_directory(tmp_path)

    def test_invalid_date(self, tmp_path):
        write_post(tmp_path, "post.md", "yesterday")
        with pytest.raises(ScanError, match="Malformed"):
            scan_directory(tmp_path)

    def test_post_without_date(self, tmp_path):
        write_content(tmp_path, "post.md", "---\ntitle: Post\nblog: true\n---\nText\n")
        with pytest.raises(ScanError, match="no creation date"):
            scan_directory(tmp_path)

    def test_output_collision(self, tmp_path):
        write_content(tmp_path, "page.md", "Text\n")
        write_content(tmp_path, "page.markdown", "Text\n")
        with pytest.raises(ScanError, match="page.html"):
            scan_directory(tmp_path)

    def test_unreadable_file(self, tmp_path):
        (tmp_path / "binary.md").write_bytes(b"\xff\xfe\x00broken")
        with pytest.raises(ScanError, match="Cannot read"):
            scan_directory(tmp_path)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ScanError, match="not found"):
            scan_directory(tmp_path / "missing")


class TestMixedDates:
    def test_offset_and_plain_dates_sort_together(self, tmp_path):
        write_post(tmp_path, "offset.md", "2016-01-02T10:00:00+02:00")
        write_post(tmp_path, "plain.md", "2016-01-02")
        posts, _ = order_documents(scan_directory(tmp_path))
        assert [post.output_path for post in posts] == ["offset.html", "plain.html"]
        assert posts[0].created == dt.datetime(2016, 1, 2, 8, 0)
