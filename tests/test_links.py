"""Tests for rewriting href/src attributes in rendered HTML."""

from __future__ import annotations

from blogbuilder.links import (
    absolute_url,
    make_links_absolute,
    make_links_relative,
    normalize_base_url,
    relative_root,
)


class TestMakeLinksRelative:
    def test_absolute_http_link_unchanged(self):
        """Links with an http scheme are left alone."""
        assert make_links_relative('<a href="http://x.com/a">', "../") == '<a href="http://x.com/a">'

    def test_absolute_https_link_unchanged(self):
        content = '<img src="https://x.com/a.png">'
        assert make_links_relative(content, "../") == content

    def test_relative_link_prefixed(self):
        assert make_links_relative('<a href="page.html">', "../../") == '<a href="../../page.html">'

    def test_src_prefixed(self):
        assert make_links_relative('<img alt="x" src="images/a.jpg">', "../") == '<img alt="x" src="../images/a.jpg">'

    def test_mixed_content(self):
        content = '<a href="a.html">a</a> <a href="https://b.org/">b</a> <img src="c.png">'
        expected = '<a href="../a.html">a</a> <a href="https://b.org/">b</a> <img src="../c.png">'
        assert make_links_relative(content, "../") == expected

    def test_empty_prefix_is_noop(self):
        content = '<a href="a.html">a</a>'
        assert make_links_relative(content, "") == content

    def test_unterminated_attribute_passed_through(self):
        """A missing closing quote is not a hard failure."""
        content = '<a href="broken.html>text</a>'
        assert make_links_relative(content, "../") == content

    def test_other_attributes_untouched(self):
        content = '<a title="page.html" href="page.html">'
        assert make_links_relative(content, "../") == '<a title="page.html" href="../page.html">'


class TestMakeLinksAbsolute:
    def test_base_url_gets_trailing_slash(self):
        result = make_links_absolute('<a href="2016/post.html">', "https://example.com")
        assert result == '<a href="https://example.com/2016/post.html">'

    def test_absolute_link_unchanged(self):
        content = '<a href="http://other.org/">'
        assert make_links_absolute(content, "https://example.com/") == content


class TestHelpers:
    def test_relative_root_top_level(self):
        assert relative_root("index.html") == ""

    def test_relative_root_nested(self):
        assert relative_root("2016/03/post.html") == "../../"

    def test_normalize_base_url(self):
        assert normalize_base_url("https://example.com") == "https://example.com/"
        assert normalize_base_url("https://example.com/") == "https://example.com/"
        assert normalize_base_url("") == ""

    def test_absolute_url(self):
        assert absolute_url("https://example.com", "2016/post.html") == "https://example.com/2016/post.html"
