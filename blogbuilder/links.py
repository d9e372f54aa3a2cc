"""Rewriting of ``href`` and ``src`` attribute values in rendered HTML.

This is a text transformation on well-formed ``attr="value"`` tokens, not an
HTML parser. Values that already carry an ``http:`` or ``https:`` scheme are
never touched, and attributes missing their closing quote are passed through.
"""

from __future__ import annotations

import re

ABSOLUTE_PREFIXES = ("http:", "https:")
LINK_ATTRIBUTES = ("href", "src")
ATTRIBUTE_RES = {attribute: re.compile(rf'\b{attribute}="([^"<>\n]*)"') for attribute in LINK_ATTRIBUTES}


def prefix_links(content: str, prefix: str) -> str:
    if not prefix:
        return content
    for attribute, pattern in ATTRIBUTE_RES.items():

        def repl(match: re.Match, attribute: str = attribute) -> str:
            value = match.group(1)
            if value.startswith(ABSOLUTE_PREFIXES):
                return match.group(0)
            return f'{attribute}="{prefix}{value}"'

        content = pattern.sub(repl, content)
    return content


def make_links_relative(content: str, relative: str) -> str:
    return prefix_links(content, relative)


def make_links_absolute(content: str, base_url: str) -> str:
    return prefix_links(content, normalize_base_url(base_url))


def normalize_base_url(base_url: str) -> str:
    base_url = base_url.strip()
    if base_url and not base_url.endswith("/"):
        base_url += "/"
    return base_url


def relative_root(output_path: str) -> str:
    """Path from an output file back to the output root, e.g. ``../../``."""
    depth = output_path.count("/")
    return "../" * depth


def absolute_url(base_url: str, output_path: str) -> str:
    return normalize_base_url(base_url) + output_path.lstrip("/")
