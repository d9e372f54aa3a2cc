from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
import time
from pathlib import Path

from .build import build_site
from .config import load_site_config
from .errors import BuildError
from .init import initialize_project

logger = logging.getLogger("blogbuilder")


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def configure_logging(verbosity: int) -> None:
    if verbosity > 0:
        level = logging.DEBUG
    elif verbosity < 0:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def run_init(args: argparse.Namespace) -> None:
    initialize_project(Path(args.path))
    print(f"Project initialized in: {args.path}")


def run_build(args: argparse.Namespace) -> None:
    directory = Path(args.path)
    if not directory.is_dir():
        raise BuildError(f"Project directory not found: {directory}")
    config = load_site_config(directory, args.config)
    overrides = {
        "base_url": args.base_url,
        "feed_count": args.feed_count,
        "index_count": args.index_count,
        "url_shortener": args.url_shortener,
    }
    config = dataclasses.replace(config, **{key: value for key, value in overrides.items() if value is not None})
    start = time.perf_counter()
    context = build_site(directory, config)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")
    print(f"Site generated in: {context.output_dir}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blogbuilder", description="Static blog generator for Markdown content.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Show debug messages.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_cmd = subparsers.add_parser("init", help="Create a new project with sample content.")
    init_cmd.add_argument("path", help="Directory of the new project.")
    init_cmd.set_defaults(func=run_init)

    build_cmd = subparsers.add_parser("build", help="Build an existing project.")
    build_cmd.add_argument("path", nargs="?", default=".", help="Directory of the project to build.")
    build_cmd.add_argument(
        "--config",
        default=None,
        help="Path to site config file (TOML/YAML/JSON), relative to the project directory.",
    )
    build_cmd.add_argument("--base-url", default=None, help="Public site URL used for feed and sitemap.")
    build_cmd.add_argument(
        "--feed-count", default=None, type=non_negative_int, help="Maximum number of posts in the feed."
    )
    build_cmd.add_argument(
        "--index-count",
        default=None,
        type=non_negative_int,
        help="Maximum number of posts on the index page (0 = all).",
    )
    build_cmd.add_argument(
        "--url-shortener",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate goto.php with redirects for the short links of all posts.",
    )
    build_cmd.set_defaults(func=run_build)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(-1 if args.quiet else args.verbose)
    try:
        args.func(args)
    except BuildError as exc:
        logger.error("%s", exc)
        sys.exit(1)
