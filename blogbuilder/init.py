from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from .config import SiteConfig
from .errors import InitError

logger = logging.getLogger(__name__)

SAMPLE_DIRS = ("content/2015", "content/2016", "resources/images")


def copy_samples(source, target: Path) -> int:
    """Copy a packaged sample tree, keeping files that already exist."""
    count = 0
    for item in sorted(source.iterdir(), key=lambda entry: entry.name):
        dest = target / item.name
        if item.is_dir():
            dest.mkdir(parents=True, exist_ok=True)
            count += copy_samples(item, dest)
        elif dest.exists():
            logger.warning("%s already exists, sample file not copied", dest)
        else:
            dest.write_bytes(item.read_bytes())
            count += 1
    return count


def initialize_project(directory: Path) -> int:
    """Create the directory layout of a new project and fill it with samples.

    Returns the number of sample files written.
    """
    config = SiteConfig()
    try:
        directory.mkdir(parents=True, exist_ok=True)
        logger.info("Created project directory %s", directory)
        for name in (config.blog_dir, config.content_dir, config.resources_dir, config.templates_dir):
            (directory / name).mkdir(exist_ok=True)
        for name in SAMPLE_DIRS:
            (directory / name).mkdir(parents=True, exist_ok=True)
        count = copy_samples(resources.files("blogbuilder") / "samples", directory)
    except OSError as exc:
        raise InitError(f"Initialization failed: {exc}") from exc
    logger.info("Initialization successful, %d sample files created", count)
    return count
