from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from .errors import CopyError

logger = logging.getLogger(__name__)


class ResourceCopy:
    """Mirror the resources directory into the output directory.

    Existing files in the output directory are never overwritten; they are
    skipped with a warning. A new instance is used for every copy run.
    """

    def __init__(self, source: Path, target: Path):
        self.source = source
        self.target = target
        self.copied = 0
        self.skipped = 0

    def destination(self, path: Path) -> Path:
        return self.target / path.relative_to(self.source)

    def visit_file(self, path: Path) -> None:
        dest = self.destination(path)
        if dest.exists():
            logger.warning("Resource file %s already exists, file not copied", dest.relative_to(self.target))
            self.skipped += 1
            return
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, dest)
        self.copied += 1
        logger.debug("Resource file %s copied", dest.relative_to(self.target))

    def copy(self) -> int:
        if not self.source.is_dir():
            logger.info("No resources directory at %s, nothing copied", self.source)
            return 0

        def on_error(exc: OSError) -> None:
            raise exc

        try:
            for dirpath, dirnames, filenames in os.walk(self.source, onerror=on_error):
                dirnames.sort()
                for filename in sorted(filenames):
                    self.visit_file(Path(dirpath) / filename)
        except OSError as exc:
            raise CopyError(f"Error while copying resources: {exc}") from exc
        logger.info("%d resource files copied", self.copied)
        return self.copied


def copy_resources(source: Path, target: Path) -> int:
    return ResourceCopy(source, target).copy()
