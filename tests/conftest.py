"""Shared fixtures: an initialized project with its sample content removed."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from blogbuilder.config import SiteConfig
from blogbuilder.init import initialize_project


@pytest.fixture
def project(tmp_path: Path) -> Path:
    directory = tmp_path / "site"
    initialize_project(directory)
    shutil.rmtree(directory / "content")
    (directory / "content").mkdir()
    return directory


@pytest.fixture
def config() -> SiteConfig:
    return SiteConfig(base_url="https://example.com", site_name="Test Blog", feed_count=10)
