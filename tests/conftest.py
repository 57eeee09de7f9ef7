"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from menugen.adapters.filesystem import FilesystemAssetHost
from menugen.adapters.mock import MockAssetHost
from menugen.core.models.settings import Settings


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project directory with an empty Assets folder."""
    (tmp_path / "Assets").mkdir()
    return tmp_path


@pytest.fixture
def fs_host(project_dir: Path) -> FilesystemAssetHost:
    """Filesystem host over ``project_dir``, already indexed."""
    host = FilesystemAssetHost(project_dir)
    host.refresh()
    host.take_pending()
    return host


@pytest.fixture
def mock_host() -> MockAssetHost:
    return MockAssetHost()


@pytest.fixture
def settings() -> Settings:
    """Deterministic settings: identifiers start at zero every pass."""
    return Settings(id_seed="zero")


@pytest.fixture
def write_asset(project_dir: Path):
    """Write a file below ``project_dir``, creating folders."""

    def _write(rel: str, text: str = "") -> Path:
        path = project_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
