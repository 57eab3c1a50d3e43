from __future__ import annotations

import shutil
from pathlib import Path

import pytest

FIXTURE_REPO = Path(__file__).parent / "fixtures" / "mini_go_repo"


@pytest.fixture
def go_repo(tmp_path: Path) -> Path:
    """A writable copy of the mini Go project."""
    repo_root = tmp_path / "repo"
    shutil.copytree(FIXTURE_REPO, repo_root)
    return repo_root
