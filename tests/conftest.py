"""Shared test fixtures for cligen tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from git import Repo

from cligen.contracts.config import RunConfig


@pytest.fixture
def run_config(tmp_path: Path) -> RunConfig:
    """The end-to-end scenario configuration, rooted in a temp workspace."""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return RunConfig(
        name="mytool",
        description="demo",
        author="Jane",
        token="ghp_test_token",
        private=False,
        directory=workspace,
    )


@pytest.fixture
def bare_remote(tmp_path: Path) -> Repo:
    """A local bare repository standing in for the hosted remote."""
    return Repo.init(tmp_path / "remote.git", bare=True)
