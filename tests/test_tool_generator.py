from __future__ import annotations

import logging
from pathlib import Path

import pytest
from git import Repo

from cligen.contracts.config import RunConfig
from cligen.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    MissingFileError,
    RepositoryExistsError,
    VcsError,
)
from cligen.providers import GitHubProvider
from cligen.scaffold import ProjectScaffolder, expected_files
from cligen.sdk import ToolGenerator, build_config
from tests.fakes.provider import FakeRepositoryHost


class _SpyProgress:
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def phase_start(self, phase: str) -> None:
        self.events.append(("start", phase))

    def phase_done(self, phase: str) -> None:
        self.events.append(("done", phase))

    def phase_error(self, phase: str, error: BaseException) -> None:
        self.events.append(("error", phase))


def test_build_config_wraps_validation_errors() -> None:
    with pytest.raises(ConfigError, match="name"):
        build_config(name="bad name", author="Jane", token="tok")


def test_build_config_returns_run_config() -> None:
    config = build_config(name="mytool", description="demo", author="Jane", token="tok", private=True)
    assert config.private is True
    assert config.token.get_secret_value() == "tok"


def test_from_config_uses_github_provider(run_config: RunConfig) -> None:
    generator = ToolGenerator.from_config(run_config)
    assert isinstance(generator._provider, GitHubProvider)


def test_from_config_rejects_unknown_provider(run_config: RunConfig) -> None:
    with pytest.raises(ConfigError, match="Unknown provider"):
        ToolGenerator.from_config(run_config, provider_name="bitbucket")


def test_run_end_to_end_with_local_remote(run_config: RunConfig, bare_remote: Repo) -> None:
    host = FakeRepositoryHost(clone_url=bare_remote.git_dir)
    progress = _SpyProgress()

    result = ToolGenerator(config=run_config, provider=host, progress=progress).run()

    project_dir = run_config.project_dir
    assert result.project_dir == project_dir
    for relative in expected_files("mytool"):
        assert (project_dir / relative).stat().st_size > 0

    assert host.created == [{"name": "mytool", "description": "demo", "private": False}]
    assert host.entered and host.exited

    local = Repo(project_dir)
    assert local.active_branch.name == "main"
    assert len(list(local.iter_commits("main"))) == 1
    assert local.remote("origin").url == bare_remote.git_dir
    assert bare_remote.commit("refs/heads/main").hexsha == result.commit_sha
    assert result.branch == "main"
    assert result.repository.clone_url == bare_remote.git_dir

    assert progress.events == [
        ("start", "Validate"),
        ("done", "Validate"),
        ("start", "Scaffold"),
        ("done", "Scaffold"),
        ("start", "Verify"),
        ("done", "Verify"),
        ("start", "Init"),
        ("done", "Init"),
        ("start", "Create"),
        ("done", "Create"),
        ("start", "Publish"),
        ("done", "Publish"),
    ]


def test_authentication_failure_happens_before_any_directory(run_config: RunConfig, bare_remote: Repo) -> None:
    host = FakeRepositoryHost(clone_url=bare_remote.git_dir, auth_error=AuthenticationError("Invalid GitHub token."))
    progress = _SpyProgress()

    with pytest.raises(AuthenticationError):
        ToolGenerator(config=run_config, provider=host, progress=progress).run()

    assert not run_config.project_dir.exists()
    assert progress.events == [("start", "Validate"), ("error", "Validate")]
    assert host.exited


def test_name_collision_stops_before_push(run_config: RunConfig, bare_remote: Repo) -> None:
    host = FakeRepositoryHost(clone_url=bare_remote.git_dir, create_error=RepositoryExistsError("mytool"))
    progress = _SpyProgress()

    with pytest.raises(RepositoryExistsError, match="choose a different name"):
        ToolGenerator(config=run_config, provider=host, progress=progress).run()

    assert ("error", "Create") in progress.events
    assert ("start", "Publish") not in progress.events
    assert list(bare_remote.heads) == []
    assert not Repo(run_config.project_dir).head.is_valid()


def test_missing_file_fails_verification(
    run_config: RunConfig, bare_remote: Repo, monkeypatch: pytest.MonkeyPatch
) -> None:
    original_create = ProjectScaffolder.create

    def create_without_readme(self: ProjectScaffolder, config: RunConfig, target_dir: Path | None = None) -> Path:
        project_dir = original_create(self, config, target_dir)
        (project_dir / "README.md").unlink()
        return project_dir

    monkeypatch.setattr(ProjectScaffolder, "create", create_without_readme)
    host = FakeRepositoryHost(clone_url=bare_remote.git_dir)

    with pytest.raises(MissingFileError) as exc_info:
        ToolGenerator(config=run_config, provider=host).run()

    assert exc_info.value.path == run_config.project_dir / "README.md"
    assert host.created == []


def test_push_failure_warns_about_orphaned_remote(
    run_config: RunConfig, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    host = FakeRepositoryHost(clone_url=str(tmp_path / "missing.git"))

    with caplog.at_level(logging.WARNING, logger="cligen.sdk"):
        with pytest.raises(VcsError, match="Failed to push"):
            ToolGenerator(config=run_config, provider=host).run()

    assert "https://github.com/jane/mytool" in caplog.text
    assert host.created
