"""Local git repository operations backed by GitPython."""

from __future__ import annotations

import logging
from pathlib import Path

from git import Actor, PushInfo, Repo
from git.exc import GitError

from cligen.contracts.exceptions import VcsError
from cligen.scaffold import WORKFLOWS_DIR
from cligen.vcs.credentials import PushCredentials

_LOG = logging.getLogger(__name__)

COMMIT_MESSAGE = "Initial commit: CLI tool template"
COMMIT_EMAIL = "noreply@github.com"
PRIMARY_BRANCH = "main"
REMOTE_NAME = "origin"

_PUSH_FAILURE_FLAGS = PushInfo.ERROR | PushInfo.REJECTED | PushInfo.REMOTE_REJECTED | PushInfo.REMOTE_FAILURE


class LocalRepository:
    """The git repository rooted at a freshly scaffolded project directory."""

    def __init__(self, repo: Repo) -> None:
        self._repo = repo

    @classmethod
    def init(cls, path: Path) -> LocalRepository:
        """Initialize (or reinitialize) a repository at ``path``."""
        try:
            repo = Repo.init(path)
        except (GitError, OSError) as exc:
            raise VcsError(f"Failed to initialize git repository at {path}: {exc}") from exc

        # git does not track empty directories, so make sure the workflow tree survived.
        if not (path / WORKFLOWS_DIR).is_dir():
            raise VcsError("Failed to create .github directory structure")
        _LOG.debug("Initialized git repository at %s", path)
        return cls(repo)

    @property
    def repo(self) -> Repo:
        return self._repo

    def stage_all(self) -> None:
        try:
            self._repo.git.add(all=True)
        except GitError as exc:
            raise VcsError(f"Failed to stage files: {exc}") from exc

    def commit(self, author: str, message: str = COMMIT_MESSAGE) -> str:
        """Commit the staged tree and return the new commit SHA. Empty commits are refused."""
        index = self._repo.index
        staged = index.diff("HEAD") if self._repo.head.is_valid() else list(index.entries)
        if not staged:
            raise VcsError("Nothing to commit: no files were staged")

        actor = Actor(author, COMMIT_EMAIL)
        try:
            commit = index.commit(message, author=actor, committer=actor)
        except (GitError, OSError, ValueError) as exc:
            raise VcsError(f"Failed to create commit: {exc}") from exc
        _LOG.debug("Created commit %s", commit.hexsha)
        return commit.hexsha

    def ensure_branch(self, name: str = PRIMARY_BRANCH) -> str:
        """Check out ``name``, creating it at HEAD if the repository lacks it."""
        try:
            if name in self._repo.heads:
                branch = self._repo.heads[name]
            else:
                branch = self._repo.create_head(name)
                _LOG.debug("Created branch %s", name)
            branch.checkout()
        except GitError as exc:
            raise VcsError(f"Failed to check out branch '{name}': {exc}") from exc
        return branch.name

    def add_remote(self, url: str, name: str = REMOTE_NAME) -> None:
        try:
            self._repo.create_remote(name, url)
        except GitError as exc:
            raise VcsError(f"Failed to add remote '{name}': {exc}") from exc

    def push(self, credentials: PushCredentials, *, branch: str = PRIMARY_BRANCH, remote: str = REMOTE_NAME) -> None:
        refspec = f"refs/heads/{branch}:refs/heads/{branch}"
        try:
            with self._repo.git.custom_environment(**credentials.git_environment()):
                results = self._repo.remote(remote).push(refspec=refspec)
        except (GitError, ValueError) as exc:
            raise VcsError(f"Failed to push '{branch}' to {remote}: {exc}") from exc

        if not results:
            raise VcsError(f"Failed to push '{branch}' to {remote}: git reported no result")
        for info in results:
            if info.flags & _PUSH_FAILURE_FLAGS:
                raise VcsError(f"Failed to push '{branch}' to {remote}: {info.summary.strip()}")
        _LOG.debug("Pushed %s to %s", refspec, remote)

    def publish(self, *, clone_url: str, author: str, credentials: PushCredentials) -> str:
        """Stage, commit, ensure ``main``, add ``origin`` and push. Returns the commit SHA."""
        self.stage_all()
        sha = self.commit(author)
        self.ensure_branch(PRIMARY_BRANCH)
        self.add_remote(clone_url)
        self.push(credentials, branch=PRIMARY_BRANCH)
        return sha
