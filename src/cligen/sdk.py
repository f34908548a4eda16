"""SDK composition root for cligen."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from cligen.auth import CredentialValidator
from cligen.contracts.config import RunConfig
from cligen.contracts.exceptions import ConfigError
from cligen.contracts.progress import RunProgress, Stage
from cligen.contracts.provider import RemoteRepository, RepositoryHost
from cligen.contracts.result import GenerationResult
from cligen.providers import create_provider
from cligen.scaffold import ProjectScaffolder, verify_files
from cligen.vcs import PRIMARY_BRANCH, LocalRepository, PushCredentials, TokenUsernameCredentials

_LOG = logging.getLogger(__name__)


def build_config(**values: Any) -> RunConfig:
    """Validate raw input values into a :class:`RunConfig`."""
    try:
        return RunConfig.model_validate(values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'config'}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"invalid input: {problems}") from exc


class ToolGenerator:
    """Scaffold a CLI project and publish it as a new remote repository.

    Stages run strictly in order and the first failure aborts the run::

        Validate -> Scaffold -> Verify -> Init -> Create -> Publish

    Nothing is rolled back. A failure after the Create stage leaves the new
    remote repository in place; it is logged so the user can remove it.
    """

    def __init__(
        self,
        *,
        config: RunConfig,
        provider: RepositoryHost,
        scaffolder: ProjectScaffolder | None = None,
        credentials: PushCredentials | None = None,
        progress: RunProgress | None = None,
    ) -> None:
        self._config = config
        self._provider = provider
        self._scaffolder = scaffolder or ProjectScaffolder()
        self._credentials = credentials or TokenUsernameCredentials(token=config.token.get_secret_value())
        self._progress = progress

    @classmethod
    def from_config(
        cls,
        config: RunConfig,
        *,
        provider_name: str = "github",
        progress: RunProgress | None = None,
    ) -> ToolGenerator:
        try:
            provider = create_provider(provider_name, token=config.token.get_secret_value())
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        return cls(config=config, provider=provider, progress=progress)

    def run(self, target_dir: Path | None = None) -> GenerationResult:
        config = self._config
        with self._provider as provider:
            with self._stage(Stage.VALIDATE):
                CredentialValidator(provider).validate()

            with self._stage(Stage.SCAFFOLD):
                project_dir = self._scaffolder.create(config, target_dir)

            with self._stage(Stage.VERIFY):
                verify_files(project_dir, config.name)

            with self._stage(Stage.LOCAL_INIT):
                local = LocalRepository.init(project_dir)

            with self._stage(Stage.REMOTE_CREATE):
                repository = provider.create_repository(
                    name=config.name,
                    description=config.description,
                    private=config.private,
                )

        with self._stage(Stage.PUBLISH), _warn_orphaned_remote(repository):
            sha = local.publish(
                clone_url=repository.clone_url,
                author=config.author,
                credentials=self._credentials,
            )

        return GenerationResult(
            project_dir=project_dir,
            repository=repository,
            branch=PRIMARY_BRANCH,
            commit_sha=sha,
        )

    @contextmanager
    def _stage(self, stage: Stage) -> Iterator[None]:
        _LOG.debug("Stage %s started", stage.value)
        self._notify(lambda progress: progress.phase_start(stage.value))
        try:
            yield
        except BaseException as exc:
            _LOG.debug("Stage %s failed: %s", stage.value, exc)
            self._notify(lambda progress: progress.phase_error(stage.value, exc))
            raise
        self._notify(lambda progress: progress.phase_done(stage.value))

    def _notify(self, emit: Callable[[RunProgress], None]) -> None:
        if self._progress is not None:
            emit(self._progress)


@contextmanager
def _warn_orphaned_remote(repository: RemoteRepository) -> Iterator[None]:
    try:
        yield
    except Exception:
        _LOG.warning(
            "Remote repository %s was created but the initial push did not complete; "
            "delete it or push manually from the project directory",
            repository.html_url,
        )
        raise
