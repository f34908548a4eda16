"""Exception hierarchy for cligen."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

REQUIRED_SCOPES: dict[str, str] = {
    "repo": "Full control of private repositories",
    "workflow": "Update GitHub Action workflows",
    "write:packages": "Write packages",
}
NEW_TOKEN_URL = "https://github.com/settings/tokens/new"


class CliGenError(Exception):
    """Base exception for all cligen errors."""


class ConfigError(CliGenError):
    """Run configuration is missing or invalid."""


class ProviderError(CliGenError):
    """Base provider operation failure."""


class AuthenticationError(ProviderError):
    """The access token was rejected by the provider."""


class AuthorizationError(ProviderError):
    """The access token is valid but lacks the permissions cligen needs."""

    def __init__(self, message: str | None = None, *, missing_scopes: Iterable[str] = ()) -> None:
        self.missing_scopes = tuple(sorted(missing_scopes))
        super().__init__(message or _authorization_message())


class RepositoryExistsError(ProviderError):
    """A remote repository with the requested name already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"A repository named '{name}' already exists. Please choose a different name.")


class ProviderValidationError(ProviderError):
    """The provider rejected the request payload."""


class ScaffoldError(CliGenError):
    """Project files could not be written."""


class MissingFileError(ScaffoldError):
    """An expected scaffold file is absent after generation."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to create file: {path}")


class TemplateRenderingError(ScaffoldError):
    """A template placeholder could not be resolved."""


class VcsError(CliGenError):
    """A local version-control operation failed."""


def _authorization_message() -> str:
    scopes = "\n".join(f"- {scope} ({summary})" for scope, summary in REQUIRED_SCOPES.items())
    return (
        "The GitHub token doesn't have the required permissions.\n"
        "Please create a new token with the following permissions:\n"
        f"{scopes}\n\n"
        f"You can create a new token at: {NEW_TOKEN_URL}"
    )
