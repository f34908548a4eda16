"""Core contracts shared across cligen layers."""

from cligen.contracts.config import RunConfig
from cligen.contracts.exceptions import (
    AuthenticationError,
    AuthorizationError,
    CliGenError,
    ConfigError,
    MissingFileError,
    ProviderError,
    ProviderValidationError,
    RepositoryExistsError,
    ScaffoldError,
    TemplateRenderingError,
    VcsError,
)
from cligen.contracts.progress import RunProgress, Stage
from cligen.contracts.provider import AuthenticatedUser, RemoteRepository, RepositoryHost
from cligen.contracts.result import GenerationResult

__all__ = [
    "AuthenticatedUser",
    "AuthenticationError",
    "AuthorizationError",
    "CliGenError",
    "ConfigError",
    "GenerationResult",
    "MissingFileError",
    "ProviderError",
    "ProviderValidationError",
    "RemoteRepository",
    "RepositoryExistsError",
    "RepositoryHost",
    "RunConfig",
    "RunProgress",
    "ScaffoldError",
    "Stage",
    "TemplateRenderingError",
    "VcsError",
]
