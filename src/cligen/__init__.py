"""Public API surface for cligen."""

__version__ = "0.1.0"

from cligen.auth import CredentialValidator
from cligen.contracts import (
    AuthenticatedUser,
    AuthenticationError,
    AuthorizationError,
    CliGenError,
    ConfigError,
    GenerationResult,
    MissingFileError,
    ProviderError,
    ProviderValidationError,
    RemoteRepository,
    RepositoryExistsError,
    RepositoryHost,
    RunConfig,
    RunProgress,
    ScaffoldError,
    Stage,
    TemplateRenderingError,
    VcsError,
)
from cligen.providers import GitHubProvider, create_provider
from cligen.reporting import format_next_steps, print_report
from cligen.scaffold import ProjectScaffolder, TemplateRenderer, expected_files, verify_files
from cligen.sdk import ToolGenerator, build_config
from cligen.vcs import LocalRepository, PushCredentials, TokenUsernameCredentials

__all__ = [
    "AuthenticatedUser",
    "AuthenticationError",
    "AuthorizationError",
    "CliGenError",
    "ConfigError",
    "CredentialValidator",
    "GenerationResult",
    "GitHubProvider",
    "LocalRepository",
    "MissingFileError",
    "ProjectScaffolder",
    "ProviderError",
    "ProviderValidationError",
    "PushCredentials",
    "RemoteRepository",
    "RepositoryExistsError",
    "RepositoryHost",
    "RunConfig",
    "RunProgress",
    "ScaffoldError",
    "Stage",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TokenUsernameCredentials",
    "ToolGenerator",
    "VcsError",
    "__version__",
    "build_config",
    "create_provider",
    "expected_files",
    "format_next_steps",
    "print_report",
    "verify_files",
]
