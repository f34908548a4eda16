"""Provider implementations and factory."""

from cligen.providers.factory import create_provider, register
from cligen.providers.github import GitHubProvider

__all__ = ["GitHubProvider", "create_provider", "register"]
