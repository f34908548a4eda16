"""GitHub provider."""

from cligen.providers.github.provider import GITHUB_API_URL, LICENSE_TEMPLATE, GitHubProvider

__all__ = ["GITHUB_API_URL", "LICENSE_TEMPLATE", "GitHubProvider"]
