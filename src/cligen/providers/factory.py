"""Factory for creating repository host instances.

Decouples provider selection from provider implementation. The SDK uses this
factory to instantiate providers by name without importing concrete classes.
"""

from __future__ import annotations

from cligen.contracts.provider import RepositoryHost
from cligen.providers.github import GitHubProvider

_REGISTRY: dict[str, type[RepositoryHost]] = {
    "github": GitHubProvider,
}


def register(name: str, provider_cls: type[RepositoryHost]) -> None:
    """Register a provider class by name."""
    _REGISTRY[name] = provider_cls


def create_provider(name: str, *, token: str, **kwargs: object) -> RepositoryHost:
    """Create a provider instance by name.

    The returned provider is a context manager::

        with create_provider("github", token=token) as provider:
            repository = provider.create_repository(...)

    Raises:
        ValueError: If the provider name is not registered.
    """
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY)) or "(none registered)"
        raise ValueError(f"Unknown provider: {name!r}. Available: {available}")
    return _REGISTRY[name](token=token, **kwargs)  # type: ignore[call-arg]
