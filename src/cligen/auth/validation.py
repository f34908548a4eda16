"""Access-token preflight validation."""

from __future__ import annotations

import logging

from cligen.contracts.exceptions import REQUIRED_SCOPES, AuthorizationError
from cligen.contracts.provider import AuthenticatedUser, RepositoryHost

_LOG = logging.getLogger(__name__)


class CredentialValidator:
    """Confirms a token can act on the provider before anything touches disk."""

    def __init__(self, provider: RepositoryHost, *, required_scopes: frozenset[str] | None = None) -> None:
        self._provider = provider
        self._required_scopes = required_scopes if required_scopes is not None else frozenset(REQUIRED_SCOPES)

    def validate(self) -> AuthenticatedUser:
        user = self._provider.get_authenticated_user()
        check_scopes(user.scopes, required=self._required_scopes)
        _LOG.debug("Token authenticated as %s", user.login)
        return user


def check_scopes(scopes: frozenset[str] | None, *, required: frozenset[str]) -> None:
    if scopes is None:
        return
    missing = required - scopes
    if missing:
        raise AuthorizationError(missing_scopes=missing)
