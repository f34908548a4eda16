"""Push credential schemes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

_TOKEN_ENV = "CLIGEN_PUSH_USERNAME"

# Answers ``git credential get`` with the token as the username and an empty password.
_TOKEN_HELPER = '!f() { test "$1" = get && printf "username=%s\\npassword=\\n" "$' + _TOKEN_ENV + '"; }; f'


class PushCredentials(ABC):
    """Supplies authentication for ``git push`` as extra process environment."""

    @abstractmethod
    def git_environment(self) -> dict[str, str]: ...


@dataclass(frozen=True)
class TokenUsernameCredentials(PushCredentials):
    """GitHub token-as-username scheme.

    The helper is injected through ``GIT_CONFIG_*`` variables so the token
    never appears in the remote URL, the repository config or ``argv``.
    The empty first helper clears any helpers configured globally.
    """

    token: str = field(repr=False)

    def git_environment(self) -> dict[str, str]:
        return {
            "GIT_TERMINAL_PROMPT": "0",
            "GIT_CONFIG_COUNT": "2",
            "GIT_CONFIG_KEY_0": "credential.helper",
            "GIT_CONFIG_VALUE_0": "",
            "GIT_CONFIG_KEY_1": "credential.helper",
            "GIT_CONFIG_VALUE_1": _TOKEN_HELPER,
            _TOKEN_ENV: self.token,
        }
