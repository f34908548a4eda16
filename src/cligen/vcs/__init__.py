"""Version-control operations for the generated project."""

from cligen.vcs.credentials import PushCredentials, TokenUsernameCredentials
from cligen.vcs.repository import COMMIT_EMAIL, COMMIT_MESSAGE, PRIMARY_BRANCH, REMOTE_NAME, LocalRepository

__all__ = [
    "COMMIT_EMAIL",
    "COMMIT_MESSAGE",
    "PRIMARY_BRANCH",
    "REMOTE_NAME",
    "LocalRepository",
    "PushCredentials",
    "TokenUsernameCredentials",
]
