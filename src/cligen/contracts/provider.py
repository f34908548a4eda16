"""Repository host contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from pydantic import BaseModel


class AuthenticatedUser(BaseModel):
    login: str
    scopes: frozenset[str] | None = None

    model_config = {"frozen": True}


class RemoteRepository(BaseModel):
    name: str
    full_name: str
    clone_url: str
    html_url: str
    private: bool = False

    model_config = {"frozen": True}


class RepositoryHost(ABC):
    """A hosted Git service that can authenticate a token and create repositories."""

    @abstractmethod
    def __enter__(self) -> RepositoryHost: ...

    @abstractmethod
    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    @abstractmethod
    def get_authenticated_user(self) -> AuthenticatedUser: ...

    @abstractmethod
    def create_repository(self, *, name: str, description: str, private: bool) -> RemoteRepository: ...
