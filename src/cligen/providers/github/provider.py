"""GitHub REST provider."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from cligen.contracts.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ProviderError,
    ProviderValidationError,
    RepositoryExistsError,
)
from cligen.contracts.provider import AuthenticatedUser, RemoteRepository, RepositoryHost

_LOG = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
LICENSE_TEMPLATE = "mit"


class GitHubProvider(RepositoryHost):
    """Talks to the GitHub REST API with a personal access token.

    Use as a context manager so the underlying HTTP client is closed::

        with GitHubProvider(token=token) as provider:
            user = provider.get_authenticated_user()
    """

    def __init__(
        self,
        *,
        token: str,
        base_url: str = GITHUB_API_URL,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._token = token
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def __enter__(self) -> GitHubProvider:
        self._client = httpx.Client(
            base_url=self._base_url,
            headers=_github_headers(self._token),
            timeout=self._timeout,
            transport=self._transport,
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def get_authenticated_user(self) -> AuthenticatedUser:
        response = self._request("GET", "/user")
        if response.status_code == 401:
            raise AuthenticationError("Invalid GitHub token. Please check if the token is correct.")
        if response.status_code == 403:
            raise AuthorizationError()
        if response.status_code != 200:
            raise ProviderError(f"GitHub API error: {_error_message(response)}")

        payload = response.json()
        return AuthenticatedUser(
            login=str(payload.get("login", "")),
            scopes=_parse_scopes(response.headers.get("x-oauth-scopes")),
        )

    def create_repository(self, *, name: str, description: str, private: bool) -> RemoteRepository:
        body: dict[str, Any] = {
            "name": name,
            "description": description,
            "private": private,
            "auto_init": False,
            "license_template": LICENSE_TEMPLATE,
        }
        response = self._request("POST", "/user/repos", json=body)
        if response.status_code == 422:
            if _is_name_collision(response):
                raise RepositoryExistsError(name)
            raise ProviderValidationError(f"GitHub API validation error: {_error_message(response)}")
        if response.status_code == 401:
            raise AuthenticationError("Invalid GitHub token. Please check if the token is correct.")
        if response.status_code not in (200, 201):
            raise ProviderError(f"GitHub API error: {_error_message(response)}")

        payload = response.json()
        try:
            repository = RemoteRepository(
                name=payload["name"],
                full_name=payload["full_name"],
                clone_url=payload["clone_url"],
                html_url=payload["html_url"],
                private=bool(payload.get("private", private)),
            )
        except KeyError as exc:
            raise ProviderError(f"GitHub API error: response is missing field {exc}") from exc
        _LOG.debug("Created repository %s", repository.full_name)
        return repository

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        if self._client is None:
            raise ProviderError("GitHub provider is not open; use it as a context manager")
        _LOG.debug("%s %s", method, path)
        try:
            return self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise ProviderError(f"GitHub API error: {exc}") from exc


def _github_headers(token: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {token}",
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
        "User-Agent": "cligen",
    }


def _parse_scopes(header: str | None) -> frozenset[str] | None:
    # Fine-grained tokens do not report scopes at all.
    if header is None:
        return None
    return frozenset(scope.strip() for scope in header.split(",") if scope.strip())


def _json_payload(response: httpx.Response) -> dict[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def _error_message(response: httpx.Response) -> str:
    payload = _json_payload(response)
    message = str(payload.get("message") or response.reason_phrase or f"HTTP {response.status_code}")
    details = [
        str(error["message"])
        for error in payload.get("errors", [])
        if isinstance(error, dict) and error.get("message")
    ]
    if details:
        message = f"{message} ({'; '.join(details)})"
    return message


def _is_name_collision(response: httpx.Response) -> bool:
    for error in _json_payload(response).get("errors", []):
        if not isinstance(error, dict):
            continue
        if error.get("code") == "already_exists":
            return True
        if "already exists" in str(error.get("message", "")):
            return True
    return False
