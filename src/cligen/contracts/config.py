"""Run configuration contract."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, SecretStr, field_validator

_NAME_RE = re.compile(r"^[A-Za-z0-9._-]{1,100}$")


class RunConfig(BaseModel):
    """Inputs for one scaffold-and-publish run.

    ``name`` doubles as the directory name, the manifest/command name and the
    remote repository name, so it is restricted to the character set GitHub
    accepts for repository names.
    """

    name: str
    description: str = ""
    author: str
    token: SecretStr
    private: bool = False
    directory: Path | None = None

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("name must not be empty")
        if not _NAME_RE.match(name):
            raise ValueError("name may only contain letters, digits, '.', '_' and '-' (max 100 characters)")
        if name in {".", ".."} or name.lower().endswith(".git"):
            raise ValueError(f"name {name!r} is reserved")
        return name

    @field_validator("author")
    @classmethod
    def validate_author(cls, value: str) -> str:
        author = value.strip()
        if not author:
            raise ValueError("author must not be empty")
        return author

    @field_validator("token")
    @classmethod
    def validate_token(cls, value: SecretStr) -> SecretStr:
        token = value.get_secret_value().strip()
        if not token:
            raise ValueError("token must not be empty")
        return SecretStr(token)

    @property
    def project_dir(self) -> Path:
        base = self.directory if self.directory is not None else Path.cwd()
        return base.expanduser().resolve() / self.name
