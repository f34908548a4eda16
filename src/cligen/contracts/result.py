"""Result of a completed run."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from cligen.contracts.provider import RemoteRepository


class GenerationResult(BaseModel):
    project_dir: Path
    repository: RemoteRepository
    branch: str
    commit_sha: str

    model_config = {"frozen": True}
