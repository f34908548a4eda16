"""Stage progress contracts."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Stage(str, Enum):
    VALIDATE = "Validate"
    SCAFFOLD = "Scaffold"
    VERIFY = "Verify"
    LOCAL_INIT = "Init"
    REMOTE_CREATE = "Create"
    PUBLISH = "Publish"


class RunProgress(Protocol):
    def phase_start(self, phase: str) -> None: ...

    def phase_done(self, phase: str) -> None: ...

    def phase_error(self, phase: str, error: BaseException) -> None: ...
