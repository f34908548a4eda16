from __future__ import annotations

from pathlib import Path

import pytest

from cligen.contracts.provider import RemoteRepository
from cligen.contracts.result import GenerationResult
from cligen.reporting import format_next_steps, print_report


def _result() -> GenerationResult:
    return GenerationResult(
        project_dir=Path("/work/mytool"),
        repository=RemoteRepository(
            name="mytool",
            full_name="jane/mytool",
            clone_url="https://github.com/jane/mytool.git",
            html_url="https://github.com/jane/mytool",
        ),
        branch="main",
        commit_sha="abc123",
    )


def test_format_next_steps() -> None:
    text = format_next_steps(_result())
    assert text.splitlines() == [
        "Project created successfully!",
        "Repository URL: https://github.com/jane/mytool.git",
        "",
        "To run the tool directly:",
        "  dotnet run --project https://github.com/jane/mytool.git",
        "",
        "To clone and develop locally:",
        "  git clone https://github.com/jane/mytool.git",
        "  cd mytool",
        "  dotnet restore",
        "  dotnet run -- --help",
    ]


def test_print_report_writes_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    print_report(_result())
    out = capsys.readouterr().out
    assert "Repository URL: https://github.com/jane/mytool.git" in out
    assert "  git clone https://github.com/jane/mytool.git" in out
