"""Success summary shown after a completed run."""

from __future__ import annotations

from rich.console import Console

from cligen.contracts.result import GenerationResult


def format_next_steps(result: GenerationResult) -> str:
    url = result.repository.clone_url
    lines = [
        "Project created successfully!",
        f"Repository URL: {url}",
        "",
        "To run the tool directly:",
        f"  dotnet run --project {url}",
        "",
        "To clone and develop locally:",
        f"  git clone {url}",
        f"  cd {result.repository.name}",
        "  dotnet restore",
        "  dotnet run -- --help",
    ]
    return "\n".join(lines)


def print_report(result: GenerationResult, console: Console | None = None) -> None:
    console = console or Console()
    console.print()
    console.print(format_next_steps(result), markup=False, highlight=False, soft_wrap=True)
