"""Interactive prompts for values missing from the command line."""

from __future__ import annotations

import argparse
from collections.abc import Callable

import questionary

_REQUIRED = (("name", "--name"), ("author", "--author"), ("github_token", "--github-token"))


def missing_options(args: argparse.Namespace) -> list[str]:
    return [flag for attr, flag in _REQUIRED if not (getattr(args, attr) or "").strip()]


def _required(label: str) -> Callable[[str], bool | str]:
    return lambda value: len(value.strip()) > 0 or f"{label} is required"


def prompt_missing(args: argparse.Namespace) -> argparse.Namespace:
    """Fill unset options by asking the user. Raises ``KeyboardInterrupt`` on cancel."""
    if not (args.name or "").strip():
        args.name = _ask(questionary.text("Tool name:", validate=_required("Tool name")))
    if args.description is None:
        args.description = _ask(questionary.text("Description:", default=""), strip=False)
    if not (args.author or "").strip():
        args.author = _ask(questionary.text("Author name:", validate=_required("Author name")))
    if not (args.github_token or "").strip():
        args.github_token = _ask(
            questionary.password("GitHub token (PAT):", validate=_required("GitHub token"))
        )
    return args


def _ask(question: questionary.Question, *, strip: bool = True) -> str:
    answer = question.ask()
    if answer is None:
        raise KeyboardInterrupt
    return answer.strip() if strip else answer
