"""Command-line interface for cligen."""

from __future__ import annotations

from cligen.cli.app import main as main
from cligen.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main"]
