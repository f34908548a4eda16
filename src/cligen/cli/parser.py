"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _package_version() -> str:
    try:
        return version("cligen")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cligen",
        description="CLI Tool Generator - Create and publish C# CLI tools to GitHub",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--name", default=None, help="Name of the CLI tool")
    parser.add_argument("--description", default=None, help="Description of the CLI tool")
    parser.add_argument("--github-token", dest="github_token", default=None, help="GitHub Personal Access Token")
    parser.add_argument("--author", default=None, help="Author name")
    parser.add_argument("--private", action="store_true", default=False, help="Create as private repository")
    parser.add_argument(
        "--directory",
        type=Path,
        default=None,
        help="Parent directory for the new project (default: current directory)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser"]
