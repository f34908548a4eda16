"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import nullcontext

from cligen.cli.parser import build_parser
from cligen.cli.progress import RichRunProgress
from cligen.cli.prompts import missing_options, prompt_missing
from cligen.contracts.exceptions import ConfigError, ProviderError, ScaffoldError, VcsError
from cligen.reporting import print_report
from cligen.sdk import ToolGenerator, build_config

EXIT_USAGE = 2
EXIT_CONFIG = 3
EXIT_PROVIDER = 4
EXIT_SCAFFOLD = 5
EXIT_VCS = 6


def _collect_inputs(args: argparse.Namespace) -> argparse.Namespace | None:
    if not missing_options(args):
        return args
    if not sys.stdin.isatty():
        print(f"error: missing required option(s): {', '.join(missing_options(args))}", file=sys.stderr)
        return None
    return prompt_missing(args)


def _run(args: argparse.Namespace) -> int:
    config = build_config(
        name=args.name,
        description=args.description or "",
        author=args.author,
        token=args.github_token,
        private=args.private,
        directory=args.directory,
    )
    print(f"Creating CLI project: {config.name}")

    progress = RichRunProgress() if sys.stderr.isatty() else None
    with progress if progress is not None else nullcontext():
        result = ToolGenerator.from_config(config, progress=progress).run()

    print_report(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        collected = _collect_inputs(args)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return EXIT_USAGE
    if collected is None:
        return EXIT_USAGE

    try:
        return _run(collected)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return EXIT_USAGE
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    except ProviderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_PROVIDER
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_SCAFFOLD
    except VcsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_VCS
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
