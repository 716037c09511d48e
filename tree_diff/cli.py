"""
Command-line interface for tree-diff.

This module is responsible for argument parsing and for printing the
result of a directory comparison, either as a colorized diff or as a
list of changed files.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from .colorize import COLOR_MODES, TerminalConsole, colorize
from .config import Config
from .errors import TreeDiffError
from .folders_diff import diff, diff_files
from .logging_utils import configure_logging


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tree-diff",
        description=(
            "Compare two sibling directories that are not under version "
            "control, using git to compute the diff."
        ),
    )

    parser.add_argument("one", help="Original directory.")
    parser.add_argument("other", help="Changed directory; must share the parent of ONE.")
    parser.add_argument(
        "--name-status",
        action="store_true",
        help="Only list changed files with their status (A, D or M).",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default="auto",
        help="When to colorize the diff (default: auto).",
    )
    parser.add_argument(
        "--git-exec-path",
        help="Directory containing the git binary to use.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )

    return parser


def run(config: Config, out: TextIO) -> None:
    env = config.environment()
    if config.name_status:
        for change in diff_files(config.one, config.other, config.verbose, env):
            out.write(f"{change.operation.value}\t{change.name}\n")
        return

    raw = diff(config.one, config.other, config.verbose, env)
    if not raw:
        return
    console = TerminalConsole(stream=out, color=config.color)
    # colorize() prefixes every line with a newline; drop the leading one.
    out.write(colorize(console, raw.decode("utf-8", errors="replace"))[1:])


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    config = Config(
        one=args.one,
        other=args.other,
        name_status=args.name_status,
        color=args.color,
        verbosity=args.verbose,
        git_exec_path=args.git_exec_path,
    )

    configure_logging(verbosity=config.verbosity)

    try:
        run(config, sys.stdout)
    except KeyboardInterrupt:
        return 130
    except (TreeDiffError, ValueError) as exc:
        print(f"tree-diff: error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
