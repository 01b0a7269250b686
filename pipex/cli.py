"""Command-line entry points."""

from __future__ import annotations

import os
import sys

from pipex.config import parse_npipex, parse_pipex
from pipex.errors import PipexError, report
from pipex.pipeline import run_npipe, run_pipe


def main(argv: list[str] | None = None) -> int:
    """Run ``infile cmd1 cmd2 outfile`` and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_pipex(args)
        run_pipe(config, os.environ)
    except PipexError as exc:
        report(exc)
        return exc.exit_code
    return 0


def main_bonus(argv: list[str] | None = None) -> int:
    """Run ``infile cmd... outfile`` or ``here_doc LIMITER cmd... outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_npipex(args)
        run_npipe(config, os.environ)
    except PipexError as exc:
        report(exc)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())