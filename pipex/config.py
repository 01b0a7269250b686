"""Command-line parsing into pipeline configurations."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import BinaryIO

from pipex.errors import ARGS_ERR, FEW_ARGS_ERR, SystemFailure, UsageError

HEREDOC_KEYWORD = "here_doc"


def extract_path_dirs(environ: Mapping[str, str]) -> list[str] | None:
    """Return the directories listed in PATH, or None when PATH is absent.

    The first variable whose name starts with ``PATH`` is used, and empty
    entries are dropped.
    """
    for key, value in environ.items():
        if key.startswith("PATH"):
            entry = f"{key}={value}"[5:]
            return [part for part in entry.split(":") if part]
    return None


def _open_output(path: str) -> BinaryIO:
    fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o644)
    return os.fdopen(fd, "wb")


def _open_files(input_path: str | None, output_path: str) -> tuple[BinaryIO | None, BinaryIO]:
    source = None
    failure: OSError | None = None
    if input_path is not None:
        try:
            source = open(input_path, "rb")
        except OSError as exc:
            failure = exc
    try:
        sink = _open_output(output_path)
    except OSError as exc:
        if source is not None:
            source.close()
        raise SystemFailure.from_oserror(exc) from exc
    if failure is not None:
        sink.close()
        raise SystemFailure.from_oserror(failure) from failure
    return source, sink


@dataclass
class Pipex:
    """Two commands joined by one pipe between an input and an output file."""

    input_file: BinaryIO
    output_file: BinaryIO
    cmd1: str | None
    cmd2: str | None

    def close(self) -> None:
        """Close the input and output files."""
        self.input_file.close()
        self.output_file.close()

    def __enter__(self) -> Pipex:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class NPipex:
    """Any number of piped commands, optionally fed by a here-document."""

    heredoc: bool
    limiter: str | None
    input_file: BinaryIO
    output_file: BinaryIO
    cmds: list[str] = field(default_factory=list)

    @property
    def cmd_count(self) -> int:
        return len(self.cmds)

    def close(self) -> None:
        """Close the output file, and the input file unless it is stdin."""
        if not self.heredoc:
            self.input_file.close()
        self.output_file.close()

    def __enter__(self) -> NPipex:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def parse_pipex(argv: list[str]) -> Pipex:
    """Parse ``[infile, cmd1, cmd2, outfile]`` and open both files.

    The output file is created or truncated even when the input file
    cannot be opened.
    """
    if len(argv) != 4:
        raise UsageError(ARGS_ERR)
    source, sink = _open_files(argv[0], argv[3])
    return Pipex(input_file=source, output_file=sink, cmd1=argv[1], cmd2=argv[2])


def parse_npipex(argv: list[str]) -> NPipex:
    """Parse ``[infile, cmd..., outfile]`` or ``[here_doc, LIMITER, cmd..., outfile]``.

    In here-document mode the input is standard input and the limiter
    carries a trailing newline.
    """
    if len(argv) < 4:
        raise UsageError(FEW_ARGS_ERR)
    heredoc = argv[0].startswith(HEREDOC_KEYWORD)
    limiter = argv[1] + "\n" if heredoc else None
    if heredoc:
        _, sink = _open_files(None, argv[-1])
        source = getattr(sys.stdin, "buffer", sys.stdin)
    else:
        source, sink = _open_files(argv[0], argv[-1])
    first = 1 + heredoc
    return NPipex(
        heredoc=heredoc,
        limiter=limiter,
        input_file=source,
        output_file=sink,
        cmds=list(argv[first:-1]),
    )