"""Running commands joined by pipes between an input and an output."""

from __future__ import annotations

import os
import subprocess
import threading
from collections.abc import Iterable, Mapping
from typing import Any

from pipex.command import resolve_command
from pipex.config import NPipex, Pipex
from pipex.errors import EXIT_FAILURE, SystemFailure, report


def read_heredoc(stream: Iterable[Any], limiter: str) -> bytes:
    """Collect lines from ``stream`` up to a line equal to ``limiter``.

    ``limiter`` carries its trailing newline, so a line only ends the
    document when it matches exactly. Reading also stops at end of input.
    Text lines are encoded; the result is always bytes.
    """
    limiter_bytes = limiter.encode()
    collected: list[bytes] = []
    for line in stream:
        data = line.encode() if isinstance(line, str) else bytes(line)
        if data == limiter_bytes:
            break
        collected.append(data)
    return b"".join(collected)


def _spawn(
    cmd: str | None,
    stdin: Any,
    stdout: Any,
    environ: Mapping[str, str],
    context: str,
) -> subprocess.Popen | None:
    try:
        path, argv = resolve_command(cmd or "", environ)
    except SystemFailure as exc:
        report(exc)
        return None
    try:
        return subprocess.Popen(argv, executable=path, stdin=stdin, stdout=stdout, env=dict(environ))
    except OSError as exc:
        report(SystemFailure.from_oserror(exc, context))
        return None


def _wait(proc: subprocess.Popen | None) -> int:
    return EXIT_FAILURE if proc is None else proc.wait()


def _close(end: Any) -> None:
    if isinstance(end, int):
        os.close(end)
    else:
        end.close()


def _feed(fd: int, data: bytes) -> None:
    view = memoryview(data)
    try:
        while view:
            written = os.write(fd, view)
            view = view[written:]
    except BrokenPipeError:
        pass
    finally:
        os.close(fd)


def run_pipe(config: Pipex, environ: Mapping[str, str]) -> list[int]:
    """Run ``cmd1 < infile | cmd2 > outfile`` and wait for both commands.

    Returns the exit status of each command; a command that could not be
    started counts as having failed. The configuration's files are closed.
    """
    read_end, write_end = os.pipe()
    try:
        first = _spawn(config.cmd1, config.input_file, write_end, environ, "cmd1 execve")
        second = _spawn(config.cmd2, read_end, config.output_file, environ, "cmd2 execve")
    finally:
        os.close(read_end)
        os.close(write_end)
        config.close()
    return [_wait(first), _wait(second)]


def run_npipe(config: NPipex, environ: Mapping[str, str]) -> list[int]:
    """Run the configured commands as one pipeline and wait for them.

    In here-document mode the document is read from the input first and
    fed to the pipeline, and the first listed command is not run. Returns
    the exit status of each command that was run.
    """
    feeder: threading.Thread | None = None
    start = 0
    prev: Any
    if config.heredoc:
        data = read_heredoc(config.input_file, config.limiter or "")
        read_end, write_end = os.pipe()
        feeder = threading.Thread(target=_feed, args=(write_end, data), daemon=True)
        feeder.start()
        prev = read_end
        start = 1
    else:
        prev = config.input_file

    last = config.cmd_count - 1
    procs: list[subprocess.Popen | None] = []
    try:
        for idx, cmd in enumerate(config.cmds[start:], start):
            if idx < last:
                read_end, write_end = os.pipe()
                stdout: Any = write_end
            else:
                stdout = config.output_file
            procs.append(_spawn(cmd, prev, stdout, environ, "execute cmd failed"))
            _close(prev)
            if idx < last:
                os.close(write_end)
                prev = read_end
            else:
                prev = None
    finally:
        if prev is not None:
            _close(prev)
        config.close()

    statuses = [_wait(proc) for proc in procs]
    if feeder is not None:
        feeder.join()
    return statuses