"""Errors raised by pipex and how they are reported."""

from __future__ import annotations

import errno as errno_codes
import os
import sys
from typing import TextIO

ARGS_ERR = "Invalid arguments. Usage: ./pipex file1 cmd1 cmd2 file2"
FEW_ARGS_ERR = "Too few arguments. Usage: ./pipex file1 cmd1 cmd2 file2"
EXIT_FAILURE = 1


class PipexError(Exception):
    """Base class for every failure that ends a pipex run."""

    exit_code = EXIT_FAILURE

    @property
    def to_stderr(self) -> bool:
        """Whether the report belongs on standard error."""
        return False

    def render(self) -> str:
        """Return the one-line report for this error."""
        return f"Error: {self}"


class UsageError(PipexError):
    """The command line does not have the expected shape."""


class SystemFailure(PipexError):
    """A system call failed.

    With a ``context`` the report reads ``context: reason`` and goes to
    standard error; without one it reads ``Error: reason`` and goes to
    standard output.
    """

    def __init__(self, context: str | None, errno: int) -> None:
        self.context = context
        self.errno = errno
        self.strerror = os.strerror(errno)
        super().__init__(f"{context}: {self.strerror}" if context else self.strerror)

    @classmethod
    def from_oserror(cls, exc: OSError, context: str | None = None) -> SystemFailure:
        """Build a SystemFailure from an OSError."""
        return cls(context, exc.errno if exc.errno is not None else errno_codes.EIO)

    @property
    def to_stderr(self) -> bool:
        return self.context is not None

    def render(self) -> str:
        if self.context is not None:
            return f"{self.context}: {self.strerror}"
        return f"Error: {self.strerror}"


def report(error: PipexError, stream: TextIO | None = None) -> None:
    """Write the report line of ``error`` to ``stream``.

    Without a stream, the error's own choice of stdout or stderr is used.
    """
    if stream is None:
        stream = sys.stderr if error.to_stderr else sys.stdout
    stream.write(error.render() + "\n")
    stream.flush()