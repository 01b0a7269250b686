"""Locating commands on PATH."""

from __future__ import annotations

import errno
import os
from collections.abc import Mapping

from pipex.config import extract_path_dirs
from pipex.errors import SystemFailure


def split_command(cmd: str) -> list[str]:
    """Split ``cmd`` into words on spaces, dropping empty words."""
    return [word for word in cmd.split(" ") if word]


def find_executable(name: str, environ: Mapping[str, str]) -> str | None:
    """Return the first ``dir/name`` on PATH that is executable, or None."""
    for directory in extract_path_dirs(environ) or []:
        path = f"{directory}/{name}"
        if os.access(path, os.X_OK):
            return path
    return None


def resolve_command(cmd: str, environ: Mapping[str, str]) -> tuple[str, list[str]]:
    """Return the executable path and argument list for ``cmd``.

    Raises SystemFailure when the command cannot be found.
    """
    tokens = split_command(cmd)
    path = find_executable(tokens[0], environ) if tokens else None
    if path is None:
        raise SystemFailure("Failed to obtain command path", errno.ENOENT)
    return path, tokens