"""Human-readable dumps of pipeline configurations."""

from __future__ import annotations

from typing import Any

from pipex.config import NPipex, Pipex
from pipex.printf import format_printf


def _fd(stream: Any) -> int:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return -1


def describe_pipex(config: Pipex | None) -> str:
    """Return a multi-line description of a two-command configuration."""
    if config is None:
        return "t_pipex is NULL.\n"
    return "".join(
        [
            "=== t_pipex Contents ===\n",
            format_printf("input_fd:  %d\n", _fd(config.input_file)),
            format_printf("output_fd: %d\n", _fd(config.output_file)),
            format_printf("cmd1:      %s\n", config.cmd1),
            format_printf("cmd2:      %s\n", config.cmd2),
            "========================\n",
        ]
    )


def describe_tokens(tokens: list[str] | None) -> str:
    """Return one ``token[i]: word`` line per token."""
    if tokens is None:
        return "No tokens to print.\n"
    return "".join(format_printf("token[%d]: %s\n", i, token) for i, token in enumerate(tokens))


def _describe_cmds(cmds: list[str | None] | None) -> str:
    if cmds is None:
        return "cmds: (null)\n"
    lines = ["cmds:\n"]
    for i, cmd in enumerate(cmds):
        lines.append(format_printf("  [%d]: %s\n", i, cmd))
    return "".join(lines)


def describe_npipex(config: NPipex | None) -> str:
    """Return a multi-line description of an n-command configuration."""
    if config is None:
        return "t_npipex pointer is NULL\n"
    return "".join(
        [
            "== npipex ==\n",
            format_printf("heredoc_on: %d\n", int(config.heredoc)),
            format_printf("limiter: %s\n", config.limiter),
            format_printf("input_fd: %d\n", _fd(config.input_file)),
            format_printf("output_fd: %d\n", _fd(config.output_file)),
            format_printf("cmd_count: %d\n", config.cmd_count),
            _describe_cmds(config.cmds),
            "============\n",
        ]
    )