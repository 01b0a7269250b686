"""A printf work-alike supporting the ``c s p d i u x X %`` conversions.

Each conversion takes its argument from the positional arguments in
order. Specifiers whose type cannot be understood are written out as
they stand, with their leading ``%``.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

from pipex.fmtspec import FormatSpec, next_spec_text, parse_spec
from pipex.render import render_int, render_ptr, render_str

LOWERCASE_HEX_DIGITS = "0123456789abcdef"
UPPERCASE_HEX_DIGITS = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_UINTPTR_MASK = (1 << 64) - 1


def utohex(value: int, upper: bool = False) -> str:
    """Return the 32-bit unsigned value of ``value`` in hexadecimal."""
    return format(value & _UINT_MASK, "X" if upper else "x")


def ptoa(address: int | None) -> str:
    """Return ``address`` as a ``0x``-prefixed lowercase hex string.

    A null address (``None`` or 0) gives an empty string.
    """
    if not address:
        return ""
    return "0x" + format(address & _UINTPTR_MASK, "x")


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _char_of(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a character conversion needs a single character")
        return value
    return chr(int(value) & 0xFF)


def _render_null_char(spec: FormatSpec) -> str:
    padding = ("0" if "0" in spec.flags else " ") * max(spec.width, 0)
    if "-" in spec.flags:
        return "\0" + padding
    return padding + "\0"


def _render_char(spec: FormatSpec, value: Any) -> str:
    char = _char_of(value)
    if char == "\0":
        return _render_null_char(spec)
    return render_str(spec, char)


def _render_hex(spec: FormatSpec, value: Any) -> str:
    number = int(value) & _UINT_MASK
    upper = spec.type == "X"
    text = utohex(number, upper)
    if "#" in spec.flags and number != 0:
        text = ("0X" if upper else "0x") + text
    return render_ptr(spec, text)


def _convert(spec: FormatSpec, args: Iterator[Any]) -> str:
    kind = spec.type
    if kind == "%":
        return "%"
    value = _next_arg(args)
    if kind == "c":
        return _render_char(spec, value)
    if kind == "s":
        return render_str(spec, None if value is None else str(value))
    if kind == "p":
        return render_ptr(spec, ptoa(value) if value else None)
    if kind in ("d", "i"):
        return render_int(spec, int(value), True)
    if kind == "u":
        return render_int(spec, int(value), False)
    return _render_hex(spec, value)


def _pieces(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    idx = 0
    while idx < len(fmt):
        percent = fmt.find("%", idx)
        if percent < 0:
            yield fmt[idx:]
            return
        yield fmt[idx:percent]
        start = percent + 1
        text = next_spec_text(fmt, start)
        spec = parse_spec(text)
        idx = start + len(text)
        yield _convert(spec, args) if spec.type else "%" + text


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_pieces(fmt, iter(args)))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)