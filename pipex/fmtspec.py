"""Parsing of printf-style conversion specifiers.

A specifier has the shape ``[flags][width][.precision][type]``, read
from the text that follows a ``%`` sign.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

VALID_TYPES = frozenset("%cspdiuxX")
VALID_FLAGS = frozenset("-+ 0#")
FLAGS_LIMIT = 5

# Flags first, then anything up to a stop character ('%', '\\', ' ' or a
# conversion type), and the stop character itself if there is one.
_SPEC_TEXT = re.compile(r"[-+ 0#]*[^%\\ cspdiuxX]*.?", re.DOTALL)
_DIGITS = re.compile(r"\d*")


@dataclass
class FormatSpec:
    """A parsed conversion specifier.

    ``flags`` holds each flag once, in the order first seen. A
    ``precision`` of -1 means none was given; an empty ``type`` means
    the specifier could not be understood.
    """

    flags: str = ""
    width: int = 0
    precision: int = -1
    type: str = ""


def is_valid_type(char: str) -> bool:
    """Return True if ``char`` is a conversion type that is handled."""
    return len(char) == 1 and char in VALID_TYPES


def is_valid_flag(char: str) -> bool:
    """Return True if ``char`` is a recognised flag character."""
    return len(char) == 1 and char in VALID_FLAGS


def next_spec_text(fmt: str, start: int) -> str:
    """Return the specifier text of ``fmt`` beginning at ``start``.

    ``start`` is the index just after the ``%``. Reading stops at the
    first '%', backslash, space or conversion type after the flags, and
    that character is included. The text is not validated.
    """
    if start >= len(fmt):
        return ""
    return _SPEC_TEXT.match(fmt, start).group()


def _parse_flags(text: str) -> tuple[str, int]:
    flags: list[str] = []
    idx = 0
    while idx < len(text) and is_valid_flag(text[idx]) and len(flags) < FLAGS_LIMIT:
        if text[idx] not in flags:
            flags.append(text[idx])
        idx += 1
    return "".join(flags), idx


def _parse_number(text: str, start: int) -> tuple[int | None, int]:
    digits = _DIGITS.match(text, start).group()
    if not digits:
        return None, start
    return int(digits), start + len(digits)


def parse_spec(text: str) -> FormatSpec:
    """Parse specifier text (without the leading '%') into a FormatSpec."""
    spec = FormatSpec()
    spec.flags, idx = _parse_flags(text)
    width, idx = _parse_number(text, idx)
    if width is not None:
        spec.width = width
    if idx < len(text) and text[idx] == ".":
        idx += 1
        precision, idx = _parse_number(text, idx)
        spec.precision = 0 if precision is None else precision
    if idx < len(text) and is_valid_type(text[idx]):
        spec.type = text[idx]
    return spec