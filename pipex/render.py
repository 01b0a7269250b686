"""Rendering of integers, pointer-like strings and strings under a FormatSpec."""

from __future__ import annotations

from pipex.fmtspec import FormatSpec

NULL_TEXT = "(null)"
NIL_TEXT = "(nil)"

_UINT_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _apply_width(spec: FormatSpec, text: str) -> str:
    if spec.width <= len(text):
        return text
    fill = "0" if "0" in spec.flags else " "
    padding = fill * (spec.width - len(text))
    if "-" in spec.flags:
        return text + padding
    return padding + text


def _signed_text(spec: FormatSpec, value: int, signed: bool) -> str:
    if not signed:
        return str(value & _UINT_MASK)
    text = str(value)
    if value >= 0:
        if "+" in spec.flags:
            return "+" + text
        if " " in spec.flags:
            return " " + text
    return text


def _int_precision(precision: int, text: str) -> str:
    negative = text.startswith("-")
    digits_len = len(text) - negative
    if precision <= digits_len:
        return text
    padding = "0" * (precision - digits_len)
    if negative:
        return "-" + padding + text[1:]
    return padding + text


def render_int(spec: FormatSpec, value: int, signed: bool) -> str:
    """Render a 32-bit integer, signed or unsigned, according to ``spec``."""
    value = _to_int32(value)
    text = _signed_text(spec, value, signed)
    text = _int_precision(spec.precision, text)
    negative = signed and value < 0
    if spec.width > len(text) and negative and "0" in spec.flags and "-" not in spec.flags:
        padding = "0" * (spec.width - len(text))
        return "-" + padding + text[1:]
    return _apply_width(spec, text)


def render_ptr(spec: FormatSpec, text: str | None) -> str:
    """Render a hexadecimal address or number string according to ``spec``.

    ``None`` stands for a null pointer and renders as ``(nil)``.
    """
    if text is None:
        return NIL_TEXT
    if spec.precision > len(text):
        text = "0" * (spec.precision - len(text)) + text
    return _apply_width(spec, text)


def render_str(spec: FormatSpec, value: str | None) -> str:
    """Render a string according to ``spec``.

    ``None`` renders as ``(null)`` except for the ``c`` conversion, for
    which a value is required.
    """
    if value is None:
        if spec.type != "c":
            return NULL_TEXT
        raise ValueError("a character conversion needs a value")
    if 0 <= spec.precision < len(value):
        value = value[: spec.precision]
    return _apply_width(spec, value)