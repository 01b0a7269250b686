import pytest

from pipex.fmtspec import FormatSpec, parse_spec
from pipex.render import render_int, render_ptr, render_str


def test_render_str_none_is_null():
    assert render_str(FormatSpec(type="s", width=20), None) == "(null)"


def test_render_str_none_for_char_raises():
    with pytest.raises(ValueError):
        render_str(FormatSpec(type="c"), None)


def test_render_str_plain():
    assert render_str(FormatSpec(type="s"), "hello") == "hello"


def test_render_str_precision_truncates():
    assert render_str(parse_spec(".2s"), "hello") == "he"


def test_render_str_precision_larger_keeps_string():
    assert render_str(parse_spec(".10s"), "hello") == "hello"


def test_render_str_zero_precision_gives_empty():
    assert render_str(parse_spec(".s"), "hello") == ""


def test_render_str_width_right_aligns():
    result = render_str(parse_spec("8s"), "abc")
    assert len(result) == 8
    assert result.endswith("abc")
    assert result[:5].strip() == ""


def test_render_str_width_left_aligns_with_minus():
    result = render_str(parse_spec("-8s"), "abc")
    assert len(result) == 8
    assert result.startswith("abc")
    assert result[3:].strip() == ""


def test_render_str_width_smaller_than_text():
    assert render_str(parse_spec("2s"), "abcdef") == "abcdef"


def test_render_ptr_none_is_nil():
    assert render_ptr(parse_spec("20p"), None) == "(nil)"


def test_render_ptr_precision_pads_with_zeros():
    result = render_ptr(parse_spec(".6x"), "ff")
    assert len(result) == 6
    assert result.endswith("ff")
    assert set(result[:-2]) == {"0"}


def test_render_ptr_zero_flag_width():
    result = render_ptr(parse_spec("08x"), "abc")
    assert len(result) == 8
    assert result.endswith("abc")
    assert set(result[:-3]) == {"0"}


def test_render_ptr_left_align():
    result = render_ptr(parse_spec("-10p"), "0x1234")
    assert result.startswith("0x1234")
    assert len(result) == 10


def test_render_int_plain():
    assert render_int(FormatSpec(type="d"), 42, True) == "42"


def test_render_int_plus_flag():
    assert render_int(parse_spec("+d"), 7, True) == "+7"


def test_render_int_space_flag():
    assert render_int(parse_spec(" d"), 7, True) == " 7"


def test_render_int_plus_flag_ignored_for_negative():
    result = render_int(parse_spec("+d"), -7, True)
    assert result.startswith("-")
    assert int(result) == -7


def test_render_int_unsigned_wraps_negative():
    assert render_int(FormatSpec(type="u"), -1, False) == "4294967295"


def test_render_int_signed_wraps_to_32_bits():
    assert render_int(FormatSpec(type="d"), 2**31, True) == "-2147483648"


def test_render_int_precision_zero_pads():
    result = render_int(parse_spec(".5d"), 42, True)
    assert len(result) == 5
    assert int(result) == 42
    assert set(result[:3]) == {"0"}


def test_render_int_negative_precision_keeps_sign_first():
    result = render_int(parse_spec(".5d"), -42, True)
    assert result.startswith("-")
    assert len(result) == 6
    assert int(result) == -42


def test_render_int_negative_zero_flag_width():
    result = render_int(parse_spec("08d"), -42, True)
    assert len(result) == 8
    assert result.startswith("-")
    assert int(result) == -42


def test_render_int_width_spaces():
    result = render_int(parse_spec("6d"), -42, True)
    assert len(result) == 6
    assert result.lstrip() == "-42"


def test_render_int_left_aligned():
    result = render_int(parse_spec("-6d"), 42, True)
    assert len(result) == 6
    assert result.rstrip() == "42"


@pytest.mark.parametrize("value", [0, 1, -1, 123456, -987654])
def test_render_int_round_trips_through_int(value):
    assert int(render_int(parse_spec("d"), value, True)) == value