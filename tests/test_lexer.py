import pytest

from minirt.lexer import Cursor, is_float, is_int, split_fields
from minirt.scene import Color, SceneError


def test_parse_int_stops_at_non_digit():
    cur = Cursor("123,4")
    assert cur.parse_int() == 123
    assert cur.peek() == ","


def test_parse_int_negative():
    assert Cursor("-7").parse_int() == -7


def test_parse_int_without_digits_leaves_cursor():
    cur = Cursor("abc")
    assert cur.parse_int() == 0
    assert cur.pos == 0


def test_parse_float_with_fraction():
    cur = Cursor("-2.5 x")
    assert cur.parse_float() == pytest.approx(-2.5)
    assert cur.peek() == " "


def test_parse_float_trailing_dot():
    cur = Cursor("3.")
    assert cur.parse_float() == pytest.approx(3.0)
    assert cur.peek() == ""


def test_parse_float_plus_sign_not_consumed():
    cur = Cursor("+1")
    assert cur.parse_float() == 0.0
    assert cur.peek() == "+"


def test_parse_float_sequence_with_commas():
    cur = Cursor("0.25,10,-0.75")
    first = cur.parse_float()
    cur.advance()
    second = cur.parse_float()
    cur.advance()
    third = cur.parse_float()
    assert (first, second, third) == pytest.approx((0.25, 10.0, -0.75))


def test_skip_spaces_and_tabs():
    cur = Cursor(" \t x")
    cur.skip_spaces()
    assert cur.peek() == "x"


def test_advance_clamps_at_end():
    cur = Cursor("ab")
    cur.advance(10)
    assert cur.peek() == ""
    assert cur.pos == len("ab")


def test_parse_color():
    assert Cursor("255,0,128").parse_color() == Color(255, 0, 128)


@pytest.mark.parametrize(
    "text, message",
    [
        ("256,0,0", "Color R out of range"),
        ("0,-1,0", "Color G out of range"),
        ("0,0,300", "Color B out of range"),
    ],
)
def test_parse_color_out_of_range(text, message):
    with pytest.raises(SceneError, match=message):
        Cursor(text).parse_color()


def test_split_fields_drops_empty():
    assert split_fields("sp  1,2,3 4", " ") == ["sp", "1,2,3", "4"]
    assert split_fields("", " ") == []
    assert split_fields(",,", ",") == []


def test_split_fields_tab_is_not_separator():
    assert split_fields("a\tb", " ") == ["a\tb"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1", True),
        ("-1.5", True),
        ("+.5", True),
        (".", True),
        ("", False),
        ("-", False),
        ("1.2.3", False),
        ("1e5", False),
        ("abc", False),
    ],
)
def test_is_float(text, expected):
    assert is_float(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", True),
        ("-12", True),
        ("+3", True),
        ("", False),
        ("+", False),
        ("1.0", False),
        ("12a", False),
    ],
)
def test_is_int(text, expected):
    assert is_int(text) is expected