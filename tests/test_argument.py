from collections import deque

import pytest

from rappy.argument import NPOS, Argument, int_list_from_args
from rappy.color import Color
from rappy.duration import Duration


def _collector():
    values = []
    return values, values.append


def test_usage_positional():
    arg = Argument("path", "The path", True, 1, '""', lambda args: True)
    assert arg.usage() == '<path "">'


def test_usage_required_tagged():
    arg = Argument("control", "", True, NPOS, "#", lambda args: True)
    assert arg.usage() == "<--control #>"


def test_usage_optional_without_format():
    arg = Argument("help", "", False, NPOS, "", lambda args: True)
    assert arg.usage() == "[--help]"


def test_empty_tag_rejected():
    with pytest.raises(ValueError, match="empty tag"):
        Argument("", "x", False, NPOS, "", lambda args: True)


def test_missing_parse_function_rejected():
    with pytest.raises(TypeError):
        Argument("name", "x", False, NPOS, "", None)


def test_tagged_string_consumes_tag_and_value():
    values, setter = _collector()
    arg = Argument.typed(setter, str, "name", "The name")
    args = deque(["--name", "bob", "rest"])
    assert arg.get(args) is True
    assert values == ["bob"]
    assert list(args) == ["rest"]


def test_tag_mismatch_leaves_queue():
    values, setter = _collector()
    arg = Argument.typed(setter, str, "name", "The name")
    args = deque(["--other", "bob"])
    assert arg.get(args) is False
    assert list(args) == ["--other", "bob"]
    assert values == []


def test_short_argument_never_matches():
    values, setter = _collector()
    arg = Argument.typed(setter, bool, "n", "")
    args = deque(["-n"])
    assert arg.get(args) is False
    assert list(args) == ["-n"]


def test_missing_value_fails():
    values, setter = _collector()
    arg = Argument.typed(setter, int, "count", "")
    args = deque(["--count"])
    assert arg.get(args) is False
    assert values == []


def test_bool_flag_sets_true():
    values, setter = _collector()
    arg = Argument.typed(setter, bool, "help", "")
    assert arg.format == ""
    args = deque(["--help", "x"])
    assert arg.get(args) is True
    assert values == [True]
    assert list(args) == ["x"]


def test_int_argument():
    values, setter = _collector()
    arg = Argument.typed(setter, int, "count", "")
    assert arg.format == "#"
    assert arg.get(deque(["--count", "42"])) is True
    assert values == [42]


def test_int_argument_rejects_text():
    _, setter = _collector()
    arg = Argument.typed(setter, int, "count", "")
    with pytest.raises(ValueError):
        arg.get(deque(["--count", "abc"]))


def test_float_argument():
    values, setter = _collector()
    arg = Argument.typed(setter, float, "rate", "")
    assert arg.format == "#.#"
    assert arg.get(deque(["--rate", "2.5"])) is True
    assert values == [2.5]


def test_duration_argument():
    values, setter = _collector()
    arg = Argument.typed(setter, Duration, "period", "")
    assert arg.format == "#s"
    assert arg.get(deque(["--period", "10ms"])) is True
    assert values == [Duration.from_string("10ms")]


def test_color_argument():
    values, setter = _collector()
    arg = Argument.typed(setter, Color, "color", "")
    assert arg.format == "RGB"
    assert arg.get(deque(["--color", "Red"])) is True
    assert values == [Color.from_string("red")]


def test_list_argument():
    values, setter = _collector()
    arg = Argument.typed(setter, list, "pins", "")
    assert arg.format == "..."
    args = deque(["--pins", "10", "11", "XL"])
    assert arg.get(args) is True
    assert values == [[10, 11]]
    assert list(args) == ["XL"]


def test_positional_argument_needs_no_tag():
    values, setter = _collector()
    arg = Argument.typed(setter, str, "path", "", True, 1)
    args = deque(["config.json"])
    assert arg.get(args) is True
    assert values == ["config.json"]
    assert arg.usage() == '<path "">'


def test_unsupported_kind():
    with pytest.raises(TypeError):
        Argument.typed(lambda v: None, dict, "x", "")


def test_int_list_from_args_stops_at_non_number():
    out = []
    args = deque(["1", "-2", "x", "3"])
    assert int_list_from_args(args, out) is True
    assert out == [1, -2]
    assert list(args) == ["x", "3"]


def test_int_list_from_args_empty():
    out = []
    args = deque(["abc"])
    assert int_list_from_args(args, out) is False
    assert out == []
    assert list(args) == ["abc"]