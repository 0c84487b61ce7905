"""
tests/test_parse_members.py
───────────────────────────
Member capture from one object body, in both nesting modes.
"""
import pytest

from refcodec import Decoder


# ----------------------------- Helper ---------------------------------
def _single(text):
    return Decoder().parse_members(text)


def _full(text):
    return Decoder(config={"nesting": "full"}).parse_members(text)


# ----------------------------------------------------------------------
@pytest.mark.parametrize("parse", [_single, _full])
def test_scalar_members(parse):
    text = '{"a":1,"b":"x","c":true,"d":null,"e":-2.5,"f":false}'
    assert parse(text) == {
        "a": "1", "b": '"x"', "c": "true", "d": "null", "e": "-2.5", "f": "false",
    }


@pytest.mark.parametrize("parse", [_single, _full])
def test_whitespace_is_tolerated(parse):
    assert parse('{ "a" : 1 ,\n "b":   "x y" }') == {"a": "1", "b": '"x y"'}


@pytest.mark.parametrize("parse", [_single, _full])
def test_exponent_numbers(parse):
    assert parse('{"x":1e+16,"y":1.5E-07}') == {"x": "1e+16", "y": "1.5E-07"}


@pytest.mark.parametrize("parse", [_single, _full])
def test_one_level_nested_body_is_captured_raw(parse):
    members = parse('{"f":{"i1":1,"i2":2},"g":2}')
    assert members == {"f": '{"i1":1,"i2":2}', "g": "2"}
    assert list(members) == ["f", "g"]


@pytest.mark.parametrize("parse", [_single, _full])
def test_last_duplicate_wins(parse):
    assert parse('{"a":1,"a":2}') == {"a": "2"}


@pytest.mark.parametrize("parse", [_single, _full])
def test_empty_body(parse):
    assert parse("{}") == {}


def test_single_mode_stops_at_first_closing_brace():
    members = _single('{"a":{"b":{"c":1}},"d":2}')
    assert members == {"a": '{"b":{"c":1}', "d": "2"}


def test_full_mode_counts_braces():
    members = _full('{"a":{"b":{"c":1}},"d":2}')
    assert members == {"a": '{"b":{"c":1}}', "d": "2"}


def test_full_mode_ignores_braces_inside_strings():
    members = _full('{"s":"}{","o":{"t":"}"}}')
    assert members == {"s": '"}{"', "o": '{"t":"}"}'}


def test_unrecognised_values_are_skipped():
    # a bare word is not a value; the next member is still found
    assert _single('{"a":oops,"b":1}') == {"b": "1"}
    assert _full('{"a":oops,"b":1}') == {"b": "1"}


@pytest.mark.parametrize("parse", [_single, _full])
def test_non_ascii_digits_are_not_numbers(parse):
    assert parse('{"a":١٢,"b":1}') == {"b": "1"}
