"""
tests/test_encoder.py
─────────────────────
1) scalars (None / str / bool / int / float / Decimal, numpy scalars)
2) composites: member order, runtime type, empty objects
3) annotations that only resolve under TYPE_CHECKING
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar, Optional

import numpy as np
import pytest

from refcodec import Encoder, dumps
from refcodec.samples import Empty, F, G, H

if TYPE_CHECKING:
    from fractions import Fraction


# ----------------------------- Helper ---------------------------------
class Base:
    a: int

    def __init__(self, a: int) -> None:
        self.a = a


class Derived(Base):
    b: int

    def __init__(self, a: int, b: int) -> None:
        super().__init__(a)
        self.b = b


class PropertyFirst:
    @property
    def label(self) -> str:
        return "p"

    count: int = 3


class Hidden:
    shown: int
    _hidden: int
    shared: ClassVar[int] = 9

    def __init__(self) -> None:
        self.shown = 1
        self._hidden = 2


class Unassigned:
    value: Optional[int]


@dataclass(frozen=True)
class Point:
    x: int
    y: int


# ----------------------------------------------------------------------
def test_null():
    assert dumps(None) == "null"


def test_string_is_quoted_without_escaping():
    assert dumps("hello") == '"hello"'
    assert dumps('a"b}') == '"a"b}"'


@pytest.mark.parametrize("value, text", [
    (True, "true"),
    (False, "false"),
    (np.bool_(True), "true"),
    (0, "0"),
    (-2, "-2"),
    (12345678901234567890, "12345678901234567890"),
    (np.int32(7), "7"),
    (np.uint8(255), "255"),
])
def test_bool_and_int(value, text):
    assert dumps(value) == text


@pytest.mark.parametrize("value, text", [
    (2.5, "2.5"),
    (3.0, "3"),
    (-0.125, "-0.125"),
    (1e16, "1e+16"),
    (1.5e-7, "1.5e-07"),
    (np.float32(0.1), "0.1"),
    (np.float64(4.0), "4"),
    (Decimal("2.50"), "2.50"),
])
def test_float_and_decimal(value, text):
    assert dumps(value) == text


def test_empty_object():
    assert dumps(Empty()) == "{}"


def test_fields_in_declaration_order():
    assert dumps(F(1, 2, 3, 4, 5)) == '{"i1":1,"i2":2,"i3":3,"i4":4,"i5":5}'


def test_fields_then_properties():
    assert dumps(G(5, "hello")) == '{"test_field":5,"test_property":"hello"}'
    # the property is declared first, the field still leads
    assert dumps(PropertyFirst()) == '{"count":3,"label":"p"}'


def test_nested_composites():
    text = dumps(H(F(1, 2, 3, 4, 5), G(5, "hello")))
    assert text == (
        '{"complex_field":{"i1":1,"i2":2,"i3":3,"i4":4,"i5":5},'
        '"complex_property":{"test_field":5,"test_property":"hello"}}'
    )


def test_runtime_type_decides_members():
    obj: Base = Derived(1, 2)
    assert dumps(obj) == '{"a":1,"b":2}'


def test_private_and_classvar_members_are_skipped():
    assert dumps(Hidden()) == '{"shown":1}'


def test_unassigned_field_is_null():
    assert dumps(Unassigned()) == '{"value":null}'


def test_frozen_dataclass():
    assert Encoder().encode(Point(1, -1)) == '{"x":1,"y":-1}'


# ----------------------------------------------------------------------
class Account:
    owner: str
    balance: Optional[Fraction]

    def __init__(self, owner: str) -> None:
        self.owner = owner
        self.balance = None

    @property
    def rate(self) -> Fraction:
        return 0.5


def test_type_checking_only_annotations():
    assert dumps(Account("a")) == '{"owner":"a","balance":null,"rate":0.5}'
