"""
tests/test_introspect.py
────────────────────────
Descriptors built from live classes, and type lookup by import path.
"""
from dataclasses import InitVar, dataclass
from typing import Any, ClassVar, Optional

import pytest

from refcodec import UnknownTypeError, describe, load_type
from refcodec.samples import Empty, F, G, H, MultipleConstructors


# ----------------------------- Helper ---------------------------------
class Broken:
    x: "DoesNotExist"  # noqa: F821


class Parent:
    a: int

    @property
    def shadowed(self) -> int:
        return 1


class Child(Parent):
    b: str
    shadowed = 2


@dataclass
class WithExtras:
    kept: int
    seed: InitVar[int] = 0
    registry: ClassVar[dict] = {}


class Outer:
    class Inner:
        pass


def _names(members):
    return [m.name for m in members]


# ----------------------------------------------------------------------
def test_fields_only():
    desc = describe(F)
    assert _names(desc.fields) == ["i1", "i2", "i3", "i4", "i5"]
    assert desc.properties == ()
    assert [p.type for p in desc.constructors[0].parameters] == [int] * 5
    assert desc.default_factory is None


def test_field_and_settable_property():
    desc = describe(G)
    assert _names(desc.fields) == ["test_field"]
    (prop,) = desc.properties
    assert (prop.name, prop.type, prop.settable) == ("test_property", str, True)
    assert _names(desc.members) == ["test_field", "test_property"]


def test_read_only_property():
    desc = describe(H)
    (prop,) = desc.properties
    assert prop.type is G and not prop.settable
    assert desc.find_assignable("complex_property") is None
    assert desc.find_assignable("complex_field").type is F


def test_overloads_in_declaration_order():
    desc = describe(MultipleConstructors)
    assert [[p.name for p in c.parameters] for c in desc.constructors] == [
        [], ["field"], ["property"], ["field", "property"],
    ]
    assert desc.constructors[3].parameters[1].type == Optional[str]
    assert desc.default_factory is MultipleConstructors


def test_empty_class():
    desc = describe(Empty)
    assert desc.members == ()
    assert [c.parameters for c in desc.constructors] == [()]
    assert desc.default_factory is Empty


def test_inheritance_and_shadowing():
    desc = describe(Child)
    assert _names(desc.fields) == ["a", "b"]
    # a plain class attribute hides the parent's property
    assert desc.properties == ()


def test_initvar_and_classvar_are_not_fields():
    assert _names(describe(WithExtras).fields) == ["kept"]


def test_descriptor_passes_through():
    desc = describe(G)
    assert describe(desc) is desc


@pytest.mark.parametrize("target", ["F", Any, Optional[int], 42])
def test_non_classes_are_unknown(target):
    with pytest.raises(UnknownTypeError):
        describe(target)


def test_unresolvable_annotations():
    with pytest.raises(UnknownTypeError):
        describe(Broken)


def test_load_type():
    assert load_type("refcodec.samples:F") is F
    assert load_type("refcodec.samples.G") is G


def test_load_type_nested_class():
    assert load_type(f"{__name__}:Outer.Inner") is Outer.Inner
    assert load_type(f"{__name__}.Outer.Inner") is Outer.Inner


@pytest.mark.parametrize("path", [
    "refcodec.samples:Nope",
    "refcodec.samples:sample_objects",
    "refcodec.samples.Nope.Inner",
    "no_such_module_xyz:A",
    "F",
])
def test_load_type_failures(path):
    with pytest.raises(UnknownTypeError):
        load_type(path)
