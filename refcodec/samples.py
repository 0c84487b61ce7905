"""Sample data model used by ``refcodec bench`` and the test-suite."""
from __future__ import annotations
from typing import Any, List, Optional, overload


class Empty:
    """No fields, no properties."""


class F:
    """Five integer fields."""
    i1: int
    i2: int
    i3: int
    i4: int
    i5: int

    def __init__(self, i1: int, i2: int, i3: int, i4: int, i5: int) -> None:
        self.i1 = i1
        self.i2 = i2
        self.i3 = i3
        self.i4 = i4
        self.i5 = i5

    def __eq__(self, other: object) -> bool:
        return isinstance(other, F) and vars(self) == vars(other)

    def __repr__(self) -> str:
        return f"F(i1={self.i1}, i2={self.i2}, i3={self.i3}, i4={self.i4}, i5={self.i5})"


class G:
    """An int field and a str property, both set only through the constructor."""
    test_field: int

    def __init__(self, field: int, property: str) -> None:
        self.test_field = field
        self._test_property = property

    @property
    def test_property(self) -> str:
        return self._test_property

    @test_property.setter
    def test_property(self, value: str) -> None:
        self._test_property = value

    def __eq__(self, other: object) -> bool:
        return (isinstance(other, G)
                and (self.test_field, self.test_property) == (other.test_field, other.test_property))

    def __repr__(self) -> str:
        return f"G(test_field={self.test_field}, test_property={self.test_property!r})"


class H:
    """A composite field and a composite read-only property."""
    complex_field: F

    def __init__(self, complex_field: F, complex_property: G) -> None:
        self.complex_field = complex_field
        self._complex_property = complex_property

    @property
    def complex_property(self) -> G:
        return self._complex_property

    def __eq__(self, other: object) -> bool:
        return (isinstance(other, H)
                and (self.complex_field, self.complex_property) == (other.complex_field, other.complex_property))

    def __repr__(self) -> str:
        return f"H(complex_field={self.complex_field!r}, complex_property={self.complex_property!r})"


class MultipleConstructors:
    """Four ``__init__`` overloads, tried by the decoder in this order."""
    test_field: float

    @overload
    def __init__(self) -> None: ...
    @overload
    def __init__(self, field: float) -> None: ...
    @overload
    def __init__(self, property: Optional[str]) -> None: ...
    @overload
    def __init__(self, field: float, property: Optional[str]) -> None: ...

    def __init__(self, field: float = 0.0, property: Optional[str] = None) -> None:
        self.test_field = field
        self._test_property = property

    @property
    def test_property(self) -> Optional[str]:
        return self._test_property

    @test_property.setter
    def test_property(self, value: Optional[str]) -> None:
        self._test_property = value

    def __eq__(self, other: object) -> bool:
        return (isinstance(other, MultipleConstructors)
                and (self.test_field, self.test_property) == (other.test_field, other.test_property))

    def __repr__(self) -> str:
        return f"MultipleConstructors(test_field={self.test_field}, test_property={self.test_property!r})"


def sample_objects() -> List[Any]:
    f = F(1, 2, 3, 4, 5)
    g = G(5, "hello")
    return [
        Empty(),
        None,
        True,
        False,
        1,
        2.5,
        f,
        g,
        H(f, g),
        MultipleConstructors(),
        MultipleConstructors(1.5),
        MultipleConstructors(property="hello!"),
        MultipleConstructors(2, "hiya"),
    ]
