from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

# member name → raw value text, as captured by the parse stage
Members = Dict[str, str]


# ──────────────────────────────────────────────────────────────
# 1. Members
# ──────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class MemberInfo:
    """A field or property of a described type."""
    name: str
    type: Any = Any
    is_property: bool = False
    settable: bool = True
    fset: Optional[Callable[[Any, Any], None]] = None

    def get(self, instance: Any) -> Any:
        if self.is_property:
            return getattr(instance, self.name)
        # annotated but never assigned
        return getattr(instance, self.name, None)

    def assign(self, instance: Any, value: Any) -> None:
        """Write *value* without going through ``instance.__setattr__``."""
        if self.fset is not None:
            self.fset(instance, value)
        else:
            object.__setattr__(instance, self.name, value)


# ──────────────────────────────────────────────────────────────
# 2. Constructors
# ──────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ParameterInfo:
    name: str
    type: Any = Any
    positional_only: bool = False


@dataclass(frozen=True)
class ConstructorInfo:
    factory: Callable[..., Any]
    parameters: Tuple[ParameterInfo, ...] = ()

    def invoke(self, args: Sequence[Any]) -> Any:
        positional = [a for p, a in zip(self.parameters, args) if p.positional_only]
        keywords = {p.name: a for p, a in zip(self.parameters, args) if not p.positional_only}
        return self.factory(*positional, **keywords)


# ──────────────────────────────────────────────────────────────
# 3. Type descriptor
# ──────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class TypeDescriptor:
    """
    Read-only capability surface of a type
    • fields / properties : declaration order, base classes first
    • constructors        : tried in this order by the decoder
    • default_factory     : zero-argument construction path (None → absent)
    """
    type: type
    fields: Tuple[MemberInfo, ...] = ()
    properties: Tuple[MemberInfo, ...] = ()
    constructors: Tuple[ConstructorInfo, ...] = field(default=())
    default_factory: Optional[Callable[[], Any]] = None

    @property
    def members(self) -> Tuple[MemberInfo, ...]:
        return self.fields + self.properties

    def find_assignable(self, name: str) -> Optional[MemberInfo]:
        # settable properties win over fields of the same name
        for prop in self.properties:
            if prop.name == name and prop.settable:
                return prop
        for fld in self.fields:
            if fld.name == name:
                return fld
        return None
