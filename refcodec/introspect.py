"""Builds :class:`~refcodec.models.TypeDescriptor` objects from live classes.

* **fields**       – public class annotations (``ClassVar`` / ``InitVar`` excluded)
* **properties**   – public ``property`` objects that have a getter
* **constructors** – the ``@typing.overload`` signatures of ``__init__`` in
  declaration order, or the class's own call signature when there are none

Nothing is cached: every call re-reads the class.
"""
from __future__ import annotations

import dataclasses
import importlib
import inspect
import types
import typing
from typing import Any, Callable, Dict, List, Optional, Tuple

from .errors import UnknownTypeError
from .models import ConstructorInfo, MemberInfo, ParameterInfo, TypeDescriptor

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


# -----------------------------------------------------------------------------
# Type lookup
# -----------------------------------------------------------------------------

def load_type(path: str) -> type:
    """Import ``"pkg.module:Class"`` (or ``"pkg.module.Class"``).

    The dotted form imports the longest prefix that is a module and walks the
    rest as attributes, so ``"pkg.module.Outer.Inner"`` reaches nested classes.
    """
    module_name, sep, attr = path.partition(":")
    if sep:
        candidates = [(module_name, attr)]
    else:
        parts = path.split(".")
        candidates = [
            (".".join(parts[:i]), ".".join(parts[i:])) for i in range(len(parts) - 1, 0, -1)
        ]
    if not candidates or not all(candidates[0]):
        raise UnknownTypeError(f"Malformed type path: {path!r}")
    obj: Any = None
    for module_name, attr in candidates:
        try:
            obj = importlib.import_module(module_name)
        except ImportError as e:
            error = e
            continue
        break
    else:
        raise UnknownTypeError(f"Cannot import module {module_name!r}: {error}") from error
    for part in attr.split("."):
        obj = getattr(obj, part, None)
        if obj is None:
            raise UnknownTypeError(f"{path!r} does not name an attribute")
    if not isinstance(obj, type):
        raise UnknownTypeError(f"{path!r} is not a class")
    return obj


def unwrap_optional(tp: Any) -> Any:
    """``Optional[X]`` / ``X | None`` → ``X``; anything else unchanged."""
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _hints(obj: Any) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(obj)
    except (NameError, TypeError) as e:
        raise UnknownTypeError(f"Cannot resolve annotations of {obj!r}: {e}") from e


def _public(name: str) -> bool:
    return not name.startswith("_")


def _is_field_hint(hint: Any) -> bool:
    if hint is typing.ClassVar or typing.get_origin(hint) is typing.ClassVar:
        return False
    return not isinstance(hint, dataclasses.InitVar)


# -----------------------------------------------------------------------------
# Members
# -----------------------------------------------------------------------------

def _properties(cls: type) -> Dict[str, property]:
    found: Dict[str, property] = {}
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and attr.fget is not None and _public(name):
                found[name] = attr
            elif name in found:
                # shadowed by a plain attribute further down the MRO
                del found[name]
    return found


def _is_field_annotation(annotation: Any) -> bool:
    if isinstance(annotation, str):
        head = annotation.split("[", 1)[0].strip()
        return head.rsplit(".", 1)[-1] not in ("ClassVar", "InitVar")
    return _is_field_hint(annotation)


def readable_members(cls: type) -> Tuple[MemberInfo, ...]:
    """Fields then properties of *cls*, by name only.

    Annotations are read raw and never evaluated, so names that only exist
    under ``TYPE_CHECKING`` do not matter here. Every member is typed ``Any``.
    """
    props = _properties(cls)
    names: Dict[str, None] = {}
    for klass in reversed(cls.__mro__):
        for name, annotation in inspect.get_annotations(klass).items():
            if _public(name) and name not in props and _is_field_annotation(annotation):
                names[name] = None
    return tuple(MemberInfo(name) for name in names) + tuple(
        MemberInfo(name, is_property=True, settable=prop.fset is not None)
        for name, prop in props.items()
    )


def describe_members(cls: type) -> Tuple[Tuple[MemberInfo, ...], Tuple[MemberInfo, ...]]:
    """Return ``(fields, properties)`` of *cls* in declaration order."""
    props = _properties(cls)
    fields = tuple(
        MemberInfo(name, hint)
        for name, hint in _hints(cls).items()
        if _public(name) and name not in props and _is_field_hint(hint)
    )
    properties = tuple(
        MemberInfo(
            name,
            _hints(prop.fget).get("return", Any),
            is_property=True,
            settable=prop.fset is not None,
            fset=prop.fset,
        )
        for name, prop in props.items()
    )
    return fields, properties


# -----------------------------------------------------------------------------
# Constructors
# -----------------------------------------------------------------------------

def _parameters(sig: inspect.Signature, hints: Dict[str, Any],
                fallback: Dict[str, Any], skip_first: bool = False) -> Tuple[ParameterInfo, ...]:
    params: List[inspect.Parameter] = list(sig.parameters.values())
    if skip_first:
        params = params[1:]
    return tuple(
        ParameterInfo(
            p.name,
            hints.get(p.name, fallback.get(p.name, Any)),
            positional_only=p.kind is inspect.Parameter.POSITIONAL_ONLY,
        )
        for p in params
        if p.kind not in _VARIADIC
    )


def describe_constructors(cls: type) -> Tuple[Tuple[ConstructorInfo, ...], Optional[Callable[[], Any]]]:
    """Return ``(constructors, default_factory)`` for *cls*."""
    class_hints = _hints(cls)
    init = cls.__init__
    overloads = typing.get_overloads(init) if inspect.isfunction(init) else []

    if overloads:
        ctors = tuple(
            ConstructorInfo(cls, _parameters(inspect.signature(fn), _hints(fn), class_hints, skip_first=True))
            for fn in overloads
        )
        has_default = any(not c.parameters for c in ctors)
        return ctors, (cls if has_default else None)

    try:
        sig = inspect.signature(cls)
    except (TypeError, ValueError):
        # builtins without a signature: only the bare call is left to try
        return (), cls
    init_hints = _hints(init) if inspect.isfunction(init) else {}
    ctor = ConstructorInfo(cls, _parameters(sig, init_hints, class_hints))
    required = [
        p for p in sig.parameters.values()
        if p.kind not in _VARIADIC and p.default is inspect.Parameter.empty
    ]
    return (ctor,), (None if required else cls)


# -----------------------------------------------------------------------------
# Public entry
# -----------------------------------------------------------------------------

def describe(target: Any) -> TypeDescriptor:
    """Build the descriptor of *target*; descriptors pass through untouched."""
    if isinstance(target, TypeDescriptor):
        return target
    # typing.Any is itself a class on 3.11+
    if target is Any or not isinstance(target, type):
        raise UnknownTypeError(f"Cannot introspect {target!r}: not a class")
    fields, properties = describe_members(target)
    constructors, default_factory = describe_constructors(target)
    return TypeDescriptor(
        type=target,
        fields=fields,
        properties=properties,
        constructors=constructors,
        default_factory=default_factory,
    )
