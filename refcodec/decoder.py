"""Text → object decoder.

Decoding runs in three stages:

1. **parse**   – :meth:`Decoder.parse_members` captures ``"name": raw`` pairs
   of one object body without recursing into nested bodies.
2. **resolve** – :meth:`Decoder.resolve` turns one raw span into a value of a
   target type. The same call doubles as a *type-compatibility probe* while
   constructors are being matched.
3. **build**   – :meth:`Decoder.resolve_object` picks the first constructor
   whose parameters all bind, invokes it, then writes every parsed member
   straight onto the instance.

Brace matching inside a member is one level deep by default
(``nesting="single"``); ``nesting="full"`` counts braces recursively and skips
braces that sit inside strings.
"""
from __future__ import annotations
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, Union

import numpy as np

from .config import CODEC_CONFIG, NESTING_MODES
from .errors import (
    CodecError,
    CycleOrDepthExceededError,
    InvalidFormatError,
    NoSuitableConstructorError,
)
from .introspect import describe, load_type, unwrap_optional
from .models import ConstructorInfo, Members, ParameterInfo, TypeDescriptor

T = TypeVar("T")

# ── logger (silent by default) ───────────────────────────────
LOGGER = logging.getLogger("refcodec.decoder")
LOGGER.addHandler(logging.NullHandler())

# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------
# ASCII digits only
_NUMBER = r"-?[0-9]+(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?"
_SCALAR = rf'"[^"]*"|{_NUMBER}|true|false|null'

# one-level brace matching: a nested body ends at the first '}'
_MEMBER_RE = re.compile(rf'"(\w+)"\s*:\s*(\{{[^}}]*\}}|{_SCALAR})')
_KEY_RE = re.compile(r'"(\w+)"\s*:\s*')
_SCALAR_RE = re.compile(_SCALAR)

_INT_RE = re.compile(r"[-+]?[0-9]+")
_FLOAT_RE = re.compile(r"[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")

_NP_INTS = (np.int8, np.int16, np.int32, np.int64,
            np.uint8, np.uint16, np.uint32, np.uint64)
_NP_FLOATS = (np.float16, np.float32, np.float64)


def _match_brace(text: str, start: int) -> int:
    """Index just past the ``}`` closing the ``{`` at *start*; -1 if unbalanced."""
    depth = 0
    i = start
    while i < len(text):
        ch = text[i]
        if ch == '"':
            close = text.find('"', i + 1)
            if close < 0:
                return -1
            i = close
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return -1


# ---------------------------------------------------------------------------
# Primitive parsers
# ---------------------------------------------------------------------------

def _parse_str(text: str) -> str:
    return text.strip('"')


def _parse_bool(text: str) -> bool:
    low = text.lower()
    if low == "true":
        return True
    if low == "false":
        return False
    raise InvalidFormatError(f"{text!r} is not a boolean")


def _int_parser(kind: type) -> Callable[[str], Any]:
    bounds = None if kind is int else np.iinfo(kind)

    def parse(text: str) -> Any:
        if not _INT_RE.fullmatch(text):
            raise InvalidFormatError(f"{text!r} is not an integer")
        value = int(text)
        if bounds is None:
            return value
        if not bounds.min <= value <= bounds.max:
            raise InvalidFormatError(f"{text} out of range for {kind.__name__}")
        return kind(value)
    return parse


def _float_parser(kind: Callable[[str], Any]) -> Callable[[str], Any]:
    def parse(text: str) -> Any:
        if not _FLOAT_RE.fullmatch(text):
            raise InvalidFormatError(f"{text!r} is not a number")
        try:
            return kind(text)
        except (ValueError, InvalidOperation) as e:
            raise InvalidFormatError(f"{text!r} is not a number: {e}") from e
    return parse


_PRIMITIVES: Dict[Any, Callable[[str], Any]] = {
    str: _parse_str,
    bool: _parse_bool,
    np.bool_: lambda t: np.bool_(_parse_bool(t)),
    int: _int_parser(int),
    float: _float_parser(float),
    Decimal: _float_parser(Decimal),
    **{k: _int_parser(k) for k in _NP_INTS},
    **{k: _float_parser(k) for k in _NP_FLOATS},
}


# ---------------------------------------------------------------------------
class Decoder:
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = {**CODEC_CONFIG, **(config or {})}
        self.nesting: str = self.config["nesting"]
        self.max_depth: Optional[int] = self.config["max_depth"]
        if self.nesting not in NESTING_MODES:
            raise ValueError(
                f"unknown nesting mode {self.nesting!r} (choose from {', '.join(NESTING_MODES)})"
            )

    def decode(self, text: str, target: Union[type, TypeDescriptor, str]) -> Any:
        """Decode *text* as an instance of *target* (class, descriptor or ``"module:Class"``)."""
        if isinstance(target, str):
            target = load_type(target)
        return self.resolve(text, target)

    # ==================================================================
    # Stage 1 – parse
    # ==================================================================
    def parse_members(self, text: str) -> Members:
        if self.nesting == "full":
            return self._scan_members(text)
        members: Members = {}
        for m in _MEMBER_RE.finditer(text):
            members[m.group(1)] = m.group(2)   # last occurrence wins
        return members

    def _scan_members(self, text: str) -> Members:
        members: Members = {}
        pos = 0
        while True:
            key = _KEY_RE.search(text, pos)
            if key is None:
                return members
            start = key.end()
            if text.startswith("{", start):
                end = _match_brace(text, start)
            else:
                scalar = _SCALAR_RE.match(text, start)
                end = scalar.end() if scalar else -1
            if end < 0:
                pos = start
                continue
            members[key.group(1)] = text[start:end]
            pos = end

    # ==================================================================
    # Stage 2 – resolve
    # ==================================================================
    def resolve(self, raw: str, target: Any, _depth: int = 0) -> Any:
        text = raw.strip()
        if text == "null":
            return None
        target = unwrap_optional(target)
        parser = _PRIMITIVES.get(target)
        if parser is not None:
            return parser(text)
        if text.startswith("{") and text.endswith("}"):
            return self.resolve_object(self.parse_members(text), target, _depth + 1)
        name = getattr(target, "__name__", repr(target))
        raise InvalidFormatError(f"Cannot deserialize {text!r} as {name}")

    def _probe(self, raw: str, target: Any, depth: int) -> bool:
        try:
            self.resolve(raw, target, depth)
        except CycleOrDepthExceededError:
            raise
        except CodecError:
            return False
        return True

    # ==================================================================
    # Stage 3 – build
    # ==================================================================
    def resolve_object(self, members: Members, target: Any, _depth: int = 1) -> Any:
        if self.max_depth is not None and _depth > self.max_depth:
            raise CycleOrDepthExceededError(f"Nesting deeper than {self.max_depth}")
        desc = describe(target)
        instance = self._construct(members, desc, _depth)
        for name, raw in members.items():
            member = desc.find_assignable(name)
            if member is None:
                LOGGER.debug("%s: no writable member %r, ignored", desc.type.__name__, name)
                continue
            member.assign(instance, self.resolve(raw, member.type, _depth))
        return instance

    def _construct(self, members: Members, desc: TypeDescriptor, depth: int) -> Any:
        for ctor in desc.constructors:
            if not ctor.parameters:
                continue   # parameterless → default path below
            args = self._bind(ctor, members, depth)
            if args is None:
                LOGGER.debug("%s: constructor %s rejected", desc.type.__name__,
                             [p.name for p in ctor.parameters])
                continue
            return ctor.invoke(args)
        if desc.default_factory is None:
            raise NoSuitableConstructorError(
                f"No constructor of {desc.type.__name__} binds {sorted(members)} "
                f"and it has no default construction path"
            )
        LOGGER.debug("%s: default construction", desc.type.__name__)
        return desc.default_factory()

    def _bind(self, ctor: ConstructorInfo, members: Members, depth: int) -> Optional[List[Any]]:
        args: List[Any] = []
        for param in ctor.parameters:
            ok, value = self._bind_parameter(param, members, depth)
            if not ok:
                return None
            args.append(value)
        return args

    def _bind_parameter(self, param: ParameterInfo, members: Members, depth: int):
        # (a) exact name
        if param.name in members:
            try:
                return True, self.resolve(members[param.name], param.type, depth)
            except CycleOrDepthExceededError:
                raise
            except CodecError:
                return False, None
        # (b) first member whose text resolves as the parameter type
        for raw in members.values():
            if self._probe(raw, param.type, depth):
                return True, self.resolve(raw, param.type, depth)
        return False, None


# ---------------------------------------------------------------------------
def loads(text: str, cls: Type[T]) -> Optional[T]:
    """Typed shortcut: ``loads(text, Point)`` is inferred as ``Optional[Point]``."""
    return Decoder().decode(text, cls)
