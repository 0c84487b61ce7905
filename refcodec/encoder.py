from __future__ import annotations
import logging
from decimal import Decimal
from typing import Any, Dict, Optional

import numpy as np

from .config import CODEC_CONFIG
from .errors import CycleOrDepthExceededError
from .introspect import readable_members

# ── logger (silent by default) ───────────────────────────────
LOGGER = logging.getLogger("refcodec.encoder")
LOGGER.addHandler(logging.NullHandler())


def format_float(value: Any) -> str:
    """Shortest round-trippable text, general format (``3`` rather than ``3.0``)."""
    # numpy scalars: str() is the shortest repr at their own precision
    text = str(value) if isinstance(value, np.floating) else repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class Encoder:
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = {**CODEC_CONFIG, **(config or {})}
        self.max_depth: Optional[int] = self.config["max_depth"]

    def encode(self, value: Any) -> str:
        return self._encode(value, 0)

    # ------------------------------------------------------------------
    def _encode(self, value: Any, depth: int) -> str:
        if value is None:
            return "null"
        if isinstance(value, str):
            return f'"{value}"'
        # bool before int: bool is an int subclass
        if isinstance(value, (bool, np.bool_)):
            return "true" if value else "false"
        if isinstance(value, (int, np.integer)):
            return str(int(value))
        if isinstance(value, (float, np.floating)):
            return format_float(value)
        if isinstance(value, Decimal):
            return str(value)
        return self._encode_composite(value, depth + 1)

    def _encode_composite(self, obj: Any, depth: int) -> str:
        if self.max_depth is not None and depth > self.max_depth:
            raise CycleOrDepthExceededError(
                f"Nesting deeper than {self.max_depth} while encoding {type(obj).__name__}"
            )
        parts = [
            f'"{m.name}":{self._encode(m.get(obj), depth)}'
            for m in readable_members(type(obj))
        ]
        LOGGER.debug("encoded %s with %d member(s)", type(obj).__name__, len(parts))
        return "{" + ",".join(parts) + "}"


def dumps(obj: Any) -> str:
    return Encoder().encode(obj)
