"""Timing harness: refcodec vs orjson on the same object."""
from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

import numpy as np

from . import json_util
from .decoder import Decoder
from .encoder import Encoder


@dataclass
class TimedResult:
    result: Any
    time_ms: float      # mean over all attempts


@dataclass
class Comparison:
    obj: Any
    custom_encode: TimedResult
    standard_encode: TimedResult
    custom_decode: TimedResult
    standard_decode: TimedResult


def run_timed(fn: Callable[[], Any], attempts: int) -> TimedResult:
    """Call *fn* ``attempts`` times; keep the last result and the mean wall time."""
    if attempts < 1:
        raise ValueError(f"attempts must be >= 1, got {attempts}")
    timings = np.empty(attempts, dtype=np.int64)
    result = None
    for i in range(attempts):
        t0 = time.perf_counter_ns()
        result = fn()
        timings[i] = time.perf_counter_ns() - t0
    return TimedResult(result, float(timings.mean()) / 1e6)


def compare(obj: Any, attempts: int = 1000,
            encoder: Optional[Encoder] = None,
            decoder: Optional[Decoder] = None) -> Comparison:
    enc = encoder or Encoder()
    dec = decoder or Decoder()
    # None has no type worth decoding into; str accepts "null" like any other
    target = type(obj) if obj is not None else str

    custom_enc = run_timed(lambda: enc.encode(obj), attempts)
    standard_enc = run_timed(lambda: json_util.dumps(obj), attempts)
    custom_dec = run_timed(lambda: dec.decode(custom_enc.result, target), attempts)
    standard_dec = run_timed(lambda: json_util.loads(standard_enc.result), attempts)
    return Comparison(obj, custom_enc, standard_enc, custom_dec, standard_dec)


def format_comparison(cmp: Comparison, attempts: int) -> str:
    rows = [
        ("Custom Serialization", cmp.custom_encode),
        ("Standard Serialization", cmp.standard_encode),
        ("Custom Deserialization", cmp.custom_decode),
        ("Standard Deserialization", cmp.standard_decode),
    ]
    out = [f"{cmp.obj!r}:"]
    for name, timed in rows:
        out.append(f"\t{name}: {timed.result!r}")
        out.append(f"\t{name} Time (avg in {attempts}): {timed.time_ms:.6f} ms")
    return "\n".join(out)
