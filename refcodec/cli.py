"""Command‑line interface: **refcodec encode / decode / bench**"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict

from tqdm import tqdm

from . import json_util
from .bench import compare, format_comparison
from .config import NESTING_MODES
from .decoder import Decoder
from .encoder import Encoder
from .errors import CodecError
from .introspect import load_type
from .samples import sample_objects

# -----------------------------------------------------------------------------
# Helper I/O
# -----------------------------------------------------------------------------

def _config(ns) -> Dict[str, Any]:
    cfg: Dict[str, Any] = {}
    if getattr(ns, "nesting", None):
        cfg["nesting"] = ns.nesting
    if getattr(ns, "max_depth", None) is not None:
        cfg["max_depth"] = ns.max_depth
    return cfg


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        print(text)
    else:
        output.write_text(text, encoding="utf-8")


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------

def cmd_encode(ns):
    """JSON object → instance of --type → refcodec text."""
    data = json_util.loads(ns.input.read_bytes())
    if not isinstance(data, dict):
        sys.exit(f"❌ {ns.input} must hold a JSON object")
    cls = load_type(ns.type)
    cfg = _config(ns)

    # every JSON member becomes raw text that the decoder binds like its own
    members = {name: json_util.dumps(value) for name, value in data.items()}
    instance = Decoder(cfg).resolve_object(members, cls)

    t0 = time.perf_counter()
    text = Encoder(cfg).encode(instance)
    enc_ms = (time.perf_counter() - t0) * 1000

    print(f"✓ encoded {cls.__name__} in {enc_ms:.3f} ms", file=sys.stderr)
    _emit(text, ns.output)


def cmd_decode(ns):
    """refcodec text → instance of --type → JSON."""
    text = ns.input.read_text(encoding="utf-8")
    dec = Decoder(_config(ns))

    t0 = time.perf_counter()
    instance = dec.decode(text, ns.type)
    dec_ms = (time.perf_counter() - t0) * 1000

    print(f"✓ decoded {ns.type} in {dec_ms:.3f} ms", file=sys.stderr)
    _emit(json_util.dumps(instance), ns.output)


def cmd_bench(ns):
    """Average custom vs orjson timings over the sample objects."""
    objs = sample_objects()
    for obj in tqdm(objs, desc="Benchmark", disable=not ns.progress):
        print(format_comparison(compare(obj, ns.n), ns.n))
        print()


# -----------------------------------------------------------------------------
# Argument parsing
# -----------------------------------------------------------------------------

def _add_codec_options(sp: argparse.ArgumentParser) -> None:
    sp.add_argument("--type", "-t", required=True, help="target class as module:Class")
    sp.add_argument("--input", "-i", type=Path, required=True)
    sp.add_argument("--output", "-o", type=Path, default=None, help="default: stdout")
    sp.add_argument("--nesting", choices=NESTING_MODES, default=None,
                    help="brace matching inside members (default from config)")
    sp.add_argument("--max-depth", type=int, default=None,
                    help="fail once composite nesting exceeds this depth")


def main(argv=None):
    ap = argparse.ArgumentParser(prog="refcodec", description="reflection-based text codec")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    # encode ---------------------------------------------------------
    sp = sub.add_parser("encode", help="JSON object → refcodec text")
    _add_codec_options(sp)
    sp.set_defaults(func=cmd_encode)

    # decode ---------------------------------------------------------
    sp = sub.add_parser("decode", help="refcodec text → JSON")
    _add_codec_options(sp)
    sp.set_defaults(func=cmd_decode)

    # bench ----------------------------------------------------------
    sp = sub.add_parser("bench", help="custom vs orjson timings on sample objects")
    sp.add_argument("--n", type=int, default=10000, help="attempts per measurement")
    sp.add_argument("--progress", action="store_true", help="show progress bar with tqdm")
    sp.set_defaults(func=cmd_bench)

    ns = ap.parse_args(argv)
    if ns.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    try:
        ns.func(ns)
    except CodecError as e:
        sys.exit(f"❌ {type(e).__name__}: {e}")


if __name__ == "__main__":
    main()
