"""refcodec default settings"""
import os

_max_depth = os.environ.get("REFCODEC_MAX_DEPTH")

CODEC_CONFIG = {
    "nesting": os.environ.get("REFCODEC_NESTING", "single"),  # "single" | "full"
    "max_depth": int(_max_depth) if _max_depth else None,     # None → unbounded
}

NESTING_MODES = ("single", "full")
