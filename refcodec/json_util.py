"""orjson helpers: the reference JSON codec that refcodec is compared against."""
from typing import Any

import orjson


def _default(o: Any) -> Any:
    return getattr(o, "__dict__", str(o))


def dumps(o: Any) -> str:
    return orjson.dumps(o, default=_default, option=orjson.OPT_NON_STR_KEYS | orjson.OPT_SERIALIZE_NUMPY).decode()


def loads(s: str) -> Any:
    return orjson.loads(s)
