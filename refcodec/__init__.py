"""refcodec - reflection-based text codec for plain-data object graphs."""

__version__ = "0.1.0"

# main classes
from .models import (
    ConstructorInfo,
    MemberInfo,
    Members,
    ParameterInfo,
    TypeDescriptor,
)
from .errors import (
    CodecError,
    CycleOrDepthExceededError,
    InvalidFormatError,
    NoSuitableConstructorError,
    UnknownTypeError,
)
from .introspect import describe, load_type
from .encoder import Encoder, dumps
from .decoder import Decoder, loads

__all__ = [
    "ConstructorInfo",
    "MemberInfo",
    "Members",
    "ParameterInfo",
    "TypeDescriptor",
    "CodecError",
    "CycleOrDepthExceededError",
    "InvalidFormatError",
    "NoSuitableConstructorError",
    "UnknownTypeError",
    "describe",
    "load_type",
    "Encoder",
    "dumps",
    "Decoder",
    "loads",
]
