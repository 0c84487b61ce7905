"""Exception hierarchy shared by the encoder and decoder."""


class CodecError(ValueError):
    """Base class for every error raised by refcodec."""


class InvalidFormatError(CodecError):
    """Raised when text does not have the shape expected for a target type."""


class NoSuitableConstructorError(CodecError):
    """Raised when no constructor binds and the type has no default construction path."""


class UnknownTypeError(CodecError):
    """Raised when a target type cannot be introspected."""


class CycleOrDepthExceededError(CodecError):
    """Raised when composite nesting exceeds the configured ``max_depth``."""
