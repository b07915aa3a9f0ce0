"""
Error types for the Parity structural equality engine.

All errors raised by this package derive from ParityError, and each
also derives from the closest builtin exception so callers that only
know about TypeError / AttributeError / RecursionError still catch them.
"""
from typing import Any, Optional


_NO_THING = object()


def _describe(thing: Any) -> str:
    try:
        return repr(thing)
    except Exception:
        return f"<{type(thing).__name__} object>"


class ParityError(Exception):
    """Base class for every error raised by Parity."""

    def __init__(self, message: str, thing: Any = _NO_THING):
        self.message = message
        if thing is not _NO_THING:
            message = f"{message} in '{_describe(thing)}'"
        super().__init__(f"[parity] {message}")


class UnsupportedShape(ParityError, TypeError):
    """Raised when a value cannot be normalized into a canonical key list."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Cannot get keys from '{_describe(value)}'")


class NotConfigurable(ParityError, AttributeError):
    """Raised when a field cannot be hidden or reassigned."""

    def __init__(self, field: str, target: Any = _NO_THING, reason: Optional[str] = None):
        self.field = field
        message = reason or (
            f"Cannot hide field '{field}', it is not configurable and writable in the target object"
        )
        super().__init__(message, target)


class ComparisonDepthExceeded(ParityError, RecursionError):
    """Raised when a structural comparison nests deeper than MAX_DEPTH."""

    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(
            f"Structural comparison exceeded the maximum depth of {depth}; "
            f"the values are nested too deeply or contain a reference cycle"
        )


def invariant(check: bool, message: str, thing: Any = _NO_THING) -> None:
    """Raise ParityError with `message` unless `check` holds."""
    if not check:
        raise ParityError(message, thing)


def fail(message: str, thing: Any = _NO_THING):
    """Unconditionally raise ParityError."""
    raise ParityError(message, thing)
