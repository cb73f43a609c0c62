from __future__ import annotations
from typing import Any, Optional

DEFAULT_MISSING_MESSAGE = "Option value is missing."


class MissingValueError(Exception):
    """Raised when an absent option reaches a boundary that demands a value."""
    def __init__(self, message: Optional[str] = None, reason: Any = None):
        self.message = message if message is not None else DEFAULT_MISSING_MESSAGE
        self.reason = reason
        super().__init__(self.message)


class ArgumentError(TypeError):
    """A required function argument was None or not callable. Programmer error."""
    def __init__(self, param: str, got: Any = None):
        self.param = param
        super().__init__(f"{param!r} must be callable, got {got!r}")


def require(f: Any, param: str) -> None:
    if f is None or not callable(f):
        raise ArgumentError(param, f)
