"""Escape hatches that turn an option back into a raw value.

Kept apart from the combinators on purpose: every import of this module marks a
place where absence is either discarded or turned into an exception, so call sites
are easy to find and review. Functions accept both ``Option`` and ``Result``.
"""
from __future__ import annotations
from typing import Any, Callable, Optional, TypeVar, Union

from .errors import MissingValueError, require
from .option import Option
from .result import Result
from .sequence import OptionSequence

T = TypeVar("T")
Z = TypeVar("Z")

AnyOption = Union[Option[T], Result[T, Any]]


def _check(opt: Any) -> None:
    if not isinstance(opt, (Option, Result)):
        raise TypeError(f"expected Option or Result, got {type(opt).__name__}")


def _present(opt: AnyOption[Any]) -> bool:
    _check(opt)
    return opt.is_some() if isinstance(opt, Option) else opt.is_ok()


def value_or_default(opt: AnyOption[T], zero: Optional[Callable[[], Z]] = None) -> Union[T, Z, None]:
    """Return the value, or ``zero()`` (``None`` without a zero factory) when absent.

    ``zero`` is the type's empty constructor, e.g. ``int``, ``str`` or ``list``.
    """
    if _present(opt):
        return opt.value  # type: ignore[union-attr]
    return zero() if zero is not None else None


def value_or_failure(opt: AnyOption[T], message: Optional[str] = None) -> T:
    if _present(opt):
        return opt.value  # type: ignore[union-attr]
    raise MissingValueError(message, reason=getattr(opt, "reason", None))


def value_or_failure_with(opt: AnyOption[T], message_factory: Callable[..., str]) -> T:
    """Like ``value_or_failure`` but builds the message only when it is needed.

    For a ``Result`` the factory receives the stored reason; for an ``Option`` it
    is called with no arguments.
    """
    require(message_factory, "message_factory")
    if _present(opt):
        return opt.value  # type: ignore[union-attr]
    if isinstance(opt, Result):
        reason = opt.reason  # type: ignore[attr-defined]
        raise MissingValueError(message_factory(reason), reason=reason)
    raise MissingValueError(message_factory())


def to_nullable(opt: AnyOption[T]) -> Optional[T]:
    return opt.value if _present(opt) else None  # type: ignore[union-attr]


def to_sequence(opt: AnyOption[T]) -> OptionSequence[T]:
    _check(opt)
    return OptionSequence(opt)
