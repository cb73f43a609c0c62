from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

from .errors import require

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
R = TypeVar("R")


class Option(Generic[T]):
    """A value that may be absent: either ``Some(value)`` or ``NONE``.

    Every combinator validates its function arguments up front, then calls at most
    one of them, and only for the branch that is live. Exceptions raised by those
    functions are not caught here.
    """
    __slots__ = ()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        require(f, "f")
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        require(f, "f")
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE

    def match(self, some: Callable[[T], R], none: Callable[[], R]) -> R:
        require(some, "some"); require(none, "none")
        if self.is_some():
            return some(self.value)  # type: ignore[attr-defined]
        return none()

    def match_some(self, action: Callable[[T], Any]) -> None:
        require(action, "action")
        if self.is_some():
            action(self.value)  # type: ignore[attr-defined]

    def match_none(self, action: Callable[[], Any]) -> None:
        require(action, "action")
        if self.is_none():
            action()

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        require(predicate, "predicate")
        if self.is_some() and not predicate(self.value):  # type: ignore[attr-defined]
            return NONE
        return self

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        require(predicate, "predicate")
        return self.is_some() and bool(predicate(self.value))  # type: ignore[attr-defined]

    def contains(self, value: Any) -> bool:
        return self.is_some() and self.value == value  # type: ignore[attr-defined]

    def or_(self, alternative: T) -> "Option[T]":
        return self if self.is_some() else Some(alternative)

    def or_else(self, fallback: Callable[[], "Option[T]"]) -> "Option[T]":
        require(fallback, "fallback")
        return self if self.is_some() else fallback()

    def value_or(self, alternative: U) -> T | U:
        return self.value if self.is_some() else alternative  # type: ignore[attr-defined]

    def value_or_else(self, factory: Callable[[], U]) -> T | U:
        require(factory, "factory")
        return self.value if self.is_some() else factory()  # type: ignore[attr-defined]

    def not_none(self) -> "Option[T]":
        # Some(None) collapses to absence
        if self.is_some() and self.value is None:  # type: ignore[attr-defined]
            return NONE
        return self

    def flatten(self: "Option[Option[U]]") -> "Option[U]":
        if self.is_some():
            inner = self.value  # type: ignore[attr-defined]
            if not isinstance(inner, Option):
                raise TypeError(f"flatten expects Some(Option), got Some({type(inner).__name__})")
            return inner
        return NONE

    def with_reason(self, reason_factory: Callable[[], E]) -> "Result[T, E]":
        from .result import Ok, Err
        require(reason_factory, "reason_factory")
        if self.is_some():
            return Ok(self.value)  # type: ignore[attr-defined]
        return Err(reason_factory())


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True
    def __repr__(self) -> str: return f"Some({self.value!r})"


class _None(Option[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "NONE"
    def is_some(self) -> bool: return False
    def __eq__(self, other: object) -> bool: return isinstance(other, _None)
    def __ne__(self, other: object) -> bool: return not isinstance(other, _None)
    def __hash__(self) -> int: return hash(_None)
    def __reduce__(self) -> str: return "NONE"


NONE: Option[Any] = _None()


def some(value: T) -> Option[T]:
    return Some(value)


def none() -> Option[Any]:
    return NONE


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE


def some_when(value: T, predicate: Callable[[T], bool]) -> Option[T]:
    require(predicate, "predicate")
    return Some(value) if predicate(value) else NONE


def none_when(value: T, predicate: Callable[[T], bool]) -> Option[T]:
    require(predicate, "predicate")
    return NONE if predicate(value) else Some(value)
