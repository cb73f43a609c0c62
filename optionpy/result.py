from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from .errors import require

if TYPE_CHECKING:
    from .option import Option

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
E2 = TypeVar("E2")
R = TypeVar("R")


class Result(Generic[T, E]):
    """A value that may be absent for a stated reason: ``Ok(value)`` or ``Err(reason)``.

    Same short-circuit rules as ``Option``; the reason travels untouched through value
    transforms and is handed to the absent-side callbacks.
    """
    __slots__ = ()

    def is_ok(self) -> bool: raise NotImplementedError
    def is_err(self) -> bool: return not self.is_ok()

    def map(self, f: Callable[[T], U]) -> "Result[U, E]":
        require(f, "f")
        if self.is_ok():
            return Ok(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_reason(self, f: Callable[[E], E2]) -> "Result[T, E2]":
        require(f, "f")
        if self.is_err():
            return Err(f(self.reason))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        require(f, "f")
        if self.is_ok():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def match(self, ok: Callable[[T], R], err: Callable[[E], R]) -> R:
        require(ok, "ok"); require(err, "err")
        if self.is_ok():
            return ok(self.value)  # type: ignore[attr-defined]
        return err(self.reason)  # type: ignore[attr-defined]

    def match_ok(self, action: Callable[[T], Any]) -> None:
        require(action, "action")
        if self.is_ok():
            action(self.value)  # type: ignore[attr-defined]

    def match_err(self, action: Callable[[E], Any]) -> None:
        require(action, "action")
        if self.is_err():
            action(self.reason)  # type: ignore[attr-defined]

    def filter(self, predicate: Callable[[T], bool], reason_factory: Callable[[T], E]) -> "Result[T, E]":
        require(predicate, "predicate"); require(reason_factory, "reason_factory")
        if self.is_ok() and not predicate(self.value):  # type: ignore[attr-defined]
            return Err(reason_factory(self.value))  # type: ignore[attr-defined]
        return self

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        require(predicate, "predicate")
        return self.is_ok() and bool(predicate(self.value))  # type: ignore[attr-defined]

    def contains(self, value: Any) -> bool:
        return self.is_ok() and self.value == value  # type: ignore[attr-defined]

    def or_(self, alternative: T) -> "Result[T, E]":
        return self if self.is_ok() else Ok(alternative)

    def or_else(self, fallback: Callable[[E], "Result[T, E]"]) -> "Result[T, E]":
        require(fallback, "fallback")
        return self if self.is_ok() else fallback(self.reason)  # type: ignore[attr-defined]

    def value_or(self, alternative: U) -> T | U:
        return self.value if self.is_ok() else alternative  # type: ignore[attr-defined]

    def value_or_else(self, factory: Callable[[E], U]) -> T | U:
        require(factory, "factory")
        return self.value if self.is_ok() else factory(self.reason)  # type: ignore[attr-defined]

    def flatten(self: "Result[Result[U, E], E]") -> "Result[U, E]":
        if self.is_ok():
            inner = self.value  # type: ignore[attr-defined]
            if not isinstance(inner, Result):
                raise TypeError(f"flatten expects Ok(Result), got Ok({type(inner).__name__})")
            return inner
        return self  # type: ignore[return-value]

    def without_reason(self) -> "Option[T]":
        from .option import Some, NONE
        if self.is_ok():
            return Some(self.value)  # type: ignore[attr-defined]
        return NONE


@dataclass(frozen=True)
class Ok(Result[T, E]):
    value: T
    def is_ok(self) -> bool: return True
    def __repr__(self) -> str: return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Result[T, E]):
    reason: E
    def is_ok(self) -> bool: return False
    def __repr__(self) -> str: return f"Err({self.reason!r})"


def ok(value: T) -> Result[T, Any]:
    return Ok(value)


def err(reason: E) -> Result[Any, E]:
    return Err(reason)


def from_nullable(v: T | None, reason_factory: Callable[[], E]) -> Result[T, E]:
    require(reason_factory, "reason_factory")
    return Ok(v) if v is not None else Err(reason_factory())
