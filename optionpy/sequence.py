from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Generic, Iterator, List, TypeVar, Union

from .option import Option
from .result import Result

T = TypeVar("T")


@dataclass(frozen=True)
class OptionSequence(Generic[T]):
    """Zero-or-one element view over an option.

    Nothing is copied out up front; each iteration reads the source again, so the
    view can be walked any number of times.
    """
    _source: Union[Option[T], Result[T, Any]]

    def _present(self) -> bool:
        src = self._source
        return src.is_some() if isinstance(src, Option) else src.is_ok()

    def __iter__(self) -> Iterator[T]:
        if self._present():
            yield self._source.value  # type: ignore[union-attr]

    def __len__(self) -> int:
        return 1 if self._present() else 0

    def __bool__(self) -> bool:
        return self._present()

    def __contains__(self, item: object) -> bool:
        return self._present() and self._source.value == item  # type: ignore[union-attr]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionSequence):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __hash__(self) -> int:
        return hash(tuple(self))

    def to_list(self) -> List[T]:
        return list(self)
