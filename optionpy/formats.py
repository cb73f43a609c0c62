from __future__ import annotations
import enum
from dataclasses import dataclass, field, replace
from typing import Tuple


class NumberStyle(enum.Flag):
    """Which lexical pieces a numeric parse accepts."""
    NONE = 0
    ALLOW_LEADING_WHITE = 1
    ALLOW_TRAILING_WHITE = 2
    ALLOW_LEADING_SIGN = 4
    ALLOW_TRAILING_SIGN = 8
    ALLOW_DECIMAL_POINT = 16
    ALLOW_THOUSANDS = 32
    ALLOW_EXPONENT = 64
    ALLOW_HEX_SPECIFIER = 128

    INTEGER = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_LEADING_SIGN
    HEX_NUMBER = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_HEX_SPECIFIER
    NUMBER = INTEGER | ALLOW_TRAILING_SIGN | ALLOW_DECIMAL_POINT | ALLOW_THOUSANDS
    FLOAT = INTEGER | ALLOW_DECIMAL_POINT | ALLOW_EXPONENT
    ANY = NUMBER | ALLOW_EXPONENT


class DateTimeStyle(enum.Flag):
    NONE = 0
    ALLOW_LEADING_WHITE = 1
    ALLOW_TRAILING_WHITE = 2
    ASSUME_LOCAL = 4
    ASSUME_UNIVERSAL = 8
    ADJUST_TO_UNIVERSAL = 16

    ALLOW_WHITE_SPACES = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE


@dataclass(frozen=True)
class Locale:
    """Culture-dependent symbols, spelled out rather than looked up.

    ``date_formats`` are ``strptime`` patterns tried, in order, after ISO 8601.
    """
    name: str = "invariant"
    decimal_separator: str = "."
    group_separator: str = ","
    positive_sign: str = "+"
    negative_sign: str = "-"
    nan_symbol: str = "NaN"
    positive_infinity: str = "Infinity"
    negative_infinity: str = "-Infinity"
    date_formats: Tuple[str, ...] = field(default=(
        "%m/%d/%Y %H:%M:%S",
        "%m/%d/%Y %H:%M",
        "%m/%d/%Y",
    ))

    def __post_init__(self) -> None:
        if not self.decimal_separator:
            raise ValueError("decimal_separator must not be empty")
        if self.decimal_separator == self.group_separator:
            raise ValueError("decimal_separator and group_separator must differ")

    def with_(self, **changes) -> "Locale":
        return replace(self, **changes)


INVARIANT = Locale()
