"""Build options from text.

Every ``to_*`` function returns ``Some(parsed)`` when the whole input matches the
grammar for the target type and ``NONE`` otherwise; malformed input is never raised
as an exception. Each one also has a ``with_reason`` form that returns
``Ok(parsed)`` or ``Err(ParseFailure)``::

    parse.to_int("42")                 # Some(42)
    parse.to_int("abc")                # NONE
    parse.to_int.with_reason("300")    # Ok(300)
    parse.to_byte.with_reason("300")   # Err(ParseFailure(target='byte', ...))

Culture-dependent behaviour is driven by the explicit records in ``formats``.
Rejected input is logged at DEBUG on ``parse.logger``.
"""
from __future__ import annotations
import datetime as _dt
import enum
import functools
import operator
import re
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Generic, Iterator, Sequence, Tuple, Type, TypeVar, Union

from .formats import INVARIANT, DateTimeStyle, Locale, NumberStyle
from .logger import ConsoleLogger
from .option import Option
from .result import Err, Ok, Result

T = TypeVar("T")
EnumT = TypeVar("EnumT", bound=enum.Enum)

logger = ConsoleLogger("optionpy.parse", level="WARN")

_WHITE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class ParseFailure:
    target: str
    text: Any
    detail: str

    def __str__(self) -> str:
        return f"cannot parse {self.text!r} as {self.target}: {self.detail}"


class _Reject(Exception):
    """Input does not match the grammar. Never escapes this module."""


@contextmanager
def _lexical(what: str) -> Iterator[None]:
    try:
        yield
    except (ValueError, OverflowError, ArithmeticError, OSError) as ex:
        raise _Reject(f"{what}: {ex}") from None


class ParseAdapter(Generic[T]):
    """Wraps a converter that raises ``_Reject`` so callers only ever see data."""

    def __init__(self, target: str, convert: Callable[..., T]):
        self.target = target
        self._convert = convert
        functools.update_wrapper(self, convert)

    def __repr__(self) -> str:
        return f"<ParseAdapter {self.target}>"

    def with_reason(self, text: Any, *args: Any, **kwargs: Any) -> Result[T, ParseFailure]:
        if not isinstance(text, str):
            return self._reject(text, f"expected str, got {type(text).__name__}")
        try:
            return Ok(self._convert(text, *args, **kwargs))
        except _Reject as ex:
            return self._reject(text, str(ex))

    def __call__(self, text: Any, *args: Any, **kwargs: Any) -> Option[T]:
        return self.with_reason(text, *args, **kwargs).without_reason()

    def _reject(self, text: Any, detail: str) -> Result[T, ParseFailure]:
        logger.debug("input rejected", target=self.target, text=text, detail=detail)
        return Err(ParseFailure(self.target, text, detail))


def _adapter(target: str) -> Callable[[Callable[..., T]], ParseAdapter[T]]:
    return lambda fn: ParseAdapter(target, fn)


# -- numbers -----------------------------------------------------------------

def _trim(s: str, leading: bool, trailing: bool) -> str:
    if leading:
        s = s.lstrip(_WHITE)
    if trailing:
        s = s.rstrip(_WHITE)
    return s


def _digits(s: str) -> bool:
    return all(c in _DIGITS for c in s)


def _strip_sign(s: str, styles: NumberStyle, locale: Locale) -> Tuple[bool, str]:
    if NumberStyle.ALLOW_LEADING_SIGN in styles:
        if s.startswith(locale.negative_sign):
            return True, s[len(locale.negative_sign):]
        if s.startswith(locale.positive_sign):
            return False, s[len(locale.positive_sign):]
    if NumberStyle.ALLOW_TRAILING_SIGN in styles:
        if s.endswith(locale.negative_sign):
            return True, s[:-len(locale.negative_sign)]
        if s.endswith(locale.positive_sign):
            return False, s[:-len(locale.positive_sign)]
    return False, s


def _number_text(text: str, styles: NumberStyle, locale: Locale) -> str:
    """Reduce localized input to a canonical ``[-]digits[.digits][e[-]digits]``."""
    s = _trim(text, NumberStyle.ALLOW_LEADING_WHITE in styles, NumberStyle.ALLOW_TRAILING_WHITE in styles)
    negative, s = _strip_sign(s, styles, locale)

    exponent = ""
    if NumberStyle.ALLOW_EXPONENT in styles:
        m = re.search(r"[eE]", s)
        if m:
            s, exponent = s[:m.start()], s[m.end():]
            if exponent.startswith(locale.negative_sign):
                exponent = "-" + exponent[len(locale.negative_sign):]
            elif exponent.startswith(locale.positive_sign):
                exponent = exponent[len(locale.positive_sign):]
            body = exponent[1:] if exponent.startswith("-") else exponent
            if not body or not _digits(body):
                raise _Reject("malformed exponent")

    whole, frac = s, ""
    if NumberStyle.ALLOW_DECIMAL_POINT in styles and locale.decimal_separator in s:
        whole, frac = s.split(locale.decimal_separator, 1)
    if NumberStyle.ALLOW_THOUSANDS in styles and locale.group_separator and whole:
        if whole.startswith(locale.group_separator):
            raise _Reject("group separator before first digit")
        whole = whole.replace(locale.group_separator, "")

    if not whole and not frac:
        raise _Reject("no digits")
    if not _digits(whole) or not _digits(frac):
        raise _Reject("unexpected character")
    out = ("-" if negative else "") + (whole or "0")
    if frac:
        out += "." + frac
    if exponent:
        out += "e" + exponent
    return out


def _integer(target: str, bits: int, signed: bool) -> ParseAdapter[int]:
    lo, hi = (-(1 << (bits - 1)), (1 << (bits - 1)) - 1) if signed else (0, (1 << bits) - 1)

    def convert(text: str, styles: NumberStyle = NumberStyle.INTEGER, locale: Locale = INVARIANT) -> int:
        if NumberStyle.ALLOW_HEX_SPECIFIER in styles:
            s = _trim(text, NumberStyle.ALLOW_LEADING_WHITE in styles, NumberStyle.ALLOW_TRAILING_WHITE in styles)
            if not s or any(c not in _HEX_DIGITS for c in s):
                raise _Reject("not a hexadecimal number")
            n = int(s, 16)
            if n >> bits:
                raise _Reject(f"value does not fit in {bits} bits")
            # two's complement for signed widths
            return n - (1 << bits) if signed and n > hi else n
        with _lexical("not a number"):
            d = Decimal(_number_text(text, styles, locale))
        if d.is_zero():
            return 0
        if d.adjusted() > 20:
            raise _Reject(f"outside [{lo}, {hi}]")
        if d != d.to_integral_value():
            raise _Reject("fractional part is not zero")
        n = int(d)
        if not lo <= n <= hi:
            raise _Reject(f"outside [{lo}, {hi}]")
        return n

    convert.__name__ = convert.__qualname__ = f"to_{target}"
    convert.__doc__ = f"Parse a {bits}-bit {'signed' if signed else 'unsigned'} integer in [{lo}, {hi}]."
    return ParseAdapter(target, convert)


to_byte = _integer("byte", 8, signed=False)
to_sbyte = _integer("sbyte", 8, signed=True)
to_short = _integer("short", 16, signed=True)
to_ushort = _integer("ushort", 16, signed=False)
to_int = _integer("int", 32, signed=True)
to_uint = _integer("uint", 32, signed=False)
to_long = _integer("long", 64, signed=True)
to_ulong = _integer("ulong", 64, signed=False)


@_adapter("float")
def to_float(text: str, styles: NumberStyle = NumberStyle.FLOAT | NumberStyle.ALLOW_THOUSANDS, locale: Locale = INVARIANT) -> float:
    """Parse a double-precision float. NaN and infinity symbols match case-insensitively."""
    if NumberStyle.ALLOW_HEX_SPECIFIER in styles:
        raise ValueError("hex specifier is not valid for floating point")
    s = _trim(text, NumberStyle.ALLOW_LEADING_WHITE in styles, NumberStyle.ALLOW_TRAILING_WHITE in styles).casefold()
    specials = {
        locale.nan_symbol.casefold(): float("nan"),
        locale.positive_infinity.casefold(): float("inf"),
        (locale.positive_sign + locale.positive_infinity).casefold(): float("inf"),
        locale.negative_infinity.casefold(): float("-inf"),
    }
    if s in specials:
        return specials[s]
    with _lexical("not a number"):
        return float(_number_text(text, styles, locale))


@_adapter("decimal")
def to_decimal(text: str, styles: NumberStyle = NumberStyle.NUMBER, locale: Locale = INVARIANT) -> Decimal:
    if NumberStyle.ALLOW_HEX_SPECIFIER in styles:
        raise ValueError("hex specifier is not valid for decimal")
    with _lexical("not a number"):
        return Decimal(_number_text(text, styles, locale))


# -- scalars -----------------------------------------------------------------

@_adapter("bool")
def to_bool(text: str) -> bool:
    s = text.strip(_WHITE + "\0").casefold()
    if s == "true":
        return True
    if s == "false":
        return False
    raise _Reject("expected 'true' or 'false'")


@_adapter("char")
def to_char(text: str) -> str:
    if len(text) != 1:
        raise _Reject(f"expected exactly one character, got {len(text)}")
    return text


_UUID_FORMS = (
    re.compile(r"[0-9a-fA-F]{32}"),
    re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"),
    re.compile(r"\{[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\}"),
    re.compile(r"\([0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\)"),
)

# {0xdddddddd,0xdddd,0xdddd,{0xdd,0xdd,0xdd,0xdd,0xdd,0xdd,0xdd,0xdd}}
_UUID_STRUCT = re.compile(
    r"\{0[xX]([0-9a-fA-F]{1,8}),0[xX]([0-9a-fA-F]{1,4}),0[xX]([0-9a-fA-F]{1,4}),"
    r"\{((?:0[xX][0-9a-fA-F]{1,2},){7}0[xX][0-9a-fA-F]{1,2})\}\}"
)


@_adapter("uuid")
def to_uuid(text: str) -> uuid.UUID:
    """Accepts the bare, hyphenated, braced, parenthesised and hex-struct forms."""
    s = text.strip(_WHITE)
    m = _UUID_STRUCT.fullmatch(s)
    if m:
        head = m.group(1).zfill(8) + m.group(2).zfill(4) + m.group(3).zfill(4)
        tail = "".join(b[2:].zfill(2) for b in m.group(4).split(","))
        return uuid.UUID(hex=head + tail)
    if not any(form.fullmatch(s) for form in _UUID_FORMS):
        raise _Reject("not a UUID")
    return uuid.UUID(hex=s.strip("{}()").replace("-", ""))


def _member(enum_type: Type[EnumT], name: str, ignore_case: bool) -> EnumT:
    member = enum_type.__members__.get(name)
    if member is None and ignore_case:
        folded = name.casefold()
        member = next((m for k, m in enum_type.__members__.items() if k.casefold() == folded), None)
    if member is None:
        raise _Reject(f"no member {name!r} in {enum_type.__name__}")
    return member


@_adapter("enum")
def to_enum(text: str, enum_type: Type[EnumT], ignore_case: bool = False) -> EnumT:
    """Parse a member name, a numeric value, or comma-separated names of a ``Flag``."""
    if not (isinstance(enum_type, type) and issubclass(enum_type, enum.Enum)):
        raise TypeError(f"enum_type must be an Enum subclass, got {enum_type!r}")
    s = text.strip(_WHITE)
    if not s:
        raise _Reject("empty input")
    if re.fullmatch(r"[+-]?[0-9]+", s):
        with _lexical(f"no member with value {s} in {enum_type.__name__}"):
            return enum_type(int(s))
    if issubclass(enum_type, enum.Flag):
        members = [_member(enum_type, part.strip(_WHITE), ignore_case) for part in s.split(",")]
        return functools.reduce(operator.or_, members)
    return _member(enum_type, s, ignore_case)


# -- dates and times ---------------------------------------------------------

def _check_zone_styles(styles: DateTimeStyle) -> None:
    if DateTimeStyle.ASSUME_LOCAL in styles and DateTimeStyle.ASSUME_UNIVERSAL in styles:
        raise ValueError("ASSUME_LOCAL and ASSUME_UNIVERSAL are mutually exclusive")


def _dt_trim(text: str, styles: DateTimeStyle) -> str:
    return _trim(text, DateTimeStyle.ALLOW_LEADING_WHITE in styles, DateTimeStyle.ALLOW_TRAILING_WHITE in styles)


def _strptime_any(s: str, formats: Sequence[str]) -> _dt.datetime:
    for fmt in formats:
        try:
            return _dt.datetime.strptime(s, fmt)
        except ValueError:
            continue
    raise _Reject("does not match any accepted format")


def _formats(formats: Union[str, Sequence[str]]) -> Tuple[str, ...]:
    out = (formats,) if isinstance(formats, str) else tuple(formats)
    if not out:
        raise ValueError("at least one format is required")
    return out


def _zone(value: _dt.datetime, styles: DateTimeStyle, aware: bool) -> _dt.datetime:
    with _lexical("not representable"):
        if value.tzinfo is None:
            if DateTimeStyle.ASSUME_UNIVERSAL in styles:
                value = value.replace(tzinfo=_dt.timezone.utc)
            elif aware or DateTimeStyle.ASSUME_LOCAL in styles:
                value = value.astimezone()
        if DateTimeStyle.ADJUST_TO_UNIVERSAL in styles and value.tzinfo is not None:
            value = value.astimezone(_dt.timezone.utc)
    return value


def _datetime(text: str, locale: Locale, styles: DateTimeStyle) -> _dt.datetime:
    _check_zone_styles(styles)
    s = _dt_trim(text, styles)
    try:
        return _dt.datetime.fromisoformat(s)
    except ValueError:
        return _strptime_any(s, locale.date_formats)


@_adapter("datetime")
def to_datetime(text: str, locale: Locale = INVARIANT, styles: DateTimeStyle = DateTimeStyle.ALLOW_WHITE_SPACES) -> _dt.datetime:
    """ISO 8601 first, then each of ``locale.date_formats``.

    Offsets in the input are kept; naive input stays naive unless a zone style says otherwise.
    """
    return _zone(_datetime(text, locale, styles), styles, aware=False)


@_adapter("datetime")
def to_datetime_exact(text: str, formats: Union[str, Sequence[str]], styles: DateTimeStyle = DateTimeStyle.NONE) -> _dt.datetime:
    _check_zone_styles(styles)
    return _zone(_strptime_any(_dt_trim(text, styles), _formats(formats)), styles, aware=False)


@_adapter("datetime_offset")
def to_datetime_offset(text: str, locale: Locale = INVARIANT, styles: DateTimeStyle = DateTimeStyle.ALLOW_WHITE_SPACES) -> _dt.datetime:
    """Always timezone-aware: naive input is UTC under ASSUME_UNIVERSAL, local time otherwise."""
    return _zone(_datetime(text, locale, styles), styles, aware=True)


@_adapter("datetime_offset")
def to_datetime_offset_exact(text: str, formats: Union[str, Sequence[str]], styles: DateTimeStyle = DateTimeStyle.NONE) -> _dt.datetime:
    _check_zone_styles(styles)
    return _zone(_strptime_any(_dt_trim(text, styles), _formats(formats)), styles, aware=True)


@functools.lru_cache(maxsize=16)
def _timespan_grammar(fraction_separator: str) -> "re.Pattern[str]":
    return re.compile(
        r"(-)?(?:([0-9]+)|(?:([0-9]+)\.)?([0-9]{1,2}):([0-9]{1,2})"
        r"(?::([0-9]{1,2})(?:" + re.escape(fraction_separator) + r"([0-9]{1,7}))?)?)"
    )


@_adapter("timedelta")
def to_timedelta(text: str, locale: Locale = INVARIANT) -> _dt.timedelta:
    """``[-][d.]hh:mm[:ss[.fffffff]]`` or a bare number of days."""
    m = _timespan_grammar(locale.decimal_separator).fullmatch(text.strip(_WHITE))
    if m is None:
        raise _Reject("expected [-][d.]hh:mm[:ss[.fffffff]]")
    sign, bare_days, days, hours, minutes, seconds, fraction = m.groups()
    if bare_days is not None:
        with _lexical("out of range"):
            value = _dt.timedelta(days=int(bare_days))
    else:
        h, mi, sec = int(hours), int(minutes), int(seconds or 0)
        if h > 23 or mi > 59 or sec > 59:
            raise _Reject("component out of range")
        ticks = int((fraction or "").ljust(7, "0"))
        with _lexical("out of range"):
            value = _dt.timedelta(days=int(days or 0), hours=h, minutes=mi, seconds=sec, microseconds=ticks // 10)
    return -value if sign else value
