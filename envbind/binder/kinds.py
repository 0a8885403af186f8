"""
Scalar Kinds

The closed set of field types the binder can populate, how a field
annotation maps onto one of them, and the per-kind parsers that turn a
raw environment string into a typed value.
"""

import dataclasses
import math
import re
import types
import typing
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, NewType, Optional

from pydantic import BaseModel

Int64 = NewType("Int64", int)
"""Annotation marker for 64-bit integer fields."""

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class Kind(str, Enum):
    """Supported scalar kinds."""
    INT = "int"
    INT64 = "int64"
    FLOAT64 = "float64"
    BOOL = "bool"
    STRING = "string"
    DURATION = "duration"


@dataclasses.dataclass(frozen=True)
class ResolvedType:
    """A leaf annotation resolved to a kind."""
    kind: Kind
    nullable: bool = False


_KIND_BY_TYPE: dict[Any, Kind] = {
    Int64: Kind.INT64,
    bool: Kind.BOOL,
    int: Kind.INT,
    float: Kind.FLOAT64,
    str: Kind.STRING,
    timedelta: Kind.DURATION,
}


# ============================================================================
# Annotation Resolution
# ============================================================================

def _strip_optional(annotation: Any) -> tuple[Any, bool]:
    """Return (inner, nullable) for Optional[X] / X | None, else (annotation, False)."""
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        nullable = len(args) != len(typing.get_args(annotation))
        if nullable and len(args) == 1:
            return args[0], True
    return annotation, False


def _is_plain_class(annotation: Any) -> bool:
    # list[str] passes isinstance(..., type) on some interpreters
    return isinstance(annotation, type) and typing.get_origin(annotation) is None


def is_structure_type(annotation: Any) -> bool:
    """True for dataclass types and pydantic model classes, including Optional ones."""
    inner, _ = _strip_optional(annotation)
    if not _is_plain_class(inner):
        return False
    return dataclasses.is_dataclass(inner) or issubclass(inner, BaseModel)


def is_structure(value: Any) -> bool:
    """True for dataclass and pydantic model instances (not classes)."""
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or isinstance(value, BaseModel)


def resolve_kind(annotation: Any) -> Optional[ResolvedType]:
    """
    Map a leaf annotation onto a Kind.

    Returns None when the annotation is outside the supported set.
    """
    inner, nullable = _strip_optional(annotation)
    kind = _KIND_BY_TYPE.get(inner)
    if kind is None:
        return None
    return ResolvedType(kind=kind, nullable=nullable)


def type_name(annotation: Any) -> str:
    """Readable name of an annotation for error messages."""
    if _is_plain_class(annotation):
        return annotation.__name__
    return str(annotation).replace("typing.", "")


# ============================================================================
# Parsers
# ============================================================================

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INF_PATTERN = re.compile(r"[+-]?(inf|infinity)", re.IGNORECASE)


def parse_int(raw: str) -> int:
    """Base-10 integer, optional sign, digits only, signed 64-bit range."""
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f'invalid syntax: "{raw}"')
    value = int(raw, 10)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f'value out of range: "{raw}"')
    return value


def parse_float(raw: str) -> float:
    """Decimal or hex float; inf/nan accepted; overflow is an error."""
    if not raw or raw != raw.strip() or "_" in raw:
        raise ValueError(f'invalid syntax: "{raw}"')
    unsigned = raw.lstrip("+-")
    if unsigned[:2].lower() == "0x":
        try:
            value = float.fromhex(raw)
        except OverflowError as e:
            raise ValueError(f'value out of range: "{raw}"') from e
    else:
        value = float(raw)
    if math.isinf(value) and not _INF_PATTERN.fullmatch(raw):
        raise ValueError(f'value out of range: "{raw}"')
    return value


def parse_bool(raw: str) -> bool:
    """True iff the value is "1" or "true" in any case. Never raises."""
    return raw.upper() in ("TRUE", "1")


def parse_string(raw: str) -> str:
    return raw


_DURATION_PART = re.compile(r"([0-9]*(?:\.[0-9]*)?)([^0-9.]*)")

_NANOSECONDS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}


def parse_duration(raw: str) -> timedelta:
    """
    Parse a duration string such as "300ms", "-1.5h" or "2h45m".

    A duration is an optional sign followed by one or more decimal numbers,
    each with an optional fraction and a required unit suffix. Valid units
    are "ns", "us" (or "µs"), "ms", "s", "m", "h". The bare string "0" is
    also accepted. Sub-microsecond precision is truncated.
    """
    text = raw
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f'invalid duration "{raw}"')

    total = Decimal(0)
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        number, unit = match.group(1), match.group(2)
        if number in ("", "."):
            raise ValueError(f'invalid duration "{raw}"')
        if not unit:
            raise ValueError(f'missing unit in duration "{raw}"')
        if unit not in _NANOSECONDS:
            raise ValueError(f'unknown unit "{unit}" in duration "{raw}"')
        try:
            total += Decimal(number) * _NANOSECONDS[unit]
        except InvalidOperation as e:
            raise ValueError(f'invalid duration "{raw}"') from e
        pos = match.end()

    nanoseconds = int(total)
    limit = -INT64_MIN if negative else INT64_MAX
    if nanoseconds > limit:
        raise ValueError(f'invalid duration "{raw}"')

    microseconds = nanoseconds // 1000
    return timedelta(microseconds=-microseconds if negative else microseconds)


PARSERS: dict[Kind, Callable[[str], Any]] = {
    Kind.INT: parse_int,
    Kind.INT64: parse_int,
    Kind.FLOAT64: parse_float,
    Kind.BOOL: parse_bool,
    Kind.STRING: parse_string,
    Kind.DURATION: parse_duration,
}


def parse_value(kind: Kind, raw: str) -> Any:
    """Parse ``raw`` as ``kind``. Raises ValueError on malformed input."""
    return PARSERS[kind](raw)


# ============================================================================
# Canonical Formatting
# ============================================================================

def _fraction(value: int, scale: int) -> str:
    whole, frac = divmod(value, scale)
    if not frac:
        return str(whole)
    digits = len(str(scale)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(value: timedelta) -> str:
    """Format like "1h30m0s", "1.5ms" or "0s"; the inverse of parse_duration."""
    micros = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000_000:
        if micros < 1000:
            return f"{sign}{micros}µs"
        return f"{sign}{_fraction(micros, 1000)}ms"

    hours, rem = divmod(micros, 3_600_000_000)
    minutes, rem = divmod(rem, 60_000_000)
    out = ""
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return f"{sign}{out}{_fraction(rem, 1_000_000)}s"


def format_value(kind: Kind, value: Any) -> str:
    """Canonical string form of a parsed value."""
    if kind is Kind.BOOL:
        return "true" if value else "false"
    if kind is Kind.DURATION:
        return format_duration(value)
    if kind is Kind.FLOAT64:
        return repr(float(value))
    return str(value)
