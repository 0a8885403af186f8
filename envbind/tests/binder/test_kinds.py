"""
Tests for Scalar Kinds

Tests annotation resolution, the per-kind parsers and canonical
formatting.
"""

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Union

import pytest
from pydantic import BaseModel

from envbind.binder.kinds import (
    Int64,
    Kind,
    format_duration,
    format_value,
    is_structure,
    is_structure_type,
    parse_bool,
    parse_duration,
    parse_float,
    parse_int,
    parse_value,
    resolve_kind,
    type_name,
)


@dataclass
class _Section:
    value: int = 1


class _Model(BaseModel):
    value: int = 1


class TestResolveKind:
    """Tests for mapping annotations onto kinds."""

    @pytest.mark.parametrize("annotation,kind", [
        (int, Kind.INT),
        (Int64, Kind.INT64),
        (float, Kind.FLOAT64),
        (bool, Kind.BOOL),
        (str, Kind.STRING),
        (timedelta, Kind.DURATION),
    ])
    def test_supported(self, annotation, kind):
        resolved = resolve_kind(annotation)
        assert resolved.kind is kind
        assert resolved.nullable is False

    def test_optional(self):
        """Optional[X] resolves to X and is nullable."""
        resolved = resolve_kind(Optional[str])
        assert resolved.kind is Kind.STRING
        assert resolved.nullable is True

    def test_pipe_union_with_none(self):
        resolved = resolve_kind(int | None)
        assert resolved.kind is Kind.INT
        assert resolved.nullable is True

    @pytest.mark.parametrize("annotation", [list[str], dict, bytes, Union[int, str], complex])
    def test_unsupported(self, annotation):
        assert resolve_kind(annotation) is None

    def test_type_name(self):
        assert type_name(list) == "list"
        assert "list[str]" in type_name(list[str])


class TestStructures:
    """Tests for structure detection."""

    def test_instances(self):
        assert is_structure(_Section())
        assert is_structure(_Model())
        assert not is_structure(_Section)
        assert not is_structure({"value": 1})
        assert not is_structure(None)

    def test_types(self):
        assert is_structure_type(_Section)
        assert is_structure_type(Optional[_Model])
        assert not is_structure_type(int)
        assert not is_structure_type(Optional[int])


class TestParseInt:
    """Tests for base-10 integer parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("50", 50),
        ("-7", -7),
        ("+3", 3),
        ("007", 7),
        ("9223372036854775807", (1 << 63) - 1),
    ])
    def test_valid(self, raw, expected):
        assert parse_int(raw) == expected

    @pytest.mark.parametrize("raw", ["", "1.5", " 5", "5 ", "1_000", "0x10", "ten", "9223372036854775808"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_int(raw)


class TestParseFloat:
    """Tests for decimal float parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("0.5", 0.5),
        ("1e3", 1000.0),
        ("-2.25", -2.25),
        ("42", 42.0),
        ("0x1p-2", 0.25),
    ])
    def test_valid(self, raw, expected):
        assert parse_float(raw) == expected

    def test_inf_and_nan(self):
        assert math.isinf(parse_float("inf"))
        assert math.isinf(parse_float("-Infinity"))
        assert math.isnan(parse_float("NaN"))

    @pytest.mark.parametrize("raw", ["", "abc", " 1.0", "1_0.0", "1e400"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_float(raw)


class TestParseBool:
    """Tests for permissive boolean parsing."""

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "True", "tRuE"])
    def test_true(self, raw):
        assert parse_bool(raw) is True

    @pytest.mark.parametrize("raw", ["0", "false", "yes", "on", "", "garbage", " true"])
    def test_false_never_raises(self, raw):
        assert parse_bool(raw) is False


class TestParseDuration:
    """Tests for duration strings."""

    @pytest.mark.parametrize("raw,expected", [
        ("5s", timedelta(seconds=5)),
        ("2h30m", timedelta(hours=2, minutes=30)),
        ("300ms", timedelta(milliseconds=300)),
        ("1.5h", timedelta(minutes=90)),
        ("-1m", timedelta(minutes=-1)),
        ("+10s", timedelta(seconds=10)),
        ("0", timedelta(0)),
        ("1h1m1s1ms1us", timedelta(hours=1, minutes=1, seconds=1, milliseconds=1, microseconds=1)),
        ("250µs", timedelta(microseconds=250)),
        (".5s", timedelta(milliseconds=500)),
        ("1500ns", timedelta(microseconds=1)),
    ])
    def test_valid(self, raw, expected):
        assert parse_duration(raw) == expected

    @pytest.mark.parametrize("raw", ["", "5", "s", "1d", "1.2.3s", "-", "five seconds", ".s"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_duration(raw)

    def test_overflow(self):
        with pytest.raises(ValueError):
            parse_duration("9999999999h")


class TestFormatting:
    """Tests for canonical string forms."""

    @pytest.mark.parametrize("value,expected", [
        (timedelta(0), "0s"),
        (timedelta(seconds=5), "5s"),
        (timedelta(seconds=90), "1m30s"),
        (timedelta(hours=2, minutes=30), "2h30m0s"),
        (timedelta(milliseconds=1500), "1.5s"),
        (timedelta(milliseconds=300), "300ms"),
        (timedelta(microseconds=250), "250µs"),
        (timedelta(minutes=-1), "-1m0s"),
    ])
    def test_format_duration(self, value, expected):
        assert format_duration(value) == expected

    @pytest.mark.parametrize("raw", ["5s", "2h30m0s", "1.5s", "300ms", "-1m0s"])
    def test_duration_round_trip(self, raw):
        """Formatting a parsed duration reproduces the literal."""
        assert format_duration(parse_duration(raw)) == raw

    @pytest.mark.parametrize("kind,raw", [
        (Kind.INT, "50"),
        (Kind.INT64, "-9000000000"),
        (Kind.FLOAT64, "0.25"),
        (Kind.BOOL, "true"),
        (Kind.STRING, "hello world"),
        (Kind.DURATION, "1h0m0s"),
    ])
    def test_format_value_round_trip(self, kind, raw):
        assert format_value(kind, parse_value(kind, raw)) == raw
