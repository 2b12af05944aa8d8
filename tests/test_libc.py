"""Tests for the ctypes binding of the C time routines."""

from __future__ import annotations

import ctypes

from strftimekit._internal import libc


class TestStructTm:
    """Tests for the struct tm mirror."""

    def test_zero_filled(self) -> None:
        tm = libc.StructTm()
        assert (tm.tm_year, tm.tm_mon, tm.tm_mday, tm.tm_isdst) == (0, 0, 0, 0)
        assert tm.tm_zone is None

    def test_repr(self) -> None:
        tm = libc.utc_to_tm(0)
        assert repr(tm).startswith("StructTm(1970-01-01 00:00:00")


class TestTimeTBounds:
    def test_bounds_match_size(self) -> None:
        low, high = libc.time_t_bounds()
        bits = ctypes.sizeof(libc.time_t) * 8
        assert high == 2 ** (bits - 1) - 1
        assert low == -(2 ** (bits - 1))


class TestWrappers:
    """Tests for the thin wrappers."""

    def test_parse_into_fills_fields(self) -> None:
        tm = libc.parse_into(b"2024-01-15 14:30:25", b"%Y-%m-%d %H:%M:%S\x00")
        assert tm is not None
        assert (tm.tm_year, tm.tm_mon, tm.tm_mday) == (124, 0, 15)
        assert (tm.tm_hour, tm.tm_min, tm.tm_sec) == (14, 30, 25)

    def test_parse_into_presets_unparsed_fields(self) -> None:
        """tm_isdst and tm_gmtoff show whether strptime set them."""
        tm = libc.parse_into(b"2024-01-15", b"%Y-%m-%d\x00")
        assert tm is not None
        assert tm.tm_isdst == -1
        assert tm.tm_gmtoff == libc.GMTOFF_UNSET

    def test_parse_into_offset(self) -> None:
        tm = libc.parse_into(b"12:00 -0530", b"%H:%M %z\x00")
        assert tm is not None
        assert tm.tm_gmtoff == -(5 * 3600 + 30 * 60)

    def test_copy_tm_is_independent(self) -> None:
        tm = libc.utc_to_tm(0)
        dup = libc.copy_tm(tm)
        dup.tm_hour = 5
        assert tm.tm_hour == 0

    def test_parse_into_no_match(self) -> None:
        assert libc.parse_into(b"nope", b"%Y\x00") is None

    def test_utc_round_trip(self) -> None:
        tm = libc.utc_to_tm(1705329025)
        assert tm is not None
        assert libc.tm_to_utc(tm) == 1705329025

    def test_format_tm(self) -> None:
        tm = libc.utc_to_tm(0)
        assert libc.format_tm(tm, b"%Y-%m-%d\x00", 80) == b"1970-01-01"

    def test_format_tm_buffer_too_small(self) -> None:
        tm = libc.utc_to_tm(0)
        assert libc.format_tm(tm, b"%Y-%m-%d\x00", 10) is None
        assert libc.format_tm(tm, b"%Y-%m-%d\x00", 11) == b"1970-01-01"
