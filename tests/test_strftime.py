"""Tests for the one-shot strftime and strptime functions."""

from __future__ import annotations

import pytest

from strftimekit import EncodingError, ParseError, TimeMode
from strftimekit.format import strftime, strptime


class TestStrftime:
    """Tests for strftime()."""

    def test_universal(self) -> None:
        result = strftime(1705329025, "%Y-%m-%d %H:%M:%S", mode=TimeMode.UNIVERSAL)
        assert result == "2024-01-15 14:30:25"

    def test_mode_as_string(self) -> None:
        assert strftime(0, "%Y", mode="universal") == "1970"

    def test_non_ascii_pattern(self) -> None:
        with pytest.raises(EncodingError):
            strftime(0, "%Y年", mode=True)


class TestStrptime:
    """Tests for strptime()."""

    def test_universal(self) -> None:
        result = strptime("2024-01-15 14:30:25", "%Y-%m-%d %H:%M:%S", mode="universal")
        assert result == 1705329025.0

    def test_no_match(self) -> None:
        with pytest.raises(ParseError):
            strptime("yesterday", "%Y-%m-%d", mode=TimeMode.UNIVERSAL)
