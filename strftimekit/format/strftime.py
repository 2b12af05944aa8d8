"""One-shot strftime and strptime functions.

These functions build a throwaway TimeFormatter for a single call. Code
that converts many values with the same pattern should keep a
TimeFormatter instead, so the pattern is encoded once.

Functions:
    strftime: Render a timestamp with a pattern.
    strptime: Parse a string with a pattern.

Examples:
    >>> from strftimekit import TimeMode
    >>> from strftimekit.format import strftime, strptime

    >>> strftime(1705329025, "%Y-%m-%d %H:%M:%S", mode=TimeMode.UNIVERSAL)
    '2024-01-15 14:30:25'

    >>> strptime("2024-01-15 14:30:25", "%Y-%m-%d %H:%M:%S", mode="universal")
    1705329025.0
"""

from __future__ import annotations

from strftimekit.core.formatter import TimeFormatter, TimestampLike
from strftimekit.units.timemode import TimeMode


def strftime(
    timestamp: TimestampLike,
    fmt: str,
    *,
    mode: TimeMode | str | bool = TimeMode.LOCAL,
) -> str:
    """Render a timestamp using a strftime pattern.

    Args:
        timestamp: Seconds since the epoch, or a datetime.
        fmt: strftime pattern.
        mode: Conversion rules; local time by default.

    Returns:
        The formatted string.

    Raises:
        EncodingError: If fmt is not ASCII.
        RenderError: If the native conversion fails.
    """
    return TimeFormatter(fmt, mode).render(timestamp)


def strptime(
    text: str,
    fmt: str,
    *,
    mode: TimeMode | str | bool = TimeMode.LOCAL,
) -> float:
    """Parse a string using a strptime pattern.

    Args:
        text: The string to parse.
        fmt: strptime pattern.
        mode: Conversion rules; local time by default.

    Returns:
        Seconds since the epoch.

    Raises:
        EncodingError: If text or fmt is not ASCII.
        ParseError: If the text does not match fmt.
    """
    return TimeFormatter(fmt, mode).parse(text)


__all__ = ["strftime", "strptime"]
