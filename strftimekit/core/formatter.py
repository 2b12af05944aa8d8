"""TimeFormatter: strftime/strptime conversion of POSIX timestamps.

This module provides the TimeFormatter class, which renders timestamps
and parses strings through the host C library's strftime and strptime.
Output is byte-identical to the native routines, directive vocabulary
and leniency included.

Examples:
    >>> from strftimekit import TimeFormatter, TimeMode
    >>> fmt = TimeFormatter(time_mode=TimeMode.UNIVERSAL)
    >>> fmt.parse("2024-01-15T14:30:25+0000")
    1705329025.0
    >>> fmt.render(1705329025)
    '2024-01-15T14:30:25+0000'
"""

from __future__ import annotations

import datetime
import logging
import math
from typing import Union

from strftimekit._internal import libc
from strftimekit._internal.constants import (
    DEFAULT_FORMAT,
    PATTERN_ENCODING,
    RENDER_BUFFER_SIZE,
)
from strftimekit._internal.pattern_cache import PatternCache, encode_ascii
from strftimekit.errors import (
    EncodingError,
    FormatterError,
    ParseError,
    RenderError,
)
from strftimekit.units.timemode import TimeMode

logger = logging.getLogger(__name__)

# Type alias for values accepted as a timestamp
TimestampLike = Union[int, float, datetime.datetime]


class TimeFormatter:
    """Converts between POSIX timestamps and text using a strftime pattern.

    A formatter holds a format pattern and a TimeMode. Both may be
    changed at any time and take effect on the next conversion; neither
    is validated on assignment, so a bad directive surfaces as a
    ParseError or RenderError.

    The pattern's ASCII encoding is cached per instance and rebuilt only
    when the pattern changes.

    Attributes:
        format_string: The strftime/strptime pattern.
        time_mode: LOCAL or UNIVERSAL conversion rules.
        use_universal_time: Boolean view of time_mode.

    Examples:
        >>> fmt = TimeFormatter("%Y-%m-%d", TimeMode.UNIVERSAL)
        >>> fmt.render(0)
        '1970-01-01'

        >>> fmt.format_string = "%H:%M"
        >>> fmt.render(3600)
        '01:00'
    """

    __slots__ = ("_format_string", "_time_mode", "_cache")

    def __init__(
        self,
        format_string: str = DEFAULT_FORMAT,
        time_mode: TimeMode | str | bool = TimeMode.LOCAL,
    ) -> None:
        """Create a formatter.

        Args:
            format_string: strftime/strptime pattern. Defaults to ISO 8601
                with a numeric offset.
            time_mode: A TimeMode, its string value, or True for UTC.
        """
        self._format_string: str = format_string
        self._time_mode: TimeMode = TimeMode.coerce(time_mode)
        self._cache: PatternCache = PatternCache()

    @classmethod
    def utc(cls, format_string: str = DEFAULT_FORMAT) -> TimeFormatter:
        """Create a formatter that converts in UTC.

        Examples:
            >>> TimeFormatter.utc("%Y").render(0)
            '1970'
        """
        return cls(format_string, TimeMode.UNIVERSAL)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def format_string(self) -> str:
        return self._format_string

    @format_string.setter
    def format_string(self, value: str) -> None:
        self._format_string = value

    @property
    def time_mode(self) -> TimeMode:
        return self._time_mode

    @time_mode.setter
    def time_mode(self, value: TimeMode | str | bool) -> None:
        self._time_mode = TimeMode.coerce(value)

    @property
    def use_universal_time(self) -> bool:
        return self._time_mode.is_universal

    @use_universal_time.setter
    def use_universal_time(self, value: bool) -> None:
        self._time_mode = TimeMode.coerce(bool(value))

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def parse(self, text: str) -> float:
        """Parse text into seconds since the epoch.

        The text is matched by the C library's strptime. Whatever it
        accepts is accepted here, including trailing characters after
        the last directive and out-of-range days that the following
        timegm/mktime call normalizes.

        In UNIVERSAL mode the fields are read as UTC; an offset parsed by
        %z is ignored, as timegm ignores it. In LOCAL mode a DST flag set by
        strptime (as %s does) is kept. Otherwise a %z offset that the zone
        actually uses at the denoted instant fixes the instant, which
        settles the repeated hour at a fall-back change. Failing both, the host
        zone decides whether daylight saving applies.

        Args:
            text: ASCII text matching the pattern.

        Returns:
            Seconds since 1970-01-01T00:00:00Z.

        Raises:
            EncodingError: If text or the pattern is not ASCII.
            ParseError: If strptime finds no match, or the pattern is empty.

        Examples:
            >>> TimeFormatter.utc("%Y-%m-%d").parse("1970-01-02")
            86400.0
        """
        data = encode_ascii(text, "input text")
        pattern = self._cache.lookup(self._format_string)

        if pattern.is_empty:
            logger.debug("parse of %r against an empty pattern", text)
            raise ParseError(f"string {text!r} cannot match an empty pattern")

        tm = libc.parse_into(data, pattern.data)
        if tm is None:
            logger.debug("strptime rejected %r with %r", text, self._format_string)
            raise ParseError(
                f"string {text!r} does not match format {self._format_string!r}"
            )

        if self._time_mode.is_universal:
            seconds = libc.tm_to_utc(tm)
        elif tm.tm_isdst < 0 and tm.tm_gmtoff != libc.GMTOFF_UNSET:
            seconds = _local_with_offset(tm)
        else:
            seconds = libc.tm_to_local(tm)
        return float(seconds)

    def render(self, timestamp: TimestampLike) -> str:
        """Render a timestamp with the pattern.

        Sub-second precision is truncated toward zero. The expansion must
        fit the fixed render buffer (79 characters); longer results fail
        rather than being truncated.

        Args:
            timestamp: Seconds since the epoch, or a datetime.

        Returns:
            The formatted string. An empty pattern yields "".

        Raises:
            EncodingError: If the pattern is not ASCII, or the output is
                not valid ASCII.
            RenderError: If the timestamp cannot be broken down on this
                host, or strftime wrote nothing.

        Examples:
            >>> TimeFormatter.utc("%Y-%m-%d %H:%M:%S").render(-1)
            '1969-12-31 23:59:59'
        """
        seconds = _to_time_t(timestamp)

        if self._time_mode.is_universal:
            tm = libc.utc_to_tm(seconds)
        else:
            tm = libc.local_to_tm(seconds)
        if tm is None:
            logger.debug("cannot break down %r in %s mode", seconds, self._time_mode.value)
            raise RenderError(
                f"timestamp {seconds} cannot be converted to "
                f"{self._time_mode.value} time on this host"
            )

        pattern = self._cache.lookup(self._format_string)
        if pattern.is_empty:
            return ""

        raw = libc.format_tm(tm, pattern.data, RENDER_BUFFER_SIZE)
        if raw is None:
            logger.debug("strftime wrote nothing for %r", self._format_string)
            raise RenderError(
                f"format {self._format_string!r} produced no output; its "
                f"expansion must fit in {RENDER_BUFFER_SIZE - 1} characters"
            )

        try:
            return raw.decode(PATTERN_ENCODING)
        except UnicodeDecodeError as e:
            raise EncodingError(f"rendered output {raw!r} is not ASCII") from e

    def try_parse(self, text: str) -> float | None:
        """Like parse(), but return None instead of raising FormatterError."""
        try:
            return self.parse(text)
        except FormatterError:
            return None

    def try_render(self, timestamp: TimestampLike) -> str | None:
        """Like render(), but return None instead of raising FormatterError."""
        try:
            return self.render(timestamp)
        except FormatterError:
            return None

    # -------------------------------------------------------------------------
    # Duplication
    # -------------------------------------------------------------------------

    def copy(self) -> TimeFormatter:
        """Return an independent formatter with the same configuration.

        The copy starts with an empty pattern cache.
        """
        return type(self)(self._format_string, self._time_mode)

    def __copy__(self) -> TimeFormatter:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> TimeFormatter:
        return self.copy()

    def __repr__(self) -> str:
        return (
            f"TimeFormatter({self._format_string!r}, "
            f"time_mode=TimeMode.{self._time_mode.name})"
        )


def _local_with_offset(tm: libc.StructTm) -> int:
    """Convert local wall time carrying a parsed UTC offset.

    The instant is the wall time read as UTC minus the offset, provided
    the local zone uses that offset at that instant. Otherwise mktime
    decides, as it would without the offset.
    """
    offset = tm.tm_gmtoff
    seconds = libc.tm_to_utc(libc.copy_tm(tm)) - offset
    check = libc.local_to_tm(seconds)
    if check is not None and check.tm_gmtoff == offset:
        return seconds
    logger.debug("offset %d is not a local offset here; mktime decides", offset)
    return libc.tm_to_local(tm)


def _to_time_t(timestamp: TimestampLike) -> int:
    """Truncate a timestamp to a time_t value.

    Raises:
        TypeError: If timestamp is not a number or datetime.
        RenderError: If timestamp is not finite or outside time_t.
    """
    if isinstance(timestamp, datetime.datetime):
        timestamp = timestamp.timestamp()
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        raise TypeError(
            f"timestamp must be int, float or datetime, got {type(timestamp).__name__}"
        )
    if isinstance(timestamp, float) and not math.isfinite(timestamp):
        raise RenderError(f"timestamp {timestamp} is not finite")

    seconds = int(timestamp)
    low, high = libc.time_t_bounds()
    if not low <= seconds <= high:
        raise RenderError(f"timestamp {seconds} is outside the host's time_t range")
    return seconds


__all__ = ["TimeFormatter", "TimestampLike"]
