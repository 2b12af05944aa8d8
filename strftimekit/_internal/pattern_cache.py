"""Instance-owned cache of the ASCII-encoded format pattern.

The native routines take the pattern as a NUL-terminated ASCII string.
PatternCache keeps the encoding of the most recent pattern so that a
formatter reused for many timestamps encodes its pattern once.

Entries are immutable and published with a single attribute assignment,
so concurrent readers see either the previous entry or the new one.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from strftimekit._internal.constants import NUL, PATTERN_ENCODING
from strftimekit.errors import EncodingError

logger = logging.getLogger(__name__)


def encode_ascii(text: str, what: str = "text") -> bytes:
    """Encode text as ASCII for a C string.

    Args:
        text: The string to encode.
        what: Description used in error messages.

    Returns:
        The encoded bytes, without a terminator.

    Raises:
        TypeError: If text is not a str.
        EncodingError: If text contains a non-ASCII character or a NUL.

    Examples:
        >>> encode_ascii("%Y-%m-%d")
        b'%Y-%m-%d'
    """
    if not isinstance(text, str):
        raise TypeError(f"{what} must be a str, got {type(text).__name__}")
    try:
        data = text.encode(PATTERN_ENCODING)
    except UnicodeEncodeError as e:
        raise EncodingError(
            f"{what} {text!r} contains non-ASCII character "
            f"{text[e.start]!r} at position {e.start}"
        ) from e
    if NUL in data:
        raise EncodingError(
            f"{what} {text!r} contains a NUL at position {data.index(NUL)}"
        )
    return data


@dataclass(frozen=True)
class EncodedPattern:
    """A format pattern encoded for the native routines.

    Attributes:
        fingerprint: The source pattern this entry was derived from.
        data: ASCII bytes of the pattern followed by a NUL sentinel.
    """

    fingerprint: str
    data: bytes

    @classmethod
    def from_pattern(cls, pattern: str) -> EncodedPattern:
        return cls(pattern, encode_ascii(pattern, "format pattern") + NUL)

    @property
    def is_empty(self) -> bool:
        return self.data == NUL

    def matches(self, pattern: str) -> bool:
        return self.fingerprint == pattern


class PatternCache:
    """Holds at most one EncodedPattern, replaced when the pattern changes.

    Examples:
        >>> cache = PatternCache()
        >>> entry = cache.lookup("%Y")
        >>> entry.data
        b'%Y\\x00'
        >>> cache.lookup("%Y") is entry
        True
    """

    __slots__ = ("_entry",)

    def __init__(self) -> None:
        self._entry: EncodedPattern | None = None

    @property
    def current(self) -> EncodedPattern | None:
        """Return the cached entry, or None before the first lookup."""
        return self._entry

    def lookup(self, pattern: str) -> EncodedPattern:
        """Return the encoding of pattern, rebuilding the entry if stale.

        Raises:
            EncodingError: If pattern cannot be encoded. The previous
                entry is kept.
        """
        entry = self._entry
        if entry is not None and entry.matches(pattern):
            return entry

        fresh = EncodedPattern.from_pattern(pattern)
        logger.debug(
            "re-encoding format pattern %r (was %r)",
            pattern,
            None if entry is None else entry.fingerprint,
        )
        self._entry = fresh
        return fresh

    def clear(self) -> None:
        self._entry = None

    def __repr__(self) -> str:
        return f"PatternCache({self._entry!r})"


__all__ = ["EncodedPattern", "PatternCache", "encode_ascii"]
