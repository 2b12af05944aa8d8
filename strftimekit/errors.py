"""strftimekit exception hierarchy.

All strftimekit-specific exceptions inherit from FormatterError.
"""

from __future__ import annotations


class FormatterError(Exception):
    """Base exception for all strftimekit errors."""

    pass


class EncodingError(FormatterError):
    """Text cannot be carried through the native routines.

    The C time functions work on NUL-terminated ASCII strings, so both
    the format pattern and the parsed text must fit that encoding.

    Examples:
        - Pattern containing a non-ASCII character ("%Y年")
        - Input text containing an embedded NUL
        - Rendered output that is not valid ASCII
    """

    pass


class ParseError(FormatterError):
    """Failed to parse a string with the configured pattern.

    Examples:
        - Text that does not match the pattern's directives
        - Any parse against an empty pattern
    """

    pass


class RenderError(FormatterError):
    """Failed to render a timestamp with the configured pattern.

    Examples:
        - Expansion that does not fit the fixed render buffer
        - Timestamp outside the host's time_t range
        - Year that the host cannot represent in a broken-down time
    """

    pass


class NativeLibraryError(FormatterError):
    """The C library or one of its time functions is unavailable."""

    pass


__all__ = [
    "FormatterError",
    "EncodingError",
    "ParseError",
    "RenderError",
    "NativeLibraryError",
]
