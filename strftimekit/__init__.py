"""strftimekit: strftime/strptime conversion through the host C library.

strftimekit renders POSIX timestamps and parses strings with the C
library's own strftime and strptime, so output matches the platform
byte for byte.

Core Types:
    TimeFormatter: Reusable pattern + time mode, with a cached encoding

Units:
    TimeMode: LOCAL or UNIVERSAL conversion rules

Format Functions:
    strftime: One-shot render
    strptime: One-shot parse

Exceptions:
    FormatterError: Base exception
    EncodingError: Pattern or text outside ASCII
    ParseError: Text does not match the pattern
    RenderError: Timestamp cannot be rendered
    NativeLibraryError: C time routines unavailable

Example:
    >>> from strftimekit import TimeFormatter
    >>> fmt = TimeFormatter.utc("%Y-%m-%dT%H:%M:%SZ")
    >>> fmt.render(fmt.parse("2024-01-15T14:30:25Z"))
    '2024-01-15T14:30:25Z'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Units
from strftimekit.units.timemode import TimeMode

# Exceptions
from strftimekit.errors import (
    EncodingError,
    FormatterError,
    NativeLibraryError,
    ParseError,
    RenderError,
)

# Core types
from strftimekit.core.formatter import TimeFormatter

# Format functions
from strftimekit.format import strftime, strptime

__all__: list[str] = [
    "__version__",
    # Core types
    "TimeFormatter",
    # Units
    "TimeMode",
    # Exceptions
    "FormatterError",
    "EncodingError",
    "ParseError",
    "RenderError",
    "NativeLibraryError",
    # Format functions
    "strftime",
    "strptime",
]
