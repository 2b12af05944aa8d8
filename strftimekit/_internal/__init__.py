"""Internal utilities for strftimekit.

This module contains private implementation details:
    - Constants and fixed limits
    - The encoded-pattern cache
    - The ctypes binding of the C time routines

Note: This module is not part of the public API.
"""

from __future__ import annotations

from strftimekit._internal.pattern_cache import (
    EncodedPattern,
    PatternCache,
    encode_ascii,
)

__all__: list[str] = [
    "EncodedPattern",
    "PatternCache",
    "encode_ascii",
]
