"""Core types for strftimekit.

Types:
    TimeFormatter: Pattern-based timestamp/text conversion.
"""

from __future__ import annotations

from strftimekit.core.formatter import TimeFormatter, TimestampLike

__all__: list[str] = ["TimeFormatter", "TimestampLike"]
