"""Unit types for strftimekit.

Types:
    TimeMode: UTC or local-zone conversion rules.
"""

from __future__ import annotations

from strftimekit.units.timemode import TimeMode

__all__: list[str] = ["TimeMode"]
