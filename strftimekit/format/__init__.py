"""One-shot formatting and parsing.

Functions:
    strftime: Render a timestamp using a strftime pattern.
    strptime: Parse a string using a strptime pattern.
"""

from __future__ import annotations

from strftimekit.format.strftime import strftime, strptime

__all__: list[str] = ["strftime", "strptime"]
