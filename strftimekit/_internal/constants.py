"""Internal constants for strftimekit.

These constants define the defaults and fixed limits used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# ISO 8601 with a numeric UTC offset
DEFAULT_FORMAT: str = "%Y-%m-%dT%H:%M:%S%z"

# Capacity handed to strftime, terminating NUL included. Expansions that
# do not fit fail instead of growing the buffer.
RENDER_BUFFER_SIZE: int = 80

PATTERN_ENCODING: str = "ascii"

NUL: bytes = b"\x00"
