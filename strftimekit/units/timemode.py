"""TimeMode enumeration for broken-down time conversion.

This module provides the TimeMode enum selecting whether conversions
to and from broken-down time follow UTC or the host's local zone.
"""

from __future__ import annotations

from enum import Enum


class TimeMode(Enum):
    """Timezone rules applied when converting to and from broken-down time.

    LOCAL uses the process's configured zone (the TZ environment variable
    or the system default), including its daylight-saving rules.
    UNIVERSAL uses UTC with no timezone database lookups.

    Examples:
        >>> TimeMode.coerce("universal")
        <TimeMode.UNIVERSAL: 'universal'>

        >>> TimeMode.coerce(True).is_universal
        True
    """

    LOCAL = "local"
    UNIVERSAL = "universal"

    @property
    def is_universal(self) -> bool:
        """Return True for UNIVERSAL."""
        return self is TimeMode.UNIVERSAL

    @classmethod
    def coerce(cls, value: TimeMode | str | bool) -> TimeMode:
        """Convert a mode-like value to a TimeMode.

        Args:
            value: A TimeMode, its string value (case-insensitive), or a
                bool meaning "use universal time".

        Returns:
            The matching TimeMode.

        Raises:
            TypeError: If value has an unsupported type.
            ValueError: If a string does not name a mode.
        """
        if isinstance(value, TimeMode):
            return value
        if isinstance(value, bool):
            return cls.UNIVERSAL if value else cls.LOCAL
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                raise ValueError(
                    f"unknown time mode {value!r}; "
                    f"expected one of {[m.value for m in cls]}"
                ) from None
        raise TypeError(
            f"time mode must be TimeMode, str or bool, got {type(value).__name__}"
        )


__all__ = ["TimeMode"]
