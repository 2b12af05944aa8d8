"""ctypes binding of the C library's broken-down time routines.

This module exposes thin wrappers over strptime, strftime, timegm,
mktime, gmtime_r, localtime_r and tzset. The wrappers own every buffer
and struct they hand to C, and report native failures as None rather
than raising, leaving policy to the caller.

The library is loaded once at import time. Hosts whose C library lacks
any of the routines (notably Windows, which has no strptime) fail the
import with NativeLibraryError.

This module is not part of the public API.
"""

from __future__ import annotations

import ctypes
import ctypes.util
import logging

from strftimekit.errors import NativeLibraryError

logger = logging.getLogger(__name__)

# time_t is a long on every supported POSIX ABI
time_t = ctypes.c_long

# tm_gmtoff before strptime; a different value afterwards means %z (or %s)
# supplied an offset
GMTOFF_UNSET: int = -(1 << 31)


class StructTm(ctypes.Structure):
    """C ``struct tm`` in its BSD/glibc layout.

    A freshly constructed instance is zero-filled, matching a
    value-initialized ``struct tm`` in C.
    """

    _fields_ = [
        ("tm_sec", ctypes.c_int),
        ("tm_min", ctypes.c_int),
        ("tm_hour", ctypes.c_int),
        ("tm_mday", ctypes.c_int),
        ("tm_mon", ctypes.c_int),
        ("tm_year", ctypes.c_int),
        ("tm_wday", ctypes.c_int),
        ("tm_yday", ctypes.c_int),
        ("tm_isdst", ctypes.c_int),
        ("tm_gmtoff", ctypes.c_long),
        ("tm_zone", ctypes.c_char_p),
    ]

    def __repr__(self) -> str:
        return (
            f"StructTm({self.tm_year + 1900:04d}-{self.tm_mon + 1:02d}-"
            f"{self.tm_mday:02d} {self.tm_hour:02d}:{self.tm_min:02d}:"
            f"{self.tm_sec:02d}, isdst={self.tm_isdst}, gmtoff={self.tm_gmtoff})"
        )


_TM_P = ctypes.POINTER(StructTm)
_TIME_T_P = ctypes.POINTER(time_t)

_PROTOTYPES: dict[str, tuple[list, object]] = {
    "strptime": ([ctypes.c_char_p, ctypes.c_char_p, _TM_P], ctypes.c_void_p),
    "strftime": (
        [ctypes.POINTER(ctypes.c_char), ctypes.c_size_t, ctypes.c_char_p, _TM_P],
        ctypes.c_size_t,
    ),
    "timegm": ([_TM_P], time_t),
    "mktime": ([_TM_P], time_t),
    "gmtime_r": ([_TIME_T_P, _TM_P], ctypes.c_void_p),
    "localtime_r": ([_TIME_T_P, _TM_P], ctypes.c_void_p),
    "tzset": ([], None),
}


def _open_library() -> ctypes.CDLL:
    """Open the C library, trying the running process first."""
    candidates: list[str | None] = [None]
    found = ctypes.util.find_library("c")
    if found:
        candidates.append(found)

    errors: list[str] = []
    for name in candidates:
        try:
            lib = ctypes.CDLL(name)
        except (OSError, TypeError) as e:
            errors.append(f"{name or '<process>'}: {e}")
            continue
        if all(hasattr(lib, symbol) for symbol in _PROTOTYPES):
            logger.debug("loaded C time routines from %s", name or "<process>")
            return lib
        missing = [s for s in _PROTOTYPES if not hasattr(lib, s)]
        errors.append(f"{name or '<process>'}: missing {', '.join(missing)}")

    raise NativeLibraryError(
        "no C library with strptime/strftime/timegm/mktime found: "
        + "; ".join(errors)
    )


def _load() -> ctypes.CDLL:
    lib = _open_library()
    for symbol, (argtypes, restype) in _PROTOTYPES.items():
        func = getattr(lib, symbol)
        func.argtypes = argtypes
        func.restype = restype
    return lib


_libc = _load()


def time_t_bounds() -> tuple[int, int]:
    """Return the inclusive (min, max) range of the host's time_t."""
    bits = ctypes.sizeof(time_t) * 8
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def parse_into(text: bytes, pattern: bytes) -> StructTm | None:
    """Run strptime over text into a fresh struct tm.

    The struct is zero-filled except tm_isdst, preset to -1, and
    tm_gmtoff, preset to GMTOFF_UNSET. strptime leaves fields it does not
    parse untouched, so both show whether the text carried DST or offset
    information.

    Args:
        text: ASCII input.
        pattern: NUL-terminated ASCII pattern.

    Returns:
        The filled struct, or None when strptime reports no match.
    """
    tm = StructTm(tm_isdst=-1, tm_gmtoff=GMTOFF_UNSET)
    if _libc.strptime(text, pattern, ctypes.byref(tm)) is None:
        return None
    return tm


def format_tm(tm: StructTm, pattern: bytes, size: int) -> bytes | None:
    """Run strftime into a buffer of exactly size bytes.

    Returns:
        The bytes written (without the terminating NUL), or None when
        strftime wrote nothing.
    """
    buf = ctypes.create_string_buffer(size)
    written = _libc.strftime(buf, size, pattern, ctypes.byref(tm))
    if written == 0:
        return None
    return buf.raw[:written]


def utc_to_tm(seconds: int) -> StructTm | None:
    """Break seconds since the epoch down as UTC (gmtime_r)."""
    tm = StructTm()
    if _libc.gmtime_r(ctypes.byref(time_t(seconds)), ctypes.byref(tm)) is None:
        return None
    return tm


def local_to_tm(seconds: int) -> StructTm | None:
    """Break seconds since the epoch down in the local zone (localtime_r).

    tzset runs first so a changed TZ environment variable is honored,
    as it is by plain localtime.
    """
    _libc.tzset()
    tm = StructTm()
    if _libc.localtime_r(ctypes.byref(time_t(seconds)), ctypes.byref(tm)) is None:
        return None
    return tm


def copy_tm(tm: StructTm) -> StructTm:
    """Return an independent copy of a struct tm."""
    return StructTm.from_buffer_copy(tm)


def tm_to_utc(tm: StructTm) -> int:
    """Convert a broken-down UTC time to seconds (timegm)."""
    return _libc.timegm(ctypes.byref(tm))


def tm_to_local(tm: StructTm) -> int:
    """Convert a broken-down local time to seconds (mktime).

    mktime normalizes the struct in place.
    """
    return _libc.mktime(ctypes.byref(tm))


__all__ = [
    "StructTm",
    "time_t",
    "GMTOFF_UNSET",
    "copy_tm",
    "time_t_bounds",
    "parse_into",
    "format_tm",
    "utc_to_tm",
    "local_to_tm",
    "tm_to_utc",
    "tm_to_local",
]
