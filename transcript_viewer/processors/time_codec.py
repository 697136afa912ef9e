"""Conversion between seconds offsets and timestamp strings

Two styles are supported:

    DISPLAY   ``M:SS``          on-screen labels and plain-text exports
    SUBTITLE  ``HH:MM:SS,mmm``  SRT time ranges

Values are rounded to the nearest millisecond before any field is derived,
so ``encode`` never produces a ``1000`` millisecond field.
"""

import logging
import math
import re
from enum import Enum

from ..errors import InvalidTimestamp

logger = logging.getLogger(__name__)

_SUBTITLE_PATTERN = re.compile(r"^(\d+):([0-5]\d):([0-5]\d)[,.](\d{1,3})$")
_CLOCK_PATTERN = re.compile(r"^(?:(\d+):)?(\d+):([0-5]\d)$")


class TimestampStyle(str, Enum):
    DISPLAY = "display"
    SUBTITLE = "subtitle"


def _check(seconds: float) -> float:
    try:
        value = float(seconds)
    except (TypeError, ValueError):
        raise InvalidTimestamp(f"Not a number of seconds: {seconds!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidTimestamp(f"Timestamp must be a finite, non-negative number: {seconds!r}")
    return value


def sanitize_seconds(seconds: float) -> float:
    """Coerce a negative, NaN or infinite offset to 0.0

    Used by callers that must not fail on bad upstream timing.
    """
    try:
        return _check(seconds)
    except InvalidTimestamp:
        logger.warning("Replacing invalid timestamp %r with 0", seconds)
        return 0.0


def encode(seconds: float, style: TimestampStyle = TimestampStyle.SUBTITLE) -> str:
    """Format a seconds offset

    Raises:
        InvalidTimestamp: If seconds is negative or not finite
    """
    total_ms = int(round(_check(seconds) * 1000))

    if style == TimestampStyle.DISPLAY:
        total_seconds = total_ms // 1000
        return f"{total_seconds // 60}:{total_seconds % 60:02d}"

    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def decode(value: str) -> float:
    """Parse ``HH:MM:SS,mmm``, ``H:MM:SS`` or ``M:SS`` back to seconds

    Raises:
        InvalidTimestamp: If the string matches none of the formats
    """
    text = (value or "").strip()

    match = _SUBTITLE_PATTERN.match(text)
    if match:
        hours, minutes, secs, millis = match.groups()
        # "5" after the separator means 500 ms, not 5 ms
        millis = millis.ljust(3, "0")
        return int(hours) * 3600 + int(minutes) * 60 + int(secs) + int(millis) / 1000

    match = _CLOCK_PATTERN.match(text)
    if match:
        hours, minutes, secs = match.groups()
        if hours is not None and int(minutes) > 59:
            raise InvalidTimestamp(f"Malformed timestamp: {value!r}")
        return int(hours or 0) * 3600 + int(minutes) * 60 + int(secs)

    raise InvalidTimestamp(f"Malformed timestamp: {value!r}")
