from __future__ import annotations

import logging
import math
from typing import Any, Optional

from .._constants import MIDNIGHT, TIME_STRING_PATTERN
from .._exceptions import InvalidTimeRangeError, InvalidTimeStringError

logger = logging.getLogger(__name__)


def decimal_to_time_string(value: float) -> Optional[str]:
    """
    Render decimal hours as ``"H:M"`` text for display.

    Hours and minutes are not zero padded, so ``13.5`` gives ``"13:30"`` and
    ``13.05`` gives ``"13:3"``.  Minutes are rounded half up.  Negative or
    non-finite input yields ``None``.
    """
    if value < 0 or not math.isfinite(value):
        logger.debug("Cannot render %r as a time string.", value)
        return None
    hours = math.floor(value)
    minutes = math.floor((value % 1) * 60 + 0.5)
    return f"{hours}:{minutes}"


def parse_time_string(time_string: str) -> tuple[int, int]:
    """Split a valid time string into ``(hours, minutes)``.

    Raises:
        InvalidTimeStringError: If ``time_string`` is not ``HH:MM`` or ``24:00``.
    """
    if time_string == MIDNIGHT:
        return 24, 0
    match = (
        TIME_STRING_PATTERN.fullmatch(time_string)
        if isinstance(time_string, str)
        else None
    )
    if match is None:
        raise InvalidTimeStringError(f"Not a valid time string: {time_string!r}.")
    return int(match.group(1)), int(match.group(2))


def time_string_to_decimal(time_string: Optional[str]) -> Optional[float]:
    """Hours since midnight for ``time_string``; ``None`` if absent or invalid."""
    if time_string is None:
        return None
    try:
        hours, minutes = parse_time_string(time_string)
    except InvalidTimeStringError:
        logger.debug("Rejected time string %r.", time_string)
        return None
    return hours + minutes / 60


def is_valid_time_string(time_string: Any) -> bool:
    if not isinstance(time_string, str):
        return False
    return (
        TIME_STRING_PATTERN.fullmatch(time_string) is not None
        or time_string == MIDNIGHT
    )


def is_valid_time_range_string(range_string: Any) -> bool:
    """
    True for ``"HH:MM-HH:MM"`` where both ends are valid time strings.

    Only the first two hyphen-separated parts are checked; anything after a
    second hyphen is ignored.
    """
    if not isinstance(range_string, str):
        return False
    parts = range_string.split("-")
    if len(parts) < 2:
        return False
    return is_valid_time_string(parts[0]) and is_valid_time_string(parts[1])


def time_range_string_to_decimals(range_string: str) -> tuple[float, float]:
    """Parse ``"HH:MM-HH:MM"`` into ``(start, end)`` decimal hours.

    Raises:
        InvalidTimeRangeError: If ``range_string`` fails
            :func:`is_valid_time_range_string`.
    """
    if not is_valid_time_range_string(range_string):
        raise InvalidTimeRangeError(f"Not a valid time range: {range_string!r}.")
    start, end = range_string.split("-")[:2]
    return time_string_to_decimal(start), time_string_to_decimal(end)
