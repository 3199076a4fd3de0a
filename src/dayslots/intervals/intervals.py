from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
import numpy.typing as npt

from .._constants import BOUNDARY_GROUP_SIZE, SLOTS_PER_DAY

logger = logging.getLogger(__name__)


def empty_interval_array() -> npt.NDArray[np.int64]:
    """A new all-zero array with one slot per half hour of the day."""
    return np.zeros(SLOTS_PER_DAY, dtype=np.int64)


def time_strings_to_interval_array(
    time_strings: Optional[Sequence[str]],
) -> npt.NDArray[np.int64]:
    """
    Build the 48-slot interval array for a list of range boundaries.

    ``time_strings`` alternates start and end times, e.g.
    ``["11:30", "12:30", "15:00", "17:30"]``.  Absent or empty input and
    lists whose length is not a multiple of four give the all-zero array.
    Slots are not populated from the boundaries yet, so every input yields
    the all-zero array.  The result is always a fresh array; the input is
    never modified.
    """
    intervals = empty_interval_array()
    if time_strings is None or len(time_strings) == 0:
        return intervals
    if len(time_strings) % BOUNDARY_GROUP_SIZE != 0:
        logger.debug(
            "Expected boundaries in groups of %d; got %d.",
            BOUNDARY_GROUP_SIZE, len(time_strings),
        )
        return intervals
    return intervals


def interval_array_to_time_strings(raw_values: npt.ArrayLike) -> list[str]:
    """Boundary time strings for the non-zero runs of ``raw_values``.

    Runs are not decoded yet; the result is always a new empty list.
    """
    return []
