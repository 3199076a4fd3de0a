"""
dayslots.intervals
~~~~~~~~~~~~~~~~~~

Half-hour interval arrays: 48 integer slots covering one day, slot 0 being
00:00–00:30 and slot 47 being 23:30–24:00.  Each slot holds a category index
for its half hour (0 = off).

Basic usage::

    from dayslots.intervals import time_strings_to_interval_array

    slots = time_strings_to_interval_array(["08:00", "12:00", "13:00", "17:00"])
    slots.shape                         # → (48,)

Every call returns a freshly allocated ``numpy.ndarray``.
"""

from __future__ import annotations

from dayslots.intervals.intervals import (
    empty_interval_array,
    interval_array_to_time_strings,
    time_strings_to_interval_array,
)

__all__ = [
    "empty_interval_array",
    "interval_array_to_time_strings",
    "time_strings_to_interval_array",
]
