"""
dayslots
~~~~~~~~

Converters between the three ways a day's schedule is written down:
``"HH:MM"`` time strings, decimal hours since midnight and 48-slot
half-hour interval arrays.

Public API
----------
decimal_to_time_string          13.5 → "13:30"
time_string_to_decimal          "13:30" → 13.5
time_strings_to_interval_array  boundary list → 48-slot array
interval_array_to_time_strings  48-slot array → boundary list
is_valid_time_string            "HH:MM" / "24:00" check
is_valid_time_range_string      "HH:MM-HH:MM" check
TimeConversionError             Base exception for the strict helpers.
"""

from __future__ import annotations

import logging

from dayslots._exceptions import (
    InvalidTimeRangeError,
    InvalidTimeStringError,
    TimeConversionError,
)
from dayslots.intervals import (
    empty_interval_array,
    interval_array_to_time_strings,
    time_strings_to_interval_array,
)
from dayslots.timestring import (
    decimal_to_time_string,
    is_valid_time_range_string,
    is_valid_time_string,
    parse_time_string,
    time_range_string_to_decimals,
    time_string_to_decimal,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "decimal_to_time_string",
    "empty_interval_array",
    "interval_array_to_time_strings",
    "is_valid_time_range_string",
    "is_valid_time_string",
    "parse_time_string",
    "time_range_string_to_decimals",
    "time_string_to_decimal",
    "time_strings_to_interval_array",
    "InvalidTimeRangeError",
    "InvalidTimeStringError",
    "TimeConversionError",
]
