"""
dayslots.timestring
~~~~~~~~~~~~~~~~~~~

Conversion between ``"HH:MM"`` time strings and decimal hours since
midnight, plus format checks for single times and ``"HH:MM-HH:MM"`` ranges.

Basic usage::

    from dayslots.timestring import time_string_to_decimal, decimal_to_time_string

    time_string_to_decimal("13:30")     # → 13.5
    time_string_to_decimal("99:99")     # → None
    decimal_to_time_string(13.5)        # → "13:30"

The lenient converters never raise; they return ``None`` or ``False`` on bad
input.  ``parse_time_string`` and ``time_range_string_to_decimals`` are the
strict variants and raise ``TimeConversionError`` subclasses instead.
"""

from __future__ import annotations

from dayslots.timestring.timestring import (
    decimal_to_time_string,
    is_valid_time_range_string,
    is_valid_time_string,
    parse_time_string,
    time_range_string_to_decimals,
    time_string_to_decimal,
)

__all__ = [
    "decimal_to_time_string",
    "is_valid_time_range_string",
    "is_valid_time_string",
    "parse_time_string",
    "time_range_string_to_decimals",
    "time_string_to_decimal",
]
