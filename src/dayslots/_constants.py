"""Fixed dimensions and literals of the half-hour day grid."""

import re

SLOTS_PER_DAY = 48
"""Number of half-hour slots in an interval array."""

HOURS_PER_SLOT = 24 / SLOTS_PER_DAY

MIDNIGHT = "24:00"
"""End-of-day literal accepted alongside 00:00-23:59."""

BOUNDARY_GROUP_SIZE = 4
"""Boundary lists must come in whole groups of (start, end, start, end)."""

TIME_STRING_PATTERN = re.compile(r"([01]?[0-9]|2[0-3]):([0-5][0-9])")
