"""Exception hierarchy for the strict conversion helpers."""


class TimeConversionError(ValueError):
    """Base exception for all dayslots errors."""


class InvalidTimeStringError(TimeConversionError):
    """Raised when text is not an ``HH:MM`` time string or ``24:00``."""


class InvalidTimeRangeError(TimeConversionError):
    """Raised when text is not an ``HH:MM-HH:MM`` time range."""
