class LunarCalError(Exception):
    """Base error."""

class InvalidDate(LunarCalError, ValueError):
    """Raised when a date cannot be converted."""

class InvalidYear(InvalidDate):
    """Year outside the 1900..2100 table range."""

class InvalidMonth(InvalidDate):
    """Month outside 1..12."""

class InvalidDay(InvalidDate):
    """Day outside the length of the resolved month."""

class InvalidLeapMonth(InvalidDate):
    """Leap flag requested for a month that is not the year's leap month."""

class DateBeforeEpoch(InvalidDate):
    """Gregorian date earlier than 1900-01-31."""

class RecordError(LunarCalError, ValueError):
    """Raised for a malformed birthday record."""
