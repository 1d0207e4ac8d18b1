class AmlichError(Exception):
    """Base error."""

class InvalidLunarDateError(AmlichError, ValueError):
    """Raised when a lunar date cannot exist (e.g. a leap month the year does not have)."""
