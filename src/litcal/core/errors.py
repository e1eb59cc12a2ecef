class LitcalError(Exception):
    """Base error."""

class RangeError(LitcalError, ValueError):
    """Raised when a year falls outside the Gregorian computus (before 1583, or past 9999)."""
