class NhmoonError(Exception):
    """Base error."""

class InvalidDateError(NhmoonError, ValueError):
    """Raised for a malformed date or a year/month/day outside the calendar."""

class OutOfRangeError(NhmoonError, ArithmeticError):
    """Raised when an ordinal falls outside years -9999..9999."""

class UnknownPhaseModelError(NhmoonError, KeyError):
    """Raised when a phase model name is not registered."""
