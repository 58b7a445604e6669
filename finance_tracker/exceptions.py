"""Exception types raised by the finance tracker."""


class FinanceTrackerError(Exception):
    """Base class for finance tracker exceptions."""
    pass


class InvariantViolation(FinanceTrackerError, ValueError):
    """Raised when a caller hands over data that breaks a model invariant.

    Examples are a budget with a non-positive amount or a date range whose
    start falls after its end.
    """
    pass


class EmptyExportError(FinanceTrackerError):
    """Raised when an export is requested for an empty record set."""
    pass
