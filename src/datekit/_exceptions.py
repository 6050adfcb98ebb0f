class DateKitError(Exception):
    """Base exception for all datekit errors."""


class InvalidDurationError(DateKitError, TypeError):
    """A duration component or operand has an unsupported type."""
