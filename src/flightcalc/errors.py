"""Exceptions raised by the flight calculators.

Two kinds of failure exist: the command line could not be understood
(`UsageError`) or a parsed value is outside the domain a formula accepts
(`DomainError`). Both are reported the same way by the CLI harness.
"""


class CalculatorError(Exception):
    """Base class for calculator failures."""


class UsageError(CalculatorError):
    """Raised for a wrong argument count, unknown option or unparsable number."""


class DomainError(CalculatorError):
    """Raised when a parsed input violates a calculator precondition.

    Examples:
        >>> raise DomainError("TAS must be positive")
    """
