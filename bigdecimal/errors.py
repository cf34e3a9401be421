"""BigDecimal error classes.

Every failure is raised synchronously to the caller; nothing is retried
or recovered inside the library.
"""


class BigDecimalError(ArithmeticError):
    """Base class for BigDecimal arithmetic errors."""

    pass


class InvalidOperand(BigDecimalError, ValueError):
    """Operand outside the domain of the operation.

    Raised for non-finite floats, negative ``pow`` exponents and negative
    ``sqrt`` operands.
    """

    pass


class InvalidFormat(BigDecimalError, ValueError):
    """String does not match the accepted decimal grammar."""

    pass


class DivisionUndefined(BigDecimalError):
    """Both dividend and divisor are zero (0/0)."""

    pass


class DivisionByZero(BigDecimalError, ZeroDivisionError):
    """Divisor is zero and dividend is not."""

    pass


__all__ = [
    "BigDecimalError",
    "InvalidOperand",
    "InvalidFormat",
    "DivisionUndefined",
    "DivisionByZero",
]
