"""Arbitrary precision decimal numbers.

A BigDecimal holds two integers:
- significant: the digits, sign included (arbitrary precision)
- exponent: the power of ten multiplying the significant

The value is ``significant * 10**exponent``. Instances are immutable; every
operation returns a new BigDecimal. The module performs no I/O and
does not log.

Construction does not normalize. ``normalized()`` strips trailing zeros from
the significant (moving them into the exponent) and maps zero to (0, 0);
operations returning clean results normalize at the end.

Usage:
    from bigdecimal import BigDecimal, RoundingMode

    price = BigDecimal.value_of("19.99")
    total = price * 3                                  # 59.97
    share = total.divide(BigDecimal.value_of(7))       # bounded precision
    share.round(RoundingMode.HALF_EVEN, precision=2)   # 8.57
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import ClassVar

from bigdecimal.constants import (
    DECIMAL_PATTERN,
    DEFAULT_PRECISION,
    DIVISION_EXTRA_DIGITS,
    SQRT_ROUNDS,
)
from bigdecimal.errors import DivisionByZero, DivisionUndefined, InvalidFormat, InvalidOperand
from bigdecimal.rounding import (
    DEFAULT_ROUNDING_MODE,
    RoundingMode,
    RoundingParams,
    round_components,
)

__all__ = ["BigDecimal"]

_DECIMAL_RE = re.compile(DECIMAL_PATTERN)


def _div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // floors toward negative infinity; the quotient of two
    significants must truncate so that sign handling stays symmetric.
    """
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def _check_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


class BigDecimal:
    """Exact decimal number: significant * 10^exponent.

    Attributes:
        significant: Signed digits of the number (read-only)
        exponent: Power of ten applied to the significant (read-only)
    """

    MINUS_ONE: ClassVar[BigDecimal]
    ZERO: ClassVar[BigDecimal]
    ZERO_DOT_FIVE: ClassVar[BigDecimal]
    ONE: ClassVar[BigDecimal]
    TWO: ClassVar[BigDecimal]
    TEN: ClassVar[BigDecimal]

    __slots__ = ("_significant", "_exponent")
    _significant: int
    _exponent: int

    def __init__(self, significant: int, exponent: int = 0) -> None:
        """Create a BigDecimal from raw components (not normalized).

        Raises:
            TypeError: If either component is not an int
        """
        self._significant = _check_int("significant", significant)
        self._exponent = _check_int("exponent", exponent)

    @property
    def significant(self) -> int:
        """Signed significant digits."""
        return self._significant

    @property
    def exponent(self) -> int:
        """Power of ten multiplying the significant."""
        return self._exponent

    # --- Construction ---

    @classmethod
    def value_of(cls, value: int | float | str | Decimal | BigDecimal) -> BigDecimal:
        """Parse a BigDecimal from an int, float, string or Decimal.

        Strings follow ``[-]digits[.digits[e[-]digits]]``; the exponent suffix
        is only accepted after a fractional part ("1.3e2").

        Floats are converted by repeated multiplication by ten until the
        value is integral, so the result carries whatever binary
        representation error the float already had (1.1 does not become
        exactly 1.1).

        Raises:
            InvalidOperand: If a float or Decimal is infinite or NaN
            InvalidFormat: If a string does not match the grammar
            TypeError: For any other input type
        """
        if isinstance(value, BigDecimal):
            return value
        if isinstance(value, bool):
            raise TypeError("BigDecimal.value_of does not accept bool")
        if isinstance(value, int):
            return cls(value, 0).normalized()
        if isinstance(value, float):
            return cls._value_of_float(value)
        if isinstance(value, str):
            return cls._value_of_string(value)
        if isinstance(value, Decimal):
            return cls._value_of_decimal(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to BigDecimal")

    @classmethod
    def _value_of_float(cls, value: float) -> BigDecimal:
        if not math.isfinite(value):
            raise InvalidOperand("NaN and infinite values are not supported")
        significant = value
        exponent = 0
        while not significant.is_integer():
            significant *= 10
            exponent -= 1
        return cls(int(significant), exponent).normalized()

    @classmethod
    def _value_of_string(cls, value: str) -> BigDecimal:
        match = _DECIMAL_RE.fullmatch(value)
        if match is None:
            raise InvalidFormat(f"Invalid decimal string: {value!r}")
        units_text, decimals_text, exponent_text = match.groups()

        units = cls(int(units_text), 0)
        if decimals_text:
            decimals = cls(int(decimals_text), -len(decimals_text))
        else:
            decimals = cls.ZERO
        # Sign comes from the text so that "-0.5" stays negative
        if units_text.startswith("-"):
            decimals = decimals.negate()

        exponent = int(exponent_text) if exponent_text else 0
        return units.add(decimals).scale_by_power_of_ten(exponent).normalized()

    @classmethod
    def _value_of_decimal(cls, value: Decimal) -> BigDecimal:
        if not value.is_finite():
            raise InvalidOperand("NaN and infinite values are not supported")
        sign, digits, exponent = value.as_tuple()
        significant = int("".join(str(d) for d in digits)) if digits else 0
        if sign:
            significant = -significant
        return cls(significant, int(exponent)).normalized()

    # --- Conversion ---

    def to_float(self) -> float:
        """Approximate value as a float. May lose precision.

        Raises:
            OverflowError: If the magnitude exceeds the float range
        """
        if self._exponent >= 0:
            return float(self._significant * 10**self._exponent)
        return self._significant / 10**-self._exponent

    # Name kept for callers used to the number() accessor
    number = to_float

    def to_decimal(self) -> Decimal:
        """Exact conversion to the standard library Decimal."""
        return Decimal(f"{self._significant}E{self._exponent}")

    def normalized(self) -> BigDecimal:
        """Trim trailing zeros off the significant.

        Returns:
            Equal value with no trailing zero digit; zero becomes (0, 0)
        """
        significant = self._significant
        exponent = self._exponent
        if significant == 0:
            return self if exponent == 0 else BigDecimal(0, 0)
        if significant % 10 != 0:
            return self
        while significant % 10 == 0:
            significant //= 10
            exponent += 1
        return BigDecimal(significant, exponent)

    # --- Arithmetic ---

    def add(self, other: BigDecimal) -> BigDecimal:
        """Sum, aligned to the smaller exponent."""
        diff = self._exponent - other._exponent
        if diff < 0:
            return other.add(self)
        significant = other._significant + self._significant * 10**diff
        return BigDecimal(significant, other._exponent).normalized()

    def subtract(self, other: BigDecimal) -> BigDecimal:
        """Difference (self - other)."""
        return self.add(other.negate())

    def negate(self) -> BigDecimal:
        """Additive inverse. Components keep their shape."""
        return BigDecimal(-self._significant, self._exponent)

    def multiply(self, other: BigDecimal) -> BigDecimal:
        """Product."""
        significant = self._significant * other._significant
        exponent = self._exponent + other._exponent
        return BigDecimal(significant, exponent).normalized()

    def divide(self, other: BigDecimal) -> BigDecimal:
        """Quotient with bounded precision.

        When the significants do not divide evenly, the dividend is scaled
        by ten at most DIVISION_EXTRA_DIGITS times looking for an exact
        quotient. If none is found the quotient is truncated toward zero,
        so 1/3 gives 0.3333333333 (ten digits). Callers needing more digits
        must scale the operands themselves.

        Raises:
            DivisionUndefined: If both operands are zero
            DivisionByZero: If only the divisor is zero
        """
        divisor = other._significant
        if divisor == 0:
            if self._significant == 0:
                raise DivisionUndefined("0/0 is undefined")
            raise DivisionByZero("Division by zero")
        if self._significant == 0:
            return BigDecimal.ZERO

        significant = self._significant
        exponent = self._exponent
        for _ in range(DIVISION_EXTRA_DIGITS):
            if significant % divisor == 0:
                break
            significant *= 10
            exponent -= 1

        quotient = _div_trunc(significant, divisor)
        return BigDecimal(quotient, exponent - other._exponent).normalized()

    def divide_to_integral_value(self, other: BigDecimal) -> BigDecimal:
        """Integer part of self / other, truncated toward zero."""
        return self.divide(other).round(RoundingMode.DOWN, precision=0)

    def remainder(self, other: BigDecimal) -> BigDecimal:
        """self - divide_to_integral_value(other) * other.

        Not a modulo: the sign follows the dividend, so -7 rem 3 is -1.
        """
        return self.subtract(self.divide_to_integral_value(other).multiply(other))

    def integral_part(self) -> BigDecimal:
        """Integer part, truncated toward zero.

        The sign matches the original so that
        ``x.integral_part() + x.decimal_part() == x``.
        """
        if self._significant < 0:
            return self.negate().integral_part().negate()
        normalized = self.normalized()
        if normalized._exponent >= 0:
            return normalized
        scale = 10**-normalized._exponent
        return BigDecimal(normalized._significant // scale, 0).normalized()

    def decimal_part(self) -> BigDecimal:
        """Fractional part, with the sign of the original."""
        if self._significant < 0:
            return self.negate().decimal_part().negate()
        normalized = self.normalized()
        if normalized._exponent >= 0:
            return BigDecimal.ZERO
        scale = 10**-normalized._exponent
        return BigDecimal(normalized._significant % scale, normalized._exponent)

    def pow(self, exponent: int) -> BigDecimal:
        """Raise to a non-negative integer power.

        Raises:
            InvalidOperand: If exponent is negative
            TypeError: If exponent is not an int
        """
        _check_int("exponent", exponent)
        if exponent < 0:
            raise InvalidOperand("Negative exponents are not supported")
        significant = self._significant**exponent
        return BigDecimal(significant, self._exponent * exponent).normalized()

    def sqrt(self) -> BigDecimal:
        """Square root by Newton's method.

        Starts from the float square root of to_float() and runs a fixed
        SQRT_ROUNDS iterations of ``g = g - (g*g - x) / (2*g)``. The
        iteration count does not adapt to convergence, and every step goes
        through divide(), so the result is an approximation whose precision
        is bounded by both.

        Raises:
            InvalidOperand: If the value is negative
        """
        if self._significant < 0:
            raise InvalidOperand("Negative numbers are not supported")
        if self._significant == 0:
            return BigDecimal.ZERO

        seed = math.sqrt(self.to_float())
        # Magnitudes below the float range underflow to 0.0
        guess = BigDecimal.value_of(seed) if seed > 0 else BigDecimal.ONE
        for _ in range(SQRT_ROUNDS):
            guess = guess.subtract(
                guess.multiply(guess).subtract(self).divide(guess.add(guess))
            )
        return guess.normalized()

    def abs(self) -> BigDecimal:
        """Absolute value."""
        if self._significant < 0:
            return self.negate()
        return self

    def signum(self) -> int:
        """-1, 0 or 1 according to sign."""
        if self._significant < 0:
            return -1
        if self._significant == 0:
            return 0
        return 1

    def scale_by_power_of_ten(self, n: int) -> BigDecimal:
        """Multiply by 10**n by shifting the exponent."""
        return BigDecimal(self._significant, self._exponent + n).normalized()

    # --- Rounding ---

    def round(
        self,
        mode: RoundingMode | str = DEFAULT_ROUNDING_MODE,
        precision: int = DEFAULT_PRECISION,
    ) -> BigDecimal:
        """Round to ``precision`` digits after the decimal point.

        Args:
            mode: Rounding mode (enum or its string value, e.g. "halfUp")
            precision: Decimal digits to keep (>= 0)

        Raises:
            pydantic.ValidationError: On unknown mode or negative precision
        """
        return self.round_with(RoundingParams(mode=mode, precision=precision))

    def round_with(self, params: RoundingParams) -> BigDecimal:
        """Round according to a validated RoundingParams."""
        return self.normalized()._round_normalized(params)

    def _round_normalized(self, params: RoundingParams) -> BigDecimal:
        significant, exponent = round_components(
            self._significant, self._exponent, params.mode, params.precision
        )
        if significant == self._significant and exponent == self._exponent:
            return self
        return BigDecimal(significant, exponent).normalized()

    # --- Comparison ---

    def compare_to(self, other: BigDecimal) -> int:
        """Three-way numeric comparison.

        Returns:
            -1, 0 or 1 if self is smaller, equal or larger
        """
        subject = self.normalized()
        target = other.normalized()
        diff = subject._exponent - target._exponent
        if diff < 0:
            return -target.compare_to(subject)
        aligned = subject._significant * 10**diff
        return (aligned > target._significant) - (aligned < target._significant)

    def equals(self, other: BigDecimal) -> bool:
        """Component-wise equality; (12, -1) and (120, -2) are not equal."""
        return self._significant == other._significant and self._exponent == other._exponent

    def equal_value(self, other: BigDecimal) -> bool:
        """Numeric equality regardless of representation."""
        return self.normalized().equals(other.normalized())

    def min(self, other: BigDecimal) -> BigDecimal:
        """Smaller of the two values (self on ties)."""
        return self if self.compare_to(other) <= 0 else other

    def max(self, other: BigDecimal) -> BigDecimal:
        """Larger of the two values (self on ties)."""
        return self if self.compare_to(other) >= 0 else other

    # --- Rendering ---

    def __str__(self) -> str:
        sign = "-" if self._significant < 0 else ""
        digits = str(abs(self._significant))
        if self._exponent > 0:
            return sign + digits + "0" * self._exponent
        if self._exponent == 0:
            return sign + digits
        # At least one integer digit before the point
        digits = digits.rjust(1 - self._exponent, "0")
        split = len(digits) + self._exponent
        return f"{sign}{digits[:split]}.{digits[split:]}"

    def __repr__(self) -> str:
        return f"BigDecimal({self._significant}, {self._exponent})"

    # --- Python numeric protocol ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, float) and not math.isfinite(other):
            return False
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return self.equal_value(target)

    def __hash__(self) -> int:
        # Consistent with int, float and Decimal hashes of equal values
        return hash(self.to_decimal())

    def __lt__(self, other: BigDecimal | int | float) -> bool:
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return self.compare_to(target) < 0

    def __le__(self, other: BigDecimal | int | float) -> bool:
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return self.compare_to(target) <= 0

    def __gt__(self, other: BigDecimal | int | float) -> bool:
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return self.compare_to(target) > 0

    def __ge__(self, other: BigDecimal | int | float) -> bool:
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return self.compare_to(target) >= 0

    def __add__(self, other: BigDecimal | int | float) -> BigDecimal:
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return self.add(target)

    def __radd__(self, other: int | float) -> BigDecimal:
        return self.__add__(other)

    def __sub__(self, other: BigDecimal | int | float) -> BigDecimal:
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return self.subtract(target)

    def __rsub__(self, other: int | float) -> BigDecimal:
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return target.subtract(self)

    def __mul__(self, other: BigDecimal | int | float) -> BigDecimal:
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return self.multiply(target)

    def __rmul__(self, other: int | float) -> BigDecimal:
        return self.__mul__(other)

    def __truediv__(self, other: BigDecimal | int | float) -> BigDecimal:
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return self.divide(target)

    def __rtruediv__(self, other: int | float) -> BigDecimal:
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return target.divide(self)

    def __floordiv__(self, other: BigDecimal | int | float) -> BigDecimal:
        """Truncating integer division (toward zero, unlike int //)."""
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return self.divide_to_integral_value(target)

    def __mod__(self, other: BigDecimal | int | float) -> BigDecimal:
        """Remainder with the sign of the dividend (unlike int %)."""
        target = _coerce(other)
        if target is None:
            return NotImplemented
        return self.remainder(target)

    def __pow__(self, exponent: int) -> BigDecimal:
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> BigDecimal:
        return self.negate()

    def __pos__(self) -> BigDecimal:
        return self

    def __abs__(self) -> BigDecimal:
        return self.abs()

    def __bool__(self) -> bool:
        return self._significant != 0

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        """Integer part, truncated toward zero."""
        integral = self.integral_part()
        return integral._significant * 10**integral._exponent

    def __round__(self, ndigits: int | None = None) -> int | BigDecimal:
        """Support for the round() builtin (half-even, like float and Decimal).

        A negative ``ndigits`` rounds to tens, hundreds, and so on.
        """
        if ndigits is None:
            return int(self.round(RoundingMode.HALF_EVEN, precision=0))
        if ndigits < 0:
            shifted = self.scale_by_power_of_ten(ndigits)
            rounded = shifted.round(RoundingMode.HALF_EVEN, precision=0)
            return rounded.scale_by_power_of_ten(-ndigits)
        return self.round(RoundingMode.HALF_EVEN, precision=ndigits)


def _coerce(value: object) -> BigDecimal | None:
    """Convert an operator operand to BigDecimal, or None if unsupported.

    Floats are taken at their exact binary value (as Decimal(float) does),
    so mixed comparisons agree with the float's hash.
    """
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return BigDecimal.value_of(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidOperand("NaN and infinite values are not supported")
        return BigDecimal.value_of(Decimal(value))
    return None


BigDecimal.MINUS_ONE = BigDecimal(-1, 0)
BigDecimal.ZERO = BigDecimal(0, 0)
BigDecimal.ZERO_DOT_FIVE = BigDecimal(5, -1)
BigDecimal.ONE = BigDecimal(1, 0)
BigDecimal.TWO = BigDecimal(2, 0)
BigDecimal.TEN = BigDecimal(1, 1)
