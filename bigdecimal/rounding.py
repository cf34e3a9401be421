"""Rounding engine for BigDecimal.

Rounding works on the (significant, exponent) components of a normalized
value and keeps ``precision`` digits after the decimal point:

    excess = -exponent - precision

When ``excess <= 0`` the value already fits and is returned unchanged.
Otherwise the significant is split into the kept ``base`` and the dropped
tail, and the mode rule decides whether ``base`` is incremented. The result
has exponent ``-precision`` and is normalized by the caller.

Rules are defined for non-negative operands only. A negative operand is
negated, rounded with the mirror mode and negated back: CEILING and FLOOR
mirror each other, every other mode mirrors itself.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from bigdecimal.constants import DEFAULT_PRECISION

__all__ = [
    "RoundingMode",
    "RoundingParams",
    "DEFAULT_ROUNDING_MODE",
    "DEFAULT_PRECISION",
    "round_components",
]


class RoundingMode(str, Enum):
    """How to round the dropped digits."""

    CEILING = "ceiling"
    """Toward positive infinity."""
    FLOOR = "floor"
    """Toward negative infinity."""
    UP = "up"
    """Away from zero."""
    DOWN = "down"
    """Toward zero."""
    HALF_UP = "halfUp"
    """Nearest neighbour; a dropped 5 rounds away from zero."""
    HALF_DOWN = "halfDown"
    """Nearest neighbour; a dropped 5 rounds toward zero."""
    HALF_EVEN = "halfEven"
    """Nearest neighbour; a dropped 5 rounds to the even neighbour."""

    # Alias of HALF_EVEN (same value)
    DEFAULT = "halfEven"


DEFAULT_ROUNDING_MODE = RoundingMode.HALF_EVEN


class RoundingParams(BaseModel):
    """Validated rounding request.

    Attributes:
        mode: Rounding mode, as a RoundingMode or its string value ("halfUp")
        precision: Number of decimal digits to keep after the point (>= 0)
    """

    model_config = ConfigDict(frozen=True)

    mode: RoundingMode = DEFAULT_ROUNDING_MODE
    precision: int = Field(default=DEFAULT_PRECISION, ge=0)


# =============================================================================
# Per-mode rules (non-negative operands)
# =============================================================================
#
# Each rule receives the kept base, the first dropped digit and the whole
# dropped tail, and returns True when base must be incremented.

_Rule = Callable[[int, int, int], bool]


def _round_ceiling(base: int, digit: int, rest: int) -> bool:
    return rest != 0


def _round_floor(base: int, digit: int, rest: int) -> bool:
    return False


def _round_up(base: int, digit: int, rest: int) -> bool:
    return rest != 0


def _round_down(base: int, digit: int, rest: int) -> bool:
    return False


def _round_half_up(base: int, digit: int, rest: int) -> bool:
    return digit >= 5


def _round_half_down(base: int, digit: int, rest: int) -> bool:
    return digit > 5


def _round_half_even(base: int, digit: int, rest: int) -> bool:
    if digit == 5:
        return base % 2 == 1
    return digit > 5


_RULES: dict[RoundingMode, _Rule] = {
    RoundingMode.CEILING: _round_ceiling,
    RoundingMode.FLOOR: _round_floor,
    RoundingMode.UP: _round_up,
    RoundingMode.DOWN: _round_down,
    RoundingMode.HALF_UP: _round_half_up,
    RoundingMode.HALF_DOWN: _round_half_down,
    RoundingMode.HALF_EVEN: _round_half_even,
}

# Mode applied to -x when rounding a negative x
_MIRRORS: dict[RoundingMode, RoundingMode] = {
    RoundingMode.CEILING: RoundingMode.FLOOR,
    RoundingMode.FLOOR: RoundingMode.CEILING,
    RoundingMode.UP: RoundingMode.UP,
    RoundingMode.DOWN: RoundingMode.DOWN,
    RoundingMode.HALF_UP: RoundingMode.HALF_UP,
    RoundingMode.HALF_DOWN: RoundingMode.HALF_DOWN,
    RoundingMode.HALF_EVEN: RoundingMode.HALF_EVEN,
}


def _round_non_negative(significant: int, excess: int, mode: RoundingMode) -> int:
    """Drop ``excess`` trailing digits of a non-negative significant."""
    modulo = 10**excess
    base, rest = divmod(significant, modulo)
    digit = rest // (modulo // 10)
    if _RULES[mode](base, digit, rest):
        base += 1
    return base


def round_components(
    significant: int, exponent: int, mode: RoundingMode, precision: int
) -> tuple[int, int]:
    """Round ``significant * 10**exponent`` to ``precision`` decimal digits.

    Expects normalized components. The returned pair is not normalized.

    Args:
        significant: Signed significant digits
        exponent: Power of ten
        mode: Rounding mode
        precision: Digits to keep after the decimal point (>= 0)

    Returns:
        (significant, exponent) of the rounded value
    """
    if significant == 0:
        return 0, 0
    excess = -exponent - precision
    if excess <= 0:
        return significant, exponent
    if significant < 0:
        return -_round_non_negative(-significant, excess, _MIRRORS[mode]), -precision
    return _round_non_negative(significant, excess, mode), -precision
