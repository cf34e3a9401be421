"""Arbitrary precision decimal arithmetic.

Numbers are held exactly as significant * 10^exponent, with arithmetic,
comparison and seven rounding modes:
- BigDecimal: the immutable value type
- RoundingMode / RoundingParams: rounding selection
"""

from bigdecimal.constants import DEFAULT_PRECISION
from bigdecimal.decimal import BigDecimal
from bigdecimal.errors import (
    BigDecimalError,
    DivisionByZero,
    DivisionUndefined,
    InvalidFormat,
    InvalidOperand,
)
from bigdecimal.rounding import DEFAULT_ROUNDING_MODE, RoundingMode, RoundingParams

__version__ = "0.1.0"
__all__ = [
    "BigDecimal",
    "RoundingMode",
    "RoundingParams",
    "DEFAULT_ROUNDING_MODE",
    "DEFAULT_PRECISION",
    "BigDecimalError",
    "InvalidOperand",
    "InvalidFormat",
    "DivisionUndefined",
    "DivisionByZero",
    "__version__",
]
