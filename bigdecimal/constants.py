"""Fixed numeric parameters for BigDecimal.

These bounds are part of the library's observable behaviour and are not
configurable at runtime.
"""

# Digits kept by round() when no precision is given
DEFAULT_PRECISION = 10

# Newton iterations performed by sqrt(), starting from a float seed
SQRT_ROUNDS = 10

# Extra decimal digits divide() may append to the dividend before giving up
# on an exact quotient and truncating
DIVISION_EXTRA_DIGITS = 10

# Accepted string grammar: [-]digits[.digits[(e|E)[-]digits]]
DECIMAL_PATTERN = r"^(-?[0-9]+)(?:\.([0-9]+)(?:[eE](-?[0-9]+))?)?$"
