"""Command line calculator for BigDecimal.

Usage:
    python -m bigdecimal add 0.1 0.2
    python -m bigdecimal div 1 3
    python -m bigdecimal --precision 2 --mode halfUp round 2.345
    python -m bigdecimal -v sqrt 2

Operands use the library's string grammar ([-]digits[.digits[e[-]digits]]).
Defaults for --precision, --mode and -v come from CliConfig.from_env().
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

import structlog
from pydantic import ValidationError

from bigdecimal.config import CliConfig
from bigdecimal.decimal import BigDecimal
from bigdecimal.errors import BigDecimalError
from bigdecimal.logging_config import configure_logging
from bigdecimal.rounding import RoundingMode

logger = structlog.get_logger()

_Binary = Callable[[BigDecimal, BigDecimal], object]
_Unary = Callable[[BigDecimal], object]

BINARY_OPERATIONS: dict[str, tuple[_Binary, str]] = {
    "add": (BigDecimal.add, "a + b"),
    "sub": (BigDecimal.subtract, "a - b"),
    "mul": (BigDecimal.multiply, "a * b"),
    "div": (BigDecimal.divide, "a / b (at most 10 extra digits)"),
    "idiv": (BigDecimal.divide_to_integral_value, "integer part of a / b"),
    "rem": (BigDecimal.remainder, "remainder of a / b (sign of a)"),
    "cmp": (BigDecimal.compare_to, "-1, 0 or 1"),
    "min": (BigDecimal.min, "smaller of a and b"),
    "max": (BigDecimal.max, "larger of a and b"),
}

UNARY_OPERATIONS: dict[str, tuple[_Unary, str]] = {
    "sqrt": (BigDecimal.sqrt, "square root (Newton, 10 rounds)"),
    "abs": (BigDecimal.abs, "absolute value"),
    "neg": (BigDecimal.negate, "negation"),
    "int": (BigDecimal.integral_part, "integral part"),
    "frac": (BigDecimal.decimal_part, "decimal part"),
    "sign": (BigDecimal.signum, "-1, 0 or 1"),
}


def build_parser(config: CliConfig) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from ``config``."""
    parser = argparse.ArgumentParser(
        prog="bigdecimal",
        description="Exact decimal arithmetic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=config.verbose,
        help="Log debug events (lossy division, evaluated operations)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=config.precision,
        help=f"Digits kept by round (default: {config.precision})",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in RoundingMode],
        default=config.mode.value,
        help=f"Rounding mode used by round (default: {config.mode.value})",
    )

    subparsers = parser.add_subparsers(dest="operation", required=True)
    for name, (_, help_text) in BINARY_OPERATIONS.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("a")
        sub.add_argument("b")
    for name, (_, help_text) in UNARY_OPERATIONS.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("a")

    sub = subparsers.add_parser("pow", help="a raised to a non-negative integer n")
    sub.add_argument("a")
    sub.add_argument("n", type=int)

    sub = subparsers.add_parser("round", help="round a with --mode and --precision")
    sub.add_argument("a")
    return parser


def _divide(a: BigDecimal, b: BigDecimal) -> BigDecimal:
    quotient = a.divide(b)
    if not quotient.multiply(b).equal_value(a):
        logger.debug(
            "division_precision_exhausted",
            dividend=str(a),
            divisor=str(b),
            quotient=str(quotient),
        )
    return quotient


def run(args: argparse.Namespace) -> object:
    """Evaluate the parsed operation and return its result."""
    a = BigDecimal.value_of(args.a)
    if args.operation == "div":
        return _divide(a, BigDecimal.value_of(args.b))
    if args.operation in BINARY_OPERATIONS:
        operation, _ = BINARY_OPERATIONS[args.operation]
        return operation(a, BigDecimal.value_of(args.b))
    if args.operation in UNARY_OPERATIONS:
        unary, _ = UNARY_OPERATIONS[args.operation]
        return unary(a)
    if args.operation == "pow":
        return a.pow(args.n)
    return a.round(args.mode, precision=args.precision)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    try:
        config = CliConfig.from_env()
    except ValueError as err:
        print(f"error: invalid environment configuration: {err}", file=sys.stderr)
        return 2

    args = build_parser(config).parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        result = run(args)
    except (BigDecimalError, ValidationError, OverflowError) as err:
        logger.debug("operation_failed", operation=args.operation, error=str(err))
        print(f"error: {err}", file=sys.stderr)
        return 1

    logger.debug("operation_evaluated", operation=args.operation, result=str(result))
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
