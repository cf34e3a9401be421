"""Configuration for the bigdecimal command line tool."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from bigdecimal.constants import DEFAULT_PRECISION
from bigdecimal.rounding import DEFAULT_ROUNDING_MODE, RoundingMode

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class CliConfig:
    """Defaults applied by the command line tool.

    Attributes:
        precision: Decimal digits kept by ``round`` (default: 10)
        mode: Rounding mode used by ``round`` (default: half-even)
        verbose: If True, log at DEBUG level instead of WARNING
    """

    precision: int = DEFAULT_PRECISION
    mode: RoundingMode = DEFAULT_ROUNDING_MODE
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CliConfig:
        """Load configuration from environment variables.

        Variables:
            BIGDECIMAL_PRECISION: default precision (int)
            BIGDECIMAL_ROUNDING_MODE: default mode ("halfEven", "up", ...)
            BIGDECIMAL_DEBUG: "true"/"1"/"yes" enables debug logging

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        precision = int(env.get("BIGDECIMAL_PRECISION", str(DEFAULT_PRECISION)))
        mode = RoundingMode(env.get("BIGDECIMAL_ROUNDING_MODE", DEFAULT_ROUNDING_MODE.value))
        verbose = env.get("BIGDECIMAL_DEBUG", "false").lower() in _TRUTHY
        return cls(precision=precision, mode=mode, verbose=verbose)


# Default configuration instance
DEFAULT_CLI_CONFIG = CliConfig()
