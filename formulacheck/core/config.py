# formulacheck/core/config.py
# Copyright (c) 2024 formulacheck contributors
# Licensed under the MIT License - see LICENSE file for details
from dataclasses import dataclass

from formulacheck.core.errors import ConfigurationError

# Largest count a multiplier run may reach before the checker refuses it
DEFAULT_MAX_DIGIT_RUN = 2**31 - 1


@dataclass(frozen=True)
class CheckerConfig:
    """
    Immutable options for a FormulaChecker.

    Attributes:
        max_digit_run: Most digits allowed in one multiplier run. Longer runs
            are rejected with "Multiplier is too large".
        reset_digit_run: When True the leading-zero rule applies to every
            multiplier. When False the digit counter is never reset, so only
            the first digit of the whole formula is checked.
    """

    max_digit_run: int = DEFAULT_MAX_DIGIT_RUN
    reset_digit_run: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.max_digit_run, bool) or not isinstance(self.max_digit_run, int):
            raise ConfigurationError(f"max_digit_run must be an int, got {type(self.max_digit_run).__name__}")
        if self.max_digit_run < 1:
            raise ConfigurationError(f"max_digit_run must be at least 1, got {self.max_digit_run}")
        if not isinstance(self.reset_digit_run, bool):
            raise ConfigurationError("reset_digit_run must be a bool")
