# formulacheck/core/errors.py
# Copyright (c) 2024 formulacheck contributors
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from formulacheck.core.types import Verdict


class FormulaCheckError(Exception):
    """
    Base exception class for errors within the formula checking library.
    """


class ConfigurationError(FormulaCheckError):
    """
    Raised when a checker is constructed with invalid options.
    """


class FormulaSyntaxError(FormulaCheckError):
    """
    Raised by strict checking when a formula is rejected.

    The rejecting verdict is kept so callers can inspect the reason and the
    offending position.
    """

    def __init__(self, verdict: "Verdict") -> None:
        super().__init__(verdict.reason)
        self.verdict = verdict

    @property
    def reason(self) -> str:
        return self.verdict.reason

    @property
    def position(self) -> Optional[int]:
        return self.verdict.position
