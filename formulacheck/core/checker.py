# formulacheck/core/checker.py
# Copyright (c) 2024 formulacheck contributors
# Licensed under the MIT License - see LICENSE file for details
"""
Character-by-character chemical formula checker.

The grammar accepted here is deliberately narrow: element symbols made of one
uppercase letter and at most one lowercase letter, optional multiplier digits
without a leading zero, and single-level parenthesised groups of at least two
elements that must be followed by a multiplier.
"""
import logging
from typing import Callable, Dict, Iterable, Optional, Union

from formulacheck.core.classify import classify
from formulacheck.core.config import CheckerConfig
from formulacheck.core.errors import FormulaSyntaxError
from formulacheck.core.state import ValidationState
from formulacheck.core.types import CharClass, Phase, Reason, Verdict
from formulacheck.runtime.hooks import HookManager, VerdictHook

logger = logging.getLogger(__name__)


class FormulaChecker:
    """
    Deterministic finite-state checker for chemical formulas.

    The checker itself holds only configuration and hooks. All scan state lives
    in a ValidationState built per call, so one instance can be shared between
    threads.

    Example:
        checker = FormulaChecker()
        checker.check("Ca(OH)2")   # Verdict(accepted=True, reason='Formula is correct', position=None)
        checker.check("H02")       # Verdict(accepted=False, reason='0 is not a valid ...', position=1)
    """

    def __init__(
        self,
        config: Optional[CheckerConfig] = None,
        hooks: Optional[Union[HookManager, Iterable[VerdictHook]]] = None,
    ) -> None:
        """
        :param config: Checker options, defaults to CheckerConfig().
        :param hooks: A HookManager or an iterable of hooks receiving every verdict.
        :raises TypeError: If config is not a CheckerConfig.
        """
        if config is not None and not isinstance(config, CheckerConfig):
            raise TypeError(f"config must be a CheckerConfig, got {type(config).__name__}")
        self._config = config or CheckerConfig()
        self._hooks = hooks if isinstance(hooks, HookManager) else HookManager(hooks)
        self._handlers: Dict[CharClass, Callable[[ValidationState, str, int], None]] = {
            CharClass.UPPER: self._process_upper,
            CharClass.LOWER: self._process_lower,
            CharClass.DIGIT: self._process_digit,
            CharClass.OPEN_PAREN: self._process_parenthesis,
            CharClass.CLOSE_PAREN: self._process_parenthesis,
        }

    @property
    def config(self) -> CheckerConfig:
        return self._config

    @property
    def hooks(self) -> HookManager:
        return self._hooks

    def check(self, formula: Optional[str]) -> Verdict:
        """
        Check a formula and report the verdict to the registered hooks.

        Syntax problems are returned as a rejecting Verdict, never raised.

        :param formula: The formula to check, may be None.
        :raises TypeError: If formula is neither None nor a str.
        """
        verdict = self._scan(formula)
        logger.debug("Checked %r: %s (%s)", formula, verdict.accepted, verdict.reason)
        self._hooks.call_on_verdict(formula, verdict)
        return verdict

    def _scan(self, formula: Optional[str]) -> Verdict:
        if formula is None:
            return Verdict.reject(Reason.NULL)
        if not isinstance(formula, str):
            raise TypeError(f"formula must be a str or None, got {type(formula).__name__}")
        if not formula:
            return Verdict.reject(Reason.EMPTY)

        state = ValidationState()
        for position, char in enumerate(formula):
            self._process_char(state, char, position)
            if state.rejected:
                break
        state.finish()
        return state.to_verdict()

    def _process_char(self, state: ValidationState, char: str, position: int) -> None:
        char_class = classify(char)
        if char_class is not CharClass.DIGIT and self._config.reset_digit_run:
            state.digit_run = 0

        handler = self._handlers.get(char_class)
        if handler is None:
            state.reject(Reason.INVALID_CHARACTER, position)
            return
        handler(state, char, position)

    def _process_upper(self, state: ValidationState, char: str, position: int) -> None:
        if not state.upper_allowed:
            state.reject(Reason.UPPER_CASE_INVALID, position)
            return
        state.lower_allowed = True
        state.digit_allowed = True
        state.paren_allowed = True
        state.lower_run = 0
        if state.in_group:
            state.element_count += 1
        state.phase = Phase.IN_GROUP if state.in_group else Phase.IN_ELEMENT_OR_MULTIPLIER

    def _process_lower(self, state: ValidationState, char: str, position: int) -> None:
        if not state.lower_allowed:
            state.reject(Reason.LOWER_CASE_INVALID, position)
            return
        # At most one lowercase letter per element symbol
        state.lower_run += 1
        if state.lower_run >= 1:
            state.lower_allowed = False

    def _process_digit(self, state: ValidationState, char: str, position: int) -> None:
        if not state.digit_allowed:
            state.reject(Reason.NUMBER_INVALID, position)
            return
        state.lower_allowed = True
        state.upper_allowed = True
        state.paren_allowed = True
        state.phase = Phase.IN_GROUP if state.in_group else Phase.IN_ELEMENT_OR_MULTIPLIER

        if state.digit_run >= self._config.max_digit_run:
            state.reject(Reason.MULTIPLIER_TOO_LARGE, position)
            return
        state.digit_run += 1
        if state.digit_run == 1 and char == "0":
            state.reject(Reason.LEADING_ZERO, position)

    def _process_parenthesis(self, state: ValidationState, char: str, position: int) -> None:
        if not state.paren_allowed:
            state.reject(Reason.PARENTHESES_INVALID, position)
            return
        state.paren_allowed = False

        if state.in_group:
            if state.element_count < 2:
                state.reject(Reason.NOT_ENOUGH_ELEMENTS, position)
                return
            if char != ")":
                state.reject(Reason.EXPECTED_CLOSED, position)
                return
            # A multiplier has to follow a closed group
            state.in_group = False
            state.digit_allowed = True
            state.lower_allowed = False
            state.upper_allowed = False
            state.phase = Phase.AFTER_GROUP
        else:
            if char != "(":
                state.reject(Reason.EXPECTED_OPEN, position)
                return
            # A group has to open with an element symbol
            state.element_count = 0
            state.in_group = True
            state.upper_allowed = True
            state.lower_allowed = False
            state.digit_allowed = False
            state.phase = Phase.IN_GROUP


_default_checker = FormulaChecker()


def check_formula(formula: Optional[str], config: Optional[CheckerConfig] = None) -> Verdict:
    """
    Check a formula with a shared default checker, or a fresh one if config is given.

    Example:
        >>> check_formula("H2O")
        Verdict(accepted=True, reason='Formula is correct', position=None)
        >>> check_formula("Xxx").reason
        'Lower case invalid'
    """
    checker = _default_checker if config is None else FormulaChecker(config)
    return checker.check(formula)


def require_valid(formula: Optional[str], checker: Optional[FormulaChecker] = None) -> Verdict:
    """
    Check a formula and raise if it is rejected.

    :param formula: The formula to check.
    :param checker: Checker to use, defaults to the shared default checker.
    :raises FormulaSyntaxError: If the formula is rejected.
    """
    verdict = (checker or _default_checker).check(formula)
    if not verdict.accepted:
        raise FormulaSyntaxError(verdict)
    return verdict
