# tests/integration/test_formula_scenarios.py
# Copyright (c) 2024 formulacheck contributors
# Licensed under the MIT License - see LICENSE file for details
import logging

import pytest

import formulacheck
from formulacheck import CheckerConfig, FormulaChecker, FormulaSyntaxError, LoggingHook, check_formula


class TestScenarios:
    @pytest.mark.parametrize(
        "formula,accepted,reason",
        [
            ("H2O", True, "Formula is correct"),
            ("NaCl", True, "Formula is correct"),
            ("(OH)2", True, "Formula is correct"),
            ("Ca(OH)2", True, "Formula is correct"),
            ("(O)2", False, "Not enough elements in a set of parentheses"),
            ("H02", False, "0 is not a valid first digit to a multiplier"),
            ("", False, "String is empty"),
            (None, False, "String is null"),
            ("Xx", True, "Formula is correct"),
            ("Xxx", False, "Lower case invalid"),
        ],
    )
    def test_reference_formulas(self, formula, accepted, reason):
        verdict = check_formula(formula)
        assert verdict.accepted is accepted
        assert verdict.reason == reason

    def test_nested_groups_are_rejected(self):
        assert not check_formula("((H)2)3").accepted

    def test_public_api_exports(self):
        for name in formulacheck.__all__:
            assert hasattr(formulacheck, name)
        assert formulacheck.__version__ == "0.1.0"

    def test_console_style_report(self, caplog):
        """The original program printed the verdict and reason for every check."""
        checker = FormulaChecker(hooks=[LoggingHook()])
        with caplog.at_level(logging.INFO, logger="formulacheck.runtime.hooks"):
            checker.check("Ca(OH)2")
            checker.check("(O)2")
        assert caplog.messages == [
            "True: Formula is correct",
            "False: Not enough elements in a set of parentheses",
        ]

    def test_strict_checking_of_a_batch(self):
        formulas = ["H2O", "Fe2(SO4)3", "(HO"]
        errors = {}
        for formula in formulas:
            try:
                formulacheck.require_valid(formula)
            except FormulaSyntaxError as e:
                errors[formula] = e.reason
        assert errors == {"(HO": "Uncompleted parentheses"}

    def test_historical_digit_counting(self):
        legacy = FormulaChecker(CheckerConfig(reset_digit_run=False))
        assert legacy.check("C2H02").accepted
        assert not FormulaChecker().check("C2H02").accepted
