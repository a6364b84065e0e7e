"""formulacheck: syntax checking for simple chemical formulas

This package decides whether a string is a syntactically well-formed chemical
formula and explains why not when it is rejected.

Responsibilities:
    - Character classification (Unicode aware)
    - Single-pass finite-state checking
    - Verdict reporting through hooks

Interactions:
    - Client code through check_formula / FormulaChecker
    - Logging system for diagnostics

Cross-cutting Concerns:
    Thread Safety:
        - Checkers hold no per-call state
        - Each check builds its own ValidationState

    Error Handling:
        - Syntax problems are returned as verdicts, never raised
        - Caller misuse raises TypeError or ConfigurationError
        - Strict checking raises FormulaSyntaxError

    Logging:
        - Module level loggers, no handlers configured by the library
        - Verdict reporting through LoggingHook

    Performance:
        - One pass, no backtracking
        - Stops at the first rejection
"""

__version__ = "0.1.0"

from .core import (
    CharClass,
    CheckerConfig,
    ConfigurationError,
    FormulaChecker,
    FormulaCheckError,
    FormulaSyntaxError,
    Phase,
    Reason,
    Verdict,
    check_formula,
    classify,
    require_valid,
)
from .runtime import HookManager, LoggingHook, VerdictHook

__all__ = [
    "check_formula",
    "require_valid",
    "FormulaChecker",
    "CheckerConfig",
    "Verdict",
    "Reason",
    "CharClass",
    "Phase",
    "classify",
    "VerdictHook",
    "HookManager",
    "LoggingHook",
    "FormulaCheckError",
    "FormulaSyntaxError",
    "ConfigurationError",
]
