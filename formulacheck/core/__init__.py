"""
Core package providing formula checking.

Architecture:
- Classifies characters by Unicode general category
- Drives a finite-state checker over a per-call ValidationState
- Produces immutable Verdicts

Cross-cutting:
- Error handling with consistent propagation
- Diagnostics through module loggers and runtime hooks
"""

# Import order matters to avoid circular dependencies
from .errors import ConfigurationError, FormulaCheckError, FormulaSyntaxError
from .types import CharClass, Phase, Reason, Verdict
from .classify import classify
from .config import CheckerConfig
from .state import ValidationState
from .checker import FormulaChecker, check_formula, require_valid

__all__ = [
    # Errors
    "FormulaCheckError",
    "ConfigurationError",
    "FormulaSyntaxError",
    # Types
    "CharClass",
    "Phase",
    "Reason",
    "Verdict",
    # Checking
    "classify",
    "CheckerConfig",
    "ValidationState",
    "FormulaChecker",
    "check_formula",
    "require_valid",
]
