# formulacheck/core/types.py
# Copyright (c) 2024 formulacheck contributors
# Licensed under the MIT License - see LICENSE file for details
from enum import Enum, auto
from typing import NamedTuple, Optional


class Reason(Enum):
    """
    Fixed diagnostic messages attached to every verdict.

    The values are stable and may be matched against by callers.
    """

    NULL = "String is null"
    EMPTY = "String is empty"
    INVALID_CHARACTER = "Invalid character"
    UPPER_CASE_INVALID = "Upper case invalid"
    LOWER_CASE_INVALID = "Lower case invalid"
    NUMBER_INVALID = "Number invalid"
    LEADING_ZERO = "0 is not a valid first digit to a multiplier"
    MULTIPLIER_TOO_LARGE = "Multiplier is too large"
    PARENTHESES_INVALID = "Parentheses invalid"
    NOT_ENOUGH_ELEMENTS = "Not enough elements in a set of parentheses"
    EXPECTED_CLOSED = "Found open parentheses: Expected closed"
    EXPECTED_OPEN = "Found closed parentheses: Expected open"
    UNCOMPLETED_PARENTHESES = "Uncompleted parentheses"
    CORRECT = "Formula is correct"


class CharClass(Enum):
    """Lexical class of a single formula character."""

    UPPER = auto()
    LOWER = auto()
    DIGIT = auto()
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    OTHER = auto()


class Phase(Enum):
    """
    Named states of the checking automaton.

    REJECTED is absorbing: once entered no further characters are examined.
    ACCEPTED is only reached at end of input outside a group.
    """

    START = auto()  # Nothing consumed yet
    IN_ELEMENT_OR_MULTIPLIER = auto()  # Inside an element symbol or its multiplier
    IN_GROUP = auto()  # Between "(" and ")"
    AFTER_GROUP = auto()  # Just closed a group, multiplier required
    REJECTED = auto()
    ACCEPTED = auto()


class Verdict(NamedTuple):
    """
    Outcome of checking one formula.

    Attributes:
        accepted: True if the formula is syntactically correct
        reason: One of the ``Reason`` messages, always populated
        position: Index of the offending character, or None when the verdict
            is not tied to a single character
    """

    accepted: bool
    reason: str
    position: Optional[int] = None

    @classmethod
    def accept(cls) -> "Verdict":
        return cls(True, Reason.CORRECT.value)

    @classmethod
    def reject(cls, reason: Reason, position: Optional[int] = None) -> "Verdict":
        return cls(False, reason.value, position)
