# formulacheck/core/classify.py
# Copyright (c) 2024 formulacheck contributors
# Licensed under the MIT License - see LICENSE file for details
"""Unicode-aware classification of formula characters."""
import unicodedata

from formulacheck.core.types import CharClass

_CATEGORY_CLASSES = {
    "Lu": CharClass.UPPER,
    "Ll": CharClass.LOWER,
    "Nd": CharClass.DIGIT,
}

_PAREN_CLASSES = {
    "(": CharClass.OPEN_PAREN,
    ")": CharClass.CLOSE_PAREN,
}


def is_parenthesis(char: str) -> bool:
    """Return True if char is "(" or ")"."""
    return char in _PAREN_CLASSES


def classify(char: str) -> CharClass:
    """
    Classify a single character by its Unicode general category.

    Titlecase letters, marks, whitespace and symbols are all OTHER.

    :param char: A string of length one.
    :raises ValueError: If char is not exactly one character.
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    if is_parenthesis(char):
        return _PAREN_CLASSES[char]
    return _CATEGORY_CLASSES.get(unicodedata.category(char), CharClass.OTHER)
