# tests/conftest.py
# Copyright (c) 2024 formulacheck contributors
# Licensed under the MIT License - see LICENSE file for details

import threading

import pytest


class RecordingHook:
    """A hook that remembers every verdict it receives."""

    def __init__(self, name: str = "RecordingHook"):
        self.name = name
        self.calls = []

    def on_verdict(self, formula, verdict) -> None:
        self.calls.append((formula, verdict))


class FailingHook:
    """A hook whose on_verdict always raises."""

    def __init__(self, name: str = "FailingHook"):
        self.name = name

    def on_verdict(self, formula, verdict) -> None:
        raise RuntimeError(f"{self.name} exploded")


@pytest.fixture
def checker():
    """A FormulaChecker with default options and no hooks."""
    from formulacheck.core.checker import FormulaChecker

    return FormulaChecker()


@pytest.fixture
def legacy_checker():
    """A checker that never resets the digit counter between multipliers."""
    from formulacheck.core.checker import FormulaChecker
    from formulacheck.core.config import CheckerConfig

    return FormulaChecker(CheckerConfig(reset_digit_run=False))


@pytest.fixture
def recording_hook():
    return RecordingHook()


@pytest.fixture
def failing_hook():
    return FailingHook()


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from formulacheck.core.errors import ConfigurationError, FormulaCheckError, FormulaSyntaxError

    return (FormulaCheckError, ConfigurationError, FormulaSyntaxError)


@pytest.fixture(autouse=True)
def cleanup_threads():
    yield
    # Cleanup any remaining threads after each test
    for thread in threading.enumerate():
        if thread != threading.current_thread() and thread.is_alive():
            thread.join(timeout=1.0)
