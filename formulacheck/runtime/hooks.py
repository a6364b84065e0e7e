# formulacheck/runtime/hooks.py
# Copyright (c) 2024 formulacheck contributors
# Licensed under the MIT License - see LICENSE file for details
"""
Verdict reporting hooks.

Hooks receive every verdict a checker produces. Users can attach logging,
counting or other side effects without altering the checking logic.
"""
import logging
from typing import Iterable, List, Optional, Protocol, Tuple, runtime_checkable

from formulacheck.core.types import Verdict

logger = logging.getLogger(__name__)


@runtime_checkable
class VerdictHook(Protocol):
    """
    Protocol for verdict hooks.

    Runtime Invariants:
    - Hooks don't modify verdicts
    - Hook failures don't affect checking
    """

    def on_verdict(self, formula: Optional[str], verdict: Verdict) -> None: ...


class HookManager:
    """
    Holds registered hooks and invokes them in registration order.
    A failing hook is logged and skipped so the remaining hooks still run.
    """

    def __init__(self, hooks: Optional[Iterable[VerdictHook]] = None) -> None:
        self._hooks: List[VerdictHook] = []
        for hook in hooks or []:
            self.register_hook(hook)

    @property
    def hooks(self) -> Tuple[VerdictHook, ...]:
        return tuple(self._hooks)

    def register_hook(self, hook: VerdictHook) -> None:
        """
        Add a hook to the end of the call order.

        :param hook: An object implementing ``on_verdict``.
        :raises TypeError: If hook does not implement VerdictHook.
        """
        if not isinstance(hook, VerdictHook):
            raise TypeError(f"Hook must implement on_verdict, got {type(hook).__name__}")
        self._hooks.append(hook)

    def call_on_verdict(self, formula: Optional[str], verdict: Verdict) -> None:
        for hook in self._hooks:
            try:
                hook.on_verdict(formula, verdict)
            except Exception as e:
                logger.error(f"Hook {_hook_name(hook)} on_verdict failed: {str(e)}")


class LoggingHook:
    """
    Reports each verdict as a single log record, e.g. ``False: Number invalid``.
    """

    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self._logger = log or logger
        self._level = level

    def on_verdict(self, formula: Optional[str], verdict: Verdict) -> None:
        self._logger.log(self._level, "%s: %s", "True" if verdict.accepted else "False", verdict.reason)


def _hook_name(hook: VerdictHook) -> str:
    return getattr(hook, "name", None) or type(hook).__name__
