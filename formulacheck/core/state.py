# formulacheck/core/state.py
# Copyright (c) 2024 formulacheck contributors
# Licensed under the MIT License - see LICENSE file for details
from dataclasses import dataclass
from typing import Optional

from formulacheck.core.types import Phase, Reason, Verdict


@dataclass
class ValidationState:
    """
    Mutable record owned by a single check.

    The four ``*_allowed`` flags describe which character classes may come
    next. Several may be true at once. Close parentheses are additionally
    gated by ``in_group``.

    Runtime Invariants:
    - A fresh instance is built for every check and discarded afterwards
    - ``in_group`` is a flag, not a stack, so groups never nest
    - ``element_count`` is only meaningful while ``in_group`` is True
    - Once ``phase`` is REJECTED no further mutation happens
    """

    upper_allowed: bool = True
    lower_allowed: bool = False
    digit_allowed: bool = False
    paren_allowed: bool = True
    in_group: bool = False
    element_count: int = 0
    lower_run: int = 0
    digit_run: int = 0
    accepted: bool = True
    reason: Reason = Reason.CORRECT
    position: Optional[int] = None
    phase: Phase = Phase.START

    @property
    def rejected(self) -> bool:
        return self.phase is Phase.REJECTED

    def reject(self, reason: Reason, position: Optional[int] = None) -> None:
        """Record a rejection. The first recorded reason wins."""
        if self.rejected:
            return
        self.accepted = False
        self.reason = reason
        self.position = position
        self.phase = Phase.REJECTED

    def finish(self) -> None:
        """Apply the end-of-input check."""
        if self.rejected:
            return
        if self.in_group:
            self.reject(Reason.UNCOMPLETED_PARENTHESES)
            return
        self.phase = Phase.ACCEPTED

    def to_verdict(self) -> Verdict:
        if self.accepted:
            return Verdict.accept()
        return Verdict.reject(self.reason, self.position)
