"""
Core types for pydfa: StateId, Symbol, Transition, Outcome, Verdict.

Pure data containers with validation. No behavior logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

StateId = int
Symbol = int


@dataclass(frozen=True)
class Transition:
    """A single edge: consuming ``symbol`` in ``source`` moves to ``target``."""

    source: StateId
    symbol: Symbol
    target: StateId

    def __post_init__(self):
        """Validate Transition constraints."""
        if self.source < 0:
            raise ValueError("source must be >= 0")
        if self.symbol < 0:
            raise ValueError("symbol must be >= 0")
        if self.target < 0:
            raise ValueError("target must be >= 0")


class Outcome(Enum):
    """Tri-state result of deciding one input against one description."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    ERROR = "error"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    Outcome.ACCEPTED: 0,
    Outcome.REJECTED: 1,
    Outcome.ERROR: 2,
}


@dataclass(frozen=True)
class Verdict:
    """Outcome of a decision plus the error that produced ``Outcome.ERROR``."""

    outcome: Outcome
    error: Optional[Exception] = None

    def __post_init__(self):
        if self.outcome is Outcome.ERROR and self.error is None:
            raise ValueError("error must be set when outcome is ERROR")
        if self.outcome is not Outcome.ERROR and self.error is not None:
            raise ValueError("error must be None unless outcome is ERROR")

    @property
    def accepted(self) -> bool:
        return self.outcome is Outcome.ACCEPTED
