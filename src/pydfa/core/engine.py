"""
AutomatonEngine: run an input sequence against a TransitionTable.

Algorithm:
    1) current = initial state.
    2) For each symbol, scan outgoing(current) in insertion order and move
       to the target of the first matching pair. With skip_self_loops a
       pair whose target is the current state does not match.
    3) If nothing matches, stall: current is unchanged.
    4) Accept iff current == accepting once the input is exhausted.

Evaluation never raises and never mutates the table or configuration.
"""

from __future__ import annotations

from typing import Optional

from pydfa.core.config import EngineConfig
from pydfa.core.symbols import SymbolInput, as_symbols
from pydfa.core.table import BuiltAutomaton, TransitionTable
from pydfa.core.types import StateId, Symbol


class AutomatonEngine:
    """A TransitionTable together with its initial and accepting states."""

    def __init__(
        self,
        table: TransitionTable,
        initial: StateId,
        accepting: StateId,
        config: Optional[EngineConfig] = None,
    ) -> None:
        if initial < 0:
            raise ValueError("initial must be >= 0")
        if accepting < 0:
            raise ValueError("accepting must be >= 0")
        self._table = table
        self._initial = initial
        self._accepting = accepting
        self._config = EngineConfig() if config is None else config

    @classmethod
    def from_built(cls, built: BuiltAutomaton, config: Optional[EngineConfig] = None) -> AutomatonEngine:
        """Create an engine from a BuiltAutomaton returned by TableBuilder."""
        return cls(built.table, built.initial, built.accepting, config)

    @property
    def table(self) -> TransitionTable:
        return self._table

    @property
    def initial(self) -> StateId:
        return self._initial

    @property
    def accepting(self) -> StateId:
        return self._accepting

    @property
    def config(self) -> EngineConfig:
        return self._config

    def step(self, state: StateId, symbol: Symbol) -> StateId:
        """Return the state reached from ``state`` on ``symbol`` (``state`` on a stall)."""
        skip_self_loops = self._config.skip_self_loops
        for edge_symbol, target in self._table.outgoing(state):
            if edge_symbol != symbol:
                continue
            if skip_self_loops and target == state:
                continue
            return target
        return state

    def run(self, symbols: SymbolInput) -> StateId:
        """Consume every symbol and return the final state."""
        current = self._initial
        for symbol in as_symbols(symbols):
            current = self.step(current, symbol)
        return current

    def evaluate(self, symbols: SymbolInput) -> bool:
        """
        Decide whether ``symbols`` drives the automaton to its accepting state.

        Args:
            symbols: A string (each character is looked up by its ordinal)
                or an iterable of integer symbols.

        Returns:
            True if the final state equals the accepting state.
        """
        return self.run(symbols) == self._accepting

    def __repr__(self) -> str:
        return (
            f"AutomatonEngine(initial={self._initial}, accepting={self._accepting}, "
            f"table={self._table!r}, config={self._config!r})"
        )
