"""
TransitionTable: the automaton's states and transitions.

States are not allocated objects. Any integer that appears as a source or a
target of a transition denotes a state. Each source keeps an ordered list of
``(symbol, target)`` pairs; lookups scan it in insertion order, so the order
is observable when a source lists the same symbol twice.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from pydfa.core.types import StateId, Symbol, Transition

Edge = tuple[Symbol, StateId]


class TransitionTable:
    """Mapping from source state to its ordered outgoing (symbol, target) pairs."""

    def __init__(self) -> None:
        self._outgoing: dict[StateId, list[Edge]] = {}
        self._targets: set[StateId] = set()
        self.transition_count = 0
        self.source_count = 0

    def add_transition(self, source: StateId, symbol: Symbol, target: StateId) -> None:
        """
        Append ``(symbol, target)`` to the outgoing list of ``source``.

        No check is made for an existing entry with the same symbol; the
        first one inserted wins during evaluation.

        Args:
            source: State the transition leaves.
            symbol: Ordinal of the consumed character.
            target: State the transition enters.

        Raises:
            ValueError: If any identifier is negative.
        """
        edge = Transition(source, symbol, target)

        edges = self._outgoing.get(source)
        if edges is None:
            edges = self._outgoing[source] = []
            self.source_count += 1
        edges.append((edge.symbol, edge.target))
        self._targets.add(edge.target)
        self.transition_count += 1

    def outgoing(self, source: StateId) -> tuple[Edge, ...]:
        """Return a snapshot of the transitions recorded for ``source``, empty if none."""
        return tuple(self._outgoing.get(source, ()))

    def degree(self, source: StateId) -> int:
        return len(self._outgoing.get(source, ()))

    def sources(self) -> tuple[StateId, ...]:
        """Source states in the order their first transition was added."""
        return tuple(self._outgoing)

    def states(self) -> frozenset[StateId]:
        """Every identifier referenced as a source or a target."""
        return frozenset(self._outgoing) | frozenset(self._targets)

    def transitions(self) -> Iterator[Transition]:
        for source, edges in self._outgoing.items():
            for symbol, target in edges:
                yield Transition(source, symbol, target)

    def format_lines(self, render: Callable[[Symbol], str] = str) -> list[str]:
        """Render one ``source: symbol target | ...`` line per source, symbols via ``render``."""
        lines = []
        for source, edges in self._outgoing.items():
            pairs = " | ".join(f"{render(symbol)} {target}" for symbol, target in edges)
            lines.append(f"{source}: {pairs}")
        return lines

    def __len__(self) -> int:
        return self.transition_count

    def __contains__(self, state: object) -> bool:
        return state in self._outgoing or state in self._targets

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return self._outgoing == other._outgoing

    def __repr__(self) -> str:
        return (
            f"TransitionTable(sources={self.source_count}, "
            f"transitions={self.transition_count})"
        )


@dataclass(frozen=True)
class BuiltAutomaton:
    """A table with its initial and accepting states, as produced by TableBuilder."""

    table: TransitionTable
    initial: StateId
    accepting: StateId
    undeclared: frozenset[StateId] = frozenset()
