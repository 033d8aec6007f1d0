from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from pydfa.core.table import TransitionTable
from pydfa.core.types import StateId


def outdegree_vector(
    table: TransitionTable,
    states: Optional[Sequence[StateId]] = None,
) -> tuple[tuple[StateId, ...], np.ndarray]:
    if states is None:
        states = sorted(table.states())
    states = tuple(states)
    degrees = np.fromiter((table.degree(state) for state in states), dtype=np.int64, count=len(states))
    return states, degrees


def adjacency_matrix(table: TransitionTable) -> tuple[tuple[StateId, ...], np.ndarray]:
    states = tuple(sorted(table.states()))
    state_to_idx = {state: idx for idx, state in enumerate(states)}

    matrix = np.zeros((len(states), len(states)), dtype=np.int64)

    for transition in table.transitions():
        matrix[state_to_idx[transition.source], state_to_idx[transition.target]] += 1

    return states, matrix


def sink_states(table: TransitionTable) -> tuple[StateId, ...]:
    states, degrees = outdegree_vector(table)
    return tuple(state for state, degree in zip(states, degrees) if degree == 0)
