"""
Batch evaluation helpers.

- make_rng: Create a seeded Generator
- sample_inputs: Draw reproducible random input strings over an alphabet
- acceptance_vector: Evaluate many inputs at once
- policy_disagreements: Inputs on which the two self-loop policies differ
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from pydfa.core.config import EngineConfig
from pydfa.core.engine import AutomatonEngine
from pydfa.core.table import TransitionTable
from pydfa.core.types import StateId


RngLike = Union[int, np.random.SeedSequence, np.random.Generator, None]


def make_rng(seed: RngLike = None) -> np.random.Generator:
    """
    Return a Generator for ``seed``, passing an existing Generator through.

    Integers and SeedSequences give a reproducible stream; None draws OS entropy.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is not None and not isinstance(seed, (int, np.random.SeedSequence)):
        raise TypeError(f"seed must be int, SeedSequence, Generator, or None, got {type(seed)}")
    return np.random.default_rng(seed)


def sample_inputs(
    alphabet: str,
    n: int,
    max_len: int,
    rng: RngLike = None,
) -> list[str]:
    """
    Draw ``n`` strings of length 0..max_len with characters from ``alphabet``.

    Args:
        alphabet: Characters to draw from.
        n: Number of strings.
        max_len: Maximum string length (inclusive).
        rng: Generator used for every draw, or a seed for make_rng.

    Returns:
        List of n strings; identical for identically seeded generators.
    """
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    if n <= 0:
        raise ValueError("n must be > 0")
    if max_len < 0:
        raise ValueError("max_len must be >= 0")

    rng = make_rng(rng)
    chars = np.array(list(alphabet))
    lengths = rng.integers(0, max_len + 1, size=n)
    return ["".join(rng.choice(chars, size=int(length))) for length in lengths]


def acceptance_vector(engine: AutomatonEngine, inputs: Sequence[str]) -> np.ndarray:
    return np.fromiter((engine.evaluate(text) for text in inputs), dtype=bool, count=len(inputs))


def policy_disagreements(
    table: TransitionTable,
    initial: StateId,
    accepting: StateId,
    inputs: Sequence[str],
) -> list[str]:
    standard = AutomatonEngine(table, initial, accepting, EngineConfig(skip_self_loops=False))
    compat = AutomatonEngine(table, initial, accepting, EngineConfig(skip_self_loops=True))

    mismatched = acceptance_vector(standard, inputs) != acceptance_vector(compat, inputs)
    return [text for text, differs in zip(inputs, mismatched) if differs]
