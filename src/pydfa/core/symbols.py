"""Input normalisation: strings are read as character ordinals."""

from __future__ import annotations

from typing import Iterable, Iterator, Union

from pydfa.core.types import Symbol

SymbolInput = Union[str, Iterable[Symbol]]


def as_symbols(value: SymbolInput) -> Iterator[Symbol]:
    """Yield symbols from a string (character ordinals) or an iterable of ints."""
    if isinstance(value, str):
        return (ord(ch) for ch in value)
    return iter(value)
