"""pydfa: a deterministic finite automaton engine driven by a text transition table."""

from pydfa.core.config import BuildConfig, EngineConfig
from pydfa.core.engine import AutomatonEngine
from pydfa.core.errors import FormatError, UndeclaredStateWarning
from pydfa.core.symbols import SymbolInput, as_symbols
from pydfa.core.table import BuiltAutomaton, TransitionTable
from pydfa.core.types import Outcome, StateId, Symbol, Transition, Verdict
from pydfa.driver import decide, judge
from pydfa.io.builder import (
    TableBuilder,
    build,
    build_file,
    dump_description,
    load_engine,
)

__version__ = "0.1.0"

__all__ = [
    "AutomatonEngine",
    "BuildConfig",
    "BuiltAutomaton",
    "EngineConfig",
    "FormatError",
    "Outcome",
    "StateId",
    "Symbol",
    "SymbolInput",
    "TableBuilder",
    "Transition",
    "TransitionTable",
    "UndeclaredStateWarning",
    "Verdict",
    "as_symbols",
    "build",
    "build_file",
    "decide",
    "dump_description",
    "judge",
    "load_engine",
]
