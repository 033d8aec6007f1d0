"""
TableBuilder: parse a transition description into a TransitionTable.

File structure::

    1               -> initial state
    2               -> accepting state
    1: 97 2 | 98 3  -> outgoing transitions of state 1
    2: 97 1
    3: 98 1

Every line after the first two lists the outgoing transitions of one source
state as ``symbol target`` pairs separated by ``|``. Symbols are character
ordinals unless BuildConfig(symbols="literal") is used.
"""

from __future__ import annotations

import logging
import sys
import warnings
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from pydfa.core.config import SYMBOL_FORMATS, BuildConfig, EngineConfig
from pydfa.core.engine import AutomatonEngine
from pydfa.core.errors import FormatError, UndeclaredStateWarning
from pydfa.core.table import BuiltAutomaton, TransitionTable
from pydfa.core.types import StateId, Symbol
from pydfa.io.tokens import parse_int, parse_symbol, split_fields, split_lines

logger = logging.getLogger(__name__)


class TableBuilder:
    """Reads the line-oriented description format."""

    def __init__(self, config: Optional[BuildConfig] = None) -> None:
        self.config = BuildConfig() if config is None else config

    def build(self, text: str) -> BuiltAutomaton:
        """
        Build a table and its initial/accepting states from description text.

        Args:
            text: The full description.

        Returns:
            BuiltAutomaton with the table, both state identifiers and the set
            of states that are referenced but never declared as a source.

        Raises:
            FormatError: If the description violates the grammar.
        """
        lines = self._content_lines(text)
        initial = self._read_state_line(lines, "initial")
        accepting = self._read_state_line(lines, "accepting")

        table = TransitionTable()
        for lineno, line in lines:
            self._read_transition_line(table, lineno, line)

        undeclared = self._undeclared_states(table, initial, accepting)
        logger.debug(
            "built table: %d sources, %d transitions, initial=%d, accepting=%d",
            table.source_count,
            table.transition_count,
            initial,
            accepting,
        )
        return BuiltAutomaton(table, initial, accepting, undeclared)

    def build_file(self, path: Union[str, Path]) -> BuiltAutomaton:
        """Read ``path`` as UTF-8 and build it.

        Raises:
            FileNotFoundError: If path does not exist
            FormatError: If the description violates the grammar.
        """
        logger.debug("reading description from %s", path)
        return self.build(Path(path).read_text(encoding="utf-8"))

    def _content_lines(self, text: str) -> Iterator[tuple[int, str]]:
        for lineno, line in enumerate(split_lines(text), start=1):
            if line.strip():
                yield lineno, line
            elif self.config.blank_lines == "reject":
                raise FormatError("blank line", lineno, line)

    @staticmethod
    def _read_state_line(lines: Iterator[tuple[int, str]], what: str) -> StateId:
        entry = next(lines, None)
        if entry is None:
            raise FormatError(f"missing {what} state line")
        lineno, line = entry
        return parse_int(line, f"{what} state", lineno, line)

    def _read_transition_line(self, table: TransitionTable, lineno: int, line: str) -> None:
        # Split at colon, then split the pair list at |, then each pair at whitespace.
        parts = line.split(":")
        if len(parts) == 1:
            raise FormatError("transition line is missing ':'", lineno, line)
        if len(parts) > 2:
            raise FormatError("transition line has more than one ':'", lineno, line)
        head, body = parts
        source = parse_int(head, "source state", lineno, line)

        if not body.strip():
            raise FormatError("empty transition list", lineno, line)

        seen = {symbol for symbol, _ in table.outgoing(source)}
        for pair in split_fields(body, "|"):
            tokens = pair.split()
            if len(tokens) != 2:
                raise FormatError(f"expected '<symbol> <target>', got {pair!r}", lineno, line)
            symbol = parse_symbol(tokens[0], self.config.symbols, lineno, line)
            target = parse_int(tokens[1], "target state", lineno, line)
            if self.config.reject_duplicates and symbol in seen:
                raise FormatError(f"state {source} repeats symbol {symbol}", lineno, line)
            seen.add(symbol)
            table.add_transition(source, symbol, target)

    def _undeclared_states(
        self, table: TransitionTable, initial: StateId, accepting: StateId
    ) -> frozenset[StateId]:
        declared = set(table.sources())
        referenced = set(table.states()) | {initial, accepting}
        undeclared = frozenset(referenced - declared)
        if undeclared:
            logger.info("states without transition lines act as sinks: %s", sorted(undeclared))
            if self.config.warn_undeclared:
                warnings.warn(
                    f"states without transition lines: {sorted(undeclared)}",
                    UndeclaredStateWarning,
                    stacklevel=_caller_stacklevel(),
                )
        return undeclared


def build(text: str, config: Optional[BuildConfig] = None) -> BuiltAutomaton:
    return TableBuilder(config).build(text)


def build_file(path: Union[str, Path], config: Optional[BuildConfig] = None) -> BuiltAutomaton:
    return TableBuilder(config).build_file(path)


def load_engine(
    path: Union[str, Path],
    build_config: Optional[BuildConfig] = None,
    engine_config: Optional[EngineConfig] = None,
) -> AutomatonEngine:
    """Build the description at ``path`` and wrap it in an AutomatonEngine."""
    return AutomatonEngine.from_built(build_file(path, build_config), engine_config)


def _caller_stacklevel() -> int:
    # Stack level, as seen from the warnings.warn call site, of the first frame outside this module.
    frame = sys._getframe(1)
    level = 1
    while frame is not None and frame.f_globals.get("__name__") == __name__:
        frame = frame.f_back
        level += 1
    return level


def _literal_symbol(symbol: Symbol) -> str:
    if symbol > sys.maxunicode:
        raise ValueError(f"symbol {symbol} has no literal form")
    char = chr(symbol)
    if char.isspace() or char in ":|":
        raise ValueError(f"symbol {symbol} has no literal form")
    return char


def dump_description(
    table: TransitionTable,
    initial: StateId,
    accepting: StateId,
    symbols: str = "ordinal",
) -> str:
    """
    Render a table in the description format read by TableBuilder.

    Args:
        table: Table to render, one line per source.
        initial: Initial state identifier.
        accepting: Accepting state identifier.
        symbols: "ordinal" or "literal", matching BuildConfig.symbols of the
            builder that should read the text back.

    Raises:
        ValueError: If a symbol cannot be written as a literal character
            (whitespace, ':' or '|').
    """
    if symbols not in SYMBOL_FORMATS:
        raise ValueError(f"symbols must be in {sorted(SYMBOL_FORMATS)}")
    render: Callable[[Symbol], str] = _literal_symbol if symbols == "literal" else str
    lines = [str(initial), str(accepting)] + table.format_lines(render)
    return "\n".join(lines) + "\n"
