"""
Configuration dataclasses for building and running automata.

- BuildConfig: how the description text is read
- EngineConfig: how transitions are selected during evaluation
"""

from __future__ import annotations

from dataclasses import dataclass

SYMBOL_FORMATS = frozenset({"ordinal", "literal"})
BLANK_LINE_POLICIES = frozenset({"skip", "reject"})


@dataclass(frozen=True)
class BuildConfig:
    """Options for TableBuilder.

    Attributes:
        symbols: "ordinal" reads each symbol as the integer code of a
            character (``97`` for ``a``); "literal" reads a single character.
        blank_lines: "skip" ignores whitespace-only lines, "reject" raises
            FormatError on them.
        reject_duplicates: Raise FormatError when one source lists the same
            symbol twice instead of letting the first entry win.
        warn_undeclared: Emit UndeclaredStateWarning for targets that never
            get a transition line of their own.
    """

    symbols: str = "ordinal"
    blank_lines: str = "skip"
    reject_duplicates: bool = False
    warn_undeclared: bool = False

    def __post_init__(self):
        """Validate BuildConfig constraints."""
        if self.symbols not in SYMBOL_FORMATS:
            raise ValueError(f"symbols must be in {sorted(SYMBOL_FORMATS)}")
        if self.blank_lines not in BLANK_LINE_POLICIES:
            raise ValueError(f"blank_lines must be in {sorted(BLANK_LINE_POLICIES)}")


@dataclass(frozen=True)
class EngineConfig:
    """Options for AutomatonEngine.

    Attributes:
        skip_self_loops: Never take a transition whose target is the current
            state, and keep scanning past it (compatibility mode). Off by
            default, which gives standard DFA self-loop semantics.
    """

    skip_self_loops: bool = False
