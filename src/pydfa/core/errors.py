from __future__ import annotations

from typing import Optional


class FormatError(ValueError):
    """Raised when a description violates the transition-file grammar.

    Args:
        message: What is wrong with the line.
        lineno: 1-based line number in the description, if known.
        line: Raw text of the offending line, if known.
    """

    def __init__(
        self,
        message: str,
        lineno: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        self.message = message
        self.lineno = lineno
        self.line = line
        super().__init__(self._render())

    def _render(self) -> str:
        if self.lineno is None:
            return self.message
        if self.line is None:
            return f"line {self.lineno}: {self.message}"
        return f"line {self.lineno}: {self.message}: {self.line!r}"


class UndeclaredStateWarning(UserWarning):
    """A referenced state has no transition line of its own and acts as a sink."""
