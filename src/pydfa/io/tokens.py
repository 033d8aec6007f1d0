"""Tokenizing helpers for the description reader."""

from __future__ import annotations

import re

from pydfa.core.errors import FormatError
from pydfa.core.types import Symbol

_DIGITS = re.compile(r"[0-9]+")


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping a trailing ``\\r`` from each line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def split_fields(text: str, delim: str) -> list[str]:
    """Split on ``delim`` and trim every field."""
    return [field.strip() for field in text.split(delim)]


def parse_int(token: str, what: str, lineno: int, line: str) -> int:
    """Parse a non-negative ASCII decimal integer, raising FormatError otherwise."""
    token = token.strip()
    if not _DIGITS.fullmatch(token):
        raise FormatError(f"{what} must be a non-negative integer, got {token!r}", lineno, line)
    try:
        return int(token)
    except ValueError as exc:
        # int() refuses digit strings beyond sys.get_int_max_str_digits()
        raise FormatError(f"{what} is too large ({len(token)} digits)", lineno, line) from exc


def parse_symbol(token: str, symbols: str, lineno: int, line: str) -> Symbol:
    """Parse one symbol token as an ordinal code or a literal character."""
    if symbols == "literal":
        if len(token) != 1:
            raise FormatError(f"symbol must be a single character, got {token!r}", lineno, line)
        return ord(token)
    return parse_int(token, "symbol", lineno, line)
