from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from pydfa.core.config import BuildConfig, EngineConfig
from pydfa.core.engine import AutomatonEngine
from pydfa.core.errors import FormatError
from pydfa.core.symbols import SymbolInput
from pydfa.core.table import BuiltAutomaton
from pydfa.core.types import Outcome, Verdict
from pydfa.io.builder import build_file

logger = logging.getLogger(__name__)


def judge(
    built: BuiltAutomaton,
    symbols: SymbolInput,
    engine_config: Optional[EngineConfig] = None,
) -> Verdict:
    engine = AutomatonEngine.from_built(built, engine_config)
    if engine.evaluate(symbols):
        return Verdict(Outcome.ACCEPTED)
    return Verdict(Outcome.REJECTED)


def decide(
    path: Union[str, Path],
    symbols: SymbolInput,
    build_config: Optional[BuildConfig] = None,
    engine_config: Optional[EngineConfig] = None,
) -> Verdict:
    """Build the description at ``path`` and evaluate ``symbols`` against it.

    A malformed description yields ``Outcome.ERROR``; nothing is evaluated
    against a partially built table. I/O errors propagate.
    """
    try:
        built = build_file(path, build_config)
    except FormatError as exc:
        logger.error("cannot build %s: %s", path, exc)
        return Verdict(Outcome.ERROR, exc)
    return judge(built, symbols, engine_config)
