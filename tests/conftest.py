"""
Pytest configuration and fixtures for pydfa tests.

Provides the reference description, built automata and a description-file
factory for unit and integration tests.
"""

import pytest


REFERENCE_DESCRIPTION = """\
1
2
1: 97 2 | 98 3
2: 97 1
3: 98 1
"""


@pytest.fixture
def reference_text():
    """
    Reference description: initial=1, accepting=2, symbols 97='a', 98='b'.
    """
    return REFERENCE_DESCRIPTION


@pytest.fixture
def reference_built(reference_text):
    from pydfa.io.builder import build

    return build(reference_text)


@pytest.fixture
def reference_engine(reference_built):
    """Engine over the reference description with default (standard) semantics."""
    from pydfa.core.engine import AutomatonEngine

    return AutomatonEngine.from_built(reference_built)


@pytest.fixture
def write_description(tmp_path):
    """
    Factory writing description text to a file under tmp_path.

    Returns the path of the written file.
    """

    def _write(text, name="dfa.gph"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_pydfa_logger():
    """Drop handlers installed by the CLI so each test starts unconfigured."""
    import logging

    yield
    logger = logging.getLogger("pydfa")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
