"""
End-to-end tests: description file -> builder -> engine -> verdict / exit code.
"""

from __future__ import annotations

import sys

import pytest

from pydfa.cli import main
from pydfa.core.config import BuildConfig, EngineConfig
from pydfa.core.errors import FormatError
from pydfa.core.types import Outcome
from pydfa.driver import decide

INT_DIGIT_LIMIT = getattr(sys, "get_int_max_str_digits", lambda: 0)()


# ============================================================================
# decide()
# ============================================================================


@pytest.mark.parametrize(
    "text, outcome",
    [("a", Outcome.ACCEPTED), ("ab", Outcome.ACCEPTED), ("b", Outcome.REJECTED), ("", Outcome.REJECTED)],
)
def test_decide_reference(write_description, reference_text, text, outcome) -> None:
    verdict = decide(write_description(reference_text), text)

    assert verdict.outcome is outcome
    assert verdict.error is None


def test_decide_format_error(write_description) -> None:
    verdict = decide(write_description("1\n2\n1 97 2\n"), "a")

    assert verdict.outcome is Outcome.ERROR
    assert isinstance(verdict.error, FormatError)
    assert verdict.error.lineno == 3
    assert verdict.error.line == "1 97 2"


def test_decide_passes_configs(write_description) -> None:
    path = write_description("1\n2\n1: a 1 | a 2\n")

    assert decide(path, "a", BuildConfig(symbols="literal")).outcome is Outcome.REJECTED
    assert (
        decide(path, "a", BuildConfig(symbols="literal"), EngineConfig(skip_self_loops=True)).outcome
        is Outcome.ACCEPTED
    )


def test_decide_missing_file_propagates(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        decide(tmp_path / "absent.gph", "a")


# ============================================================================
# CLI
# ============================================================================


def test_cli_accept(write_description, reference_text, capsys) -> None:
    path = write_description(reference_text)

    assert main([str(path), "a"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [f"Building DFA from {path}", "Input: a", "Evaluation: True"]


def test_cli_reject(write_description, reference_text, capsys) -> None:
    path = write_description(reference_text)

    assert main([str(path), "b"]) == 1
    assert "Evaluation: False" in capsys.readouterr().out


def test_cli_empty_input_rejected(write_description, reference_text, capsys) -> None:
    assert main([str(write_description(reference_text)), ""]) == 1
    assert "Evaluation: False" in capsys.readouterr().out


def test_cli_format_error(write_description, capsys) -> None:
    path = write_description("1\n2\n1 97 2\n")

    assert main([str(path), "a"]) == 2

    captured = capsys.readouterr()
    assert "Evaluation" not in captured.out
    assert "line 3" in captured.err
    assert "1 97 2" in captured.err


def test_cli_missing_file(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "absent.gph"), "a"]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_cli_usage_error_exits_2(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_cli_skip_self_loops(write_description, capsys) -> None:
    path = write_description("1\n2\n1: 97 1 | 97 2\n")

    assert main([str(path), "a"]) == 1
    assert main([str(path), "a", "--skip-self-loops"]) == 0


def test_cli_literal_symbols(write_description, capsys) -> None:
    path = write_description("1\n2\n1: a 2 | b 3\n2: a 1\n3: b 1\n")

    assert main([str(path), "a", "--literal-symbols"]) == 0
    assert main([str(path), "a"]) == 2


def test_cli_strict_blank_lines(write_description, reference_text, capsys) -> None:
    path = write_description(reference_text.replace("\n2\n", "\n\n2\n"))

    assert main([str(path), "a"]) == 0
    assert main([str(path), "a", "--strict-blank-lines"]) == 2


def test_cli_reject_duplicates(write_description, capsys) -> None:
    path = write_description("1\n2\n1: 97 2 | 97 3\n")

    assert main([str(path), "a"]) == 0
    assert main([str(path), "a", "--reject-duplicates"]) == 2


def test_cli_dump(write_description, reference_text, capsys) -> None:
    path = write_description("1\n2\n\n1:97 2|98 3\n2: 97 1\n3:   98 1\n")

    assert main([str(path), "a", "--dump"]) == 0
    assert reference_text in capsys.readouterr().out


def test_cli_stats(write_description, capsys) -> None:
    path = write_description("1\n2\n1: 97 2 | 98 9\n2: 97 1\n")

    assert main([str(path), "b", "--stats"]) == 1

    out = capsys.readouterr().out
    assert "Sources: 2" in out
    assert "Transitions: 3" in out
    assert "States: 3" in out
    assert "Max out-degree: 2" in out
    assert "Sinks: [9]" in out


def test_cli_stats_empty_table(write_description, capsys) -> None:
    path = write_description("0\n0\n")

    assert main([str(path), "", "--stats"]) == 0
    assert "Max out-degree: 0" in capsys.readouterr().out


def test_cli_verbose(write_description, reference_text, capsys) -> None:
    assert main([str(write_description(reference_text)), "a", "-v"]) == 0


def test_cli_undecodable_file(tmp_path, capsys) -> None:
    path = tmp_path / "binary.gph"
    path.write_bytes(b"1\n2\n1: 97 \xff\n")

    assert main([str(path), "a"]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_cli_dump_literal_symbols(write_description, capsys) -> None:
    path = write_description("1\n2\n1: a 2 | b 3\n2: a 1\n3: b 1\n")

    assert main([str(path), "a", "--literal-symbols", "--dump"]) == 0

    out = capsys.readouterr().out
    assert "1: a 2 | b 3\n2: a 1\n3: b 1\n" in out


@pytest.mark.skipif(INT_DIGIT_LIMIT == 0, reason="interpreter has no integer string conversion limit")
def test_cli_oversized_state_exits_2(write_description, capsys) -> None:
    path = write_description("9" * (INT_DIGIT_LIMIT + 1) + "\n2\n")

    assert main([str(path), "a"]) == 2

    captured = capsys.readouterr()
    assert "too large" in captured.err
    assert "Evaluation" not in captured.out


@pytest.mark.skipif(INT_DIGIT_LIMIT == 0, reason="interpreter has no integer string conversion limit")
def test_decide_oversized_state_is_format_error(write_description) -> None:
    path = write_description("1\n2\n1: 97 " + "9" * (INT_DIGIT_LIMIT + 1) + "\n")

    verdict = decide(path, "a")

    assert verdict.outcome is Outcome.ERROR
    assert isinstance(verdict.error, FormatError)
    assert verdict.error.lineno == 3
