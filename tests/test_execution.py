#!/usr/bin/env python3
"""
End-to-end execution through the api layer.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import pytest

from bfmachine import (
    RunOptions,
    StepLimitError,
    TapeBoundsError,
    UnbalancedLoopError,
    UnterminatedLoopError,
    build_string,
    run_file,
    run_string,
)

HELLO_WORLD = """
Classic hello world built on a nested multiplication loop

++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]
>>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++.
"""

# Programs that stay on the tape and terminate without input.
EQUIVALENCE_PROGRAMS = [
    "++++++---",
    "+>>>+++++++>>+++--<<",
    "-[--[+]]",
    "----[---->+<]>++.",
    "+++[>+++++<-]>[>++>+++<<-]>>..<.",
    HELLO_WORLD,
]

LONG_RUNS = "-" * 300 + "." + "+" * 520 + ".."


def test_hello_world():
    result = run_string(HELLO_WORLD)
    assert result.ok
    assert result.output == b"Hello World!\n"


def test_prints_A():
    assert run_string("----[---->+<]>++.").output == b"A"


@pytest.mark.parametrize("source", EQUIVALENCE_PROGRAMS + [LONG_RUNS])
def test_folding_preserves_semantics(source):
    folded = run_string(source)
    unfolded = run_string(source, options=RunOptions(fold=False))
    assert folded.ok and unfolded.ok
    assert folded.output == unfolded.output
    assert folded.cursor == unfolded.cursor
    assert np.array_equal(folded.tape, unfolded.tape)
    assert len(build_string(source)) <= len(build_string(source, options=RunOptions(fold=False)))


@pytest.mark.parametrize("source", EQUIVALENCE_PROGRAMS)
def test_folding_preserves_semantics_on_prefixes(source):
    # only prefixes that are still balanced programs
    depth = 0
    for i, ch in enumerate(source):
        depth += {'[': 1, ']': -1}.get(ch, 0)
        if depth != 0 or ch not in "+-<>.,[]":
            continue
        prefix = source[:i + 1]
        folded = run_string(prefix)
        unfolded = run_string(prefix, options=RunOptions(fold=False))
        assert folded.output == unfolded.output
        assert folded.cursor == unfolded.cursor
        assert np.array_equal(folded.tape, unfolded.tape)


def test_input_is_passed_through():
    assert run_string(",+.,+.", b"ab").output == b"bc"
    assert run_string(",.", "z").output == b"z"


def test_machine_error_is_returned_with_partial_output():
    result = run_string("++.<")
    assert not result.ok
    assert isinstance(result.error, TapeBoundsError)
    assert result.output == b"\x02"
    assert result.tape[0] == 2


def test_step_limit_option():
    result = run_string("+[]", options=RunOptions(max_steps=50))
    assert isinstance(result.error, StepLimitError)
    assert result.steps == 50


def test_tape_size_option():
    result = run_string(">>", options=RunOptions(tape_size=2))
    assert isinstance(result.error, TapeBoundsError)
    assert len(result.tape) == 2


def test_build_errors_raise():
    with pytest.raises(UnbalancedLoopError):
        run_string("]")
    with pytest.raises(UnterminatedLoopError):
        run_string("+[")


def test_run_file(tmp_path):
    path = tmp_path / "hello.bf"
    path.write_text(HELLO_WORLD, encoding="utf-8")
    assert run_file(path).output == b"Hello World!\n"


def test_run_file_with_non_utf8_comment(tmp_path):
    path = tmp_path / "latin1.bf"
    path.write_bytes(b"caf\xe9 ++++++++[>++++++++<-]>+.")
    result = run_file(path)
    assert result.ok
    assert result.output == b"A"
