from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .builder import Program, build
from .errors import MachineError
from .machine import Machine
from .scanner import Scanner
from .state import TAPE_SIZE


@dataclass(frozen=True)
class RunOptions:
    tape_size: int = TAPE_SIZE
    max_steps: Optional[int] = None
    fold: bool = True


@dataclass(frozen=True)
class RunResult:
    output: bytes
    tape: np.ndarray
    cursor: int
    steps: int
    error: Optional[MachineError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_string(source: str, *, options: Optional[RunOptions] = None) -> Program:
    fold = True if options is None else options.fold
    return build(Scanner.from_string(source), fold=fold)


def run_program(program: Program, input: Union[bytes, str] = b"", *, options: Optional[RunOptions] = None) -> RunResult:
    opts = options or RunOptions()
    if isinstance(input, str):
        input = input.encode("utf-8")

    machine = Machine(tape_size=opts.tape_size, max_steps=opts.max_steps)
    out = io.BytesIO()
    error: Optional[MachineError] = None
    try:
        machine.run(program, io.BytesIO(input), out)
    except MachineError as e:
        error = e

    return RunResult(
        output=out.getvalue(),
        tape=machine.tape.cells.copy(),
        cursor=machine.tape.cursor,
        steps=machine.steps,
        error=error,
    )


def run_string(source: str, input: Union[bytes, str] = b"", *, options: Optional[RunOptions] = None) -> RunResult:
    return run_program(build_string(source, options=options), input, options=options)


def run_file(path: str | Path, input: Union[bytes, str] = b"", *, options: Optional[RunOptions] = None, encoding: str = "utf-8") -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding, errors="replace"), input, options=options)
