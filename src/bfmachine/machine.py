from __future__ import annotations

from typing import BinaryIO, Optional

from .builder import Program
from .errors import MachineIOError, StepLimitError
from .state import TAPE_SIZE, Tape
from .tokens import Token


class Machine:
    """Executes a built Program against a fixed-size tape.

    ``ip`` indexes the program, ``tape.cursor`` indexes the cells. Both are
    reset at the start of every ``run`` and left in place afterwards so the
    final state can be inspected.
    """

    def __init__(self, tape_size: int = TAPE_SIZE, max_steps: Optional[int] = None):
        self.tape = Tape(tape_size)
        self.max_steps = max_steps
        self.ip = 0
        self.steps = 0

    def reset(self) -> None:
        self.tape.reset()
        self.ip = 0
        self.steps = 0

    def _io_error(self, message: str) -> MachineIOError:
        return MachineIOError(message=f"MachineIOError: {message}", ip=self.ip, cursor=self.tape.cursor)

    def _write(self, output: BinaryIO, count: int) -> None:
        try:
            output.write(bytes([self.tape.current]) * count)
        except (OSError, ValueError) as e:
            raise self._io_error(f"write failed: {e}") from e

    def _read(self, input: BinaryIO, count: int) -> None:
        for _ in range(count):
            try:
                data = input.read(1)
            except (OSError, ValueError) as e:
                raise self._io_error(f"read failed: {e}") from e
            if not data:
                raise self._io_error("input exhausted")
            self.tape.store(data[0] if isinstance(data, bytes) else ord(data))

    def run(self, program: Program, input: BinaryIO, output: BinaryIO) -> None:
        self.reset()
        tape = self.tape
        end = len(program)

        while self.ip < end:
            if self.max_steps is not None and self.steps >= self.max_steps:
                raise StepLimitError(
                    message=f"StepLimitError: exceeded {self.max_steps} steps",
                    ip=self.ip,
                    cursor=tape.cursor,
                )
            self.steps += 1

            inst = program[self.ip]
            kind = inst.kind

            if kind is Token.MOVE_RIGHT:
                tape.move(inst.count, ip=self.ip)
            elif kind is Token.MOVE_LEFT:
                tape.move(-inst.count, ip=self.ip)
            elif kind is Token.INCREMENT:
                tape.add(inst.count)
            elif kind is Token.DECREMENT:
                tape.add(-inst.count)
            elif kind is Token.OUTPUT:
                self._write(output, inst.count)
            elif kind is Token.INPUT:
                self._read(input, inst.count)
            elif kind is Token.LOOP_OPEN:
                if tape.current == 0:
                    self.ip = inst.target + 1
                    continue
            elif kind is Token.LOOP_CLOSE:
                if tape.current != 0:
                    self.ip = inst.target + 1
                    continue

            self.ip += 1
