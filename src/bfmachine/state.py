from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .errors import TapeBoundsError

TAPE_SIZE = 3000
CELL_MODULUS = 256


@dataclass
class Tape:
    size: int = TAPE_SIZE
    cells: np.ndarray = field(init=False, repr=False)
    cursor: int = 0

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Tape size must be >= 1: {self.size}")
        self.cells = np.zeros(self.size, dtype=np.uint8)

    def reset(self) -> None:
        self.cells.fill(0)
        self.cursor = 0

    @property
    def current(self) -> int:
        return int(self.cells[self.cursor])

    def move(self, delta: int, *, ip: int = -1) -> None:
        target = self.cursor + delta
        if not 0 <= target < self.size:
            raise TapeBoundsError(
                message=f"TapeBoundsError: cursor moved to {target}, outside [0, {self.size})",
                ip=ip,
                cursor=self.cursor,
            )
        self.cursor = target

    def add(self, delta: int) -> None:
        # int() first: numpy refuses out-of-range python ints for uint8
        self.cells[self.cursor] = (int(self.cells[self.cursor]) + delta) % CELL_MODULUS

    def store(self, value: int) -> None:
        self.cells[self.cursor] = value % CELL_MODULUS
