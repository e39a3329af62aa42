from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class Token(Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    INPUT = ','
    LOOP_OPEN = '['
    LOOP_CLOSE = ']'
    # sentinel, never matched by a character
    END = ''

    @property
    def symbol(self) -> Optional[str]:
        return self.value or None

    @property
    def is_bracket(self) -> bool:
        return self in (Token.LOOP_OPEN, Token.LOOP_CLOSE)


SYMBOLS: Dict[str, Token] = {t.value: t for t in Token if t is not Token.END}
