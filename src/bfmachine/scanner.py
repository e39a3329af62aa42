from __future__ import annotations

import io
from typing import Iterator, List, TextIO

from .tokens import SYMBOLS, Token


def is_whitespace(ch: str) -> bool:
    return ch.isspace()


def is_comment(ch: str) -> bool:
    """Letters and digits are free-form comment text."""
    return ch.isalpha() or ch.isdigit()


class Scanner:
    """Forward-only tokenizer over a text stream.

    ``next()`` hands out one classified Token per call and returns
    ``Token.END`` once the stream is exhausted, on that call and every one
    after it. Whitespace and comment characters never reach the caller.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pending = ''
        self._done = False
        self._consumed: List[str] = []
        self._line = 1
        self._column = 0
        self._prev_column = 0
        # position of the last returned token
        self.line = 0
        self.column = 0

    @classmethod
    def from_string(cls, text: str) -> 'Scanner':
        return cls(io.StringIO(text))

    def _read(self) -> str:
        if self._pending:
            ch, self._pending = self._pending, ''
        else:
            ch = self._stream.read(1)
            if not ch:
                return ''
            self._consumed.append(ch)
        if ch == '\n':
            self._line += 1
            self._prev_column = self._column
            self._column = 0
        else:
            self._column += 1
        return ch

    def _unread(self, ch: str) -> None:
        self._pending = ch
        if ch == '\n':
            self._line -= 1
            self._column = self._prev_column
        else:
            self._column -= 1

    def _skip_run(self, pred) -> None:
        while True:
            ch = self._read()
            if not ch:
                return
            if not pred(ch):
                self._unread(ch)
                return

    def next(self) -> Token:
        while not self._done:
            ch = self._read()
            if not ch:
                self._done = True
                break

            tok = SYMBOLS.get(ch)
            if tok is not None:
                self.line, self.column = self._line, self._column
                return tok

            if is_whitespace(ch):
                self._skip_run(is_whitespace)
            elif is_comment(ch):
                self._skip_run(is_comment)
            # anything else is an ignored character

        self.line, self.column = self._line, self._column + 1
        return Token.END

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next()
            if tok is Token.END:
                return
            yield tok

    def consumed(self) -> str:
        """Program text read from the stream so far."""
        return ''.join(self._consumed)
