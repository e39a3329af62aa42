from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .errors import make_build_error
from .scanner import Scanner
from .tokens import Token


@dataclass(frozen=True)
class Op:
    kind: Token
    count: int  # repeat count, >= 1


@dataclass(frozen=True)
class Jump:
    kind: Token  # LOOP_OPEN or LOOP_CLOSE
    target: int  # index of the matching bracket


Instruction = Union[Op, Jump]

# placeholder target of a LOOP_OPEN whose close is not known yet
UNRESOLVED = -1


@dataclass(frozen=True)
class Program:
    instructions: Tuple[Instruction, ...] = ()

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def to_source(self) -> str:
        """Emit canonical instruction text (no comments or whitespace)."""
        out: List[str] = []
        for inst in self.instructions:
            if isinstance(inst, Op):
                out.append(inst.kind.value * inst.count)
            else:
                out.append(inst.kind.value)
        return ''.join(out)


class _TokenFeed:
    """Adapts a plain iterable of tokens to the Scanner's ``next()`` shape."""

    line = 0
    column = 0

    def __init__(self, tokens: Iterable[Token]):
        self._it = iter(tokens)

    def next(self) -> Token:
        return next(self._it, Token.END)

    def consumed(self) -> str:
        return ''


class Builder:
    """Turn a token stream into a Program.

    Consecutive identical non-bracket tokens fold into one ``Op`` with a
    repeat count. Brackets are matched with a stack of pending open indices;
    when a close arrives the open entry is replaced in place with its
    resolved target.
    """

    def __init__(self, tokens: Union[Scanner, Iterable[Token]], *, fold: bool = True):
        if isinstance(tokens, Scanner):
            self._src = tokens
        else:
            self._src = _TokenFeed(tokens)
        self.fold = fold
        self._code: List[Instruction] = []
        # (index, line, column) of every open loop
        self._stack: List[Tuple[int, int, int]] = []
        self._buf: Optional[Token] = None

    def _scan(self) -> Token:
        if self._buf is not None:
            tok, self._buf = self._buf, None
            return tok
        return self._src.next()

    def _unscan(self, tok: Token) -> None:
        self._buf = tok

    def _emit(self, inst: Instruction) -> int:
        self._code.append(inst)
        return len(self._code) - 1

    def _add_op(self, kind: Token) -> int:
        count = 1
        if self.fold:
            while True:
                tok = self._scan()
                if tok is not kind:
                    self._unscan(tok)
                    break
                count += 1
        return self._emit(Op(kind, count))

    def _error(self, kind: str, message: str, line: int, column: int):
        return make_build_error(
            kind=kind,
            message=message,
            source=self._src.consumed(),
            line=line,
            column=column,
        )

    def build(self) -> Program:
        while True:
            tok = self._scan()
            if tok is Token.END:
                break

            if not tok.is_bracket:
                self._add_op(tok)
            elif tok is Token.LOOP_OPEN:
                idx = self._emit(Jump(tok, UNRESOLVED))
                self._stack.append((idx, self._src.line, self._src.column))
            else:
                if not self._stack:
                    raise self._error('unbalanced', "']' without a matching '['",
                                      self._src.line, self._src.column)
                open_idx, _, _ = self._stack.pop()
                close_idx = self._emit(Jump(tok, open_idx))
                self._code[open_idx] = Jump(Token.LOOP_OPEN, close_idx)

        if self._stack:
            _, line, column = self._stack[-1]
            raise self._error('unterminated', f"{len(self._stack)} '[' left open at end of program",
                              line, column)

        return Program(tuple(self._code))


def build(tokens: Union[Scanner, Iterable[Token]], *, fold: bool = True) -> Program:
    return Builder(tokens, fold=fold).build()
