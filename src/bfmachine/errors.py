from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    if not lines or line_no_1 < 1:
        return ""
    idx = min(line_no_1, len(lines))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'unbalanced':
        return 'Remove the stray "]" or add the "[" that should open this loop.'
    if kind == 'unterminated':
        return 'Every "[" needs a matching "]" before the end of the program.'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BuildError(BFError):
    line: int
    column: int
    context: str


@dataclass
class UnbalancedLoopError(BuildError):
    pass


@dataclass
class UnterminatedLoopError(BuildError):
    pass


@dataclass
class MachineError(BFError):
    ip: int
    cursor: int


@dataclass
class TapeBoundsError(MachineError):
    pass


@dataclass
class MachineIOError(MachineError):
    pass


@dataclass
class StepLimitError(MachineError):
    pass


_BUILD_ERRORS = {
    'unbalanced': UnbalancedLoopError,
    'unterminated': UnterminatedLoopError,
}


def make_build_error(*, kind: str, message: str, source: str, line: int, column: int) -> BuildError:
    """Render a build error with the surrounding program lines.

    ``line``/``column`` are 1-based; 0 means the position is unknown (tokens
    did not come from a Scanner) and no context block is attached.
    """
    ctx = _build_context(source.split('\n'), line) if source else ""
    hint = _hint_for(kind)
    where = f" (line {line}, column {column})" if line else ""
    ctx_block = f"\n{ctx}" if ctx else ""
    hint_block = f"\nHint: {hint}" if hint else ""
    cls = _BUILD_ERRORS[kind]
    return cls(
        message=f"{cls.__name__}: {message}{where}{ctx_block}{hint_block}",
        line=line,
        column=column,
        context=ctx,
    )
