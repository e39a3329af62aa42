
from .tokens import Token
from .scanner import Scanner
from .builder import Builder, Jump, Op, Program, build
from .machine import Machine
from .state import Tape
from .errors import (
    BFError,
    BuildError,
    MachineError,
    MachineIOError,
    StepLimitError,
    TapeBoundsError,
    UnbalancedLoopError,
    UnterminatedLoopError,
)
from .api import RunOptions, RunResult, build_string, run_file, run_program, run_string

__all__ = [
    'Token',
    'Scanner',
    'Builder',
    'Op',
    'Jump',
    'Program',
    'build',
    'Machine',
    'Tape',
    'BFError',
    'BuildError',
    'UnbalancedLoopError',
    'UnterminatedLoopError',
    'MachineError',
    'TapeBoundsError',
    'MachineIOError',
    'StepLimitError',
    'RunOptions',
    'RunResult',
    'build_string',
    'run_program',
    'run_string',
    'run_file',
]
