from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from .builder import build
from .errors import BuildError, MachineError
from .machine import Machine
from .scanner import Scanner
from .state import TAPE_SIZE


def make_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bfmachine", description="Run a brainfuck program")
    ap.add_argument("program", help="path to the program text")
    ap.add_argument("--tape-size", type=int, default=TAPE_SIZE,
                    help=f"number of cells on the tape (default {TAPE_SIZE})")
    ap.add_argument("--max-steps", type=int, default=None,
                    help="stop with an error after this many instructions")
    ap.add_argument("--no-fold", dest="fold", action="store_false",
                    help="emit one instruction per symbol instead of run-length folding")
    ap.add_argument("--stats", action="store_true",
                    help="print build/execution timings to stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = make_parser().parse_args(argv)

    try:
        f = open(args.program, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        print(f"Couldn't open program: {e}", file=sys.stderr)
        return 1

    start = time.time()
    try:
        with f:
            program = build(Scanner(f), fold=args.fold)
    except BuildError as e:
        print(e, file=sys.stderr)
        return 1
    end = time.time()

    if args.stats:
        print(f"Build took {(end - start) * 1000:.2f} ms ({len(program)} instructions)", file=sys.stderr)

    try:
        machine = Machine(tape_size=args.tape_size, max_steps=args.max_steps)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    out = sys.stdout.buffer
    start = time.time()
    try:
        machine.run(program, sys.stdin.buffer, out)
    except MachineError as e:
        out.flush()
        print(f"{e} (ip={e.ip}, cursor={e.cursor})", file=sys.stderr)
        return 1
    finally:
        end = time.time()
    out.flush()

    if args.stats:
        print(f"Execution took {(end - start) * 1000:.2f} ms ({machine.steps} steps)", file=sys.stderr)
    return 0
