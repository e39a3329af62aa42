#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfmachine.api import RunOptions, build_string, run_program


def main():
    # read bytes onto the tape until a zero byte, then print them backwards
    code = ">,[>,]<[.<]"

    program = build_string(code)
    print(f"{len(program)} instructions: {program.to_source()}")

    result = run_program(program, b"stressed\x00", options=RunOptions(max_steps=10_000))
    if not result.ok:
        print(result.error, file=sys.stderr)
        return 1
    print(result.output.decode("ascii"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
