#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfmachine.api import run_file


def main():
    path = os.path.join(os.path.dirname(__file__), "hello_world.bf")
    result = run_file(path)
    sys.stdout.write(result.output.decode("ascii"))
    print(f"steps={result.steps} cursor={result.cursor}")
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
