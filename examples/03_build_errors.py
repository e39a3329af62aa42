#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfmachine import BuildError
from bfmachine.api import build_string


def main():
    for code in ["+[\n->+<", "+]\n[-]"]:
        try:
            build_string(code)
        except BuildError as e:
            print(e)
            print()


if __name__ == "__main__":
    main()
