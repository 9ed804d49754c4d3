"""Run the loop comparison with its fixed experiment parameters."""

import sys

from loopbench.suite import main

if __name__ == "__main__":
    sys.exit(main())
