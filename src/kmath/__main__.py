"""
Entry point for running kmath as a module

    python -m kmath 0.5 -2.5 10

prints every digamma variant for each argument.

Copyright (c) 2026 kmath contributors

MIT License
"""

import sys
from kmath.logger import set_global_logging
from kmath import Accuracy, digamma, harmonic, __version__


def main(argv=None):
    """Main entry point"""
    logger = set_global_logging(level="INFO")
    logger.info(f"kmath v{__version__} starting...")

    args = sys.argv[1:] if argv is None else argv
    if not args:
        args = ["1", "0.5", "-2.5"]

    for arg in args:
        try:
            x = float(arg)
        except ValueError:
            logger.error(f"Not a number: {arg!r}")
            return 1
        values = "  ".join(
            f"{accuracy.value}={digamma(x, accuracy):.15g}" for accuracy in Accuracy
        )
        print(f"psi({x:g}): {values}  H={harmonic(x):.15g}")

    logger.info("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
