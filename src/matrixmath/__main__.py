"""Command-line demo: multiplies a few small matrices and prints the results."""
import argparse
import logging
from typing import Optional, Sequence

from matrixmath.analysis.products import multiply
from matrixmath.logging_config import setup_logging
from matrixmath.model.matrix import Matrix

logger = logging.getLogger("matrixmath.demo")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="matrixmath", description=__doc__)
    parser.add_argument("--debug", action="store_true", help="log every partial product")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.debug else logging.WARNING, log_file=args.log_file)

    a = Matrix([
        [2, 2, 2],
        [2, 2, 2],
    ])
    b = Matrix([
        [2, 2],
        [2, 2],
        [2, 2],
    ])
    c = Matrix([
        [2, 2],
        [2, 2],
    ])

    logger.debug(f"A is {a.shape}, B is {b.shape}, C is {c.shape}")

    print("A x B =")
    print(multiply([a, b]))
    print()
    print("row 1 of B x C =")
    print(multiply([b.get_row(1), c]))


if __name__ == "__main__":
    main()
