"""
Command-line demo: ``python -m modinverse [classic|binary] [x n]``.

Without a subcommand both algorithms run on their default examples.
"""

import argparse
import sys
from typing import List, Optional

from . import binary, classic

CLASSIC_EXAMPLE = (3, 10)
BINARY_EXAMPLE = (13, 97)


def run_classic(x: int, n: int) -> int:
    r = classic.mod_inv(x, n)
    if r is None:
        print(f"{x} and {n} are not coprime!")
    else:
        print(r)
    return 0


def run_binary(x: int, n: int) -> int:
    i = binary.mod_inv(x, n)
    if (i * x) % n != 1:
        print("Incorrect inverse!", file=sys.stderr)
        return 1
    print(i)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="modinverse")
    parser.description = "Compute the multiplicative inverse of x modulo n"
    sub = parser.add_subparsers(dest="algorithm")

    p_classic = sub.add_parser("classic", help="Extended Euclidean, any n >= 2")
    p_classic.add_argument("x", type=int, nargs="?", default=CLASSIC_EXAMPLE[0])
    p_classic.add_argument("n", type=int, nargs="?", default=CLASSIC_EXAMPLE[1])

    p_binary = sub.add_parser(
        "binary", help="binary Extended Euclidean, odd n, x coprime to n"
    )
    p_binary.add_argument("x", type=int, nargs="?", default=BINARY_EXAMPLE[0])
    p_binary.add_argument("n", type=int, nargs="?", default=BINARY_EXAMPLE[1])
    p_binary.epilog = (
        "The inputs are not validated; the result is checked against "
        "(i * x) mod n == 1 afterwards."
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.algorithm is None:
        status = run_classic(*CLASSIC_EXAMPLE)
        return status or run_binary(*BINARY_EXAMPLE)

    if args.algorithm == "classic":
        if args.n < 2:
            parser.error("The modulus must be greater than 1")
        return run_classic(args.x, args.n)

    if args.n < 1:
        parser.error("The modulus must be positive")
    return run_binary(args.x, args.n)


if __name__ == "__main__":
    sys.exit(main())
