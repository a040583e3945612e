"""Command line entry point: print the secret held in each share file."""

import argparse
import logging
import sys

from polysecret.errors import LoadError, ReconstructionError
from polysecret.loader import load
from polysecret.shamir import reconstruct_encoded

logger = logging.getLogger("polysecret")


def _format_int(value: int) -> str:
    """Decimal text of an int of any size.

    Python 3.11+ caps int-to-str conversion; the cap is lifted only for
    this call and the previous value restored.
    """
    if not hasattr(sys, "get_int_max_str_digits"):
        return str(value)
    limit = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        return str(value)
    finally:
        sys.set_int_max_str_digits(limit)


def solve_file(path) -> int:
    """Load one share file and reconstruct its secret."""
    share_set = load(path)
    logger.debug("%s: n=%d k=%d, %d shares", path, share_set.n, share_set.k,
                 len(share_set.shares))
    return reconstruct_encoded(share_set.n, share_set.k, share_set.shares)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="polysecret",
        description="Reconstruct the constant term of a polynomial from Shamir shares",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="JSON share file")
    level = parser.add_mutually_exclusive_group()
    level.add_argument("-v", "--verbose", action="store_true", help="debug output")
    level.add_argument("-q", "--quiet", action="store_true", help="errors only")
    args = parser.parse_args(argv)

    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    else:
        log_level = logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")

    failed = 0
    for path in args.files:
        try:
            secret = solve_file(path)
        except LoadError as e:
            logger.error("%s", e)
            failed += 1
            continue
        except ReconstructionError as e:
            logger.error("%s: %s", path, e)
            failed += 1
            continue
        text = _format_int(secret)
        if len(args.files) > 1:
            print(f"{path}: {text}")
        else:
            print(text)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
