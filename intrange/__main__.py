__all__ = ["main", "parser"]

import argparse
import logging
import sys

from intrange import Range

parser = argparse.ArgumentParser(
    prog="intrange",
    description="Iterate over a range of integers, forward and then in reverse",
)

parser.add_argument("bounds", nargs="*", type=int, default=[3, 10],
    metavar="BOUND", help="the two ends of the range (default: 3 10)")
parser.add_argument("-r", "--remove", nargs="+", type=int, default=[],
    metavar="N", help="remove N during the forward pass")
parser.add_argument("-v", "--verbose", action="store_true",
    help="log each removal")

def main(argv=None, out=None):
    args = parser.parse_args(argv)
    out = sys.stdout if out is None else out

    if len(args.bounds) != 2:
        parser.error("exactly two bounds are required")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    r = Range(*args.bounds)
    doomed = set(args.remove)

    print("--- USING FORWARD ITERATOR ---", file=out)
    it = r.iterator()
    while it.hasNext():
        i = it.next()
        print(i, file=out)

        if i in doomed:
            it.remove()

    print("--- USING REVERSE ITERATOR ---", file=out)
    r.setDirection(True)
    for i in r:
        print(i, file=out)

    return 0

if __name__ == "__main__":
    sys.exit(main())
