#!/usr/bin/env python3
"""Print the Stern-Brocot data of a fraction.

Usage:
    python scripts/explore.py 8 5
    python scripts/explore.py 355 113 --word --verbose
"""

import argparse
import logging

from stern_brocot import NodeStore
from stern_brocot.words import christoffel_word


def main(argv=None):
    parser = argparse.ArgumentParser(description="Explore a fraction of the Stern-Brocot tree")
    parser.add_argument("p", type=int, help="Numerator (>= 0)")
    parser.add_argument("q", type=int, help="Denominator (>= 0), coprime with p")
    parser.add_argument("--word", action="store_true", help="Also print the Christoffel word")
    parser.add_argument("--verbose", action="store_true", help="Log node creation")
    args = parser.parse_args(argv)

    if args.verbose and not logging.getLogger().handlers:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    store = NodeStore()
    f = store.fraction(args.p, args.q)

    print(f"Fraction:   {store.display(f)}")
    if f.p() != 0 and f.q() != 0:
        f1, f2 = f.get_split()
        b1, nb1, b2, nb2 = f.get_split_berstel()
        print(f"Father:     {f.father().p()}/{f.father().q()}")
        print(f"Ancestor:   {f.ancestor().p()}/{f.ancestor().q()}")
        print(f"Split:      {f1.p()}/{f1.q()} + {f2.p()}/{f2.q()}")
        print(f"Berstel:    {nb1} x {b1.p()}/{b1.q()} + {nb2} x {b2.p()}/{b2.q()}")
    if args.word:
        print(f"Word:       {christoffel_word(f)}")
    print(f"Nodes:      {store.nb_fractions}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
