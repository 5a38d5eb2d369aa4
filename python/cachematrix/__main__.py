"""Demo: wrap a random matrix, then resolve its inverse twice.

Run:
  - `python -m cachematrix`
  - `python -m cachematrix --size 4 --seed 1 --method lu --verbose`

The first resolution computes the inverse, the second is served from cache.

Exit code:
  - 0: OK
  - 1: The matrix could not be inverted
"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

import numpy as np

import cachematrix


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Cached matrix inverse demo")
    parser.add_argument("--size", type=int, default=10, help="Matrix dimension (default: 10)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the matrix entries")
    parser.add_argument(
        "--method",
        choices=cachematrix.METHODS,
        default=None,
        help="Inversion method (default: $CACHEMATRIX_METHOD or 'inv')",
    )
    parser.add_argument("--verbose", action="store_true", help="Show cache hit/miss log notices.")
    args = parser.parse_args(argv)

    if args.size < 1:
        parser.error("--size must be positive")

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng = np.random.default_rng(args.seed)
    holder = cachematrix.make_cache_matrix(rng.random((args.size, args.size)))

    overrides = {"method": args.method} if args.method else {}
    for call in (1, 2):
        try:
            inverse = cachematrix.resolve_inverse(holder, **overrides)
        except cachematrix.InvalidMatrixError as exc:
            print(f"ERROR: {exc}")
            return 1
        record = cachematrix.last_resolve_record() or {}
        print(f"[call {call}] {record.get('outcome', '?')}")
        print(np.array2string(inverse, precision=4, suppress_small=True))

    residual = float(np.max(np.abs(holder.get_base() @ inverse - np.eye(args.size))))
    print(f"max |A @ inv(A) - I| = {residual:.3e}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
