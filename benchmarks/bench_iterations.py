"""
Iteration Count Survey
======================

Prints the number of loop iterations each engine function needs across its
domain, the table used to pick the arctangent crossover.

Usage:
    python benchmarks/bench_iterations.py [--bits 256]
"""

import argparse
import sys
import time
from pathlib import Path

import numpy as np
from tabulate import tabulate

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hpmath.analysis import profile_iterations
from hpmath.engine import acos, asin, atan, sqrt


SURVEYS = [
    ("atan", atan, np.round(np.arange(1, 21) * 0.1, 1)),
    ("atan (large)", atan, np.array([2.0, 5.0, 10.0, 100.0, 1e6])),
    ("sqrt", sqrt, np.array([1e-30, 0.5, 2.0, 10.0, 1e30])),
    ("asin", asin, np.round(np.linspace(-0.95, 0.95, 11), 2)),
    ("acos", acos, np.round(np.linspace(-0.95, 0.95, 11), 2)),
]

MAX_ACCEPTABLE = 400


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--bits", type=int, default=256, help="precision in bits")
    args = parser.parse_args(argv)

    worst = 0
    for label, fn, points in SURVEYS:
        start = time.perf_counter()
        profile = profile_iterations(fn, points, prec=args.bits, name=label)
        elapsed = time.perf_counter() - start
        print(f"\n{label} at {args.bits} bits ({elapsed * 1000:.1f} ms)")
        print(tabulate(
            [(p, n, l) for (p, n), l in zip(profile.as_rows(), profile.loops)],
            headers=["x", "iterations", "loops"],
        ))
        print(f"max {profile.max} at x={profile.argmax_point}, mean {profile.mean:.1f}")
        worst = max(worst, profile.max)

    if worst > MAX_ACCEPTABLE:
        print(f"\nFAIL: {worst} iterations exceeds {MAX_ACCEPTABLE}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
