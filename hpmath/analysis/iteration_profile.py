"""
Iteration Profiler
==================

Measures how many loop iterations an engine function spends across a range
of inputs. The crossover thresholds in ``hpmath.engine.arctan`` were chosen
from tables like this one; rerun it after changing a threshold or a guard
digit count and check that no region needs more than a few hundred
iterations.

Usage:
    >>> import numpy as np
    >>> from hpmath.engine import atan
    >>> profile = profile_iterations(atan, np.arange(1, 21) / 10, prec=256)
    >>> profile.max
    ...
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np
from mpmath.libmp import from_float

from hpmath.config import DEFAULT_CONFIG
from hpmath.engine.loop import observe_loops


@dataclass
class IterationProfile:
    """Total loop iterations per input point."""
    name: str
    prec: int
    points: np.ndarray
    iterations: np.ndarray
    loops: Optional[np.ndarray] = None   # number of loops run per point

    @property
    def max(self) -> int:
        return int(self.iterations.max()) if self.iterations.size else 0

    @property
    def mean(self) -> float:
        return float(self.iterations.mean()) if self.iterations.size else 0.0

    @property
    def argmax_point(self) -> float:
        return float(self.points[int(self.iterations.argmax())])

    def as_rows(self) -> List[Tuple[float, int]]:
        return [(float(p), int(n)) for p, n in zip(self.points, self.iterations)]


def profile_iterations(
    fn: Callable,
    points,
    prec: Optional[int] = None,
    name: Optional[str] = None,
) -> IterationProfile:
    """
    Run fn(x, prec) for every point and record the iterations it spends.

    The first point is evaluated once before measuring so that constants
    computed on first use (pi, sqrt(2)) are not charged to it.

    Args:
        fn: Engine function taking a raw mpf and a precision in bits
        points: Inputs, anything numpy can turn into a float array
        prec: Precision in bits (default: the default configuration's)
        name: Label for the profile (default: fn.__name__)
    """
    prec = prec or DEFAULT_CONFIG.prec_bits
    pts = np.asarray(points, dtype=np.float64).ravel()
    iterations = np.zeros(pts.shape, dtype=np.int64)
    loops = np.zeros(pts.shape, dtype=np.int64)

    if pts.size:
        fn(from_float(float(pts[0])), prec)

    for i, p in enumerate(pts):
        with observe_loops() as records:
            fn(from_float(float(p)), prec)
        iterations[i] = sum(r.iterations for r in records)
        loops[i] = len(records)

    return IterationProfile(
        name=name or getattr(fn, '__name__', 'fn'),
        prec=prec,
        points=pts,
        iterations=iterations,
        loops=loops,
    )
