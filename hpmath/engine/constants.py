"""
Precision-keyed constants.

Every constant is a function of the precision in bits and memoised per
precision. Cached values are immutable mpf tuples, so evaluations at
different precisions can share the cache safely; a constant computed at a
lower precision is never handed to a caller asking for more bits.

One and two are exact at every precision and are plain module constants.
"""

import functools
import logging

from mpmath.libmp import from_int, fone, mpf_pi, mpf_shift, mpf_sub, round_nearest

from hpmath.engine.root import sqrt

logger = logging.getLogger(__name__)

ONE = fone
TWO = from_int(2)
MINUS_ONE = from_int(-1)


@functools.lru_cache(maxsize=64)
def pi(prec: int):
    logger.debug(f"computing pi at {prec} bits")
    return mpf_pi(prec, round_nearest)


def half_pi(prec: int):
    return mpf_shift(pi(prec), -1)


def eighth_pi(prec: int):
    return mpf_shift(pi(prec), -3)


@functools.lru_cache(maxsize=64)
def sqrt_two(prec: int):
    logger.debug(f"computing sqrt(2) at {prec} bits")
    return sqrt(TWO, prec)


@functools.lru_cache(maxsize=64)
def tan_pi_8(prec: int):
    """tan(pi/8) = sqrt(2) - 1."""
    return mpf_sub(sqrt_two(prec), ONE, prec, round_nearest)
