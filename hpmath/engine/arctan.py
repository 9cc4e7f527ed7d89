"""
Arctangent
==========

Arctangent over the whole real line, built from two Taylor series and two
reductions:

    1. Sign:        atan(-x) = -atan(x)
    2. Euler:       atan(x)  = pi/8 + atan((x - y) / (1 + xy)),  y = sqrt(2) - 1
                    used when |1 - x| < EULER_CROSSOVER, where both series
                    converge pathologically slowly (atan 1.00001 needs over a
                    million terms at 256 bits). tan(pi/8) = sqrt(2) - 1, so only
                    one new arctangent is needed.
    3. Large:       atan(x) = pi/2 - 1/x + 1/3x³ - 1/5x⁵ + ...    x > 1
    4. Small:       atan(x) = x - x³/3 + x⁵/5 - ...               x < 1

Every result is rounded to nearest at the target precision. Once x exceeds
2**prec the 1/x term is below half an ulp of pi/2, so atan(x) rounds to
exactly the rounded pi/2 (and atan(-x) to its negation) rather than to a
value strictly inside the interval.

Why 0.5? The Euler argument (x - y)/(1 + xy) must stay well away from 1.
At x = 0.5 it is 0.07, at x = 1 it is 0.414 and at x = 1.5 it is 0.66,
which is as far as we dare go; a reduced argument above 0.5 is reduced once
more. Approximate loop iterations at 256 bits, x = 0.1, 0.2, ... 2.0:

    0.1 39   0.2 55   0.3 73   0.4 96   0.5 126
    0.6 47   0.7 59   0.8 71   0.9 85   1.0 99
    1.1 116  1.2 38   1.3 44   1.4 50   1.5 213
    1.6 183  1.7 163  1.8 147  1.9 135  2.0 125

``hpmath.analysis.iteration_profile`` regenerates this table.
"""

from mpmath.libmp import (
    finf,
    fninf,
    fnan,
    from_float,
    from_int,
    fzero,
    mpf_abs,
    mpf_add,
    mpf_cmp,
    mpf_div,
    mpf_mul,
    mpf_neg,
    mpf_pos,
    mpf_sign,
    mpf_sub,
    round_nearest,
)

from hpmath.engine import constants
from hpmath.engine.loop import Loop

EULER_CROSSOVER = from_float(0.5)
GUARD_DIGITS = 4
# Extra bits for the reduction arithmetic outside the series loops.
EXTRA_BITS = 10


def atan(x, prec: int):
    """atan(x) in radians for the raw mpf x, rounded to prec bits."""
    if x == fnan:
        return x
    if x == finf:
        return constants.half_pi(prec)
    if x == fninf:
        return mpf_neg(constants.half_pi(prec))

    sign = mpf_sign(x)
    if sign == 0:
        return fzero
    if sign < 0:
        return mpf_neg(atan(mpf_neg(x), prec))

    wp = prec + EXTRA_BITS
    gap = mpf_abs(mpf_sub(constants.ONE, x, wp, round_nearest))
    if mpf_cmp(gap, EULER_CROSSOVER) < 0:
        y = constants.tan_pi_8(wp)
        num = mpf_sub(x, y, wp, round_nearest)
        den = mpf_add(mpf_mul(x, y, wp, round_nearest), constants.ONE, wp, round_nearest)
        z = atan(mpf_div(num, den, wp, round_nearest), wp)
        return mpf_add(constants.eighth_pi(wp), z, prec, round_nearest)

    if mpf_cmp(x, constants.ONE) > 0:
        return _atan_large(x, prec)
    return _atan_small(x, prec)


def _atan_small(x, prec: int):
    """x - x³/3 + x⁵/5 - ... for 0 < x < 1."""
    loop = Loop("atan", x, GUARD_DIGITS, prec)
    wp = loop.prec
    x_squared = mpf_mul(x, x, wp, round_nearest)
    x_n = x
    n = 1
    z = fzero
    plus = True
    while True:
        term = mpf_div(x_n, from_int(n), wp, round_nearest)
        if plus:
            z = mpf_add(z, term, wp, round_nearest)
        else:
            z = mpf_sub(z, term, wp, round_nearest)
        plus = not plus
        if loop.terminate(z):
            break
        n += 2
        # x_n becomes x**n for the new n.
        x_n = mpf_mul(x_n, x_squared, wp, round_nearest)
    return mpf_pos(z, prec, round_nearest)


def _atan_large(x, prec: int):
    """pi/2 - 1/x + 1/3x³ - 1/5x⁵ + ... for x > 1."""
    loop = Loop("atan", x, GUARD_DIGITS, prec)
    wp = loop.prec
    x_squared = mpf_mul(x, x, wp, round_nearest)
    x_n = x
    n = 1
    z = constants.half_pi(wp)
    plus = False
    while True:
        term = mpf_mul(x_n, from_int(n), wp, round_nearest)
        term = mpf_div(constants.ONE, term, wp, round_nearest)
        if plus:
            z = mpf_add(z, term, wp, round_nearest)
        else:
            z = mpf_sub(z, term, wp, round_nearest)
        plus = not plus
        if loop.terminate(z):
            break
        n += 2
        x_n = mpf_mul(x_n, x_squared, wp, round_nearest)
    return mpf_pos(z, prec, round_nearest)
