"""Arcsine and arccosine, derived from atan and sqrt."""

from mpmath.libmp import (
    fnan,
    fzero,
    mpf_abs,
    mpf_add,
    mpf_cmp,
    mpf_div,
    mpf_mul,
    mpf_neg,
    mpf_pos,
    mpf_shift,
    mpf_sub,
    round_nearest,
)

from hpmath.engine import constants
from hpmath.engine.arctan import EXTRA_BITS, atan
from hpmath.engine.root import sqrt
from hpmath.errors import DomainError

HALF = mpf_shift(constants.ONE, -1)


def _check_domain(x, name: str):
    if mpf_cmp(mpf_abs(x), constants.ONE) > 0:
        raise DomainError(f"{name} argument out of range [-1, 1]")


def _cosine_of(x, wp: int):
    """sqrt(1 - x²), computed as sqrt((1 - x)(1 + x)) so it keeps its bits near ±1."""
    z = mpf_mul(
        mpf_sub(constants.ONE, x, wp, round_nearest),
        mpf_add(constants.ONE, x, wp, round_nearest),
        wp, round_nearest,
    )
    return sqrt(z, wp)


def asin(x, prec: int, name: str = "asin"):
    """
    asin(x) = atan(x / sqrt(1 - x²)).

    The asin Taylor series converges very slowly near ±1 but atan converges
    well everywhere, so we go through atan. The formula divides by zero at
    |x| = 1; those two points return ±pi/2 directly.
    """
    if x == fnan:
        return x
    if x == constants.ONE:
        return constants.half_pi(prec)
    if x == constants.MINUS_ONE:
        return mpf_neg(constants.half_pi(prec))
    _check_domain(x, name)

    wp = prec + EXTRA_BITS
    z = mpf_div(x, _cosine_of(x, wp), wp, round_nearest)
    return mpf_pos(atan(z, wp), prec, round_nearest)


def acos(x, prec: int):
    """
    acos(x) = pi/2 - asin(x).

    Above 1/2 the subtraction cancels the leading bits (all of them as x
    approaches 1), so there the equivalent acos(x) = atan(sqrt(1 - x²) / x)
    is used. It has no subtraction and keeps full relative precision down
    to acos(1) = 0.
    """
    if x == fnan:
        return x
    if x == constants.ONE:
        return fzero
    _check_domain(x, "acos")

    wp = prec + EXTRA_BITS
    if mpf_cmp(x, HALF) > 0:
        z = mpf_div(_cosine_of(x, wp), x, wp, round_nearest)
        return mpf_pos(atan(z, wp), prec, round_nearest)
    z = asin(x, wp, name="acos")
    return mpf_sub(constants.half_pi(wp), z, prec, round_nearest)
