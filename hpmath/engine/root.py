"""Square root by Newton's method."""

from mpmath.libmp import (
    finf,
    fnan,
    from_man_exp,
    fzero,
    mpf_div,
    mpf_mul,
    mpf_pos,
    mpf_shift,
    mpf_sign,
    mpf_sub,
    round_nearest,
)

from hpmath.engine.loop import Loop
from hpmath.errors import DomainError


def sqrt(x, prec: int):
    """
    Non-negative square root of the raw mpf x, rounded to prec bits.

    Each iteration computes

        z = z - (z² - x) / 2z

    starting from x with its binary exponent halved, which puts the first
    guess within a factor of two of the root; a handful of iterations
    then suffice.
    """
    if x == fnan or x == finf:
        return x
    sign = mpf_sign(x)
    if sign < 0:
        raise DomainError("square root of negative number")
    if sign == 0:
        return fzero

    _, man, exp, bc = x
    # x = m * 2**e with 1/2 <= m < 1.
    e = exp + bc
    z = from_man_exp(man, e // 2 - bc)

    loop = Loop("sqrt", x, 1, prec)
    wp = loop.prec
    while True:
        num = mpf_sub(mpf_mul(z, z, wp, round_nearest), x, wp, round_nearest)
        num = mpf_div(num, mpf_shift(z, 1), wp, round_nearest)
        z = mpf_sub(z, num, wp, round_nearest)
        if loop.terminate(z):
            break
    return mpf_pos(z, prec, round_nearest)
