"""
Numeric-Value Adapter
=====================

Bridges the interpreter's tagged numeric values and the raw-mpf engine:

    value ──promote──▶ mpf at the configured precision
                         │
                         ▼ engine function
    value ◀──shrink─── mpf result

Accepted kinds: integers (int, bool, numpy integers, anything registered
as ``numbers.Integral``), rationals (``fractions.Fraction``), binary floats
(float, numpy floats) and BigFloat. Shrink turns a result with no
fractional part into an int; anything else stays a BigFloat.

The precision is read from the Config on every call, never cached.
"""

import numbers
from typing import Callable, Optional, Union

from mpmath.libmp import (
    from_float,
    from_int,
    from_rational,
    mpf_pos,
    round_nearest,
    to_int,
)

from hpmath.config import DEFAULT_CONFIG, Config
from hpmath.engine.arcsin import asin as engine_asin
from hpmath.engine.arcsin import acos as engine_acos
from hpmath.engine.arctan import atan as engine_atan
from hpmath.engine.root import sqrt as engine_sqrt
from hpmath.value.bigfloat import BigFloat

Value = Union[int, numbers.Rational, float, BigFloat]
FloatFunc = Callable[[tuple, int], tuple]


def promote(v, prec: int):
    """Convert a tagged value to a raw mpf rounded to prec bits."""
    if isinstance(v, BigFloat):
        return mpf_pos(v.mpf, prec, round_nearest)
    if isinstance(v, numbers.Integral):
        return from_int(int(v), prec, round_nearest)
    if isinstance(v, numbers.Rational):
        return from_rational(int(v.numerator), int(v.denominator), prec, round_nearest)
    if isinstance(v, numbers.Real):
        return mpf_pos(from_float(float(v)), prec, round_nearest)
    raise TypeError(f"cannot convert {type(v).__name__} to BigFloat")


def is_integer(f) -> bool:
    """Whether the raw mpf f is an exact integer (zero included)."""
    _, man, exp, bc = f
    if not man:
        return bc == 0 and exp == 0
    return exp >= 0


def shrink(f, prec: int) -> Value:
    """Narrowest kind that represents the raw mpf f exactly."""
    if is_integer(f):
        return int(to_int(f))
    return BigFloat(f, prec)


def eval_float_func(v, fn: FloatFunc, config: Optional[Config] = None) -> Value:
    """Promote v, apply the engine function fn and shrink the result."""
    conf = config or DEFAULT_CONFIG
    prec = conf.prec_bits
    return shrink(fn(promote(v, prec), prec), prec)


def sqrt(v, config: Optional[Config] = None) -> Value:
    return eval_float_func(v, engine_sqrt, config)


def atan(v, config: Optional[Config] = None) -> Value:
    return eval_float_func(v, engine_atan, config)


def asin(v, config: Optional[Config] = None) -> Value:
    return eval_float_func(v, engine_asin, config)


def acos(v, config: Optional[Config] = None) -> Value:
    return eval_float_func(v, engine_acos, config)


_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
# Below the interpreter's default limit on int-to-str conversion.
_STR_BITS = 13_000


def _format_int(n: int, base: int) -> str:
    if base == 10 and n.bit_length() < _STR_BITS:
        return str(n)
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    n = abs(n)
    digits = []
    while n:
        n, r = divmod(n, base)
        digits.append(_DIGITS[r])
    return sign + "".join(reversed(digits))


def _decimal_digits(n: int) -> int:
    return int(abs(n).bit_length() * 0.30103) + 1


def format_value(v, config: Optional[Config] = None) -> str:
    """
    Display text for a value.

    Integers are written in the output base; integers longer than
    ``max_digits`` decimal digits switch to exponent form. BigFloats are
    always written in decimal with ``float_prec`` significant digits.
    """
    conf = config or DEFAULT_CONFIG
    if isinstance(v, BigFloat):
        return v.to_string(conf.float_prec)
    if isinstance(v, numbers.Integral):
        n = int(v)
        base = conf.obase or 10
        if conf.max_digits and base == 10 and _decimal_digits(n) > conf.max_digits:
            return BigFloat(from_int(n), conf.prec_bits).to_string(conf.float_prec)
        return _format_int(n, base)
    if isinstance(v, numbers.Rational):
        return f"{format_value(v.numerator, conf)}/{format_value(v.denominator, conf)}"
    if isinstance(v, numbers.Real):
        return format_value(BigFloat(promote(v, conf.prec_bits), conf.prec_bits), conf)
    raise TypeError(f"cannot format {type(v).__name__}")
