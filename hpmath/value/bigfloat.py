"""BigFloat: the interpreter's arbitrary-precision float value kind."""

import functools
import numbers

from mpmath.libmp import (
    fnan,
    from_float,
    from_int,
    mpf_cmp,
    mpf_neg,
    mpf_sign,
    prec_to_dps,
    to_float,
    to_str,
)


@functools.total_ordering
class BigFloat:
    """
    Immutable binary float: a raw mpmath ``mpf`` tuple and the precision,
    in bits, it was computed at.

    Equality and ordering compare values, not precisions, and extend to
    Python ints and floats.
    """

    __slots__ = ('mpf', 'prec')

    def __init__(self, mpf, prec: int):
        object.__setattr__(self, 'mpf', mpf)
        object.__setattr__(self, 'prec', prec)

    def __setattr__(self, name, value):
        raise AttributeError("BigFloat is immutable")

    def sign(self) -> int:
        return mpf_sign(self.mpf)

    def is_nan(self) -> bool:
        return self.mpf == fnan

    def _coerce(self, other):
        if isinstance(other, BigFloat):
            return other.mpf
        if isinstance(other, numbers.Integral):
            return from_int(int(other))
        if isinstance(other, float):
            return from_float(other)
        return None

    def __eq__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if self.is_nan() or o == fnan:
            return False
        return mpf_cmp(self.mpf, o) == 0

    def __lt__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if self.is_nan() or o == fnan:
            return False
        return mpf_cmp(self.mpf, o) < 0

    def __hash__(self):
        return hash(to_float(self.mpf))

    def __neg__(self) -> 'BigFloat':
        return BigFloat(mpf_neg(self.mpf), self.prec)

    def __float__(self) -> float:
        return to_float(self.mpf)

    def to_string(self, digits: int = 0) -> str:
        """Decimal text with the given number of significant digits
        (default: all digits the precision supports)."""
        return to_str(self.mpf, digits or prec_to_dps(self.prec))

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"BigFloat('{self.to_string()}', prec={self.prec})"
