"""
Transcendental Engine
=====================

Square root and inverse trigonometric functions on raw mpmath ``mpf``
values. Every function takes the target precision in bits explicitly and
allocates its own scratch values, so nothing is shared between concurrent
evaluations except the immutable, precision-keyed constants.

    sqrt(x, prec)   Newton's method
    atan(x, prec)   Taylor series with sign and Euler reductions
    asin(x, prec)   atan(x / sqrt(1 - x²))
    acos(x, prec)   pi/2 - asin(x)

All of them stop iterating under the control of ``Loop``.
"""

from hpmath.engine.loop import Loop, LoopRecord, observe_loops
from hpmath.engine.root import sqrt
from hpmath.engine.arctan import atan
from hpmath.engine.arcsin import asin, acos

__all__ = [
    'Loop',
    'LoopRecord',
    'observe_loops',
    'sqrt',
    'atan',
    'asin',
    'acos',
]
