"""Tagged numeric values and the adapter onto the engine."""

from hpmath.value.bigfloat import BigFloat
from hpmath.value.adapter import (
    acos,
    asin,
    atan,
    eval_float_func,
    format_value,
    promote,
    shrink,
    sqrt,
)

__all__ = [
    'BigFloat',
    'acos',
    'asin',
    'atan',
    'eval_float_func',
    'format_value',
    'promote',
    'shrink',
    'sqrt',
]
