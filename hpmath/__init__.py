"""
hpmath: Arbitrary-Precision Transcendental Engine
=================================================

Square root, arctangent, arcsine and arccosine of arbitrary-precision
values to a configurable number of decimal digits, for use inside a
numeric-language interpreter.

Core Components:
    - engine: the algorithms on raw mpmath values and the convergence
      loop controller that tells each of them when to stop
    - value: the interpreter's numeric value kinds and the adapter that
      promotes them, calls the engine and shrinks the result
    - config: working precision, bases and debug flags
    - analysis: iteration-count profiling for the series

Usage:
    >>> import hpmath
    >>> hpmath.sqrt(4)
    2
    >>> hpmath.sqrt(2)
    BigFloat('1.41421356237309504880169', prec=83)
    >>> hpmath.asin(2)
    Traceback (most recent call last):
    ...
    hpmath.errors.DomainError: asin argument out of range [-1, 1]
"""

__version__ = "1.0.0"
__author__ = "hpmath developers"

import logging

from hpmath.errors import HPMathError, DomainError, ConvergenceError, ConfigError
from hpmath.config import Config, DEFAULT_CONFIG
from hpmath.engine import Loop, LoopRecord, observe_loops
from hpmath.value import (
    BigFloat,
    acos,
    asin,
    atan,
    eval_float_func,
    format_value,
    promote,
    shrink,
    sqrt,
)
from hpmath.analysis import IterationProfile, profile_iterations


def enable_logging(level: int = logging.DEBUG):
    """Send hpmath log records to stderr; for interactive use."""
    logging.basicConfig(level=level)
    logging.getLogger(__name__).setLevel(level)
