"""
Convergence Loop Controller
===========================

Shared termination policy for every iterative algorithm in the engine.

Each invocation of an algorithm creates one Loop, performs its arithmetic
at ``loop.prec`` (the target precision inflated by guard bits) and calls
``loop.terminate(z)`` with every new candidate. The loop stops when

    |z_n - z_{n-1}|  <  ulp(z_n) at the target precision

i.e. once another iteration could not change any bit the caller asked
for. The magnitude of the delta is used, so alternating series that
approach their limit from both sides terminate the same way as monotone
ones.

Failure modes (both raise ConvergenceError):
    - the iteration count reaches ``max_iterations``
      (default 10 + ITERATIONS_PER_BIT * working precision)
    - |delta| stays identical for more than STALL_LIMIT consecutive
      iterations while still above the threshold (the iteration is cycling)

Usage:
    >>> loop = Loop("sqrt", x, guard_digits=1, prec=83)
    >>> while True:
    ...     z = step(z, loop.prec)
    ...     if loop.terminate(z):
    ...         break
"""

import logging
import math
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator, List, Optional

from mpmath.libmp import (
    fzero,
    from_man_exp,
    mpf_abs,
    mpf_cmp,
    mpf_sub,
    prec_to_dps,
    round_nearest,
    to_str,
)

from hpmath.errors import ConvergenceError

logger = logging.getLogger(__name__)

ITERATIONS_PER_BIT = 4
STALL_LIMIT = 3
BITS_PER_DIGIT = math.log2(10)


@dataclass(frozen=True)
class LoopRecord:
    """Summary of one completed loop."""
    name: str
    argument: str
    iterations: int
    prec: int


_observer: ContextVar[Optional[List[LoopRecord]]] = ContextVar("hpmath_loop_observer", default=None)


@contextmanager
def observe_loops() -> Iterator[List[LoopRecord]]:
    """
    Collect a LoopRecord for every loop that completes inside the block.

    The collector lives in a context variable, so evaluations running in
    other threads or tasks do not see each other's records.
    """
    records: List[LoopRecord] = []
    token = _observer.set(records)
    try:
        yield records
    finally:
        _observer.reset(token)


def _magnitude(x) -> Optional[int]:
    """Binary exponent e such that 2**(e-1) <= |x| < 2**e; None for zero."""
    _, man, exp, bc = x
    if not man:
        return None
    return exp + bc


def _fmt(x, prec: int) -> str:
    return to_str(x, prec_to_dps(prec))


class Loop:
    """
    Termination controller for one invocation of an iterative algorithm.

    Args:
        name: Function name, used in diagnostics
        reference: The original argument (raw mpf); scales the threshold
            when the candidate is zero and appears in error messages
        guard_digits: Extra decimal digits carried by the iteration, > 0
        prec: Target precision in bits
        max_iterations: Iteration cap (default derived from the precision)
    """

    def __init__(
        self,
        name: str,
        reference,
        guard_digits: int,
        prec: int,
        max_iterations: Optional[int] = None,
    ):
        if guard_digits <= 0:
            raise ValueError(f"{name}: guard digits must be positive, got {guard_digits}")
        self.name = name
        self.reference = reference
        self.guard_digits = guard_digits
        self.target_prec = prec
        self.prec = prec + math.ceil(guard_digits * BITS_PER_DIGIT)
        self.max_iterations = (
            max_iterations if max_iterations is not None
            else 10 + ITERATIONS_PER_BIT * self.prec
        )
        self._i = 0
        self._prev_z = None
        self._prev_delta = None
        self._stall_count = 0

    @property
    def iterations(self) -> int:
        """Number of candidates examined so far."""
        return self._i

    def terminate(self, z) -> bool:
        """Record candidate z and report whether the algorithm should stop."""
        self._i += 1
        if self._prev_z is None:
            self._prev_z = z
            self._check_bound(z, fzero)
            return False

        delta = mpf_abs(mpf_sub(self._prev_z, z, self.prec, round_nearest))
        if delta == fzero or mpf_cmp(delta, self._threshold(z)) < 0:
            self._finish()
            return True

        if self._prev_delta is not None and mpf_cmp(delta, self._prev_delta) == 0:
            self._stall_count += 1
            if self._stall_count > STALL_LIMIT:
                self._fail(z, delta, f"stalled after {self._i} iterations")
        else:
            self._stall_count = 0

        self._check_bound(z, delta)
        self._prev_delta = delta
        self._prev_z = z
        return False

    def _threshold(self, z):
        """One unit in the last place of z at the target precision."""
        mag = _magnitude(z)
        if mag is None:
            mag = _magnitude(self.reference)
        if mag is None:
            mag = 0
        return from_man_exp(1, mag - self.target_prec)

    def _check_bound(self, z, delta):
        if self._i >= self.max_iterations:
            self._fail(z, delta, f"did not converge after {self.max_iterations} iterations")

    def _fail(self, z, delta, reason: str):
        argument = _fmt(self.reference, self.target_prec)
        message = (
            f"{self.name} {argument}: {reason}; "
            f"prev,last result {_fmt(self._prev_z, self.prec)},{_fmt(z, self.prec)} "
            f"delta {_fmt(delta, self.prec)}"
        )
        logger.error(message)
        raise ConvergenceError(message, name=self.name, argument=argument, iterations=self._i)

    def _finish(self):
        records = _observer.get()
        if records is None and not logger.isEnabledFor(logging.DEBUG):
            return
        argument = _fmt(self.reference, self.target_prec)
        logger.debug(f"{self.name} {argument}: converged in {self._i} iterations at {self.prec} bits")
        if records is not None:
            records.append(LoopRecord(
                name=self.name,
                argument=argument,
                iterations=self._i,
                prec=self.target_prec,
            ))
