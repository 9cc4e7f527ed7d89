"""
Interpreter Configuration
=========================

The engine never caches precision: every entry point reads it from a
Config at call time. The validation rules follow the interpreter's
special commands (``)prec``, ``)base``, ``)debug``, ``)maxdigits``).

Usage:
    >>> conf = Config(float_prec=50)
    >>> conf.prec_bits
    169
    >>> conf.set_base(0, 16)
    >>> conf.set_debug("loops", True)
    True
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Tuple

from mpmath.libmp import dps_to_prec

from hpmath.errors import ConfigError

MAX_FLOAT_PREC = 1_000_000

# Debug flag name -> logger whose level it controls.
DEBUG_FLAGS: Dict[str, str] = {
    "loops": "hpmath.engine.loop",
}


@dataclass
class Config:
    """Settings owned by the surrounding interpreter, read-only to the engine."""
    float_prec: int = 24          # decimal digits
    ibase: int = 0                # 0 means decimal
    obase: int = 0
    max_digits: int = 10_000      # 0 disables the limit
    _debug: Dict[str, bool] = field(
        default_factory=lambda: {name: False for name in DEBUG_FLAGS}, init=False, repr=False
    )

    def __post_init__(self):
        self.set_float_prec(self.float_prec)
        self.set_base(self.ibase, self.obase)
        self.set_max_digits(self.max_digits)

    @property
    def prec_bits(self) -> int:
        """Working precision in bits for the configured decimal digits."""
        return dps_to_prec(self.float_prec)

    def set_float_prec(self, prec: int):
        if isinstance(prec, bool) or not isinstance(prec, int):
            raise ConfigError(f"illegal prec {prec!r}")
        if prec == 0 or prec > MAX_FLOAT_PREC or prec < 0:
            raise ConfigError(f"illegal prec {prec}")
        self.float_prec = prec

    def base(self) -> Tuple[int, int]:
        return self.ibase, self.obase

    def set_base(self, ibase: int, obase: int):
        for b in (ibase, obase):
            if b != 0 and (b < 2 or b > 36):
                raise ConfigError(f"illegal base {b}")
        self.ibase, self.obase = ibase, obase

    def set_max_digits(self, max_digits: int):
        if isinstance(max_digits, bool) or not isinstance(max_digits, int):
            raise ConfigError(f"illegal maxdigits {max_digits!r}")
        if max_digits < 0:
            raise ConfigError(f"illegal maxdigits {max_digits}")
        self.max_digits = max_digits

    def debug(self, name: str) -> bool:
        return self._debug.get(name, False)

    def set_debug(self, name: str, value: bool) -> bool:
        """Set a debug flag. Returns False if there is no such flag."""
        if name not in self._debug:
            return False
        self._debug[name] = bool(value)
        logging.getLogger(DEBUG_FLAGS[name]).setLevel(
            logging.DEBUG if value else logging.NOTSET
        )
        return True


DEFAULT_CONFIG = Config()
