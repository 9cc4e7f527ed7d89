"""
Error Taxonomy
==============

Two kinds of failure leave the engine:

  DomainError       the caller asked for something mathematically
                    undefined (square root of a negative number, asin
                    outside [-1, 1]). Recoverable: the current expression
                    is abandoned, the session continues.
  ConvergenceError  an iteration did not settle within its bound. This
                    is an algorithmic defect, never bad user input, and
                    must surface as a bug report.

Both propagate unmodified through recursive calls; no partial results are
ever returned.
"""


class HPMathError(Exception):
    """Base class of every error raised by hpmath."""
    recoverable = True


class DomainError(HPMathError, ValueError):
    """Argument outside the domain of the function."""


class ConfigError(HPMathError, ValueError):
    """Invalid configuration value."""


class ConvergenceError(HPMathError, RuntimeError):
    """An iterative algorithm failed to converge."""
    recoverable = False

    def __init__(self, message: str, name: str = "", argument: str = "", iterations: int = 0):
        super().__init__(message)
        self.name = name
        self.argument = argument
        self.iterations = iterations
