"""
Tests for the Newton square root.

Validates:
  - sqrt(0) is exactly zero, negative input is a domain error
  - Perfect squares come out exact
  - Results agree with mpmath to within a few ulps at several precisions
  - sqrt(x)² reproduces x
"""

import pytest
from mpmath.libmp import (
    finf,
    fnan,
    from_float,
    from_int,
    from_man_exp,
    from_rational,
    fzero,
    mpf_abs,
    mpf_cmp,
    mpf_mul,
    mpf_neg,
    mpf_sqrt,
    mpf_sub,
    round_nearest,
    to_str,
)

from hpmath.engine import observe_loops
from hpmath.engine.root import sqrt
from hpmath.errors import DomainError


def assert_close(actual, expected, prec, ulps=4):
    diff = mpf_abs(mpf_sub(actual, expected, prec + 40, round_nearest))
    if diff == fzero:
        return
    _, man, exp, bc = expected
    bound = from_man_exp(ulps, exp + bc - prec)
    assert mpf_cmp(diff, bound) <= 0, f"{to_str(actual, 40)} != {to_str(expected, 40)}"


SAMPLES = [
    from_man_exp(1, -100),
    from_float(1e-30),
    from_rational(1, 3, 300, round_nearest),
    from_float(0.5),
    from_int(1),
    from_int(2),
    from_int(3),
    from_float(10.0),
    from_float(12345.678),
    from_float(1e40),
    from_man_exp(7, 301),
]


class TestSpecialValues:
    def test_zero(self):
        assert sqrt(fzero, 83) == fzero

    def test_zero_does_not_iterate(self):
        with observe_loops() as records:
            sqrt(fzero, 83)
        assert records == []

    def test_negative(self):
        with pytest.raises(DomainError, match="square root of negative number"):
            sqrt(from_int(-4), 83)

    def test_negative_is_value_error(self):
        with pytest.raises(ValueError):
            sqrt(mpf_neg(from_float(1e-300)), 83)

    def test_infinity(self):
        assert sqrt(finf, 83) == finf

    def test_nan(self):
        assert sqrt(fnan, 83) == fnan


class TestExact:
    @pytest.mark.parametrize("n", [1, 4, 9, 144, 1 << 100, 12345 ** 2])
    def test_perfect_squares(self, n):
        root = int(round(n ** 0.5)) if n < 1 << 60 else 1 << 50
        assert sqrt(from_int(n), 83) == from_int(root)

    def test_quarter(self):
        assert sqrt(from_float(0.25), 53) == from_float(0.5)


class TestAccuracy:
    @pytest.mark.parametrize("prec", [24, 53, 83, 200, 1000])
    def test_against_mpmath(self, prec):
        for x in SAMPLES:
            assert_close(sqrt(x, prec), mpf_sqrt(x, prec), prec)

    def test_square_reproduces_input(self):
        prec = 120
        for x in SAMPLES:
            r = sqrt(x, prec)
            assert_close(mpf_mul(r, r, prec + 10, round_nearest), x, prec)

    def test_sqrt_two_24_digits(self):
        r = sqrt(from_int(2), 83)
        assert to_str(r, 24) == "1.41421356237309504880169"

    def test_few_iterations(self):
        with observe_loops() as records:
            sqrt(from_float(12345.678), 256)
        assert len(records) == 1
        assert records[0].name == "sqrt"
        assert records[0].iterations < 20
