"""
Tests for the precision-keyed constants.

Validates:
  - Each precision gets its own value, never a truncated or stale one
  - Values are memoised per precision
  - Concurrent requests at different precisions do not interfere
"""

from concurrent.futures import ThreadPoolExecutor

from mpmath.libmp import (
    fone,
    from_int,
    from_man_exp,
    fzero,
    mpf_abs,
    mpf_cmp,
    mpf_mul,
    mpf_pi,
    mpf_shift,
    mpf_sqrt,
    mpf_sub,
    round_nearest,
)

from hpmath.engine import constants


def within_ulps(actual, expected, prec, ulps=1):
    diff = mpf_abs(mpf_sub(actual, expected, prec + 40, round_nearest))
    if diff == fzero:
        return True
    _, man, exp, bc = expected
    return mpf_cmp(diff, from_man_exp(ulps, exp + bc - prec)) <= 0


class TestPi:
    def test_matches_mpmath(self):
        for prec in (24, 53, 83, 256):
            assert constants.pi(prec) == mpf_pi(prec, round_nearest)

    def test_keyed_by_precision(self):
        low = constants.pi(53)
        high = constants.pi(300)
        assert low != high
        assert high == mpf_pi(300, round_nearest)
        # Asking for the low precision again still gives the low one.
        assert constants.pi(53) == low

    def test_memoised(self):
        assert constants.pi(123) is constants.pi(123)

    def test_fractions_of_pi(self):
        pi = constants.pi(83)
        assert constants.half_pi(83) == mpf_shift(pi, -1)
        assert constants.eighth_pi(83) == mpf_shift(pi, -3)


class TestSqrtTwo:
    def test_matches_mpmath(self):
        for prec in (53, 83, 256):
            assert within_ulps(constants.sqrt_two(prec), mpf_sqrt(from_int(2), prec, round_nearest), prec)

    def test_tan_pi_8(self):
        prec = 83
        expected = mpf_sub(mpf_sqrt(from_int(2), prec + 20, round_nearest), fone, prec, round_nearest)
        assert within_ulps(constants.tan_pi_8(prec), expected, prec, ulps=8)

    def test_square(self):
        r = constants.sqrt_two(200)
        sq = mpf_mul(r, r, 200, round_nearest)
        assert within_ulps(sq, constants.TWO, 200, ulps=4)


class TestConcurrency:
    def test_mixed_precisions_in_threads(self):
        precs = [40 + 17 * i for i in range(24)] * 2

        def work(prec):
            return prec, constants.pi(prec), constants.sqrt_two(prec)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(work, precs))

        for prec, pi, root in results:
            assert pi == mpf_pi(prec, round_nearest)
            assert within_ulps(root, mpf_sqrt(from_int(2), prec, round_nearest), prec)
