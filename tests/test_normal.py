"""Tests for the standard normal density and A&S CDF approximation."""

import math

import numpy as np
import pytest
from scipy.stats import norm

from bsvol.normal import density, cumulative, P, COEFFICIENTS

XS = np.linspace(-8.0, 8.0, 321)


class TestDensity:
    def test_peak(self):
        assert density(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi), abs=1e-16)

    def test_even_function_exact(self):
        for x in XS:
            assert density(x) == density(-x)

    def test_matches_scipy(self):
        for x in XS:
            assert abs(density(x) - norm.pdf(x)) < 1e-15


class TestCumulative:
    def test_half_at_zero(self):
        assert abs(cumulative(0.0) - 0.5) < 1e-6

    def test_symmetry(self):
        for x in XS[XS != 0.0]:
            assert abs(cumulative(x) + cumulative(-x) - 1.0) < 1e-9

    def test_symmetry_at_zero(self):
        # Both signs take the x >= 0 branch; the A&S residual at k = 1
        # leaves cumulative(0) about 5.2e-10 above one half.
        assert abs(2.0 * cumulative(0.0) - 1.0) < 2e-9
        assert cumulative(0.0) == cumulative(-0.0)

    def test_error_bound_vs_exact(self):
        """A&S 26.2.17 has |error| < 7.5e-8."""
        err = max(abs(cumulative(x) - norm.cdf(x)) for x in XS)
        assert err < 7.5e-8

    def test_not_an_exact_cdf(self):
        # The polynomial approximation differs visibly from erf at x = 1.
        assert cumulative(1.0) != pytest.approx(norm.cdf(1.0), abs=1e-10)

    def test_monotone(self):
        vals = [cumulative(x) for x in np.linspace(-5.0, 5.0, 201)]
        assert np.all(np.diff(vals) >= 0)

    def test_tails(self):
        assert cumulative(10.0) == pytest.approx(1.0, abs=1e-12)
        assert cumulative(-10.0) == pytest.approx(0.0, abs=1e-12)

    def test_coefficients(self):
        assert P == 0.2316419
        assert COEFFICIENTS == (
            0.319381530, -0.356563782, 1.781477937, -1.821255978, 1.330274429,
        )
