"""Tests for pgmath.kernel.math._confluent module.

Tests for the continued fractions of G(p, x):
    - convergence within the term cap in both regimes
    - agreement with scipy's incomplete gamma functions
    - exact termination for integer p
    - regime selection in confluent_ratio
"""

import math

import pytest
import numpy as np

from pgmath.kernel.math import (
    lentz_x_smaller, lentz_p_smaller,
    confluent_x_smaller, confluent_p_smaller, confluent_ratio,
    upper_incomplete_gamma,
    CONFLUENT_EPSILON, CONFLUENT_MAX_TERMS,
)

scipy_special = pytest.importorskip("scipy.special")


X_SMALLER_PAIRS = [
    (0.5, 0.1),
    (1.0, 0.5),
    (2.5, 2.5),
    (3.0, 2.0),
    (10.0, 5.0),
    (25.0, 20.0),
]

P_SMALLER_PAIRS = [
    (0.1, 50.0),
    (0.5, 2.0),
    (1.5, 3.0),
    (2.0, 5.0),
    (5.0, 20.0),
    (10.0, 30.0),
]


def _expected_x_smaller(p, x):
    """e^x x^-p gamma_lower(p, x)."""
    return math.exp(x - p * math.log(x)) * scipy_special.gammainc(p, x) * scipy_special.gamma(p)


def _expected_p_smaller(p, x):
    """e^x x^-p gamma_upper(p, x)."""
    return math.exp(x - p * math.log(x)) * scipy_special.gammaincc(p, x) * scipy_special.gamma(p)


# =============================================================================
# Convergence
# =============================================================================

class TestConvergence:
    """Modified Lentz stops on the tolerance before the term cap."""

    @pytest.mark.parametrize("p,x", X_SMALLER_PAIRS)
    def test_x_smaller_converges(self, p, x):
        f, n, delta = lentz_x_smaller(p, x)
        assert abs(delta - 1.0) < CONFLUENT_EPSILON
        assert n < CONFLUENT_MAX_TERMS - 1
        assert np.isfinite(f) and f > 0.0

    @pytest.mark.parametrize("p,x", P_SMALLER_PAIRS)
    def test_p_smaller_converges(self, p, x):
        f, n, delta = lentz_p_smaller(p, x)
        assert abs(delta - 1.0) < CONFLUENT_EPSILON
        assert n < CONFLUENT_MAX_TERMS - 1
        assert np.isfinite(f) and f > 0.0

# =============================================================================
# Reference Values
# =============================================================================

class TestConfluentValues:
    """G(p, x) against scipy's incomplete gamma."""

    @pytest.mark.parametrize("p,x", X_SMALLER_PAIRS)
    def test_x_smaller_matches_scipy(self, p, x):
        np.testing.assert_allclose(confluent_x_smaller(p, x), _expected_x_smaller(p, x), rtol=1e-6)

    @pytest.mark.parametrize("p,x", P_SMALLER_PAIRS)
    def test_p_smaller_matches_scipy(self, p, x):
        np.testing.assert_allclose(confluent_p_smaller(p, x), _expected_p_smaller(p, x), rtol=1e-6)

    def test_x_smaller_first_term(self):
        """x = 0 leaves only a_1 / b_1 = 1 / p."""
        f, n, delta = lentz_x_smaller(4.0, 0.0)
        assert f == 0.25
        assert delta == 1.0
        assert n == 2

    def test_integer_p_terminates(self):
        """a_(n+1) = n (p - n) vanishes at n = p.

        G(3, 10) = e^10 10^-3 Gamma(3, 10) = 2 (1 + 10 + 50) / 1000.
        """
        f, n, delta = lentz_p_smaller(3.0, 10.0)
        assert n == 3
        np.testing.assert_allclose(f, 0.122, rtol=1e-13)


# =============================================================================
# Regime Selection
# =============================================================================

class TestConfluentRatio:
    """confluent_ratio picks eq. 15 for x <= p and eq. 16 otherwise."""

    def test_dispatch(self):
        assert confluent_ratio(3.0, 2.0) == confluent_x_smaller(3.0, 2.0)
        assert confluent_ratio(2.0, 2.0) == confluent_x_smaller(2.0, 2.0)
        assert confluent_ratio(2.0, 3.0) == confluent_p_smaller(2.0, 3.0)


# =============================================================================
# Known Non-convergence
# =============================================================================

class TestKnownNonConvergence:
    """Regions where the term cap is reached before the tolerance.

    The x > p fraction degrades as x -> 0 (G(p, x) grows without bound), so
    tiny p and x just above it exhaust the cap. The x <= p fraction needs
    more terms than the cap allows once p and x are both around 1e5 or
    larger. The last value is returned without any error.
    """

    def test_p_smaller_tiny_x_hits_cap(self):
        f, n, delta = lentz_p_smaller(0.01, 0.02)
        assert n == CONFLUENT_MAX_TERMS - 1
        assert abs(delta - 1.0) >= CONFLUENT_EPSILON
        assert np.isfinite(f) and f > 0.0

    def test_x_smaller_huge_p_hits_cap(self):
        """p = x = 1e6 + 0.5 stops at the cap and Q leaves [0, 1]."""
        p = x = 1e6 + 0.5
        _, n, delta = lentz_x_smaller(p, x)
        assert n == CONFLUENT_MAX_TERMS - 1
        assert abs(delta - 1.0) >= CONFLUENT_EPSILON

        q = upper_incomplete_gamma(p, x, True)
        assert q < 0.0

    def test_x_smaller_large_p_inaccurate(self):
        """p = x = 1e5 + 0.2 stops at the cap with Q off by about 0.056."""
        p = x = 1e5 + 0.2
        _, n, delta = lentz_x_smaller(p, x)
        assert n == CONFLUENT_MAX_TERMS - 1
        assert abs(delta - 1.0) >= CONFLUENT_EPSILON

        q = upper_incomplete_gamma(p, x, True)
        assert abs(q - scipy_special.gammaincc(p, x)) > 1e-2
