"""Tests for pgmath.kernel.math._erfc module.

Tests for the complementary error function:
    - reference values against scipy.special.erfc
    - region boundaries and saturation
    - reflection identity and monotonicity
"""

import pytest
import numpy as np

from pgmath.kernel.math import erfc, DBL_EPSILON, DBL_MIN
from pgmath.kernel.math._erfc import SMALL_VAL, BIG_VAL

scipy_special = pytest.importorskip("scipy.special")


# =============================================================================
# Reference Values
# =============================================================================

class TestErfcValues:
    """erfc should match scipy.special.erfc."""

    def test_erfc_at_zero(self):
        """erfc(0) is exactly 1."""
        assert erfc(0.0) == 1.0
        assert erfc(-0.0) == 1.0

    def test_erfc_matches_scipy(self, erfc_grid):
        """Relative error stays on the order of 1e-9 in every region."""
        result = np.array([erfc(x) for x in erfc_grid])
        expected = scipy_special.erfc(erfc_grid)
        np.testing.assert_allclose(result, expected, rtol=3e-9, atol=0.0)

    @pytest.mark.parametrize("x", [0.25, 0.4999, 0.5, 1.0, 2.0, 3.9999, 4.0, 6.0, 12.0, 20.0])
    def test_erfc_region_points(self, x):
        """Points on both sides of each region boundary."""
        np.testing.assert_allclose(erfc(x), scipy_special.erfc(x), rtol=3e-9)


# =============================================================================
# Edge Cases
# =============================================================================

class TestErfcEdgeCases:
    """Saturation and underflow handling."""

    def test_below_small_val_saturates_to_two(self):
        """Very negative arguments return exactly 2."""
        for x in [SMALL_VAL - 1e-9, -10.0, -1e300, -np.inf]:
            assert erfc(x) == 2.0

    def test_at_or_above_big_val_is_zero(self):
        """Arguments past the underflow point return exactly 0."""
        for x in [BIG_VAL, 30.0, 1e300, np.inf]:
            assert erfc(x) == 0.0

    def test_tiny_arguments_return_one(self):
        """|x| < DBL_EPSILON returns exactly 1."""
        for x in [DBL_EPSILON / 2, -DBL_EPSILON / 2, 1e-300, -1e-300]:
            assert erfc(x) == 1.0

    def test_near_underflow_is_finite_and_non_negative(self):
        """Results just before BIG_VAL never go negative or NaN."""
        for x in np.linspace(26.0, BIG_VAL - 1e-9, 50):
            value = erfc(x)
            assert np.isfinite(value)
            assert 0.0 <= value < 10 * DBL_MIN / DBL_EPSILON


# =============================================================================
# Identities
# =============================================================================

class TestErfcIdentities:
    """Reflection and monotonicity."""

    def test_reflection(self, erfc_grid):
        """erfc(x) + erfc(-x) == 2."""
        for x in erfc_grid:
            np.testing.assert_allclose(erfc(x) + erfc(-x), 2.0, rtol=1e-9)

    def test_reflection_past_saturation(self):
        """Reflection still holds where one side saturates."""
        for x in [6.5, 10.0, 27.0]:
            np.testing.assert_allclose(erfc(x) + erfc(-x), 2.0, rtol=1e-9)

    def test_monotone_non_increasing(self):
        """erfc never increases along a fine grid."""
        x = np.linspace(-8.0, 28.0, 3601)
        values = np.array([erfc(v) for v in x])
        assert np.all(np.diff(values) <= 0.0)

    def test_range(self):
        """erfc stays within [0, 2]."""
        x = np.linspace(-30.0, 30.0, 601)
        values = np.array([erfc(v) for v in x])
        assert np.all(values >= 0.0)
        assert np.all(values <= 2.0)
