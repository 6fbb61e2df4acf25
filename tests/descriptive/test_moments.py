"""
Tests for the two-pass central-moment accumulator.
"""

import numpy as np
import pytest

from linestats.core.exceptions import ValidationError
from linestats.descriptive._moments import (
    CentralMoments,
    central_moments,
    ddof_for,
    raw_sum_of_squares,
    residual_sum_of_squares,
)


class TestCentralMoments:

    def test_single_sequence(self):
        m = central_moments(np.array([1.0, 2.0, 3.0, 4.0, 5.0]))
        assert isinstance(m, CentralMoments)
        assert m.n == 5
        assert m.mean_x == pytest.approx(3.0)
        assert m.sxx == pytest.approx(10.0)
        assert m.mean_y is None
        assert m.sxy is None
        assert m.syy is None

    def test_paired(self):
        x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
        y = np.array([2.0, 4.0, 6.0, 8.0, 10.0])
        m = central_moments(x, y)
        assert m.mean_y == pytest.approx(6.0)
        assert m.sxy == pytest.approx(20.0)
        assert m.syy == pytest.approx(40.0)

    def test_matches_numpy(self, rng):
        x = rng.standard_normal(200)
        y = 3.0 * x + rng.standard_normal(200)
        m = central_moments(x, y)
        np.testing.assert_allclose(m.sxx, np.var(x) * 200, rtol=1e-12)
        np.testing.assert_allclose(m.syy, np.var(y) * 200, rtol=1e-12)
        np.testing.assert_allclose(m.sxy, np.cov(x, y, ddof=0)[0, 1] * 200, rtol=1e-12)

    def test_large_offset_small_spread(self):
        """Centering first keeps the small spread that raw moments would cancel away."""
        offset = 1e9
        x = offset + np.array([4.0, 7.0, 13.0, 16.0])
        m = central_moments(x)
        # Deviations are -6, -3, 3, 6
        assert m.sxx == pytest.approx(90.0, rel=1e-9)

    def test_inputs_not_mutated(self):
        x = np.array([1.0, 5.0, 9.0])
        y = np.array([2.0, 3.0, 7.0])
        x_copy, y_copy = x.copy(), y.copy()
        central_moments(x, y)
        np.testing.assert_array_equal(x, x_copy)
        np.testing.assert_array_equal(y, y_copy)


class TestRawSums:

    def test_raw_sum_of_squares_not_centered(self):
        assert raw_sum_of_squares(np.array([1.0, 2.0, 3.0])) == pytest.approx(14.0)

    def test_residual_sum_of_squares(self):
        x = np.array([0.0, 1.0, 2.0])
        y = np.array([1.0, 2.0, 4.0])
        # Line 1 + x: residuals 0, 0, 1
        assert residual_sum_of_squares(x, y, 1.0, 1.0) == pytest.approx(1.0)

    def test_residual_sum_of_squares_zero_for_exact_line(self):
        x = np.array([1.0, 2.0, 3.0])
        assert residual_sum_of_squares(x, 0.5 + 2.0 * x, 0.5, 2.0) == 0.0


class TestDdof:

    def test_sample(self):
        assert ddof_for('sample') == 1

    def test_population(self):
        assert ddof_for('population') == 0

    def test_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown convention"):
            ddof_for('unbiased')
