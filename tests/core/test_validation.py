"""
Tests for input validation utilities.
"""

import numpy as np
import pytest

from linestats.core.exceptions import (
    DegenerateInputError,
    DimensionError,
    InsufficientSamplesError,
    LengthMismatchError,
    NumericalError,
    ValidationError,
)
from linestats.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_finite_value,
    check_min_samples,
    check_not_all_zero,
    check_not_constant,
    check_pair,
    check_sample,
    check_sum_of_squares,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted_to_float64(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "x")
        assert result.dtype == np.float64

    def test_tuple_accepted(self):
        result = check_array((1.5, 2.5), "x")
        np.testing.assert_array_equal(result, [1.5, 2.5])

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "x")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b", "c"], "x")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([1 + 2j, 3 + 0j], "x")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_1d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0, 3.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan, 3.0]), "x")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="2 Inf"):
            check_finite(np.array([np.inf, -np.inf, 3.0]), "x")


class TestCheck1d:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 2)), "x")

    def test_scalar_rejected(self):
        with pytest.raises(DimensionError):
            check_1d(np.asarray(5.0), "x")


# ═══════════════════════════════════════════════════════════════════════
# check_consistent_length / check_min_samples
# ═══════════════════════════════════════════════════════════════════════


class TestCheckConsistentLength:

    def test_equal_lengths_pass(self):
        check_consistent_length(np.zeros(4), np.ones(4), names=("x", "y"))

    def test_mismatch_raises_with_lengths(self):
        with pytest.raises(LengthMismatchError, match="x=3, y=5") as exc_info:
            check_consistent_length(np.zeros(3), np.zeros(5), names=("x", "y"))
        assert exc_info.value.lengths == (3, 5)
        assert exc_info.value.names == ("x", "y")

    def test_names_count_must_match(self):
        with pytest.raises(ValueError, match="must match"):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("x",))

    def test_single_array_passes(self):
        check_consistent_length(np.zeros(3), names=("x",))


class TestCheckMinSamples:

    def test_enough_passes(self):
        check_min_samples(np.zeros(3), 3, "x")

    def test_too_few_raises(self):
        with pytest.raises(InsufficientSamplesError, match="at least 3 samples, got 2") as exc_info:
            check_min_samples(np.zeros(2), 3, "x")
        assert exc_info.value.n_samples == 2
        assert exc_info.value.required == 3


# ═══════════════════════════════════════════════════════════════════════
# Degeneracy checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNotConstant:

    def test_varying_passes(self):
        check_not_constant(np.array([1.0, 1.0, 2.0]), "x")

    def test_constant_raises(self):
        with pytest.raises(DegenerateInputError, match="identical") as exc_info:
            check_not_constant(np.array([0.1, 0.1, 0.1]), "x")
        assert exc_info.value.name == "x"
        assert exc_info.value.n_samples == 3

    def test_single_value_is_constant(self):
        with pytest.raises(DegenerateInputError):
            check_not_constant(np.array([4.0]), "x")


class TestCheckNotAllZero:

    def test_nonzero_passes(self):
        check_not_all_zero(np.array([0.0, 0.0, 1e-300]), "x")

    def test_all_zero_raises(self):
        with pytest.raises(DegenerateInputError, match="zero"):
            check_not_all_zero(np.zeros(4), "x")


class TestCheckSumOfSquares:

    def test_positive_passes(self):
        check_sum_of_squares(1e-300, "x", 3)

    def test_zero_raises_degenerate(self):
        with pytest.raises(DegenerateInputError, match="underflows") as exc_info:
            check_sum_of_squares(0.0, "x", 3)
        assert exc_info.value.name == "x"
        assert exc_info.value.n_samples == 3

    def test_overflow_raises_numerical(self):
        with pytest.raises(NumericalError, match="x: sum of squares"):
            check_sum_of_squares(float("inf"), "x", 3)


class TestCheckFiniteValue:

    def test_finite_passes(self):
        check_finite_value(-2.5, "slope")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_raises(self, value):
        with pytest.raises(NumericalError, match="slope is not finite"):
            check_finite_value(value, "slope")


# ═══════════════════════════════════════════════════════════════════════
# Combined helpers
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPair:

    def test_returns_float_arrays(self):
        x, y = check_pair([1, 2, 3], [4, 5, 6])
        assert x.dtype == np.float64 and y.dtype == np.float64

    def test_length_checked_before_contents(self):
        """A mismatch is reported even when the data also holds NaN."""
        with pytest.raises(LengthMismatchError):
            check_pair([1.0, np.nan, 3.0], [1.0, 2.0, 3.0, 4.0, 5.0])

    def test_length_checked_before_dtype(self):
        with pytest.raises(LengthMismatchError) as exc_info:
            check_pair(['a', 'b', 'c'], [1, 2, 3, 4, 5])
        assert exc_info.value.lengths == (3, 5)

    def test_non_numeric_rejected_when_lengths_match(self):
        with pytest.raises(ValidationError, match="x: non-numeric dtype"):
            check_pair(['a', 'b'], [1, 2])

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="y: contains non-finite"):
            check_pair([1.0, 2.0], [1.0, np.nan])

    def test_custom_names_in_messages(self):
        with pytest.raises(LengthMismatchError, match="dose=2, response=3"):
            check_pair([1, 2], [1, 2, 3], names=("dose", "response"))

    def test_inputs_not_mutated(self):
        x = [3, 1, 2]
        y = np.array([1.0, 2.0, 3.0])
        y_copy = y.copy()
        check_pair(x, y)
        assert x == [3, 1, 2]
        np.testing.assert_array_equal(y, y_copy)


class TestCheckSample:

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            check_sample([[1.0, 2.0], [3.0, 4.0]], "x")
