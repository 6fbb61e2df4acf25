"""
Input validation utilities for linestats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from linestats.core.exceptions import (
    ValidationError,
    DimensionError,
    LengthMismatchError,
    InsufficientSamplesError,
    DegenerateInputError,
    NumericalError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    result = _as_array(array, name)

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    # Double precision throughout for reproducible results
    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length.

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        LengthMismatchError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = tuple(arr.shape[0] for arr in arrays)
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise LengthMismatchError(
            f"Inconsistent lengths: {details}",
            lengths=lengths,
            names=tuple(names),
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples
        name: Parameter name for error messages

    Raises:
        InsufficientSamplesError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientSamplesError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            n_samples=n,
            required=min_samples,
        )


def check_not_constant(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is not constant (has non-zero spread about its mean).

    Exact equality is used rather than a variance threshold: the two-pass
    mean of identical values can differ from them in the last bit, which
    would leave a tiny non-zero sum of squares.

    Args:
        array: 1D array to check (at least one element)
        name: Parameter name for error messages

    Raises:
        DegenerateInputError: If every element is identical
    """
    if np.all(array == array[0]):
        raise DegenerateInputError(
            f"{name}: all {array.shape[0]} values are identical ({float(array[0])!r}), "
            f"zero variance",
            name=name,
            n_samples=array.shape[0],
        )


def check_not_all_zero(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one non-zero element (non-zero raw sum of squares).

    Args:
        array: 1D array to check
        name: Parameter name for error messages

    Raises:
        DegenerateInputError: If every element is zero
    """
    if not np.any(array):
        raise DegenerateInputError(
            f"{name}: all {array.shape[0]} values are zero, zero sum of squares",
            name=name,
            n_samples=array.shape[0],
        )


def check_sum_of_squares(value: float, name: str, n_samples: int) -> None:
    """
    Verify a computed sum of squares can be used as a divisor.

    The value checks on the inputs cannot see underflow: deviations below
    about 1e-162 square to exactly zero.

    Args:
        value: Centered or raw sum of squares
        name: Parameter name of the sequence it was computed from
        n_samples: Number of observations in that sequence

    Raises:
        NumericalError: If the sum overflowed
        DegenerateInputError: If the sum is exactly zero
    """
    check_finite_value(value, f"{name}: sum of squares")
    if value == 0.0:
        raise DegenerateInputError(
            f"{name}: sum of squares underflows to zero over {n_samples} values, "
            f"spread too small to divide by",
            name=name,
            n_samples=n_samples,
        )


def check_finite_value(value: float, what: str) -> None:
    """
    Verify a computed scalar is finite.

    Args:
        value: Result of an intermediate or final computation
        what: Description for the error message

    Raises:
        NumericalError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise NumericalError(
            f"{what} is not finite ({value!r}); the input magnitudes overflow "
            f"double precision"
        )


def check_sample(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert and validate a single 1D finite sample."""
    arr = check_array(x, name)
    check_1d(arr, name)
    check_finite(arr, name)
    return arr


def check_pair(
    x: ArrayLike,
    y: ArrayLike,
    names: tuple[str, str] = ('x', 'y'),
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Convert and validate a paired sample.

    Shapes are compared straight after np.asarray, before dtypes or
    contents are inspected.

    Returns:
        (x, y) as float64 1D arrays
    """
    x_raw = _as_array(x, names[0])
    y_raw = _as_array(y, names[1])
    check_1d(x_raw, names[0])
    check_1d(y_raw, names[1])
    check_consistent_length(x_raw, y_raw, names=names)
    x_arr = check_array(x_raw, names[0])
    y_arr = check_array(y_raw, names[1])
    check_finite(x_arr, names[0])
    check_finite(y_arr, names[1])
    return x_arr, y_arr


def _as_array(array: ArrayLike, name: str) -> np.ndarray:
    try:
        return np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
