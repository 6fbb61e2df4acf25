"""
Solver dispatch for straight-line regression.

Provides the scalar functions fit(), fit_through_origin() and the three
standard-error functions, plus lm() for a full fit summary. All inputs are
validated here; the formulas downstream trust them.
"""

from __future__ import annotations

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from linestats.core.exceptions import ValidationError
from linestats.core.validation import (
    check_pair,
    check_min_samples,
    check_not_constant,
    check_not_all_zero,
    check_sum_of_squares,
    check_finite_value,
)
from linestats.descriptive._moments import (
    central_moments,
    raw_sum_of_squares,
    residual_sum_of_squares,
)
from linestats.regression.design import LineDesign
from linestats.regression.solution import Line, LineSolution
from linestats.regression.backends.cpu import CPULineBackend
from linestats.regression import _standard_errors as se


BackendChoice = Literal['auto', 'cpu']


def fit(x: ArrayLike, y: ArrayLike) -> Line:
    """
    Fit y = a + b·x by ordinary least squares.

    b = Σ(x-x̄)(y-ȳ) / Σ(x-x̄)², a = ȳ - b·x̄. Both sums would carry the
    same 1/(n-1) factor as a sample (co)variance, so it is left out.

    Args:
        x: Predictor, 1D array-like
        y: Response, 1D array-like of the same length

    Returns:
        Line(intercept, slope); unpacks as (a, b)

    Raises:
        LengthMismatchError: If x and y differ in length
        InsufficientSamplesError: If n < 2
        DegenerateInputError: If all x are identical, or their spread
            underflows to a zero sum of squares
        NumericalError: If the sums overflow

    Example:
        >>> a, b = fit([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
        >>> round(a, 12), round(b, 12)
        (0.0, 2.0)
    """
    x_arr, y_arr = check_pair(x, y)
    check_min_samples(x_arr, 2, 'x')
    check_not_constant(x_arr, 'x')

    m = central_moments(x_arr, y_arr)
    check_sum_of_squares(m.sxx, 'x', m.n)
    slope = m.sxy / m.sxx
    intercept = m.mean_y - slope * m.mean_x
    check_finite_value(slope, "slope")
    check_finite_value(intercept, "intercept")
    return Line(intercept=intercept, slope=slope)


def fit_through_origin(x: ArrayLike, y: ArrayLike) -> float:
    """
    Fit y = b·x with the intercept fixed at zero.

    Returns:
        slope b = Σxy / Σx²

    Raises:
        LengthMismatchError: If x and y differ in length
        InsufficientSamplesError: If the samples are empty
        DegenerateInputError: If all x are zero
        NumericalError: If the sums overflow
    """
    x_arr, y_arr = check_pair(x, y)
    check_min_samples(x_arr, 1, 'x')
    check_not_all_zero(x_arr, 'x')
    sum_x2 = raw_sum_of_squares(x_arr)
    check_sum_of_squares(sum_x2, 'x', x_arr.shape[0])
    slope = float(x_arr @ y_arr) / sum_x2
    check_finite_value(slope, "slope")
    return slope


def slope_standard_error(
    x: ArrayLike,
    y: ArrayLike,
    intercept: float,
    slope: float,
) -> float:
    """
    Standard error of the slope of a fitted line y = intercept + slope·x.

    sqrt((SSE / (n-2)) / Σ(x-x̄)²), where SSE is the residual sum of
    squares about the given line.

    Raises:
        LengthMismatchError: If x and y differ in length
        InsufficientSamplesError: If n < 3
        DegenerateInputError: If all x are identical
        NumericalError: If the sums overflow
    """
    x_arr, y_arr = check_pair(x, y)
    check_min_samples(x_arr, 3, 'x')
    check_not_constant(x_arr, 'x')

    n = x_arr.shape[0]
    sse = residual_sum_of_squares(x_arr, y_arr, intercept, slope)
    sxx = central_moments(x_arr).sxx
    check_sum_of_squares(sxx, 'x', n)
    return _finite_se(se.slope_se(sse, n - 2, sxx))


def slope_standard_error_through_origin(
    x: ArrayLike,
    y: ArrayLike,
    slope: float,
) -> float:
    """
    Standard error of the slope when the intercept is fixed at zero.

    sqrt((SSE / (n-1)) / Σx²). The sum of squares is raw, not centered:
    with no intercept there is no mean to center around, and only one
    degree of freedom is spent.

    Raises:
        LengthMismatchError: If x and y differ in length
        InsufficientSamplesError: If n < 2
        DegenerateInputError: If all x are zero
        NumericalError: If the sums overflow
    """
    x_arr, y_arr = check_pair(x, y)
    check_min_samples(x_arr, 2, 'x')
    check_not_all_zero(x_arr, 'x')

    n = x_arr.shape[0]
    sse = residual_sum_of_squares(x_arr, y_arr, 0.0, slope)
    sum_x2 = raw_sum_of_squares(x_arr)
    check_sum_of_squares(sum_x2, 'x', n)
    return _finite_se(se.slope_se_through_origin(sse, n - 1, sum_x2))


def intercept_standard_error(
    x: ArrayLike,
    y: ArrayLike,
    intercept: float,
    slope: float,
) -> float:
    """
    Standard error of the intercept of a fitted line y = intercept + slope·x.

    sqrt(SSE · Σx² / (n · (n-2) · Σ(x-x̄)²)). The numerator uses the raw
    sum of squares and the denominator the centered one.

    Raises:
        LengthMismatchError: If x and y differ in length
        InsufficientSamplesError: If n < 3
        DegenerateInputError: If all x are identical
        NumericalError: If the sums overflow
    """
    x_arr, y_arr = check_pair(x, y)
    check_min_samples(x_arr, 3, 'x')
    check_not_constant(x_arr, 'x')

    n = x_arr.shape[0]
    sse = residual_sum_of_squares(x_arr, y_arr, intercept, slope)
    sum_x2 = raw_sum_of_squares(x_arr)
    sxx = central_moments(x_arr).sxx
    check_sum_of_squares(sum_x2, 'x', n)
    check_sum_of_squares(sxx, 'x', n)
    return _finite_se(se.intercept_se(sse, sum_x2, n, n - 2, sxx))


def lm(
    x: ArrayLike | LineDesign,
    y: ArrayLike | None = None,
    *,
    through_origin: bool = False,
    backend: BackendChoice = 'auto',
) -> LineSolution:
    """
    Fit a straight line and report its diagnostics.

    Args:
        x: Predictor array-like, or a prebuilt LineDesign
        y: Response array-like (required unless x is a LineDesign)
        through_origin: Fix the intercept at zero. Ignored when x is a
            LineDesign, which carries its own model choice.
        backend: 'auto' or 'cpu'

    Returns:
        LineSolution with coefficients, standard errors, R² and summary()

    Raises:
        ValidationError: If inputs are invalid (see LineDesign.from_arrays)

    Warns:
        RuntimeWarning: If there are no residual degrees of freedom, in
            which case standard errors are NaN

    Example:
        >>> result = lm([1, 2, 3, 4, 5], [2.1, 3.9, 6.2, 7.8, 10.1])
        >>> print(result.summary())
    """
    if isinstance(x, LineDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y required when x is not a LineDesign")
        design = LineDesign.from_arrays(x, y, through_origin=through_origin)

    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return LineSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice) -> CPULineBackend:
    """
    Select and instantiate the backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPULineBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")


def _finite_se(value: float) -> float:
    check_finite_value(value, "standard error")
    return value
