"""
Descriptive statistics over one or two paired samples.

Provides mean(), var(), sd(), cov() and cor(). Each function validates its
input at the boundary and returns a Python float.
"""

from __future__ import annotations

import math
from numpy.typing import ArrayLike

from linestats.core.validation import (
    check_sample,
    check_pair,
    check_min_samples,
    check_not_constant,
    check_sum_of_squares,
    check_finite_value,
)
from linestats.descriptive._moments import Convention, central_moments, ddof_for


def mean(x: ArrayLike) -> float:
    """
    Arithmetic mean.

    Raises:
        InsufficientSamplesError: If x is empty
        NumericalError: If the sum overflows
    """
    x_arr = check_sample(x, 'x')
    check_min_samples(x_arr, 1, 'x')
    m = central_moments(x_arr)
    check_finite_value(m.mean_x, "x: mean")
    return m.mean_x


def var(x: ArrayLike, *, convention: Convention = 'sample') -> float:
    """
    Variance about the mean.

    Parameters
    ----------
    x : array-like
        1D sample.
    convention : str
        'sample' divides by n-1 (Bessel's correction, matches R var()),
        'population' divides by n.

    Raises
    ------
    InsufficientSamplesError
        If n < 2 for 'sample' (variance of one point is undefined, not
        zero) or n < 1 for 'population'.
    """
    ddof = ddof_for(convention)
    x_arr = check_sample(x, 'x')
    check_min_samples(x_arr, ddof + 1, 'x')
    m = central_moments(x_arr)
    check_finite_value(m.sxx, "x: sum of squares")
    return m.sxx / (m.n - ddof)


def sd(x: ArrayLike, *, convention: Convention = 'sample') -> float:
    """Standard deviation, sqrt(var(x, convention=convention))."""
    return math.sqrt(var(x, convention=convention))


def cov(
    x: ArrayLike,
    y: ArrayLike,
    *,
    convention: Convention = 'sample',
) -> float:
    """
    Covariance of a paired sample, Σ(x-x̄)(y-ȳ) / (n - ddof).

    Parameters
    ----------
    x, y : array-like
        Equal-length 1D samples.
    convention : str
        'sample' (n-1) or 'population' (n).

    Raises
    ------
    LengthMismatchError
        If x and y differ in length.
    InsufficientSamplesError
        If n < 2 for 'sample' or n < 1 for 'population'.
    """
    ddof = ddof_for(convention)
    x_arr, y_arr = check_pair(x, y)
    check_min_samples(x_arr, ddof + 1, 'x')
    m = central_moments(x_arr, y_arr)
    check_finite_value(m.sxy, "x, y: sum of cross-products")
    return m.sxy / (m.n - ddof)


def cor(x: ArrayLike, y: ArrayLike) -> float:
    """
    Pearson correlation coefficient.

    Computed as Σ(x-x̄)(y-ȳ) / sqrt(Σ(x-x̄)² · Σ(y-ȳ)²). Numerator and
    denominator are both built from centered sums, so the n or n-1 scaling
    cancels and the result does not depend on a denominator convention.
    The value is clipped to [-1, 1] to absorb rounding at the boundary.

    Raises
    ------
    LengthMismatchError
        If x and y differ in length.
    InsufficientSamplesError
        If the samples are empty.
    DegenerateInputError
        If either sample is constant (this includes a single observation),
        or its spread is too small for its sum of squares to be non-zero.
    NumericalError
        If the sums of squares overflow.
    """
    x_arr, y_arr = check_pair(x, y)
    check_min_samples(x_arr, 1, 'x')
    check_not_constant(x_arr, 'x')
    check_not_constant(y_arr, 'y')
    m = central_moments(x_arr, y_arr)
    check_sum_of_squares(m.sxx, 'x', m.n)
    check_sum_of_squares(m.syy, 'y', m.n)
    # Separate roots so the product cannot underflow
    r = m.sxy / (math.sqrt(m.sxx) * math.sqrt(m.syy))
    check_finite_value(r, "correlation")
    return min(1.0, max(-1.0, r))
