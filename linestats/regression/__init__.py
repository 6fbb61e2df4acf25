"""
Simple (one-predictor) linear regression.

Public API:
    fit(x, y) -> Line                                   (intercept, slope)
    fit_through_origin(x, y) -> float                   slope of y = b·x
    slope_standard_error(x, y, intercept, slope)        with-intercept model
    slope_standard_error_through_origin(x, y, slope)    zero-intercept model
    intercept_standard_error(x, y, intercept, slope)
    lm(x, y, ...) -> LineSolution                       full fit summary

Example:
    >>> from linestats.regression import fit, slope_standard_error
    >>> a, b = fit(x, y)
    >>> se_b = slope_standard_error(x, y, a, b)
"""

from linestats.regression.design import LineDesign
from linestats.regression.solution import Line, LineParams, LineSolution
from linestats.regression.solvers import (
    fit,
    fit_through_origin,
    slope_standard_error,
    slope_standard_error_through_origin,
    intercept_standard_error,
    lm,
)

__all__ = [
    "fit",
    "fit_through_origin",
    "slope_standard_error",
    "slope_standard_error_through_origin",
    "intercept_standard_error",
    "lm",
    "Line",
    "LineDesign",
    "LineParams",
    "LineSolution",
]
