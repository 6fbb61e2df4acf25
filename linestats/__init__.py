"""
linestats: ordinary-least-squares line fitting and paired-sample statistics.

Every function is pure: inputs are read, never mutated, and no state is
kept between calls.

Submodules:
    descriptive: mean, var, sd, cov, cor
    regression: fit, standard errors, lm
    core: exceptions, validation, result envelope
"""

__version__ = "0.1.0"

from linestats import descriptive
from linestats import regression
from linestats.core.exceptions import (
    LinestatsError,
    ValidationError,
    LengthMismatchError,
    InsufficientSamplesError,
    DegenerateInputError,
)
from linestats.descriptive import mean, var, sd, cov, cor
from linestats.regression import (
    fit,
    fit_through_origin,
    slope_standard_error,
    slope_standard_error_through_origin,
    intercept_standard_error,
    lm,
    Line,
    LineSolution,
)

__all__ = [
    "__version__",
    "descriptive",
    "regression",
    # Exceptions
    "LinestatsError",
    "ValidationError",
    "LengthMismatchError",
    "InsufficientSamplesError",
    "DegenerateInputError",
    # Descriptive
    "mean",
    "var",
    "sd",
    "cov",
    "cor",
    # Regression
    "fit",
    "fit_through_origin",
    "slope_standard_error",
    "slope_standard_error_through_origin",
    "intercept_standard_error",
    "lm",
    "Line",
    "LineSolution",
]
