"""
Line regression design.

LineDesign holds a validated (x, y) pair together with the model choice:
a fitted intercept, or an intercept fixed at zero. Backends trust it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from linestats.core.validation import (
    check_pair,
    check_min_samples,
    check_not_constant,
    check_not_all_zero,
    check_sum_of_squares,
)
from linestats.descriptive._moments import central_moments, raw_sum_of_squares


@dataclass(frozen=True)
class LineDesign:
    """
    Paired sample for a straight-line fit.

    Immutable after construction.

    Construction:
        LineDesign.from_arrays(x, y)                       # y = a + b·x
        LineDesign.from_arrays(x, y, through_origin=True)  # y = b·x
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _through_origin: bool

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        through_origin: bool = False,
    ) -> LineDesign:
        """
        Build LineDesign from array-likes.

        Raises:
            LengthMismatchError: If x and y differ in length
            InsufficientSamplesError: If there are fewer observations than
                parameters (2 with intercept, 1 through the origin)
            DegenerateInputError: If x is constant (with intercept) or all
                zero (through the origin), or the sum of squares of x
                underflows to zero
            NumericalError: If the sum of squares of x overflows
        """
        x_arr, y_arr = check_pair(x, y)
        if through_origin:
            check_min_samples(x_arr, 1, 'x')
            check_not_all_zero(x_arr, 'x')
            check_sum_of_squares(raw_sum_of_squares(x_arr), 'x', x_arr.shape[0])
        else:
            check_min_samples(x_arr, 2, 'x')
            check_not_constant(x_arr, 'x')
            check_sum_of_squares(central_moments(x_arr).sxx, 'x', x_arr.shape[0])
        return cls(
            _x=x_arr,
            _y=y_arr,
            _n=int(x_arr.shape[0]),
            _through_origin=bool(through_origin),
        )

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def through_origin(self) -> bool:
        """True if the intercept is fixed at zero."""
        return self._through_origin

    @property
    def n_params(self) -> int:
        """Number of estimated parameters."""
        return 1 if self._through_origin else 2

    def __repr__(self) -> str:
        model = "through_origin" if self._through_origin else "intercept"
        return f"LineDesign(n={self._n}, model={model})"
