"""
Two-pass central-moment accumulation.

Every downstream formula is expressed in terms of the sums computed here.
The first pass computes the mean(s); the second accumulates products of
deviations from them. The raw-moment shortcut E[XY] - E[X]E[Y] is never
used: it cancels catastrophically for data with large magnitude and small
spread.

Inputs are assumed validated (1D, finite, equal length).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from linestats.core.exceptions import ValidationError


Convention = Literal['sample', 'population']

_DDOF: dict[str, int] = {
    'sample': 1,
    'population': 0,
}


def ddof_for(convention: Convention) -> int:
    """Delta degrees of freedom for a denominator convention."""
    try:
        return _DDOF[convention]
    except KeyError:
        raise ValidationError(
            f"Unknown convention: {convention!r}. "
            f"Must be 'sample' or 'population'."
        ) from None


@dataclass(frozen=True)
class CentralMoments:
    """
    Means and mean-centered sums of squares and cross-products.

    For a single sequence the y fields are None.
    """
    n: int
    mean_x: float
    sxx: float
    mean_y: float | None = None
    sxy: float | None = None
    syy: float | None = None


def central_moments(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]] | None = None,
) -> CentralMoments:
    """
    Compute means and centered sums in two passes.

    Returns:
        CentralMoments with sxx = Σ(x-x̄)², and when y is given
        sxy = Σ(x-x̄)(y-ȳ), syy = Σ(y-ȳ)².
    """
    n = int(x.shape[0])
    mean_x = float(np.mean(x))
    dx = x - mean_x
    sxx = float(dx @ dx)

    if y is None:
        return CentralMoments(n=n, mean_x=mean_x, sxx=sxx)

    mean_y = float(np.mean(y))
    dy = y - mean_y
    return CentralMoments(
        n=n,
        mean_x=mean_x,
        sxx=sxx,
        mean_y=mean_y,
        sxy=float(dx @ dy),
        syy=float(dy @ dy),
    )


def raw_sum_of_squares(x: NDArray[np.floating[Any]]) -> float:
    """Σx², not centered."""
    return float(x @ x)


def residual_sum_of_squares(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    intercept: float,
    slope: float,
) -> float:
    """Σ(y - (intercept + slope·x))² for a given line."""
    resid = y - (intercept + slope * x)
    return float(resid @ resid)
