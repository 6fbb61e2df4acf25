"""
Regression solution types.

Contains the fitted-line tuple, the parameter payload produced by backends,
and the user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy import stats

from linestats.core.result import Result

if TYPE_CHECKING:
    from linestats.regression.design import LineDesign


class Line(NamedTuple):
    """Fitted line y = intercept + slope·x. Unpacks as (a, b)."""
    intercept: float
    slope: float

    def predict(self, x) -> NDArray[np.floating[Any]]:
        """Fitted values at x."""
        return self.intercept + self.slope * np.asarray(x, dtype=np.float64)


@dataclass(frozen=True)
class LineParams:
    """
    Parameter payload for a straight-line fit.

    This is the immutable data computed by backends. For a fit through the
    origin the intercept is 0.0 and se_intercept is None.
    """
    intercept: float
    slope: float
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    tss: float
    sxx: float
    sxy: float
    syy: float
    df_residual: int
    se_slope: float
    se_intercept: float | None


@dataclass
class LineSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides accessors for the fitted line,
    goodness of fit, and coefficient inference. Coefficient arrays are
    ordered (intercept, slope), or (slope,) for a fit through the origin.
    """
    _result: Result[LineParams]
    _design: 'LineDesign'

    # Cached computations
    _p_values: NDArray[np.floating[Any]] | None = None

    @property
    def line(self) -> Line:
        return Line(self.intercept, self.slope)

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def through_origin(self) -> bool:
        return self._design.through_origin

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        if self.through_origin:
            return np.array([self.slope])
        return np.array([self.intercept, self.slope])

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        """Total sum of squares; uncentered (Σy²) for a fit through the origin, as in R."""
        return self._result.params.tss

    @property
    def r(self) -> float:
        """
        Pearson correlation of x and y.

        NaN if either x or y is constant. x can be constant only in a fit
        through the origin, which needs x to be non-zero but not to vary.
        """
        p = self._result.params
        x, y = self._design.x, self._design.y
        if np.all(x == x[0]) or np.all(y == y[0]) or p.sxx == 0 or p.syy == 0:
            return float('nan')
        r = p.sxy / (np.sqrt(p.sxx) * np.sqrt(p.syy))
        return float(np.clip(r, -1.0, 1.0))

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def residual_std_error(self) -> float:
        df = self.df_residual
        if df <= 0:
            return float('nan')
        return float(np.sqrt(self.rss / df))

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """Standard errors in coefficient order, NaN when df_residual is 0."""
        p = self._result.params
        if self.through_origin:
            return np.array([p.se_slope])
        return np.array([p.se_intercept, p.se_slope])

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """t-statistics for coefficients."""
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / self.standard_errors
        # Perfect fits (se = 0) and df = 0 give NaN, not inf
        return np.where(np.isfinite(t), t, np.nan)

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values from Student's t with df_residual degrees of freedom."""
        if self._p_values is not None:
            return self._p_values

        t = self.t_statistics
        if self.df_residual <= 0:
            self._p_values = np.full_like(t, np.nan)
        else:
            self._p_values = 2.0 * stats.t.sf(np.abs(t), self.df_residual)
        return self._p_values

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate R-style summary output."""
        model = "y = b*x" if self.through_origin else "y = a + b*x"
        lines = [
            "Simple Linear Regression Results",
            "=" * 60,
            f"Model: {model}",
            f"Observations: {self.n}",
            f"R-squared: {self.r_squared:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'Term':<12} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>10}",
            "-" * 60,
        ]

        terms = ("slope",) if self.through_origin else ("intercept", "slope")
        for term, coef, se, t, pv in zip(
            terms, self.coefficients, self.standard_errors,
            self.t_statistics, self.p_values,
        ):
            se_str = f"{se:12.6f}" if not np.isnan(se) else "          NA"
            t_str = f"{t:10.3f}" if not np.isnan(t) else "        NA"
            p_str = f"{pv:10.4g}" if not np.isnan(pv) else "        NA"
            lines.append(f"{term:<12} {coef:14.6f} {se_str} {t_str} {p_str}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LineSolution(n={self.n}, intercept={self.intercept:.6g}, "
            f"slope={self.slope:.6g}, r_squared={self.r_squared:.4f})"
        )
