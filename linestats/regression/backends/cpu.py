"""
CPU reference backend for straight-line regression.

Solves OLS in closed form from two-pass centered sums; no matrix
factorization is needed for a single predictor.
"""

import math
from typing import Any

from linestats.core.exceptions import NumericalError
from linestats.core.result import Result
from linestats.core.compute.timing import Timer
from linestats.descriptive._moments import central_moments, raw_sum_of_squares
from linestats.regression.design import LineDesign
from linestats.regression.solution import LineParams
from linestats.regression import _standard_errors as se


class CPULineBackend:
    """
    CPU backend using centered sums of squares and cross-products.

    Implements the Backend protocol for LineDesign -> LineParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_two_pass'

    def solve(self, design: LineDesign) -> Result[LineParams]:
        """
        Fit the line and its standard errors.

        Algorithm (with intercept):
            1. Means and centered sums Sxx, Sxy, Syy (two passes)
            2. slope = Sxy / Sxx, intercept = ȳ - slope·x̄
            3. Residuals, RSS, and standard errors on n - 2 DF

        Through the origin, slope = Σxy / Σx² and the standard error uses
        raw sums on n - 1 DF.
        """
        timer = Timer()
        timer.start()

        x = design.x
        y = design.y
        n = design.n
        warnings_list: list[str] = []

        with timer.section('moments'):
            moments = central_moments(x, y)
            sum_x2 = raw_sum_of_squares(x)

        with timer.section('coefficients'):
            if design.through_origin:
                intercept = 0.0
                slope = float(x @ y) / sum_x2
            else:
                slope = moments.sxy / moments.sxx
                intercept = moments.mean_y - slope * moments.mean_x

        with timer.section('residuals'):
            fitted_values = intercept + slope * x
            residuals = y - fitted_values
            rss = float(residuals @ residuals)
            if design.through_origin:
                tss = raw_sum_of_squares(y)
            else:
                tss = moments.syy

        if not all(math.isfinite(v) for v in (intercept, slope, rss, tss)):
            timer.stop()
            raise NumericalError(
                f"Fit is not finite (intercept={intercept!r}, slope={slope!r}, "
                f"rss={rss!r}, tss={tss!r}); the input magnitudes overflow "
                f"double precision"
            )

        df_residual = n - design.n_params

        with timer.section('standard_errors'):
            se_intercept: float | None
            if df_residual > 0:
                if design.through_origin:
                    se_slope = se.slope_se_through_origin(rss, df_residual, sum_x2)
                    se_intercept = None
                else:
                    se_slope = se.slope_se(rss, df_residual, moments.sxx)
                    se_intercept = se.intercept_se(rss, sum_x2, n, df_residual, moments.sxx)
            else:
                se_slope = float('nan')
                se_intercept = None if design.through_origin else float('nan')
                warnings_list.append(
                    f"No residual degrees of freedom (n={n}, "
                    f"parameters={design.n_params}); standard errors are undefined"
                )

        timer.stop()

        params = LineParams(
            intercept=float(intercept),
            slope=float(slope),
            fitted_values=fitted_values,
            residuals=residuals,
            rss=rss,
            tss=float(tss),
            sxx=moments.sxx,
            sxy=moments.sxy,
            syy=moments.syy,
            df_residual=df_residual,
            se_slope=se_slope,
            se_intercept=se_intercept,
        )

        info: dict[str, Any] = {
            'method': 'two_pass',
            'model': 'through_origin' if design.through_origin else 'intercept',
            'df_residual': df_residual,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
