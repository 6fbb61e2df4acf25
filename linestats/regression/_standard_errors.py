"""
Standard-error formulas for straight-line fits.

Shared by the public standard-error functions and the CPU backend. All
arguments are sums already computed from validated data; degrees of
freedom must be positive.

With intercept (df = n - 2):
    se(slope)     = sqrt((SSE / df) / Σ(x-x̄)²)
    se(intercept) = sqrt(SSE · Σx² / (n · df · Σ(x-x̄)²))

Intercept fixed at zero (df = n - 1):
    se(slope)     = sqrt((SSE / df) / Σx²)

se(intercept) deliberately mixes the raw Σx² with the centered Σ(x-x̄)²;
it is σ² · Σx² / (n · Sxx), the (0, 0) element of σ² (X'X)⁻¹.
"""

from __future__ import annotations

import math


def slope_se(sse: float, df: int, sxx: float) -> float:
    return math.sqrt(sse / df / sxx)


def intercept_se(sse: float, sum_x2: float, n: int, df: int, sxx: float) -> float:
    return math.sqrt(sse * sum_x2 / (n * df * sxx))


def slope_se_through_origin(sse: float, df: int, sum_x2: float) -> float:
    return math.sqrt(sse / df / sum_x2)
