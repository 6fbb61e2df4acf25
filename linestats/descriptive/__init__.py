"""
Descriptive statistics module.

Public API:
    mean(x)     - Arithmetic mean
    var(x)      - Variance ('sample' n-1 or 'population' n)
    sd(x)       - Standard deviation
    cov(x, y)   - Covariance of a paired sample
    cor(x, y)   - Pearson correlation
"""

from linestats.descriptive._moments import Convention
from linestats.descriptive.solvers import mean, var, sd, cov, cor

__all__ = [
    "mean",
    "var",
    "sd",
    "cov",
    "cor",
    "Convention",
]
