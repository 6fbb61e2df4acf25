"""
Regression backends.

Available backends:
    CPULineBackend: CPU reference implementation using two-pass centered sums
"""

from linestats.regression.backends.cpu import CPULineBackend

__all__ = [
    "CPULineBackend",
]
