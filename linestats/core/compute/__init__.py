"""
Shared compute infrastructure for linestats.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared utilities only.

Submodules:
    timing: Execution timing utilities
"""

from linestats.core.compute.timing import Timer

__all__ = [
    "Timer",
]
