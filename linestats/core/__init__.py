"""
Core infrastructure for linestats.

Shared abstractions used by the descriptive and regression submodules.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from linestats.core.protocols import Backend
from linestats.core.result import Result
from linestats.core.exceptions import (
    LinestatsError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    InsufficientSamplesError,
    DegenerateInputError,
    NumericalError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "LinestatsError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "InsufficientSamplesError",
    "DegenerateInputError",
    "NumericalError",
]
