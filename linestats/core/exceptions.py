"""
Exception hierarchy for linestats.

All exceptions inherit from LinestatsError to allow catching any
library-specific error. Input-shape problems are ValidationErrors and
are raised before any arithmetic begins.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class LinestatsError(Exception):
    """Base exception for all linestats errors."""
    pass


class ValidationError(LinestatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input is not a 1D sequence.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Paired sequences differ in length.

    Attributes:
        lengths: Length of each sequence, in argument order
        names: Parameter names, in argument order
    """

    def __init__(
        self,
        message: str,
        lengths: tuple[int, ...] = (),
        names: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.lengths = lengths
        self.names = names


class InsufficientSamplesError(ValidationError):
    """
    Fewer observations than the formula's degrees of freedom require.

    Attributes:
        n_samples: Number of observations provided
        required: Minimum number of observations needed
    """

    def __init__(
        self,
        message: str,
        n_samples: int | None = None,
        required: int | None = None,
    ):
        super().__init__(message)
        self.n_samples = n_samples
        self.required = required


class DegenerateInputError(ValidationError):
    """
    Input has no spread where the formula divides by it.

    Raised for a constant predictor (zero centered sum of squares) or an
    all-zero predictor in the zero-intercept model (zero raw sum of squares).

    Attributes:
        name: Parameter name of the degenerate sequence
        n_samples: Number of observations in that sequence
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        n_samples: int | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.n_samples = n_samples


class NumericalError(LinestatsError):
    """
    A computed quantity is not finite.

    Raised when finite inputs overflow double precision in a sum of
    squares, a fitted coefficient or a standard error.
    """
    pass
