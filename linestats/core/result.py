"""
Backend output envelope.

A backend returns Result[P]: the payload it computed plus how it got there.
The regression solution wraps one of these and reads everything through it.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # payload type, e.g. LineParams


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    What a backend hands back from solve().

    Attributes:
        params: Fitted quantities (LineParams for a straight-line fit)
        info: Method name, model variant ('intercept' or
            'through_origin') and residual degrees of freedom
        timing: Seconds per Timer section plus 'total_seconds', or None
        backend_name: Name of the backend, e.g. 'cpu_two_pass'
        warnings: Messages for conditions that did not stop the fit;
            lm() re-issues each one as a RuntimeWarning
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
