"""
Core protocols for linestats.

We use Protocol (structural typing) rather than ABC (nominal typing) so that
a backend only has to look like one to be used.
"""

from typing import Protocol, TypeVar, runtime_checkable

from linestats.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a parameter payload
    wrapped in a Result. Backends are stateless: nothing is kept between
    calls to solve(), so one instance may be shared freely.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_two_pass'.
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the statistical computation.

        Args:
            design: Validated design

        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...
