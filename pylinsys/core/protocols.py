"""
Core protocols for PyLinSys.

Solver backends are interchangeable: each takes a validated design and
returns a Result envelope. We use Protocol (structural typing) rather
than ABC (nominal typing) so a backend only needs the right shape.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from pylinsys.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for solver backends.
    
    Each backend knows how to take a design (A, b) and produce a
    parameter payload. Backends are stateless apart from configuration
    passed at construction time (threshold, pivoting, trace callback),
    so one instance may solve any number of systems.
    
    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{device}_{algorithm}'
        Examples: 'cpu_cramer', 'cpu_inversion', 'cpu_gauss'
        """
        ...
    
    def solve(self, design: D) -> 'Result[P]':
        """
        Solve the system.
        
        Args:
            design: Validated design holding A and b
            
        Returns:
            Result envelope containing parameter payload and metadata
            
        Raises:
            SingularMatrixError: If the system has no unique solution
        """
        ...
