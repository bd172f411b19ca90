# MIT License (see LICENSE)
"""
Exception hierarchy for the collision core.

Only precondition violations are raised to the caller. Expected outcomes of a
query (no intersection, a non-converged or degenerate EPA run) are reported
through return values and EpaStatus instead.
"""
from __future__ import annotations


class HullCollisionError(Exception):
    """Base class for all errors raised by hull_collision."""


class SimplexError(HullCollisionError):
    """Invalid operation on a Simplex (internal logic error)."""


class SimplexSizeError(SimplexError, ValueError):
    """
    Simplex has a vertex count outside the range an operation supports.

    Attributes:
        size: The offending vertex count.
    """

    def __init__(self, size: int, message: str) -> None:
        super().__init__(message)
        self.size = size


class SimplexTooSmallError(SimplexSizeError):
    """Fewer vertices than the operation requires."""


class SimplexTooLargeError(SimplexSizeError):
    """More vertices than the operation supports."""


class VertexNotFoundError(SimplexError, LookupError):
    """A vertex was removed from a simplex that does not contain it."""


class DegenerateFaceError(HullCollisionError):
    """Every face of the polytope has (near) zero area; no plane distance exists."""
