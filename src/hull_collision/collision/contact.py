# MIT License (see LICENSE)
"""
Collision record filled by GjkAlgorithm.intersect().

The caller creates a Collision referencing the two participating objects,
passes it to the algorithm, and owns it afterwards. The algorithm only writes
the geometric fields.

Sign conventions:
- intersection_vector: penetration depth times the EPA face normal, i.e. the
  displacement of hull A relative to hull B that lies along the Minkowski
  difference's closest face normal.
- unit_normal: points from the second object toward the first one.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

import numpy as np

from ..util import norm


class EpaStatus(Enum):
    """How the EPA phase of a query ended."""
    CONVERGED = "converged"
    NOT_CONVERGED = "not_converged"
    DEGENERATE = "degenerate"


def _zeros() -> np.ndarray:
    return np.zeros(3, dtype=np.float64)


@dataclass(eq=False)
class Collision:
    """
    Result of a narrow-phase query between two convex hulls.

    Attributes:
        first_object: Caller's first participant (not owned). When it exposes
            a `position`, that position feeds the normal heuristic.
        second_object: Caller's second participant (not owned).
        unit_normal: Unit collision normal, from second toward first.
        first_poc: Contact point on the first hull (world space).
        second_poc: Contact point on the second hull (world space).
        intersection_vector: Penetration vector; its length is the depth.
        status: EPA outcome, None until a query has run EPA.
        gjk_converged: False when GJK stopped at its iteration cap instead of
            proving that the origin is enclosed.
    """
    first_object: Any = None
    second_object: Any = None
    unit_normal: np.ndarray = field(default_factory=_zeros)
    first_poc: np.ndarray = field(default_factory=_zeros)
    second_poc: np.ndarray = field(default_factory=_zeros)
    intersection_vector: np.ndarray = field(default_factory=_zeros)
    status: EpaStatus | None = None
    gjk_converged: bool = True

    @property
    def penetration_depth(self) -> float:
        """Length of the penetration vector."""
        return norm(self.intersection_vector)

    @property
    def converged(self) -> bool:
        """True when both GJK and EPA converged."""
        return self.gjk_converged and self.status is EpaStatus.CONVERGED


class CollisionCompareLess:
    """
    Strict weak ordering of collisions by penetration depth.

    Usage:
        less = CollisionCompareLess()
        if less(c1, c2): ...
    """

    def __call__(self, lhs: Collision, rhs: Collision) -> bool:
        return lhs.penetration_depth < rhs.penetration_depth


def sort_collisions(collisions: Iterable[Collision]) -> list[Collision]:
    """Return the collisions ordered by ascending penetration depth (stable)."""
    return sorted(collisions, key=lambda c: c.penetration_depth)
