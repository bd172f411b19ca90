# MIT License (see LICENSE)
"""
Convex body collision detection using GJK + EPA.

Thin driver on top of GjkAlgorithm for callers that hold ConvexBody objects
rather than raw point clouds. Choosing which pairs to test (broad phase) is
left to the caller.
"""
from __future__ import annotations
from typing import Iterable

from ..types import ConvexBody
from .algorithm import GjkAlgorithm
from .contact import Collision, sort_collisions


def detect_collision(
    a: ConvexBody,
    b: ConvexBody,
    algorithm: GjkAlgorithm | None = None,
) -> Collision | None:
    """
    Detect contact between two convex bodies.

    Args:
        a: First body.
        b: Second body.
        algorithm: Configured GjkAlgorithm to reuse. A default one is created
            if omitted.

    Returns:
        Populated Collision (first_object=a, second_object=b) if the bodies
        intersect, None otherwise.
    """
    algorithm = algorithm or GjkAlgorithm()
    collision = Collision(a, b)
    if not algorithm.intersect(a.convex_hull(), b.convex_hull(), collision):
        return None
    return collision


def detect_collisions(
    pairs: Iterable[tuple[ConvexBody, ConvexBody]],
    algorithm: GjkAlgorithm | None = None,
) -> list[Collision]:
    """
    Run detect_collision() over candidate pairs.

    Returns:
        The collisions found, ordered by ascending penetration depth.
    """
    algorithm = algorithm or GjkAlgorithm()
    hits = []
    for a, b in pairs:
        collision = detect_collision(a, b, algorithm)
        if collision is not None:
            hits.append(collision)
    return sort_collisions(hits)
