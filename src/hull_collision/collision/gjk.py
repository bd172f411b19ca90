# MIT License (see LICENSE)
"""
Gilbert-Johnson-Keerthi (GJK) algorithm for convex collision detection.

This module implements the GJK search to test intersection between two
convex polyhedra given as world-space point clouds. GJK works in Minkowski
space and iteratively builds a simplex to determine whether the origin is
contained in A - B.

Key concepts:
- Support function: Returns the farthest point on a shape in a given direction.
- Minkowski difference: The set A - B contains the origin iff A and B intersect.
- Simplex: 1-4 points that evolve toward enclosing the origin.

Winding convention: a triangle simplex [c, b, a] (a newest) is kept so that
its normal (b - a) x (c - a) points toward the origin. The next support point
is then found on that side, which makes the faces of the resulting
tetrahedron ab x ac, ac x ad and ad x ab point outward.

Usage:
    hit, simplex, enclosed = gjk_intersect(hull_a, hull_b)
    if hit:
        # Use EPA for penetration depth
        status = epa_penetration(simplex, hull_a, hull_b, collision)
"""
from __future__ import annotations
import logging

import numpy as np

from ..constants import DEGENERATE_EPS, MAX_ITERATIONS
from ..types import SupportPoint
from ..util import any_perpendicular, f64, norm, opposite_direction, same_direction
from .simplex import Simplex

logger = logging.getLogger(__name__)

# Type aliases for clarity
Vec3 = np.ndarray  # Shape (3,), dtype float64
PointCloud = np.ndarray  # Shape (N, 3), dtype float64

# Arbitrary, fixed first search direction.
INITIAL_DIRECTION = (1.0, 1.0, 1.0)


def as_point_cloud(hull) -> PointCloud:
    """
    Validate a hull and return it as an (N, 3) float64 array.

    Raises:
        ValueError: If the hull is empty, not 3D, or contains non-finite values.
    """
    points = f64(hull)
    if points.ndim != 2 or points.shape[1] != 3 or len(points) == 0:
        raise ValueError(f"Hull must be a non-empty sequence of 3D points, got shape {points.shape}")
    if not np.all(np.isfinite(points)):
        raise ValueError("Hull contains non-finite coordinates")
    return points


def furthest_point(hull: PointCloud, direction: Vec3) -> Vec3:
    """
    Vertex of `hull` with the largest projection onto `direction`.

    Ties resolve to the first vertex in hull order (np.argmax returns the
    first maximum), which keeps queries reproducible.
    """
    dots = hull @ direction
    return hull[int(np.argmax(dots))]


def support(hull_a: PointCloud, hull_b: PointCloud, direction: Vec3) -> SupportPoint:
    """
    Compute a support point in Minkowski difference space.

    The Minkowski support is supA(d) - supB(-d), which gives a point
    on the boundary of the Minkowski difference A - B.

    Args:
        hull_a: World-space vertices of hull A, shape (N, 3).
        hull_b: World-space vertices of hull B, shape (M, 3).
        direction: Direction vector to search.

    Returns:
        SupportPoint carrying the Minkowski point and both hull vertices.
    """
    pa = furthest_point(hull_a, direction)
    pb = furthest_point(hull_b, -direction)
    return SupportPoint(pa - pb, pa, pb)


def _edge_direction(edge: Vec3, ao: Vec3) -> Vec3:
    """
    Component of `ao` perpendicular to `edge`: (edge x ao) x edge.

    Falls back to an arbitrary perpendicular when the origin lies on the
    edge's supporting line.
    """
    d = np.cross(np.cross(edge, ao), edge)
    if norm(d) < DEGENERATE_EPS:
        return any_perpendicular(edge)
    return d


def process_line(simplex: Simplex, direction: Vec3) -> tuple[bool, Vec3]:
    """
    Reduce a 2-simplex [b, a] to the feature closest to the origin.

    Returns:
        (False, new_direction); a segment never encloses the origin.
    """
    a_sp = simplex[1]
    b_sp = simplex[0]
    a = a_sp.minkowski
    ab = b_sp.minkowski - a
    ao = -a

    if norm(ao) < DEGENERATE_EPS:
        # Newest point is the origin itself: keep the segment and search sideways.
        return False, any_perpendicular(ab)

    if same_direction(ab, ao):
        return False, _edge_direction(ab, ao)

    simplex.remove(b_sp)
    return False, ao


def process_triangle(simplex: Simplex, direction: Vec3) -> tuple[bool, Vec3]:
    """
    Reduce a 3-simplex [c, b, a] to the feature closest to the origin.

    Checks, in order, the region outside edge ac, outside edge ab (both
    falling back to the vertex region of a), then above or below the face.
    Below the face, b and c are swapped so that the stored winding faces
    the origin.

    Returns:
        (False, new_direction); a triangle never encloses the origin.
    """
    a_sp = simplex[2]
    b_sp = simplex[1]
    c_sp = simplex[0]
    a = a_sp.minkowski
    ab = b_sp.minkowski - a
    ac = c_sp.minkowski - a
    ao = -a
    abc = np.cross(ab, ac)

    if same_direction(np.cross(abc, ac), ao):
        if same_direction(ac, ao):
            simplex.remove(b_sp)
            return False, _edge_direction(ac, ao)
        return _line_or_vertex(simplex, a_sp, b_sp, c_sp, ab, ao)

    if same_direction(np.cross(ab, abc), ao):
        return _line_or_vertex(simplex, a_sp, b_sp, c_sp, ab, ao)

    if norm(abc) < DEGENERATE_EPS:
        # Collinear points: no face normal, search perpendicular to ab instead.
        return False, _edge_direction(ab, ao) if norm(ab) >= DEGENERATE_EPS else _edge_direction(ac, ao)

    if same_direction(abc, ao):
        return False, abc

    simplex.remove(a_sp)
    simplex.remove(b_sp)
    simplex.remove(c_sp)
    simplex.add(b_sp)
    simplex.add(c_sp)
    simplex.add(a_sp)
    return False, -abc


def _line_or_vertex(
    simplex: Simplex,
    a_sp: SupportPoint,
    b_sp: SupportPoint,
    c_sp: SupportPoint,
    ab: Vec3,
    ao: Vec3,
) -> tuple[bool, Vec3]:
    """Shared tail of the triangle case: keep edge ab, or vertex a alone."""
    if same_direction(ab, ao):
        simplex.remove(c_sp)
        return False, _edge_direction(ab, ao)
    simplex.remove(b_sp)
    simplex.remove(c_sp)
    return False, ao


def process_tetrahedron(simplex: Simplex, direction: Vec3) -> tuple[bool, Vec3]:
    """
    Check whether the tetrahedron [d, c, b, a] encloses the origin.

    The base triangle [d, c, b] already faced the origin before a was added,
    so only the three faces through a can separate it. If the origin lies in
    front of one of them, the simplex is reduced to that face and handed to
    the triangle case.

    Returns:
        (True, direction) if the origin is enclosed (or on the boundary),
        otherwise (False, new_direction).
    """
    a_sp = simplex[3]
    b_sp = simplex[2]
    c_sp = simplex[1]
    d_sp = simplex[0]
    a = a_sp.minkowski
    ab = b_sp.minkowski - a
    ac = c_sp.minkowski - a
    ad = d_sp.minkowski - a
    ao = -a

    # Each face is listed as the triangle simplex [c, b, a] whose winding
    # normal (b - a) x (c - a) equals the outward face normal.
    faces = (
        (np.cross(ab, ac), (c_sp, b_sp, a_sp)),
        (np.cross(ac, ad), (d_sp, c_sp, a_sp)),
        (np.cross(ad, ab), (b_sp, d_sp, a_sp)),
    )
    for normal, triangle in faces:
        if same_direction(normal, ao):
            for sp in (a_sp, b_sp, c_sp, d_sp):
                simplex.remove(sp)
            for sp in triangle:
                simplex.add(sp)
            return process_triangle(simplex, direction)

    return True, direction


def process_simplex(simplex: Simplex, direction: Vec3) -> tuple[bool, Vec3]:
    """
    Dispatch to the Voronoi-region reduction for the current simplex size.

    Returns:
        Tuple (enclosed, new_direction).
    """
    n = simplex.count()
    if n == 2:
        return process_line(simplex, direction)
    if n == 3:
        return process_triangle(simplex, direction)
    return process_tetrahedron(simplex, direction)


def gjk_intersect(
    hull_a: PointCloud,
    hull_b: PointCloud,
    max_iters: int = MAX_ITERATIONS,
) -> tuple[bool, Simplex, bool]:
    """
    Test if two convex hulls intersect using the GJK algorithm.

    Iteratively builds a simplex in Minkowski space, trying to enclose
    the origin.

    Args:
        hull_a: World-space vertices of hull A, shape (N, 3).
        hull_b: World-space vertices of hull B, shape (M, 3).
        max_iters: Maximum iterations before giving up. Default 50.

    Returns:
        Tuple (hit, simplex, enclosed) where:
        - hit: False only if a separating direction was found.
        - simplex: Final simplex (EPA input when hit is True).
        - enclosed: True if the origin was proven to be enclosed; False when
          the iteration cap ended the search (a probable intersection).
    """
    s = support(hull_a, hull_b, f64(INITIAL_DIRECTION))
    simplex = Simplex([s])
    d: Vec3 = -s.minkowski

    for _ in range(max_iters):
        if norm(d) < DEGENERATE_EPS:
            # The origin coincides with the current feature; pick any new axis.
            d = any_perpendicular(simplex[-1].minkowski - simplex[0].minkowski)

        a = support(hull_a, hull_b, d)

        # If the new point doesn't pass the origin, there is no intersection
        if opposite_direction(a.minkowski, d):
            return False, simplex, False

        simplex.add(a)
        enclosed, d = process_simplex(simplex, d)

        if enclosed:
            return True, simplex, True

    logger.debug("GJK reached %d iterations without enclosing the origin", max_iters)
    return True, simplex, False
