# MIT License (see LICENSE)
"""
Simplex of the GJK search and polytope of the Expanding Polytope Algorithm.

During GJK the simplex is an ordered list of 1-4 support points; the most
recently added point is the last one. Once GJK hands over to EPA the simplex
is triangulated into a tetrahedron and from then on also owns a list of
outward-facing triangles (index triples into the vertex list), which EPA
grows with extend().

Invariants:
- Vertex order is insertion order; removal keeps the relative order.
- After triangulate() there are at least 4 vertices and every triangle's
  normal (right-hand rule over its index order) points away from the
  enclosed volume. extend() preserves this.
"""
from __future__ import annotations
import logging
from typing import Iterable, Iterator, Sequence

import numpy as np

from ..constants import DEGENERATE_EPS, PERPENDICULAR_OFFSET, SIMPLEX_EPS
from ..errors import (
    DegenerateFaceError,
    SimplexTooLargeError,
    SimplexTooSmallError,
    VertexNotFoundError,
)
from ..types import Edge, Face, SupportPoint
from ..util import any_perpendicular, norm, opposite_direction, same_direction, triangle_normal, unit

logger = logging.getLogger(__name__)

Triangle = tuple[int, int, int]

# Two windings of the tetrahedron (0, 1, 2, 3). The first is outward when the
# normal of (0, 1, 2) points away from vertex 3, the second otherwise.
_TETRAHEDRON_OUTWARD: tuple[Triangle, ...] = ((0, 1, 2), (0, 3, 1), (0, 2, 3), (1, 3, 2))
_TETRAHEDRON_FLIPPED: tuple[Triangle, ...] = ((0, 2, 1), (0, 1, 3), (0, 3, 2), (1, 2, 3))


class Simplex:
    """
    Ordered collection of support points, plus its triangulation once EPA starts.

    Args:
        vertices: Initial support points, oldest first.
        triangles: Optional initial triangulation (index triples). Normally
            produced by triangulate().
    """

    def __init__(
        self,
        vertices: Iterable[SupportPoint] = (),
        triangles: Iterable[Sequence[int]] | None = None,
    ) -> None:
        self._vertices: list[SupportPoint] = list(vertices)
        self._triangles: list[Triangle] = []
        if triangles is not None:
            self._triangles = [(int(t[0]), int(t[1]), int(t[2])) for t in triangles]

    # -------------------------------------------------------------------------
    # GJK interface
    # -------------------------------------------------------------------------

    def add(self, point: SupportPoint) -> None:
        """Append a support point; it becomes the newest vertex."""
        self._vertices.append(point)

    def remove(self, point: SupportPoint) -> None:
        """
        Remove the first vertex equal to `point` (by Minkowski coordinate).

        Raises:
            VertexNotFoundError: If no vertex matches.
        """
        for i, v in enumerate(self._vertices):
            if v == point:
                del self._vertices[i]
                return
        raise VertexNotFoundError(f"{point!r} is not a vertex of the simplex")

    def count(self) -> int:
        return len(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __getitem__(self, i: int) -> SupportPoint:
        return self._vertices[i]

    def __iter__(self) -> Iterator[SupportPoint]:
        return iter(self._vertices)

    @property
    def vertices(self) -> list[SupportPoint]:
        """Copy of the vertex list, oldest first."""
        return list(self._vertices)

    @property
    def triangles(self) -> list[Triangle]:
        """Copy of the triangle list (index triples into `vertices`)."""
        return list(self._triangles)

    # -------------------------------------------------------------------------
    # EPA interface
    # -------------------------------------------------------------------------

    def triangulate(self) -> None:
        """
        Turn the simplex into a tetrahedron with outward-facing triangles.

        GJK may terminate with a line or a triangle (e.g. when the iteration
        cap is hit, or when the origin lies on a lower-dimensional feature).
        Those are padded with synthesized points so that the tetrahedron
        contains the origin or at least touches it. Synthesized points have
        no hull contributions (both are zero).

        Raises:
            SimplexTooSmallError: Fewer than 2 vertices.
            SimplexTooLargeError: More than 4 vertices.
        """
        n = len(self._vertices)
        if n < 2:
            raise SimplexTooSmallError(n, f"Cannot triangulate a simplex of {n} vertices; at least 2 are required.")
        if n > 4:
            raise SimplexTooLargeError(n, f"Cannot triangulate a simplex of {n} vertices; at most 4 are supported.")

        if n == 2:
            logger.debug("Promoting 2-vertex simplex to a tetrahedron")
            a = self._vertices[0].minkowski
            b = self._vertices[1].minkowski
            ba = a - b
            bo = -b
            to_c = np.cross(ba, bo)
            if norm(to_c) < DEGENERATE_EPS:
                # Origin lies on the line through a and b.
                to_c = any_perpendicular(ba)
            self._vertices.append(SupportPoint(a + unit(to_c) * PERPENDICULAR_OFFSET))
            self._vertices.append(SupportPoint(b + (1.0 + SIMPLEX_EPS) * bo))

        elif n == 3:
            logger.debug("Promoting 3-vertex simplex to a tetrahedron")
            b = self._vertices[1].minkowski
            self._vertices.append(SupportPoint(b + (1.0 + SIMPLEX_EPS) * -b))

        if self.is_correct_order(0, 1, 2, 3):
            self._triangles = list(_TETRAHEDRON_OUTWARD)
        else:
            self._triangles = list(_TETRAHEDRON_FLIPPED)

    def find_closest_face(self) -> Face:
        """
        Find the triangle whose plane is closest to the origin.

        Ties keep the first triangle in list order. Triangles with a (near)
        zero-length normal have no plane and are skipped.

        Raises:
            DegenerateFaceError: If every triangle is degenerate.
        """
        closest: Face | None = None

        for i, j, k in self._triangles:
            a_sp, b_sp, c_sp = self._vertices[i], self._vertices[j], self._vertices[k]
            a = a_sp.minkowski
            n = triangle_normal(a, b_sp.minkowski, c_sp.minkowski)
            n_len = norm(n)
            if n_len < DEGENERATE_EPS:
                continue

            d = -float(np.dot(n, a))
            distance = abs(d / n_len)

            if closest is None or distance < closest.distance:
                closest = Face(vertices=(a_sp, b_sp, c_sp), normal=n / n_len, distance=distance)

        if closest is None:
            raise DegenerateFaceError(f"All {len(self._triangles)} polytope faces have zero area")
        return closest

    def extend(self, point: SupportPoint) -> bool:
        """
        Add `point` to the polytope, replacing every triangle it can see.

        A triangle is visible when the point lies strictly in front of its
        plane. Visible triangles are removed; the edges on the border of the
        removed region are connected to the new vertex.

        Returns:
            False if a vertex with the same Minkowski coordinate already
            exists (nothing is changed), True otherwise.
        """
        if any(v == point for v in self._vertices):
            return False

        new_index = len(self._vertices)
        self._vertices.append(point)
        p = point.minkowski

        kept: list[Triangle] = []
        edges: list[Edge] = []

        for tri in self._triangles:
            i, j, k = tri
            a = self._vertices[i].minkowski
            n = triangle_normal(a, self._vertices[j].minkowski, self._vertices[k].minkowski)

            if same_direction(n, p - a):
                self._add_edge(edges, i, j)
                self._add_edge(edges, j, k)
                self._add_edge(edges, k, i)
            else:
                kept.append(tri)

        for e in edges:
            kept.append((new_index, e.a, e.b))

        self._triangles = kept
        return True

    def is_correct_order(self, a: int, b: int, c: int, opposite: int | np.ndarray) -> bool:
        """
        True if the triangle (a, b, c) faces away from `opposite`.

        Args:
            a, b, c: Vertex indices, in winding order.
            opposite: Index of the remaining vertex, or a point.
        """
        if isinstance(opposite, (int, np.integer)):
            opposite = self._vertices[int(opposite)].minkowski
        pa = self._vertices[a].minkowski
        n = triangle_normal(pa, self._vertices[b].minkowski, self._vertices[c].minkowski)
        return opposite_direction(n, opposite - pa)

    @staticmethod
    def _add_edge(edges: list[Edge], a: int, b: int) -> None:
        # An edge shared by two removed triangles shows up once per direction;
        # the second sighting cancels the first.
        edge = Edge(a, b)
        for i, e in enumerate(edges):
            if e.reversed() == edge:
                del edges[i]
                return
        edges.append(edge)

    def __repr__(self) -> str:
        return f"Simplex(vertices={len(self._vertices)}, triangles={len(self._triangles)})"
