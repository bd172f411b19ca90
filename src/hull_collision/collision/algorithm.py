# MIT License (see LICENSE)
"""
Combined GJK + EPA narrow-phase query.

GjkAlgorithm runs the GJK search on two world-space point clouds and, unless
a separating direction is found, always hands the final simplex to EPA:
when GJK stops at its iteration cap the intersection is probable but not
proven, and EPA is still attempted.

Query states:
    Init -> GjkIterate (line | triangle | tetrahedron) -> NoIntersection
                                                       -> EpaConverge -> Done

Each call is self-contained (its simplex and support points are local to the
call), so one GjkAlgorithm can serve many pairs, including from several
threads, as long as every query gets its own Collision.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext

from ..config import GjkConfig
from ..profiler import Profiler
from .contact import Collision, EpaStatus
from .epa import epa_penetration
from .gjk import as_point_cloud, gjk_intersect

logger = logging.getLogger(__name__)


class GjkAlgorithm:
    """
    Intersection test and penetration query for pairs of convex hulls.

    Args:
        config: Iteration bounds and tolerances. Defaults to GjkConfig().
        profiler: Optional profiler; GJK and EPA are timed as the "gjk" and
            "epa" sections.
    """

    def __init__(self, config: GjkConfig | None = None, profiler: Profiler | None = None) -> None:
        self.config = config or GjkConfig()
        self.profiler = profiler

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def intersect(self, hull_a, hull_b, collision: Collision) -> bool:
        """
        Test two convex hulls for intersection and fill `collision` on a hit.

        Args:
            hull_a: World-space vertices of the first hull, shape (N, 3).
            hull_b: World-space vertices of the second hull, shape (M, 3).
            collision: Record referencing the two participants. Written only
                when the hulls intersect.

        Returns:
            True if the hulls intersect (or GJK could not rule it out),
            False if a separating direction was found.

        Raises:
            ValueError: If a hull is empty or not a set of finite 3D points.
        """
        points_a = as_point_cloud(hull_a)
        points_b = as_point_cloud(hull_b)

        with self._section("gjk"):
            hit, simplex, enclosed = gjk_intersect(points_a, points_b, self.config.max_iterations)

        if not hit:
            return False

        collision.gjk_converged = enclosed
        with self._section("epa"):
            status = epa_penetration(
                simplex,
                points_a,
                points_b,
                collision,
                tol=self.config.epa_tolerance,
                max_iters=self.config.epa_max_iterations,
            )

        if status is not EpaStatus.CONVERGED:
            logger.debug("Contact reported with EPA status %s", status.value)
        return True


def intersect(hull_a, hull_b, collision: Collision, config: GjkConfig | None = None) -> bool:
    """Run a single query with a throwaway GjkAlgorithm. See GjkAlgorithm.intersect()."""
    return GjkAlgorithm(config).intersect(hull_a, hull_b, collision)
