import itertools

import numpy as np
import pytest

from hull_collision import Collision, ConvexBody, EpaStatus, GjkAlgorithm, GjkConfig
from hull_collision.collision import epa_penetration, gjk_intersect, intersect


def cube(center, half=0.5):
    corners = np.array(list(itertools.product((-half, half), repeat=3)), dtype=np.float64)
    return corners + np.asarray(center, dtype=np.float64)


def test_overlapping_cubes_depth_and_contacts():
    """
    Unit cubes at x=0 and x=0.5 overlap by 0.5 along x.
    The Minkowski difference spans x in [-1.5, 0.5], so the closest face is x = 0.5.
    """
    a = ConvexBody(cube((0, 0, 0)))
    b = ConvexBody(cube((0, 0, 0)), position=(0.5, 0.0, 0.0))
    collision = Collision(a, b)

    assert GjkAlgorithm().intersect(a.convex_hull(), b.convex_hull(), collision)
    assert collision.status is EpaStatus.CONVERGED
    assert collision.converged
    assert collision.penetration_depth == pytest.approx(0.5, abs=1e-4)
    assert np.allclose(collision.intersection_vector, [0.5, 0.0, 0.0], atol=1e-4)
    # Normal points from the second body toward the first
    assert np.allclose(collision.unit_normal, [-1.0, 0.0, 0.0])
    assert collision.first_poc[0] == pytest.approx(0.5, abs=1e-4)
    assert collision.second_poc[0] == pytest.approx(0.0, abs=1e-4)


def test_normal_falls_back_to_face_normal_without_positions():
    collision = Collision()
    assert intersect(cube((0, 0, 0)), cube((0.5, 0, 0)), collision)
    assert np.allclose(collision.unit_normal, [-1.0, 0.0, 0.0])
    assert np.linalg.norm(collision.unit_normal) == pytest.approx(1.0)


def test_disjoint_cubes_leave_collision_untouched():
    collision = Collision()
    assert not intersect(cube((0, 0, 0)), cube((10, 0, 0)), collision)
    assert collision.status is None
    assert np.array_equal(collision.intersection_vector, np.zeros(3))
    assert collision.penetration_depth == 0.0


def test_touching_cubes_are_reported_and_deterministic():
    results = []
    for _ in range(3):
        collision = Collision()
        assert intersect(cube((0, 0, 0)), cube((1, 0, 0)), collision)
        assert np.all(np.isfinite(collision.intersection_vector))
        assert np.all(np.isfinite(collision.unit_normal))
        results.append((collision.intersection_vector.copy(), collision.first_poc.copy(), collision.status))

    for iv, poc, status in results[1:]:
        assert np.array_equal(iv, results[0][0])
        assert np.array_equal(poc, results[0][1])
        assert status is results[0][2]


def test_epa_iteration_cap_reports_best_estimate():
    collision = Collision()
    config = GjkConfig(epa_max_iterations=1)
    assert intersect(cube((0, 0, 0)), cube((0.5, 0, 0)), collision, config=config)
    assert collision.status is EpaStatus.NOT_CONVERGED
    assert not collision.converged
    assert np.all(np.isfinite(collision.intersection_vector))
    assert np.all(np.isfinite(collision.first_poc))
    assert np.all(np.isfinite(collision.second_poc))


def test_coincident_points_are_degenerate_not_nan():
    point = np.zeros((1, 3))
    collision = Collision()
    assert intersect(point, point, collision)
    assert collision.status is EpaStatus.DEGENERATE
    assert np.array_equal(collision.intersection_vector, np.zeros(3))
    assert np.array_equal(collision.first_poc, np.zeros(3))
    assert np.all(np.isfinite(collision.unit_normal))
    assert np.linalg.norm(collision.unit_normal) == pytest.approx(1.0)


def test_epa_after_gjk_matches_query():
    a, b = cube((0, 0, 0)), cube((0.5, 0, 0))
    hit, simplex, enclosed = gjk_intersect(a, b)
    assert hit and enclosed

    collision = Collision()
    status = epa_penetration(simplex, a, b, collision)
    assert status is EpaStatus.CONVERGED
    assert collision.status is status
    assert collision.penetration_depth == pytest.approx(0.5, abs=1e-4)


def test_gjk_cap_marks_collision_as_not_converged():
    collision = Collision()
    assert intersect(cube((0, 0, 0)), cube((0.5, 0, 0)), collision, config=GjkConfig(max_iterations=1))
    assert collision.gjk_converged is False
    assert not collision.converged
    assert np.all(np.isfinite(collision.intersection_vector))


@pytest.mark.parametrize("bad", [
    np.zeros((0, 3)),
    np.zeros((4, 2)),
    np.array([[np.nan, 0.0, 0.0]]),
])
def test_invalid_hull_raises(bad):
    with pytest.raises(ValueError):
        intersect(bad, cube((0, 0, 0)), Collision())


def test_query_is_symmetric_in_depth():
    forward, backward = Collision(), Collision()
    assert intersect(cube((0, 0, 0)), cube((0.5, 0, 0)), forward)
    assert intersect(cube((0.5, 0, 0)), cube((0, 0, 0)), backward)
    assert forward.penetration_depth == pytest.approx(backward.penetration_depth, abs=1e-4)
