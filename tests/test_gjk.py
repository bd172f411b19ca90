import itertools

import numpy as np
import pytest

from hull_collision.collision.gjk import (
    furthest_point,
    gjk_intersect,
    process_line,
    process_tetrahedron,
    process_triangle,
    support,
)
from hull_collision.collision.simplex import Simplex
from hull_collision.types import SupportPoint


def cube(center, half=0.5):
    """Axis-aligned cube vertices in a fixed (lexicographic) order."""
    corners = np.array(list(itertools.product((-half, half), repeat=3)), dtype=np.float64)
    return corners + np.asarray(center, dtype=np.float64)


def sp(*xyz):
    return SupportPoint(np.array(xyz, dtype=np.float64))


def test_furthest_point_first_maximum_wins():
    hull = cube((0, 0, 0))
    # Four vertices share the maximum along +x; the first one in hull order is returned
    p = furthest_point(hull, np.array([1.0, 0.0, 0.0]))
    assert np.array_equal(p, [0.5, -0.5, -0.5])


def test_support_single_point_hull():
    point = np.array([[1.0, -2.0, 3.0]])
    origin = np.zeros((1, 3))
    rng = np.random.default_rng(7)
    for d in rng.normal(size=(20, 3)):
        s = support(point, origin, d)
        assert np.array_equal(s.minkowski, point[0])
        assert np.array_equal(s.from_hull_a, point[0])
        assert np.array_equal(s.from_hull_b, origin[0])


def test_support_is_minkowski_difference():
    a = cube((0, 0, 0))
    b = cube((3, 0, 0))
    d = np.array([1.0, 2.0, 3.0])
    s = support(a, b, d)
    assert np.array_equal(s.from_hull_a, [0.5, 0.5, 0.5])
    assert np.array_equal(s.from_hull_b, [2.5, -0.5, -0.5])
    assert np.array_equal(s.minkowski, s.from_hull_a - s.from_hull_b)


def test_disjoint_cubes_do_not_intersect():
    hit, simplex, enclosed = gjk_intersect(cube((0, 0, 0)), cube((10, 0, 0)))
    assert hit is False
    assert enclosed is False
    assert 1 <= simplex.count() <= 4


def test_overlapping_cubes_enclose_origin():
    hit, simplex, enclosed = gjk_intersect(cube((0, 0, 0)), cube((0.5, 0, 0)))
    assert hit is True
    assert enclosed is True
    assert simplex.count() == 4


def test_iteration_cap_reports_probable_hit():
    hit, simplex, enclosed = gjk_intersect(cube((0, 0, 0)), cube((0.5, 0, 0)), max_iters=1)
    assert hit is True
    assert enclosed is False
    assert simplex.count() >= 2


def test_line_keeps_segment_when_origin_is_beside_it():
    s = Simplex([sp(1, 1, 0), sp(-1, 1, 0)])
    enclosed, d = process_line(s, np.zeros(3))
    assert enclosed is False
    assert s.count() == 2
    assert np.allclose(d / np.linalg.norm(d), [0.0, -1.0, 0.0])


def test_line_drops_old_vertex_when_origin_is_behind_newest():
    s = Simplex([sp(2, 0, 0), sp(1, 0, 0)])
    enclosed, d = process_line(s, np.zeros(3))
    assert enclosed is False
    assert s.vertices == [sp(1, 0, 0)]
    assert np.allclose(d, [-1.0, 0.0, 0.0])


def test_triangle_above_origin_keeps_winding():
    c, b, a = sp(-1, -1, 1), sp(1, -1, 1), sp(0, 1, 1)
    s = Simplex([c, b, a])
    enclosed, d = process_triangle(s, np.zeros(3))
    assert enclosed is False
    assert s.vertices == [c, b, a]
    assert np.allclose(d / np.linalg.norm(d), [0.0, 0.0, -1.0])


def test_triangle_below_origin_swaps_winding():
    c, b, a = sp(-1, -1, -1), sp(1, -1, -1), sp(0, 1, -1)
    s = Simplex([c, b, a])
    enclosed, d = process_triangle(s, np.zeros(3))
    assert enclosed is False
    assert s.vertices == [b, c, a]
    assert np.allclose(d / np.linalg.norm(d), [0.0, 0.0, 1.0])
    # Stored winding now faces the origin
    normal = np.cross(s[1].minkowski - s[2].minkowski, s[0].minkowski - s[2].minkowski)
    assert np.dot(normal, -s[2].minkowski) > 0


def test_triangle_reduces_to_edge():
    # Origin lies outside edge ab, within its span
    c, b, a = sp(0, -3, 0), sp(1, -1, 0), sp(-1, -1, 0)
    s = Simplex([c, b, a])
    enclosed, d = process_triangle(s, np.zeros(3))
    assert enclosed is False
    assert s.vertices == [b, a]
    assert np.allclose(d / np.linalg.norm(d), [0.0, 1.0, 0.0])


def test_tetrahedron_encloses_origin():
    s = Simplex([sp(1, -1, -1), sp(-1, -1, -1), sp(0, 1, -1), sp(0, 0, 2)])
    enclosed, _ = process_tetrahedron(s, np.zeros(3))
    assert enclosed is True
    assert s.count() == 4


def test_tetrahedron_reduces_when_origin_is_outside():
    s = Simplex([sp(1, -1, -1), sp(-1, -1, -1), sp(0, 1, -1), sp(0, 0, -0.5)])
    enclosed, d = process_tetrahedron(s, np.zeros(3))
    assert enclosed is False
    assert s.count() < 4
    # New search direction points from the apex region toward the origin
    assert d[2] > 0


@pytest.mark.parametrize("offset", [(10, 0, 0), (0, -3, 0), (2, 2, 2)])
def test_separated_cubes(offset):
    hit, _, _ = gjk_intersect(cube((0, 0, 0)), cube(offset))
    assert hit is False
