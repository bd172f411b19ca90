# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Provides the low-level 3D vector helpers used by the simplex and the GJK/EPA
routines: normalization, direction tests, plane normals and barycentric
coordinates. All functions operate on numpy arrays of shape (3,).
"""
from __future__ import annotations

import numpy as np

from .constants import DEGENERATE_EPS


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used throughout the codebase to ensure consistent numeric precision
    and allow tuple/list inputs for points and directions.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 3D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 3D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = DEGENERATE_EPS) -> np.ndarray:
    """
    Return a unit (normalized) vector in the same direction as v.

    Returns zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return np.zeros(3, dtype=np.float64)
    return v / n


def same_direction(a: np.ndarray, b: np.ndarray) -> bool:
    """True if a and b point into the same half-space (a . b > 0)."""
    return float(np.dot(a, b)) > 0.0


def opposite_direction(a: np.ndarray, b: np.ndarray) -> bool:
    """True if a and b point into opposite half-spaces (a . b < 0)."""
    return float(np.dot(a, b)) < 0.0


def triangle_normal(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    """
    Non-normalized normal of the triangle (a, b, c): (b - a) x (c - a).

    The normal follows the right-hand rule over the vertex order, so
    swapping two vertices flips it.
    """
    return np.cross(b - a, c - a)


def any_perpendicular(v: np.ndarray) -> np.ndarray:
    """
    Return a unit vector perpendicular to v.

    Crosses v with the coordinate axis it is least aligned with, which keeps
    the result well conditioned. Returns the x-axis for a zero vector.
    """
    if norm(v) < DEGENERATE_EPS:
        return np.array([1.0, 0.0, 0.0], dtype=np.float64)
    axis = np.zeros(3, dtype=np.float64)
    axis[int(np.argmin(np.abs(v)))] = 1.0
    return unit(np.cross(v, axis))


def barycentric(p: np.ndarray, a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    """
    Barycentric coordinates (u, v, w) of p with respect to triangle (a, b, c).

    p is projected onto the triangle's plane implicitly; the weights sum to 1
    and satisfy p ~ u*a + v*b + w*c. Points outside the triangle yield
    negative weights.

    For a degenerate (zero-area) triangle the weights are undefined; equal
    weights are returned instead of NaN.
    """
    v0 = b - a
    v1 = c - a
    v2 = p - a
    d00 = float(np.dot(v0, v0))
    d01 = float(np.dot(v0, v1))
    d11 = float(np.dot(v1, v1))
    d20 = float(np.dot(v2, v0))
    d21 = float(np.dot(v2, v1))
    denom = d00 * d11 - d01 * d01

    if abs(denom) < DEGENERATE_EPS:
        return np.full(3, 1.0 / 3.0, dtype=np.float64)

    v = (d11 * d20 - d01 * d21) / denom
    w = (d00 * d21 - d01 * d20) / denom
    return np.array([1.0 - v - w, v, w], dtype=np.float64)


def cartesian(bary: np.ndarray, a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    """Inverse of barycentric(): the point u*a + v*b + w*c."""
    return bary[0] * a + bary[1] * b + bary[2] * c
