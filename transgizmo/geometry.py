"""
Geometry primitives for gizmo picking and dragging.

All functions are pure and work on numpy 3-vectors in double precision:
- ray_to_ray: closest-approach parameters of two infinite lines
- ray_to_segment: closest points between a ray and a finite segment
- intersect_plane: ray-plane intersection parameter
- round_to_interval: scalar quantization to a grid step
- quat_rotate: rotate vector by quaternion (x, y, z, w)
"""

from __future__ import annotations

import math

import numpy as np

# Below this value of 1 - cos^2 two directions are treated as parallel
PARALLEL_EPS = 1e-8

# Below this value of |dir . normal| a ray is treated as lying in the plane
PLANE_PARALLEL_EPS = 1e-7


def normalize(v: np.ndarray) -> np.ndarray:
    """Return unit vector, or zero vector for a zero-length input."""
    v = np.asarray(v, dtype=np.float64)
    length = np.linalg.norm(v)
    if length < 1e-12:
        return np.zeros(3, dtype=np.float64)
    return v / length


def ray_to_ray(
    a_origin: np.ndarray,
    a_dir: np.ndarray,
    b_origin: np.ndarray,
    b_dir: np.ndarray,
) -> tuple[float, float]:
    """
    Closest approach of two lines a(s) = a_origin + a_dir * s and
    b(t) = b_origin + b_dir * t.

    Solves the 2x2 normal equations built from the dot products of the
    directions and the origin offset.

    Returns:
        (s, t) parameters of the closest points on a and b.
        For parallel lines s = 0 and t projects a_origin onto b.
    """
    w = a_origin - b_origin
    a = float(np.dot(a_dir, a_dir))
    b = float(np.dot(a_dir, b_dir))
    c = float(np.dot(b_dir, b_dir))
    d = float(np.dot(a_dir, w))
    e = float(np.dot(b_dir, w))

    if a < 1e-12 or c < 1e-12:
        return 0.0, (e / c if c >= 1e-12 else 0.0)

    denom = a * c - b * b
    if denom < PARALLEL_EPS * a * c:
        # Parallel
        return 0.0, e / c

    s = (b * e - c * d) / denom
    t = (a * e - b * d) / denom
    return s, t


def ray_to_segment(
    ray_origin: np.ndarray,
    ray_dir: np.ndarray,
    seg_start: np.ndarray,
    seg_end: np.ndarray,
) -> tuple[float, np.ndarray, np.ndarray]:
    """
    Closest points between a ray (s >= 0) and a segment.

    Returns:
        (s, ray_point, segment_point)
    """
    seg_dir = seg_end - seg_start
    seg_len_sq = float(np.dot(seg_dir, seg_dir))
    dir_len_sq = float(np.dot(ray_dir, ray_dir))

    if seg_len_sq < 1e-12:
        u = 0.0
    else:
        _, u = ray_to_ray(ray_origin, ray_dir, seg_start, seg_dir)
        u = min(max(u, 0.0), 1.0)

    seg_point = seg_start + seg_dir * u

    if dir_len_sq < 1e-12:
        s = 0.0
    else:
        s = max(float(np.dot(seg_point - ray_origin, ray_dir)) / dir_len_sq, 0.0)

    ray_point = ray_origin + ray_dir * s

    # The clamped ray point may pull the segment point elsewhere
    if seg_len_sq >= 1e-12:
        u = float(np.dot(ray_point - seg_start, seg_dir)) / seg_len_sq
        u = min(max(u, 0.0), 1.0)
        seg_point = seg_start + seg_dir * u

    return s, ray_point, seg_point


def intersect_plane(
    plane_normal: np.ndarray,
    plane_origin: np.ndarray,
    ray_origin: np.ndarray,
    ray_dir: np.ndarray,
) -> float | None:
    """
    Intersect ray with plane.

    Returns:
        Distance along ray (t >= 0), or None when the ray is parallel to
        the plane or the plane lies behind the ray origin.
    """
    denom = float(np.dot(plane_normal, ray_dir))
    if abs(denom) < PLANE_PARALLEL_EPS:
        return None

    t = float(np.dot(plane_origin - ray_origin, plane_normal)) / denom
    if t < 0.0:
        return None
    return t


def round_to_interval(value: float, interval: float) -> float:
    """
    Round value to the nearest multiple of interval.

    Ties go away from zero. A non-positive interval disables rounding.
    """
    if interval <= 0.0:
        return value
    q = value / interval
    return math.copysign(math.floor(abs(q) + 0.5), q) * interval


def quat_rotate(q: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Rotate vector by quaternion (x, y, z, w)."""
    qv = q[:3]
    qw = q[3]
    t = 2.0 * np.cross(qv, v)
    return v + qw * t + np.cross(qv, t)
