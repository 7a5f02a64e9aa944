"""Tests for translation snapping policies."""

import math

import numpy as np
import pytest

from transgizmo.config import HandleConfig, TransformKind
from transgizmo.snap import snap_translation_plane, snap_translation_vector


def v(x, y, z):
    return np.array([x, y, z], dtype=np.float64)


def axis_config(snap_distance=1.0, **kwargs) -> HandleConfig:
    return HandleConfig(snapping=True, snap_distance=snap_distance, **kwargs)


def plane_config(direction, snap_distance=1.0, **kwargs) -> HandleConfig:
    return HandleConfig(
        snapping=True,
        snap_distance=snap_distance,
        direction=direction,
        transform_kind=TransformKind.PLANE,
        **kwargs,
    )


class TestAxisSnap:
    """Snapping of an axis delta length."""

    def test_rounds_down(self):
        assert np.allclose(snap_translation_vector(axis_config(), v(2.4, 0, 0)), [2, 0, 0])

    def test_keeps_negative_direction(self):
        assert np.allclose(snap_translation_vector(axis_config(), v(0, -2.6, 0)), [0, -3, 0])

    def test_diagonal_delta(self):
        """Length 5 with step 2 rounds to 6 along the same direction."""
        snapped = snap_translation_vector(axis_config(2.0), v(3, 4, 0))
        assert np.allclose(snapped, [3.6, 4.8, 0])

    def test_tiny_delta_unchanged(self):
        delta = v(1e-6, 0, 0)
        assert np.array_equal(snap_translation_vector(axis_config(), delta), delta)

    def test_zero_interval_unchanged(self):
        delta = v(2.37, 0, 0)
        assert np.allclose(snap_translation_vector(axis_config(0.0), delta), delta)

    def test_length_is_multiple_of_step(self):
        config = axis_config(0.3)
        for x in np.linspace(-4.0, 4.0, 33):
            delta = v(x, 0.5 * x, 0)
            length = np.linalg.norm(snap_translation_vector(config, delta))
            k = length / 0.3
            assert k == pytest.approx(round(k), abs=1e-9)


class TestPlaneSnap:
    """Snapping of an in-plane delta along the plane basis."""

    def test_xy_plane(self):
        snapped = snap_translation_plane(plane_config([0, 0, 1]), v(1.3, -2.7, 0))
        assert np.allclose(snapped, [1, -3, 0])

    def test_yz_plane(self):
        snapped = snap_translation_plane(plane_config([1, 0, 0], 0.5), v(0, 2.2, -0.6))
        assert np.allclose(snapped, [0, 2.0, -0.5])

    def test_xz_plane(self):
        snapped = snap_translation_plane(plane_config([0, 1, 0]), v(-0.6, 0, 1.4))
        assert np.allclose(snapped, [-1, 0, 1])

    def test_negative_normal_keeps_signs(self):
        """A flipped plane normal must not flip the snapped direction."""
        snapped = snap_translation_plane(plane_config([0, 0, -1]), v(1.3, -2.7, 0))
        assert np.allclose(snapped, [1, -3, 0])

    @pytest.mark.parametrize("delta, expected", [
        ((1.3, 1.3, 0), (1, 1, 0)),
        ((-1.3, 1.3, 0), (-1, 1, 0)),
        ((1.3, -1.3, 0), (1, -1, 0)),
        ((-1.3, -1.3, 0), (-1, -1, 0)),
    ])
    def test_all_quadrants(self, delta, expected):
        snapped = snap_translation_plane(plane_config([0, 0, 1]), np.array(delta, dtype=np.float64))
        assert np.allclose(snapped, expected)

    def test_local_space_uses_rotated_basis(self):
        """45 degrees around Z: the grid follows the rotated axes."""
        s = math.sin(math.pi / 8)
        c = math.cos(math.pi / 8)
        config = plane_config([0, 0, 1], rotation=[0, 0, s, c], local_space=True)

        h = math.sqrt(0.5)
        binormal = v(h, h, 0)
        tangent = v(-h, h, 0)
        delta = binormal * 2.2 + tangent * -0.7

        snapped = snap_translation_plane(config, delta)
        assert np.allclose(snapped, binormal * 2.0 - tangent)

    def test_delta_along_basis_axis_unchanged(self):
        delta = v(2.3, 0, 0)
        assert np.array_equal(snap_translation_plane(plane_config([0, 0, 1]), delta), delta)

    def test_zero_delta_unchanged(self):
        delta = v(0, 0, 0)
        assert np.array_equal(snap_translation_plane(plane_config([0, 0, 1]), delta), delta)
