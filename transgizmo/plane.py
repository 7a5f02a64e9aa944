"""
Plane basis helpers for plane translation handles.

A plane handle is a small quad lying in the plane with normal = handle
direction, shifted from the gizmo origin along binormal + tangent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from transgizmo.geometry import normalize

if TYPE_CHECKING:
    from transgizmo.config import HandleConfig

# Offset of the quad from the gizmo origin, in handle sizes
PLANE_OFFSET_RATIO = 0.4


def plane_binormal(direction: np.ndarray) -> np.ndarray:
    """First in-plane basis vector for a plane with the given normal."""
    binormal, _ = _plane_basis(direction)
    return binormal


def plane_tangent(direction: np.ndarray) -> np.ndarray:
    """Second in-plane basis vector for a plane with the given normal."""
    _, tangent = _plane_basis(direction)
    return tangent


def plane_local_origin(config: "HandleConfig") -> np.ndarray:
    """Quad center offset relative to the gizmo origin, in handle frame."""
    binormal, tangent = _plane_basis(config.direction)
    return (binormal + tangent) * (config.size * PLANE_OFFSET_RATIO)


def plane_global_origin(config: "HandleConfig") -> np.ndarray:
    """Quad center in world space."""
    return config.to_world(plane_local_origin(config)) + config.translation


def _plane_basis(direction: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    (binormal, tangent) with binormal x tangent == unit direction.

    Positive coordinate axes map cyclically: X -> (Y, Z), Y -> (Z, X),
    Z -> (X, Y). Negative axes use the same pair swapped.
    """
    d = normalize(direction)
    if not d.any():
        return np.zeros(3, dtype=np.float64), np.zeros(3, dtype=np.float64)

    i = int(np.argmax(np.abs(d)))
    if abs(d[i]) > 1.0 - 1e-9:
        binormal = np.zeros(3, dtype=np.float64)
        tangent = np.zeros(3, dtype=np.float64)
        binormal[(i + 1) % 3] = 1.0
        tangent[(i + 2) % 3] = 1.0
        if d[i] < 0.0:
            return tangent, binormal
        return binormal, tangent

    return _build_basis(d)


def _build_basis(axis: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Build orthonormal basis from axis (tangent, bitangent)."""
    if abs(axis[0]) < 0.9:
        tangent = np.cross(axis, np.array([1.0, 0.0, 0.0]))
    else:
        tangent = np.cross(axis, np.array([0.0, 1.0, 0.0]))
    tangent = tangent / np.linalg.norm(tangent)
    bitangent = np.cross(axis, tangent)
    return tangent, bitangent
