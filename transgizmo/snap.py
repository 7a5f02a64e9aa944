"""
Snapping policies for translation deltas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from transgizmo import log
from transgizmo.geometry import round_to_interval
from transgizmo.plane import plane_binormal, plane_tangent

if TYPE_CHECKING:
    from transgizmo.config import HandleConfig

# Magnitudes at or below this are left unsnapped
SNAP_EPS = 1e-5


def snap_translation_vector(config: "HandleConfig", delta: np.ndarray) -> np.ndarray:
    """Snap the length of an axis delta, keeping its direction."""
    length = float(np.linalg.norm(delta))
    if length > SNAP_EPS:
        return delta / length * round_to_interval(length, config.snap_distance)
    return delta


def snap_translation_plane(config: "HandleConfig", delta: np.ndarray) -> np.ndarray:
    """
    Snap an in-plane delta along the plane basis.

    Each component is measured through a cross product with the other
    basis vector; its sign is recovered from the dot with the plane
    normal.
    """
    binormal = config.to_world(plane_binormal(config.direction))
    tangent = config.to_world(plane_tangent(config.direction))

    cb = np.cross(delta, -binormal)
    ct = np.cross(delta, tangent)
    lb = float(np.linalg.norm(cb))
    lt = float(np.linalg.norm(ct))
    n = config.normal()

    if lb > SNAP_EPS and lt > SNAP_EPS:
        return (
            binormal
            * round_to_interval(lt, config.snap_distance)
            * np.sign(np.dot(ct / lt, n))
            + tangent
            * round_to_interval(lb, config.snap_distance)
            * np.sign(np.dot(cb / lb, n))
        )

    log.debug(f"plane snap skipped, delta {delta} too close to a basis axis")
    return delta
