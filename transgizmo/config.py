"""
Handle configuration and per-frame input types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import numpy as np

from transgizmo.geometry import normalize, quat_rotate


class TransformKind(Enum):
    """Shape of a translation handle."""
    AXIS = auto()   # arrow, drag along a line
    PLANE = auto()  # quad, drag inside a plane


class GizmoMode(Enum):
    """Mode tag reported in GizmoResult."""
    TRANSLATE = auto()


@dataclass(frozen=True, eq=False)
class Ray:
    """Pointer ray in world space. Direction is expected to be normalized."""
    origin: np.ndarray
    direction: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "origin", _as_vector(self.origin, 3, "origin"))
        object.__setattr__(self, "direction", _as_vector(self.direction, 3, "direction"))

    def point_at(self, t: float) -> np.ndarray:
        return self.origin + self.direction * t


@dataclass
class HandleConfig:
    """
    Configuration of one translation handle.

    Owned by the caller. Handles only read it; the new translation is
    returned in GizmoResult for the caller to apply.

    Attributes:
        translation: World position of the manipulated object (gizmo origin)
        rotation: Orientation quaternion [x, y, z, w]
        scale: Non-uniform scale
        snapping: Quantize drag deltas to snap_distance
        snap_distance: Snap interval (<= 0 disables rounding)
        local_space: Directions follow rotation instead of world axes
        direction: Handle direction (axis direction or plane normal)
        transform_kind: AXIS or PLANE
        size: World-space length of the handle geometry
    """

    translation: np.ndarray = None
    rotation: np.ndarray = None
    scale: np.ndarray = None
    snapping: bool = False
    snap_distance: float = 1.0
    local_space: bool = False
    direction: np.ndarray = None
    transform_kind: TransformKind = TransformKind.AXIS
    size: float = 1.0

    def __post_init__(self):
        """Ensure arrays are proper shape and type."""
        if self.translation is None:
            self.translation = np.zeros(3, dtype=np.float64)
        else:
            self.translation = _as_vector(self.translation, 3, "translation")

        if self.rotation is None:
            self.rotation = np.array([0.0, 0.0, 0.0, 1.0], dtype=np.float64)
        else:
            self.rotation = _as_vector(self.rotation, 4, "rotation")

        if self.scale is None:
            self.scale = np.ones(3, dtype=np.float64)
        else:
            self.scale = _as_vector(self.scale, 3, "scale")

        if self.direction is None:
            self.direction = np.array([1.0, 0.0, 0.0], dtype=np.float64)
        else:
            self.direction = _as_vector(self.direction, 3, "direction")

        self.snapping = bool(self.snapping)
        self.snap_distance = float(self.snap_distance)
        self.local_space = bool(self.local_space)
        self.size = float(self.size)

    def normal(self) -> np.ndarray:
        """Handle direction in world space (axis direction or plane normal)."""
        n = normalize(self.direction)
        if self.local_space:
            n = quat_rotate(self.rotation, n)
        return n

    def to_world(self, v: np.ndarray) -> np.ndarray:
        """Rotate a handle-frame vector to world space if local_space is set."""
        if self.local_space:
            return quat_rotate(self.rotation, v)
        return v

    def serialize(self) -> dict:
        """Serialize config to dict for JSON storage."""
        return {
            "translation": self.translation.tolist(),
            "rotation": self.rotation.tolist(),
            "scale": self.scale.tolist(),
            "snapping": self.snapping,
            "snap_distance": self.snap_distance,
            "local_space": self.local_space,
            "direction": self.direction.tolist(),
            "transform_kind": self.transform_kind.name,
            "size": self.size,
        }

    @classmethod
    def deserialize(cls, data: dict) -> "HandleConfig":
        """Deserialize config from dict."""
        kind_name = data.get("transform_kind", TransformKind.AXIS.name)
        try:
            kind = TransformKind[kind_name]
        except KeyError:
            raise ValueError(f"Unknown transform kind: {kind_name!r}") from None

        return cls(
            translation=data.get("translation", [0, 0, 0]),
            rotation=data.get("rotation", [0, 0, 0, 1]),
            scale=data.get("scale", [1, 1, 1]),
            snapping=data.get("snapping", False),
            snap_distance=data.get("snap_distance", 1.0),
            local_space=data.get("local_space", False),
            direction=data.get("direction", [1, 0, 0]),
            transform_kind=kind,
            size=data.get("size", 1.0),
        )


def _as_vector(value, n: int, name: str) -> np.ndarray:
    arr = np.array(value, dtype=np.float64)
    if arr.shape != (n,):
        raise ValueError(f"{name} must have shape ({n},), got {arr.shape}")
    return arr
