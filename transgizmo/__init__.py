"""
Translation handles for interactive 3D transform gizmos.

Provides the drag-along-axis and drag-in-plane affordances of a transform
gizmo, driven by a pointer ray every frame:
- Pick the handle with a ray and remember the grab point
- Follow the ray while dragging, emitting the new translation
- Optionally snap the drag delta to a grid

Core classes:
- TranslationHandle: pick/update/draw protocol for one handle
- HandleConfig: shared handle configuration
- HitTester, HandleRenderer: collaborator interfaces
"""

from transgizmo.config import (
    GizmoMode,
    HandleConfig,
    Ray,
    TransformKind,
)

from transgizmo.geometry import (
    intersect_plane,
    quat_rotate,
    ray_to_ray,
    ray_to_segment,
    round_to_interval,
)

from transgizmo.hit_test import (
    ArrowHitTester,
    HitTester,
    PickResult,
    PlaneHitTester,
)

from transgizmo.plane import (
    plane_binormal,
    plane_global_origin,
    plane_local_origin,
    plane_tangent,
)

from transgizmo.render import HandleRenderer

from transgizmo.snap import (
    snap_translation_plane,
    snap_translation_vector,
)

from transgizmo.translation import (
    GizmoResult,
    TranslationHandle,
    TranslationState,
)

__version__ = '0.1.0'

__all__ = [
    # Config
    "GizmoMode",
    "HandleConfig",
    "Ray",
    "TransformKind",
    # Geometry
    "intersect_plane",
    "quat_rotate",
    "ray_to_ray",
    "ray_to_segment",
    "round_to_interval",
    # Collaborators
    "ArrowHitTester",
    "HitTester",
    "PickResult",
    "PlaneHitTester",
    "HandleRenderer",
    # Plane helpers
    "plane_binormal",
    "plane_global_origin",
    "plane_local_origin",
    "plane_tangent",
    # Snapping
    "snap_translation_plane",
    "snap_translation_vector",
    # Handle
    "GizmoResult",
    "TranslationHandle",
    "TranslationState",
]
