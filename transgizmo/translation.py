"""
TranslationHandle — axis arrow or plane quad that drags an object.

Per-frame protocol driven by the host:
- pick(ray) on pointer press: hit-test and reset interaction state
- update(ray) every frame while dragging: new translation for the target
- draw() every frame
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from transgizmo import log
from transgizmo.config import GizmoMode, HandleConfig, Ray, TransformKind
from transgizmo.geometry import intersect_plane, ray_to_ray
from transgizmo.hit_test import ArrowHitTester, HitTester, PlaneHitTester
from transgizmo.plane import plane_global_origin
from transgizmo.render import HandleRenderer
from transgizmo.snap import snap_translation_plane, snap_translation_vector


def _zero3() -> np.ndarray:
    return np.zeros(3, dtype=np.float64)


@dataclass
class TranslationState:
    """
    Interaction state of one handle.

    Attributes:
        start_point: World point grabbed at pick time
        last_point: Drag point computed by the latest update
        current_delta: last_point - start_point (snapped if snapping is on)
    """
    start_point: np.ndarray = field(default_factory=_zero3)
    last_point: np.ndarray = field(default_factory=_zero3)
    current_delta: np.ndarray = field(default_factory=_zero3)

    def copy(self) -> "TranslationState":
        return TranslationState(
            start_point=self.start_point.copy(),
            last_point=self.last_point.copy(),
            current_delta=self.current_delta.copy(),
        )


@dataclass
class GizmoResult:
    """
    Output of one drag frame.

    Attributes:
        scale: Unchanged target scale
        rotation: Unchanged target rotation [x, y, z, w]
        translation: New target translation to apply
        mode: Always GizmoMode.TRANSLATE
        delta: Total displacement since the handle was picked
    """
    scale: np.ndarray
    rotation: np.ndarray
    translation: np.ndarray
    mode: GizmoMode
    delta: np.ndarray


class TranslationHandle:
    """
    Single translation handle of a transform gizmo.

    The handle owns its interaction state. The config is shared with the
    caller, who applies GizmoResult.translation back to it (or to the
    target object the config mirrors) between frames.
    """

    def __init__(
        self,
        config: HandleConfig,
        axis_hit_tester: HitTester | None = None,
        plane_hit_tester: HitTester | None = None,
        renderer: HandleRenderer | None = None,
    ):
        self.config = config
        self.axis_hit_tester = axis_hit_tester or ArrowHitTester()
        self.plane_hit_tester = plane_hit_tester or PlaneHitTester()
        self.renderer = renderer
        self.opacity: float = 1.0
        self._state = TranslationState()

    @property
    def state(self) -> TranslationState:
        """Snapshot of the interaction state."""
        return self._state.copy()

    # ============================================================
    # Frame protocol
    # ============================================================

    def pick(self, ray: Ray) -> float | None:
        """
        Hit-test ray against the handle.

        Always resets the interaction state to the contact point and
        updates opacity, also on a miss.

        Returns:
            Distance along ray if the handle was picked, else None.
        """
        match self.config.transform_kind:
            case TransformKind.AXIS:
                result = self.axis_hit_tester.hit_test(self.config, ray)
            case TransformKind.PLANE:
                result = self.plane_hit_tester.hit_test(self.config, ray)
            case kind:
                raise ValueError(f"Unknown transform kind: {kind}")

        self.opacity = float(result.visibility)

        point = np.array(result.point, dtype=np.float64)
        self._state = TranslationState(
            start_point=point,
            last_point=point.copy(),
            current_delta=_zero3(),
        )

        if result.picked:
            log.debug(f"translation handle picked at {point}, t={result.t:.4f}")
            return float(result.t)
        return None

    def update(self, ray: Ray) -> GizmoResult | None:
        """
        Drag the handle to follow ray.

        Returns:
            New transform for the target, or None when the ray cannot
            reach the drag plane this frame.
        """
        config = self.config
        state = self._state

        match config.transform_kind:
            case TransformKind.AXIS:
                new_point = point_on_axis(config, ray)
            case TransformKind.PLANE:
                new_point = point_on_plane(config.normal(), plane_global_origin(config), ray)
                if new_point is None:
                    log.debug("translation update skipped: ray does not hit drag plane")
                    return None
            case kind:
                raise ValueError(f"Unknown transform kind: {kind}")

        new_delta = new_point - state.start_point

        if config.snapping:
            match config.transform_kind:
                case TransformKind.AXIS:
                    new_delta = snap_translation_vector(config, new_delta)
                case TransformKind.PLANE:
                    new_delta = snap_translation_plane(config, new_delta)
            new_point = state.start_point + new_delta

        # Accumulate relative to the previous frame, not to start_point
        new_translation = config.translation + (new_point - state.last_point)

        state.last_point = new_point
        state.current_delta = new_delta

        return GizmoResult(
            scale=config.scale.copy(),
            rotation=config.rotation.copy(),
            translation=new_translation,
            mode=GizmoMode.TRANSLATE,
            delta=new_delta.copy(),
        )

    def draw(self) -> None:
        """Draw the handle with the attached renderer, if any."""
        if self.renderer is None:
            return

        match self.config.transform_kind:
            case TransformKind.AXIS:
                self.renderer.draw_axis_handle(self)
            case TransformKind.PLANE:
                self.renderer.draw_plane_handle(self)
            case kind:
                raise ValueError(f"Unknown transform kind: {kind}")


def point_on_axis(config: HandleConfig, ray: Ray) -> np.ndarray:
    """Nearest point to ray on the line through the gizmo origin along the handle."""
    origin = config.translation
    direction = config.normal()

    _, axis_t = ray_to_ray(ray.origin, ray.direction, origin, direction)

    return origin + direction * axis_t


def point_on_plane(
    plane_normal: np.ndarray,
    plane_origin: np.ndarray,
    ray: Ray,
) -> np.ndarray | None:
    """Ray-plane intersection point, or None if the ray misses the plane."""
    t = intersect_plane(plane_normal, plane_origin, ray.origin, ray.direction)
    if t is None:
        return None
    return ray.point_at(t)
