"""
Rendering collaborator for translation handles.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from transgizmo.translation import TranslationHandle


class HandleRenderer(ABC):
    """
    Draws handle geometry.

    Implementations read handle.config for placement and handle.opacity
    for transparency. Called once per frame from the host render loop.
    """

    @abstractmethod
    def draw_axis_handle(self, handle: "TranslationHandle") -> None:
        """Draw an arrow along handle.config.normal()."""
        ...

    @abstractmethod
    def draw_plane_handle(self, handle: "TranslationHandle") -> None:
        """Draw a quad around plane_global_origin(handle.config)."""
        ...
