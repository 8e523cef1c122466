"""State of the left, center and right panels of the main window."""

from __future__ import annotations

from enum import Enum
from typing import Any

from vibevj.scene_editor import SceneEditor
from vibevj.types import TimeInfo

__all__ = [
    "preview_size",
    "PanelContent",
    "LeftPanel",
    "CenterPanel",
    "RightPanel",
]

PREVIEW_ASPECT = 1280.0 / 720.0

_RESOURCES: dict[str, tuple[str, ...]] = {
    "Prefabs": ("Cube", "Sphere", "Plane", "Custom Mesh"),
    "Shaders": ("Basic Shader", "Phong Shader", "PBR Shader", "Custom Shader"),
    "Textures": ("Texture 1", "Texture 2", "Normal Map"),
    "Audio": ("Audio Input", "Audio File", "Frequency Bands"),
    "Videos": ("Video 1", "Video 2"),
    "Images": ("Image 1", "GIF 1"),
}


def preview_size(available_width: float, available_height: float) -> tuple[float, float]:
    """Return the size of a render preview filling the available width."""
    height = available_width / PREVIEW_ASPECT
    return (available_width, min(height, available_height))


class PanelContent(Enum):
    """What the center panel shows."""

    PREVIEW = "Preview"
    SCENE_EDITOR = "Scene Editor"
    SEQUENCER = "Sequencer"


class LeftPanel:
    """Render preview, playback controls and frame statistics."""

    def __init__(self) -> None:
        self.fps = 0.0
        self.show_stats = True
        self.render_texture: Any = None

    def update(self, time: TimeInfo) -> None:
        if time.delta > 0.0:
            self.fps = 1.0 / time.delta

    def set_render_texture(self, texture_id: Any) -> None:
        self.render_texture = texture_id


class CenterPanel:
    """Main view: preview, scene editor or sequencer."""

    def __init__(self) -> None:
        self._content = PanelContent.PREVIEW
        self.scene_editor = SceneEditor()
        self.render_texture: Any = None
        self.last_time: TimeInfo | None = None

    def update(self, time: TimeInfo) -> None:
        """Record the time of the latest frame."""
        self.last_time = time

    def set_render_texture(self, texture_id: Any) -> None:
        self.render_texture = texture_id

    def current_content(self) -> PanelContent:
        return self._content

    def select(self, content: PanelContent | str) -> None:
        """Switch the view; raises ValueError for an unknown content."""
        self._content = PanelContent(content)


class RightPanel:
    """Browser of prefabs and resources with a search filter."""

    def __init__(self) -> None:
        self.search_query = ""
        self.last_time: TimeInfo | None = None

    def update(self, time: TimeInfo) -> None:
        """Record the time of the latest frame; the resource lists are static."""
        self.last_time = time

    def categories(self) -> dict[str, list[str]]:
        return {name: list(items) for name, items in _RESOURCES.items()}

    def matching_resources(self) -> dict[str, list[str]]:
        """Return the categories with resources whose names contain the query."""
        query = self.search_query.strip().casefold()
        if not query:
            return self.categories()
        result = {}
        for name, items in _RESOURCES.items():
            matches = [item for item in items if query in item.casefold()]
            if matches:
                result[name] = matches
        return result