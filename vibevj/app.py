"""Top-level GUI state: panels, audio device menu and render preview routing."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from vibevj.panels import CenterPanel, LeftPanel, PanelContent, RightPanel
from vibevj.types import TimeInfo

__all__ = ["GuiApp"]

LEFT_PANEL_FRACTION = 0.25
RIGHT_PANEL_FRACTION = 0.15


class GuiApp:
    """State of the main window: three panels plus menu-driven settings."""

    def __init__(self) -> None:
        self.left_panel = LeftPanel()
        self.center_panel = CenterPanel()
        self.right_panel = RightPanel()
        self._render_texture_id: Any = None
        self._show_preview_window = False
        self.audio_devices: list[str] = []
        self.selected_audio_device_index = 0
        self._audio_device_changed = False

    def set_audio_devices(self, devices: Iterable[str], selected: str | None = None) -> None:
        """Replace the device list; select ``selected`` if it is among them."""
        self.audio_devices = list(devices)
        if selected is not None and selected in self.audio_devices:
            self.selected_audio_device_index = self.audio_devices.index(selected)

    def has_audio_devices(self) -> bool:
        return bool(self.audio_devices)

    def select_audio_device(self, index: int) -> None:
        """Choose a device from the Audio Interface menu."""
        if not 0 <= index < len(self.audio_devices):
            raise IndexError(f"no audio device at index {index}")
        self.selected_audio_device_index = index
        self._audio_device_changed = True

    def take_audio_device_change(self) -> str | None:
        """Return the newly chosen device name once, or None if nothing changed."""
        if not self._audio_device_changed:
            return None
        self._audio_device_changed = False
        if 0 <= self.selected_audio_device_index < len(self.audio_devices):
            return self.audio_devices[self.selected_audio_device_index]
        return None

    def register_render_texture(self, texture_id: Any) -> Any:
        """Record the texture that shows the rendered scene and return its id."""
        self._render_texture_id = texture_id
        return texture_id

    def render_texture_id(self) -> Any:
        return self._render_texture_id

    def should_show_preview_window(self) -> bool:
        return self._show_preview_window

    def set_show_preview_window(self, show: bool) -> None:
        self._show_preview_window = bool(show)

    def update(self, time: TimeInfo) -> None:
        """Advance the panels and route the render texture to the right one."""
        self.left_panel.update(time)
        self.center_panel.update(time)
        self.right_panel.update(time)

        texture_id = self._render_texture_id
        if texture_id is None:
            return
        if self.center_panel.current_content() is PanelContent.PREVIEW:
            self.center_panel.set_render_texture(texture_id)
            self.left_panel.set_render_texture(None)
        else:
            self.left_panel.set_render_texture(texture_id)
            self.center_panel.set_render_texture(None)

    def panel_widths(self, available_width: float) -> tuple[float, float, float]:
        """Return the left, center and right panel widths for a window width."""
        left = available_width * LEFT_PANEL_FRACTION
        right = available_width * RIGHT_PANEL_FRACTION
        return (left, available_width - left - right, right)