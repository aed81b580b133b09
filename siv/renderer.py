"""Renderer - draws the current image and its filename caption.

The Renderer only reads state; it never changes it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .state import AppState

from .config import (
    PANE_HEIGHT, FONT_SIZE, CAPTION_MARGIN_X, CAPTION_MARGIN_Y,
    COLOR_BACKGROUND, COLOR_PANE, COLOR_TEXT, COLOR_TINT,
)
from .types import ImageEntry
from .view_math import scaled_image_size, window_size_for


@dataclass
class Renderer:
    """
    Handles all drawing operations.

    Usage:
        renderer = Renderer(backend)
        renderer.draw_frame(state)
    """
    backend: Any

    def fit_window(self, entry: ImageEntry, scale: float) -> None:
        """Resize the window to the scaled image plus the caption pane."""
        self.backend.set_window_size(*window_size_for(entry.width, entry.height, scale))

    def draw_frame(self, state: "AppState") -> None:
        entry = state.current
        if entry is None or not entry.is_loaded:
            return
        scale = state.view.scale
        img_w, img_h = scaled_image_size(entry.width, entry.height, scale)

        self.fit_window(entry, scale)

        self.backend.begin_drawing()
        try:
            self.backend.clear(COLOR_BACKGROUND)
            self.backend.draw_texture(entry.texture, 0.0, 0.0, scale, COLOR_TINT)
            self.backend.draw_rectangle(0.0, img_h, img_w, float(PANE_HEIGHT), COLOR_PANE)
            self.backend.draw_text(
                state.font,
                entry.filename,
                float(CAPTION_MARGIN_X),
                img_h + CAPTION_MARGIN_Y,
                FONT_SIZE,
                COLOR_TEXT,
            )
        finally:
            self.backend.end_drawing()
