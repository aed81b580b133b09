"""Raylib backend - the window, texture and image primitives the viewer needs.

Everything that touches raylib goes through RaylibBackend so the loader,
renderer and main loop can run against any object with the same methods.
"""

from __future__ import annotations
import os
from typing import Any, Iterable, Optional, Sequence, Tuple

from .rl_compat import (
    rl, c_str, make_vec2, make_color, byte_buffer, codepoint_array,
    copy_into_image, image_resize_mut, is_image_valid, is_texture_valid,
)
from .config import COLOR_BLANK
from .logging import log
from .win_utils import get_short_path_name


class RaylibBackend:
    """Thin facade over python-raylib."""

    # ─── Window ─────────────────────────────────────────────────────────────

    def init_window(self, width: int, height: int, title: str) -> None:
        rl.InitWindow(int(width), int(height), c_str(title))
        log(f"[WINDOW] Created {width}x{height}")

    def close_window(self) -> None:
        rl.CloseWindow()
        log("[WINDOW] Closed")

    def set_target_fps(self, fps: int) -> None:
        rl.SetTargetFPS(int(fps))

    def window_should_close(self) -> bool:
        return bool(rl.WindowShouldClose())

    def get_key_pressed(self) -> int:
        return int(rl.GetKeyPressed())

    def set_window_size(self, width: int, height: int) -> None:
        rl.SetWindowSize(int(width), int(height))

    def monitor_size(self) -> Tuple[int, int]:
        mon = rl.GetCurrentMonitor()
        return rl.GetMonitorWidth(mon), rl.GetMonitorHeight(mon)

    # ─── Drawing ────────────────────────────────────────────────────────────

    def begin_drawing(self) -> None:
        rl.BeginDrawing()

    def end_drawing(self) -> None:
        rl.EndDrawing()

    def clear(self, color: Sequence[int]) -> None:
        rl.ClearBackground(make_color(color))

    def draw_texture(self, texture: Any, x: float, y: float, scale: float,
                     tint: Sequence[int]) -> None:
        rl.DrawTextureEx(texture, make_vec2(x, y), 0.0, float(scale), make_color(tint))

    def draw_rectangle(self, x: float, y: float, w: float, h: float,
                       color: Sequence[int]) -> None:
        rl.DrawRectangleV(make_vec2(x, y), make_vec2(w, h), make_color(color))

    def draw_text(self, font: Optional[Any], text: str, x: float, y: float,
                  size: float, color: Sequence[int]) -> None:
        if font is None:
            font = rl.GetFontDefault()
        rl.DrawTextEx(font, c_str(text), make_vec2(x, y), float(size), 0.0,
                      make_color(color))

    # ─── Fonts ──────────────────────────────────────────────────────────────

    def load_font(self, path: str, size: int, codepoints: Iterable[int]) -> Optional[Any]:
        """Load a TTF font with the given glyphs, or None to use raylib's default."""
        if not os.path.exists(path):
            log(f"[FONT] {path} not found, using default font")
            return None
        cp_array, count = codepoint_array(codepoints)
        font = rl.LoadFontEx(c_str(get_short_path_name(path)), int(size), cp_array, count)
        if not is_texture_valid(font.texture):
            log(f"[FONT][ERR] Failed to load {path}, using default font")
            return None
        log(f"[FONT] Loaded {os.path.basename(path)} (size={size}, glyphs={count})")
        return font

    def unload_font(self, font: Any) -> None:
        rl.UnloadFont(font)

    # ─── CPU images ─────────────────────────────────────────────────────────

    def load_image_from_memory(self, ext: str, data: bytes) -> Optional[Any]:
        """Decode an encoded image; None when raylib cannot decode it."""
        img = rl.LoadImageFromMemory(c_str(ext), byte_buffer(data), len(data))
        if not is_image_valid(img):
            return None
        return img

    def image_from_rgba(self, width: int, height: int, rgba: bytes) -> Any:
        """Allocate a blank RGBA image and fill it with raw pixels."""
        img = rl.GenImageColor(int(width), int(height), make_color(COLOR_BLANK))
        try:
            copy_into_image(img, rgba[:width * height * 4])
        except Exception:
            rl.UnloadImage(img)
            raise
        return img

    def image_size(self, img: Any) -> Tuple[int, int]:
        return img.width, img.height

    def resize_image(self, img: Any, width: int, height: int) -> Any:
        return image_resize_mut(img, width, height)

    def unload_image(self, img: Any) -> None:
        rl.UnloadImage(img)

    # ─── Textures ───────────────────────────────────────────────────────────

    def load_texture(self, img: Any) -> Any:
        tex = rl.LoadTextureFromImage(img)
        if not is_texture_valid(tex):
            raise RuntimeError("texture upload failed")
        return tex

    def unload_texture(self, texture: Any) -> None:
        rl.UnloadTexture(texture)
