import struct
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pytest

from siv import logging as siv_logging

WEBP_HEADER = b"RIFF" + struct.pack("<I", 1234) + b"WEBPVP8 "


@dataclass
class FakeImage:
    width: int
    height: int
    rgba: bytes = b""


@dataclass
class FakeTexture:
    id: int
    width: int
    height: int


class FakeBackend:
    """Records raylib-style calls and counts acquired resources.

    Generic files decode from their content: b"WxH" gives a WxH image,
    anything else is rejected like raylib does for unknown data.
    """

    def __init__(self, keys: Optional[List[int]] = None, monitor=(1920, 1080)):
        self.keys = list(keys or [])
        self.monitor = monitor
        self.calls = []
        self.window_open = False
        self.window_closed = False
        self.images_created = 0
        self.images_freed = 0
        self.textures_loaded = 0
        self.textures_unloaded = 0
        self.fonts_loaded = 0
        self.fonts_unloaded = 0
        self.fail_texture = False
        self.generic_calls = []
        self._next_tex_id = 1

    @property
    def images_alive(self) -> int:
        return self.images_created - self.images_freed

    @property
    def textures_alive(self) -> int:
        return self.textures_loaded - self.textures_unloaded

    def calls_named(self, name):
        return [args for n, args in self.calls if n == name]

    # window
    def init_window(self, width, height, title):
        self.window_open = True
        self.calls.append(("init_window", (width, height, title)))

    def close_window(self):
        self.window_open = False
        self.window_closed = True

    def set_target_fps(self, fps):
        self.calls.append(("set_target_fps", (fps,)))

    def window_should_close(self):
        return not self.keys

    def get_key_pressed(self):
        return self.keys.pop(0) if self.keys else 0

    def set_window_size(self, width, height):
        self.calls.append(("set_window_size", (width, height)))

    def monitor_size(self):
        return self.monitor

    # drawing
    def begin_drawing(self):
        self.calls.append(("begin_drawing", ()))

    def end_drawing(self):
        self.calls.append(("end_drawing", ()))

    def clear(self, color):
        self.calls.append(("clear", (color,)))

    def draw_texture(self, texture, x, y, scale, tint):
        self.calls.append(("draw_texture", (texture, x, y, scale)))

    def draw_rectangle(self, x, y, w, h, color):
        self.calls.append(("draw_rectangle", (x, y, w, h)))

    def draw_text(self, font, text, x, y, size, color):
        self.calls.append(("draw_text", (font, text, x, y, size)))

    # fonts
    def load_font(self, path, size, codepoints):
        self.fonts_loaded += 1
        return ("font", path)

    def unload_font(self, font):
        self.fonts_unloaded += 1

    # images
    def load_image_from_memory(self, ext, data):
        self.generic_calls.append((ext, data))
        try:
            w, h = (int(v) for v in data.decode("ascii").split("x"))
        except ValueError:
            return None
        self.images_created += 1
        return FakeImage(w, h)

    def image_from_rgba(self, width, height, rgba):
        self.images_created += 1
        return FakeImage(width, height, rgba[:width * height * 4])

    def image_size(self, img):
        return img.width, img.height

    def resize_image(self, img, width, height):
        self.calls.append(("resize_image", (img.width, img.height, width, height)))
        img.width, img.height = width, height
        return img

    def unload_image(self, img):
        self.images_freed += 1

    # textures
    def load_texture(self, img):
        if self.fail_texture:
            raise RuntimeError("texture upload failed")
        self.textures_loaded += 1
        tex = FakeTexture(self._next_tex_id, img.width, img.height)
        self._next_tex_id += 1
        return tex

    def unload_texture(self, texture):
        self.textures_unloaded += 1


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture(autouse=True)
def quiet_logger():
    siv_logging.set_enabled(False)
    yield
    siv_logging.set_enabled(True)


@pytest.fixture
def generic_files(tmp_path: Path):
    """N generic images with the given sizes, in order."""
    def _make(*sizes):
        paths = []
        for i, size in enumerate(sizes):
            path = tmp_path / f"img{i:03d}.png"
            path.write_bytes(size.encode("ascii"))
            paths.append(str(path))
        return paths
    return _make


@pytest.fixture
def write_file(tmp_path: Path):
    def _write(name: str, content: bytes) -> str:
        path = tmp_path / name
        path.write_bytes(content)
        return str(path)
    return _write
