"""Raylib helpers - cffi struct construction and string handling for python-raylib."""

from __future__ import annotations
from typing import Any, Iterable, Sequence

import raylib as rl


def c_str(text: str) -> bytes:
    """Encode text for a raylib `const char *` argument."""
    return text.encode("utf-8")


def make_vec2(x: float, y: float) -> Any:
    """Create a raylib Vector2."""
    v = rl.ffi.new("Vector2 *")
    v[0].x = float(x)
    v[0].y = float(y)
    return v[0]


def make_color(rgba: Sequence[int]) -> Any:
    """Create a raylib Color from an (r, g, b, a) tuple."""
    r, g, b, a = (int(c) for c in rgba)
    return rl.ffi.new("Color *", (r, g, b, a))[0]


def byte_buffer(data: bytes) -> Any:
    """Expose bytes as `const unsigned char *` without copying."""
    return rl.ffi.from_buffer("unsigned char[]", data)


def codepoint_array(codepoints: Iterable[int]) -> Any:
    cps = sorted(set(codepoints))
    return rl.ffi.new(f"int[{len(cps)}]", cps), len(cps)


def copy_into_image(img: Any, data: bytes) -> None:
    """Copy raw bytes into an image's pixel storage."""
    rl.ffi.memmove(rl.ffi.cast("unsigned char *", img.data), data, len(data))


def image_resize_mut(img: Any, w: int, h: int) -> Any:
    """Resize an image in place and return the updated struct."""
    p = rl.ffi.new("Image *", img)
    rl.ImageResize(p, int(w), int(h))
    return p[0]


def is_image_valid(img: Any) -> bool:
    return img.data != rl.ffi.NULL and img.width > 0 and img.height > 0


def get_texture_id(tex: Any) -> int:
    """Safely get texture ID."""
    return getattr(tex, "id", 0) or 0


def is_texture_valid(tex: Any) -> bool:
    return get_texture_id(tex) > 0


__all__ = [
    "rl",
    "c_str",
    "make_vec2",
    "make_color",
    "byte_buffer",
    "codepoint_array",
    "copy_into_image",
    "image_resize_mut",
    "is_image_valid",
    "get_texture_id",
    "is_texture_valid",
]
