"""Decoding - route a file to the WebP decoder or raylib's generic decoder."""

from __future__ import annotations
import io
import os
from typing import Any, Tuple

from PIL import Image

from .errors import ImageDecodeError, ImageReadError
from .logging import log
from .sniff import is_webp_image


def read_file(path: str) -> bytes:
    """Read a whole file into memory."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ImageReadError(path, e) from e


def decode_webp_rgba(data: bytes) -> Tuple[int, int, bytes]:
    """Decode a WebP buffer into (width, height, RGBA bytes).

    Raises:
        ValueError: The buffer is not a decodable WebP image.
    """
    try:
        with Image.open(io.BytesIO(data), formats=["WEBP"]) as im:
            rgba = im.convert("RGBA")
            width, height = rgba.size
            return width, height, rgba.tobytes()
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise ValueError(str(e)) from e


def load_webp_image(backend: Any, path: str, data: bytes) -> Any:
    """Decode WebP bytes and copy the pixels into a new raylib image."""
    try:
        width, height, rgba = decode_webp_rgba(data)
    except ValueError as e:
        raise ImageDecodeError(path, e) from e
    if width <= 0 or height <= 0:
        raise ImageDecodeError(path, f"empty image ({width}x{height})")
    return backend.image_from_rgba(width, height, rgba)


def load_generic_image(backend: Any, path: str, data: bytes) -> Any:
    """Decode with raylib, using the file extension as the format hint."""
    ext = os.path.splitext(path)[1].lower()
    img = backend.load_image_from_memory(ext, data)
    if img is None:
        raise ImageDecodeError(path, f"unsupported or corrupt {ext or 'file'}")
    return img


def decode_file(backend: Any, path: str) -> Any:
    """Decode a file into a CPU-side raylib image.

    The caller owns the returned image and must unload it.

    Raises:
        ImageReadError: The file cannot be opened or read.
        ImageDecodeError: The codec rejected the contents.
    """
    webp = is_webp_image(path)
    data = read_file(path)
    if webp:
        img = load_webp_image(backend, path, data)
    else:
        img = load_generic_image(backend, path, data)
    w, h = backend.image_size(img)
    log(f"[DECODE] {os.path.basename(path)}: {'webp' if webp else 'generic'} {w}x{h}")
    return img
