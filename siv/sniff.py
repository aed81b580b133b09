"""Format sniffing - classify a file as WebP from its header bytes."""

from __future__ import annotations
import struct
from typing import Optional

from .config import WEBP_MAGIC_SIZE, WEBP_RIFF_MAGIC, WEBP_VP8_MAGIC
from .errors import ImageReadError
from .types import WebpMagic

_MAGIC_LAYOUT = struct.Struct("<IIQ")


def parse_magic(data: bytes) -> Optional[WebpMagic]:
    """Split a header into (signature, length, sub-signature).

    Returns None when fewer than 16 bytes are available.
    """
    if len(data) < WEBP_MAGIC_SIZE:
        return None
    return WebpMagic(*_MAGIC_LAYOUT.unpack_from(data, 0))


def is_webp_header(data: bytes) -> bool:
    """Check an in-memory header for the RIFF/WEBPVP8 signature."""
    magic = parse_magic(data)
    if magic is None:
        return False
    return magic.magic1 == WEBP_RIFF_MAGIC and magic.magic2 == WEBP_VP8_MAGIC


def read_header(path: str) -> bytes:
    """Read the first 16 bytes of a file (fewer if the file is shorter).

    Raises:
        ImageReadError: The file cannot be opened or read.
    """
    try:
        with open(path, "rb") as f:
            header = f.read(WEBP_MAGIC_SIZE)
    except OSError as e:
        raise ImageReadError(path, e) from e
    return header


def is_webp_image(path: str) -> bool:
    """True iff the file starts with a lossy WebP (RIFF....WEBPVP8 ) header."""
    return is_webp_header(read_header(path))
