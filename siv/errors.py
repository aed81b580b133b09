"""Error types raised while reading and decoding images."""

from __future__ import annotations


class SivError(Exception):
    """Base class for viewer errors."""


class ImageReadError(SivError):
    """The image file could not be opened or read."""

    def __init__(self, path: str, reason: object):
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path


class ImageDecodeError(SivError):
    """A codec rejected the image data."""

    def __init__(self, path: str, reason: object):
        super().__init__(f"cannot decode {path}: {reason}")
        self.path = path
