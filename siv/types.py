"""Core data types for siv."""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, NamedTuple, Optional

from .config import (
    MAX_SCREEN_WIDTH,
    MAX_IMAGE_HEIGHT,
    PANE_HEIGHT,
    MONITOR_FIT_FRAC,
)


class Direction(IntEnum):
    """Last navigation direction, decides which side gets prefetched."""
    LEFT = -1
    RIGHT = 1


class WebpMagic(NamedTuple):
    """First 16 bytes of a candidate WebP file."""
    magic1: int
    length: int
    magic2: int


@dataclass(frozen=True)
class Bounds:
    """Maximum display size for a downsampled image."""
    max_width: int
    max_height: int

    @classmethod
    def fixed(cls) -> Bounds:
        return cls(MAX_SCREEN_WIDTH, MAX_IMAGE_HEIGHT)

    @classmethod
    def from_monitor(cls, monitor_w: int, monitor_h: int,
                     frac: float = MONITOR_FIT_FRAC) -> Bounds:
        """Bounds covering a fraction of the monitor, leaving room for the caption pane."""
        return cls(
            max(1, int(monitor_w * frac)),
            max(1, int(monitor_h * frac) - PANE_HEIGHT),
        )


@dataclass
class ImageEntry:
    """One input file and, once loaded, its texture."""
    filename: str
    texture: Optional[Any] = None  # rl.Texture2D
    width: int = 0
    height: int = 0

    @property
    def is_loaded(self) -> bool:
        return self.texture is not None

    def reset(self) -> None:
        """Forget the texture and display size."""
        self.texture = None
        self.width = 0
        self.height = 0
