"""Composite AppState - image list plus view state."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from .images import ImageListState
from .view import ViewState
from ..types import Direction, ImageEntry


@dataclass
class AppState:
    """
    Everything the main loop mutates.

    Sub-states are used directly:
        state.images.index
        state.view.scaling_enabled
    """
    images: ImageListState = field(default_factory=ImageListState)
    view: ViewState = field(default_factory=ViewState)
    font: Optional[Any] = None  # rl.Font, None means raylib's default
    running: bool = True

    @classmethod
    def create(cls, filenames: Sequence[str], ratio: float = 1.0) -> AppState:
        return cls(images=ImageListState.from_filenames(filenames),
                   view=ViewState(ratio=ratio))

    @property
    def index(self) -> int:
        return self.images.index

    @property
    def current(self) -> Optional[ImageEntry]:
        return self.images.current

    @property
    def direction(self) -> Direction:
        return self.view.direction
