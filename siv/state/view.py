"""View state - magnification toggle and navigation direction."""

from __future__ import annotations
from dataclasses import dataclass

from ..types import Direction
from ..view_math import effective_scale


@dataclass
class ViewState:
    """State for scaling and prefetch direction."""
    scaling_enabled: bool = False
    direction: Direction = Direction.RIGHT
    ratio: float = 1.0

    @property
    def scale(self) -> float:
        """Scale factor applied to the current image."""
        return effective_scale(self.scaling_enabled, self.ratio)

    def toggle_scaling(self) -> bool:
        self.scaling_enabled = not self.scaling_enabled
        return self.scaling_enabled
