"""Pure view calculation functions - no side effects, no state mutation."""

from __future__ import annotations
from typing import Tuple

from .config import PANE_HEIGHT
from .types import Bounds


def fit_to_bounds(width: int, height: int, bounds: Bounds) -> Tuple[int, int]:
    """Downsample dimensions to fit bounds, preserving aspect ratio.

    Height is clamped first and width follows proportionally; if that width
    is still too large it is clamped and height recomputed from it. Images
    already inside both bounds come back unchanged.

    Args:
        width: Decoded image width in pixels.
        height: Decoded image height in pixels.
        bounds: Maximum display size.

    Returns:
        Tuple of (width, height) for the texture.

    Raises:
        ValueError: A dimension is not positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"empty image ({width}x{height})")

    img_h = min(bounds.max_height, height)
    img_w = width * img_h // height
    if img_w > bounds.max_width:
        img_h = img_h * bounds.max_width // img_w
        img_w = bounds.max_width
    return max(1, img_w), max(1, img_h)


def effective_scale(scaling_enabled: bool, ratio: float) -> float:
    """Scale factor used for drawing: the ratio when enabled, otherwise 1.0."""
    return ratio if scaling_enabled else 1.0


def scaled_image_size(width: int, height: int, scale: float) -> Tuple[float, float]:
    return width * scale, height * scale


def window_size_for(width: int, height: int, scale: float) -> Tuple[int, int]:
    """Window size for a scaled image plus the caption pane below it."""
    w, h = scaled_image_size(width, height, scale)
    return int(w), int(h) + PANE_HEIGHT
