"""Image loading - decode, fit to bounds and upload entries as textures."""

from __future__ import annotations
import os
from typing import Any, List, Sequence

from .config import PREFETCH_SPAN
from .decode import decode_file
from .errors import ImageDecodeError
from .logging import log
from .types import Bounds, Direction, ImageEntry
from .view_math import fit_to_bounds


def prefetch_window(index: int, direction: Direction, count: int,
                    span: int = PREFETCH_SPAN) -> range:
    """Indices to load around `index`, on the side the user is moving towards.

    Moving right loads `span` entries starting at `index`; moving left loads
    `span` entries ending at `index`. The result is clamped to the list and
    always contains `index` for a non-empty list.
    """
    if count <= 0:
        return range(0)
    span = max(1, span)
    if direction == Direction.RIGHT:
        start, stop = index, index + span
    else:
        start, stop = index - span + 1, index + 1
    return range(max(0, start), min(count, stop))


class ImageLoader:
    """Turns ImageEntry placeholders into screen-ready textures."""

    def __init__(self, backend: Any, bounds: Bounds):
        self.backend = backend
        self.bounds = bounds

    def load_entry(self, entry: ImageEntry) -> bool:
        """Load one entry. Returns False if it already had a texture."""
        if entry.is_loaded:
            return False

        img = decode_file(self.backend, entry.filename)
        try:
            src_w, src_h = self.backend.image_size(img)
            try:
                w, h = fit_to_bounds(src_w, src_h, self.bounds)
            except ValueError as e:
                raise ImageDecodeError(entry.filename, e) from e
            if (w, h) != (src_w, src_h):
                img = self.backend.resize_image(img, w, h)
                log(f"[LOAD][RESIZE] {os.path.basename(entry.filename)}: "
                    f"{src_w}x{src_h} -> {w}x{h}")
            texture = self.backend.load_texture(img)
        finally:
            self.backend.unload_image(img)

        entry.texture = texture
        entry.width = w
        entry.height = h
        return True

    def load_range(self, entries: Sequence[ImageEntry], start: int, stop: int) -> int:
        """Load entries[start:stop], skipping loaded ones.

        If any entry fails, textures acquired by this call are released and
        their entries reset before the error propagates.

        Returns:
            Number of entries newly loaded.
        """
        start = max(0, start)
        stop = min(len(entries), stop)
        acquired: List[ImageEntry] = []
        try:
            for idx in range(start, stop):
                if self.load_entry(entries[idx]):
                    acquired.append(entries[idx])
        except Exception:
            log(f"[LOAD][ERR] Unwinding {len(acquired)} textures from [{start}, {stop})")
            for entry in acquired:
                self.backend.unload_texture(entry.texture)
                entry.reset()
            raise
        if acquired:
            log(f"[LOAD] Loaded {len(acquired)} images in [{start}, {stop})")
        return len(acquired)

    def ensure_loaded(self, entries: Sequence[ImageEntry], index: int,
                      direction: Direction, span: int = PREFETCH_SPAN) -> int:
        """Load the prefetch window around `index` if that entry is missing."""
        if entries[index].is_loaded:
            return 0
        window = prefetch_window(index, direction, len(entries), span)
        return self.load_range(entries, window.start, window.stop)

    def load_all(self, entries: Sequence[ImageEntry]) -> int:
        return self.load_range(entries, 0, len(entries))

    def release_all(self, entries: Sequence[ImageEntry]) -> None:
        """Unload every texture."""
        released = 0
        for entry in entries:
            if entry.is_loaded:
                self.backend.unload_texture(entry.texture)
                entry.reset()
                released += 1
        log(f"[UNLOAD] Released {released} textures")
