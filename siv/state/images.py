"""Image list state - entries in input order and the current index."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..types import ImageEntry


@dataclass
class ImageListState:
    """Entries and the circular cursor over them."""
    entries: List[ImageEntry] = field(default_factory=list)
    index: int = 0

    @classmethod
    def from_filenames(cls, filenames: Sequence[str]) -> ImageListState:
        """One unloaded entry per filename, in order."""
        return cls(entries=[ImageEntry(filename=f) for f in filenames])

    @property
    def count(self) -> int:
        return len(self.entries)

    @property
    def current(self) -> Optional[ImageEntry]:
        if 0 <= self.index < len(self.entries):
            return self.entries[self.index]
        return None

    def next(self) -> int:
        """Advance, wrapping past the last entry to 0."""
        if self.entries:
            self.index = 0 if self.index + 1 >= len(self.entries) else self.index + 1
        return self.index

    def prev(self) -> int:
        """Retreat, wrapping from 0 to the last entry."""
        if self.entries:
            self.index = len(self.entries) - 1 if self.index == 0 else self.index - 1
        return self.index
