"""Input Handler - maps the frame's key press to a command."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .commands import Command, CloseApp, NavigateNext, NavigatePrev, ToggleScale
from .config import (
    KEY_QUIT,
    KEY_NEXT_IMAGE, KEY_NEXT_IMAGE_ALT,
    KEY_PREV_IMAGE, KEY_PREV_IMAGE_ALT,
    KEY_TOGGLE_SCALE,
)


@dataclass
class InputHandler:
    """Handles key polling and command generation.

    Only the most recent key press of a frame is considered.
    """

    # Key bindings (can be customized)
    key_quit: List[int] = field(default_factory=lambda: [KEY_QUIT])
    key_next: List[int] = field(default_factory=lambda: [KEY_NEXT_IMAGE, KEY_NEXT_IMAGE_ALT])
    key_prev: List[int] = field(default_factory=lambda: [KEY_PREV_IMAGE, KEY_PREV_IMAGE_ALT])
    key_toggle_scale: List[int] = field(default_factory=lambda: [KEY_TOGGLE_SCALE])

    def command_for_key(self, key: int) -> Optional[Command]:
        if key in self.key_quit:
            return CloseApp()
        if key in self.key_prev:
            return NavigatePrev()
        if key in self.key_next:
            return NavigateNext()
        if key in self.key_toggle_scale:
            return ToggleScale()
        return None

    def poll(self, backend: Any) -> Optional[Command]:
        """Read this frame's key press and translate it."""
        return self.command_for_key(backend.get_key_pressed())
