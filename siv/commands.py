"""Command Pattern for keyboard input.

Each key press maps to one command; execute() applies it to the state.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import AppState

from .types import Direction
from .logging import log


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, state: "AppState") -> bool:
        """Execute the command. Returns True if state changed."""
        pass

    def can_execute(self, state: "AppState") -> bool:
        return True


@dataclass
class CloseApp(Command):
    """Stop the main loop."""

    def execute(self, state: "AppState") -> bool:
        log("[CMD] CloseApp")
        state.running = False
        return True


@dataclass
class NavigateNext(Command):
    """Step to the next image, wrapping to the first."""

    def can_execute(self, state: "AppState") -> bool:
        return state.images.count > 0

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        old = state.images.index
        new = state.images.next()
        state.view.direction = Direction.RIGHT
        log(f"[CMD] NavigateNext: {old} -> {new}")
        return True


@dataclass
class NavigatePrev(Command):
    """Step to the previous image, wrapping to the last."""

    def can_execute(self, state: "AppState") -> bool:
        return state.images.count > 0

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        old = state.images.index
        new = state.images.prev()
        state.view.direction = Direction.LEFT
        log(f"[CMD] NavigatePrev: {old} -> {new}")
        return True


@dataclass
class ToggleScale(Command):
    """Switch magnification on or off."""

    def execute(self, state: "AppState") -> bool:
        enabled = state.view.toggle_scaling()
        log(f"[CMD] ToggleScale: {'on' if enabled else 'off'} (x{state.view.scale:.2f})")
        return True
