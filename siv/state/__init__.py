"""State management submodules for siv."""

from .images import ImageListState
from .view import ViewState
from .app_state import AppState

__all__ = [
    'ImageListState',
    'ViewState',
    'AppState',
]
