"""Application - main loop orchestrator.

The Application coordinates, once per frame:
- Input handling (via InputHandler)
- Command execution
- Lazy loading of the image window around the current index
- Rendering (via Renderer)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable, Tuple
import traceback

from .config import (
    WINDOW_TITLE, TARGET_FPS,
    MAX_SCREEN_WIDTH, MAX_SCREEN_HEIGHT,
    PREFETCH_SPAN, DEFAULT_RATIO_PERCENT,
    FONT_PATH, FONT_SIZE,
)
from .input_handler import InputHandler
from .loader import ImageLoader
from .logging import log, increment_frame, get_frame
from .renderer import Renderer
from .state import AppState
from .types import Bounds


@dataclass(frozen=True)
class ViewerOptions:
    """Settings for one viewer session, usually built from the command line."""
    filenames: Tuple[str, ...]
    ratio_percent: int = DEFAULT_RATIO_PERCENT
    eager: bool = False
    fit_monitor: bool = False
    prefetch_span: int = PREFETCH_SPAN
    font_path: str = FONT_PATH
    fps: int = TARGET_FPS

    @property
    def ratio(self) -> float:
        """Magnification factor, e.g. 40 percent -> 0.40."""
        return self.ratio_percent / 100.0


def caption_codepoints(texts: Iterable[str]) -> set:
    """Printable ASCII plus every character used in the captions."""
    cps = set(range(32, 127))
    for text in texts:
        cps.update(ord(ch) for ch in text)
    return cps


@dataclass
class Application:
    """
    Main application orchestrator.

    Usage:
        app = Application(options, backend)
        app.run()
    """

    options: ViewerOptions
    backend: Any
    state: AppState = field(init=False)
    loader: ImageLoader = field(init=False)
    renderer: Renderer = field(init=False)
    input_handler: InputHandler = field(default_factory=InputHandler)

    def __post_init__(self) -> None:
        self.state = AppState.create(self.options.filenames, ratio=self.options.ratio)
        self.loader = ImageLoader(self.backend, Bounds.fixed())
        self.renderer = Renderer(self.backend)

    def run(self) -> None:
        """Open the window, run the main loop and release everything on exit.

        Load errors are fatal: they are logged and re-raised after cleanup.
        """
        log(f"[APP] Starting with {self.state.images.count} images, ratio={self.options.ratio:.2f}")
        self.backend.init_window(MAX_SCREEN_WIDTH, MAX_SCREEN_HEIGHT, WINDOW_TITLE)
        try:
            self.backend.set_target_fps(self.options.fps)
            if self.options.fit_monitor:
                self.loader.bounds = Bounds.from_monitor(*self.backend.monitor_size())
                log(f"[APP] Bounds {self.loader.bounds.max_width}x{self.loader.bounds.max_height}")
            self.state.font = self.backend.load_font(
                self.options.font_path,
                FONT_SIZE,
                caption_codepoints(e.filename for e in self.state.images.entries),
            )
            try:
                self._preload()
                while self.state.running:
                    self._frame()
            except Exception as e:
                log(f"[APP][CRITICAL] {e!r}")
                log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
                raise
            finally:
                self._cleanup()
        finally:
            self.backend.close_window()
        log(f"[EXIT] frames={get_frame()}")

    def _preload(self) -> None:
        entries = self.state.images.entries
        if self.options.eager:
            self.loader.load_all(entries)
        else:
            self.loader.load_range(entries, 0, self.options.prefetch_span)

    def _frame(self) -> None:
        """Execute a single frame."""
        if self.backend.window_should_close():
            self.state.running = False
            return

        cmd = self.input_handler.poll(self.backend)
        if cmd is not None:
            cmd.execute(self.state)
            if not self.state.running:
                return

        self.loader.ensure_loaded(
            self.state.images.entries,
            self.state.index,
            self.state.direction,
            self.options.prefetch_span,
        )
        self.renderer.draw_frame(self.state)
        increment_frame()

    def _cleanup(self) -> None:
        log("[APP] Starting cleanup")
        self.loader.release_all(self.state.images.entries)
        if self.state.font is not None:
            self.backend.unload_font(self.state.font)
            self.state.font = None
        log("[APP] Cleanup complete")
