"""Command line entry point."""

from __future__ import annotations
import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace, RawTextHelpFormatter
from typing import List, Optional

from .app import Application, ViewerOptions
from .config import DEFAULT_RATIO_PERCENT, PREFETCH_SPAN, FONT_PATH, TARGET_FPS
from .errors import SivError
from .logging import log, set_enabled
from .win_utils import enable_utf8_console

KEYS_HELP = """keys:
  Q            quit
  A / Left     previous image
  D / Right    next image
  E            toggle magnification by --ratio
"""


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise ArgumentTypeError(f"value must be positive, got {number}")
    return number


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="siv",
        description="Simple Image Viewer",
        epilog=KEYS_HELP,
        formatter_class=RawTextHelpFormatter,
    )
    parser.add_argument("filenames", metavar="FILENAMES", nargs="+",
                        help="image files to view")
    parser.add_argument("--ratio", type=positive_int, default=DEFAULT_RATIO_PERCENT,
                        metavar="PERCENT",
                        help=f"scale applied when magnification is on, in percent "
                             f"(default: {DEFAULT_RATIO_PERCENT})")
    parser.add_argument("--eager", action="store_true",
                        help="decode every image before opening the viewer")
    parser.add_argument("--fit-monitor", action="store_true",
                        help="fit images to 90%% of the monitor instead of 2400x1350")
    parser.add_argument("--prefetch", type=positive_int, default=PREFETCH_SPAN,
                        metavar="N",
                        help=f"images loaded ahead of the cursor (default: {PREFETCH_SPAN})")
    parser.add_argument("--font", default=FONT_PATH, metavar="PATH",
                        help=f"caption font (default: {FONT_PATH})")
    parser.add_argument("--fps", type=positive_int, default=TARGET_FPS,
                        help=f"target frame rate (default: {TARGET_FPS})")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="suppress diagnostic output")
    return parser


def options_from_args(args: Namespace) -> ViewerOptions:
    return ViewerOptions(
        filenames=tuple(args.filenames),
        ratio_percent=args.ratio,
        eager=args.eager,
        fit_monitor=args.fit_monitor,
        prefetch_span=args.prefetch,
        font_path=args.font,
        fps=args.fps,
    )


def parse_options(argv: Optional[List[str]] = None) -> ViewerOptions:
    """Parse the command line; argparse exits on --help or bad input."""
    return options_from_args(build_parser().parse_args(argv))


def main(argv: Optional[List[str]] = None) -> int:
    """Run the viewer.

    Returns:
        0 on a normal exit, 1 when an image cannot be read or decoded.
    """
    args = build_parser().parse_args(argv)
    set_enabled(not args.quiet)
    options = options_from_args(args)

    from .backend import RaylibBackend

    try:
        enable_utf8_console()
        Application(options, RaylibBackend()).run()
    except SivError as e:
        log(f"[MAIN][ERR] {e}")
        print(f"siv: error: {e}", file=sys.stderr)
        return 1
    return 0
