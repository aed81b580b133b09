"""Simple Image Viewer launcher."""
from __future__ import annotations
import sys

from siv.cli import main

if __name__ == "__main__":
    sys.exit(main())
