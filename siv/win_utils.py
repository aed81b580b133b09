"""Windows-specific utilities - console encoding and paths."""

from __future__ import annotations
import sys
import ctypes

from .errors import SivError

CP_UTF8 = 65001


def enable_utf8_console() -> None:
    """Switch the Windows console output code page to UTF-8.

    Code page identifiers:
    https://learn.microsoft.com/en-us/windows/win32/intl/code-page-identifiers

    Raises:
        SivError: The code page could not be changed.
    """
    if sys.platform != 'win32':
        return
    if ctypes.windll.kernel32.SetConsoleOutputCP(CP_UTF8) == 0:
        raise SivError("cannot set the console code page to utf-8")


def get_short_path_name(long_path: str) -> str:
    """Convert a long path to 8.3 short path format (Windows only).

    This helps with paths containing unicode characters that some
    C libraries can't handle properly.
    """
    if sys.platform != 'win32':
        return long_path

    from ctypes import wintypes

    _GetShortPathNameW = ctypes.windll.kernel32.GetShortPathNameW
    _GetShortPathNameW.argtypes = [wintypes.LPCWSTR, wintypes.LPWSTR, wintypes.DWORD]
    _GetShortPathNameW.restype = wintypes.DWORD

    output_buf_size = 0
    while True:
        output_buf = ctypes.create_unicode_buffer(output_buf_size)
        needed = _GetShortPathNameW(long_path, output_buf, output_buf_size)
        if needed == 0:
            return long_path
        if needed <= output_buf_size:
            return output_buf.value
        output_buf_size = needed
