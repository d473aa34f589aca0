"""
Terminal color support.
"""

from __future__ import annotations

import sys

import colorama

from .diagnostics import get_logger

_enabled = False


def enable_ansi_color() -> bool:
    """
    Make stdout/stderr understand ANSI escape sequences.

    Only Windows consoles need this. Runs at most once per process and returns
    whether the console was patched.
    """
    global _enabled
    if _enabled or sys.platform != "win32":
        return False
    colorama.just_fix_windows_console()
    _enabled = True
    get_logger(__name__).debug("enabled virtual terminal processing on windows console")
    return True
