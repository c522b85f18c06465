"""Terminal output module."""

from tickengine.graphics.screen import TerminalScreen, CLEAR_SEQUENCE

__all__ = [
    "TerminalScreen",
    "CLEAR_SEQUENCE",
]
