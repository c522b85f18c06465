"""
Terminal output surface.

The Application clears the screen at the start of every frame, then
renderer components write their lines to it. The lines of the current
frame are kept so they can be inspected.
"""

from __future__ import annotations

import sys
from typing import TextIO


# Clear screen and move the cursor home
CLEAR_SEQUENCE = "\033[2J\033[H"


class TerminalScreen:
    """
    Line-based frame output for a terminal.

    Args:
        stream: Where frames are written (default: stdout)
        clear: Whether to emit the clear sequence before each frame
    """

    def __init__(self, stream: TextIO | None = None, clear: bool = True):
        self._stream = stream
        self.clear_enabled = clear
        self._frame: list[str] = []
        self._frame_count = 0

    @property
    def stream(self) -> TextIO:
        # Resolved late so a replaced sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    @property
    def frame(self) -> list[str]:
        """Lines written since the last clear."""
        return list(self._frame)

    @property
    def frame_count(self) -> int:
        """Number of frames presented so far."""
        return self._frame_count

    def clear(self) -> None:
        """Begin a new frame."""
        self._frame.clear()
        self._frame_count += 1
        if self.clear_enabled:
            self.stream.write(CLEAR_SEQUENCE)

    def write_line(self, text: str) -> None:
        """Write one line of the current frame."""
        self._frame.append(text)
        self.stream.write(text + "\n")

    def flush(self) -> None:
        self.stream.flush()
