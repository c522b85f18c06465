"""
Position component.
"""

from __future__ import annotations

from typing import ClassVar

from tickengine.core.component import Component, register_component


@register_component
class PositionState(Component):
    """
    Integer position of an entity.

    Attributes:
        x: Column
        y: Row
    """
    _type_name: ClassVar[str] = "position"

    x: int = 0
    y: int = 0

    @property
    def position(self) -> tuple[int, int]:
        """Get position as tuple."""
        return (self.x, self.y)

    def move(self, dx: int, dy: int) -> None:
        """Move by offset."""
        self.x += dx
        self.y += dy

    def move_to(self, x: int, y: int) -> None:
        """Move to absolute position."""
        self.x = x
        self.y = y

    def reached(self, threshold: int) -> bool:
        """Whether either coordinate is at or past the threshold."""
        return self.x >= threshold or self.y >= threshold
