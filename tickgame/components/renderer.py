"""
Renderer component - prints an entity's position.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from tickengine.core.application import get_application
from tickengine.core.component import Component, register_component

from tickgame.components.transform import PositionState

if TYPE_CHECKING:
    from tickengine.core.entity import Entity


def format_position(entity: Entity, position: PositionState) -> str:
    """Format one output line: [name] (x, y)."""
    return f"[{entity.name}] ({position.x}, {position.y})"


@register_component
class Renderer(Component):
    """Writes "[<name>] (<x>, <y>)" to the application screen each frame."""
    _type_name: ClassVar[str] = "renderer"

    def render(self, entity: Entity) -> None:
        position = entity.get(PositionState)
        if position is None:
            return
        get_application().screen.write_line(format_position(entity, position))
