"""
Movement component - constant displacement every tick.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from tickengine.core.component import Component, register_component

from tickgame.components.transform import PositionState

if TYPE_CHECKING:
    from tickengine.core.entity import Entity


@register_component
class ConstantVelocityMover(Component):
    """
    Moves the entity's PositionState by (dx, dy) on every update.

    Entities without a PositionState are left alone.
    """
    _type_name: ClassVar[str] = "constant_velocity"

    dx: int = 0
    dy: int = 0

    def update(self, entity: Entity) -> None:
        position = entity.get(PositionState)
        if position is None:
            return
        position.move(self.dx, self.dy)
