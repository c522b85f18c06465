"""
Trigger components - ask the application for a scene transition.

Both triggers watch the entity's PositionState and fire on every
update where x or y has reached the threshold, not just the first one.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar

from tickengine.core.application import get_application
from tickengine.core.component import Component, register_component
from tickengine.core.scene import create_scene

from tickgame.components.transform import PositionState

if TYPE_CHECKING:
    from tickengine.core.entity import Entity


logger = logging.getLogger(__name__)


class ThresholdTrigger(Component):
    """Base for triggers that fire once a coordinate reaches `threshold`."""

    threshold: int

    def update(self, entity: Entity) -> None:
        position = entity.get(PositionState)
        if position is None:
            return
        if position.reached(self.threshold):
            self.fire(entity)

    @abstractmethod
    def fire(self, entity: Entity) -> None:
        """Request the transition."""


@register_component
class SceneChangeTrigger(ThresholdTrigger):
    """
    Switches to a new instance of the `target` scene.

    Attributes:
        threshold: Coordinate value that fires the trigger
        target: Registered scene name
    """
    _type_name: ClassVar[str] = "scene_change_trigger"

    target: str = "game"

    def fire(self, entity: Entity) -> None:
        logger.debug("%s reached %d, changing to %s", entity.name, self.threshold, self.target)
        get_application().change_scene(create_scene(self.target))


@register_component
class ResetTrigger(ThresholdTrigger):
    """Requests a reset of the active scene."""
    _type_name: ClassVar[str] = "reset_trigger"

    def fire(self, entity: Entity) -> None:
        logger.debug("%s reached %d, requesting reset", entity.name, self.threshold)
        get_application().request_reset()
