"""
Game components.

Importing this package registers every component kind, so scene data
can refer to them by name.
"""

from tickgame.components.transform import PositionState
from tickgame.components.movement import ConstantVelocityMover
from tickgame.components.renderer import Renderer, format_position
from tickgame.components.triggers import (
    ThresholdTrigger,
    SceneChangeTrigger,
    ResetTrigger,
)

__all__ = [
    "PositionState",
    "ConstantVelocityMover",
    "Renderer",
    "format_position",
    "ThresholdTrigger",
    "SceneChangeTrigger",
    "ResetTrigger",
]
