"""
Tick Game

Demo content for the tick engine: components that move, print and
trigger scene transitions, and the Home and Game scenes built from the
bundled scene data.

Run: python -m tickgame
"""

from tickgame.components import (
    PositionState,
    ConstantVelocityMover,
    Renderer,
    SceneChangeTrigger,
    ResetTrigger,
)
from tickgame.scenes import ConfiguredScene, HomeScene, GameScene

__all__ = [
    "PositionState",
    "ConstantVelocityMover",
    "Renderer",
    "SceneChangeTrigger",
    "ResetTrigger",
    "ConfiguredScene",
    "HomeScene",
    "GameScene",
]
