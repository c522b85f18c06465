"""
Game scenes.

Importing this package registers "home" and "game" with the scene
registry.
"""

from tickgame.scenes.base import ConfiguredScene, load_default_scenes
from tickgame.scenes.home import HomeScene
from tickgame.scenes.game import GameScene

__all__ = [
    "ConfiguredScene",
    "load_default_scenes",
    "HomeScene",
    "GameScene",
]
