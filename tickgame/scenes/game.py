"""
Game scene: the Enemy2 walks down and the scene resets when it hits 20.
"""

from tickengine.core.scene import register_scene

from tickgame.scenes.base import ConfiguredScene


@register_scene("game")
class GameScene(ConfiguredScene):
    scene_id = "game"
