"""
Home scene: an idle Player and an Enemy walking towards the exit.

Once the Enemy reaches 15 on either axis the game switches to GameScene.
"""

from tickengine.core.scene import register_scene

from tickgame.scenes.base import ConfiguredScene


@register_scene("home")
class HomeScene(ConfiguredScene):
    scene_id = "home"
