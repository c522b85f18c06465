"""
Scenes built from scene data.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import ClassVar

from tickengine.core.scene import Scene
from tickengine.resources.scene_data import (
    SceneDatabase,
    SceneDefinition,
    SceneDataError,
    build_entity,
)

# Registers the component kinds the bundled data refers to
import tickgame.components  # noqa: F401


DATA_PATH = Path(__file__).resolve().parent.parent / "data"


@lru_cache(maxsize=None)
def load_default_scenes() -> SceneDatabase:
    """Load the scene definitions shipped with the game (once)."""
    database = SceneDatabase(DATA_PATH)
    database.load_all()
    return database


class ConfiguredScene(Scene):
    """
    A scene whose entities come from a SceneDefinition.

    Subclasses set `scene_id` to use a bundled definition; otherwise
    pass the definition in.
    """

    scene_id: ClassVar[str] = ""

    def __init__(self, definition: SceneDefinition | None = None):
        super().__init__()
        if definition is None:
            definition = load_default_scenes().get_scene(self.scene_id)
            if definition is None:
                raise SceneDataError(f"No scene data for '{self.scene_id}'")
        self.definition = definition

    @property
    def name(self) -> str:
        return self.definition.title or type(self).__name__

    def populate(self) -> None:
        for spec in self.definition.entities:
            self.add_entity(build_entity(spec))
