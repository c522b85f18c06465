"""Scene data loading."""

from tickengine.resources.scene_data import (
    SceneDatabase,
    SceneDefinition,
    EntitySpec,
    ComponentSpec,
    SceneDataError,
    build_entity,
)

__all__ = [
    "SceneDatabase",
    "SceneDefinition",
    "EntitySpec",
    "ComponentSpec",
    "SceneDataError",
    "build_entity",
]
