"""
Scene base class and scene registry.

A Scene owns an ordered list of entities and knows how to build them.
Scenes are created fresh for every scene change and thrown away when
replaced; `reset` rebuilds the same scene from scratch.

Lifecycle:
    EMPTY --start()--> POPULATED --reset()--> EMPTY --start()--> POPULATED

Usage:
    @register_scene("title")
    class TitleScene(Scene):
        def populate(self) -> None:
            logo = self.create_entity("Logo")
            logo.add(PositionState(x=0, y=0))
            logo.add(Renderer())

    app.change_scene(create_scene("title"))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Iterator, Callable

from tickengine.core.entity import Entity


logger = logging.getLogger(__name__)


class SceneState(Enum):
    """Population state of a scene."""
    EMPTY = auto()
    POPULATED = auto()


class Scene(ABC):
    """
    Abstract base class for scenes.

    Subclasses implement populate() to create their fixed entity set.
    Update and render walk the entities in insertion order.
    """

    def __init__(self):
        self._entities: list[Entity] = []
        self._state = SceneState.EMPTY

    @property
    def name(self) -> str:
        """Scene name (for logging)."""
        return type(self).__name__

    @property
    def state(self) -> SceneState:
        return self._state

    @property
    def is_empty(self) -> bool:
        """Whether the scene currently holds no entities."""
        return self._state is SceneState.EMPTY

    @property
    def entities(self) -> Iterator[Entity]:
        """Iterate over entities in insertion order."""
        return iter(self._entities)

    @property
    def entity_count(self) -> int:
        return len(self._entities)

    # Entity Management

    def create_entity(self, name: str = "") -> Entity:
        """
        Create a new entity owned by this scene.

        Args:
            name: Optional entity name

        Returns:
            The new entity
        """
        return self.add_entity(Entity(name))

    def add_entity(self, entity: Entity) -> Entity:
        """
        Add an existing entity to this scene.

        Raises:
            ValueError: If the entity already belongs to a scene
        """
        if entity.scene is not None:
            raise ValueError(f"Entity {entity.name} already belongs to a scene")

        entity._scene = self
        self._entities.append(entity)
        return entity

    def get_entity_by_name(self, name: str) -> Entity | None:
        """Get the first entity with the given name."""
        for entity in self._entities:
            if entity.name == name:
                return entity
        return None

    # Lifecycle

    @abstractmethod
    def populate(self) -> None:
        """Create this scene's entities."""

    def start(self) -> None:
        """
        Build the scene from scratch.

        Any entities left from a previous start are dropped first, so
        calling start always yields the same entity set.
        """
        self.clear()
        logger.info("### %s ###", self.name)
        self.populate()
        self._state = SceneState.POPULATED

    def reset(self) -> None:
        """Discard all entity state and populate again."""
        logger.info("Resetting scene %s", self.name)
        self.clear()
        self.start()

    def clear(self) -> None:
        """Remove all entities."""
        for entity in self._entities:
            entity._scene = None
        self._entities.clear()
        self._state = SceneState.EMPTY

    def on_destroy(self) -> None:
        """
        Called when the scene is replaced by another one.

        Entities still referenced by an in-flight update pass stay
        usable; they are only detached from this scene.
        """
        self.clear()

    # Update and Render

    def update(self) -> None:
        """Update every entity."""
        for entity in list(self._entities):
            entity.update()

    def render(self) -> None:
        """Render every entity."""
        for entity in list(self._entities):
            entity.render()

    def snapshot(self) -> list[dict]:
        """Entity names and component data, without ids."""
        snapshot = []
        for entity in self._entities:
            data = entity.to_dict()
            del data["id"]
            snapshot.append(data)
        return snapshot

    def __repr__(self) -> str:
        return f"{self.name}(state={self._state.name}, entities={len(self._entities)})"


# Registry of scene types, by name
_scene_registry: dict[str, type[Scene]] = {}


def register_scene(name: str) -> Callable[[type[Scene]], type[Scene]]:
    """
    Decorator to register a scene type under a name.

    Usage:
        @register_scene("home")
        class HomeScene(Scene):
            ...
    """
    def decorator(cls: type[Scene]) -> type[Scene]:
        _scene_registry[name] = cls
        return cls
    return decorator


def get_scene_type(name: str) -> type[Scene] | None:
    """Get scene class by registered name."""
    return _scene_registry.get(name)


def create_scene(name: str) -> Scene:
    """
    Create a new, empty scene by registered name.

    Raises:
        KeyError: If no scene is registered under that name
    """
    scene_type = _scene_registry.get(name)
    if scene_type is None:
        raise KeyError(f"No scene registered as '{name}'")
    return scene_type()
