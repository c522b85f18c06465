"""
Entity class - a named container for components.

Entities hold at most one component per kind and forward the
per-tick hooks to every attached component.

Usage:
    entity = Entity("Player")
    entity.add(PositionState(x=5, y=5))
    entity.add(Renderer())

    position = entity.get(PositionState)
    if position is not None:
        position.move(1, 0)
"""

from __future__ import annotations

from typing import TypeVar, Iterator, Any
import itertools

from tickengine.core.component import Component


# Type variable for component types
C = TypeVar('C', bound=Component)


class Entity:
    """
    A container for components.

    Entities are identified by unique IDs and keyed internally by
    component kind, so adding a component of a kind already present
    replaces the old one.
    """

    # Global entity ID counter
    _id_counter = itertools.count(1)

    def __init__(self, name: str = ""):
        self._id = next(Entity._id_counter)
        self._name = name or f"Entity_{self._id}"
        self._components: dict[str, Component] = {}
        self._scene = None  # Set by Scene when added

    @property
    def id(self) -> int:
        """Unique entity identifier."""
        return self._id

    @property
    def name(self) -> str:
        """Entity display name."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def scene(self) -> Any:
        """The Scene this entity belongs to."""
        return self._scene

    def add(self, component: C) -> C:
        """
        Add a component to this entity.

        A component of the same kind already attached is detached
        and replaced.

        Args:
            component: The component to add

        Returns:
            The added component (for chaining)
        """
        kind = component.get_type_name()

        # Replacement keeps the slot (and so the dispatch position)
        previous = self._components.get(kind)
        if previous is not None:
            previous._entity_id = None

        component._entity_id = self._id
        self._components[kind] = component
        return component

    def remove(self, component_type: type[C]) -> C | None:
        """
        Remove a component from this entity.

        Args:
            component_type: The component class to remove

        Returns:
            The removed component, or None if not found
        """
        component = self._components.pop(component_type.get_type_name(), None)
        if component is not None:
            component._entity_id = None
        return component  # type: ignore

    def get(self, component_type: type[C]) -> C | None:
        """
        Get a component by type.

        Args:
            component_type: The component class

        Returns:
            The component, or None if this entity has no such kind
        """
        return self._components.get(component_type.get_type_name())  # type: ignore

    def has(self, *component_types: type[Component]) -> bool:
        """Check if entity has all specified component types."""
        return all(ct.get_type_name() in self._components for ct in component_types)

    def has_any(self, *component_types: type[Component]) -> bool:
        """Check if entity has any of the specified component types."""
        return any(ct.get_type_name() in self._components for ct in component_types)

    @property
    def components(self) -> Iterator[Component]:
        """Iterate over all components."""
        return iter(self._components.values())

    @property
    def component_types(self) -> set[type[Component]]:
        """Get set of component types on this entity."""
        return {type(c) for c in self._components.values()}

    # Per-tick dispatch

    def update(self) -> None:
        """
        Run update on every attached component.

        The component list is captured before dispatch. Components
        attached during the pass run from the next tick on.
        """
        for component in list(self._components.values()):
            component.update(self)

    def render(self) -> None:
        """Run render on every attached component."""
        for component in list(self._components.values()):
            component.render(self)

    # Serialization

    def to_dict(self) -> dict:
        """Serialize entity to dictionary."""
        return {
            "id": self._id,
            "name": self._name,
            "components": {
                kind: comp.model_dump()
                for kind, comp in self._components.items()
            }
        }

    def __repr__(self) -> str:
        components = ", ".join(self._components.keys())
        return f"Entity({self._name}, id={self._id}, components=[{components}])"

    def __hash__(self) -> int:
        return hash(self._id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Entity):
            return self._id == other._id
        return False
