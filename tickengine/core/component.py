"""
Component base class for behavior units.

Components are small pydantic models attached to an Entity. Each one
carries its own configuration as validated fields and may override two
hooks that the Entity calls every tick:

- update(entity): game logic, may touch other components on the same entity
- render(entity): read-only output

Usage:
    @register_component
    class Health(Component):
        _type_name: ClassVar[str] = "health"

        current: int
        max: int

        def update(self, entity: Entity) -> None:
            self.current = min(self.current + 1, self.max)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from tickengine.core.entity import Entity


class Component(BaseModel):
    """
    Base class for all components.

    Components use Pydantic for:
    - Automatic validation
    - JSON serialization
    - Type hints
    - Default values

    The kind of a component is the explicit `_type_name` token, not the
    Python class. An Entity holds at most one component per kind.
    """

    model_config = ConfigDict(
        # Allow arbitrary types (for references)
        arbitrary_types_allowed=True,
        # Validate on assignment
        validate_assignment=True,
        extra='forbid',
    )

    # Kind token (used for entity lookup and scene data)
    _type_name: ClassVar[str] = ""

    # Id of the owning entity (set by entity when attached)
    _entity_id: int | None = None

    @classmethod
    def get_type_name(cls) -> str:
        """Get the component kind token."""
        return cls._type_name or cls.__name__

    @property
    def entity_id(self) -> int | None:
        """Id of the entity this component is attached to."""
        return self._entity_id

    def update(self, entity: Entity) -> None:
        """Per-tick logic hook. No-op by default."""

    def render(self, entity: Entity) -> None:
        """Per-frame output hook. Must not mutate state. No-op by default."""

    def clone(self) -> Component:
        """Create a deep copy of this component."""
        return self.model_copy(deep=True)


# Registry of component kinds for scene data
_component_registry: dict[str, type[Component]] = {}


def register_component(cls: type[Component]) -> type[Component]:
    """
    Decorator to register a component kind.

    Usage:
        @register_component
        class Health(Component):
            _type_name: ClassVar[str] = "health"
            current: int
    """
    type_name = cls.get_type_name()
    _component_registry[type_name] = cls
    return cls


def get_component_type(type_name: str) -> type[Component] | None:
    """Get component class by kind token."""
    return _component_registry.get(type_name)


def get_all_component_types() -> dict[str, type[Component]]:
    """Get all registered component kinds."""
    return _component_registry.copy()
