"""Entities and per-type component storage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Entity:
    """An entity is nothing but an id."""

    id: int = 0


class EntityManager:
    """Creates entities and stores one component of each type per entity."""

    def __init__(self) -> None:
        self._next_id = 1
        self._components: dict[type, dict[int, Any]] = {}

    def create_entity(self) -> Entity:
        """Return a new entity with a fresh id, starting at 1."""
        entity = Entity(self._next_id)
        self._next_id += 1
        return entity

    def component_map(self, component_type: type[T]) -> dict[int, T]:
        """The live mapping of entity id to component for one component type."""
        return self._components.setdefault(component_type, {})

    def add_component(self, entity: Entity, component: Any) -> None:
        """Attach a component, replacing any of the same type."""
        self.component_map(type(component))[entity.id] = component

    def remove_component(self, entity: Entity, component_type: type) -> None:
        """Detach a component type from an entity; nothing happens if it is absent."""
        self.component_map(component_type).pop(entity.id, None)

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        """Return the entity's component of the given type; KeyError if absent."""
        try:
            return self.component_map(component_type)[entity.id]
        except KeyError:
            raise KeyError(
                f"entity {entity.id} has no {component_type.__name__} component"
            ) from None