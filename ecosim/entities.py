"""Objects that live on the simulation grid."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod

from .types import EntityType, Position


class Entity(ABC):
    """Anything that can sit in a grid cell."""

    def __init__(self, position: Position) -> None:
        self.position = position
        self.alive = True

    @property
    @abstractmethod
    def entity_type(self) -> EntityType:
        """The kind of this entity."""

    def kill(self) -> None:
        """Mark the entity as dead."""
        self.alive = False

    def clone(self) -> Entity:
        """Return an independent copy of this entity."""
        return copy.copy(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position!r})"


class Animal(Entity):
    """An entity with energy and age that can starve or die of old age."""

    def __init__(
        self, position: Position, start_energy: int, max_energy: int, max_age: int
    ) -> None:
        super().__init__(position)
        self.energy = start_energy
        self.max_energy = max_energy
        self.age = 0
        self.max_age = max_age

    def add_energy(self, value: int) -> None:
        """Gain energy, never exceeding the maximum."""
        self.energy = min(self.max_energy, self.energy + value)

    def spend_energy(self, value: int) -> None:
        """Lose the given amount of energy."""
        self.energy -= value

    def increment_age(self) -> None:
        """Advance the age by one tick."""
        self.age += 1

    def can_reproduce(self, threshold: int) -> bool:
        """Whether the energy has reached the reproduction threshold."""
        return self.energy >= threshold

    def is_dead_by_energy(self) -> bool:
        """Whether the animal has run out of energy."""
        return self.energy <= 0

    def is_dead_by_age(self) -> bool:
        """Whether the animal has reached its maximum age."""
        return self.age >= self.max_age

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position!r}, "
            f"energy={self.energy}, age={self.age})"
        )


class Plant(Entity):
    """Food for herbivores."""

    @property
    def entity_type(self) -> EntityType:
        return EntityType.PLANT


class Obstacle(Entity):
    """An impassable cell."""

    @property
    def entity_type(self) -> EntityType:
        return EntityType.OBSTACLE


class Herbivore(Animal):
    """An animal that eats plants."""

    @property
    def entity_type(self) -> EntityType:
        return EntityType.HERBIVORE


class Predator(Animal):
    """An animal that hunts herbivores."""

    @property
    def entity_type(self) -> EntityType:
        return EntityType.PREDATOR