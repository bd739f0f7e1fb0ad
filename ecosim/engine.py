"""Core of the simulation: world setup, per-tick updates and population counts."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence

from .config import Config
from .entities import Animal, Entity, Herbivore, Obstacle, Plant, Predator
from .grid import Grid
from .statistics import SimulationStats
from .types import EntityType, Position

_PLACEMENT_ATTEMPTS = 2000
_SEED_MODULUS = 2**32
_ANIMAL_TYPES = (EntityType.HERBIVORE, EntityType.PREDATOR)


class SimulationEngine:
    """Owns the grid and advances the ecosystem one tick at a time."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.grid = Grid(config.grid_width, config.grid_height)
        self._rng = random.Random(config.random_seed)
        self.tick = 0

    # ------------------------------------------------------------------
    # Setup

    def initialize_random(self) -> None:
        """Clear the world and scatter the initial entities at random."""
        self.grid.clear()
        self.tick = 0
        cfg = self.config

        for _ in range(cfg.initial_obstacles):
            self._try_place_at_random(Obstacle(Position()))
        for _ in range(cfg.initial_plants):
            self._try_place_at_random(Plant(Position()))
        for _ in range(cfg.initial_herbivores):
            self._try_place_at_random(self._new_herbivore(Position()))
        for _ in range(cfg.initial_predators):
            self._try_place_at_random(self._new_predator(Position()))

    def _new_herbivore(self, pos: Position, energy: int | None = None) -> Herbivore:
        cfg = self.config
        start = cfg.herbivore_start_energy if energy is None else energy
        return Herbivore(pos, start, cfg.herbivore_max_energy, cfg.herbivore_max_age)

    def _new_predator(self, pos: Position, energy: int | None = None) -> Predator:
        cfg = self.config
        start = cfg.predator_start_energy if energy is None else energy
        return Predator(pos, start, cfg.predator_max_energy, cfg.predator_max_age)

    def _random_position(self) -> Position:
        x = self._rng.randint(0, self.grid.width - 1)
        y = self._rng.randint(0, self.grid.height - 1)
        return Position(x, y)

    def _try_place_at_random(self, entity: Entity) -> bool:
        for _ in range(_PLACEMENT_ATTEMPTS):
            pos = self._random_position()
            if self.grid.is_empty(pos):
                entity.position = pos
                self.grid.place_entity(entity)
                return True
        return False

    # ------------------------------------------------------------------
    # Neighbourhood helpers

    def _neighbors_of_type(self, pos: Position, entity_type: EntityType) -> list[Position]:
        return [
            neighbor
            for neighbor in self.grid.moore_neighbors(pos)
            if self.grid.at(neighbor).entity_type is entity_type
        ]

    def _empty_neighbors(self, pos: Position) -> list[Position]:
        return [n for n in self.grid.moore_neighbors(pos) if self.grid.is_empty(n)]

    def _choose(self, positions: Sequence[Position]) -> Position:
        if not positions:
            raise ValueError("Cannot choose random position from empty sequence")
        return positions[self._rng.randint(0, len(positions) - 1)]

    # ------------------------------------------------------------------
    # Tick

    def step(self) -> None:
        """Advance the simulation by one tick."""
        self.tick += 1
        self._update_animals()
        self._grow_plants()

    def _effective_thread_count(self) -> int:
        requested = max(1, self.config.thread_count)
        return max(1, min(requested, self.grid.height))

    def _row_blocks(self) -> Iterator[tuple[int, range]]:
        """Split the rows into contiguous blocks, one per worker index."""
        workers = self._effective_thread_count()
        per_block, extra = divmod(self.grid.height, workers)
        start = 0
        for index in range(workers):
            end = start + per_block + (1 if index < extra else 0)
            yield index, range(start, end)
            start = end

    def _plant_growth_probability(self) -> float:
        mode = self.config.environment_mode
        base = self.config.plant_growth_probability
        if mode == "drought":
            return base * 0.35
        if mode == "overgrowth":
            return min(1.0, base * 2.0)
        return base

    def _grow_plants(self) -> None:
        probability = self._plant_growth_probability()
        for index, rows in self._row_blocks():
            seed = (self.config.random_seed + self.tick * 1009 + index * 313) % _SEED_MODULUS
            local_rng = random.Random(seed)
            for y in rows:
                for x in range(self.grid.width):
                    pos = Position(x, y)
                    if self.grid.is_empty(pos) and local_rng.random() < probability:
                        self.grid.place_entity(Plant(pos))

    def _update_animals(self) -> None:
        cfg = self.config
        grid = self.grid
        survivors: list[Animal] = []
        offspring: list[Animal] = []
        processed: set[Position] = set()

        for y in range(grid.height):
            for x in range(grid.width):
                current = Position(x, y)
                if current in processed:
                    continue

                animal = grid.at(current).occupant
                if not isinstance(animal, Animal):
                    continue
                kind = animal.entity_type
                if kind not in _ANIMAL_TYPES:
                    continue

                if kind is EntityType.HERBIVORE:
                    food_type = EntityType.PLANT
                    food_gain = cfg.herbivore_food_gain
                    move_cost = cfg.herbivore_move_cost
                    idle_cost = cfg.herbivore_idle_cost
                    threshold = cfg.herbivore_reproduce_threshold
                    make_child = self._new_herbivore
                else:
                    food_type = EntityType.HERBIVORE
                    food_gain = cfg.predator_food_gain
                    move_cost = cfg.predator_move_cost
                    idle_cost = cfg.predator_idle_cost
                    threshold = cfg.predator_reproduce_threshold
                    make_child = self._new_predator

                new_pos = current
                moved = False
                food_cells = self._neighbors_of_type(current, food_type)
                if food_cells:
                    target = self._choose(food_cells)
                    grid.clear_cell(target)
                    animal.add_energy(food_gain)
                    new_pos = target
                    moved = True
                else:
                    empty_cells = self._empty_neighbors(current)
                    if empty_cells:
                        new_pos = self._choose(empty_cells)
                        moved = True

                animal.spend_energy(move_cost if moved else idle_cost)
                animal.increment_age()
                grid.clear_cell(current)

                if animal.is_dead_by_age() or animal.is_dead_by_energy():
                    continue

                animal.position = new_pos
                survivors.append(animal)
                processed.add(new_pos)

                empty_neighbors = self._empty_neighbors(new_pos)
                if animal.can_reproduce(threshold) and empty_neighbors:
                    child_pos = self._choose(empty_neighbors)
                    child_energy = animal.energy // 2
                    animal.spend_energy(child_energy)
                    offspring.append(make_child(child_pos, child_energy))

        for y in range(grid.height):
            for x in range(grid.width):
                pos = Position(x, y)
                if grid.at(pos).entity_type in _ANIMAL_TYPES:
                    grid.clear_cell(pos)

        for entity in (*survivors, *offspring):
            if grid.is_empty(entity.position):
                grid.place_entity(entity)

    # ------------------------------------------------------------------
    # Counting

    def _count_type(self, entity_type: EntityType) -> int:
        return sum(
            1
            for _, rows in self._row_blocks()
            for y in rows
            for x in range(self.grid.width)
            if self.grid.at(Position(x, y)).entity_type is entity_type
        )

    def count_plants(self) -> int:
        """Number of plants on the grid."""
        return self._count_type(EntityType.PLANT)

    def count_herbivores(self) -> int:
        """Number of herbivores on the grid."""
        return self._count_type(EntityType.HERBIVORE)

    def count_predators(self) -> int:
        """Number of predators on the grid."""
        return self._count_type(EntityType.PREDATOR)

    def count_obstacles(self) -> int:
        """Number of obstacles on the grid."""
        return self._count_type(EntityType.OBSTACLE)

    def snapshot(self) -> SimulationStats:
        """Counts of every entity kind at the current tick."""
        return SimulationStats(
            tick=self.tick,
            plants=self.count_plants(),
            herbivores=self.count_herbivores(),
            predators=self.count_predators(),
            obstacles=self.count_obstacles(),
        )