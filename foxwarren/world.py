"""The grid world and the rules that advance it one turn at a time."""

from __future__ import annotations

import random
from typing import Callable, Optional, Sequence

from foxwarren.organisms import Fox, Grass, Organism

Factory = Callable[[int, int, int], Organism]

_DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)
_PARTNER_RANGE = 3
_POPULATE_ATTEMPTS = 100
_SPAWN_ATTEMPTS = 50
_GRASS_SPAWN_PERIOD = 5
_GRASS_SPAWN_COUNT = 5
_GRASS_SPREAD_ENERGY = 4
_MIN_BREED_ENERGY = 3
_MIN_FOX_BREED_ENERGY = 4


class World:
    """A rectangular grid holding at most one organism per cell."""

    def __init__(
        self, width: int, height: int, rng: Optional[random.Random] = None
    ) -> None:
        self.width = width
        self.height = height
        self.turn = 0
        self.grid: list[list[Optional[Organism]]] = [
            [None] * width for _ in range(height)
        ]
        self._rng = rng if rng is not None else random.Random()
        self._next_id = 1
        self._factories: dict[str, Factory] = {"Fox": Fox, "Grass": Grass}

    def register_species(self, kind: str, factory: Factory) -> None:
        """Make `factory(id, x, y)` the way new organisms of `kind` are born."""
        self._factories[kind] = factory

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_empty(self, x: int, y: int) -> bool:
        return self.is_valid_position(x, y) and self.grid[y][x] is None

    def get_organism(self, x: int, y: int) -> Optional[Organism]:
        if not self.is_valid_position(x, y):
            return None
        return self.grid[y][x]

    def place_organism(self, organism: Organism) -> bool:
        """Put an organism at its own position; False if the cell is taken."""
        x, y = organism.position
        if not self.is_empty(x, y):
            return False
        self.grid[y][x] = organism
        return True

    def remove_organism(self, x: int, y: int) -> None:
        if self.is_valid_position(x, y):
            self.grid[y][x] = None

    def move_organism(self, from_x: int, from_y: int, to_x: int, to_y: int) -> bool:
        """Move the organism in one cell to an empty one; False if not possible."""
        if not self.is_valid_position(from_x, from_y) or not self.is_empty(to_x, to_y):
            return False
        organism = self.grid[from_y][from_x]
        if organism is None or not organism.can_move:
            return False
        self.grid[from_y][from_x] = None
        self.grid[to_y][to_x] = organism
        organism.move(to_x, to_y)
        return True

    def _neighbours(self, x: int, y: int):
        for dx, dy in _DIRECTIONS:
            yield x + dx, y + dy

    def empty_neighbor_positions(self, x: int, y: int) -> list[tuple[int, int]]:
        return [(nx, ny) for nx, ny in self._neighbours(x, y) if self.is_empty(nx, ny)]

    def find_food(self, x: int, y: int, diet: Sequence[str]) -> list[Organism]:
        """Neighbouring organisms whose kind appears in `diet`."""
        food = []
        for nx, ny in self._neighbours(x, y):
            organism = self.get_organism(nx, ny)
            if organism is not None and organism.kind in diet:
                food.append(organism)
        return food

    def _organisms(self):
        for row in self.grid:
            for organism in row:
                if organism is not None:
                    yield organism

    def statistics(self) -> dict[str, int]:
        """Head count by kind; Fox, Rabbit and Grass are always present."""
        stats = {"Fox": 0, "Rabbit": 0, "Grass": 0}
        for organism in self._organisms():
            stats[organism.kind] = stats.get(organism.kind, 0) + 1
        return stats

    def organisms_by_type(self, kind: str) -> list[Organism]:
        return [o for o in self._organisms() if o.kind == kind]

    def is_extinct(self) -> bool:
        """True when no foxes and no rabbits remain."""
        stats = self.statistics()
        return stats["Fox"] == 0 and stats["Rabbit"] == 0

    def simulate(self) -> None:
        """Advance the world by one turn."""
        organisms = [o for o in self._organisms() if o.energy > 0]
        self._rng.shuffle(organisms)

        for organism in organisms:
            if organism.energy <= 0:
                continue
            x, y = organism.position
            food = self.find_food(x, y, organism.diet)
            if food and organism.eating_cooldown == 0:
                organism.eat()
                self.remove_organism(*food[0].position)

            if organism.energy > 0 and organism.can_move:
                moved = False
                if organism.can_breed and not organism.bred and organism.kind != "Grass":
                    moved = self._move_towards_partner(organism)
                if not moved:
                    positions = self.empty_neighbor_positions(x, y)
                    if positions:
                        to_x, to_y = self._rng.choice(positions)
                        self.move_organism(x, y, to_x, to_y)

            if organism.energy > 0 and organism.can_breed and not organism.bred:
                self._try_breeding(organism)

        self._update_and_cleanup()
        if self.turn % _GRASS_SPAWN_PERIOD == 0:
            self._scatter("Grass", _GRASS_SPAWN_COUNT, _SPAWN_ATTEMPTS)
        self.turn += 1

    def populate_randomly(self, fox_count: int, rabbit_count: int, grass_count: int) -> None:
        """Scatter new organisms over random empty cells."""
        for kind, count in (("Fox", fox_count), ("Rabbit", rabbit_count), ("Grass", grass_count)):
            if count > 0 and kind not in self._factories:
                raise ValueError(f"no species registered for {kind!r}")
        self._scatter("Fox", fox_count, _POPULATE_ATTEMPTS)
        self._scatter("Rabbit", rabbit_count, _POPULATE_ATTEMPTS)
        self._scatter("Grass", grass_count, _POPULATE_ATTEMPTS)

    def _spawn(self, kind: str, x: int, y: int) -> Optional[Organism]:
        factory = self._factories.get(kind)
        if factory is None:
            return None
        organism = factory(self._next_id, x, y)
        self.place_organism(organism)
        self._next_id += 1
        return organism

    def _scatter(self, kind: str, count: int, attempts: int) -> None:
        for _ in range(count):
            for _ in range(attempts):
                x = self._rng.randrange(self.width)
                y = self._rng.randrange(self.height)
                if self.is_empty(x, y):
                    self._spawn(kind, x, y)
                    break

    def _try_breeding(self, organism: Organism) -> None:
        x, y = organism.position
        empty = self.empty_neighbor_positions(x, y)
        if not empty:
            return
        if organism.kind == "Grass":
            if organism.energy >= _GRASS_SPREAD_ENERGY:
                organism.breed()
                self._spawn("Grass", *self._rng.choice(empty))
            return

        partner = self._find_nearby_partner(organism, x, y)
        if partner is None:
            return
        min_energy = _MIN_FOX_BREED_ENERGY if organism.kind == "Fox" else _MIN_BREED_ENERGY
        if organism.energy >= min_energy and partner.energy >= min_energy:
            organism.breed()
            partner.breed()
            self._spawn(organism.kind, *self._rng.choice(empty))

    @staticmethod
    def _is_willing_partner(organism: Organism, candidate: Organism) -> bool:
        return (
            candidate.kind == organism.kind
            and candidate.can_breed
            and not candidate.bred
            and candidate.energy > 0
        )

    def _find_nearby_partner(self, organism: Organism, x: int, y: int) -> Optional[Organism]:
        for nx, ny in self._neighbours(x, y):
            candidate = self.get_organism(nx, ny)
            if candidate is not None and self._is_willing_partner(organism, candidate):
                return candidate
        return None

    def _move_towards_partner(self, organism: Organism) -> bool:
        x, y = organism.position
        closest: Optional[Organism] = None
        closest_distance = 100
        span = range(-_PARTNER_RANGE, _PARTNER_RANGE + 1)
        for dy in span:
            for dx in span:
                if dx == 0 and dy == 0:
                    continue
                candidate = self.get_organism(x + dx, y + dy)
                if candidate is None or not self._is_willing_partner(organism, candidate):
                    continue
                distance = dx * dx + dy * dy
                if distance < closest_distance:
                    closest_distance = distance
                    closest = candidate

        if closest is None:
            return False
        px, py = closest.position
        step_x = x + (px > x) - (px < x)
        step_y = y + (py > y) - (py < y)
        if self.is_empty(step_x, step_y):
            self.move_organism(x, y, step_x, step_y)
            return True
        return False

    def _update_and_cleanup(self) -> None:
        for row in self.grid:
            for x, organism in enumerate(row):
                if organism is None:
                    continue
                if organism.energy > 0:
                    organism.new_turn()
                if organism.energy <= 0:
                    row[x] = None