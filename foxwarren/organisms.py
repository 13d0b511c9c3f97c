"""Creatures that live on the simulation grid."""

from __future__ import annotations

from typing import ClassVar

BREEDING_COST = 2


class Organism:
    """Something that occupies one grid cell, spends energy and may breed."""

    kind: ClassVar[str] = "Organism"
    icon: ClassVar[str] = "?"
    diet: ClassVar[tuple[str, ...]] = ()
    breeding_rest: ClassVar[int] = 0

    def __init__(
        self,
        id: int,
        x: int,
        y: int,
        *,
        energy: int,
        breeding_cooldown: int,
        eating_cooldown: int = 0,
        can_move: bool = True,
    ) -> None:
        self.id = id
        self.x = x
        self.y = y
        self.energy = energy
        self.breeding_cooldown = breeding_cooldown
        self.eating_cooldown = eating_cooldown
        self.can_move = can_move
        self.can_breed = False
        self.bred = False
        self.ate = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id}, x={self.x}, y={self.y}, "
            f"energy={self.energy})"
        )

    @property
    def position(self) -> tuple[int, int]:
        """The (x, y) cell the organism believes it occupies."""
        return self.x, self.y

    def move(self, x: int, y: int) -> None:
        """Update the organism's own record of where it stands."""
        self.x = x
        self.y = y

    def new_turn(self) -> None:
        """Tick the breeding cooldown and pay one unit of energy."""
        if self.breeding_cooldown > 0:
            self.breeding_cooldown -= 1
            if self.breeding_cooldown == 0:
                self.can_breed = True
                self.bred = False
        self.energy -= 1

    def breed(self) -> None:
        """Spend energy on breeding if ready, then rest."""
        self._spend_on_breeding(self.breeding_rest)

    def die(self) -> None:
        """Drain all energy."""
        self.energy = 0

    def describe(self) -> str:
        """A short multi-line summary of the organism's state."""
        return (
            f"ID: {self.id}\n"
            f"Energy: {self.energy}\n"
            f"Position: ({self.x},{self.y})\n"
            f"Ate: {str(self.ate).lower()}\n"
            f"Can Breed: {str(self.can_breed).lower()}\n"
        )

    def _spend_on_breeding(self, rest: int) -> None:
        if self.can_breed and self.breeding_cooldown == 0:
            self.bred = True
            self.can_breed = False
            self.energy -= BREEDING_COST
            self.breeding_cooldown = rest


class Fox(Organism):
    """A predator that hunts rabbits."""

    kind = "Fox"
    icon = "🦊"
    diet = ("Rabbit",)
    breeding_rest = 7

    MEAL_ENERGY: ClassVar[int] = 10
    EATING_REST: ClassVar[int] = 8

    def __init__(self, id: int, x: int, y: int) -> None:
        super().__init__(
            id, x, y, energy=15, breeding_cooldown=6, eating_cooldown=2
        )

    def eat(self) -> None:
        """Gain energy from a meal unless still digesting the last one."""
        if self.eating_cooldown == 0:
            self.ate = True
            self.energy += self.MEAL_ENERGY
            self.eating_cooldown = self.EATING_REST

    def breed(self) -> None:
        """Breed if ready; rests seven turns afterwards."""
        self._spend_on_breeding(self.breeding_rest)

    def move(self, x: int, y: int) -> None:
        """Walk to a new cell."""
        self.x = x
        self.y = y

    def die(self) -> None:
        """Drain all energy and stop moving."""
        self.energy = 0
        self.can_move = False

    def new_turn(self) -> None:
        """Digest, tick the breeding cooldown and pay one unit of energy."""
        if self.eating_cooldown > 0:
            self.eating_cooldown -= 1
        if self.eating_cooldown == 0:
            self.ate = False
        super().new_turn()


class Grass(Organism):
    """A rooted plant that spreads to neighbouring cells."""

    kind = "Grass"
    icon = "🌱"
    diet = ()
    breeding_rest = 4

    def __init__(self, id: int, x: int, y: int) -> None:
        super().__init__(id, x, y, energy=6, breeding_cooldown=2, can_move=False)

    def breed(self) -> None:
        """Spread if ready; rests four turns afterwards."""
        self._spend_on_breeding(self.breeding_rest)

    def move(self, x: int, y: int) -> None:
        """Grass is rooted: its position never changes."""
        return None

    def die(self) -> None:
        """Wither away."""
        self.energy = 0

    def new_turn(self) -> None:
        """Age by one turn, withering when out of energy."""
        super().new_turn()
        if self.energy <= 0:
            self.die()