import random

import pytest

from foxwarren.organisms import Fox, Grass, Organism
from foxwarren.world import World


class Prey(Organism):
    kind = "Rabbit"
    icon = "r"

    def __init__(self, id, x, y):
        super().__init__(id, x, y, energy=5, breeding_cooldown=3, can_move=False)


def _world(width, height, seed=0):
    return World(width, height, random.Random(seed))


def test_new_world_is_empty():
    world = _world(4, 3)
    assert world.turn == 0
    assert all(world.is_empty(x, y) for y in range(3) for x in range(4))
    assert world.statistics() == {"Fox": 0, "Rabbit": 0, "Grass": 0}


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_invalid_positions(pos):
    world = _world(4, 3)
    assert world.is_valid_position(*pos) is False
    assert world.is_empty(*pos) is False
    assert world.get_organism(*pos) is None


def test_place_and_remove():
    world = _world(4, 3)
    fox = Fox(1, 2, 1)
    assert world.place_organism(fox) is True
    assert world.get_organism(2, 1) is fox
    assert world.place_organism(Grass(2, 2, 1)) is False
    world.remove_organism(2, 1)
    assert world.is_empty(2, 1)


def test_place_outside_grid_fails():
    world = _world(4, 3)
    assert world.place_organism(Fox(1, 9, 9)) is False


def test_move_organism():
    world = _world(4, 3)
    fox = Fox(1, 0, 0)
    world.place_organism(fox)
    assert world.move_organism(0, 0, 1, 1) is True
    assert fox.position == (1, 1)
    assert world.get_organism(1, 1) is fox
    assert world.is_empty(0, 0)


def test_move_refused_cases():
    world = _world(4, 3)
    grass = Grass(1, 0, 0)
    fox = Fox(2, 1, 0)
    world.place_organism(grass)
    world.place_organism(fox)
    assert world.move_organism(0, 0, 0, 1) is False
    assert world.move_organism(1, 0, 0, 0) is False
    assert world.move_organism(3, 2, 2, 2) is False
    assert world.get_organism(0, 0) is grass


def test_empty_neighbor_positions_in_corner():
    world = _world(3, 3)
    assert world.empty_neighbor_positions(0, 0) == [(0, 1), (1, 0), (1, 1)]
    world.place_organism(Grass(1, 1, 1))
    assert world.empty_neighbor_positions(0, 0) == [(0, 1), (1, 0)]


def test_find_food_matches_diet_in_direction_order():
    world = _world(3, 3)
    first = Prey(1, 0, 0)
    second = Prey(2, 2, 2)
    world.place_organism(first)
    world.place_organism(second)
    world.place_organism(Grass(3, 1, 0))
    assert world.find_food(1, 1, ("Rabbit",)) == [first, second]
    assert world.find_food(1, 1, ()) == []


def test_statistics_and_by_type():
    world = _world(5, 5)
    foxes = [Fox(1, 0, 0), Fox(2, 4, 4)]
    for fox in foxes:
        world.place_organism(fox)
    world.place_organism(Grass(3, 2, 2))
    assert world.statistics() == {"Fox": 2, "Rabbit": 0, "Grass": 1}
    assert world.organisms_by_type("Fox") == foxes


def test_is_extinct():
    world = _world(5, 5)
    world.place_organism(Grass(1, 0, 0))
    assert world.is_extinct() is True
    world.register_species("Rabbit", Prey)
    world.place_organism(Prey(2, 1, 1))
    assert world.is_extinct() is False


def test_populate_counts_and_unique_ids():
    world = _world(10, 10)
    world.populate_randomly(3, 0, 7)
    assert world.statistics() == {"Fox": 3, "Rabbit": 0, "Grass": 7}
    organisms = world.organisms_by_type("Fox") + world.organisms_by_type("Grass")
    assert len({o.id for o in organisms}) == len(organisms)


def test_populate_rabbits_requires_species():
    world = _world(10, 10)
    with pytest.raises(ValueError):
        world.populate_randomly(0, 4, 0)


def test_populate_registered_rabbits():
    world = _world(10, 10)
    world.register_species("Rabbit", Prey)
    world.populate_randomly(0, 4, 0)
    assert world.statistics()["Rabbit"] == 4


def test_first_turn_spawns_grass():
    world = _world(5, 5)
    world.simulate()
    assert world.turn == 1
    assert world.statistics()["Grass"] == 5
    world.simulate()
    assert world.turn == 2
    assert world.statistics()["Grass"] == 5


def test_fox_eats_adjacent_rabbit():
    world = _world(3, 3)
    world.register_species("Rabbit", Prey)
    fox = Fox(1, 1, 1)
    fox.eating_cooldown = 0
    world.place_organism(fox)
    world.place_organism(Prey(2, 0, 0))
    world.simulate()
    assert world.statistics()["Rabbit"] == 0
    assert fox.ate is True


def test_foxes_breed_when_adjacent():
    world = _world(3, 1)
    parents = [Fox(1, 0, 0), Fox(2, 1, 0)]
    for fox in parents:
        fox.can_breed = True
        fox.breeding_cooldown = 0
        fox.can_move = False
        world.place_organism(fox)
    world.simulate()
    assert world.statistics()["Fox"] == 3
    assert all(fox.bred for fox in parents)


def test_grass_spreads_to_empty_neighbour():
    world = _world(2, 1)
    grass = Grass(1, 0, 0)
    grass.can_breed = True
    grass.breeding_cooldown = 0
    world.place_organism(grass)
    world.simulate()
    assert world.statistics()["Grass"] == 2
    assert grass.bred is True


def test_fox_steps_towards_partner():
    world = _world(5, 5)
    seeker = Fox(1, 0, 0)
    partner = Fox(2, 3, 3)
    for fox in (seeker, partner):
        fox.can_breed = True
        fox.breeding_cooldown = 0
        world.place_organism(fox)
    partner.can_move = False
    world.simulate()
    assert world.get_organism(1, 1) is seeker
    assert seeker.position == (1, 1)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_grid_stays_consistent(seed):
    world = _world(10, 10, seed)
    world.populate_randomly(4, 0, 20)
    for _ in range(30):
        world.simulate()
        for y, row in enumerate(world.grid):
            for x, organism in enumerate(row):
                if organism is not None:
                    assert organism.position == (x, y)
                    assert organism.energy > 0
    assert world.turn == 30