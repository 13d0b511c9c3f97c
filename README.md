# foxwarren

A small predator-prey simulation on a rectangular grid. Each cell holds at
most one organism. Every turn, in random order, each living organism eats a
neighbour it can eat, moves (towards a breeding partner within three cells if
it is ready to breed, otherwise to a random free neighbouring cell), and
breeds with a ready partner next to it, placing the offspring in a free
neighbouring cell. Afterwards every organism loses one unit of energy and
those with none left are removed. Grass does not move; it spreads on its own
once its breeding cooldown is over. On every fifth turn, starting with the
first, up to five new patches of grass sprout at random.

The package ships two species, `Fox` and `Grass`. Further species, such as
the rabbits foxes feed on, can be added through `World.register_species`
(see below).

## Installation

```
pip install .
```

The window uses `tkinter` from the Python standard library. For running the
tests:

```
pip install ".[test]"
pytest
```

## Running the simulation

```
foxwarren
```

This opens a window with:

- a settings form for grid width and height (5–50) and the starting numbers of
  foxes (0–50), rabbits (0–100) and grass (0–200). Text that is not a whole
  number is read as 0; a value out of range falls back to the default
  (20 × 15, 5 foxes, 15 rabbits, 50 patches of grass). Since 0 is in range for
  the populations, a non-numeric population field gives none of that species;
- **▶ Start / ⏸ Pauza** to run the simulation automatically at one turn every
  500 ms, **⏯ Krok** to advance by a single turn, and **🔄 Reset** to build a
  new world from the current settings;
- the grid drawn with icons, the turn counter and population counts;
- a chart of the populations over the last 50 recorded turns.

The simulation pauses on its own once both foxes and rabbits are gone.

## Using the library

`foxwarren.world.World` holds the grid and the rules. Passing a seeded
`random.Random` makes a run reproducible.

```python
import random

from foxwarren.world import World
from foxwarren.view import PopulationHistory, format_stats, render_chart, render_grid

world = World(20, 15, random.Random(42))
world.populate_randomly(5, 0, 50)   # foxes, rabbits, grass

history = PopulationHistory()
while not world.is_extinct() and world.turn < 100:
    world.simulate()
    history.record(world)

print(render_grid(world))
print(format_stats(world))
print(world.statistics())          # {"Fox": ..., "Rabbit": ..., "Grass": ...}

render_chart(history, "population.png")
```

`World` also offers `is_valid_position`, `is_empty`, `get_organism`,
`place_organism`, `remove_organism`, `move_organism`,
`empty_neighbor_positions`, `find_food` and `organisms_by_type`.

`foxwarren.view` provides:

- `Settings` and `parse_settings(width, height, foxes, rabbits, grass)`, which
  turns raw field texts into settings with the limits described above;
- `render_grid(world)`, one line of icons per row, `⬜` for an empty cell;
- `format_stats(world)`, the population summary with a total;
- `PopulationHistory`, which keeps the counts of the last 50 recorded turns
  (`record`, `clear`);
- `render_chart(history, path)`, which writes a 1200 × 900 PNG line chart
  (a scatter plot when there is a single point) and returns the path, or
  returns `None` without writing anything when the history is empty.

`foxwarren.app.SimulationApp` drives one simulation. Given a Tk root it builds
the window; given `None` it runs headless, reading its settings from the
`fields` dict and keeping `grid_text`, `turn_text`, `stats_text` and
`history` up to date as `step`, `start`, `pause`, `toggle`, `reset` and
`create_world` are called. Headless, `start` only marks the app as running;
no timer steps it.

### Organisms

`foxwarren.organisms` holds the `Organism` base class and the `Fox` and
`Grass` species. Each organism tracks its id, position, energy and cooldowns;
`describe()` returns a short text summary.

- A fox starts with 15 energy, eats rabbits for 10 energy (then digests for
  8 turns) and may breed after 6 turns, then every 7. Foxes breed with at
  least 4 energy each; breeding costs 2.
- Grass starts with 6 energy, never moves, may spread after 2 turns, then
  every 4, when it has at least 4 energy.

### Adding a species

`World.register_species(kind, factory)` makes `factory(id, x, y)` the way
organisms of `kind` are created by `populate_randomly`, breeding and
spawning. A species that eats needs a `diet`, an `eat()` method, and must
count its own `eating_cooldown` down in `new_turn`, as `Fox` does:

```python
from foxwarren.organisms import Organism


class Rabbit(Organism):
    kind = "Rabbit"
    icon = "🐰"
    diet = ("Grass",)
    breeding_rest = 5

    def __init__(self, id, x, y):
        super().__init__(id, x, y, energy=10, breeding_cooldown=4)

    def eat(self):
        if self.eating_cooldown == 0:
            self.ate = True
            self.energy += 4
            self.eating_cooldown = 3

    def new_turn(self):
        if self.eating_cooldown > 0:
            self.eating_cooldown -= 1
        if self.eating_cooldown == 0:
            self.ate = False
        super().new_turn()


world.register_species("Rabbit", Rabbit)
```

The numbers above are only an example. Animals other than foxes breed with
at least 3 energy each.

## What the package does not do

There is no rabbit species built in. `World.populate_randomly` raises
`ValueError` when asked for rabbits before a `"Rabbit"` species is
registered. The window reads and checks the rabbits field, but places
rabbits only when a factory has been put in `SimulationApp.species` under
`"Rabbit"`; the `foxwarren` command does not do so, so its worlds start with
foxes and grass only, and foxes there have nothing to eat.