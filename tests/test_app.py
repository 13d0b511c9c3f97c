import pytest

from foxwarren.app import (
    DEFAULT_FIELDS,
    PAUSE_LABEL,
    START_LABEL,
    SimulationApp,
    main,
)
from foxwarren.organisms import Organism
from foxwarren.view import format_stats, render_grid


class Hare(Organism):
    kind = "Rabbit"
    icon = "🐰"

    def __init__(self, id, x, y):
        super().__init__(id, x, y, energy=10, breeding_cooldown=5)


def test_initial_world_uses_default_fields():
    app = SimulationApp()
    assert app.fields == DEFAULT_FIELDS
    assert (app.world.width, app.world.height) == (20, 15)
    assert app.world.turn == 0
    stats = app.world.statistics()
    assert stats["Fox"] == 5
    assert stats["Rabbit"] == 0
    assert stats["Grass"] == 50


def test_initial_display_matches_world():
    app = SimulationApp()
    assert app.turn_text == "Tura: 0"
    assert app.grid_text == render_grid(app.world)
    assert app.stats_text == format_stats(app.world)
    assert len(app.history) == 1
    assert app.start_label == START_LABEL
    assert app.running is False


def test_step_advances_turn_and_history():
    app = SimulationApp()
    app.step()
    assert app.world.turn == 1
    assert app.turn_text == "Tura: 1"
    assert app.history.turns == [0, 1]
    assert app.grid_text == render_grid(app.world)


def test_toggle_starts_and_pauses():
    app = SimulationApp()
    app.toggle()
    assert app.running is True
    assert app.start_label == PAUSE_LABEL
    app.toggle()
    assert app.running is False
    assert app.start_label == START_LABEL


def test_start_twice_stays_running():
    app = SimulationApp()
    app.start()
    app.start()
    assert app.running is True
    app.pause()
    app.pause()
    assert app.running is False


def test_invalid_fields_fall_back_to_defaults():
    app = SimulationApp()
    app.fields.update(width="abc", height="99", foxes="2")
    app.reset()
    assert app.world.width == 20
    assert app.world.height == 15
    assert app.world.statistics()["Fox"] == 2


def test_reset_pauses_and_clears_history():
    app = SimulationApp()
    app.start()
    app.step()
    app.step()
    app.reset()
    assert app.running is False
    assert app.world.turn == 0
    assert app.history.turns == [0]


def test_step_pauses_when_extinct():
    app = SimulationApp()
    app.fields.update(foxes="0")
    app.reset()
    assert app.world.is_extinct()
    app.start()
    app.step()
    assert app.running is False
    assert app.start_label == START_LABEL


def test_registered_rabbits_are_populated():
    app = SimulationApp()
    app.species["Rabbit"] = Hare
    app.fields.update(rabbits="3")
    app.reset()
    rabbits = app.world.organisms_by_type("Rabbit")
    assert len(rabbits) == 3
    assert all(isinstance(r, Hare) for r in rabbits)


def test_history_is_capped_over_many_steps():
    app = SimulationApp()
    app.fields.update(width="5", height="5", foxes="0", grass="0")
    app.reset()
    for _ in range(60):
        app.step()
    assert len(app.history) == app.history.limit
    assert app.history.turns[-1] == app.world.turn
    assert app.history.turns == list(range(app.world.turn - app.history.limit + 1, app.world.turn + 1))


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as raised:
        main(["--help"])
    assert raised.value.code == 0
    assert "foxwarren" in capsys.readouterr().out