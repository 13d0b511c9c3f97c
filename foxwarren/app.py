"""Interactive window that runs and charts the simulation."""

from __future__ import annotations

import argparse
import tempfile
from pathlib import Path
from typing import Optional

from foxwarren.view import (
    PopulationHistory,
    Settings,
    format_stats,
    parse_settings,
    render_chart,
    render_grid,
)
from foxwarren.world import Factory, World

WINDOW_TITLE = "Lisy i Króliki"
WINDOW_GEOMETRY = "1600x1000"
START_LABEL = "▶ Start"
PAUSE_LABEL = "⏸ Pauza"
STEP_LABEL = "⏯ Krok"
RESET_LABEL = "🔄 Reset"
TICK_MS = 500

_DEFAULTS = Settings()
DEFAULT_FIELDS = {
    "width": str(_DEFAULTS.width),
    "height": str(_DEFAULTS.height),
    "foxes": str(_DEFAULTS.foxes),
    "rabbits": str(_DEFAULTS.rabbits),
    "grass": str(_DEFAULTS.grass),
}
_FIELD_LABELS = (
    ("width", "Szerokość:"),
    ("height", "Wysokość:"),
    ("foxes", "Lisy:"),
    ("rabbits", "Króliki:"),
    ("grass", "Trawa:"),
)


def _turn_text(turn: int) -> str:
    return f"Tura: {turn}"


class SimulationApp:
    """Controls one simulation; draws it into `root` when a Tk root is given.

    With `root` set to None the app runs headless: field texts live in
    `fields` and the display texts in plain attributes.
    """

    def __init__(self, root=None) -> None:
        self.root = root
        self.fields: dict[str, str] = dict(DEFAULT_FIELDS)
        self.species: dict[str, Factory] = {}
        self.settings: Optional[Settings] = None
        self.world: Optional[World] = None
        self.running = False
        self.history = PopulationHistory()
        self.start_label = START_LABEL
        self.turn_text = _turn_text(0)
        self.stats_text = "Populacja:\n🦊 Lisy: 0\n🐰 Króliki: 0\n🌱 Trawa: 0"
        self.grid_text = ""
        self._after_id = None
        self._vars: dict = {}
        self._chart_dir: Optional[tempfile.TemporaryDirectory] = None
        self._chart_image = None
        if root is not None:
            self._build_widgets()
        self.create_world()

    def create_world(self) -> None:
        """Build a fresh, randomly populated world from the current fields."""
        for name, var in self._vars.items():
            self.fields[name] = var.get()
        self.settings = parse_settings(**self.fields)
        world = World(self.settings.width, self.settings.height)
        for kind, factory in self.species.items():
            world.register_species(kind, factory)
        rabbits = self.settings.rabbits if "Rabbit" in self.species else 0
        world.populate_randomly(self.settings.foxes, rabbits, self.settings.grass)
        self.world = world
        self.history.clear()
        self._update_display()
        self._update_chart()

    def toggle(self) -> None:
        """Start when paused, pause when running."""
        if self.world is None:
            return
        if self.running:
            self.pause()
        else:
            self.start()

    def start(self) -> None:
        """Begin stepping the simulation on a timer."""
        if self.world is None or self.running:
            return
        self.running = True
        self.start_label = PAUSE_LABEL
        self._refresh_widgets()
        self._schedule()

    def pause(self) -> None:
        """Stop the timer."""
        if self.world is None or not self.running:
            return
        self.running = False
        self.start_label = START_LABEL
        self._refresh_widgets()
        if self._after_id is not None and self.root is not None:
            self.root.after_cancel(self._after_id)
        self._after_id = None

    def reset(self) -> None:
        """Pause and start over with a new world."""
        self.pause()
        self.create_world()

    def step(self) -> None:
        """Advance one turn; pause once foxes and rabbits are gone."""
        if self.world is None:
            return
        self.world.simulate()
        self._update_display()
        self._update_chart()
        if self.world.is_extinct():
            self.pause()

    def _schedule(self) -> None:
        if self.root is not None:
            self._after_id = self.root.after(TICK_MS, self._tick)

    def _tick(self) -> None:
        self._after_id = None
        if not self.running:
            return
        self.step()
        if self.running:
            self._schedule()

    def _update_display(self) -> None:
        world = self.world
        self.grid_text = render_grid(world)
        self.turn_text = _turn_text(world.turn)
        self.stats_text = format_stats(world)
        self.history.record(world)
        self._refresh_widgets()

    def _update_chart(self) -> None:
        if self.root is None:
            return
        import tkinter as tk

        if self._chart_dir is None:
            self._chart_dir = tempfile.TemporaryDirectory(prefix="foxwarren-")
        path = render_chart(self.history, Path(self._chart_dir.name) / "chart.png")
        if path is None:
            self._chart_image = None
            self._chart_label.configure(image="")
            return
        image = tk.PhotoImage(master=self.root, file=str(path)).subsample(2)
        self._chart_image = image
        self._chart_label.configure(image=image)

    def _build_widgets(self) -> None:
        import tkinter as tk
        from tkinter import ttk

        root = self.root
        root.columnconfigure(1, weight=2)
        root.columnconfigure(2, weight=3)
        root.rowconfigure(0, weight=1)

        left = ttk.Frame(root, padding=8)
        left.grid(row=0, column=0, sticky="nsew")
        ttk.Separator(left).pack(fill="x", pady=4)
        form = ttk.Frame(left)
        form.pack(fill="x")
        for row, (name, label) in enumerate(_FIELD_LABELS):
            var = tk.StringVar(master=root, value=self.fields[name])
            ttk.Label(form, text=label).grid(row=row, column=0, sticky="w")
            ttk.Entry(form, textvariable=var, width=8).grid(
                row=row, column=1, sticky="ew"
            )
            self._vars[name] = var
        form.columnconfigure(1, weight=1)

        ttk.Separator(left).pack(fill="x", pady=6)
        self._start_button = ttk.Button(left, text=self.start_label, command=self.toggle)
        self._start_button.pack(fill="x")
        ttk.Button(left, text=STEP_LABEL, command=self.step).pack(fill="x")
        ttk.Button(left, text=RESET_LABEL, command=self.reset).pack(fill="x")
        ttk.Separator(left).pack(fill="x", pady=6)
        self._turn_label = ttk.Label(left, text=self.turn_text)
        self._turn_label.pack(anchor="w")
        self._stats_label = ttk.Label(left, text=self.stats_text, justify="left")
        self._stats_label.pack(anchor="w")

        grid_frame = ttk.Frame(root, padding=8)
        grid_frame.grid(row=0, column=1, sticky="nsew")
        grid_frame.rowconfigure(0, weight=1)
        grid_frame.columnconfigure(0, weight=1)
        self._grid_view = tk.Text(
            grid_frame, wrap="none", font="TkFixedFont", state="disabled",
            width=60, height=25,
        )
        self._grid_view.grid(row=0, column=0, sticky="nsew")
        vertical = ttk.Scrollbar(grid_frame, orient="vertical", command=self._grid_view.yview)
        vertical.grid(row=0, column=1, sticky="ns")
        horizontal = ttk.Scrollbar(
            grid_frame, orient="horizontal", command=self._grid_view.xview
        )
        horizontal.grid(row=1, column=0, sticky="ew")
        self._grid_view.configure(
            yscrollcommand=vertical.set, xscrollcommand=horizontal.set
        )

        chart_frame = ttk.Frame(root, padding=8)
        chart_frame.grid(row=0, column=2, sticky="nsew")
        ttk.Label(chart_frame, text="Wykres Populacji").pack(anchor="w")
        self._chart_label = ttk.Label(chart_frame)
        self._chart_label.pack(fill="both", expand=True)

    def _refresh_widgets(self) -> None:
        if self.root is None:
            return
        self._start_button.configure(text=self.start_label)
        self._turn_label.configure(text=self.turn_text)
        self._stats_label.configure(text=self.stats_text)
        self._grid_view.configure(state="normal")
        self._grid_view.delete("1.0", "end")
        self._grid_view.insert("1.0", self.grid_text)
        self._grid_view.configure(state="disabled")


def main(argv=None) -> int:
    """Open the simulation window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="foxwarren",
        description="Predator and prey simulation on a grid.",
    )
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    root.title(WINDOW_TITLE)
    root.geometry(WINDOW_GEOMETRY)
    SimulationApp(root)
    root.mainloop()
    return 0