"""Text, statistics and chart presentation of a simulated world."""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional, Union

from foxwarren.world import World

EMPTY_CELL = "⬜"
HISTORY_LIMIT = 50

FOX_COLOR = (255 / 255, 100 / 255, 0.0)
RABBIT_COLOR = (139 / 255, 69 / 255, 19 / 255)
GRASS_COLOR = (0.0, 128 / 255, 0.0)

_CHART_WIDTH_PT = 1200
_CHART_HEIGHT_PT = 900
_CHART_DPI = 72

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Settings:
    """Grid size and starting population of a new world."""

    width: int = 20
    height: int = 15
    foxes: int = 5
    rabbits: int = 15
    grass: int = 50


_LIMITS = {
    "width": (5, 50),
    "height": (5, 50),
    "foxes": (0, 50),
    "rabbits": (0, 100),
    "grass": (0, 200),
}


def _to_int(text: object) -> int:
    """Read a plain signed decimal integer; anything else counts as zero."""
    text = str(text)
    return int(text) if _INTEGER.fullmatch(text) else 0


def parse_settings(width, height, foxes, rabbits, grass) -> Settings:
    """Turn raw field texts into settings, falling back to defaults out of range."""
    raw = {
        "width": width,
        "height": height,
        "foxes": foxes,
        "rabbits": rabbits,
        "grass": grass,
    }
    defaults = Settings()
    values = {}
    for name, text in raw.items():
        low, high = _LIMITS[name]
        value = _to_int(text)
        values[name] = value if low <= value <= high else getattr(defaults, name)
    return Settings(**values)


def render_grid(world: World) -> str:
    """Draw the grid as rows of icons, one line per row."""
    return "".join(
        "".join(EMPTY_CELL if cell is None else cell.icon + " " for cell in row) + "\n"
        for row in world.grid
    )


def format_stats(world: World) -> str:
    """Population summary of the world by species, with the total."""
    stats = world.statistics()
    foxes, rabbits, grass = stats["Fox"], stats["Rabbit"], stats["Grass"]
    return (
        "Populacja:\n"
        f"🦊 Lisy: {foxes}\n"
        f"🐰 Króliki: {rabbits}\n"
        f"🌱 Trawa: {grass}\n"
        f"Razem: {foxes + rabbits + grass}"
    )


@dataclass
class PopulationHistory:
    """The most recent population counts, one entry per recorded turn."""

    limit: int = HISTORY_LIMIT
    turns: list[int] = field(default_factory=list)
    foxes: list[int] = field(default_factory=list)
    rabbits: list[int] = field(default_factory=list)
    grass: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.turns)

    def _series(self) -> list[list[int]]:
        return [getattr(self, f.name) for f in fields(self) if f.name != "limit"]

    def record(self, world: World) -> None:
        """Append the world's current counts, dropping the oldest past the limit."""
        stats = world.statistics()
        self.turns.append(world.turn)
        self.foxes.append(stats["Fox"])
        self.rabbits.append(stats["Rabbit"])
        self.grass.append(stats["Grass"])
        if len(self.turns) > self.limit:
            for series in self._series():
                del series[0]

    def clear(self) -> None:
        """Forget everything recorded so far."""
        for series in self._series():
            series.clear()


def render_chart(
    history: PopulationHistory, path: Union[str, Path]
) -> Optional[Path]:
    """Write a PNG chart of the history to `path`; None when there is nothing to draw."""
    if len(history) < 1:
        return None

    from matplotlib.backends.backend_agg import FigureCanvasAgg
    from matplotlib.figure import Figure

    figure = Figure(
        figsize=(_CHART_WIDTH_PT / _CHART_DPI, _CHART_HEIGHT_PT / _CHART_DPI),
        dpi=_CHART_DPI,
    )
    FigureCanvasAgg(figure)
    axes = figure.add_subplot()
    axes.set_title("Populacja w czasie")
    axes.set_xlabel("Tura")
    axes.set_ylabel("Liczba organizmów")

    series = (
        ("🦊 Lisy", history.foxes, FOX_COLOR),
        ("🐰 Króliki", history.rabbits, RABBIT_COLOR),
        ("🌱 Trawa", history.grass, GRASS_COLOR),
    )
    for label, values, color in series:
        if len(history) >= 2:
            axes.plot(history.turns, values, color=color, linewidth=2, label=label)
        else:
            axes.scatter(history.turns, values, color=color, label=label)
    axes.legend()

    target = Path(path)
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=r"Glyph .* missing")
        figure.savefig(target, format="png")
    return target