"""Sidebar widgets: run controls, tick speed and live stat charts."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable

import pygame

from . import colors

if TYPE_CHECKING:
    from ..simulation.world import StatsHistory, WorldStats

TICK_SPEEDS = (0.25, 0.5, 1.0, 2.0, 5.0)


class SimulationMode(Enum):
    """Whether ticks advance on their own."""

    RUNNING = auto()
    PAUSED = auto()


class Control(Enum):
    """Run controls offered by the sidebar, in display order."""

    RUN = "Run"
    PAUSE = "Pause"
    STEP = "Step"
    RESET = "Reset"


class ControlButton:
    """
    A labelled rectangle that reports completed clicks.

    A click completes when the left button is pressed and released inside
    the rectangle. Which button looks selected is decided by the owner.
    """

    def __init__(self, rect: pygame.Rect, label: str):
        self.rect = rect
        self.label = label
        self.hovered = False
        self._armed = False

    def feed(self, event: pygame.event.Event) -> bool:
        """Return True when ``event`` completes a click on this button."""
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._armed = bool(self.rect.collidepoint(event.pos))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            clicked = self._armed and self.rect.collidepoint(event.pos)
            self._armed = False
            return bool(clicked)
        return False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, selected: bool) -> None:
        if selected:
            fill = colors.BUTTON_SELECTED
        elif self._armed:
            fill = colors.BUTTON_PRESSED
        elif self.hovered:
            fill = colors.BUTTON_HOVER
        else:
            fill = colors.BUTTON_BG
        pygame.draw.rect(surface, fill, self.rect, border_radius=4)
        pygame.draw.rect(surface, colors.BUTTON_BORDER, self.rect, width=1, border_radius=4)

        text = font.render(self.label, True, colors.BG_DARK if selected else colors.TEXT_PRIMARY)
        surface.blit(text, text.get_rect(center=self.rect.center))


class ControlBar:
    """Run / Pause / Step / Reset laid out in one row."""

    def __init__(self, x: int, y: int, button_width: int, button_height: int, gap: int = 4):
        self.buttons = {
            control: ControlButton(
                pygame.Rect(x + i * (button_width + gap), y, button_width, button_height),
                control.value,
            )
            for i, control in enumerate(Control)
        }

    def feed(self, event: pygame.event.Event) -> Control | None:
        """Return the control clicked by ``event``, if any."""
        clicked = None
        # Every button sees the event so hover and press state stay in sync
        for control, button in self.buttons.items():
            if button.feed(event):
                clicked = control
        return clicked

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, mode: SimulationMode) -> None:
        for control, button in self.buttons.items():
            selected = (control is Control.RUN and mode is SimulationMode.RUNNING) or (
                control is Control.PAUSE and mode is SimulationMode.PAUSED
            )
            button.draw(surface, font, selected)


def tick_interval_ms(step_interval: float, multiplier: float) -> float:
    """Milliseconds between ticks for a base interval in seconds and a speed multiplier."""
    return 1000.0 * step_interval / multiplier


class SpeedGroup:
    """Row of speed multipliers applied to the configured seconds-per-tick."""

    def __init__(
        self,
        x: int,
        y: int,
        step_interval: float,
        button_width: int = 46,
        button_height: int = 24,
    ):
        self.step_interval = step_interval
        self.multiplier = 1.0
        self.buttons = [
            (
                speed,
                ControlButton(
                    pygame.Rect(x + i * (button_width + 4), y, button_width, button_height),
                    f"{speed:g}x",
                ),
            )
            for i, speed in enumerate(TICK_SPEEDS)
        ]

    @property
    def interval_ms(self) -> float:
        return tick_interval_ms(self.step_interval, self.multiplier)

    def move_to_row(self, y: int) -> None:
        for _, button in self.buttons:
            button.rect.y = y

    def feed(self, event: pygame.event.Event) -> bool:
        """Apply a click on one of the multipliers. Returns True if the speed changed."""
        changed = False
        for speed, button in self.buttons:
            if button.feed(event) and speed != self.multiplier:
                self.multiplier = speed
                changed = True
        return changed

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        for speed, button in self.buttons:
            button.draw(surface, font, speed == self.multiplier)


def sparkline_points(
    rect: pygame.Rect,
    data: Sequence[float],
    low: float,
    high: float,
    padding: int = 2,
) -> list[tuple[int, int]]:
    """Map a series onto ``rect``; the first sample sits at the left edge, ``high`` at the top."""
    if len(data) < 2:
        return []
    span = high - low if high > low else 1.0
    inner_w = rect.width - 2 * padding
    inner_h = rect.height - 2 * padding
    last = len(data) - 1
    return [
        (
            rect.x + padding + int(i * inner_w / last),
            rect.y + padding + int((1 - (value - low) / span) * inner_h),
        )
        for i, value in enumerate(data)
    ]


class StatChart:
    """One stats row: a text readout of the current tick and a sparkline of its history."""

    def __init__(
        self,
        series: str,
        readout: Callable[[WorldStats], str],
        color: tuple[int, int, int],
        ceiling: float | None = None,
    ):
        """
        Args:
            series: Name of the ``StatsHistory`` deque to plot
            readout: Formats the current ``WorldStats`` for the label
            color: Line color
            ceiling: Fixed top of the chart; None scales to the data
        """
        self.series = series
        self.readout = readout
        self.color = color
        self.ceiling = ceiling

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        label_pos: tuple[int, int],
        chart_rect: pygame.Rect,
        stats: WorldStats,
        history: StatsHistory,
    ) -> None:
        label = font.render(self.readout(stats), True, colors.TEXT_PRIMARY)
        surface.blit(label, label_pos)

        pygame.draw.rect(surface, colors.CHART_BG, chart_rect, border_radius=3)
        data = list(getattr(history, self.series))
        high = self.ceiling if self.ceiling is not None else max(data, default=0)
        points = sparkline_points(chart_rect, data, 0, high)
        if points:
            pygame.draw.lines(surface, self.color, False, points, 2)


def default_charts(max_health: int) -> list[StatChart]:
    """The sidebar's stat rows, top to bottom."""
    return [
        StatChart("population", lambda s: f"Alive: {s.agents_alive}", colors.CHART_POPULATION),
        StatChart("total_resource", lambda s: f"Resource: {s.total_resource}", colors.CHART_RESOURCE),
        StatChart(
            "avg_health", lambda s: f"Avg HP: {s.avg_health:.1f}", colors.CHART_HEALTH,
            ceiling=max_health,
        ),
        StatChart("deaths_per_tick", lambda s: f"Deaths: {s.total_deaths}", colors.CHART_DEATHS),
    ]
