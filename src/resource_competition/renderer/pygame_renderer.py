"""Pygame-CE renderer for visualizing the simulation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pygame

from ..config import RendererConfig
from . import colors
from .ui import Control, ControlBar, SimulationMode, SpeedGroup, default_charts

if TYPE_CHECKING:
    from ..simulation.world import World

logger = logging.getLogger(__name__)

PADDING = 12
CHART_SIZE = (100, 24)


class PygameRenderer:
    """
    Pygame-based renderer for the resource competition simulation.

    Renders:
    - The cell grid, colored by how full each cell is
    - Alive agents (colored by remaining health)
    - Sidebar with run controls, statistics and charts

    The renderer never mutates the world. It paces ticks and reports
    step and reset requests back to the main loop.
    """

    def __init__(self, config: RendererConfig, max_health: int):
        """
        Initialize the renderer.

        Args:
            config: Renderer configuration
            max_health: Starting agent health, used to scale agent colors
        """
        self.config = config
        self.max_health = max_health
        self.window_width = config.window_width
        self.window_height = config.window_height
        self.sidebar_width = config.sidebar_width
        self.world_width = config.window_width - config.sidebar_width
        self.world_height = config.window_height

        # Initialize Pygame
        pygame.init()
        pygame.display.set_caption("2D Resource Competition")

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        self.clock = pygame.time.Clock()

        self.font_small = pygame.font.Font(None, 18)

        self._world_surface = pygame.Surface((self.world_width, self.world_height))
        self._sidebar_surface = pygame.Surface((self.sidebar_width, self.window_height))

        # Mode and state
        self.mode = SimulationMode.PAUSED
        self._pending_steps = 0
        self._reset_requested = False
        self._last_step_ms = pygame.time.get_ticks()

        self.controls = ControlBar(PADDING, 10, button_width=58, button_height=26)
        self.speed_group = SpeedGroup(PADDING, 0, config.step_interval)
        self.charts = default_charts(max_health)

    def _set_mode(self, mode: SimulationMode) -> None:
        self.mode = mode

    def _on_step_click(self) -> None:
        """Advance one tick; only meaningful while paused."""
        if self.mode == SimulationMode.PAUSED:
            self._pending_steps += 1

    def _on_reset_click(self) -> None:
        self._reset_requested = True

    def _on_control(self, control: Control) -> None:
        if control is Control.RUN:
            self._set_mode(SimulationMode.RUNNING)
        elif control is Control.PAUSE:
            self._set_mode(SimulationMode.PAUSED)
        elif control is Control.STEP:
            self._on_step_click()
        else:
            self._on_reset_click()

    def handle_events(self) -> bool:
        """
        Handle Pygame events.

        Returns:
            False if the window should close, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_SPACE:
                    if self.mode == SimulationMode.RUNNING:
                        self._set_mode(SimulationMode.PAUSED)
                    else:
                        self._set_mode(SimulationMode.RUNNING)
                elif event.key == pygame.K_s:
                    self._on_step_click()
                elif event.key == pygame.K_r:
                    self._on_reset_click()

            control = self.controls.feed(event)
            if control is not None:
                self._on_control(control)
            if self.speed_group.feed(event):
                logger.debug("Tick interval now %.0f ms", self.speed_group.interval_ms)

        return True

    def consume_reset(self) -> bool:
        """Return True once per reset request."""
        requested = self._reset_requested
        self._reset_requested = False
        if requested:
            self._pending_steps = 0
            self._last_step_ms = pygame.time.get_ticks()
        return requested

    def should_step(self) -> bool:
        """Check if the simulation should advance one tick this frame."""
        if self._pending_steps > 0:
            self._pending_steps -= 1
            return True
        if self.mode != SimulationMode.RUNNING:
            return False

        now = pygame.time.get_ticks()
        if now - self._last_step_ms >= self.speed_group.interval_ms:
            self._last_step_ms = now
            return True
        return False

    def pause(self) -> None:
        self._set_mode(SimulationMode.PAUSED)

    def render(self, world: World) -> None:
        """
        Render the current state of the world.

        Args:
            world: The simulation world to render
        """
        self.screen.fill(colors.BG_DARK)

        self._render_world(world)
        self._render_sidebar(world)

        self.screen.blit(self._world_surface, (self.sidebar_width, 0))
        self.screen.blit(self._sidebar_surface, (0, 0))

        pygame.display.flip()

    def _cell_size(self, world: World) -> int:
        return max(1, min(self.world_width // world.width, self.world_height // world.height))

    def _render_world(self, world: World) -> None:
        """Render the cell grid and the agents on top of it."""
        self._world_surface.fill(colors.BG_DARK)
        cell_px = self._cell_size(world)

        rgb = colors.get_cell_colors(world.fullness_grid())
        # surfarray is indexed (x, y)
        grid_surface = pygame.surfarray.make_surface(rgb.transpose(1, 0, 2))
        grid_surface = pygame.transform.scale(
            grid_surface, (world.width * cell_px, world.height * cell_px)
        )
        self._world_surface.blit(grid_surface, (0, 0))

        if self.config.cell_border and cell_px >= 4:
            for x in range(world.width + 1):
                pygame.draw.line(
                    self._world_surface, colors.CELL_BORDER,
                    (x * cell_px, 0), (x * cell_px, world.height * cell_px),
                )
            for y in range(world.height + 1):
                pygame.draw.line(
                    self._world_surface, colors.CELL_BORDER,
                    (0, y * cell_px), (world.width * cell_px, y * cell_px),
                )

        radius = max(1, int(cell_px * 0.35))
        for agent in world.agents.values():
            if not agent.is_alive:
                continue
            x, y = world.coords(agent.cid)
            center = (int((x + 0.5) * cell_px), int((y + 0.5) * cell_px))
            color = colors.get_agent_color(agent.health_point, self.max_health)
            pygame.draw.circle(self._world_surface, color, center, radius)

    def _render_sidebar(self, world: World) -> None:
        """Render the sidebar with statistics and controls."""
        self._sidebar_surface.fill(colors.BG_SIDEBAR)

        pygame.draw.line(
            self._sidebar_surface,
            colors.DIVIDER,
            (self.sidebar_width - 1, 0),
            (self.sidebar_width - 1, self.window_height),
            2,
        )

        y = 10
        self.controls.draw(self._sidebar_surface, self.font_small, self.mode)
        y += 36

        status_text = f"Tick: {world.tick:,}   FPS: {self.clock.get_fps():.0f}"
        status_surface = self.font_small.render(status_text, True, colors.TEXT_SECONDARY)
        self._sidebar_surface.blit(status_surface, (PADDING, y))
        y += 18

        seed_text = f"Seed: {world.seed}   Grid: {world.width}x{world.height}"
        seed_surface = self.font_small.render(seed_text, True, colors.TEXT_SECONDARY)
        self._sidebar_surface.blit(seed_surface, (PADDING, y))
        y += 18

        self._render_divider(y)
        y += 8

        y = self._render_stats_section(world, y)

        self._render_divider(y)
        y += 8

        y = self._render_section_header("SPEED", y)
        self.speed_group.move_to_row(y)
        self.speed_group.draw(self._sidebar_surface, self.font_small)
        y += 30
        interval_text = f"{self.speed_group.interval_ms:.0f} ms per tick"
        interval_surface = self.font_small.render(interval_text, True, colors.TEXT_SECONDARY)
        self._sidebar_surface.blit(interval_surface, (PADDING, y))
        y += 22

        self._render_divider(y)
        y += 10

        hints = ["SPACE pause/resume", "S step", "R reset", "ESC quit"]
        for hint in hints:
            hint_surface = self.font_small.render(hint, True, colors.TEXT_SECONDARY)
            self._sidebar_surface.blit(hint_surface, (PADDING, y))
            y += 16

    def _render_divider(self, y: int) -> None:
        pygame.draw.line(
            self._sidebar_surface, colors.DIVIDER,
            (PADDING, y), (self.sidebar_width - PADDING, y)
        )

    def _render_section_header(self, title: str, y: int) -> int:
        """Render a section header and return new y position."""
        header_surface = self.font_small.render(title, True, colors.TEXT_ACCENT)
        self._sidebar_surface.blit(header_surface, (PADDING, y))
        return y + 20

    def _render_stats_section(self, world: World, y: int) -> int:
        """Render one readout and sparkline per chart."""
        y = self._render_section_header("LIVE STATS", y)
        chart_x = self.sidebar_width - PADDING - CHART_SIZE[0]
        for chart in self.charts:
            chart.draw(
                self._sidebar_surface,
                self.font_small,
                (PADDING, y + 4),
                pygame.Rect((chart_x, y), CHART_SIZE),
                world.stats,
                world.stats_history,
            )
            y += 30

        return y

    def tick(self) -> float:
        """
        Advance the renderer clock and return delta time.

        Returns:
            Time elapsed since last tick in seconds.
        """
        return self.clock.tick(self.config.target_fps) / 1000.0

    def cleanup(self) -> None:
        """Clean up Pygame resources."""
        logger.debug("Shutting down renderer")
        pygame.quit()
