"""World simulation - owns the cell grid and agents and runs the tick."""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np

from .agent import Agent, Direction, Neighbor
from .cell import Cell
from .errors import ConfigError

if TYPE_CHECKING:
    from ..config import WorldConfig

logger = logging.getLogger(__name__)


@dataclass
class WorldStats:
    """Statistics about the current world state."""

    tick: int = 0
    agents_alive: int = 0
    deaths_this_tick: int = 0
    total_deaths: int = 0
    total_resource: int = 0
    resource_consumed_this_tick: int = 0
    # Average over alive agents
    avg_health: float = 0.0


class StatsHistory:
    """Tracks statistics over time for charting."""

    def __init__(self, max_length: int = 300):
        """
        Initialize stats history.

        Args:
            max_length: Maximum number of ticks to keep in history
        """
        self.max_length = max_length
        self.population: deque[int] = deque(maxlen=max_length)
        self.total_resource: deque[int] = deque(maxlen=max_length)
        self.avg_health: deque[float] = deque(maxlen=max_length)
        self.deaths_per_tick: deque[int] = deque(maxlen=max_length)

    def record(self, stats: WorldStats) -> None:
        """Record current stats to history."""
        self.population.append(stats.agents_alive)
        self.total_resource.append(stats.total_resource)
        self.avg_health.append(stats.avg_health)
        self.deaths_per_tick.append(stats.deaths_this_tick)

    def __len__(self) -> int:
        return len(self.population)


class World:
    """
    The simulation world containing all cells and agents.

    Manages:
    - The fixed ``width * height`` cell grid, keyed by row-major cell id
    - The agent population, keyed by agent id; agents point at cells by id
    - 4-neighbour adjacency without wraparound
    - The per-tick update: regeneration, allocation, movement, metabolism
      and death feedback, in cell-id then agent-id order

    Cells and agents are only mutated from inside ``update()``. Callers get
    read-only views between ticks.
    """

    def __init__(
        self,
        width: int,
        height: int,
        cells: Iterable[Cell],
        agents: Iterable[Agent],
        seed: int | None = None,
    ):
        """
        Initialize the world from explicit cells and agents.

        Args:
            width: Grid width in cells
            height: Grid height in cells
            cells: Exactly one cell for every id in ``range(width * height)``
            agents: Agents with unique ids; alive agents must sit on a valid cell
            seed: Seed the world was sampled from, if any (informational)

        Raises:
            ConfigError: If the grid or the population is inconsistent
        """
        if width < 1 or height < 1:
            raise ConfigError(f"grid must be at least 1x1, got {width}x{height}")

        self.width = width
        self.height = height
        self.seed = seed

        cells_by_id: dict[int, Cell] = {}
        for cell in cells:
            if cell.id in cells_by_id:
                raise ConfigError(f"duplicate cell id {cell.id}")
            cells_by_id[cell.id] = cell
        if sorted(cells_by_id) != list(range(width * height)):
            raise ConfigError(
                f"cells must cover ids 0..{width * height - 1} exactly for a {width}x{height} grid"
            )

        agents_by_id: dict[int, Agent] = {}
        for agent in agents:
            if agent.id in agents_by_id:
                raise ConfigError(f"duplicate agent id {agent.id}")
            if agent.is_alive and agent.cid not in cells_by_id:
                raise ConfigError(f"agent {agent.id} sits on unknown cell {agent.cid}")
            agents_by_id[agent.id] = agent

        # Dict order is the iteration order of the tick
        self._cells = {cid: cells_by_id[cid] for cid in sorted(cells_by_id)}
        self._agents = {aid: agents_by_id[aid] for aid in sorted(agents_by_id)}
        self._tick = 0

        # Statistics
        self.stats = WorldStats()
        self.stats_history = StatsHistory()
        self._refresh_stats(consumed=0, deaths=0)

    @classmethod
    def from_config(
        cls,
        config: WorldConfig,
        rng: int | random.Random | None = None,
    ) -> World:
        """
        Build a randomized world by uniform sampling within the config ranges.

        Args:
            config: Ranges for the grid, cells and agents
            rng: Seed, a ready ``random.Random``, or None for a fresh seed

        Returns:
            The new world, at tick 0
        """
        seed: int | None
        if isinstance(rng, random.Random):
            seed = None
            generator = rng
        else:
            # Seeded random number generator for reproducibility
            seed = rng if rng is not None else random.randint(0, 2**31 - 1)
            generator = random.Random(seed)

        num_cells = config.width * config.height
        cells = [
            Cell(
                id=cid,
                cur_resource=generator.randint(config.min_resource, config.max_resource),
                max_resource=config.max_resource,
                regen_rate=generator.randint(config.min_regen_rate, config.max_regen_rate),
                max_regen_rate=config.max_regen_rate,
            )
            for cid in range(num_cells)
        ]

        num_agents = generator.randint(config.min_agents, config.max_agents)
        agents = [
            Agent(
                id=aid,
                cid=generator.randrange(num_cells),
                consumption_rate=generator.randint(
                    config.min_consumption_rate, config.max_consumption_rate
                ),
                health_point=config.agent_hp,
            )
            for aid in range(num_agents)
        ]

        world = cls(config.width, config.height, cells, agents, seed=seed)
        logger.info(
            "Built %dx%d world with %d agents (seed=%s)",
            config.width, config.height, num_agents, seed,
        )
        return world

    # --- read-only accessors -------------------------------------------------

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def tick(self) -> int:
        """Number of completed ticks."""
        return self._tick

    @property
    def cells(self) -> Mapping[int, Cell]:
        return MappingProxyType(self._cells)

    @property
    def agents(self) -> Mapping[int, Agent]:
        return MappingProxyType(self._agents)

    def cell(self, cid: int) -> Cell:
        return self._cells[cid]

    def agent(self, aid: int) -> Agent:
        return self._agents[aid]

    @property
    def alive_count(self) -> int:
        return sum(1 for agent in self._agents.values() if agent.is_alive)

    @property
    def total_resource(self) -> int:
        return sum(cell.cur_resource for cell in self._cells.values())

    def coords(self, cid: int) -> tuple[int, int]:
        """Get the ``(x, y)`` grid position of a cell id."""
        if cid not in self._cells:
            raise KeyError(cid)
        return (cid % self.width, cid // self.width)

    def cell_id(self, x: int, y: int) -> int:
        """Get the cell id at grid position ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise KeyError((x, y))
        return y * self.width + x

    def neighbors(self, cid: int) -> list[Neighbor | None]:
        """
        Get the resource readings around a cell.

        Returns:
            Four entries in up, down, left, right order; None past the grid edge
        """
        x, y = self.coords(cid)
        offsets = {
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }

        readings: list[Neighbor | None] = []
        for direction in Direction:
            dx, dy = offsets[direction]
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                ncid = ny * self.width + nx
                readings.append(Neighbor(ncid, self._cells[ncid].cur_resource))
            else:
                readings.append(None)
        return readings

    def agents_at(self, cid: int) -> list[Agent]:
        """Get the alive agents on a cell, in agent-id order."""
        return [a for a in self._agents.values() if a.is_alive and a.cid == cid]

    def resource_grid(self) -> np.ndarray:
        """Get a ``(height, width)`` array copy of every cell's current resource."""
        grid = np.fromiter(
            (cell.cur_resource for cell in self._cells.values()),
            dtype=np.int64,
            count=len(self._cells),
        )
        return grid.reshape(self.height, self.width)

    def fullness_grid(self) -> np.ndarray:
        """Get a ``(height, width)`` array of every cell's ``fullness`` (0-1)."""
        grid = np.fromiter(
            (cell.fullness for cell in self._cells.values()),
            dtype=np.float64,
            count=len(self._cells),
        )
        return grid.reshape(self.height, self.width)

    # --- simulation ----------------------------------------------------------

    def update(self) -> None:
        """
        Advance the simulation by one tick.

        This:
        1. Regenerates every cell
        2. Splits each cell's resource equally among the alive agents on it
        3. Lets each hungry agent move, then metabolize; deaths feed back into cells
        4. Refreshes statistics
        """
        for cell in self._cells.values():
            cell.regenerate()

        consumed = self._allocate()
        deaths = self._step_agents()

        self._tick += 1
        self._refresh_stats(consumed=consumed, deaths=deaths)

    def _allocate(self) -> int:
        """Split cell resource among occupants. Returns the total consumed."""
        occupants: dict[int, list[Agent]] = {}
        for agent in self._agents.values():
            if agent.is_alive:
                occupants.setdefault(agent.cid, []).append(agent)

        consumed = 0
        for cid, cell in self._cells.items():
            agents = occupants.get(cid)
            if not agents:
                continue

            base_share = cell.cur_resource // len(agents)
            leftover = sum(agent.retrieve_resource(base_share) for agent in agents)
            # Agents are charged only what they accepted; the rest stays in the cell
            consumed += cell.resource_consumption(base_share * len(agents) - leftover)

        return consumed

    def _step_agents(self) -> int:
        """Move and metabolize every alive agent. Returns the number of deaths."""
        deaths = 0
        for agent in self._agents.values():
            if not agent.is_alive:
                continue

            origin = agent.cid
            if agent.is_hungry:
                target = agent.decide_move(self.neighbors(origin))
                if target is not None:
                    agent.move_to(target)
                    if not agent.is_alive:
                        # Died in transit: the cell it left gets the feedback
                        self._on_death(agent, origin, cause="movement")
                        deaths += 1
                        continue

            # Metabolism still sees the allocation harvested at the origin cell
            agent.update()
            if not agent.is_alive:
                self._on_death(agent, agent.cid, cause="starvation")
                deaths += 1

        return deaths

    def _on_death(self, agent: Agent, cid: int, cause: str) -> None:
        self._cells[cid].apply_death_feedback()
        logger.debug("Agent %d died of %s on cell %d", agent.id, cause, cid)

    def _refresh_stats(self, consumed: int, deaths: int) -> None:
        alive = [agent for agent in self._agents.values() if agent.is_alive]

        self.stats.tick = self._tick
        self.stats.agents_alive = len(alive)
        self.stats.deaths_this_tick = deaths
        self.stats.total_deaths += deaths
        self.stats.total_resource = self.total_resource
        self.stats.resource_consumed_this_tick = consumed
        if alive:
            self.stats.avg_health = sum(a.health_point for a in alive) / len(alive)
        else:
            self.stats.avg_health = 0.0

        # Record to history
        self.stats_history.record(self.stats)
