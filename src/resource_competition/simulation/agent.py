"""Agent entity - a mobile consumer living on the cell grid."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import NamedTuple

from .errors import ConfigError, NotAliveError

MOVEMENT_COST = 1
STARVATION_COST = 1


class Direction(Enum):
    """Neighbour directions, in the order agents scan them."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class Neighbor(NamedTuple):
    """Resource reading of an adjacent cell."""

    cid: int
    resource: int


class Agent:
    """
    A living agent in the simulation.

    Agents have:
    - The id of the cell they occupy (a key into the world's cells, not the cell itself)
    - A fixed consumption rate needed each tick
    - The resource allocated to them this tick
    - Health points that only ever go down
    - An alive flag that turns false once, when health reaches 0

    Dead agents are inert: every mutating operation raises ``NotAliveError``.
    """

    __slots__ = ("_id", "_cid", "_consumption_rate", "_allocated_resource", "_health_point", "_alive")

    def __init__(
        self,
        id: int,
        cid: int,
        consumption_rate: int,
        health_point: int,
        allocated_resource: int = 0,
    ):
        """
        Initialize an agent.

        Args:
            id: Unique agent id
            cid: Id of the starting cell
            consumption_rate: Resource needed per tick to avoid losing health
            health_point: Starting health; an agent created with 0 is dead
            allocated_resource: Resource already granted for the current tick
        """
        if min(consumption_rate, health_point, allocated_resource) < 0:
            raise ConfigError(f"agent {id}: rates and health must be non-negative")

        self._id = id
        self._cid = cid
        self._consumption_rate = consumption_rate
        self._allocated_resource = allocated_resource
        self._health_point = health_point
        self._alive = health_point > 0

    def __repr__(self) -> str:
        state = "alive" if self._alive else "dead"
        return (
            f"Agent(id={self._id}, cid={self._cid}, hp={self._health_point}, "
            f"allocated={self._allocated_resource}/{self._consumption_rate}, {state})"
        )

    @property
    def id(self) -> int:
        return self._id

    @property
    def cid(self) -> int:
        return self._cid

    @property
    def consumption_rate(self) -> int:
        return self._consumption_rate

    @property
    def allocated_resource(self) -> int:
        return self._allocated_resource

    @property
    def health_point(self) -> int:
        return self._health_point

    @property
    def is_alive(self) -> bool:
        return self._alive

    @property
    def is_hungry(self) -> bool:
        """Check if this tick's allocation falls short of the consumption rate."""
        return self._allocated_resource < self._consumption_rate

    def _ensure_alive(self) -> None:
        if not self._alive:
            raise NotAliveError(self._id)

    def _lose_health(self, amount: int) -> None:
        self._health_point = max(0, self._health_point - amount)
        if self._health_point == 0:
            self._alive = False

    def retrieve_resource(self, offered: int) -> int:
        """
        Harvest from an offered share.

        The agent keeps at most its consumption rate as this tick's allocation.

        Args:
            offered: Resource offered to the agent

        Returns:
            The unused remainder, to be left in the cell
        """
        self._ensure_alive()
        accepted = min(offered, self._consumption_rate)
        self._allocated_resource = accepted
        return offered - accepted

    def decide_move(self, neighbors: Sequence[Neighbor | None]) -> int | None:
        """
        Pick the neighbouring cell to move to.

        Greedy: a hungry agent goes to the richest neighbour without comparing
        it to its current cell. Empty neighbours are never targets. Ties go
        to the last candidate in up/down/left/right order, so a four-way tie
        always resolves to the right.

        Args:
            neighbors: Up, down, left and right readings, None past the grid edge

        Returns:
            The chosen cell id, or None if the agent is fed or nothing qualifies
        """
        if not self.is_hungry:
            return None

        best: Neighbor | None = None
        for neighbor in neighbors:
            if neighbor is None or neighbor.resource <= 0:
                continue
            if best is None or neighbor.resource >= best.resource:
                best = neighbor

        return best.cid if best is not None else None

    def move_to(self, new_cid: int) -> None:
        """Move to another cell, paying the movement cost in health."""
        self._ensure_alive()
        self._cid = new_cid
        self._lose_health(MOVEMENT_COST)

    def update(self) -> None:
        """
        Metabolize this tick's allocation.

        An underfed agent loses health. The allocation is reset either way.
        """
        self._ensure_alive()
        if self.is_hungry:
            self._lose_health(STARVATION_COST)
        self._allocated_resource = 0
