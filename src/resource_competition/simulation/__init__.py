"""Simulation module - pure logic, no rendering."""

from .agent import MOVEMENT_COST, Agent, Direction, Neighbor
from .cell import DEATH_REGEN_BONUS, DEATH_RESOURCE_BOOST, Cell
from .errors import ConfigError, NotAliveError, NotEnoughResourcesError, SimulationError
from .protocols import Updatable
from .world import StatsHistory, World, WorldStats

__all__ = [
    "DEATH_REGEN_BONUS",
    "DEATH_RESOURCE_BOOST",
    "MOVEMENT_COST",
    "Agent",
    "Cell",
    "ConfigError",
    "Direction",
    "Neighbor",
    "NotAliveError",
    "NotEnoughResourcesError",
    "SimulationError",
    "StatsHistory",
    "Updatable",
    "World",
    "WorldStats",
]
