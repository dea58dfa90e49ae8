"""2D resource competition: cells regrow resource, agents harvest it to survive."""

from .config import Config, RendererConfig, WorldConfig
from .simulation import (
    Agent,
    Cell,
    ConfigError,
    NotAliveError,
    NotEnoughResourcesError,
    SimulationError,
    World,
)

__all__ = [
    "Agent",
    "Cell",
    "Config",
    "ConfigError",
    "NotAliveError",
    "NotEnoughResourcesError",
    "RendererConfig",
    "SimulationError",
    "World",
    "WorldConfig",
]
