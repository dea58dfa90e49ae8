"""Centralized configuration for the simulation."""

from dataclasses import dataclass, fields

from .simulation.errors import ConfigError


@dataclass
class WorldConfig:
    """
    Ranges a world is sampled from.

    Every ``min_*``/``max_*`` pair is an inclusive range sampled uniformly.
    There are no defaults: callers state every range explicitly.
    """

    # Grid size in cells
    width: int
    height: int
    # Initial resource per cell; max_resource is also every cell's capacity
    min_resource: int
    max_resource: int
    # Initial regen per tick; max_regen_rate is also every cell's ceiling
    min_regen_rate: int
    max_regen_rate: int
    # Initial population
    min_agents: int
    max_agents: int
    # Resource each agent needs per tick
    min_consumption_rate: int
    max_consumption_rate: int
    # Starting health of every agent
    agent_hp: int

    def __post_init__(self) -> None:
        """Validate the ranges."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{f.name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigError(f"{f.name} must be non-negative, got {value}")

        if self.width < 1 or self.height < 1:
            raise ConfigError(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if self.agent_hp < 1:
            raise ConfigError(f"agent_hp must be at least 1, got {self.agent_hp}")

        for name in ("resource", "regen_rate", "agents", "consumption_rate"):
            low = getattr(self, f"min_{name}")
            high = getattr(self, f"max_{name}")
            if low > high:
                raise ConfigError(f"min_{name} ({low}) exceeds max_{name} ({high})")


@dataclass
class RendererConfig:
    """Configuration for the Pygame renderer."""

    window_width: int = 1000
    window_height: int = 720
    sidebar_width: int = 280
    target_fps: int = 60
    # Seconds between ticks at 1x speed
    step_interval: float = 0.2
    cell_border: bool = True


@dataclass
class Config:
    """Main configuration container."""

    world: WorldConfig
    renderer: RendererConfig

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls(
            world=WorldConfig(
                width=20,
                height=20,
                min_resource=0,
                max_resource=20,
                min_regen_rate=0,
                max_regen_rate=2,
                min_agents=10,
                max_agents=40,
                min_consumption_rate=1,
                max_consumption_rate=5,
                agent_hp=10,
            ),
            renderer=RendererConfig(),
        )
