"""Exceptions raised by cells, agents and the world."""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for every error raised by the simulation engine."""


class NotAliveError(SimulationError):
    """An operation was invoked on an agent that has already died."""

    def __init__(self, agent_id: int):
        self.agent_id = agent_id
        super().__init__(f"agent {agent_id} is not alive")


class NotEnoughResourcesError(SimulationError):
    """A cell was asked for more resource than it currently holds."""

    def __init__(self, available: int, requested: int):
        self.available = available
        self.requested = requested
        super().__init__(
            f"requested {requested} resource but only {available} available"
        )


class ConfigError(ValueError, SimulationError):
    """Invalid configuration or world construction input."""
