"""Shared test fixtures."""

from collections.abc import Sequence

import pytest

from resource_competition.config import WorldConfig
from resource_competition.simulation import Agent, Cell, World


def build_cells(
    resources: Sequence[int],
    max_resource: int = 100,
    regen_rate: int = 0,
    max_regen_rate: int = 5,
) -> list[Cell]:
    """One cell per entry, ids in row-major order."""
    return [
        Cell(cid, resource, max_resource, regen_rate, max_regen_rate)
        for cid, resource in enumerate(resources)
    ]


@pytest.fixture
def make_world():
    """Factory for small hand-built worlds."""

    def _make(
        width: int,
        height: int,
        resources: Sequence[int],
        agents: Sequence[Agent] = (),
        **cell_kwargs,
    ) -> World:
        return World(width, height, build_cells(resources, **cell_kwargs), agents)

    return _make


@pytest.fixture
def world_config() -> WorldConfig:
    return WorldConfig(
        width=8,
        height=6,
        min_resource=0,
        max_resource=12,
        min_regen_rate=0,
        max_regen_rate=3,
        min_agents=5,
        max_agents=15,
        min_consumption_rate=1,
        max_consumption_rate=4,
        agent_hp=8,
    )
