"""
Tests for config.py

WorldConfig range validation and the viewer defaults.
"""

from dataclasses import replace

import pytest

from resource_competition.config import Config, RendererConfig, WorldConfig
from resource_competition.simulation import ConfigError, World


class TestWorldConfig:
    """Tests for WorldConfig validation."""

    def test_valid_config(self, world_config):
        assert world_config.width == 8
        assert world_config.agent_hp == 8

    def test_no_defaults(self):
        with pytest.raises(TypeError):
            WorldConfig()  # type: ignore[call-arg]

    def test_degenerate_ranges_allowed(self, world_config):
        config = replace(world_config, min_agents=3, max_agents=3, min_resource=4, max_resource=4)
        world = World.from_config(config, 0)
        assert len(world.agents) == 3
        assert all(cell.cur_resource == 4 for cell in world.cells.values())

    @pytest.mark.parametrize("name", ["resource", "regen_rate", "agents", "consumption_rate"])
    def test_inverted_range_rejected(self, world_config, name):
        high = getattr(world_config, f"max_{name}")
        with pytest.raises(ConfigError, match=f"min_{name}"):
            replace(world_config, **{f"min_{name}": high + 1})

    def test_empty_grid_rejected(self, world_config):
        with pytest.raises(ConfigError):
            replace(world_config, width=0)

    def test_zero_health_rejected(self, world_config):
        with pytest.raises(ConfigError):
            replace(world_config, agent_hp=0)

    def test_negative_rejected(self, world_config):
        with pytest.raises(ConfigError):
            replace(world_config, min_regen_rate=-1)

    @pytest.mark.parametrize("value", [2.5, "3", True])
    def test_non_integer_rejected(self, world_config, value):
        with pytest.raises(ConfigError):
            replace(world_config, height=value)

    def test_config_error_is_value_error(self, world_config):
        with pytest.raises(ValueError):
            replace(world_config, width=-3)


class TestConfig:
    """Tests for the Config container."""

    def test_default(self):
        config = Config.default()
        assert isinstance(config.world, WorldConfig)
        assert isinstance(config.renderer, RendererConfig)
        assert config.world.width == 20
        assert config.world.height == 20
        assert config.world.agent_hp == 10

    def test_default_builds_a_world(self):
        world = World.from_config(Config.default().world, 2024)
        assert len(world.cells) == 400
        world.update()
        assert world.tick == 1
