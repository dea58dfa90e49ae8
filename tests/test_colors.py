"""
Tests for renderer/colors.py

Pure color ramps used by the viewer.
"""

import numpy as np

from resource_competition.renderer import colors


class TestLerpColor:
    def test_endpoints_and_clamp(self):
        assert colors.lerp_color((0, 0, 0), (100, 200, 50), 0.0) == (0, 0, 0)
        assert colors.lerp_color((0, 0, 0), (100, 200, 50), 1.0) == (100, 200, 50)
        assert colors.lerp_color((0, 0, 0), (100, 200, 50), 2.0) == (100, 200, 50)
        assert colors.lerp_color((0, 0, 0), (100, 200, 50), 0.5) == (50, 100, 25)


class TestCellColors:
    def test_shape_and_endpoints(self):
        grid = np.array([[0.0, 1.0], [0.5, 1.5]])
        rgb = colors.get_cell_colors(grid)
        assert rgb.shape == (2, 2, 3)
        assert rgb.dtype == np.uint8
        assert tuple(rgb[0, 0]) == colors.CELL_EMPTY
        assert tuple(rgb[0, 1]) == colors.CELL_FULL
        assert tuple(rgb[1, 0]) == (70, 150, 90)
        # clipped at full
        assert tuple(rgb[1, 1]) == colors.CELL_FULL

    def test_colored_by_own_capacity(self, make_world):
        small = make_world(2, 1, [5, 5], max_resource=5)
        large = make_world(2, 1, [5, 5], max_resource=100)
        assert all(tuple(px) == colors.CELL_FULL for px in colors.get_cell_colors(small.fullness_grid())[0])
        assert tuple(colors.get_cell_colors(large.fullness_grid())[0, 0]) != colors.CELL_FULL

    def test_zero_capacity(self, make_world):
        world = make_world(3, 1, [0, 0, 0], max_resource=0)
        rgb = colors.get_cell_colors(world.fullness_grid())
        assert all(tuple(px) == colors.CELL_EMPTY for px in rgb[0])


class TestAgentColor:
    def test_full_and_empty_health(self):
        assert colors.get_agent_color(10, 10) == colors.AGENT_HEALTHY
        assert colors.get_agent_color(0, 10) == colors.AGENT_DYING
        assert colors.get_agent_color(3, 0) == colors.AGENT_DYING
