"""Renderer module - visualization layer."""

from .pygame_renderer import PygameRenderer
from .ui import Control, ControlBar, SimulationMode, SpeedGroup, StatChart

__all__ = [
    "Control",
    "ControlBar",
    "PygameRenderer",
    "SimulationMode",
    "SpeedGroup",
    "StatChart",
]
