"""Color definitions for the renderer."""

import numpy as np

# Background
BG_DARK = (28, 28, 32)
BG_SIDEBAR = (38, 38, 45)

# Cells - blend from depleted to full
CELL_EMPTY = (30, 80, 120)
CELL_FULL = (110, 220, 60)
CELL_BORDER = (50, 50, 58)

# Agents - color based on remaining health
AGENT_HEALTHY = (255, 255, 255)
AGENT_DYING = (255, 0, 0)

# UI
TEXT_PRIMARY = (240, 240, 245)
TEXT_SECONDARY = (160, 160, 170)
TEXT_ACCENT = (100, 200, 255)
DIVIDER = (60, 60, 70)

# Sidebar controls
BUTTON_BG = (55, 55, 65)
BUTTON_HOVER = (70, 70, 82)
BUTTON_PRESSED = (45, 45, 52)
BUTTON_SELECTED = TEXT_ACCENT
BUTTON_BORDER = (80, 80, 92)

# Stat charts
CHART_BG = (32, 32, 38)
CHART_POPULATION = (240, 240, 245)
CHART_RESOURCE = CELL_FULL
CHART_HEALTH = (255, 120, 120)
CHART_DEATHS = (255, 170, 60)


def lerp_color(
    color1: tuple[int, int, int],
    color2: tuple[int, int, int],
    t: float,
) -> tuple[int, int, int]:
    """Linearly interpolate between two colors."""
    t = max(0.0, min(1.0, t))
    return (
        int(color1[0] + (color2[0] - color1[0]) * t),
        int(color1[1] + (color2[1] - color1[1]) * t),
        int(color1[2] + (color2[2] - color1[2]) * t),
    )


def get_cell_colors(fullness: np.ndarray) -> np.ndarray:
    """
    Map a grid of cell fullness ratios to RGB colors.

    Args:
        fullness: (height, width) array of stored resource over capacity

    Returns:
        (height, width, 3) uint8 array blending from empty to full
    """
    t = np.clip(fullness, 0.0, 1.0)[..., np.newaxis]
    empty = np.array(CELL_EMPTY, dtype=np.float64)
    full = np.array(CELL_FULL, dtype=np.float64)
    return (empty + (full - empty) * t).astype(np.uint8)


def get_agent_color(health_point: int, max_health: int) -> tuple[int, int, int]:
    """Get the color for an agent; fades from white to red as health drops."""
    if max_health <= 0:
        return AGENT_DYING
    return lerp_color(AGENT_DYING, AGENT_HEALTHY, health_point / max_health)
