"""Color conversion utilities

Helpers for normalized RGB (0-1 range) colours used by the brushes.
"""

import random
from typing import Tuple


def clamp_unit(value: float) -> float:
    """Clamp a channel value into the 0-1 range"""
    return max(0.0, min(1.0, value))


def rgb_to_hex(rgb: Tuple[float, ...]) -> str:
    """Convert RGB tuple (0-1 range) to hex color string

    Extra channels (alpha) are ignored.

    Example:
        >>> rgb_to_hex((1.0, 0.5, 0.0))
        '#ff7f00'
    """
    return '#{:02x}{:02x}{:02x}'.format(
        int(clamp_unit(rgb[0]) * 255),
        int(clamp_unit(rgb[1]) * 255),
        int(clamp_unit(rgb[2]) * 255)
    )


def random_pastel(
    rng: random.Random,
    low: float,
    high: float
) -> Tuple[float, float, float]:
    """Draw an RGB colour with every channel uniform in [low, high]

    Args:
        rng: Random generator to draw from
        low: Lower channel bound (0-1)
        high: Upper channel bound (0-1)

    Returns:
        RGB tuple (0.0-1.0 range)
    """
    if low > high:
        raise ValueError(f"Invalid channel range: {low} > {high}")
    return (
        rng.uniform(low, high),
        rng.uniform(low, high),
        rng.uniform(low, high),
    )


__all__ = ['clamp_unit', 'rgb_to_hex', 'random_pastel']
