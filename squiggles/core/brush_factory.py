"""
Brush generation for captured strokes.

Line strokes get a fixed solid colour. Fill strokes get a two-stop linear
gradient with random pastel endpoints spanning the stroke's bounding box.
"""

import logging
import os
import random
from typing import Optional, Sequence

from ..config import Config
from ..utils.color_utils import random_pastel, rgb_to_hex
from .stroke import DrawMode, GradientBrush, GradientStop, Point, SolidBrush, Brush

logger = logging.getLogger(__name__)


class BrushFactory:
    """
    Creates brush descriptors for pending and finalized strokes.

    Owns its random generator. Without an explicit seed the generator is
    seeded once from os.urandom.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = int.from_bytes(os.urandom(8), 'little')
        self._rng = random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def pending_brush(self) -> SolidBrush:
        """Brush for the capture still in progress."""
        return SolidBrush(*Config.PENDING_COLOR)

    def line_brush(self) -> SolidBrush:
        """Brush for finalized LINE strokes."""
        return SolidBrush(*Config.LINE_COLOR)

    def fill_brush(self, points: Sequence[Point]) -> GradientBrush:
        """Pastel gradient across the bounding box of points."""
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        x0, y0 = (min(xs), min(ys)) if points else (0.0, 0.0)
        x1, y1 = (max(xs), max(ys)) if points else (0.0, 0.0)

        alpha = Config.GRADIENT_ALPHA
        start = random_pastel(self._rng, Config.PASTEL_MIN, Config.PASTEL_MAX)
        end = random_pastel(self._rng, Config.PASTEL_MIN, Config.PASTEL_MAX)
        logger.debug(f"Fill gradient {rgb_to_hex(start)} -> {rgb_to_hex(end)}")

        return GradientBrush(
            x0, y0, x1, y1,
            stops=(
                GradientStop(0.0, *start, alpha),
                GradientStop(1.0, *end, alpha),
            )
        )

    def brush_for(self, mode: DrawMode, points: Sequence[Point]) -> Brush:
        """Fresh brush for a stroke being finalized in the given mode."""
        if mode == DrawMode.FILL:
            return self.fill_brush(points)
        return self.line_brush()


__all__ = ['BrushFactory']
