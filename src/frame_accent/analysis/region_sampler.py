"""
Region Sampler - wählt die zu analysierenden Teilbereiche des Canvas.

Vermeidet Letterboxing, Himmel/Hintergrund-Dominanz und die Vermischung
zweier Motive. Liest selbst keine Pixel, sondern liefert nur
Region-Deskriptoren in Canvas-Koordinaten.

Priorität:
1. Hochkant-Video  -> Center-Crop 60% x 80%
2. Split-View      -> linke/rechte Hälfte, jeweils unteres Drittel
3. Unteres Drittel -> Band von 67% bis 100% der Höhe
4. Sonst           -> gesamter Canvas
"""

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from ..core.constants import (
    LOWER_THIRD_START,
    PORTRAIT_CENTER_HEIGHT,
    PORTRAIT_CENTER_WIDTH,
    PORTRAIT_MAX_ASPECT,
    SPLIT_VIEW_MIN_ASPECT,
)
from .options import ExtractionOptions


class RegionKind(Enum):
    FULL = "full"
    LOWER_THIRD = "lower_third"
    PORTRAIT_CENTER = "portrait_center"
    SPLIT_LEFT = "split_left"
    SPLIT_RIGHT = "split_right"


@dataclass(frozen=True)
class Region:
    """Rechteck (offset_x, offset_y, width, height) im Sampling-Canvas."""

    offset_x: int
    offset_y: int
    width: int
    height: int
    kind: RegionKind = RegionKind.FULL

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def crop(self, canvas: np.ndarray) -> np.ndarray:
        """Ausschnitt des Canvas als View (keine Kopie)."""
        return canvas[
            self.offset_y : self.offset_y + self.height,
            self.offset_x : self.offset_x + self.width,
        ]

    def as_tuple(self) -> tuple[int, int, int, int]:
        return self.offset_x, self.offset_y, self.width, self.height


def _lower_third_top(size: int) -> int:
    return math.floor(size * LOWER_THIRD_START)


def portrait_center_region(size: int) -> Region:
    width = math.floor(size * PORTRAIT_CENTER_WIDTH)
    height = math.floor(size * PORTRAIT_CENTER_HEIGHT)
    return Region(
        offset_x=(size - width) // 2,
        offset_y=(size - height) // 2,
        width=width,
        height=height,
        kind=RegionKind.PORTRAIT_CENTER,
    )


def split_view_regions(size: int) -> tuple[Region, Region]:
    half = size // 2
    top = _lower_third_top(size)
    band = size - top
    return (
        Region(0, top, half, band, RegionKind.SPLIT_LEFT),
        Region(half, top, half, band, RegionKind.SPLIT_RIGHT),
    )


def lower_third_region(size: int) -> Region:
    top = _lower_third_top(size)
    return Region(0, top, size, size - top, RegionKind.LOWER_THIRD)


def full_region(size: int) -> Region:
    return Region(0, 0, size, size, RegionKind.FULL)


def select_regions(
    aspect_ratio: float, is_video: bool, options: ExtractionOptions
) -> tuple[Region, ...]:
    """
    Bestimmt die Regionen für eine Quelle.

    Args:
        aspect_ratio: Breite / Höhe der Original-Quelle
        is_video: True für Video-Frames
        options: Extraktions-Optionen (Flags + sample_size)

    Returns:
        Eine Region, oder zwei (links, rechts) im Split-View-Fall
    """
    size = options.sample_size

    if options.analyze_portrait_video and is_video and aspect_ratio < PORTRAIT_MAX_ASPECT:
        return (portrait_center_region(size),)

    if options.handle_split_view and aspect_ratio > SPLIT_VIEW_MIN_ASPECT:
        return split_view_regions(size)

    if options.sample_lower_third:
        return (lower_third_region(size),)

    return (full_region(size),)
