"""
Frequency Analyzer - quantisierte Farb-Häufigkeiten einer Region.

Liest jeden 4. Pixel, verwirft transparente und (optional) fast schwarze
Samples, quantisiert jeden Kanal auf 24er-Buckets und zählt pro Bucket.
Luminanz und Sättigung werden einmal pro Bucket berechnet, nicht pro Sample.
"""

from dataclasses import dataclass

import numpy as np

from ..color.color_math import RGB, luminance, saturation
from ..core.constants import (
    ALPHA_THRESHOLD,
    BLACK_CHANNEL_THRESHOLD,
    PIXEL_STRIDE,
    QUANTIZATION_STEP,
)


@dataclass
class ColorCandidate:
    """Ein Bucket der Frequenztabelle."""

    rgb: RGB
    count: int
    luminance: float
    saturation: float

    @classmethod
    def from_rgb(cls, rgb: RGB, count: int) -> "ColorCandidate":
        return cls(rgb=rgb, count=count, luminance=luminance(*rgb), saturation=saturation(*rgb))


FrequencyTable = dict[RGB, ColorCandidate]


def sample_pixels(region: np.ndarray, ignore_black_background: bool = True) -> np.ndarray:
    """
    Liefert die verwertbaren RGB-Samples einer RGBA-Region (N x 3, uint8).

    Die Schrittweite ist fest (PIXEL_STRIDE), damit identische Buffer
    identische Tabellen ergeben.
    """
    flat = np.asarray(region, dtype=np.uint8).reshape(-1, 4)[::PIXEL_STRIDE]

    keep = flat[:, 3] >= ALPHA_THRESHOLD
    if ignore_black_background:
        keep &= ~np.all(flat[:, :3] < BLACK_CHANNEL_THRESHOLD, axis=1)

    return flat[keep, :3]


def quantize(rgb: np.ndarray) -> np.ndarray:
    """floor(channel / 24) * 24 pro Kanal."""
    return (rgb // QUANTIZATION_STEP) * QUANTIZATION_STEP


def build_frequency_table(
    region: np.ndarray, ignore_black_background: bool = True
) -> FrequencyTable:
    """
    Baut die Frequenztabelle für eine RGBA-Region.

    Args:
        region: RGBA-Pixel (H x W x 4)
        ignore_black_background: Samples mit allen Kanälen < 30 verwerfen

    Returns:
        Mapping quantisierte Farbe -> ColorCandidate (leer wenn nichts übrig bleibt)
    """
    samples = sample_pixels(region, ignore_black_background)
    if samples.size == 0:
        return {}

    keys, counts = np.unique(quantize(samples), axis=0, return_counts=True)

    table: FrequencyTable = {}
    for (r, g, b), count in zip(keys.tolist(), counts.tolist()):
        table[(r, g, b)] = ColorCandidate.from_rgb((r, g, b), count)
    return table
