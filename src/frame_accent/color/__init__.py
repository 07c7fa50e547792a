"""Farbraum-Funktionen für frame_accent."""

from .color_math import (
    as_rgb,
    contrast_ratio,
    hex_to_rgb,
    hsl_to_rgb,
    is_dark_color,
    luminance,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
    saturation,
)

__all__ = [
    "luminance",
    "saturation",
    "contrast_ratio",
    "is_dark_color",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_rgb",
    "rgb_to_hex",
    "normalize_hex",
    "as_rgb",
]
