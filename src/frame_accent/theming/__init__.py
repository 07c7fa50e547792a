"""Theming-Ableitungen (Textfarbe, Komplementärfarben) aus einer Akzentfarbe."""

from .contrast import (
    ThemeColors,
    build_theme,
    generate_complementary_color,
    generate_complementary_text_color,
    generate_text_color,
    get_high_contrast_color,
)

__all__ = [
    "ThemeColors",
    "build_theme",
    "generate_text_color",
    "generate_complementary_color",
    "generate_complementary_text_color",
    "get_high_contrast_color",
]
