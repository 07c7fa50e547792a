"""
frame_accent - Akzentfarben für Foto/Video-Slideshows

Leitet aus dem aktuell angezeigten Bild oder Video-Frame eine
repräsentative Akzentfarbe plus eine lesbare Text-/Overlay-Farbe ab.

Usage:
    from frame_accent import ExtractionOptions, extract_from_video_frame, build_theme

    color = extract_from_video_frame(frame_source, ExtractionOptions(fallback_color="#336699"))
    theme = build_theme(color)
"""

from .analysis import (
    ColorExtractor,
    ExtractedColor,
    ExtractionOptions,
    ImageLoader,
    PixelSource,
    VideoFrameSource,
    create_fallback_color,
    extract_color_from_image_url,
    extract_dominant_color,
    extract_from_image_source,
    extract_from_video_frame,
)
from .theming import (
    ThemeColors,
    build_theme,
    generate_complementary_color,
    generate_complementary_text_color,
    generate_text_color,
    get_high_contrast_color,
)

__version__ = "0.1.0"

__all__ = [
    "ColorExtractor",
    "ExtractedColor",
    "ExtractionOptions",
    "ImageLoader",
    "PixelSource",
    "VideoFrameSource",
    "create_fallback_color",
    "extract_dominant_color",
    "extract_from_image_source",
    "extract_from_video_frame",
    "extract_color_from_image_url",
    "ThemeColors",
    "build_theme",
    "generate_text_color",
    "generate_complementary_color",
    "generate_complementary_text_color",
    "get_high_contrast_color",
]
