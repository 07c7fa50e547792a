"""
Farb-Extraktion für frame_accent

- PixelSource / VideoFrameSource: dekodierte Pixel plus Metadaten
- Region Sampler: welche Teilbereiche analysiert werden
- Frequency Analyzer: quantisierte Farb-Häufigkeiten
- Color Selector: dreistufige Auswahl, Split-View, Kontrast-Boost
- Extractor: öffentliche Einstiegspunkte mit Fallback-Kette
"""

from .extracted_color import ExtractedColor
from .extractor import (
    ColorExtractor,
    create_fallback_color,
    extract_color_from_image_url,
    extract_dominant_color,
    extract_from_image_source,
    extract_from_video_frame,
)
from .image_loader import ImageLoader
from .options import ExtractionOptions
from .pixel_source import PixelSource, VideoFrameSource

__all__ = [
    "ExtractedColor",
    "ExtractionOptions",
    "PixelSource",
    "VideoFrameSource",
    "ImageLoader",
    "ColorExtractor",
    "create_fallback_color",
    "extract_dominant_color",
    "extract_from_image_source",
    "extract_from_video_frame",
    "extract_color_from_image_url",
]
