"""
Core module for frame_accent.

Contains fundamental components like configuration, constants and exceptions.
"""

from .exceptions import (
    # Configuration
    ConfigurationError,
    EmptyRegionError,
    # Extraction
    ExtractionError,
    # Base
    FrameAccentError,
    InvalidFallbackError,
    LoadFailureError,
    SourceNotReadyError,
    # Utility
    wrap_exception,
)

__all__ = [
    "FrameAccentError",
    "ConfigurationError",
    "ExtractionError",
    "SourceNotReadyError",
    "LoadFailureError",
    "EmptyRegionError",
    "InvalidFallbackError",
    "wrap_exception",
]
