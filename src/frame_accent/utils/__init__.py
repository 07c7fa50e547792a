"""Utility-Module für frame_accent."""

from .logger import get_logger, setup_logging
from .video_utils import open_video, read_video_frame

__all__ = [
    "get_logger",
    "setup_logging",
    "open_video",
    "read_video_frame",
]
