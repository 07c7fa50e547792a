"""
Video Utility Functions für frame_accent

Context managers and helpers for safe video handling.
Ensures VideoCapture resources are properly released and that only
plausible video files reach OpenCV.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

import cv2
import numpy as np

logger = logging.getLogger(__name__)

# Erlaubte Video-Dateierweiterungen
ALLOWED_VIDEO_EXTENSIONS = {".mp4", ".avi", ".mov", ".mkv", ".webm", ".m4v", ".wmv", ".flv"}

FRAME_POSITIONS = ("start", "middle", "end")


def _validate_video_path(video_path: str | Path) -> Path:
    """
    Validiert Video-Pfad (Extension, Existenz, reguläre Datei).

    Raises:
        ValueError: Bei ungültigem Pfad oder Extension
        FileNotFoundError: Wenn Datei nicht existiert
    """
    if not video_path:
        raise ValueError("Video path cannot be empty")

    path = Path(video_path).resolve()

    if path.suffix.lower() not in ALLOWED_VIDEO_EXTENSIONS:
        raise ValueError(
            f"Invalid video extension: {path.suffix}. "
            f"Allowed: {', '.join(sorted(ALLOWED_VIDEO_EXTENSIONS))}"
        )

    if not path.exists():
        raise FileNotFoundError(f"Video file not found: {path}")

    if not path.is_file():
        raise ValueError(f"Path is not a file: {path}")

    return path


@contextmanager
def open_video(
    video_path: str | Path, validate: bool = True
) -> Generator[cv2.VideoCapture, None, None]:
    """
    Context manager for opening video files safely.

    Args:
        video_path: Path to video file
        validate: If True, validates path and extension (default: True)

    Yields:
        cv2.VideoCapture object

    Raises:
        ValueError: If path validation fails
        FileNotFoundError: If video file doesn't exist

    Usage:
        with open_video(video_path) as cap:
            if cap.isOpened():
                ret, frame = cap.read()
    """
    if validate:
        try:
            video_path = _validate_video_path(video_path)
        except (ValueError, FileNotFoundError) as e:
            logger.error(f"Video path validation failed: {e}")
            raise

    cap = cv2.VideoCapture(str(video_path))
    try:
        if not cap.isOpened():
            logger.warning(f"Could not open video: {Path(video_path).name}")
        yield cap
    finally:
        cap.release()


def resolve_frame_index(position: str | int, frame_count: int) -> int:
    """Maps 'start' / 'middle' / 'end' (or an explicit index) to a valid frame index."""
    last = max(0, frame_count - 1)
    if isinstance(position, int):
        return min(max(0, position), last)
    if position == "start":
        return 0
    if position == "end":
        return last
    if position == "middle":
        return frame_count // 2 if frame_count > 0 else 0
    raise ValueError(f"Unknown frame position: {position!r}. Allowed: {', '.join(FRAME_POSITIONS)}")


def read_video_frame(video_path: str | Path, position: str | int = "middle") -> np.ndarray | None:
    """
    Liest einen einzelnen Frame aus einem Video.

    Args:
        video_path: Pfad zum Video
        position: 'start', 'middle', 'end' oder Frame-Index

    Returns:
        BGR-Frame als numpy array oder None wenn nicht lesbar
    """
    with open_video(video_path) as cap:
        if not cap.isOpened():
            return None

        frame_count = int(cap.get(cv2.CAP_PROP_FRAME_COUNT))
        frame_idx = resolve_frame_index(position, frame_count)

        cap.set(cv2.CAP_PROP_POS_FRAMES, frame_idx)
        ret, frame = cap.read()

        return frame if ret and frame is not None else None
