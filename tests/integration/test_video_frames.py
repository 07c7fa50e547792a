"""Tests für das Lesen einzelner Frames mit OpenCV."""

import cv2
import numpy as np
import pytest

from frame_accent.analysis.extractor import extract_from_video_frame
from frame_accent.analysis.pixel_source import VideoFrameSource
from frame_accent.color.color_math import rgb_to_hsl
from frame_accent.utils.video_utils import open_video, read_video_frame, resolve_frame_index


@pytest.fixture
def clip_path(tmp_path):
    """Kurzes MJPG-Video: 10 Frames, erst rot, dann blau (BGR)."""
    path = tmp_path / "clip.avi"
    writer = cv2.VideoWriter(str(path), cv2.VideoWriter_fourcc(*"MJPG"), 10, (64, 48))
    if not writer.isOpened():
        pytest.skip("OpenCV build cannot write MJPG")
    for index in range(10):
        frame = np.zeros((48, 64, 3), dtype=np.uint8)
        frame[:, :] = (0, 0, 220) if index < 5 else (220, 0, 0)
        writer.write(frame)
    writer.release()
    return path


class TestResolveFrameIndex:
    @pytest.mark.parametrize(
        "position,expected",
        [("start", 0), ("middle", 5), ("end", 9), (3, 3), (-4, 0), (99, 9)],
    )
    def test_positions(self, position, expected):
        assert resolve_frame_index(position, 10) == expected

    def test_empty_video(self):
        assert resolve_frame_index("end", 0) == 0
        assert resolve_frame_index("middle", 0) == 0

    def test_unknown_position(self):
        with pytest.raises(ValueError):
            resolve_frame_index("somewhere", 10)


class TestPathValidation:
    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("x")
        with pytest.raises(ValueError):
            read_video_frame(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_video_frame(tmp_path / "missing.mp4")

    def test_empty_path(self):
        with pytest.raises(ValueError):
            with open_video(""):
                pass


def test_unreadable_video_returns_none(tmp_path):
    path = tmp_path / "garbage.mp4"
    path.write_bytes(b"\x00" * 128)
    assert read_video_frame(path) is None


@pytest.mark.parametrize("position,expected_hue", [("start", 0), ("end", 240)])
def test_frame_to_accent_color(clip_path, position, expected_hue):
    frame = read_video_frame(clip_path, position)
    assert frame is not None and frame.shape == (48, 64, 3)

    color = extract_from_video_frame(VideoFrameSource.from_bgr_frame(frame))
    hue, _, _ = rgb_to_hsl(*color.rgb)
    assert min(abs(hue - expected_hue), 360 - abs(hue - expected_hue)) <= 15
