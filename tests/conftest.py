import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to the Python path so that frame_accent can be imported in tests
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from frame_accent.analysis.pixel_source import PixelSource  # noqa: E402


def solid_rgba(width: int, height: int, rgb, alpha: int = 255) -> np.ndarray:
    """H x W x 4 Buffer in einer Farbe."""
    buffer = np.zeros((height, width, 4), dtype=np.uint8)
    buffer[:, :, :3] = rgb
    buffer[:, :, 3] = alpha
    return buffer


@pytest.fixture
def make_rgba():
    return solid_rgba


@pytest.fixture
def letterboxed_portrait_frame() -> PixelSource:
    """9:16 Video-Frame, aussen je 20% schwarze Balken, Mitte rot."""
    width, height = 90, 160
    buffer = solid_rgba(width, height, (0, 0, 0))
    bar = int(width * 0.2)
    buffer[:, bar : width - bar, :3] = (255, 0, 0)
    return PixelSource.from_rgba(buffer, is_video=True)


@pytest.fixture
def split_view_image() -> PixelSource:
    """3:1 Panorama: links kräftiges Blau, rechts entsättigtes Grau (beide im Luminanzband)."""
    buffer = solid_rgba(300, 100, (160, 160, 160))
    buffer[:, :150, :3] = (60, 150, 240)
    return PixelSource.from_rgba(buffer)


@pytest.fixture
def sky_over_meadow() -> np.ndarray:
    """100x100: obere 60% Himmelblau, untere 40% Grün."""
    buffer = solid_rgba(100, 100, (135, 206, 235))
    buffer[60:, :, :3] = (40, 160, 60)
    return buffer


@pytest.fixture
def sky_png(tmp_path, sky_over_meadow) -> Path:
    from PIL import Image

    path = tmp_path / "meadow.png"
    Image.fromarray(sky_over_meadow[:, :, :3]).save(path)
    return path
