"""
Pixel-Quellen für die Farb-Extraktion.

Eine PixelSource kapselt ein dekodiertes RGBA-Raster (Bild, Video-Frame
oder Roh-Buffer) zusammen mit den natürlichen Abmessungen. Die Analyse
arbeitet nie auf dem Original, sondern auf einem kleinen quadratischen
Sampling-Canvas (sample()).
"""

from dataclasses import dataclass, field

import cv2
import numpy as np
from PIL import Image

from ..core.constants import VIDEO_READY_STATE
from ..core.exceptions import EmptyRegionError, SourceNotReadyError


@dataclass(frozen=True)
class PixelSource:
    """
    Unveränderliches RGBA-Raster (H x W x 4, uint8).

    Attributes:
        pixels: RGBA-Daten in natürlicher Auflösung
        is_video: True für Video-Frames (aktiviert Portrait-Heuristik)
    """

    pixels: np.ndarray = field(repr=False)
    is_video: bool = False

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(f"Expected H x W x 4 RGBA array, got shape {self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {self.pixels.dtype}")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def aspect_ratio(self) -> float:
        if self.height == 0:
            return 0.0
        return self.width / self.height

    def sample(self, size: int) -> np.ndarray:
        """
        Skaliert die Quelle auf einen size x size Canvas (wie drawImage auf ein Canvas).

        Raises:
            EmptyRegionError: Wenn die Quelle keine Pixel hat
        """
        if self.width == 0 or self.height == 0:
            raise EmptyRegionError(
                "Pixel source has zero dimensions",
                details={"width": self.width, "height": self.height},
            )
        if self.width == size and self.height == size:
            return self.pixels
        return cv2.resize(self.pixels, (size, size), interpolation=cv2.INTER_AREA)

    # ==================== Builder ====================

    @classmethod
    def from_rgba(cls, pixels: np.ndarray, is_video: bool = False) -> "PixelSource":
        return cls(np.ascontiguousarray(pixels, dtype=np.uint8), is_video=is_video)

    @classmethod
    def from_rgb(cls, pixels: np.ndarray, is_video: bool = False) -> "PixelSource":
        """RGB-Array (H x W x 3) mit voller Deckkraft."""
        rgb = np.asarray(pixels, dtype=np.uint8)
        alpha = np.full(rgb.shape[:2] + (1,), 255, dtype=np.uint8)
        return cls(np.concatenate([rgb, alpha], axis=2), is_video=is_video)

    @classmethod
    def from_bgr_frame(cls, frame: np.ndarray, is_video: bool = True) -> "PixelSource":
        """OpenCV Frame (BGR oder BGRA) zu PixelSource."""
        if frame.ndim == 3 and frame.shape[2] == 4:
            rgba = cv2.cvtColor(frame, cv2.COLOR_BGRA2RGBA)
        else:
            rgba = cv2.cvtColor(frame, cv2.COLOR_BGR2RGBA)
        return cls(rgba, is_video=is_video)

    @classmethod
    def from_pil_image(cls, image: Image.Image) -> "PixelSource":
        """Pillow-Bild (beliebiger Modus) zu PixelSource."""
        return cls(np.array(image.convert("RGBA"), dtype=np.uint8), is_video=False)


@dataclass(frozen=True)
class VideoFrameSource:
    """
    Aktueller Frame eines Videos plus Bereitschafts-Signal.

    ready_state folgt HTMLMediaElement.readyState: ab 2 (HAVE_CURRENT_DATA)
    liegt ein dekodierter Frame vor.
    """

    frame: PixelSource | None = None
    ready_state: int = VIDEO_READY_STATE

    @property
    def is_ready(self) -> bool:
        return self.frame is not None and self.ready_state >= VIDEO_READY_STATE

    def require_frame(self) -> PixelSource:
        """
        Raises:
            SourceNotReadyError: Wenn noch kein dekodierter Frame vorliegt
        """
        if not self.is_ready:
            raise SourceNotReadyError(ready_state=self.ready_state, required=VIDEO_READY_STATE)
        return self.frame

    @classmethod
    def from_bgr_frame(cls, frame: np.ndarray | None) -> "VideoFrameSource":
        """OpenCV-Frame (None = nicht lesbar, also nicht bereit)."""
        if frame is None or frame.size == 0:
            return cls(frame=None, ready_state=0)
        return cls(frame=PixelSource.from_bgr_frame(frame, is_video=True))
