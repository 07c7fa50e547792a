"""
Image Loader - asynchrone Beschaffung der Pixel eines Bildes.

Das ist der einzige Suspendierungspunkt der Bild-Extraktion: das Laden
und Dekodieren läuft in einem Worker-Thread und liefert entweder eine
PixelSource oder einen LoadFailureError, keine Teilergebnisse.

Unterstützte Quellen:
- Lokaler Pfad (str / Path)
- http(s) URL (requests)
- Roh-Bytes einer Bilddatei
- PIL.Image / PixelSource (bereits dekodiert)
"""

import asyncio
import io
from pathlib import Path

import requests
from PIL import Image, UnidentifiedImageError

from ..core.exceptions import LoadFailureError, wrap_exception
from ..utils.logger import get_logger
from .pixel_source import PixelSource

logger = get_logger("analysis.image_loader")

HTTP_TIMEOUT_SECONDS = 30
MAX_IMAGE_BYTES = 64 * 1024 * 1024

# Fehler beim Laden/Dekodieren, die als LoadFailureError gemeldet werden
LOAD_ERRORS = (
    OSError,
    ValueError,
    TypeError,
    UnidentifiedImageError,
    Image.DecompressionBombError,
    requests.RequestException,
)

ImageInput = str | Path | bytes | Image.Image | PixelSource


def _is_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


def _describe(source: ImageInput) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return type(source).__name__


class ImageLoader:
    """Lädt und dekodiert Bilder zu PixelSource."""

    def __init__(self, timeout: float = HTTP_TIMEOUT_SECONDS, session: requests.Session | None = None):
        self.timeout = timeout
        self._session = session

    async def load(self, source: ImageInput) -> PixelSource:
        """
        Lädt die Quelle in einem Worker-Thread.

        Raises:
            LoadFailureError: Wenn die Quelle nicht geladen/dekodiert werden kann
        """
        if isinstance(source, PixelSource):
            return source
        return await asyncio.to_thread(self.load_sync, source)

    def load_sync(self, source: ImageInput) -> PixelSource:
        try:
            if isinstance(source, PixelSource):
                return source
            if isinstance(source, Image.Image):
                return PixelSource.from_pil_image(source)
            if isinstance(source, bytes):
                return self._decode(source)
            if isinstance(source, str) and _is_url(source):
                return self._decode(self._fetch(source))
            return self._open_path(Path(source))
        except LoadFailureError:
            raise
        except LOAD_ERRORS as e:
            error = wrap_exception(e, LoadFailureError)
            error.details["source"] = _describe(source)
            raise error from e

    def _fetch(self, url: str) -> bytes:
        logger.debug(f"Lade Bild von URL: {url}")
        getter = self._session.get if self._session is not None else requests.get
        response = getter(url, timeout=self.timeout)
        response.raise_for_status()
        if len(response.content) > MAX_IMAGE_BYTES:
            raise LoadFailureError("Image too large", source=url)
        return response.content

    @staticmethod
    def _open_path(path: Path) -> PixelSource:
        if not path.is_file():
            raise LoadFailureError("Image file not found", source=str(path))
        with Image.open(path) as image:
            return PixelSource.from_pil_image(image)

    @staticmethod
    def _decode(data: bytes) -> PixelSource:
        if not data:
            raise LoadFailureError("Empty image data")
        with Image.open(io.BytesIO(data)) as image:
            return PixelSource.from_pil_image(image)
