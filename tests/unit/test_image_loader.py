"""Tests für den ImageLoader."""

import io
from unittest.mock import MagicMock

import numpy as np
import pytest
import requests
from PIL import Image

from frame_accent.analysis.image_loader import ImageLoader
from frame_accent.analysis.pixel_source import PixelSource
from frame_accent.core.exceptions import LoadFailureError


def _png_bytes(color=(10, 20, 30), size=(6, 4)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def _session_returning(content: bytes = b"", error: Exception = None) -> MagicMock:
    response = MagicMock()
    response.content = content
    if error is not None:
        response.raise_for_status.side_effect = error
    session = MagicMock(spec=requests.Session)
    session.get.return_value = response
    return session


class TestLoadSync:
    def test_path(self, sky_png):
        source = ImageLoader().load_sync(sky_png)
        assert (source.width, source.height) == (100, 100)
        assert tuple(source.pixels[0, 0]) == (135, 206, 235, 255)

    def test_str_path(self, sky_png):
        assert ImageLoader().load_sync(str(sky_png)).height == 100

    def test_bytes(self):
        source = ImageLoader().load_sync(_png_bytes())
        assert (source.width, source.height) == (6, 4)

    def test_pil_image(self):
        image = Image.new("RGBA", (3, 3), (1, 2, 3, 4))
        assert tuple(ImageLoader().load_sync(image).pixels[1, 1]) == (1, 2, 3, 4)

    def test_pixel_source_passthrough(self):
        source = PixelSource(np.zeros((2, 2, 4), dtype=np.uint8))
        assert ImageLoader().load_sync(source) is source

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadFailureError) as exc_info:
            ImageLoader().load_sync(tmp_path / "missing.png")
        assert "missing.png" in exc_info.value.details["source"]

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(b"definitely not a png")
        with pytest.raises(LoadFailureError):
            ImageLoader().load_sync(path)

    def test_empty_bytes(self):
        with pytest.raises(LoadFailureError):
            ImageLoader().load_sync(b"")

    def test_decompression_bomb(self, tmp_path, monkeypatch):
        path = tmp_path / "huge.png"
        Image.new("RGB", (200, 200), (10, 20, 30)).save(path)
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

        with pytest.raises(LoadFailureError) as exc_info:
            ImageLoader().load_sync(path)
        assert exc_info.value.details["original_type"] == "DecompressionBombError"

    def test_unsupported_source_type(self):
        with pytest.raises(LoadFailureError) as exc_info:
            ImageLoader().load_sync(12345)
        assert exc_info.value.details["source"] == "int"


class TestUrl:
    def test_fetches_with_timeout(self):
        session = _session_returning(_png_bytes((200, 0, 0)))
        source = ImageLoader(timeout=5, session=session).load_sync("https://example.org/a.png")

        session.get.assert_called_once_with("https://example.org/a.png", timeout=5)
        assert tuple(source.pixels[0, 0]) == (200, 0, 0, 255)

    def test_http_error(self):
        session = _session_returning(error=requests.HTTPError("404 Not Found"))
        with pytest.raises(LoadFailureError) as exc_info:
            ImageLoader(session=session).load_sync("http://example.org/missing.png")
        assert exc_info.value.details["original_type"] == "HTTPError"

    def test_connection_error(self):
        session = MagicMock(spec=requests.Session)
        session.get.side_effect = requests.ConnectionError("unreachable")
        with pytest.raises(LoadFailureError):
            ImageLoader(session=session).load_sync("http://example.org/a.png")

    def test_undecodable_body(self):
        session = _session_returning(b"<html>not an image</html>")
        with pytest.raises(LoadFailureError):
            ImageLoader(session=session).load_sync("http://example.org/a.png")


@pytest.mark.asyncio
async def test_async_load(sky_png):
    source = await ImageLoader().load(sky_png)
    assert source.width == 100


@pytest.mark.asyncio
async def test_async_load_failure(tmp_path):
    with pytest.raises(LoadFailureError):
        await ImageLoader().load(tmp_path / "nope.jpg")
