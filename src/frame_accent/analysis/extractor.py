"""
Extraction Orchestrator - Akzentfarbe aus Bild oder Video-Frame.

Verbindet Region Sampler, Frequency Analyzer und Color Selector zu den
zwei öffentlichen Einstiegspunkten:

- extract_from_image_source(source, options)  (async, wartet auf Dekodierung)
- extract_from_video_frame(source, options)   (sync, Frame muss bereit sein)

Beide scheitern nie nach aussen: jeder interne Fehler wird über die
Fallback-Kette (konfigurierte Farbe -> neutrales Grau) in eine Farbe
umgewandelt. Einzige Ausnahme ist ein fehlgeschlagenes Laden eines Bildes
ohne konfigurierte Fallback-Farbe (LoadFailureError).

Pro Aufruf werden Canvas und Frequenztabellen neu erzeugt und verworfen;
parallel laufende Extraktionen teilen keinen Zustand.
"""

import dataclasses

from ..core.exceptions import (
    EmptyRegionError,
    InvalidFallbackError,
    LoadFailureError,
    SourceNotReadyError,
)
from ..utils.logger import get_logger
from .color_selector import apply_contrast_boost, select_best_color, select_split_color
from .extracted_color import ExtractedColor
from .frequency_analyzer import build_frequency_table
from .image_loader import ImageInput, ImageLoader
from .options import ExtractionOptions
from .pixel_source import PixelSource, VideoFrameSource
from .region_sampler import select_regions

logger = get_logger("analysis.extractor")


def create_fallback_color(fallback_hex: str | None) -> ExtractedColor:
    """
    Fallback-Farbe mit berechneter Luminanz.

    Ungültige oder fehlende Werte ergeben das neutrale Grau #6b7280.
    """
    if fallback_hex is None:
        return ExtractedColor.neutral_gray()
    try:
        return ExtractedColor.from_hex(fallback_hex)
    except InvalidFallbackError as e:
        logger.warning(f"{e} - verwende neutrales Grau")
        return ExtractedColor.neutral_gray()


def extract_dominant_color(
    source: PixelSource, options: ExtractionOptions | None = None, for_video: bool = False
) -> ExtractedColor:
    """
    Analysiert eine bereits dekodierte Quelle.

    Args:
        source: Pixel-Quelle (Bild oder Video-Frame)
        options: Extraktions-Optionen
        for_video: Video-Defaults für die Luminanz-Grenzen verwenden

    Returns:
        ExtractedColor des besten Kandidaten

    Raises:
        EmptyRegionError: Wenn keine Region verwertbare Samples enthält
    """
    options = options or ExtractionOptions()

    canvas = source.sample(options.sample_size)
    regions = select_regions(source.aspect_ratio, source.is_video, options)
    min_luminance, max_luminance = options.luminance_bounds(for_video)

    tables = [
        build_frequency_table(region.crop(canvas), options.ignore_black_background)
        if not region.is_empty
        else {}
        for region in regions
    ]

    if len(tables) == 2:
        selection = select_split_color(*tables, min_luminance, max_luminance)
    else:
        selection = select_best_color(tables[0], min_luminance, max_luminance)

    if selection is None:
        raise EmptyRegionError(
            "No qualifying samples in selected region",
            details={"regions": [r.kind.value for r in regions]},
        )

    logger.debug(
        f"Gewinner {selection.candidate.rgb} (Stufe {selection.tier.value}, "
        f"Regionen {[r.kind.value for r in regions]})"
    )

    rgb = apply_contrast_boost(selection.candidate, options.enable_contrast_boost)
    return ExtractedColor.from_rgb(rgb)


class ColorExtractor:
    """
    Extrahiert Akzentfarben aus Bildern und Video-Frames.

    Hält nur den Loader, keinen Zustand zwischen Aufrufen.
    """

    def __init__(self, loader: ImageLoader | None = None):
        self.loader = loader or ImageLoader()

    async def extract_from_image_source(
        self, source: ImageInput | None, options: ExtractionOptions | None = None
    ) -> ExtractedColor:
        """
        Akzentfarbe eines Bildes.

        Args:
            source: Pfad, URL, Bytes, PIL.Image oder PixelSource
            options: Extraktions-Optionen

        Returns:
            ExtractedColor (oder Fallback)

        Raises:
            LoadFailureError: Nur wenn das Laden scheitert und keine
                Fallback-Farbe konfiguriert ist
        """
        options = options or ExtractionOptions()

        if options.use_fallback_only:
            return create_fallback_color(options.fallback_color)

        if source is None or (isinstance(source, (str, bytes)) and not source):
            if options.fallback_color is None:
                raise LoadFailureError("No image source given")
            return create_fallback_color(options.fallback_color)

        try:
            pixel_source = await self.loader.load(source)
        except LoadFailureError as e:
            if options.fallback_color is None:
                raise
            logger.warning(f"Color extraction failed: {e}")
            return create_fallback_color(options.fallback_color)

        try:
            return extract_dominant_color(pixel_source, options, for_video=False)
        except Exception as e:
            logger.warning(f"Color extraction failed: {e}")
            return create_fallback_color(options.fallback_color)

    def extract_from_video_frame(
        self, source: VideoFrameSource | PixelSource, options: ExtractionOptions | None = None
    ) -> ExtractedColor:
        """
        Akzentfarbe des aktuellen Video-Frames (blockiert nie).

        Ist der Frame nicht bereit, wird sofort die Fallback-Farbe
        zurückgegeben, ohne Pixel zu lesen.
        """
        options = options or ExtractionOptions()

        if options.use_fallback_only:
            return create_fallback_color(options.fallback_color)

        try:
            if isinstance(source, VideoFrameSource):
                frame = source.require_frame()
            else:
                frame = source
            if not frame.is_video:
                frame = dataclasses.replace(frame, is_video=True)
        except SourceNotReadyError as e:
            logger.debug(f"{e} - verwende Fallback")
            return create_fallback_color(options.fallback_color)

        try:
            return extract_dominant_color(frame, options, for_video=True)
        except Exception as e:
            logger.warning(f"Color extraction failed: {e}")
            return create_fallback_color(options.fallback_color)


_default_extractor = ColorExtractor()


async def extract_from_image_source(
    source: ImageInput | None, options: ExtractionOptions | None = None
) -> ExtractedColor:
    return await _default_extractor.extract_from_image_source(source, options)


def extract_from_video_frame(
    source: VideoFrameSource | PixelSource, options: ExtractionOptions | None = None
) -> ExtractedColor:
    return _default_extractor.extract_from_video_frame(source, options)


# Alias wie im Frontend (URL oder Pfad)
extract_color_from_image_url = extract_from_image_source
