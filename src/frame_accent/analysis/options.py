"""
Pydantic Model für die Extraktions-Optionen.

Alle Felder sind optional und unabhängig schaltbar. Die Instanz wird pro
Aufruf übergeben (frozen), es gibt keinen geteilten Zustand zwischen
Extraktionen.

Usage:
    from frame_accent.analysis import ExtractionOptions

    options = ExtractionOptions(fallback_color="#336699", sample_lower_third=False)

    # camelCase Aliase werden ebenfalls akzeptiert
    options = ExtractionOptions.model_validate({"fallbackColor": "#336699"})
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from typing_extensions import Self

from ..core.constants import (
    DEFAULT_MAX_LUMINANCE,
    DEFAULT_MIN_LUMINANCE,
    DEFAULT_SAMPLE_SIZE,
    VIDEO_MAX_LUMINANCE,
    VIDEO_MIN_LUMINANCE,
)

UnitInterval = Annotated[float, Field(ge=0.0, le=1.0)]


class ExtractionOptions(BaseModel):
    """
    Konfiguration einer einzelnen Farb-Extraktion.

    Attributes:
        sample_size: Kantenlänge des quadratischen Sampling-Canvas
        fallback_color: '#rrggbb' für alle Fehlerpfade (None = neutrales Grau)
        sample_lower_third: Nur das untere Drittel analysieren
        analyze_portrait_video: Center-Crop für Hochkant-Videos (aspect < 1)
        handle_split_view: Links/Rechts getrennt analysieren (aspect > 2.5)
        ignore_black_background: Pixel mit allen Kanälen < 30 verwerfen
        enable_contrast_boost: Zu dunkle Gewinner aufhellen
        min_luminance / max_luminance: Grenzen des strikten Durchlaufs
            (None = Default des Einstiegspunkts: Bild 0.2/0.85, Video 0.25/0.8)
        use_fallback_only: Analyse komplett überspringen
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    sample_size: Annotated[int, Field(ge=1, le=1024)] = DEFAULT_SAMPLE_SIZE
    # Wird erst beim Verwenden geprüft (InvalidFallbackError ist recoverable)
    fallback_color: str | None = None
    sample_lower_third: bool = True
    analyze_portrait_video: bool = True
    handle_split_view: bool = True
    ignore_black_background: bool = True
    enable_contrast_boost: bool = True
    min_luminance: UnitInterval | None = None
    max_luminance: UnitInterval | None = None
    use_fallback_only: bool = False

    @model_validator(mode="after")
    def validate_luminance_bounds(self) -> Self:
        if (
            self.min_luminance is not None
            and self.max_luminance is not None
            and self.min_luminance > self.max_luminance
        ):
            raise ValueError(
                f"min_luminance ({self.min_luminance}) must not exceed "
                f"max_luminance ({self.max_luminance})"
            )
        return self

    def luminance_bounds(self, for_video: bool = False) -> tuple[float, float]:
        """Strikte Luminanz-Grenzen; nicht gesetzte Werte kommen vom Einstiegspunkt."""
        if for_video:
            default_min, default_max = VIDEO_MIN_LUMINANCE, VIDEO_MAX_LUMINANCE
        else:
            default_min, default_max = DEFAULT_MIN_LUMINANCE, DEFAULT_MAX_LUMINANCE
        low = self.min_luminance if self.min_luminance is not None else default_min
        high = self.max_luminance if self.max_luminance is not None else default_max
        return low, high

    def merged(self, **overrides) -> "ExtractionOptions":
        """Neue Instanz mit überschriebenen Feldern (validiert)."""
        data = self.model_dump()
        data.update(overrides)
        return ExtractionOptions.model_validate(data)
