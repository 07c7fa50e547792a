"""Ergebnis-Typ der Farb-Extraktion."""

from dataclasses import dataclass

from ..color.color_math import RGB, clamp_channel, hex_to_rgb, luminance, rgb_to_hex
from ..core.constants import NEUTRAL_GRAY_RGB
from ..core.exceptions import InvalidFallbackError


@dataclass(frozen=True)
class ExtractedColor:
    """
    Unveränderliche Akzentfarbe.

    Attributes:
        hex: '#rrggbb' (immer lowercase)
        rgb: (r, g, b) 0-255
        luminance: relative Luminanz, immer aus rgb berechnet
    """

    hex: str
    rgb: RGB
    luminance: float

    @classmethod
    def from_rgb(cls, rgb: tuple[float, float, float]) -> "ExtractedColor":
        channels = tuple(clamp_channel(c) for c in rgb)
        return cls(hex=rgb_to_hex(*channels), rgb=channels, luminance=luminance(*channels))

    @classmethod
    def from_hex(cls, value: str) -> "ExtractedColor":
        """
        Raises:
            InvalidFallbackError: Wenn value kein gültiger '#rrggbb' Wert ist
        """
        rgb = hex_to_rgb(value)
        if rgb is None:
            raise InvalidFallbackError(value)
        return cls.from_rgb(rgb)

    @classmethod
    def neutral_gray(cls) -> "ExtractedColor":
        return cls.from_rgb(NEUTRAL_GRAY_RGB)

    def to_dict(self) -> dict:
        return {"hex": self.hex, "rgb": list(self.rgb), "luminance": round(self.luminance, 4)}
