"""
Kontrast- und Textfarben für das UI-Theming.

- generate_text_color: Weiß oder Schwarz, bevorzugt mit WCAG AAA (7:1)
- generate_complementary_color: Akzent mit um 180 Grad gedrehtem Farbton
- generate_complementary_text_color: farbige Textvariante, fällt unter
  WCAG AA (4.5:1) auf Weiß/Schwarz zurück
- build_theme: alle drei Farben für den Theming-Kollaborateur
"""

from dataclasses import dataclass

from ..analysis.extracted_color import ExtractedColor
from ..color.color_math import (
    contrast_ratio,
    hex_to_rgb,
    hsl_to_rgb,
    is_dark_color,
    rgb_to_hex,
    rgb_to_hsl,
)
from ..core.constants import (
    BLACK_HEX,
    COMPLEMENT_DARK_SOURCE,
    COMPLEMENT_LIGHT_SOURCE,
    COMPLEMENT_MAX_LIGHTNESS,
    COMPLEMENT_MAX_SATURATION,
    COMPLEMENT_MIN_LIGHTNESS,
    COMPLEMENT_MIN_SATURATION,
    TEXT_COMPLEMENT_DARK,
    TEXT_COMPLEMENT_LIGHT,
    TEXT_COMPLEMENT_SATURATION,
    WCAG_AA_RATIO,
    WCAG_AAA_RATIO,
    WHITE_HEX,
)


def generate_text_color(background: str | tuple[int, int, int]) -> str:
    """
    Textfarbe für einen Hintergrund.

    Weiß wenn es 7:1 erreicht, sonst Schwarz wenn es 7:1 erreicht, sonst
    die Variante mit dem höheren Kontrast (AAA dann nicht garantiert).

    Raises:
        ValueError: Bei ungültigem Hex-String
    """
    white_contrast = contrast_ratio(background, WHITE_HEX)
    black_contrast = contrast_ratio(background, BLACK_HEX)

    if white_contrast >= WCAG_AAA_RATIO:
        return WHITE_HEX
    if black_contrast >= WCAG_AAA_RATIO:
        return BLACK_HEX
    return WHITE_HEX if white_contrast > black_contrast else BLACK_HEX


def generate_complementary_color(base: ExtractedColor) -> ExtractedColor:
    """
    Komplementärer Akzent für sekundäres Theming.

    Hue + 180 Grad, Sättigung auf [0.3, 0.7] geklemmt; Lightness wird
    von dunklen Quellen (Luminanz < 0.3) auf mindestens 0.4 angehoben und
    bei hellen Quellen (> 0.7) auf höchstens 0.6 gesenkt.
    """
    hue, sat, lightness = rgb_to_hsl(*base.rgb)

    complementary_hue = (hue + 180) % 360
    sat = max(COMPLEMENT_MIN_SATURATION, min(COMPLEMENT_MAX_SATURATION, sat))

    if base.luminance < COMPLEMENT_DARK_SOURCE:
        lightness = max(COMPLEMENT_MIN_LIGHTNESS, lightness)
    elif base.luminance > COMPLEMENT_LIGHT_SOURCE:
        lightness = min(COMPLEMENT_MAX_LIGHTNESS, lightness)

    return ExtractedColor.from_rgb(hsl_to_rgb(complementary_hue, sat, lightness))


def generate_complementary_text_color(primary_hex: str) -> str:
    """
    Farbige Textfarbe passend zur Primärfarbe.

    Komplementärer Farbton mit Sättigung 0.8, hell (0.85) auf dunklem und
    dunkel (0.2) auf hellem Hintergrund. Erreicht das Ergebnis nicht 4.5:1,
    wird Weiß bzw. Schwarz verwendet. Ungültige Eingabe -> Weiß.
    """
    rgb = hex_to_rgb(primary_hex)
    if rgb is None:
        return WHITE_HEX

    dark = is_dark_color(*rgb)
    hue, _, _ = rgb_to_hsl(*rgb)
    lightness = TEXT_COMPLEMENT_LIGHT if dark else TEXT_COMPLEMENT_DARK
    candidate = hsl_to_rgb((hue + 180) % 360, TEXT_COMPLEMENT_SATURATION, lightness)

    if contrast_ratio(rgb, candidate) < WCAG_AA_RATIO:
        return WHITE_HEX if dark else BLACK_HEX
    return rgb_to_hex(*candidate)


def get_high_contrast_color(background_hex: str) -> str:
    """Weiß auf dunklem, Schwarz auf hellem Hintergrund (Weiß bei ungültiger Eingabe)."""
    rgb = hex_to_rgb(background_hex)
    if rgb is None:
        return WHITE_HEX
    return WHITE_HEX if is_dark_color(*rgb) else BLACK_HEX


@dataclass(frozen=True)
class ThemeColors:
    """Alles was das UI für eine Akzentfarbe braucht."""

    primary: ExtractedColor
    text: str
    complementary: ExtractedColor

    @property
    def text_contrast(self) -> float:
        return contrast_ratio(self.primary.hex, self.text)

    def to_dict(self) -> dict:
        return {
            "primary": self.primary.to_dict(),
            "text": self.text,
            "text_contrast": round(self.text_contrast, 2),
            "complementary": self.complementary.to_dict(),
        }


def build_theme(color: ExtractedColor) -> ThemeColors:
    return ThemeColors(
        primary=color,
        text=generate_text_color(color.hex),
        complementary=generate_complementary_color(color),
    )
