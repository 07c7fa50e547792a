"""
Farbraum-Mathematik für die Akzentfarben-Extraktion.

Reine Funktionen ohne Seiteneffekte:
- Relative Luminanz (sRGB / WCAG 2.x Formel)
- Sättigung (HSV-Definition, (max-min)/max)
- Kontrastverhältnis nach WCAG
- RGB <-> HSL und Hex <-> RGB Konvertierung
"""

import colorsys
import re
from collections.abc import Sequence

RGB = tuple[int, int, int]

_HEX_PATTERN = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)

# sRGB Linearisierung (WCAG Referenz)
_LINEAR_THRESHOLD = 0.03928
_LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def _linearize(channel: float) -> float:
    c = channel / 255
    return c / 12.92 if c <= _LINEAR_THRESHOLD else ((c + 0.055) / 1.055) ** 2.4


def luminance(r: float, g: float, b: float) -> float:
    """
    Relative Luminanz einer sRGB-Farbe.

    Args:
        r, g, b: Kanalwerte 0-255

    Returns:
        Luminanz 0.0 (schwarz) bis 1.0 (weiß)
    """
    wr, wg, wb = _LUMINANCE_WEIGHTS
    return wr * _linearize(r) + wg * _linearize(g) + wb * _linearize(b)


def saturation(r: float, g: float, b: float) -> float:
    """Sättigung (max - min) / max auf normalisierten Kanälen, 0 für Schwarz."""
    high = max(r, g, b) / 255
    low = min(r, g, b) / 255
    if high == 0:
        return 0.0
    return (high - low) / high


def hex_to_rgb(value: str) -> RGB | None:
    """
    Parst '#rrggbb' oder 'rrggbb' (Groß-/Kleinschreibung egal).

    Returns:
        (r, g, b) oder None bei ungültigem String
    """
    if not isinstance(value, str):
        return None
    match = _HEX_PATTERN.match(value.strip())
    if not match:
        return None
    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Konvertiert RGB zu '#rrggbb' (immer lowercase, Kanäle gerundet und geklemmt)."""
    channels = (clamp_channel(c) for c in (r, g, b))
    return "#" + "".join(f"{c:02x}" for c in channels)


def normalize_hex(value: str) -> str | None:
    """Gibt die kanonische '#rrggbb' Form zurück oder None."""
    rgb = hex_to_rgb(value)
    return rgb_to_hex(*rgb) if rgb else None


def clamp_channel(value: float) -> int:
    return int(min(255, max(0, round(value))))


def as_rgb(color: str | Sequence[int]) -> RGB:
    """
    Akzeptiert Hex-String oder RGB-Sequenz.

    Raises:
        ValueError: Wenn der Hex-String ungültig ist
    """
    if isinstance(color, str):
        rgb = hex_to_rgb(color)
        if rgb is None:
            raise ValueError(f"Invalid hex color: {color!r}")
        return rgb
    r, g, b = color[:3]
    return int(r), int(g), int(b)


def contrast_ratio(color_a: str | Sequence[int], color_b: str | Sequence[int]) -> float:
    """
    WCAG Kontrastverhältnis (L_hell + 0.05) / (L_dunkel + 0.05).

    Returns:
        1.0 (kein Kontrast) bis 21.0 (schwarz auf weiß)
    """
    lum_a = luminance(*as_rgb(color_a))
    lum_b = luminance(*as_rgb(color_b))
    brighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (brighter + 0.05) / (darker + 0.05)


def is_dark_color(r: float, g: float, b: float) -> bool:
    return luminance(r, g, b) < 0.5


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    RGB (0-255) zu HSL.

    Returns:
        (hue 0-360, saturation 0-1, lightness 0-1)
    """
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return h * 360, s, l


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """HSL (hue in Grad, s/l 0-1) zu gerundetem RGB 0-255."""
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, l, s)
    return clamp_channel(r * 255), clamp_channel(g * 255), clamp_channel(b * 255)
