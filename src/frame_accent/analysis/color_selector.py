"""
Optimal Color Selector - wählt den besten Kandidaten aus der Frequenztabelle.

Drei Stufen, jede lockert die vorige:
1. STRICT:    Luminanz in [min, max], maximaler Composite-Score
2. RELAXED:   dieselbe Bewertung mit festen Grenzen [0.1, 0.9]
3. FREQUENCY: häufigster Bucket ohne Einschränkung

Gleichstände werden explizit (Score, Anzahl, RGB) aufgelöst, nie über
die Iterationsreihenfolge der Tabelle.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ..color.color_math import RGB, clamp_channel, hsl_to_rgb, rgb_to_hsl
from ..core.constants import (
    BALANCE_WEIGHT,
    CONTRAST_BOOST_BELOW,
    CONTRAST_BOOST_LIGHTNESS,
    DARKNESS_BONUS,
    DARKNESS_BONUS_MIN_LUMINANCE,
    FREQUENCY_NORMALIZER,
    FREQUENCY_WEIGHT,
    REGION_BALANCE_WEIGHT,
    REGION_SATURATION_WEIGHT,
    RELAXED_MAX_LUMINANCE,
    RELAXED_MIN_LUMINANCE,
    SATURATION_BOOST,
    SATURATION_WEIGHT,
)
from ..utils.logger import get_logger
from .frequency_analyzer import ColorCandidate, FrequencyTable

logger = get_logger("analysis.color_selector")


class SelectionTier(Enum):
    STRICT = "STRICT"
    RELAXED = "RELAXED"
    FREQUENCY = "FREQUENCY"


@dataclass(frozen=True)
class Selection:
    """Gewinner einer Region plus die Stufe, in der er gefunden wurde."""

    candidate: ColorCandidate
    tier: SelectionTier

    @property
    def region_score(self) -> float:
        return region_score(self.candidate)


def score_candidate(candidate: ColorCandidate) -> float:
    """
    Composite-Score aus Häufigkeit, Sättigung und Luminanz-Balance.

    score = (0.4 * min(count/10, 1) + 0.3 * min(sat*1.5, 1) + 0.3 * (1 - |lum-0.5|)) * bonus
    bonus = 1.2 für Luminanz > 0.25, sonst 1.0
    """
    frequency_score = min(candidate.count / FREQUENCY_NORMALIZER, 1.0)
    saturation_score = min(candidate.saturation * SATURATION_BOOST, 1.0)
    balance_score = 1.0 - abs(candidate.luminance - 0.5)
    bonus = DARKNESS_BONUS if candidate.luminance > DARKNESS_BONUS_MIN_LUMINANCE else 1.0

    return (
        frequency_score * FREQUENCY_WEIGHT
        + saturation_score * SATURATION_WEIGHT
        + balance_score * BALANCE_WEIGHT
    ) * bonus


def _ranking_key(candidate: ColorCandidate) -> tuple:
    return score_candidate(candidate), candidate.count, candidate.rgb


def find_optimal_color(
    candidates: Iterable[ColorCandidate], min_luminance: float, max_luminance: float
) -> ColorCandidate | None:
    """Bester Kandidat mit min_luminance <= Luminanz <= max_luminance, sonst None."""
    in_range = [c for c in candidates if min_luminance <= c.luminance <= max_luminance]
    if not in_range:
        return None
    return max(in_range, key=_ranking_key)


def most_frequent_color(candidates: Iterable[ColorCandidate]) -> ColorCandidate | None:
    candidates = list(candidates)
    if not candidates:
        return None
    return max(candidates, key=lambda c: (c.count, c.rgb))


def select_best_color(
    table: FrequencyTable, min_luminance: float, max_luminance: float
) -> Selection | None:
    """
    Dreistufige Auswahl (STRICT -> RELAXED -> FREQUENCY).

    Returns:
        Selection oder None bei leerer Tabelle
    """
    candidates = list(table.values())
    if not candidates:
        return None

    best = find_optimal_color(candidates, min_luminance, max_luminance)
    if best is not None:
        return Selection(best, SelectionTier.STRICT)

    best = find_optimal_color(candidates, RELAXED_MIN_LUMINANCE, RELAXED_MAX_LUMINANCE)
    if best is not None:
        return Selection(best, SelectionTier.RELAXED)

    return Selection(most_frequent_color(candidates), SelectionTier.FREQUENCY)


def region_score(candidate: ColorCandidate) -> float:
    """Split-View Bewertung: 0.6 * Sättigung + 0.4 * (1 - |lum - 0.5|)."""
    return (
        candidate.saturation * REGION_SATURATION_WEIGHT
        + (1.0 - abs(candidate.luminance - 0.5)) * REGION_BALANCE_WEIGHT
    )


def choose_split_winner(left: Selection | None, right: Selection | None) -> Selection | None:
    """
    Vergleicht die Gewinner beider Hälften.

    Nur eine Hälfte mit Ergebnis gewinnt automatisch. Bei gleichem
    region_score gewinnt die rechte Hälfte.
    """
    if left is None or right is None:
        return left or right

    winner = left if left.region_score > right.region_score else right
    logger.debug(
        f"Split-View: links {left.candidate.rgb} ({left.region_score:.3f}) vs. "
        f"rechts {right.candidate.rgb} ({right.region_score:.3f}) -> {winner.candidate.rgb}"
    )
    return winner


def merge_tables(*tables: FrequencyTable) -> FrequencyTable:
    """Summiert die Zählungen mehrerer Frequenztabellen."""
    merged: FrequencyTable = {}
    for table in tables:
        for rgb, candidate in table.items():
            count = candidate.count + (merged[rgb].count if rgb in merged else 0)
            merged[rgb] = ColorCandidate.from_rgb(rgb, count)
    return merged


def select_split_color(
    left: FrequencyTable, right: FrequencyTable, min_luminance: float, max_luminance: float
) -> Selection | None:
    """
    Auswahl für Split-View-Bilder.

    Jede Hälfte bekommt nur den strikten Durchlauf; eine Hälfte ohne
    Kandidat im Luminanzband verliert automatisch. Findet keine Hälfte
    etwas, laufen RELAXED und FREQUENCY über beide Hälften zusammen.
    """
    strict = [
        Selection(best, SelectionTier.STRICT) if best is not None else None
        for best in (
            find_optimal_color(left.values(), min_luminance, max_luminance),
            find_optimal_color(right.values(), min_luminance, max_luminance),
        )
    ]
    if strict[0] is not None or strict[1] is not None:
        return choose_split_winner(*strict)

    return select_best_color(merge_tables(left, right), min_luminance, max_luminance)


def boost_color_brightness(rgb: RGB, min_lightness: float = CONTRAST_BOOST_LIGHTNESS) -> RGB:
    """Hebt die HSL-Lightness auf mindestens min_lightness an (Hue/Sättigung bleiben)."""
    hue, sat, lightness = rgb_to_hsl(*rgb)
    boosted = hsl_to_rgb(hue, sat, max(lightness, min_lightness))
    return tuple(clamp_channel(c) for c in boosted)


def apply_contrast_boost(candidate: ColorCandidate, enabled: bool = True) -> RGB:
    """Gewinner mit Luminanz < 0.3 aufhellen, wenn der Boost aktiv ist."""
    if enabled and candidate.luminance < CONTRAST_BOOST_BELOW:
        return boost_color_brightness(candidate.rgb)
    return candidate.rgb
