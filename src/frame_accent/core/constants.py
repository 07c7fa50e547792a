"""
Zentrale Konstanten für frame_accent

Alle Schwellwerte der Farb-Extraktion an einer Stelle, damit keine
Magic Numbers in den Analyzern stehen.
"""

# =============================================================================
# SAMPLING
# =============================================================================

DEFAULT_SAMPLE_SIZE = 50  # Kantenlänge des quadratischen Sampling-Canvas

# Jeder 4. Pixel wird gelesen. Muss konstant bleiben (deterministische Ergebnisse).
PIXEL_STRIDE = 4

ALPHA_THRESHOLD = 128  # alpha < 128 gilt als transparent
BLACK_CHANNEL_THRESHOLD = 30  # alle Kanäle < 30 gilt als Letterbox/Schwarz
QUANTIZATION_STEP = 24

# =============================================================================
# REGIONS
# =============================================================================

LOWER_THIRD_START = 0.67
PORTRAIT_CENTER_WIDTH = 0.6
PORTRAIT_CENTER_HEIGHT = 0.8
PORTRAIT_MAX_ASPECT = 1.0
SPLIT_VIEW_MIN_ASPECT = 2.5

# =============================================================================
# SELECTION
# =============================================================================

DEFAULT_MIN_LUMINANCE = 0.2
DEFAULT_MAX_LUMINANCE = 0.85
VIDEO_MIN_LUMINANCE = 0.25
VIDEO_MAX_LUMINANCE = 0.8
RELAXED_MIN_LUMINANCE = 0.1
RELAXED_MAX_LUMINANCE = 0.9

FREQUENCY_WEIGHT = 0.4
SATURATION_WEIGHT = 0.3
BALANCE_WEIGHT = 0.3
FREQUENCY_NORMALIZER = 10  # count / 10, max 1.0
SATURATION_BOOST = 1.5
DARKNESS_BONUS = 1.2
DARKNESS_BONUS_MIN_LUMINANCE = 0.25

REGION_SATURATION_WEIGHT = 0.6
REGION_BALANCE_WEIGHT = 0.4

CONTRAST_BOOST_BELOW = 0.3  # Luminanz unterhalb der aufgehellt wird
CONTRAST_BOOST_LIGHTNESS = 0.4  # Mindest-Lightness nach dem Boost

# =============================================================================
# CONTRAST / THEMING
# =============================================================================

WCAG_AAA_RATIO = 7.0
WCAG_AA_RATIO = 4.5
WHITE_HEX = "#ffffff"
BLACK_HEX = "#000000"

COMPLEMENT_MIN_SATURATION = 0.3
COMPLEMENT_MAX_SATURATION = 0.7
COMPLEMENT_DARK_SOURCE = 0.3
COMPLEMENT_LIGHT_SOURCE = 0.7
COMPLEMENT_MIN_LIGHTNESS = 0.4
COMPLEMENT_MAX_LIGHTNESS = 0.6

TEXT_COMPLEMENT_SATURATION = 0.8
TEXT_COMPLEMENT_LIGHT = 0.85
TEXT_COMPLEMENT_DARK = 0.2

# =============================================================================
# FALLBACK
# =============================================================================

NEUTRAL_GRAY_HEX = "#6b7280"
NEUTRAL_GRAY_RGB = (107, 114, 128)

# HTMLMediaElement.readyState: HAVE_CURRENT_DATA
VIDEO_READY_STATE = 2
