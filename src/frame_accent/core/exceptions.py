"""
Custom Exceptions für frame_accent.

Hierarchie:
    FrameAccentError (Base)
    ├── ConfigurationError
    └── ExtractionError
        ├── SourceNotReadyError
        ├── LoadFailureError
        ├── EmptyRegionError
        └── InvalidFallbackError

Die Extraction-Fehler werden im Orchestrator abgefangen und über die
Fallback-Kette in eine Farbe umgewandelt. Nur ein LoadFailureError ohne
konfigurierte Fallback-Farbe erreicht den Aufrufer.
"""


class FrameAccentError(Exception):
    """
    Base exception für alle frame_accent Fehler.

    Alle custom exceptions erben von dieser Klasse.
    """

    def __init__(self, message: str = "", details: dict = None):
        """
        Initialize exception with message and optional details.

        Args:
            message: Human-readable error message
            details: Optional dict with additional context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(FrameAccentError):
    """
    Konfigurations-Fehler.

    Raised when:
    - Config file contains values that cannot be parsed
    - Extraction options fail validation
    """

    pass


# =============================================================================
# Extraction Errors
# =============================================================================


class ExtractionError(FrameAccentError):
    """
    Farb-Extraktions-Fehler.

    Base class for all errors raised inside one extraction call.
    """

    pass


class SourceNotReadyError(ExtractionError):
    """
    Video-Frame noch nicht dekodiert.

    Raised when the video entry point is called before the frame reached
    the minimal ready state.
    """

    def __init__(self, ready_state: int = None, required: int = None, **kwargs):
        message = "Video frame is not ready for color extraction"
        super().__init__(
            message, details={"ready_state": ready_state, "required": required, **kwargs}
        )


class LoadFailureError(ExtractionError):
    """
    Bild konnte nicht geladen oder dekodiert werden.

    Raised when:
    - Image file is missing or unreadable
    - Remote image request fails
    - Decoder rejects the data
    """

    def __init__(
        self,
        message: str = "Failed to load image for color extraction",
        source: str = None,
        details: dict = None,
    ):
        details = dict(details or {})
        if source is not None:
            details["source"] = source
        super().__init__(message, details=details)


class EmptyRegionError(ExtractionError):
    """
    Keine verwertbaren Pixel in der gewählten Region.

    Raised when every sample was discarded (transparent or near-black)
    or the region/source has zero size.
    """

    pass


class InvalidFallbackError(ExtractionError):
    """Konfigurierte Fallback-Farbe ist kein gültiger #rrggbb Wert."""

    def __init__(self, value: str = None, **kwargs):
        super().__init__(
            f"Invalid fallback color: {value!r}", details={"value": value, **kwargs}
        )


# =============================================================================
# Utility Functions
# =============================================================================


def wrap_exception(original: Exception, wrapper_class: type) -> FrameAccentError:
    """
    Wrap a standard exception in a frame_accent exception.

    Example:
        try:
            Image.open(path)
        except OSError as e:
            raise wrap_exception(e, LoadFailureError) from e
    """
    return wrapper_class(
        message=str(original),
        details={
            "original_type": type(original).__name__,
            "original_args": original.args,
        },
    )
