"""
Zentrales Konfigurations-Management für frame_accent

Verwendet configparser für .ini-Dateien.
Automatische Erstellung von Standardkonfiguration.
"""

import configparser
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..analysis.options import ExtractionOptions
from ..utils.logger import get_logger
from .constants import DEFAULT_SAMPLE_SIZE
from .exceptions import ConfigurationError

logger = get_logger("core.config")

EXTRACTION_SECTION = "Extraction"
LOGGING_SECTION = "Logging"

_BOOL_OPTIONS = (
    "sample_lower_third",
    "analyze_portrait_video",
    "handle_split_view",
    "ignore_black_background",
    "enable_contrast_boost",
    "use_fallback_only",
)
_FLOAT_OPTIONS = ("min_luminance", "max_luminance")


class Config:
    """Zentrale Konfigurationsklasse für frame_accent."""

    def __init__(self, config_file: str = "config.ini", create: bool = True):
        """
        Initialisiert die Konfiguration.

        Args:
            config_file: Pfad zur Konfigurationsdatei
            create: Standardkonfiguration schreiben wenn die Datei fehlt
        """
        self.config_file = Path(config_file)
        self.config = configparser.ConfigParser()
        self.load(create=create)

    def load(self, create: bool = True) -> None:
        """Lädt die Konfiguration aus der Datei oder erstellt Standardkonfiguration."""
        if self.config_file.exists():
            self.config.read(self.config_file, encoding="utf-8")
            logger.info(f"Konfiguration aus {self.config_file} geladen")
        else:
            logger.info(
                f"Konfigurationsdatei {self.config_file} nicht gefunden. "
                "Verwende Standardkonfiguration."
            )
            self._create_default_config()
            if create:
                self.save()

    def _create_default_config(self) -> None:
        """Erstellt die Standardkonfiguration."""
        # Leere Luminanz-Grenzen = Default des Einstiegspunkts (Bild/Video)
        self.config[EXTRACTION_SECTION] = {
            "sample_size": str(DEFAULT_SAMPLE_SIZE),
            "fallback_color": "",
            "sample_lower_third": "true",
            "analyze_portrait_video": "true",
            "handle_split_view": "true",
            "ignore_black_background": "true",
            "enable_contrast_boost": "true",
            "min_luminance": "",
            "max_luminance": "",
            "use_fallback_only": "false",
        }

        self.config[LOGGING_SECTION] = {
            "console_level": "INFO",
            "file_level": "DEBUG",
            "log_file": "frame_accent.log",
            "log_dir": "logs",
        }

    def save(self) -> None:
        """Speichert die Konfiguration in die Datei."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w", encoding="utf-8") as f:
            self.config.write(f)
        logger.info(f"Konfiguration in {self.config_file} gespeichert")

    def get(self, section: str, option: str, default: Any | None = None) -> str | None:
        """
        Holt einen Konfigurationswert.

        Args:
            section: Section-Name
            option: Option-Name
            default: Default-Wert falls nicht gefunden

        Returns:
            Konfigurationswert oder default
        """
        try:
            return self.config.get(section, option)
        except (configparser.NoSectionError, configparser.NoOptionError):
            logger.debug(
                f"Konfigurationswert [{section}] {option} nicht gefunden. "
                f"Verwende Default: {default}"
            )
            return default

    def get_int(self, section: str, option: str, default: int | None = None) -> int | None:
        try:
            return self.config.getint(section, option)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return default

    def get_float(self, section: str, option: str, default: float | None = None) -> float | None:
        try:
            return self.config.getfloat(section, option)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return default

    def get_bool(self, section: str, option: str, default: bool | None = None) -> bool | None:
        try:
            return self.config.getboolean(section, option)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return default

    def set(self, section: str, option: str, value: Any) -> None:
        """
        Setzt einen Konfigurationswert.

        Args:
            section: Section-Name
            option: Option-Name
            value: Zu setzender Wert (None = leer)
        """
        if not self.config.has_section(section):
            self.config.add_section(section)
        self.config.set(section, option, "" if value is None else str(value))
        logger.debug(f"Konfiguration gesetzt: [{section}] {option} = {value}")

    def extraction_options(self, **overrides) -> ExtractionOptions:
        """
        Baut ExtractionOptions aus der [Extraction] Section.

        Args:
            **overrides: Werte die Vorrang vor der Datei haben (None wird ignoriert)

        Raises:
            ConfigurationError: Bei ungültigen Werten
        """
        data: dict[str, Any] = {}
        if self.config.has_section(EXTRACTION_SECTION):
            section = self.config[EXTRACTION_SECTION]
            for key, raw in section.items():
                raw = raw.strip()
                if raw == "":
                    continue
                data[key] = raw

        try:
            for key in _BOOL_OPTIONS:
                if key in data:
                    data[key] = self.config.getboolean(EXTRACTION_SECTION, key)
            for key in _FLOAT_OPTIONS:
                if key in data:
                    data[key] = self.config.getfloat(EXTRACTION_SECTION, key)
            if "sample_size" in data:
                data["sample_size"] = self.config.getint(EXTRACTION_SECTION, "sample_size")
        except ValueError as e:
            raise ConfigurationError(
                f"Ungültiger Wert in [{EXTRACTION_SECTION}]: {e}",
                details={"file": str(self.config_file)},
            ) from e

        data.update({key: value for key, value in overrides.items() if value is not None})

        try:
            return ExtractionOptions.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Ungültige Extraktions-Optionen: {e.error_count()} Fehler",
                details={"file": str(self.config_file), "errors": e.errors(include_url=False)},
            ) from e

    def logging_settings(self) -> dict:
        """Parameter für setup_logging() aus der [Logging] Section."""
        console = self.get(LOGGING_SECTION, "console_level", "INFO")
        file_level = self.get(LOGGING_SECTION, "file_level", "DEBUG")
        return {
            "console_level": getattr(logging, str(console).upper(), logging.INFO),
            "file_level": getattr(logging, str(file_level).upper(), logging.DEBUG),
            "log_file": self.get(LOGGING_SECTION, "log_file", "frame_accent.log"),
            "log_dir": self.get(LOGGING_SECTION, "log_dir", "logs"),
        }

    def __repr__(self) -> str:
        """String-Repräsentation."""
        sections = ", ".join(self.config.sections())
        return f"Config(file='{self.config_file}', sections=[{sections}])"
