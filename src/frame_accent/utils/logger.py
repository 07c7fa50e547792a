"""
Logging für frame_accent.

Alle Modul-Logger hängen unter dem Paket-Logger "frame_accent". Als
Bibliothek schreibt das Paket nur auf die Console; eine rotierende
Log-Datei gibt es erst, wenn die Anwendung (z.B. die CLI) sie anfordert.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER_NAME = "frame_accent"

LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _file_handler(path: Path, level: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    log_file: str = "frame_accent.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    log_dir: str = "logs",
    log_to_file: bool = True,
) -> logging.Logger:
    """
    (Re-)konfiguriert den Paket-Logger.

    Ein erneuter Aufruf ersetzt die Handler des vorigen, so dass die CLI
    die Level aus der config.ini übernehmen kann.

    Args:
        log_file: Name der Log-Datei in log_dir
        console_level: Level der Console-Ausgabe
        file_level: Level der Log-Datei
        log_dir: Verzeichnis der Log-Datei
        log_to_file: False = nur Console

    Returns:
        Der Paket-Logger "frame_accent"
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    logger.addHandler(_console_handler(console_level))

    if log_to_file:
        log_path = Path(log_dir) / log_file
        logger.addHandler(_file_handler(log_path, file_level))
        logger.debug(f"Log-Datei: {log_path}")

    return logger


_configured = False


def get_logger(name: str = None) -> logging.Logger:
    """
    Logger für ein Modul, z.B. get_logger("analysis.extractor").

    Beim ersten Aufruf ohne vorheriges setup_logging() wird ein reiner
    Console-Logger eingerichtet.
    """
    global _configured
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not _configured:
        if not root.handlers:
            setup_logging(log_to_file=False)
        _configured = True

    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}") if name else root
