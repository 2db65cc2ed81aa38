"""
Configuration du logging de l'application.
"""
from __future__ import annotations
import logging
import sys
from typing import Optional

LOGGER_NAMESPACES = ("core", "ui")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure les loggers des paquets `core` et `ui`.

    Args:
        level: niveau de log (logging.DEBUG, logging.INFO, ...)
        log_file: chemin optionnel d'un fichier de log.
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")

    handlers: list[logging.Handler] = []
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # évite les doublons si on rappelle setup_logging()
        for h in logger.handlers[:]:
            logger.removeHandler(h)
            h.close()
        for h in handlers:
            logger.addHandler(h)

    logging.getLogger("core").info("Logging initialized.")
