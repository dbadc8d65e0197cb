"""Настройка логирования CLI и скрейпера (ядро не логирует)."""

import logging
import sys

LOGGER_NAME = "lotto"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Логгер 'lotto' с выводом в stderr; повторный вызов меняет только уровень"""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
