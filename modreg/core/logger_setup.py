import logging
from pathlib import Path

from .config_manager import ConfigManager


def setup_logging(config_manager: ConfigManager) -> logging.Logger:
    """Configure the ``modreg`` logger based on config settings.

    Args:
        config_manager: ConfigManager instance with logging settings

    Returns:
        The configured package logger
    """
    settings = config_manager.settings().logging

    logger = logging.getLogger("modreg")
    logger.setLevel(settings.level.upper())

    formatter = logging.Formatter(settings.format)

    if settings.file:
        log_dir = Path(settings.file).parent
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.file, mode="a")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
