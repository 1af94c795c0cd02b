"""
Configuration du logging de HiCinema via loguru.

Deux sorties :
- stderr : niveau configurable, colore, sans perturber les tableaux Rich de la CLI
- fichier : JSON avec rotation, toujours en DEBUG (requetes TMDB, tables invalidees)
"""

import sys

from loguru import logger

from hicinema.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(settings: Settings) -> None:
    """Installe les handlers loguru a partir des Settings.

    Args :
        settings : log_level, log_file, log_rotation_size et log_retention_count
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format=CONSOLE_FORMAT,
        colorize=True,
    )

    log_file = settings.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        "Logging configure",
        log_file=str(log_file),
        database=settings.database_url,
        tmdb_enabled=settings.tmdb_enabled,
    )
