"""
Configuration du logging de cinemeta via loguru.

Le paquet est d'abord une bibliotheque: ses modules journalisent via
`from loguru import logger` sans configurer de sortie. Seul le point
d'entree CLI appelle configure_logging() avec les Settings:
- sortie stderr, au niveau configure
- sortie fichier JSON avec rotation, uniquement si log_file est defini
"""

import sys

from loguru import logger

from cinemeta.config import Settings

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(settings: Settings) -> None:
    """Remplace les sorties loguru par celles decrites dans les Settings.

    Args :
        settings : Parametres de l'application (log_level, log_file,
                   log_rotation_size, log_retention_count)
    """
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format=_CONSOLE_FORMAT, colorize=True)

    if settings.log_file is None:
        return

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    # Niveau DEBUG: hits du cache, chargement de configuration, replis d'ordre
    logger.add(
        settings.log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        enqueue=True,
    )
    logger.debug("Journal fichier actif", log_file=str(settings.log_file))
