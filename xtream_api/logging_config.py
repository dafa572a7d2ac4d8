"""
Configuration du logging du client via loguru.

La bibliotheque est silencieuse par defaut (logger.disable dans le package).
configure_logging() installe les sorties et reactive les traces du client :
- Sortie console : une ligne par requete, avec l'action et l'URL masquee
- Sortie fichier (optionnelle) : traces du client seules, en JSON, avec rotation
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

PACKAGE = "xtream_api"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> "
    "<level>{message}</level> "
    "<dim>{extra}</dim>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging du client.

    Args :
        log_level : Niveau minimum pour la console (DEBUG affiche chaque requete)
        log_file : Fichier JSON des traces du client, None pour la console seule
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs a conserver

    Les traces des requetes sont emises en DEBUG, sans le mot de passe.
    """
    logger.remove()
    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            filter=PACKAGE,
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            enqueue=True,
        )

    logger.enable(PACKAGE)
    logger.bind(log_file=str(log_file) if log_file else None).debug("Logging configure")
