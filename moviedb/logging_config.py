"""
Configuration du logging de MovieDB via loguru.

Les modules du paquet journalisent sous le nom "moviedb" :
- le catalogue : ajouts, suppressions et mises a jour (DEBUG), sauvegardes
  et chargements (INFO), insertions refusees car le catalogue est plein
  (WARNING) ;
- le stockage binaire : fichiers illisibles ou corrompus et ecritures
  impossibles (ERROR) ;
- le lecteur d'exemples : lignes ignorees et fichier introuvable (WARNING).

La console ne recoit que le niveau demande par --verbose/--quiet ou
MOVIEDB_LOG_LEVEL ; le fichier recoit tout, en JSON, avec rotation.
Les commandes CLI desactivent ces logs pendant l'affichage Rich
(voir suppress_loguru).
"""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/moviedb.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs a conserver
    """
    # Supprime le handler par defaut
    logger.remove()

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Handler fichier - JSON pour l'analyse
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,  # Sortie JSON
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
    )

    logger.debug("Logging configure", log_file=str(log_file), rotation=rotation_size)
