"""
Interface port pour le stockage du catalogue.

Interface abstraite (port) definissant le contrat de persistance d'une
sequence ordonnee de films. L'implementation concrete (format binaire)
se trouve dans infrastructure/persistence.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from moviedb.core.entities import Movie
from moviedb.core.value_objects import RatingScale


class LoadStatus(Enum):
    """Issue d'un chargement de catalogue."""

    LOADED = "loaded"  # Contenu decode avec succes
    MISSING = "missing"  # Source absente : l'appelant utilise ses valeurs par defaut
    INVALID = "invalid"  # Source illisible, tronquee ou nombre d'entrees hors bornes


@dataclass
class LoadResult:
    """
    Resultat de la lecture d'une source de catalogue.

    Attributs:
        status: Issue du chargement
        movies: Films decodes, dans l'ordre du fichier (vide sauf si LOADED)
        error_message: Description de l'erreur si status == INVALID
    """

    status: LoadStatus
    movies: list[Movie] = field(default_factory=list)
    error_message: Optional[str] = None

    @property
    def loaded(self) -> bool:
        return self.status is LoadStatus.LOADED


class ICatalogStorage(ABC):
    """
    Interface de stockage du catalogue.

    Definit les operations pour ecrire et relire la sequence complete
    des films. Aucune exception n'est propagee : les echecs sont
    rapportes par les valeurs de retour.
    """

    @abstractmethod
    def write(self, movies: Sequence[Movie], destination: Path) -> bool:
        """Ecrit les films dans destination. Retourne False si l'ecriture echoue."""
        ...

    @abstractmethod
    def read(self, source: Path, capacity: int, scale: RatingScale) -> LoadResult:
        """
        Relit les films depuis source.

        Args :
            source : Fichier a lire
            capacity : Nombre maximum de films acceptes
            scale : Echelle de notation des films reconstruits

        Retourne :
            LoadResult avec le statut MISSING, INVALID ou LOADED
        """
        ...
