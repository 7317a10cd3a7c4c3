"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports de stockage :
- ICatalogStorage : Persistance de la sequence ordonnee de films
- LoadStatus : Issue d'un chargement (LOADED, MISSING, INVALID)
- LoadResult : Resultat detaille d'un chargement
"""

from moviedb.core.ports.storage import ICatalogStorage, LoadResult, LoadStatus

__all__ = [
    "ICatalogStorage",
    "LoadResult",
    "LoadStatus",
]
