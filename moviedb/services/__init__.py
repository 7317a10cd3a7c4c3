"""
Couche application (services).

- MovieCatalog : Gestion du catalogue de films (ajout, suppression,
  mise a jour, filtres, recherche, persistance)
"""

from moviedb.services.catalog import MovieCatalog

__all__ = [
    "MovieCatalog",
]
