"""
Module de persistance fichier pour MovieDB.

Contient :

- binary_storage.py : Format binaire du catalogue (implementation de ICatalogStorage)
- seed_loader.py : Lecture du fichier d'exemples au format texte delimite

Usage:
    from moviedb.infrastructure.persistence import BinaryCatalogStorage, SeedFileLoader

    storage = BinaryCatalogStorage()
    storage.write(movies, Path("data/catalog.bin"))
    movies = SeedFileLoader().load(Path("data/sample_movies.txt"))
"""

from moviedb.infrastructure.persistence.binary_storage import (
    BinaryCatalogStorage,
    CatalogFormatError,
    decode_movies,
    encode_movies,
)
from moviedb.infrastructure.persistence.seed_loader import (
    SeedFileLoader,
    SkippedLine,
    parse_seed_line,
)

__all__ = [
    "BinaryCatalogStorage",
    "CatalogFormatError",
    "decode_movies",
    "encode_movies",
    "SeedFileLoader",
    "SkippedLine",
    "parse_seed_line",
]
