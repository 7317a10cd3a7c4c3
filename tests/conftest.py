"""
Fixtures pytest partagees pour les tests MovieDB.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Films d'exemple et catalogues pre-remplis
- Fichier d'exemples au format texte
"""

from pathlib import Path

import pytest

from moviedb.config import Settings
from moviedb.core.entities import Movie
from moviedb.infrastructure.persistence import BinaryCatalogStorage, SeedFileLoader
from moviedb.services.catalog import MovieCatalog


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le catalogue et les logs
    de chaque test.
    """
    return Settings(
        data_file=tmp_path / "catalog.bin",
        seed_file=tmp_path / "seed.txt",
        capacity=10,
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def sample_movies() -> list[Movie]:
    """Quatre films aux notes [5, 3, 5, 4]."""
    return [
        Movie("Inception", 1, 2010, "English", 5),
        Movie("La Haine", 2, 1995, "French", 3),
        Movie("Parasite", 3, 2019, "Korean", 5),
        Movie("Intouchables", 4, 2011, "French", 4),
    ]


@pytest.fixture
def catalog() -> MovieCatalog:
    """Catalogue vide de capacite 5, avec stockage binaire et lecteur d'exemples."""
    return MovieCatalog(
        capacity=5,
        storage=BinaryCatalogStorage(),
        seed_loader=SeedFileLoader(),
    )


@pytest.fixture
def filled_catalog(catalog: MovieCatalog, sample_movies: list[Movie]) -> MovieCatalog:
    """Catalogue contenant sample_movies, dans l'ordre."""
    for movie in sample_movies:
        assert catalog.insert(movie)
    return catalog


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    """Fichier d'exemples de trois films valides."""
    path = tmp_path / "seed.txt"
    path.write_text(
        "# name|id|year|language|rating\n"
        "The Godfather|1|1972|English|5\n"
        "Amélie|2|2001|French|5\n"
        "La Haine|3|1995|French|4\n",
        encoding="utf-8",
    )
    return path
