"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe MOVIEDB_,
et peut optionnellement etre fournie via un fichier .env.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from moviedb.core.value_objects import RatingScale
from moviedb.utils.constants import DEFAULT_CAPACITY

# Trouver le fichier .env a la racine du projet (parent de moviedb/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe MOVIEDB_.
    Exemple : MOVIEDB_RATING_SCALE=ten_point

    Les chemins sont automatiquement etendus (~ -> repertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIEDB_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Fichiers de donnees
    data_file: Path = Field(default=Path("data/catalog.bin"))
    seed_file: Path = Field(default=_PROJECT_ROOT / "data" / "sample_movies.txt")

    # Catalogue
    capacity: int = Field(default=DEFAULT_CAPACITY, ge=1)
    rating_scale: Literal["five_star", "ten_point"] = Field(default="five_star")
    display_style: Literal["bars", "blocks", "numbers", "dots", "plus"] = Field(default="bars")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/moviedb.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("data_file", "seed_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def scale(self) -> RatingScale:
        """Echelle de notation correspondant a rating_scale."""
        return RatingScale.from_name(self.rating_scale)
