"""
Lecture du fichier d'exemples au format texte.

Une ligne par film, champs separes par '|' dans l'ordre :

    name|id|year|language|rating

Le nom est tout ce qui precede les quatre derniers delimiteurs, il peut donc
lui-meme contenir un '|'. Les lignes vides et les commentaires ('#') sont
ignores silencieusement ; les lignes incompletes ou dont les champs
numeriques ne se lisent pas sont ignorees avec un avertissement.
"""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from loguru import logger

from moviedb.core.entities import Movie
from moviedb.core.value_objects import RatingScale
from moviedb.utils.constants import SEED_COMMENT_PREFIX, SEED_DELIMITER, SEED_FIELD_COUNT


@dataclass
class SkippedLine:
    """
    Ligne ignoree lors de la lecture.

    Attributs:
        line_number: Numero de ligne (commence a 1)
        content: Contenu brut de la ligne
        reason: Motif du rejet
    """

    line_number: int
    content: str
    reason: str


def parse_seed_line(line: str, scale: RatingScale) -> Movie:
    """
    Convertit une ligne du fichier d'exemples en film.

    Raises :
        ValueError : Si la ligne a moins de quatre delimiteurs, si un
            champ numerique est invalide ou si la note n'est pas finie
    """
    parts = line.rsplit(SEED_DELIMITER, SEED_FIELD_COUNT - 1)
    if len(parts) < SEED_FIELD_COUNT:
        raise ValueError(
            f"{len(parts) - 1} delimiteur(s) au lieu de {SEED_FIELD_COUNT - 1}"
        )

    name, raw_id, raw_year, language, raw_rating = parts
    movie_id = int(raw_id.strip())
    year = int(raw_year.strip())
    rating = float(raw_rating.strip())
    if not math.isfinite(rating):
        raise ValueError(f"Note non finie : {raw_rating.strip()!r}")
    return Movie(name.strip(), movie_id, year, language.strip(), rating, scale=scale)


class SeedFileLoader:
    """
    Lecteur de fichiers d'exemples.

    Attributs:
        skipped: Lignes ignorees lors du dernier appel a load()
    """

    def __init__(self) -> None:
        self.skipped: list[SkippedLine] = []

    def parse_lines(self, lines: Iterable[str], scale: RatingScale) -> Iterator[Movie]:
        """Genere les films valides d'une suite de lignes."""
        for line_number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            stripped = line.strip()
            if not stripped or stripped.startswith(SEED_COMMENT_PREFIX):
                continue
            try:
                yield parse_seed_line(line, scale)
            except ValueError as e:
                logger.warning(
                    "Ligne d'exemple ignoree",
                    line_number=line_number,
                    line=line,
                    reason=str(e),
                )
                self.skipped.append(SkippedLine(line_number, line, str(e)))

    def load(
        self, path: Path, scale: RatingScale = RatingScale.FIVE_STAR
    ) -> list[Movie]:
        """
        Lit tous les films valides de path.

        Args :
            path : Fichier d'exemples
            scale : Echelle de notation des films crees

        Retourne :
            Les films dans l'ordre du fichier (liste vide si le fichier
            est absent ou illisible)
        """
        self.skipped = []
        try:
            with open(path, encoding="utf-8") as f:
                movies = list(self.parse_lines(f, scale))
        except FileNotFoundError:
            logger.warning("Fichier d'exemples introuvable", path=str(path))
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Lecture du fichier d'exemples impossible", path=str(path), error=str(e))
            return []

        logger.debug(
            "Fichier d'exemples lu",
            path=str(path),
            count=len(movies),
            skipped=len(self.skipped),
        )
        return movies

