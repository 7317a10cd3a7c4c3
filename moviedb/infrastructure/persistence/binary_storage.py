"""
Stockage binaire du catalogue.

Format (little-endian, largeurs d'un hote 64 bits) :

    [int32 count]
    count fois :
        [int32 id]
        [uint64 name_length][octets UTF-8 du nom]
        [int32 year]
        [uint64 language_length][octets UTF-8 de la langue]
        [float64 rating]

La lecture echoue proprement (LoadStatus.INVALID) si le nombre declare est
negatif ou depasse la capacite, si le contenu est tronque ou suivi d'octets
en trop, ou si une chaine n'est pas de l'UTF-8 valide. Aucun film n'est
retourne dans ces cas.
"""

import struct
from pathlib import Path
from typing import Sequence

from loguru import logger

from moviedb.core.entities import Movie
from moviedb.core.ports.storage import ICatalogStorage, LoadResult, LoadStatus
from moviedb.core.value_objects import RatingScale

_INT32 = struct.Struct("<i")
_LENGTH = struct.Struct("<Q")
_RATING = struct.Struct("<d")

ENCODING = "utf-8"


class CatalogFormatError(Exception):
    """Contenu binaire invalide (tronque, nombre hors bornes, texte non decodable)."""


def _pack_text(value: str) -> bytes:
    raw = value.encode(ENCODING)
    return _LENGTH.pack(len(raw)) + raw


def encode_movies(movies: Sequence[Movie]) -> bytes:
    """
    Serialise une sequence de films au format binaire.

    Raises :
        struct.error : Si un id ou une annee depasse la plage int32
        UnicodeEncodeError : Si un texte contient un caractere non encodable
            (surrogate isole)
    """
    parts = [_INT32.pack(len(movies))]
    for movie in movies:
        parts.append(_INT32.pack(movie.id))
        parts.append(_pack_text(movie.name))
        parts.append(_INT32.pack(movie.year))
        parts.append(_pack_text(movie.language))
        parts.append(_RATING.pack(float(movie.rating)))
    return b"".join(parts)


class _BufferReader:
    """Curseur de lecture sur un buffer, avec controle des bornes."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def unpack(self, fmt: struct.Struct):
        if self._offset + fmt.size > len(self._data):
            raise CatalogFormatError(f"Contenu tronque a l'octet {self._offset}")
        (value,) = fmt.unpack_from(self._data, self._offset)
        self._offset += fmt.size
        return value

    def text(self) -> str:
        length = self.unpack(_LENGTH)
        end = self._offset + length
        if end > len(self._data):
            raise CatalogFormatError(
                f"Chaine de {length} octets tronquee a l'octet {self._offset}"
            )
        raw = self._data[self._offset:end]
        self._offset = end
        try:
            return raw.decode(ENCODING)
        except UnicodeDecodeError as e:
            raise CatalogFormatError(f"Chaine non decodable : {e}") from e


def decode_movies(data: bytes, capacity: int, scale: RatingScale) -> list[Movie]:
    """
    Deserialise le contenu binaire en liste de films.

    Args :
        data : Contenu complet du fichier
        capacity : Nombre maximum de films acceptes
        scale : Echelle de notation des films reconstruits

    Retourne :
        Les films dans l'ordre du fichier

    Raises :
        CatalogFormatError : Si le contenu est invalide
    """
    reader = _BufferReader(data)
    count = reader.unpack(_INT32)
    if count < 0 or count > capacity:
        raise CatalogFormatError(
            f"Nombre de films declare hors bornes : {count} (capacite {capacity})"
        )

    movies = []
    for _ in range(count):
        movie_id = reader.unpack(_INT32)
        name = reader.text()
        year = reader.unpack(_INT32)
        language = reader.text()
        rating = reader.unpack(_RATING)
        movies.append(Movie(name, movie_id, year, language, rating, scale=scale))

    if reader.remaining:
        raise CatalogFormatError(
            f"{reader.remaining} octet(s) en trop apres le dernier film"
        )
    return movies


class BinaryCatalogStorage(ICatalogStorage):
    """
    Implementation binaire de ICatalogStorage.

    Le contenu est encode entierement en memoire avant l'ouverture du
    fichier, de sorte qu'une erreur d'encodage ne laisse pas de fichier
    partiellement ecrit.
    """

    def write(self, movies: Sequence[Movie], destination: Path) -> bool:
        """Ecrit les films dans destination. Retourne False en cas d'echec."""
        try:
            payload = encode_movies(movies)
        except (struct.error, UnicodeEncodeError) as e:
            logger.error("Encodage du catalogue impossible", error=str(e))
            return False

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with open(destination, "wb") as f:
                f.write(payload)
        except OSError as e:
            logger.error(
                "Ecriture du catalogue impossible",
                path=str(destination),
                error=str(e),
            )
            return False

        logger.debug(
            "Catalogue ecrit", path=str(destination), count=len(movies), size=len(payload)
        )
        return True

    def read(self, source: Path, capacity: int, scale: RatingScale) -> LoadResult:
        """Relit les films depuis source (MISSING, INVALID ou LOADED)."""
        if not source.exists():
            logger.debug("Aucun catalogue sauvegarde", path=str(source))
            return LoadResult(status=LoadStatus.MISSING)

        try:
            data = source.read_bytes()
        except OSError as e:
            logger.error("Lecture du catalogue impossible", path=str(source), error=str(e))
            return LoadResult(status=LoadStatus.INVALID, error_message=str(e))

        try:
            movies = decode_movies(data, capacity, scale)
        except CatalogFormatError as e:
            logger.error("Catalogue corrompu", path=str(source), error=str(e))
            return LoadResult(status=LoadStatus.INVALID, error_message=str(e))

        return LoadResult(status=LoadStatus.LOADED, movies=movies)
