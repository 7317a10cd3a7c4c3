"""
Service de gestion du catalogue de films.

Le catalogue possede une sequence ordonnee et bornee de films. Toutes les
requetes (id, langue, annee, note, nom) sont des parcours lineaires ; il n'y
a aucun index secondaire.

Regles :
- L'ordre d'insertion est conserve ; une suppression decale les films
  suivants d'une position (pas de trous).
- Une insertion au-dela de la capacite echoue sans modifier le catalogue.
- Les echecs (catalogue plein, id inconnu, fichier illisible) sont rapportes
  par les valeurs de retour, jamais par des exceptions.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterator, Optional, Union

from loguru import logger

from moviedb.core.entities import Movie
from moviedb.core.ports.storage import ICatalogStorage, LoadStatus
from moviedb.core.value_objects import RatingScale
from moviedb.utils.constants import DEFAULT_CAPACITY

if TYPE_CHECKING:
    from moviedb.infrastructure.persistence.seed_loader import SeedFileLoader

Number = Union[int, float]


class MovieCatalog:
    """
    Catalogue borne de films.

    Attributs injectes:
        capacity: Nombre maximum de films
        scale: Echelle de notation appliquee aux films inseres ou charges
        storage: Implementation de ICatalogStorage pour save/load
        seed_loader: Lecteur du fichier d'exemples pour load_seed
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        scale: RatingScale = RatingScale.FIVE_STAR,
        storage: Optional[ICatalogStorage] = None,
        seed_loader: Optional["SeedFileLoader"] = None,
    ) -> None:
        """
        Initialise un catalogue vide.

        Args:
            capacity: Nombre maximum de films (>= 1)
            scale: Echelle de notation du catalogue
            storage: Stockage utilise par save() et load()
            seed_loader: Lecteur utilise par load_seed()

        Raises:
            ValueError: Si capacity < 1
        """
        if capacity < 1:
            raise ValueError(f"La capacite doit etre >= 1 (recu {capacity})")
        self._capacity = capacity
        self._scale = scale
        self._storage = storage
        self._seed_loader = seed_loader
        self._movies: list[Movie] = []

    # ------------------------------------------------------------------
    # Acces en lecture
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def scale(self) -> RatingScale:
        return self._scale

    @property
    def count(self) -> int:
        return len(self._movies)

    @property
    def movies(self) -> tuple[Movie, ...]:
        """Films du catalogue, dans l'ordre."""
        return tuple(self._movies)

    @property
    def is_full(self) -> bool:
        return len(self._movies) >= self._capacity

    def __len__(self) -> int:
        return len(self._movies)

    def __iter__(self) -> Iterator[Movie]:
        return iter(tuple(self._movies))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def insert(self, movie: Movie) -> bool:
        """
        Ajoute une copie du film en fin de catalogue.

        Retourne:
            False si le catalogue est plein (rien n'est modifie)
        """
        if self.is_full:
            logger.warning(
                "Catalogue plein, film refuse",
                movie_id=movie.id,
                capacity=self._capacity,
            )
            return False
        self._movies.append(movie.copy(scale=self._scale))
        logger.debug("Film ajoute", movie_id=movie.id, name=movie.name)
        return True

    def remove_by_id(self, movie_id: int) -> bool:
        """Supprime le premier film portant movie_id. Retourne False si absent."""
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                del self._movies[index]
                logger.debug("Film supprime", movie_id=movie_id, position=index)
                return True
        return False

    def find_by_id(self, movie_id: int) -> Optional[Movie]:
        """
        Retourne le premier film portant movie_id, ou None.

        Le film retourne est celui du catalogue : le modifier modifie le catalogue.
        """
        for movie in self._movies:
            if movie.id == movie_id:
                return movie
        return None

    def update_by_id(
        self,
        movie_id: int,
        *,
        name: Optional[str] = None,
        year: Optional[int] = None,
        language: Optional[str] = None,
        rating: Optional[Number] = None,
    ) -> bool:
        """
        Met a jour les champs fournis du film movie_id.

        Les regles de validation du film s'appliquent : une note hors echelle
        est ignoree sans erreur.

        Retourne:
            False si aucun film ne porte movie_id
        """
        movie = self.find_by_id(movie_id)
        if movie is None:
            return False
        if name is not None:
            movie.name = name
        if year is not None:
            movie.year = year
        if language is not None:
            movie.language = language
        if rating is not None:
            movie.rating = rating
        logger.debug("Film mis a jour", movie_id=movie_id)
        return True

    def clear(self) -> None:
        self._movies = []

    # ------------------------------------------------------------------
    # Requetes
    # ------------------------------------------------------------------

    def filter_by_language(self, language: str) -> list[Movie]:
        """Films dont la langue correspond, sans tenir compte de la casse."""
        return [movie for movie in self._movies if movie.matches_language(language)]

    def filter_top_rated(self) -> list[Movie]:
        """Tous les films ayant la note maximale, dans l'ordre du catalogue."""
        return self._collect_max(lambda movie: movie.rating)

    def filter_latest(self) -> list[Movie]:
        """Tous les films de l'annee la plus recente, dans l'ordre du catalogue."""
        return self._collect_max(lambda movie: movie.year)

    def search_by_name(self, text: str) -> list[Movie]:
        """Films dont le nom contient text, sans tenir compte de la casse."""
        needle = text.casefold()
        return [movie for movie in self._movies if needle in movie.name.casefold()]

    def next_id(self) -> int:
        """Plus grand id present + 1 (1 si le catalogue est vide)."""
        highest = 0
        for movie in self._movies:
            if movie.id > highest:
                highest = movie.id
        return highest + 1

    def _collect_max(self, key: Callable[[Movie], Number]) -> list[Movie]:
        # Premier passage : valeur maximale ; second passage : tous les ex aequo
        if not self._movies:
            return []
        best = key(self._movies[0])
        for movie in self._movies[1:]:
            if key(movie) > best:
                best = key(movie)
        return [movie for movie in self._movies if key(movie) == best]

    # ------------------------------------------------------------------
    # Persistance
    # ------------------------------------------------------------------

    def _require_storage(self) -> ICatalogStorage:
        if self._storage is None:
            raise RuntimeError("Aucun stockage configure pour ce catalogue")
        return self._storage

    def save(self, destination: Path) -> bool:
        """Ecrit le catalogue dans destination. Retourne False si l'ecriture echoue."""
        saved = self._require_storage().write(self._movies, destination)
        if saved:
            logger.info("Catalogue sauvegarde", path=str(destination), count=len(self._movies))
        return saved

    def load(self, source: Path) -> LoadStatus:
        """
        Remplace le contenu du catalogue par celui de source.

        Retourne:
            LoadStatus.MISSING si source n'existe pas (catalogue inchange),
            LoadStatus.INVALID si source est corrompu (catalogue inchange),
            LoadStatus.LOADED sinon
        """
        result = self._require_storage().read(source, self._capacity, self._scale)
        if result.loaded:
            self._movies = result.movies
            logger.info("Catalogue charge", path=str(source), count=len(self._movies))
        return result.status

    def load_seed(self, path: Path) -> int:
        """
        Ajoute les films du fichier d'exemples, dans la limite de la capacite.

        Retourne:
            Nombre de films effectivement ajoutes
        """
        if self._seed_loader is None:
            raise RuntimeError("Aucun lecteur d'exemples configure pour ce catalogue")

        inserted = 0
        for movie in self._seed_loader.load(path, self._scale):
            if not self.insert(movie):
                break
            inserted += 1
        logger.info("Exemples charges", path=str(path), count=inserted)
        return inserted
