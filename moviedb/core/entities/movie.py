"""
Movie entity.

A movie record held by the catalog: a numeric identity plus mutable
fields (name, year, language, rating). Field validation lives here so
that every path creating or mutating a record applies the same rules.
"""

from typing import Optional, Union

from moviedb.core.value_objects import RatingScale
from moviedb.utils.constants import YEAR_MAX, YEAR_MIN

Number = Union[int, float]


def _clamp_year(year: int) -> int:
    return min(max(int(year), YEAR_MIN), YEAR_MAX)


def _clamp_id(movie_id: int) -> int:
    return max(int(movie_id), 0)


class Movie:
    """
    One movie entry of the catalog.

    Construction never fails: out-of-range values are corrected
    (rating clamped into the scale, year into [1888, 2030], negative id to 0).

    Mutation rules:
        - name, language: stored as given
        - year, id: clamped like on construction
        - rating: ignored when outside the scale (previous value kept)

    Attributes:
        name: Movie title
        id: Catalog identifier (non-negative)
        year: Release year
        language: Original language, displayed as given
        rating: Rating within `scale`
        scale: Rating scale used for validation and display
    """

    __slots__ = ("_name", "_id", "_year", "_language", "_rating", "_scale")

    def __init__(
        self,
        name: str,
        id: int,
        year: int,
        language: str,
        rating: Number,
        scale: RatingScale = RatingScale.FIVE_STAR,
    ) -> None:
        self._scale = scale
        self._name = name
        self._id = _clamp_id(id)
        self._year = _clamp_year(year)
        self._language = language
        self._rating = scale.clamp(rating)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def id(self) -> int:
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        self._id = _clamp_id(value)

    @property
    def year(self) -> int:
        return self._year

    @year.setter
    def year(self, value: int) -> None:
        self._year = _clamp_year(value)

    @property
    def language(self) -> str:
        return self._language

    @language.setter
    def language(self, value: str) -> None:
        self._language = value

    @property
    def rating(self) -> Number:
        return self._rating

    @rating.setter
    def rating(self, value: Number) -> None:
        # Unlike the constructor, an invalid rating is not clamped
        if self._scale.contains(value):
            self._rating = self._scale.coerce(value)

    @property
    def scale(self) -> RatingScale:
        return self._scale

    def matches_language(self, language: str) -> bool:
        """Case-insensitive comparison with the stored language."""
        return self._language.casefold() == language.casefold()

    def copy(self, scale: Optional[RatingScale] = None) -> "Movie":
        """
        Return an independent copy of this record.

        When `scale` is given, the copy uses it and the rating is clamped
        into it.
        """
        return Movie(
            self._name,
            self._id,
            self._year,
            self._language,
            self._rating,
            scale=scale or self._scale,
        )

    def _fields(self) -> tuple:
        return (self._id, self._name, self._year, self._language, self._rating)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None  # mutable entity

    def __repr__(self) -> str:
        return (
            f"Movie(name={self._name!r}, id={self._id}, year={self._year}, "
            f"language={self._language!r}, rating={self._rating!r})"
        )
