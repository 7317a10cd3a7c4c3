"""
Tests pour l'entite Movie.

Verifie la correction des champs a la construction et les regles de
mutation (note ignoree hors echelle, annee et id bornes).
"""

import pytest

from moviedb.core.entities import Movie
from moviedb.core.value_objects import RatingScale


class TestMovieConstruction:
    """Tests pour la correction des champs a la construction."""

    def test_valid_fields_are_kept(self):
        """Des valeurs valides sont conservees telles quelles."""
        movie = Movie("Inception", 8, 2010, "English", 5)
        assert movie.name == "Inception"
        assert movie.id == 8
        assert movie.year == 2010
        assert movie.language == "English"
        assert movie.rating == 5

    @pytest.mark.parametrize(
        "year,expected",
        [(1500, 1888), (1887, 1888), (1888, 1888), (2030, 2030), (2031, 2030), (9999, 2030)],
    )
    def test_year_is_clamped(self, year, expected):
        """L'annee est ramenee dans [1888, 2030]."""
        assert Movie("X", 1, year, "English", 3).year == expected

    @pytest.mark.parametrize("rating,expected", [(-3, 1), (0, 1), (1, 1), (5, 5), (6, 5), (42, 5)])
    def test_rating_is_clamped_on_five_star_scale(self, rating, expected):
        """La note est ramenee dans [1, 5]."""
        assert Movie("X", 1, 2000, "English", rating).rating == expected

    def test_rating_is_clamped_on_ten_point_scale(self):
        """Sur l'echelle 1.0-10.0, la note est bornee et reste decimale."""
        low = Movie("X", 1, 2000, "English", 0.2, scale=RatingScale.TEN_POINT)
        high = Movie("X", 1, 2000, "English", 11.5, scale=RatingScale.TEN_POINT)
        mid = Movie("X", 1, 2000, "English", 7.5, scale=RatingScale.TEN_POINT)
        assert low.rating == 1.0
        assert high.rating == 10.0
        assert mid.rating == 7.5

    def test_negative_id_becomes_zero(self):
        """Un id negatif est ramene a 0."""
        assert Movie("X", -7, 2000, "English", 3).id == 0

    def test_nan_rating_falls_back_to_minimum(self):
        """Une note NaN ne fait pas echouer la construction."""
        movie = Movie("X", 1, 2000, "English", float("nan"), scale=RatingScale.TEN_POINT)
        assert movie.rating == 1.0


class TestMovieMutation:
    """Tests pour les setters."""

    def test_rating_setter_accepts_value_in_scale(self):
        """Une note valide est stockee exactement."""
        movie = Movie("X", 1, 2000, "English", 3)
        movie.rating = 4
        assert movie.rating == 4

    @pytest.mark.parametrize("invalid", [0, 6, -1, 100, 2.5])
    def test_rating_setter_ignores_out_of_scale_value(self, invalid):
        """Une note hors echelle est ignoree : la valeur precedente est conservee."""
        movie = Movie("X", 1, 2000, "English", 3)
        movie.rating = invalid
        assert movie.rating == 3

    def test_rating_setter_on_ten_point_scale(self):
        """Sur l'echelle decimale, 8.5 est accepte et 10.5 ignore."""
        movie = Movie("X", 1, 2000, "English", 5.0, scale=RatingScale.TEN_POINT)
        movie.rating = 8.5
        assert movie.rating == 8.5
        movie.rating = 10.5
        assert movie.rating == 8.5

    def test_year_setter_clamps(self):
        """Le setter d'annee applique les memes bornes que le constructeur."""
        movie = Movie("X", 1, 2000, "English", 3)
        movie.year = 1700
        assert movie.year == 1888
        movie.year = 2100
        assert movie.year == 2030

    def test_id_setter_clamps(self):
        movie = Movie("X", 1, 2000, "English", 3)
        movie.id = -5
        assert movie.id == 0

    def test_name_and_language_setters(self):
        """Nom et langue sont stockes sans transformation."""
        movie = Movie("X", 1, 2000, "English", 3)
        movie.name = "  Nouveau Nom "
        movie.language = "fRENCH"
        assert movie.name == "  Nouveau Nom "
        assert movie.language == "fRENCH"


class TestMovieLanguage:
    """Tests pour matches_language."""

    @pytest.mark.parametrize("query", ["french", "FRENCH", "French", "fReNcH"])
    def test_matches_language_ignores_case(self, query):
        """La comparaison de langue ne tient pas compte de la casse."""
        assert Movie("X", 1, 2000, "French", 3).matches_language(query)

    def test_matches_language_requires_full_match(self):
        """Une sous-chaine ne suffit pas."""
        movie = Movie("X", 1, 2000, "French", 3)
        assert not movie.matches_language("Fren")
        assert not movie.matches_language("English")


class TestMovieCopyAndEquality:
    """Tests pour copy() et l'egalite."""

    def test_copy_is_independent(self):
        """Modifier la copie ne modifie pas l'original."""
        original = Movie("Inception", 8, 2010, "English", 5)
        clone = original.copy()
        clone.name = "Autre"
        assert original.name == "Inception"
        assert clone == Movie("Autre", 8, 2010, "English", 5)

    def test_copy_with_other_scale_clamps_rating(self):
        """Copier vers une echelle plus petite borne la note."""
        movie = Movie("X", 1, 2000, "English", 9.0, scale=RatingScale.TEN_POINT)
        clone = movie.copy(scale=RatingScale.FIVE_STAR)
        assert clone.rating == 5
        assert clone.scale is RatingScale.FIVE_STAR

    def test_equality_is_field_by_field(self):
        a = Movie("Inception", 8, 2010, "English", 5)
        b = Movie("Inception", 8, 2010, "English", 5)
        assert a == b
        assert a != Movie("Inception", 9, 2010, "English", 5)

    def test_movie_is_not_hashable(self):
        """Une entite mutable n'est pas hashable."""
        with pytest.raises(TypeError):
            hash(Movie("X", 1, 2000, "English", 3))
