"""
Affichage des films avec Rich.

Fournit le rendu de la barre de notation (plusieurs styles), la mise en
forme d'une ligne de film et la construction du tableau a colonnes fixes
(ID, Nom, Annee, Langue, Note). Le style est toujours passe en argument.
"""

from enum import Enum
from typing import Iterable, Union

from rich.console import Console
from rich.table import Table
from rich.text import Text

from moviedb.core.entities import Movie
from moviedb.core.value_objects import RatingScale

Number = Union[int, float]

# Console partagee par toutes les commandes
console = Console()


class RatingStyle(Enum):
    """Style d'affichage de la note."""

    BARS = "bars"  # [***--] 3/5
    BLOCKS = "blocks"  # [###..] 3/5
    NUMBERS = "numbers"  # 3.0/5.0
    DOTS = "dots"  # [ooo..] 3/5
    PLUS = "plus"  # [+++  ] 3/5


# (symbole plein, symbole vide) par style
_GLYPHS = {
    RatingStyle.BARS: ("*", "-"),
    RatingStyle.BLOCKS: ("#", "."),
    RatingStyle.DOTS: ("o", "."),
    RatingStyle.PLUS: ("+", " "),
}


def format_rating_value(value: Number, scale: RatingScale) -> str:
    """Note sans decimale inutile : 3 -> "3", 7.5 -> "7.5", 8.0 -> "8"."""
    if scale.integral or float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def render_rating(
    rating: Number,
    scale: RatingScale = RatingScale.FIVE_STAR,
    style: RatingStyle = RatingStyle.BARS,
) -> str:
    """
    Retourne la representation textuelle d'une note.

    La barre contient autant de symboles pleins que la partie entiere de la
    note, completes par des symboles vides jusqu'au maximum de l'echelle.

    Exemples (echelle 1-5, note 3) :
        BARS    -> "[***--] 3/5"
        NUMBERS -> "3.0/5.0"
    """
    maximum = scale.glyph_count
    if style is RatingStyle.NUMBERS:
        return f"{float(rating):.1f}/{float(maximum):.1f}"

    filled_glyph, empty_glyph = _GLYPHS[style]
    filled = min(max(int(rating), 0), maximum)
    bar = filled_glyph * filled + empty_glyph * (maximum - filled)
    return f"[{bar}] {format_rating_value(rating, scale)}/{maximum}"


def format_movie_row(
    movie: Movie,
    style: RatingStyle = RatingStyle.BARS,
) -> tuple[str, str, str, str, str]:
    """Cellules d'une ligne du tableau : (id, nom, annee, langue, note)."""
    return (
        str(movie.id),
        movie.name,
        str(movie.year),
        movie.language,
        render_rating(movie.rating, movie.scale, style),
    )


def build_movie_table(
    movies: Iterable[Movie],
    title: str,
    style: RatingStyle = RatingStyle.BARS,
) -> Table:
    """
    Construit le tableau Rich d'une liste de films.

    Args:
        movies: Films a afficher, dans l'ordre
        title: Titre du tableau
        style: Style de la barre de notation

    Returns:
        Table avec les colonnes ID, Nom, Annee, Langue, Note et le total en legende
    """
    table = Table(title=title, title_style="bold cyan", show_lines=False)
    table.add_column("ID", justify="right", style="dim", width=5)
    table.add_column("Nom", style="bold", min_width=20, max_width=50)
    table.add_column("Annee", justify="center", width=6)
    table.add_column("Langue", width=15)
    table.add_column("Note", style="yellow", no_wrap=True)

    count = 0
    for movie in movies:
        # Text : les crochets de la barre ne doivent pas etre lus comme du balisage
        table.add_row(*(Text(cell) for cell in format_movie_row(movie, style)))
        count += 1

    table.caption = f"Total : {count} film(s)"
    return table
