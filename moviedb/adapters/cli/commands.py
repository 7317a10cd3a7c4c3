"""
Commandes CLI du catalogue : consultation, filtres, recherche et modifications.

Chaque commande charge le catalogue sauvegarde (ou les exemples), execute une
operation et, si elle a modifie le catalogue, le sauvegarde.
"""

from typing import Annotated, Optional

import typer
from rich.markup import escape

from moviedb.adapters.cli.display import (
    RatingStyle,
    build_movie_table,
    console,
    render_rating,
)
from moviedb.adapters.cli.helpers import (
    open_catalog,
    persist_catalog,
    resolve_style,
    suppress_loguru,
    with_container,
)
from moviedb.core.entities import Movie

StyleOption = Annotated[
    Optional[RatingStyle],
    typer.Option("--style", "-s", help="Style de la barre de notation"),
]


# ============================================================================
# Consultation
# ============================================================================


def list_movies(style: StyleOption = None) -> None:
    """Affiche tous les films du catalogue."""
    _list_movies(style)


@with_container
def _list_movies(container, style: Optional[RatingStyle]) -> None:
    with suppress_loguru():
        catalog = open_catalog(container)
        table = build_movie_table(
            catalog, "Catalogue complet", resolve_style(container, style)
        )
        console.print(table)


def top_rated(style: StyleOption = None) -> None:
    """Affiche le ou les films les mieux notes."""
    _top_rated(style)


@with_container
def _top_rated(container, style: Optional[RatingStyle]) -> None:
    with suppress_loguru():
        catalog = open_catalog(container)
        movies = catalog.filter_top_rated()
        if not movies:
            console.print("[yellow]Le catalogue est vide.[/yellow]")
            return
        style = resolve_style(container, style)
        best = render_rating(movies[0].rating, catalog.scale, RatingStyle.NUMBERS)
        console.print(build_movie_table(movies, f"Films les mieux notes [{best}]", style))


def latest(style: StyleOption = None) -> None:
    """Affiche le ou les films les plus recents."""
    _latest(style)


@with_container
def _latest(container, style: Optional[RatingStyle]) -> None:
    with suppress_loguru():
        catalog = open_catalog(container)
        movies = catalog.filter_latest()
        if not movies:
            console.print("[yellow]Le catalogue est vide.[/yellow]")
            return
        title = f"Films les plus recents [{movies[0].year}]"
        console.print(build_movie_table(movies, title, resolve_style(container, style)))


def language(
    lang: Annotated[str, typer.Argument(help="Langue recherchee (casse ignoree)")],
    style: StyleOption = None,
) -> None:
    """Affiche les films d'une langue donnee."""
    _language(lang, style)


@with_container
def _language(container, lang: str, style: Optional[RatingStyle]) -> None:
    with suppress_loguru():
        catalog = open_catalog(container)
        movies = catalog.filter_by_language(lang)
        if not movies:
            console.print(f"[yellow]Aucun film en {escape(lang)}.[/yellow]")
            return
        title = f"Films en {escape(lang)}"
        console.print(build_movie_table(movies, title, resolve_style(container, style)))


def search(
    text: Annotated[str, typer.Argument(help="Texte contenu dans le nom (casse ignoree)")],
    style: StyleOption = None,
) -> None:
    """Recherche les films dont le nom contient un texte."""
    _search(text, style)


@with_container
def _search(container, text: str, style: Optional[RatingStyle]) -> None:
    with suppress_loguru():
        catalog = open_catalog(container)
        movies = catalog.search_by_name(text)
        if not movies:
            console.print(f"[yellow]Aucun film ne correspond a '{escape(text)}'.[/yellow]")
            return
        title = f"Recherche : {escape(text)}"
        console.print(build_movie_table(movies, title, resolve_style(container, style)))


def show(
    movie_id: Annotated[int, typer.Argument(help="ID du film")],
    style: StyleOption = None,
) -> None:
    """Affiche un film par son ID."""
    _show(movie_id, style)


@with_container
def _show(container, movie_id: int, style: Optional[RatingStyle]) -> None:
    with suppress_loguru():
        catalog = open_catalog(container)
        movie = catalog.find_by_id(movie_id)
        if movie is None:
            console.print(f"[red]Aucun film avec l'ID {movie_id}.[/red]")
            raise typer.Exit(code=1)
        title = f"Film #{movie_id}"
        console.print(build_movie_table([movie], title, resolve_style(container, style)))


# ============================================================================
# Modifications
# ============================================================================


def add(
    name: Annotated[str, typer.Argument(help="Nom du film")],
    year: Annotated[int, typer.Option("--year", "-y", help="Annee de sortie")],
    lang: Annotated[str, typer.Option("--language", "-l", help="Langue originale")],
    rating: Annotated[float, typer.Option("--rating", "-r", help="Note")],
    movie_id: Annotated[
        Optional[int],
        typer.Option("--id", help="ID a utiliser (defaut : prochain ID libre)"),
    ] = None,
) -> None:
    """Ajoute un film au catalogue."""
    _add(name, year, lang, rating, movie_id)


@with_container
def _add(
    container,
    name: str,
    year: int,
    lang: str,
    rating: float,
    movie_id: Optional[int],
) -> None:
    with suppress_loguru():
        catalog = open_catalog(container)
        if movie_id is None:
            movie_id = catalog.next_id()
        elif catalog.find_by_id(movie_id) is not None:
            console.print(f"[yellow]Attention : l'ID {movie_id} est deja utilise.[/yellow]")

        movie = Movie(name, movie_id, year, lang, rating, scale=catalog.scale)
        if not catalog.insert(movie):
            console.print(
                f"[red]Catalogue plein[/red] ({catalog.count}/{catalog.capacity}), "
                "film non ajoute."
            )
            raise typer.Exit(code=1)

        persist_catalog(container, catalog)
        console.print(f"[green]✓[/green] Film ajoute : #{movie.id} {escape(movie.name)} ({movie.year})")


def remove(movie_id: Annotated[int, typer.Argument(help="ID du film a supprimer")]) -> None:
    """Supprime un film du catalogue."""
    _remove(movie_id)


@with_container
def _remove(container, movie_id: int) -> None:
    with suppress_loguru():
        catalog = open_catalog(container)
        if not catalog.remove_by_id(movie_id):
            console.print(f"[red]Aucun film avec l'ID {movie_id}.[/red]")
            raise typer.Exit(code=1)
        persist_catalog(container, catalog)
        console.print(f"[green]✓[/green] Film #{movie_id} supprime.")


def update(
    movie_id: Annotated[int, typer.Argument(help="ID du film a modifier")],
    name: Annotated[Optional[str], typer.Option("--name", "-n", help="Nouveau nom")] = None,
    year: Annotated[Optional[int], typer.Option("--year", "-y", help="Nouvelle annee")] = None,
    lang: Annotated[
        Optional[str], typer.Option("--language", "-l", help="Nouvelle langue")
    ] = None,
    rating: Annotated[Optional[float], typer.Option("--rating", "-r", help="Nouvelle note")] = None,
) -> None:
    """Modifie les champs d'un film."""
    _update(movie_id, name, year, lang, rating)


@with_container
def _update(
    container,
    movie_id: int,
    name: Optional[str],
    year: Optional[int],
    lang: Optional[str],
    rating: Optional[float],
) -> None:
    if name is None and year is None and lang is None and rating is None:
        console.print("[yellow]Rien a modifier.[/yellow]")
        return

    with suppress_loguru():
        catalog = open_catalog(container)
        if rating is not None and not catalog.scale.contains(rating):
            console.print(f"[yellow]Note {rating} hors echelle, ignoree.[/yellow]")

        if not catalog.update_by_id(
            movie_id, name=name, year=year, language=lang, rating=rating
        ):
            console.print(f"[red]Aucun film avec l'ID {movie_id}.[/red]")
            raise typer.Exit(code=1)

        persist_catalog(container, catalog)
        console.print(f"[green]✓[/green] Film #{movie_id} mis a jour.")


def reset() -> None:
    """Remplace le catalogue sauvegarde par les films d'exemple."""
    _reset()


@with_container
def _reset(container) -> None:
    settings = container.config()
    if not settings.seed_file.is_file():
        console.print(
            f"[red]Fichier d'exemples introuvable :[/red] {settings.seed_file}\n"
            "[dim]Le catalogue sauvegarde n'a pas ete modifie.[/dim]"
        )
        raise typer.Exit(code=1)

    with suppress_loguru():
        catalog = container.catalog()
        count = catalog.load_seed(settings.seed_file)
        persist_catalog(container, catalog)
        console.print(f"[green]✓[/green] Catalogue reinitialise : {count} film(s).")
