"""
Point d'entree CLI de MovieDB.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from moviedb import __version__
from moviedb.adapters.cli.commands import (
    add,
    language,
    latest,
    list_movies,
    remove,
    reset,
    search,
    show,
    top_rated,
    update,
)
from moviedb.config import Settings
from moviedb.logging_config import configure_logging

app = typer.Typer(
    name="moviedb",
    help="Catalogue de films en memoire",
)

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """MovieDB - Gestion d'un catalogue de films."""
    state["quiet"] = quiet
    state["verbose"] = 0 if quiet else verbose

    settings = get_config()
    configure_logging(
        log_level=_console_level(settings),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    logger.debug("Demarrage de MovieDB", version=__version__)


# Consultation
# Note: la fonction s'appelle list_movies pour ne pas masquer le builtin list
app.command(name="list")(list_movies)
app.command(name="top-rated")(top_rated)
app.command()(latest)
app.command()(language)
app.command()(search)
app.command()(show)

# Modifications
app.command()(add)
app.command()(remove)
app.command()(update)
app.command()(reset)


def get_config() -> Settings:
    """Charge les parametres de l'application (environnement et .env)."""
    return Settings()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration MovieDB")
    typer.echo(f"Catalogue : {config.data_file}")
    typer.echo(f"Exemples : {config.seed_file}")
    typer.echo(f"Capacite : {config.capacity}")
    typer.echo(f"Echelle de notation : {config.rating_scale}")
    typer.echo(f"Style d'affichage : {config.display_style}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MovieDB v{__version__}")


def _console_level(settings: Settings) -> str:
    if state["quiet"]:
        return "ERROR"
    if state["verbose"]:
        return "DEBUG"
    return settings.log_level


def main() -> None:
    """Point d'entree de l'application."""
    app()


if __name__ == "__main__":
    main()
