"""
Utilitaires partages pour les commandes CLI de MovieDB.

Ce module fournit :
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container en premier argument
- open_catalog : chargement du catalogue sauvegarde (ou des exemples)
- persist_catalog : sauvegarde du catalogue apres une modification
- resolve_style : style de notation (option CLI ou configuration)
"""

from contextlib import contextmanager
from functools import wraps
from typing import Optional

import typer
from loguru import logger as loguru_logger

from moviedb.adapters.cli.display import RatingStyle, console
from moviedb.container import Container
from moviedb.core.ports.storage import LoadStatus
from moviedb.services.catalog import MovieCatalog


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("moviedb")
    try:
        yield
    finally:
        loguru_logger.enable("moviedb")


def with_container(func):
    """
    Decorateur qui injecte un container en premier argument.

    Usage:
        @with_container
        def _my_command(container, ...):
            config = container.config()
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        container = Container()
        return func(container, *args, **kwargs)
    return wrapper


def open_catalog(container: Container) -> MovieCatalog:
    """
    Retourne le catalogue sauvegarde, ou celui des exemples s'il n'existe pas.

    Un fichier de catalogue corrompu interrompt la commande (code 1) plutot
    que d'etre ecrase par la prochaine sauvegarde.
    """
    settings = container.config()
    catalog = container.catalog()

    status = catalog.load(settings.data_file)
    if status is LoadStatus.INVALID:
        console.print(
            f"[red]Catalogue illisible :[/red] {settings.data_file}\n"
            "[dim]Supprimez le fichier ou lancez 'moviedb reset' pour repartir des exemples.[/dim]"
        )
        raise typer.Exit(code=1)
    if status is LoadStatus.MISSING:
        catalog.load_seed(settings.seed_file)
    return catalog


def persist_catalog(container: Container, catalog: MovieCatalog) -> None:
    """Sauvegarde le catalogue, ou interrompt la commande (code 1) en cas d'echec."""
    settings = container.config()
    if not catalog.save(settings.data_file):
        console.print(f"[red]Sauvegarde impossible :[/red] {settings.data_file}")
        raise typer.Exit(code=1)


def resolve_style(container: Container, style: Optional[RatingStyle]) -> RatingStyle:
    """Style demande en option, sinon celui de la configuration."""
    if style is not None:
        return style
    return RatingStyle(container.config().display_style)
