"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI : configuration,
stockage binaire, lecteur d'exemples et catalogue.
"""

from dependency_injector import containers, providers

from moviedb.config import Settings
from moviedb.infrastructure.persistence import BinaryCatalogStorage, SeedFileLoader
from moviedb.services.catalog import MovieCatalog


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        catalog = container.catalog()
        catalog.load(container.config().data_file)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Stockage binaire sans etat - Singleton
    catalog_storage = providers.Singleton(BinaryCatalogStorage)

    # Le lecteur memorise les lignes ignorees du dernier chargement - Factory
    seed_loader = providers.Factory(SeedFileLoader)

    # Catalogue - Factory : un catalogue vide a chaque appel
    catalog = providers.Factory(
        MovieCatalog,
        capacity=config.provided.capacity,
        scale=config.provided.scale,
        storage=catalog_storage,
        seed_loader=seed_loader,
    )
