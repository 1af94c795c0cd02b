"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI :
engine SQLite, cache local, source reseau TMDB, preferences et repository.
"""

from dependency_injector import containers, providers

from .adapters.api.tmdb_network import TMDBMovieNetworkDataSource
from .adapters.preferences import DiskPreferencesStore
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.invalidation import InvalidationTracker
from .infrastructure.persistence.movie_store import SQLModelMovieStore
from .services.movie_repository import MovieRepository


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        repository = container.movie_repository()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Base de donnees
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )
    database = providers.Resource(init_db, engine=engine)

    # Invalidation partagee : toutes les ecritures notifient les memes flux
    invalidation_tracker = providers.Singleton(InvalidationTracker)

    movie_store = providers.Singleton(
        SQLModelMovieStore,
        engine=engine,
        tracker=invalidation_tracker,
    )

    # Source reseau - Singleton pour partager le client HTTP
    movie_network = providers.Singleton(
        TMDBMovieNetworkDataSource,
        api_key=config.provided.tmdb_api_key,
        base_url=config.provided.tmdb_base_url,
        language=config.provided.tmdb_language,
        timeout=config.provided.http_timeout,
        max_attempts=config.provided.http_max_attempts,
    )

    preferences = providers.Singleton(
        DiskPreferencesStore,
        cache_dir=config.provided.preferences_dir,
    )

    movie_repository = providers.Factory(
        MovieRepository,
        store=movie_store,
        network=movie_network,
        preferences=preferences,
    )
