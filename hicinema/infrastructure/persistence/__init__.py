"""
Module de persistance SQLite pour HiCinema.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine SQLite, initialisation des tables
- models.py : Modeles SQLModel representant les tables de la base de donnees
- invalidation.py : Invalidation des flux de lecture par table
- movie_store.py : Cache local des films (IMovieStore)

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans le
repository de films.

Usage:
    from hicinema.infrastructure.persistence import create_db_engine, init_db

    engine = init_db(create_db_engine("sqlite:///data/hicinema.db"))
    store = SQLModelMovieStore(engine, InvalidationTracker())
"""

from hicinema.infrastructure.persistence.database import create_db_engine, init_db
from hicinema.infrastructure.persistence.invalidation import (
    InvalidationTracker,
    live_query,
)
from hicinema.infrastructure.persistence.models import (
    GenreModel,
    MovieGenreLink,
    MovieModel,
    MovieTypeLink,
)
from hicinema.infrastructure.persistence.movie_store import SQLModelMovieStore

__all__ = [
    "create_db_engine",
    "init_db",
    "InvalidationTracker",
    "live_query",
    "GenreModel",
    "MovieGenreLink",
    "MovieModel",
    "MovieTypeLink",
    "SQLModelMovieStore",
]
