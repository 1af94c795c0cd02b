"""
Configuration de la base de donnees SQLite pour HiCinema.

Ce module fournit :
- Engine SQLite utilisable depuis les threads de l'executor
- Fonction d'initialisation des tables

La base de donnees est configuree via HICINEMA_DATABASE_URL (defaut: sqlite:///data/hicinema.db).
"""

from pathlib import Path

from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Cree l'engine SQLAlchemy du cache local.

    Le repertoire parent d'un fichier SQLite est cree si necessaire. Une base
    en memoire partage une connexion unique (StaticPool), sinon chaque thread
    verrait une base vide.

    Args:
        database_url: URL SQLAlchemy (ex: "sqlite:///data/hicinema.db")
        echo: Journalise le SQL emis
    """
    kwargs = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}

    if database_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    elif database_url.startswith("sqlite:///"):
        db_path = Path(database_url.replace("sqlite:///", "", 1))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(database_url, echo=echo, **kwargs)


def init_db(engine: Engine) -> Engine:
    """
    Initialise la base de donnees en creant toutes les tables manquantes.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from hicinema.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    return engine
