"""
Fixtures pytest partagees pour les tests HiCinema.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Engine SQLite temporaire et cache local de films
- Mock de la source reseau (IMovieNetworkDataSource)
- Preferences sur repertoire temporaire et repository assemble
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import Engine

from hicinema.adapters.preferences import DiskPreferencesStore
from hicinema.config import Settings
from hicinema.core.ports.api_clients import IMovieNetworkDataSource
from hicinema.infrastructure.persistence.database import create_db_engine, init_db
from hicinema.infrastructure.persistence.invalidation import InvalidationTracker
from hicinema.infrastructure.persistence.movie_store import SQLModelMovieStore
from hicinema.services.movie_repository import MovieRepository


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler base, preferences et logs.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        tmdb_api_key="test_api_key",
        preferences_dir=tmp_path / "preferences",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def engine(tmp_path: Path) -> Iterator[Engine]:
    """Engine SQLite sur fichier temporaire, tables creees."""
    engine = init_db(create_db_engine(f"sqlite:///{tmp_path}/store.db"))
    yield engine
    engine.dispose()


@pytest.fixture
def tracker() -> InvalidationTracker:
    return InvalidationTracker()


@pytest.fixture
def store(engine: Engine, tracker: InvalidationTracker) -> SQLModelMovieStore:
    return SQLModelMovieStore(engine, tracker)


@pytest.fixture
def mock_network() -> AsyncMock:
    """
    Mock de IMovieNetworkDataSource.

    Les valeurs de retour de fetch_movies / fetch_genres doivent etre
    configurees dans chaque test.
    """
    return AsyncMock(spec=IMovieNetworkDataSource)


@pytest.fixture
def preferences(tmp_path: Path) -> Iterator[DiskPreferencesStore]:
    preferences = DiskPreferencesStore(cache_dir=tmp_path / "preferences")
    yield preferences
    preferences.close()


@pytest.fixture
def repository(
    store: SQLModelMovieStore,
    mock_network: AsyncMock,
    preferences: DiskPreferencesStore,
) -> MovieRepository:
    return MovieRepository(store=store, network=mock_network, preferences=preferences)
