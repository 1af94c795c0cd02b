"""
Implementation SQLModel du cache local de films.

Implemente l'interface IMovieStore :
- Flux de lecture re-emis apres chaque ecriture touchant leurs tables
- Upsert par ID (films, genres) via INSERT ... ON CONFLICT DO UPDATE
- Insertions idempotentes (liens) via INSERT ... ON CONFLICT DO NOTHING

Le SQL bloquant est execute dans l'executor par defaut. Les ecritures sont
serialisees par un verrou asyncio (un seul ecrivain a la fois). Une base en
memoire (StaticPool) n'a qu'une connexion : lectures et ecritures passent
alors par un executor a un seul thread.
"""

import asyncio
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Optional

from loguru import logger
from sqlalchemy import Engine, func
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, select

from hicinema.core.entities.media import MovieCategory
from hicinema.core.ports.repositories import IMovieStore
from hicinema.infrastructure.persistence.invalidation import (
    InvalidationTracker,
    live_query,
)
from hicinema.infrastructure.persistence.models import (
    GENRES_TABLE,
    MOVIE_GENRES_TABLE,
    MOVIE_TYPES_TABLE,
    MOVIES_TABLE,
    GenreModel,
    MovieGenreLink,
    MovieModel,
    MovieTypeLink,
)


def _upsert_statement(model: type[SQLModel], rows: list[SQLModel]):
    """INSERT ... ON CONFLICT(pk) DO UPDATE sur toutes les colonnes hors cle."""
    table = model.__table__
    statement = sqlite_insert(table).values([row.model_dump() for row in rows])
    primary_keys = [column.name for column in table.primary_key.columns]
    return statement.on_conflict_do_update(
        index_elements=primary_keys,
        set_={
            column.name: statement.excluded[column.name]
            for column in table.columns
            if column.name not in primary_keys
        },
    )


def _insert_or_ignore_statement(model: type[SQLModel], rows: list[SQLModel]):
    """INSERT ... ON CONFLICT DO NOTHING : les doublons sont ignores."""
    statement = sqlite_insert(model.__table__).values([row.model_dump() for row in rows])
    return statement.on_conflict_do_nothing()


class SQLModelMovieStore(IMovieStore):
    """
    Cache local SQLite des films, genres et listes.

    Example:
        store = SQLModelMovieStore(engine, InvalidationTracker())
        async for movies in store.stream_category(MovieCategory.POPULAR):
            ...
    """

    def __init__(self, engine: Engine, tracker: InvalidationTracker) -> None:
        """
        Args :
            engine : Engine SQLAlchemy (tables deja creees par init_db)
            tracker : Registre des invalidations partage par les flux
        """
        self._engine = engine
        self._tracker = tracker
        self._write_lock = asyncio.Lock()
        # Connexion partagee : une requete a la fois, meme si l'appelant est annule
        self._executor: Optional[ThreadPoolExecutor] = None
        if isinstance(engine.pool, StaticPool):
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="hicinema-sqlite")

    async def _run(self, func_, *args) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, partial(func_, *args))

    def close(self) -> None:
        """Arrete l'executor dedie (base en memoire uniquement)."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    # Lectures

    def _select_category(self, category: MovieCategory) -> list[MovieModel]:
        statement = (
            select(MovieModel)
            .join(MovieTypeLink, MovieTypeLink.movie_id == MovieModel.id)
            .where(MovieTypeLink.category == category.value)
            .order_by(MovieTypeLink.page, MovieTypeLink.position, MovieModel.id)
        )
        with Session(self._engine) as session:
            return list(session.exec(statement).all())

    def _select_movie(self, movie_id: int) -> Optional[MovieModel]:
        with Session(self._engine) as session:
            return session.get(MovieModel, movie_id)

    def _select_genres(self, movie_id: int) -> list[GenreModel]:
        statement = (
            select(GenreModel)
            .join(MovieGenreLink, MovieGenreLink.genre_id == GenreModel.id)
            .where(MovieGenreLink.movie_id == movie_id)
            .order_by(GenreModel.name)
        )
        with Session(self._engine) as session:
            return list(session.exec(statement).all())

    def stream_category(self, category: MovieCategory) -> AsyncIterator[list[MovieModel]]:
        return live_query(
            self._tracker,
            {MOVIES_TABLE, MOVIE_TYPES_TABLE},
            partial(self._run, self._select_category, category),
        )

    def stream_movie(self, movie_id: int) -> AsyncIterator[Optional[MovieModel]]:
        return live_query(
            self._tracker,
            {MOVIES_TABLE},
            partial(self._run, self._select_movie, movie_id),
        )

    def stream_genres(self, movie_id: int) -> AsyncIterator[list[GenreModel]]:
        return live_query(
            self._tracker,
            {GENRES_TABLE, MOVIE_GENRES_TABLE},
            partial(self._run, self._select_genres, movie_id),
        )

    # Ecritures

    def _execute(self, statements: list) -> None:
        # Une seule transaction : tout ou rien
        with self._engine.begin() as connection:
            for statement in statements:
                connection.execute(statement)

    async def _write(self, writes: list[tuple[str, Any]]) -> None:
        """Execute les ecritures non vides en une transaction puis notifie leurs tables."""
        writes = [(table, statement) for table, statement in writes if statement is not None]
        if not writes:
            return
        async with self._write_lock:
            await self._run(self._execute, [statement for _, statement in writes])
        self._tracker.notify(table for table, _ in writes)

    @staticmethod
    def _movies_write(movies: list[MovieModel]) -> tuple[str, Any]:
        return MOVIES_TABLE, _upsert_statement(MovieModel, movies) if movies else None

    @staticmethod
    def _memberships_write(memberships: list[MovieTypeLink]) -> tuple[str, Any]:
        statement = _insert_or_ignore_statement(MovieTypeLink, memberships) if memberships else None
        return MOVIE_TYPES_TABLE, statement

    @staticmethod
    def _links_write(links: list[MovieGenreLink]) -> tuple[str, Any]:
        statement = _insert_or_ignore_statement(MovieGenreLink, links) if links else None
        return MOVIE_GENRES_TABLE, statement

    async def upsert_movies(self, movies: list[MovieModel]) -> None:
        await self._write([self._movies_write(movies)])

    async def insert_category_memberships(self, memberships: list[MovieTypeLink]) -> None:
        await self._write([self._memberships_write(memberships)])

    async def insert_genre_links(self, links: list[MovieGenreLink]) -> None:
        await self._write([self._links_write(links)])

    async def upsert_genres(self, genres: list[GenreModel]) -> None:
        await self._write(
            [(GENRES_TABLE, _upsert_statement(GenreModel, genres) if genres else None)]
        )

    async def save_page(
        self,
        movies: list[MovieModel],
        memberships: list[MovieTypeLink],
        links: list[MovieGenreLink],
    ) -> None:
        """
        Ecrit une page complete en une seule transaction.

        En cas d'echec d'une des trois ecritures, aucune n'est conservee
        et l'exception SQLAlchemy remonte a l'appelant.
        """
        await self._write(
            [
                self._movies_write(movies),
                self._memberships_write(memberships),
                self._links_write(links),
            ]
        )
        logger.debug(
            f"Page enregistree: {len(movies)} films, "
            f"{len(memberships)} appartenances, {len(links)} liens genre"
        )

    def _count(self) -> dict[str, int]:
        counts = {}
        with Session(self._engine) as session:
            for model in (MovieModel, GenreModel, MovieGenreLink, MovieTypeLink):
                statement = select(func.count()).select_from(model)
                counts[model.__tablename__] = session.exec(statement).one()
        return counts

    async def count_rows(self) -> dict[str, int]:
        return await self._run(self._count)
