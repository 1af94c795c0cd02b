"""
Repository de films : synchronisation reseau -> cache local -> flux.

Orchestre la source reseau TMDB et le cache SQLite :
- Les flux de lecture sont ceux du cache, convertis en entites du domaine
- load_more() recupere une page, l'ecrit en une transaction et retourne
  les films de la page
- Les erreurs reseau sont retournees telles quelles (type Result), jamais levees

Le repository n'a pas d'etat propre : le cache est l'unique proprietaire
des donnees persistees, les preferences conservent le curseur de pagination.
"""

from collections.abc import AsyncIterator
from contextlib import aclosing
from typing import Optional

from loguru import logger

from hicinema.core.entities.media import Genre, Movie, MovieCategory, PagingInfo
from hicinema.core.ports.api_clients import IMovieNetworkDataSource
from hicinema.core.ports.repositories import IMovieStore, IPreferencesStore
from hicinema.core.result import Error, Result, Success
from hicinema.services.mappers import (
    build_category_memberships,
    build_movie_genre_links,
    genre_model_to_entity,
    movie_model_to_entity,
    network_genre_to_model,
    network_movie_to_entity,
    network_movie_to_model,
)


def paging_key(category: MovieCategory) -> str:
    """Cle de preference de la derniere page chargee pour une liste."""
    return f"paging:{category.value}"


class MovieRepository:
    """
    Point d'acces unique aux films pour les consommateurs (UI, CLI).

    Pas de retry, pas de deduplication des requetes concurrentes : deux
    load_more() simultanes sur la meme page ecrivent des donnees identiques,
    resolues par le remplacement par ID et l'insertion idempotente.
    """

    def __init__(
        self,
        store: IMovieStore,
        network: IMovieNetworkDataSource,
        preferences: IPreferencesStore,
    ) -> None:
        """
        Initialise le repository.

        Args:
            store: Cache local des films
            network: Source reseau du catalogue
            preferences: Preferences (curseurs de pagination)
        """
        self._store = store
        self._network = network
        self._preferences = preferences

    async def stream_category(self, category: MovieCategory) -> AsyncIterator[list[Movie]]:
        """Flux des films d'une liste, re-emis a chaque changement du cache."""
        async with aclosing(self._store.stream_category(category)) as rows_stream:
            async for rows in rows_stream:
                yield [movie_model_to_entity(row) for row in rows]

    async def stream_movie(self, movie_id: int) -> AsyncIterator[Optional[Movie]]:
        """Flux d'un film (None tant qu'il n'a jamais ete charge)."""
        async with aclosing(self._store.stream_movie(movie_id)) as rows_stream:
            async for row in rows_stream:
                yield movie_model_to_entity(row) if row is not None else None

    async def stream_genres(self, movie_id: int) -> AsyncIterator[list[Genre]]:
        """Flux des genres d'un film (genres de reference connus uniquement)."""
        async with aclosing(self._store.stream_genres(movie_id)) as rows_stream:
            async for rows in rows_stream:
                yield [genre_model_to_entity(row) for row in rows]

    async def load_more(
        self,
        category: MovieCategory,
        paging_info: PagingInfo,
    ) -> Result[list[Movie]]:
        """
        Charge une page d'une liste et la fusionne dans le cache.

        1. Appel de la source reseau pour la liste et la page
        2. Succes : upsert des films, appartenances a la liste et liens genre
           en une transaction, puis retour des films de la page
        3. Erreur : retournee telle quelle, cache intact
        4. Autre issue (plus de donnees) : succes avec une liste vide

        Args:
            category: Liste a charger
            paging_info: Page demandee

        Returns:
            Success(films de la page) ou Error(MovieNetworkError)
        """
        response = await self._network.fetch_movies(category, paging_info.page)

        if isinstance(response, Success):
            data = response.data
            await self._store.save_page(
                movies=[network_movie_to_model(movie) for movie in data],
                memberships=build_category_memberships(data, category, paging_info.page),
                links=build_movie_genre_links(data),
            )
            logger.info(f"{category.value} page {paging_info.page}: {len(data)} films")
            return Success([network_movie_to_entity(movie) for movie in data])

        if isinstance(response, Error):
            logger.warning(
                f"Chargement {category.value} page {paging_info.page} impossible: "
                f"{response.exception}"
            )
            return response

        logger.info(f"{category.value}: plus de page apres {paging_info.page - 1}")
        return Success([])

    async def last_loaded_page(self, category: MovieCategory) -> int:
        """Derniere page chargee avec succes (0 si aucune)."""
        return int(await self._preferences.get(paging_key(category), 0))

    async def load_next_page(self, category: MovieCategory) -> Result[list[Movie]]:
        """
        Charge la page suivant la derniere page chargee pour la liste.

        Le curseur n'avance que sur un succes non vide : un echec ou la fin
        de liste laissent la meme page a charger au prochain appel.
        """
        paging_info = PagingInfo(page=await self.last_loaded_page(category) + 1)
        result = await self.load_more(category, paging_info)
        if isinstance(result, Success) and result.data:
            await self._preferences.set(paging_key(category), paging_info.page)
        return result

    async def reset_paging(self, category: MovieCategory) -> None:
        """Oublie la derniere page chargee (le prochain chargement repart de la page 1)."""
        await self._preferences.delete(paging_key(category))

    async def refresh_genres(self) -> Result[list[Genre]]:
        """
        Recharge la liste de reference des genres.

        Returns:
            Success(genres) ou Error(MovieNetworkError)
        """
        response = await self._network.fetch_genres()

        if isinstance(response, Success):
            await self._store.upsert_genres(
                [network_genre_to_model(genre) for genre in response.data]
            )
            logger.info(f"{len(response.data)} genres enregistres")
            return Success([Genre(id=genre.id, name=genre.name) for genre in response.data])

        if isinstance(response, Error):
            logger.warning(f"Chargement des genres impossible: {response.exception}")
            return response

        return Success([])
