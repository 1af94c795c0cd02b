"""
Interfaces ports pour le stockage.

Interfaces abstraites (ports) définissant les contrats du cache local de films
et du magasin de préférences. Les implémentations (adaptateurs) fournissent
les mécanismes concrets (SQLite via SQLModel, diskcache).

Les lignes manipulées par IMovieStore ont la forme de stockage (modèles
SQLModel) : la conversion vers les entités du domaine est faite par le
repository de films.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any, Optional

from hicinema.core.entities.media import MovieCategory

if TYPE_CHECKING:
    from hicinema.infrastructure.persistence.models import (
        GenreModel,
        MovieGenreLink,
        MovieModel,
        MovieTypeLink,
    )


class IMovieStore(ABC):
    """
    Interface du cache local de films.

    Les flux de lecture émettent la valeur courante à l'abonnement, puis
    une nouvelle valeur après chaque écriture touchant leurs tables.
    """

    @abstractmethod
    def stream_category(self, category: MovieCategory) -> AsyncIterator[list[MovieModel]]:
        """Flux des films d'une liste, ordonnés par (page, position, id)."""
        ...

    @abstractmethod
    def stream_movie(self, movie_id: int) -> AsyncIterator[Optional[MovieModel]]:
        """Flux d'un film par ID (None tant qu'il n'est pas en cache)."""
        ...

    @abstractmethod
    def stream_genres(self, movie_id: int) -> AsyncIterator[list[GenreModel]]:
        """Flux des genres d'un film, ordonnés par nom."""
        ...

    @abstractmethod
    async def upsert_movies(self, movies: list[MovieModel]) -> None:
        """Insère ou remplace des films par ID."""
        ...

    @abstractmethod
    async def insert_category_memberships(self, memberships: list[MovieTypeLink]) -> None:
        """Insère des appartenances film/liste, doublons ignorés."""
        ...

    @abstractmethod
    async def insert_genre_links(self, links: list[MovieGenreLink]) -> None:
        """Insère des liens film/genre, doublons ignorés."""
        ...

    @abstractmethod
    async def upsert_genres(self, genres: list[GenreModel]) -> None:
        """Insère ou remplace des genres par ID."""
        ...

    @abstractmethod
    async def save_page(
        self,
        movies: list[MovieModel],
        memberships: list[MovieTypeLink],
        links: list[MovieGenreLink],
    ) -> None:
        """Écrit une page complète (films, appartenances, genres) en une transaction."""
        ...

    @abstractmethod
    async def count_rows(self) -> dict[str, int]:
        """Nombre de lignes par table."""
        ...


class IPreferencesStore(ABC):
    """
    Interface du magasin de préférences utilisateur (clé-valeur persistant).
    """

    @abstractmethod
    async def get(self, key: str, default: Any = None) -> Any:
        """Récupère une valeur, ou `default` si absente."""
        ...

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Enregistre une valeur."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Supprime une valeur. Retourne True si elle existait."""
        ...
