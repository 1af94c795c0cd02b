"""
Source reseau TMDB pour les listes de films.

Implemente IMovieNetworkDataSource : une requete GET paginee par liste
(/movie/now_playing, /movie/popular, /movie/top_rated, /movie/upcoming) et
la liste de reference des genres (/genre/movie/list).

Aucune exception ne traverse cette frontiere : les erreurs de transport,
de statut HTTP et de decodage sont retournees dans Error(MovieNetworkError).

Usage:
    source = TMDBMovieNetworkDataSource(api_key="your_key")
    result = await source.fetch_movies(MovieCategory.POPULAR, page=1)
    if isinstance(result, Success):
        print(len(result.data))
    await source.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from hicinema.adapters.api.retry import RateLimitError, request_with_retry
from hicinema.core.entities.media import MovieCategory
from hicinema.core.ports.api_clients import (
    IMovieNetworkDataSource,
    MovieNetworkError,
    NetworkGenre,
    NetworkMovie,
)
from hicinema.core.result import Error, NoMoreData, Result, run_catching

# Echecs convertis en Error : transport/statut HTTP, 429, JSON ou champs invalides
# (ArithmeticError : nombre JSON hors limites, ex: int(1e400))
NETWORK_FAILURES: tuple[type[Exception], ...] = (
    httpx.HTTPError,
    RateLimitError,
    ValueError,
    ArithmeticError,
    KeyError,
    TypeError,
    AttributeError,
)


def _optional_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


def _optional_int(value: Any) -> Optional[int]:
    return int(value) if value is not None else None


def decode_movie(item: dict[str, Any]) -> NetworkMovie:
    """
    Decode un element du tableau `results` d'une reponse de liste.

    Raises:
        KeyError: Si l'ID est absent
        TypeError, ValueError: Si un champ n'a pas le type attendu
    """
    localized_title = item.get("title") or ""
    original_title = item.get("original_title")
    return NetworkMovie(
        id=int(item["id"]),
        title=localized_title or original_title or "",
        genre_ids=tuple(int(genre_id) for genre_id in item.get("genre_ids") or ()),
        original_title=original_title,
        overview=item.get("overview"),
        poster_path=item.get("poster_path"),
        backdrop_path=item.get("backdrop_path"),
        # TMDB renvoie "" pour une date inconnue
        release_date=item.get("release_date") or None,
        vote_average=_optional_float(item.get("vote_average")),
        vote_count=_optional_int(item.get("vote_count")),
        popularity=_optional_float(item.get("popularity")),
        original_language=item.get("original_language"),
        adult=bool(item.get("adult", False)),
        video=bool(item.get("video", False)),
    )


class TMDBMovieNetworkDataSource(IMovieNetworkDataSource):
    """
    Client API TMDB pour les listes de films.

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3

    Example:
        source = TMDBMovieNetworkDataSource(api_key="xxx", max_attempts=3)
        result = await source.fetch_movies(MovieCategory.TOP_RATED, 2)
        await source.close()
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = TMDB_BASE_URL,
        language: str = "en-US",
        timeout: float = 30.0,
        max_attempts: int = 1,
    ) -> None:
        """
        Initialise la source reseau.

        Args:
            api_key: Cle API v3 (32 caracteres hex) ou Read Access Token v4
            base_url: URL de base de l'API
            language: Langue des titres et resumes (ex: "fr-FR")
            timeout: Timeout HTTP en secondes
            max_attempts: Tentatives sur 429 (1 = pas de retry)
        """
        self._api_key = api_key
        self._base_url = base_url
        self._language = language
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            params = {"language": self._language}

            if self._api_key:
                if len(self._api_key) > 40:
                    headers["Authorization"] = f"Bearer {self._api_key}"
                else:
                    params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    async def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        logger.debug(f"GET {path} {params or {}}")
        response = await request_with_retry(
            self._get_client(),
            "GET",
            path,
            max_attempts=self._max_attempts,
            params=params,
        )
        return response.json()

    async def _fetch_page(self, category: MovieCategory, page: int):
        data = await self._get_json(category.endpoint, params={"page": page})

        total_pages = data.get("total_pages")
        current_page = int(data.get("page", page))
        if total_pages is not None and current_page > int(total_pages):
            logger.debug(f"{category.value}: page {current_page} > {total_pages}, fin de liste")
            return NoMoreData()

        return [decode_movie(item) for item in data["results"]]

    async def _fetch_genre_list(self) -> list[NetworkGenre]:
        data = await self._get_json("/genre/movie/list")
        return [
            NetworkGenre(id=int(item["id"]), name=str(item["name"]))
            for item in data["genres"]
        ]

    async def fetch_movies(
        self,
        category: MovieCategory,
        page: int,
    ) -> Result[list[NetworkMovie]]:
        """
        Recupere une page d'une liste de films.

        Args:
            category: Liste a interroger
            page: Numero de page (1-indexe)

        Returns:
            Success(films), NoMoreData() au-dela de la derniere page,
            Error(MovieNetworkError) en cas d'echec
        """
        result = await run_catching(
            lambda: self._fetch_page(category, page),
            errors=NETWORK_FAILURES,
            wrap=MovieNetworkError,
        )
        if isinstance(result, Error):
            logger.warning(f"Echec {category.value} page {page}: {result.exception}")
        return result

    async def fetch_genres(self) -> Result[list[NetworkGenre]]:
        """
        Recupere la liste de reference des genres de films.

        Returns:
            Success(genres) ou Error(MovieNetworkError)
        """
        result = await run_catching(
            self._fetch_genre_list,
            errors=NETWORK_FAILURES,
            wrap=MovieNetworkError,
        )
        if isinstance(result, Error):
            logger.warning(f"Echec liste des genres: {result.exception}")
        return result

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
