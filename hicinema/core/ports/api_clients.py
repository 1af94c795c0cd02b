"""
Interfaces ports pour les clients API.

Interface abstraite (port) définissant le contrat de la source réseau du
catalogue de films, et les enregistrements bruts qu'elle décode.
L'implémentation (adaptateur) fournit le client TMDB concret.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from hicinema.core.entities.media import MovieCategory
from hicinema.core.result import Result


@dataclass(frozen=True)
class NetworkMovie:
    """
    Film tel que décodé depuis une réponse de liste TMDB.

    Attributs :
        id : ID TMDB du film
        title : Titre localisé
        genre_ids : IDs des genres associés (référence vers /genre/movie/list)
        original_title : Titre en langue originale
        overview : Résumé
        poster_path : Chemin du poster sur le CDN TMDB
        backdrop_path : Chemin de l'image de fond
        release_date : Date de sortie (YYYY-MM-DD)
        vote_average : Note moyenne (0-10)
        vote_count : Nombre de votes
        popularity : Score de popularité
        original_language : Code langue ISO 639-1
        adult : Contenu adulte
        video : Drapeau "video" TMDB
    """

    id: int
    title: str
    genre_ids: tuple[int, ...] = ()
    original_title: Optional[str] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    popularity: Optional[float] = None
    original_language: Optional[str] = None
    adult: bool = False
    video: bool = False


@dataclass(frozen=True)
class NetworkGenre:
    """Genre tel que décodé depuis /genre/movie/list."""

    id: int
    name: str


class MovieNetworkError(Exception):
    """
    Unique type d'erreur de la source réseau.

    Enveloppe la cause sous-jacente (timeout, connectivité, statut HTTP,
    décodage JSON) sans classification plus fine.

    Attributes:
        cause: Exception d'origine
    """

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.__cause__ = cause


class IMovieNetworkDataSource(ABC):
    """
    Interface de la source réseau du catalogue.

    Aucune méthode ne lève d'exception : tout échec est retourné sous forme
    de Error(MovieNetworkError). Pas de retry ni de pagination continue à
    ce niveau.
    """

    @abstractmethod
    async def fetch_movies(
        self,
        category: MovieCategory,
        page: int,
    ) -> Result[list[NetworkMovie]]:
        """
        Récupère une page d'une liste de films.

        Args :
            category : Liste à interroger
            page : Numéro de page (1-indexé)

        Retourne :
            Success(films de la page), NoMoreData() si la page dépasse la
            dernière page, ou Error(MovieNetworkError)
        """
        ...

    @abstractmethod
    async def fetch_genres(self) -> Result[list[NetworkGenre]]:
        """Récupère la liste de référence des genres de films."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libère les ressources réseau."""
        ...
