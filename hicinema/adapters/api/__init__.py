"""
Client API externe du catalogue de films.

Ce module fournit l'adaptateur reseau TMDB:
- TMDBMovieNetworkDataSource: listes paginees et genres de reference

Infrastructure partagee:
- RateLimitError: Exception pour les erreurs 429
- request_with_retry: Requete HTTP avec retry optionnel sur 429

Le client implemente IMovieNetworkDataSource defini dans core/ports/api_clients.py.
"""

from hicinema.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from hicinema.adapters.api.tmdb_network import TMDBMovieNetworkDataSource

__all__ = [
    "RateLimitError",
    "TMDBMovieNetworkDataSource",
    "request_with_retry",
    "with_retry",
]
