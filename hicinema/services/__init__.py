"""
Couche application (cas d'utilisation).

- MovieRepository : synchronisation reseau -> cache local -> flux de films
- mappers : conversions entre formes reseau, stockage et domaine
"""

from hicinema.services.movie_repository import MovieRepository

__all__ = ["MovieRepository"]
