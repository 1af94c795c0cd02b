"""
Business entities representing core domain concepts.

Exports:
- Movie: Movie listed by TMDB
- Genre: Movie genre reference data
- MovieCategory: The four listings (now playing, popular, top rated, upcoming)
- PagingInfo: Page parameter of a listing fetch
"""

from hicinema.core.entities.media import Genre, Movie, MovieCategory, PagingInfo

__all__ = [
    "Genre",
    "Movie",
    "MovieCategory",
    "PagingInfo",
]
