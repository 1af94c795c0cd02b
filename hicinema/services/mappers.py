"""
Conversions entre les formes reseau, stockage et domaine.

- NetworkMovie -> MovieModel (stockage) / Movie (domaine)
- MovieModel -> Movie, GenreModel -> Genre
- Construction des lignes de liaison (liste, genre) d'une page
"""

from hicinema.core.entities.media import Genre, Movie, MovieCategory
from hicinema.core.ports.api_clients import NetworkGenre, NetworkMovie
from hicinema.infrastructure.persistence.models import (
    GenreModel,
    MovieGenreLink,
    MovieModel,
    MovieTypeLink,
)

_MOVIE_FIELDS = (
    "id",
    "title",
    "original_title",
    "overview",
    "poster_path",
    "backdrop_path",
    "release_date",
    "vote_average",
    "vote_count",
    "popularity",
    "original_language",
    "adult",
    "video",
)


def network_movie_to_model(movie: NetworkMovie) -> MovieModel:
    return MovieModel(**{name: getattr(movie, name) for name in _MOVIE_FIELDS})


def network_movie_to_entity(movie: NetworkMovie) -> Movie:
    return Movie(**{name: getattr(movie, name) for name in _MOVIE_FIELDS})


def movie_model_to_entity(model: MovieModel) -> Movie:
    return Movie(**{name: getattr(model, name) for name in _MOVIE_FIELDS})


def genre_model_to_entity(model: GenreModel) -> Genre:
    return Genre(id=model.id, name=model.name)


def network_genre_to_model(genre: NetworkGenre) -> GenreModel:
    return GenreModel(id=genre.id, name=genre.name)


def build_category_memberships(
    movies: list[NetworkMovie],
    category: MovieCategory,
    page: int,
) -> list[MovieTypeLink]:
    """Une appartenance par film, avec sa position dans la page."""
    return [
        MovieTypeLink(movie_id=movie.id, category=category.value, page=page, position=position)
        for position, movie in enumerate(movies)
    ]


def build_movie_genre_links(movies: list[NetworkMovie]) -> list[MovieGenreLink]:
    """Aplatit les genre_ids de chaque film en paires (movie_id, genre_id)."""
    return [
        MovieGenreLink(movie_id=movie.id, genre_id=genre_id)
        for movie in movies
        for genre_id in movie.genre_ids
    ]
