"""
Modeles SQLModel pour le cache local HiCinema.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- movies: Films avec metadonnees TMDB (ID TMDB comme cle primaire)
- genres: Genres de reference TMDB
- movie_genres: Liens film/genre (cle primaire composite)
- movie_types: Appartenance d'un film a une liste, avec page et position
"""

from sqlmodel import Field, Index, SQLModel

MOVIES_TABLE = "movies"
GENRES_TABLE = "genres"
MOVIE_GENRES_TABLE = "movie_genres"
MOVIE_TYPES_TABLE = "movie_types"


class MovieModel(SQLModel, table=True):
    """
    Modele representant un film dans la base de donnees.

    L'ID est celui de TMDB : un upsert remplace toutes les colonnes.
    """

    __tablename__ = MOVIES_TABLE

    id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})
    title: str = Field(index=True)
    original_title: str | None = None
    overview: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    release_date: str | None = None  # YYYY-MM-DD
    vote_average: float | None = None  # Note moyenne TMDB (0-10)
    vote_count: int | None = None
    popularity: float | None = None
    original_language: str | None = None
    adult: bool = Field(default=False)
    video: bool = Field(default=False)


class GenreModel(SQLModel, table=True):
    """Genre de reference TMDB."""

    __tablename__ = GENRES_TABLE

    id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})
    name: str


class MovieGenreLink(SQLModel, table=True):
    """
    Lien many-to-many film/genre.

    Le genre peut ne pas encore exister dans `genres` (liste de reference
    chargee separement) : pas de contrainte de cle etrangere.
    """

    __tablename__ = MOVIE_GENRES_TABLE

    movie_id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})
    genre_id: int = Field(primary_key=True, index=True, sa_column_kwargs={"autoincrement": False})


class MovieTypeLink(SQLModel, table=True):
    """
    Appartenance d'un film a une liste (now_playing, popular, ...).

    page et position conservent la premiere insertion (insert-or-ignore)
    et definissent l'ordre des flux par liste.
    """

    __tablename__ = MOVIE_TYPES_TABLE
    __table_args__ = (
        Index("ix_movie_types_category_order", "category", "page", "position"),
    )

    movie_id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})
    category: str = Field(primary_key=True)
    page: int = Field(default=1)
    position: int = Field(default=0)
