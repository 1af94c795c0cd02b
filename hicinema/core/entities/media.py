"""
Media catalog entities.

Domain shapes of the movies and genres exposed to consumers, plus the
listing categories and paging parameter used to fetch them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"


class MovieCategory(str, Enum):
    """
    One of the four fixed TMDB movie listings.

    The value is the endpoint segment under /movie/.
    """

    NOW_PLAYING = "now_playing"
    POPULAR = "popular"
    TOP_RATED = "top_rated"
    UPCOMING = "upcoming"

    @property
    def endpoint(self) -> str:
        """Relative API path of the listing."""
        return f"/movie/{self.value}"

    @classmethod
    def parse(cls, value: str) -> "MovieCategory":
        """Parse a category from its value or name (case and dash insensitive)."""
        normalized = value.strip().lower().replace("-", "_")
        for category in cls:
            if normalized in (category.value, category.name.lower()):
                return category
        raise ValueError(f"Unknown movie category: {value!r}")


@dataclass(frozen=True)
class PagingInfo:
    """
    Page of a listing to fetch (1-indexed).

    Used only as a fetch parameter, never persisted.
    """

    page: int = 1

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")

    def next(self) -> "PagingInfo":
        return PagingInfo(page=self.page + 1)


@dataclass
class Movie:
    """
    Movie listed by TMDB.

    Identity is the TMDB id. Fields are replaced as a whole every time the
    movie is fetched again (last write wins).

    Attributes:
        id: The Movie Database ID
        title: Localized title
        original_title: Original language title
        overview: Plot summary
        poster_path: Path to poster image on TMDB CDN
        backdrop_path: Path to backdrop image on TMDB CDN
        release_date: Release date as returned by the API (YYYY-MM-DD)
        vote_average: Average rating (0-10)
        vote_count: Number of votes
        popularity: TMDB popularity score
        original_language: ISO 639-1 code of the original language
        adult: Adult content flag
        video: TMDB "video" flag
    """

    id: int
    title: str = ""
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

    @property
    def year(self) -> Optional[int]:
        if self.release_date and self.release_date[:4].isdigit():
            return int(self.release_date[:4])
        return None

    def poster_url(self, size: str = "w500") -> Optional[str]:
        if not self.poster_path:
            return None
        return f"{TMDB_IMAGE_BASE_URL}/{size}{self.poster_path}"


@dataclass(frozen=True)
class Genre:
    """Movie genre (TMDB reference data)."""

    id: int
    name: str
