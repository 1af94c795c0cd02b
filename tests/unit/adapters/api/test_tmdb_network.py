"""
Tests for TMDBMovieNetworkDataSource - TMDB movie list client.

Uses respx to mock httpx calls and verifies:
- Each category queries its endpoint with the page parameter
- Responses are decoded into NetworkMovie / NetworkGenre records
- A page beyond total_pages yields NoMoreData
- Transport, HTTP status and decode failures are returned as Error, never raised
"""

import httpx
import pytest
import respx

from hicinema.adapters.api.retry import RateLimitError
from hicinema.adapters.api.tmdb_network import TMDBMovieNetworkDataSource, decode_movie
from hicinema.core.entities.media import MovieCategory
from hicinema.core.ports.api_clients import (
    IMovieNetworkDataSource,
    MovieNetworkError,
    NetworkGenre,
    NetworkMovie,
)
from hicinema.core.result import Error, NoMoreData, Success
from tests.fixtures.tmdb_responses import (
    TMDB_GENRE_LIST,
    TMDB_MALFORMED_RESPONSE,
    TMDB_PAGE_BEYOND_LAST,
    TMDB_POPULAR_PAGE_1,
    TMDB_UNAUTHORIZED,
    TMDB_UPCOMING_MINIMAL,
)

BASE_URL = "https://api.themoviedb.org/3"


@pytest.fixture
def source() -> TMDBMovieNetworkDataSource:
    """Network source with a v3 API key."""
    return TMDBMovieNetworkDataSource(api_key="test_api_key", language="fr-FR")


class TestInterface:
    """Test TMDBMovieNetworkDataSource implements the port."""

    def test_implements_interface(self, source: TMDBMovieNetworkDataSource):
        assert isinstance(source, IMovieNetworkDataSource)


class TestFetchMovies:
    """Tests for fetch_movies()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_returns_decoded_movies(self, source: TMDBMovieNetworkDataSource):
        """fetch_movies() should decode the results array."""
        respx.get(f"{BASE_URL}/movie/popular").mock(
            return_value=httpx.Response(200, json=TMDB_POPULAR_PAGE_1)
        )

        result = await source.fetch_movies(MovieCategory.POPULAR, 1)

        assert isinstance(result, Success)
        assert [movie.id for movie in result.data] == [1, 2]
        assert all(isinstance(movie, NetworkMovie) for movie in result.data)
        avatar = result.data[0]
        assert avatar.title == "Avatar"
        assert avatar.genre_ids == (28, 12)
        assert avatar.release_date == "2009-12-15"
        assert avatar.vote_average == 7.6
        assert avatar.vote_count == 27000

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "category,path",
        [
            (MovieCategory.NOW_PLAYING, "/movie/now_playing"),
            (MovieCategory.POPULAR, "/movie/popular"),
            (MovieCategory.TOP_RATED, "/movie/top_rated"),
            (MovieCategory.UPCOMING, "/movie/upcoming"),
        ],
    )
    @respx.mock
    async def test_each_category_queries_its_endpoint(
        self, source: TMDBMovieNetworkDataSource, category: MovieCategory, path: str
    ):
        route = respx.get(f"{BASE_URL}{path}").mock(
            return_value=httpx.Response(200, json=TMDB_POPULAR_PAGE_1)
        )

        await source.fetch_movies(category, 2)

        assert route.called
        request = route.calls.last.request
        assert request.url.params["page"] == "2"
        assert request.url.params["language"] == "fr-FR"
        assert request.url.params["api_key"] == "test_api_key"

    @pytest.mark.asyncio
    @respx.mock
    async def test_v4_token_sent_as_bearer(self):
        token = "eyJ" + "a" * 200
        source = TMDBMovieNetworkDataSource(api_key=token)
        route = respx.get(f"{BASE_URL}/movie/popular").mock(
            return_value=httpx.Response(200, json=TMDB_POPULAR_PAGE_1)
        )

        await source.fetch_movies(MovieCategory.POPULAR, 1)

        request = route.calls.last.request
        assert request.headers["Authorization"] == f"Bearer {token}"
        assert "api_key" not in request.url.params

    @pytest.mark.asyncio
    @respx.mock
    async def test_page_beyond_last_returns_no_more_data(
        self, source: TMDBMovieNetworkDataSource
    ):
        respx.get(f"{BASE_URL}/movie/popular").mock(
            return_value=httpx.Response(200, json=TMDB_PAGE_BEYOND_LAST)
        )

        result = await source.fetch_movies(MovieCategory.POPULAR, 4)

        assert isinstance(result, NoMoreData)

    @pytest.mark.asyncio
    @respx.mock
    async def test_http_error_returns_error(self, source: TMDBMovieNetworkDataSource):
        respx.get(f"{BASE_URL}/movie/popular").mock(
            return_value=httpx.Response(401, json=TMDB_UNAUTHORIZED)
        )

        result = await source.fetch_movies(MovieCategory.POPULAR, 1)

        assert isinstance(result, Error)
        assert isinstance(result.exception, MovieNetworkError)
        assert isinstance(result.exception.cause, httpx.HTTPStatusError)

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout_returns_error(self, source: TMDBMovieNetworkDataSource):
        respx.get(f"{BASE_URL}/movie/upcoming").mock(
            side_effect=httpx.ConnectTimeout("timed out")
        )

        result = await source.fetch_movies(MovieCategory.UPCOMING, 1)

        assert isinstance(result, Error)
        assert isinstance(result.exception.cause, httpx.ConnectTimeout)

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_payload_returns_error(self, source: TMDBMovieNetworkDataSource):
        respx.get(f"{BASE_URL}/movie/popular").mock(
            return_value=httpx.Response(200, json=TMDB_MALFORMED_RESPONSE)
        )

        result = await source.fetch_movies(MovieCategory.POPULAR, 1)

        assert isinstance(result, Error)
        assert isinstance(result.exception.cause, KeyError)

    @pytest.mark.asyncio
    @respx.mock
    async def test_out_of_range_number_returns_error(self, source: TMDBMovieNetworkDataSource):
        """1e400 decodes to an infinite float that cannot become an int."""
        respx.get(f"{BASE_URL}/movie/popular").mock(
            return_value=httpx.Response(
                200,
                content=b'{"page": 1, "total_pages": 1, '
                b'"results": [{"id": 1, "title": "x", "vote_count": 1e400}]}',
                headers={"Content-Type": "application/json"},
            )
        )

        result = await source.fetch_movies(MovieCategory.POPULAR, 1)

        assert isinstance(result, Error)
        assert isinstance(result.exception.cause, OverflowError)

    @pytest.mark.asyncio
    @respx.mock
    async def test_invalid_json_returns_error(self, source: TMDBMovieNetworkDataSource):
        respx.get(f"{BASE_URL}/movie/popular").mock(
            return_value=httpx.Response(200, text="<html>gateway</html>")
        )

        result = await source.fetch_movies(MovieCategory.POPULAR, 1)

        assert isinstance(result, Error)

    @pytest.mark.asyncio
    @respx.mock
    async def test_rate_limit_not_retried_by_default(self, source: TMDBMovieNetworkDataSource):
        """With the default single attempt, a 429 is returned as an Error."""
        route = respx.get(f"{BASE_URL}/movie/popular").mock(
            return_value=httpx.Response(429, headers={"Retry-After": "2"})
        )

        result = await source.fetch_movies(MovieCategory.POPULAR, 1)

        assert isinstance(result, Error)
        assert isinstance(result.exception.cause, RateLimitError)
        assert result.exception.cause.retry_after == 2
        assert route.call_count == 1


class TestDecodeMovie:
    """Tests for decode_movie()."""

    def test_minimal_item_uses_original_title_and_null_date(self):
        movie = decode_movie(TMDB_UPCOMING_MINIMAL["results"][0])

        assert movie.id == 99
        assert movie.title == "Untitled Project"
        assert movie.release_date is None
        assert movie.genre_ids == ()
        assert movie.vote_average is None

    def test_missing_id_raises_key_error(self):
        with pytest.raises(KeyError):
            decode_movie({"title": "No id"})


class TestFetchGenres:
    """Tests for fetch_genres()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_returns_genres(self, source: TMDBMovieNetworkDataSource):
        respx.get(f"{BASE_URL}/genre/movie/list").mock(
            return_value=httpx.Response(200, json=TMDB_GENRE_LIST)
        )

        result = await source.fetch_genres()

        assert isinstance(result, Success)
        assert result.data[0] == NetworkGenre(id=28, name="Action")
        assert len(result.data) == 3

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_returns_error(self, source: TMDBMovieNetworkDataSource):
        respx.get(f"{BASE_URL}/genre/movie/list").mock(
            return_value=httpx.Response(503)
        )

        result = await source.fetch_genres()

        assert isinstance(result, Error)


class TestClose:
    """Tests for close()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_close_releases_client_and_allows_reuse(
        self, source: TMDBMovieNetworkDataSource
    ):
        respx.get(f"{BASE_URL}/movie/popular").mock(
            return_value=httpx.Response(200, json=TMDB_POPULAR_PAGE_1)
        )

        await source.fetch_movies(MovieCategory.POPULAR, 1)
        await source.close()
        result = await source.fetch_movies(MovieCategory.POPULAR, 1)

        assert isinstance(result, Success)
        await source.close()
