"""
Commandes CLI du catalogue : chargement de pages, lecture du cache, suivi des flux.
"""

import asyncio
from contextlib import aclosing
from typing import Annotated, Optional

import typer

from hicinema.adapters.cli.helpers import (
    console,
    exit_on_error,
    movies_table,
    with_container,
)
from hicinema.core.entities.media import MovieCategory, PagingInfo
from hicinema.core.result import Error

CategoryArgument = Annotated[
    MovieCategory,
    typer.Argument(help="Liste de films (now_playing, popular, top_rated, upcoming)"),
]


def _require_api_key(container) -> None:
    if not container.config().tmdb_enabled:
        console.print("[red]Cle API TMDB absente[/red] (HICINEMA_TMDB_API_KEY)")
        raise typer.Exit(code=1)


def load(
    category: CategoryArgument,
    page: Annotated[
        Optional[int],
        typer.Option("--page", "-p", min=1, help="Page a charger (defaut: page suivante)"),
    ] = None,
    reset: Annotated[
        bool,
        typer.Option("--reset", help="Repart de la page 1 (oublie le curseur)"),
    ] = False,
) -> None:
    """Charge une page d'une liste TMDB dans le cache local."""
    asyncio.run(_load_async(category, page, reset))


@with_container()
async def _load_async(container, category: MovieCategory, page: Optional[int], reset: bool) -> None:
    _require_api_key(container)
    repository = container.movie_repository()

    if reset:
        await repository.reset_paging(category)

    if page is None:
        result = await repository.load_next_page(category)
    else:
        result = await repository.load_more(category, PagingInfo(page=page))

    if isinstance(result, Error):
        exit_on_error(result)

    if not result.data:
        console.print(f"[yellow]Plus de films pour {category.value}.[/yellow]")
        return
    console.print(movies_table(result.data, f"{category.value} - {len(result.data)} films charges"))


def list_movies(category: CategoryArgument) -> None:
    """Affiche les films en cache pour une liste."""
    asyncio.run(_list_async(category))


@with_container()
async def _list_async(container, category: MovieCategory) -> None:
    repository = container.movie_repository()
    async with aclosing(repository.stream_category(category)) as stream:
        movies = await anext(stream)

    if not movies:
        console.print(f"[yellow]Aucun film en cache pour {category.value}.[/yellow]")
        return
    console.print(movies_table(movies, f"{category.value} ({len(movies)} films)"))


def movie(movie_id: Annotated[int, typer.Argument(help="ID TMDB du film")]) -> None:
    """Affiche un film en cache et ses genres."""
    asyncio.run(_movie_async(movie_id))


@with_container()
async def _movie_async(container, movie_id: int) -> None:
    repository = container.movie_repository()
    async with aclosing(repository.stream_movie(movie_id)) as stream:
        found = await anext(stream)
    if found is None:
        console.print(f"[yellow]Film {movie_id} absent du cache.[/yellow]")
        raise typer.Exit(code=1)

    async with aclosing(repository.stream_genres(movie_id)) as stream:
        genres = await anext(stream)

    console.print(f"[bold]{found.title}[/bold] ({found.year or '?'})")
    if found.original_title and found.original_title != found.title:
        console.print(f"Titre original : {found.original_title}")
    if genres:
        console.print(f"Genres : {', '.join(genre.name for genre in genres)}")
    if found.vote_average is not None:
        console.print(f"Note : {found.vote_average:.1f} ({found.vote_count or 0} votes)")
    if found.poster_url():
        console.print(f"Poster : {found.poster_url()}")
    if found.overview:
        console.print(found.overview)


def genres() -> None:
    """Recharge la liste de reference des genres TMDB."""
    asyncio.run(_genres_async())


@with_container()
async def _genres_async(container) -> None:
    _require_api_key(container)
    result = await container.movie_repository().refresh_genres()
    if isinstance(result, Error):
        exit_on_error(result)
    for genre in result.data:
        console.print(f"{genre.id:>6}  {genre.name}")


def watch(
    category: CategoryArgument,
    pages: Annotated[
        int,
        typer.Option("--pages", "-n", min=1, help="Nombre de pages a charger"),
    ] = 1,
) -> None:
    """Suit le flux d'une liste pendant le chargement des pages suivantes."""
    asyncio.run(_watch_async(category, pages))


@with_container()
async def _watch_async(container, category: MovieCategory, pages: int) -> None:
    _require_api_key(container)
    repository = container.movie_repository()

    async with aclosing(repository.stream_category(category)) as stream:
        movies = await anext(stream)
        console.print(f"[dim]{category.value}: {len(movies)} films en cache[/dim]")

        for _ in range(pages):
            result = await repository.load_next_page(category)
            if isinstance(result, Error):
                exit_on_error(result)
            if not result.data:
                console.print(f"[yellow]Plus de films pour {category.value}.[/yellow]")
                break
            movies = await anext(stream)
            console.print(
                f"{category.value}: {len(movies)} films en cache "
                f"(+{len(result.data)} page {await repository.last_loaded_page(category)})"
            )
