"""
Utilitaires partages pour les commandes CLI de HiCinema.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container initialise
- exit_on_error : affichage d'un Error et sortie en code 1
- movies_table : rendu tabulaire d'une liste de films
"""

from functools import wraps

import typer
from rich.console import Console
from rich.table import Table

from hicinema.container import Container
from hicinema.core.entities.media import Movie
from hicinema.core.result import Error

console = Console()


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Les ressources reseau et disque sont liberees a la fin de la commande.

    Args:
        requires_db: Si True (defaut), cree les tables de la base de donnees.

    Usage:
        @with_container()
        async def my_command(container, ...):
            repository = container.movie_repository()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.movie_network().close()
                container.movie_store().close()
                container.preferences().close()
        return wrapper
    return decorator


def exit_on_error(result: Error) -> None:
    """Affiche la cause d'un Error et termine la commande en code 1."""
    console.print(f"[red]Erreur:[/red] {result.exception}")
    raise typer.Exit(code=1)


def movies_table(movies: list[Movie], title: str) -> Table:
    """Construit un tableau Rich (id, titre, annee, note)."""
    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Titre")
    table.add_column("Annee", justify="right")
    table.add_column("Note", justify="right")
    for movie in movies:
        table.add_row(
            str(movie.id),
            movie.title,
            str(movie.year) if movie.year else "-",
            f"{movie.vote_average:.1f}" if movie.vote_average is not None else "-",
        )
    return table
