"""
Point d'entrée CLI de HiCinema.

Configure le logging, initialise la base de données et monte les commandes CLI.
"""

import typer
from loguru import logger

from .adapters.cli.commands import genres, list_movies, load, movie, watch
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="hicinema",
    help="Catalogue de films TMDB avec cache local",
)

app.command()(load)
app.command(name="list")(list_movies)
app.command()(movie)
app.command()(genres)
app.command()(watch)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"URL TMDB : {config.tmdb_base_url} ({config.tmdb_language})")
    typer.echo(f"Tentatives HTTP (429) : {config.http_max_attempts}")
    typer.echo(f"Préférences : {config.preferences_dir}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"HiCinema v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    configure_logging(Container().config())

    logger.info("Démarrage de HiCinema", version=__version__)

    app()


if __name__ == "__main__":
    main()
