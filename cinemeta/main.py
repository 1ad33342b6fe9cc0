"""
Point d'entrée CLI de cinemeta.

Configure le logging et fournit les commandes de consultation du catalogue TMDB.
"""

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    collection,
    episode,
    find,
    movie,
    person,
    poster,
    search,
    season,
    series,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="cinemeta",
    help="Consultation des métadonnées TMDB avec cache",
)
container = Container()

app.command()(movie)
app.command()(collection)
app.command()(series)
app.command()(season)
app.command()(episode)
app.command()(person)
app.command()(find)
app.command()(search)
app.command()(poster)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration cinemeta")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"URL TMDB : {config.tmdb_base_url}")
    typer.echo(f"Langue par défaut : {config.default_language or '-'}")
    typer.echo(f"Contenu adulte : {'inclus' if config.include_adult else 'exclu'}")
    typer.echo(f"Tags films : {'exclus' if config.exclude_tags_movies else 'inclus'}")
    typer.echo(f"Tags séries : {'exclus' if config.exclude_tags_series else 'inclus'}")
    typer.echo(f"Taille max du cache : {config.cache_max_entries or 'non bornée'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"cinemeta v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(settings)

    logger.info("Démarrage de cinemeta", version=__version__)

    app()


if __name__ == "__main__":
    main()
