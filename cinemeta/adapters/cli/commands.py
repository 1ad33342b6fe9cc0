"""
Commandes CLI de consultation du catalogue TMDB.

Chaque commande est un point d'entree synchrone Typer qui delegue a une
implementation async recevant le container.
"""

import asyncio
from enum import Enum
from typing import Annotated, Optional

import typer

from cinemeta.adapters.cli.helpers import console, print_payload, with_container
from cinemeta.core.value_objects import ExternalSource


LanguageOption = Annotated[
    Optional[str],
    typer.Option("--language", "-l", help="Langue des metadonnees (ex: fr-FR)"),
]


class SearchKind(str, Enum):
    """Type d'entite recherchee par la commande search."""

    MOVIE = "movie"
    SERIES = "series"
    PERSON = "person"
    COLLECTION = "collection"


def _language(container, language: Optional[str]) -> Optional[str]:
    return language or container.config().default_language


def _image_languages(language: Optional[str]) -> Optional[str]:
    """Langue de la locale plus les images sans texte ('null' pour TMDB)."""
    if not language:
        return None
    return f"{language.split('-')[0].lower()},null"


def movie(
    tmdb_id: Annotated[int, typer.Argument(help="ID TMDB du film")],
    language: LanguageOption = None,
) -> None:
    """Affiche un film."""
    asyncio.run(_movie_async(tmdb_id, language))


@with_container()
async def _movie_async(container, tmdb_id: int, language: Optional[str]) -> None:
    client = container.tmdb_client()
    print_payload(await client.get_movie(tmdb_id, _language(container, language)))


def collection(
    tmdb_id: Annotated[int, typer.Argument(help="ID TMDB de la collection")],
    language: LanguageOption = None,
) -> None:
    """Affiche une collection."""
    asyncio.run(_collection_async(tmdb_id, language))


@with_container()
async def _collection_async(container, tmdb_id: int, language: Optional[str]) -> None:
    client = container.tmdb_client()
    print_payload(await client.get_collection(tmdb_id, _language(container, language)))


def series(
    tmdb_id: Annotated[int, typer.Argument(help="ID TMDB de la serie")],
    language: LanguageOption = None,
) -> None:
    """Affiche une serie TV."""
    asyncio.run(_series_async(tmdb_id, language))


@with_container()
async def _series_async(container, tmdb_id: int, language: Optional[str]) -> None:
    client = container.tmdb_client()
    print_payload(await client.get_series(tmdb_id, _language(container, language)))


def season(
    tv_id: Annotated[int, typer.Argument(help="ID TMDB de la serie")],
    season_number: Annotated[int, typer.Argument(help="Numero de saison")],
    language: LanguageOption = None,
) -> None:
    """Affiche une saison."""
    asyncio.run(_season_async(tv_id, season_number, language))


@with_container()
async def _season_async(
    container, tv_id: int, season_number: int, language: Optional[str]
) -> None:
    client = container.tmdb_client()
    print_payload(
        await client.get_season(tv_id, season_number, _language(container, language))
    )


def episode(
    tv_id: Annotated[int, typer.Argument(help="ID TMDB de la serie")],
    season_number: Annotated[int, typer.Argument(help="Numero de saison")],
    episode_number: Annotated[int, typer.Argument(help="Numero d'episode")],
    order: Annotated[
        Optional[str],
        typer.Option("--order", "-o", help="Ordre d'affichage: absolute ou dvd"),
    ] = None,
    language: LanguageOption = None,
) -> None:
    """Affiche un episode, avec remappage optionnel de l'ordre d'affichage."""
    asyncio.run(_episode_async(tv_id, season_number, episode_number, order, language))


@with_container()
async def _episode_async(
    container,
    tv_id: int,
    season_number: int,
    episode_number: int,
    order: Optional[str],
    language: Optional[str],
) -> None:
    client = container.tmdb_client()
    print_payload(
        await client.get_episode(
            tv_id, season_number, episode_number, order, _language(container, language)
        )
    )


def person(
    person_id: Annotated[int, typer.Argument(help="ID TMDB de la personne")],
    language: LanguageOption = None,
) -> None:
    """Affiche une personne."""
    asyncio.run(_person_async(person_id, language))


@with_container()
async def _person_async(container, person_id: int, language: Optional[str]) -> None:
    client = container.tmdb_client()
    print_payload(await client.get_person(person_id, _language(container, language)))


def find(
    external_id: Annotated[str, typer.Argument(help="Identifiant externe (ex: tt0137523)")],
    source: Annotated[
        ExternalSource,
        typer.Option("--source", "-s", help="Source de l'identifiant"),
    ] = ExternalSource.IMDB,
    language: LanguageOption = None,
) -> None:
    """Traduit un identifiant externe en identifiants TMDB."""
    asyncio.run(_find_async(external_id, source, language))


@with_container()
async def _find_async(
    container, external_id: str, source: ExternalSource, language: Optional[str]
) -> None:
    client = container.tmdb_client()
    print_payload(
        await client.find_by_external_id(
            external_id, source, _language(container, language)
        )
    )


def search(
    name: Annotated[str, typer.Argument(help="Titre ou nom recherche")],
    kind: Annotated[
        SearchKind, typer.Option("--kind", "-k", help="Type d'entite")
    ] = SearchKind.MOVIE,
    year: Annotated[
        Optional[int], typer.Option("--year", "-y", help="Annee (films et series)")
    ] = None,
    language: LanguageOption = None,
) -> None:
    """Recherche dans le catalogue TMDB."""
    asyncio.run(_search_async(name, kind, year, language))


@with_container()
async def _search_async(
    container,
    name: str,
    kind: SearchKind,
    year: Optional[int],
    language: Optional[str],
) -> None:
    service = container.search_service()
    language = _language(container, language)

    if kind == SearchKind.MOVIE:
        results = await service.search_movies(name, year, language)
    elif kind == SearchKind.SERIES:
        results = await service.search_series(name, year, language)
    elif kind == SearchKind.PERSON:
        results = await service.search_people(name)
    else:
        results = await service.search_collections(name, language)

    if not results:
        console.print(f"[yellow]Aucun resultat pour: {name}[/yellow]")
        return
    print_payload(results)


def poster(
    tmdb_id: Annotated[int, typer.Argument(help="ID TMDB du film")],
    language: LanguageOption = None,
) -> None:
    """Affiche les affiches d'un film en plus grande taille."""
    asyncio.run(_poster_async(tmdb_id, language))


@with_container()
async def _poster_async(container, tmdb_id: int, language: Optional[str]) -> None:
    client = container.tmdb_client()
    language = _language(container, language)
    data = await client.get_movie(tmdb_id, language, _image_languages(language))
    if data is None:
        print_payload(None)

    posters = (data.get("images") or {}).get("posters") or []
    print_payload(await client.images.convert_posters(posters, language))
