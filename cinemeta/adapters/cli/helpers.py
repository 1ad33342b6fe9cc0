"""
Utilitaires partages pour les commandes CLI de cinemeta.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container et fermant le client
- print_payload : affichage JSON d'une charge utile (dict, liste, dataclasses)
"""

import dataclasses
from enum import Enum
from functools import wraps
from typing import Any

import typer
from rich.console import Console

from cinemeta.container import Container

console = Console()


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Refuse l'execution si aucune cle TMDB n'est configuree, et ferme le
    client TMDB a la fin de la commande.

    Usage:
        @with_container()
        async def my_command(container, ...):
            client = container.tmdb_client()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if not container.config().tmdb_enabled:
                console.print("[red]Cle API TMDB manquante (CINEMETA_TMDB_API_KEY).[/red]")
                raise typer.Exit(code=1)
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.tmdb_client().close()
        return wrapper
    return decorator


def _to_jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {k: _to_jsonable(v) for k, v in dataclasses.asdict(value).items()}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    return value


def print_payload(payload: Any, not_found: str = "Introuvable") -> None:
    """Affiche une charge utile en JSON, ou un message si elle est absente."""
    if payload is None:
        console.print(f"[yellow]{not_found}[/yellow]")
        raise typer.Exit(code=1)
    console.print_json(data=_to_jsonable(payload))
