"""
Fonctions utilitaires partagees dans le projet cinemeta.

Ce module centralise les conversions de langue imposees par TMDB :
- normalize_language : normalisation du tag de langue envoye a l'API
- adjust_image_language : reinterpretation de la langue d'une image
- join_extras : construction du parametre append_to_response
"""

from typing import Iterable, Optional


def normalize_language(language: Optional[str]) -> Optional[str]:
    """
    Normalise un tag de langue pour TMDB.

    TMDB attend la partie region en majuscules (ex: "pt-br" -> "pt-BR").
    Une langue vide ou absente devient None (parametre omis).

    Args:
        language: Tag de langue fourni par l'appelant

    Returns:
        Tag normalise, ou None si vide
    """
    if not language:
        return None

    language = language.strip()
    if not language:
        return None

    parts = language.split("-")
    if len(parts) == 2:
        return f"{parts[0].lower()}-{parts[1].upper()}"
    return language


def adjust_image_language(
    image_language: Optional[str], request_language: Optional[str]
) -> Optional[str]:
    """
    Adapte la langue d'une image a la locale demandee.

    TMDB ne renseigne que le code ISO 639-1 des images ("en"). Si la
    locale demandee commence par ce code ("en-US"), l'image est
    rattachee a la locale complete. Sinon la langue est laissee telle quelle.
    """
    if (
        image_language
        and request_language
        and len(request_language) > 2
        and len(image_language) == 2
        and request_language.lower().startswith(image_language.lower())
    ):
        return request_language
    return image_language


def join_extras(extras: Iterable[str]) -> str:
    """Construit la valeur du parametre append_to_response."""
    return ",".join(extras)
