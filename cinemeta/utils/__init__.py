"""
Utilitaires et constantes pour cinemeta.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from cinemeta.utils.constants import CACHE_TTL_SECONDS, PROVIDER_NAME
from cinemeta.utils.helpers import adjust_image_language, normalize_language

__all__ = [
    "CACHE_TTL_SECONDS",
    "PROVIDER_NAME",
    "adjust_image_language",
    "normalize_language",
]
