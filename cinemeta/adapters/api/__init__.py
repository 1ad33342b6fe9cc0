"""
Clients API externes pour la recuperation des metadonnees.

Ce module fournit l'adaptateur TMDB (The Movie Database) et son
infrastructure:
- APICache: Cache memoire avec TTL d'une heure
- ConfigGate: Chargement unique de la configuration du fournisseur
- ImageUrlResolver: URLs d'images et normalisation en RemoteImageInfo
- TMDBClient: Operations par entite (film, serie, episode, personne...)
- EpisodeOrderResolver: Remappage des ordres d'affichage "absolute" et "dvd"
- SearchService: Recherche par nom
- RateLimitError, ProviderResponseError: Erreurs du fournisseur

Le client implemente IMetadataProvider defini dans core/ports/api_clients.py.
"""

from cinemeta.adapters.api.cache import APICache, build_cache_key
from cinemeta.adapters.api.config_gate import ConfigGate
from cinemeta.adapters.api.episode_order import EpisodeOrderResolver
from cinemeta.adapters.api.errors import (
    ConfigurationNotLoadedError,
    MetadataProviderError,
    ProviderResponseError,
    RateLimitError,
)
from cinemeta.adapters.api.images import ImageUrlResolver
from cinemeta.adapters.api.search import SearchService
from cinemeta.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "APICache",
    "ConfigGate",
    "ConfigurationNotLoadedError",
    "EpisodeOrderResolver",
    "ImageUrlResolver",
    "MetadataProviderError",
    "ProviderResponseError",
    "RateLimitError",
    "SearchService",
    "TMDBClient",
    "build_cache_key",
]
