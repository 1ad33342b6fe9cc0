"""
Container d'injection de dependances via dependency-injector.

Assemble la configuration, les bascules de l'hote, le cache partage,
le client TMDB et le service de recherche.
"""

from dependency_injector import containers, providers

from .adapters.api.cache import APICache
from .adapters.api.search import SearchService
from .adapters.api.tmdb_client import TMDBClient
from .config import Settings
from .core.ports.feature_toggles import StaticFeatureToggles


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        client = container.tmdb_client()
        search = container.search_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Bascules de l'hote, capturees par le client et relues a chaque appel
    feature_toggles = providers.Singleton(
        StaticFeatureToggles,
        exclude_tags_movies=config.provided.exclude_tags_movies,
        exclude_tags_series=config.provided.exclude_tags_series,
        include_adult=config.provided.include_adult,
    )

    # Cache API - Singleton pour partage entre client et recherche
    api_cache = providers.Singleton(
        APICache,
        max_entries=config.provided.cache_max_entries,
    )

    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        cache=api_cache,
        feature_toggles=feature_toggles,
        base_url=config.provided.tmdb_base_url,
        timeout=config.provided.request_timeout,
    )

    search_service = providers.Singleton(
        SearchService,
        client=tmdb_client,
        cache=api_cache,
        feature_toggles=feature_toggles,
    )
