"""
Recherche par nom dans le catalogue TMDB.

Films, series, personnes et collections. Seuls les resultats non vides
sont mis en cache: une recherche sans resultat est toujours relancee.
"""

from typing import Any, Optional

from cinemeta.adapters.api.cache import APICache, build_cache_key
from cinemeta.adapters.api.tmdb_client import TMDBClient
from cinemeta.core.ports.feature_toggles import IFeatureToggles
from cinemeta.utils.helpers import normalize_language


class SearchService:
    """
    Service de recherche adosse au client TMDB.

    Le filtre de contenu adulte est lu dans les bascules de l'hote a
    chaque recherche. Le resultat est toujours une liste (vide si aucun
    resultat ou 404), jamais None.

    Example:
        search = SearchService(client)
        movies = await search.search_movies("Fight Club", year=1999, language="fr-FR")
    """

    def __init__(
        self,
        client: TMDBClient,
        cache: Optional[APICache] = None,
        feature_toggles: Optional[IFeatureToggles] = None,
    ) -> None:
        """
        Args:
            client: Client TMDB (requetes et configuration partagees)
            cache: Cache des resultats (par defaut celui du client)
            feature_toggles: Bascules de l'hote (par defaut celles du client)
        """
        self._client = client
        self._cache = cache if cache is not None else client.cache
        self._toggles = feature_toggles or client.feature_toggles

    def _adult_flag(self) -> str:
        return "true" if self._toggles.include_adult else "false"

    async def _search(
        self, cache_key: str, path: str, params: dict[str, Any]
    ) -> list[dict[str, Any]]:
        found, cached = self._cache.try_get(cache_key)
        if found:
            return cached

        await self._client.ensure_config()
        data = await self._client.request(path, params)
        results = list((data or {}).get("results") or [])

        if results:
            self._cache.set_search(cache_key, results)
        return results

    async def search_movies(
        self,
        name: str,
        year: Optional[int] = None,
        language: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """
        Recherche des films par titre.

        Args:
            name: Titre recherche
            year: Annee de sortie optionnelle
            language: Langue des resultats

        Returns:
            Liste des resultats bruts (vide si aucun resultat)
        """
        language = normalize_language(language)
        cache_key = build_cache_key("search_movie", language, year or "", name)

        params: dict[str, Any] = {"query": name, "include_adult": self._adult_flag()}
        if language:
            params["language"] = language
        if year:
            params["year"] = year

        return await self._search(cache_key, "/search/movie", params)

    async def search_series(
        self,
        name: str,
        year: Optional[int] = None,
        language: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """
        Recherche des series TV par titre.

        Args:
            name: Titre recherche
            year: Annee de premiere diffusion optionnelle
            language: Langue des resultats

        Returns:
            Liste des resultats bruts (vide si aucun resultat)
        """
        language = normalize_language(language)
        cache_key = build_cache_key("search_series", language, year or "", name)

        params: dict[str, Any] = {"query": name, "include_adult": self._adult_flag()}
        if language:
            params["language"] = language
        if year:
            params["first_air_date_year"] = year

        return await self._search(cache_key, "/search/tv", params)

    async def search_people(self, name: str) -> list[dict[str, Any]]:
        """Recherche des personnes par nom."""
        cache_key = build_cache_key("search_person", name)
        params = {"query": name, "include_adult": self._adult_flag()}
        return await self._search(cache_key, "/search/person", params)

    async def search_collections(
        self, name: str, language: Optional[str] = None
    ) -> list[dict[str, Any]]:
        """Recherche des collections (sagas) par nom."""
        language = normalize_language(language)
        cache_key = build_cache_key("search_collection", language, name)

        params: dict[str, Any] = {"query": name}
        if language:
            params["language"] = language

        return await self._search(cache_key, "/search/collection", params)
