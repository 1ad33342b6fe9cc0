"""
Client TMDB pour la recuperation de metadonnees films, series et personnes.

Implemente l'interface IMetadataProvider pour TMDB (The Movie Database).
Chaque operation suit le meme schema:
1. construction de la cle composite (type, identifiant, langue, dimensions)
2. consultation du cache, retour immediat si present
3. chargement unique de la configuration du fournisseur
4. appel reseau avec les donnees annexes (append_to_response)
5. mise en cache du resultat s'il existe, None sinon (jamais mis en cache)

Usage:
    cache = APICache()
    client = TMDBClient(api_key="your_key", cache=cache)
    movie = await client.get_movie(550, "fr-FR")
    episode = await client.get_episode(1399, 1, 2, "absolute", "en-US")
    await client.close()
"""

from typing import Any, Iterable, Optional

import httpx
from loguru import logger

from cinemeta.adapters.api.cache import APICache, build_cache_key
from cinemeta.adapters.api.config_gate import ConfigGate
from cinemeta.adapters.api.episode_order import EpisodeOrderResolver
from cinemeta.adapters.api.errors import ProviderResponseError
from cinemeta.adapters.api.images import ImageUrlResolver
from cinemeta.adapters.api.request import request_json
from cinemeta.core.ports.api_clients import IMetadataProvider
from cinemeta.core.ports.feature_toggles import IFeatureToggles, StaticFeatureToggles
from cinemeta.core.value_objects import (
    DisplayOrder,
    EpisodeGroup,
    ExternalSource,
    ProviderConfig,
)
from cinemeta.utils.constants import (
    COLLECTION_EXTRAS,
    EPISODE_EXTRAS,
    KEYWORDS_EXTRA,
    MOVIE_EXTRAS,
    PERSON_EXTRAS,
    SEASON_EXTRAS,
    SERIES_EXTRAS,
    TMDB_BASE_URL,
    V4_TOKEN_MIN_LENGTH,
)
from cinemeta.utils.helpers import join_extras, normalize_language


class TMDBClient(IMetadataProvider):
    """
    Client API TMDB avec cache memoire d'une heure.

    Implemente IMetadataProvider avec:
    - Films, collections, series, saisons, episodes, personnes par identifiant
    - Traduction d'identifiants externes (IMDb, TVDB...) en identifiants TMDB
    - Remappage des episodes pour les ordres "absolute" et "dvd"
    - Chargement unique et partage de la configuration (URLs d'images)

    Une entite absente (404) donne None et n'est jamais mise en cache.
    Les erreurs reseau et l'annulation sont propagees sans ecriture
    dans le cache, et sans relance.

    Attributes:
        images: Resolveur d'URLs d'images adosse a la configuration
        config_gate: Garde de chargement de la configuration

    Example:
        async with TMDBClient(api_key="xxx", cache=APICache()) as client:
            series = await client.get_series(1399, "fr-FR")
            poster = await client.images.get_poster_url(series["poster_path"])
    """

    def __init__(
        self,
        api_key: str,
        cache: APICache,
        feature_toggles: Optional[IFeatureToggles] = None,
        base_url: str = TMDB_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (cle v3 ou Read Access Token v4)
            cache: Instance APICache partagee pour le caching des resultats
            feature_toggles: Bascules de l'hote, relues a chaque appel
            base_url: URL de base de l'API TMDB v3
            timeout: Timeout des requetes HTTP en secondes
        """
        self._api_key = api_key
        self._cache = cache
        self._toggles = feature_toggles or StaticFeatureToggles()
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

        self.config_gate = ConfigGate(self._fetch_configuration)
        self.images = ImageUrlResolver(self.config_gate)
        self._episode_order = EpisodeOrderResolver(self, cache)

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            params = {}

            if len(self._api_key) >= V4_TOKEN_MIN_LENGTH:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    @property
    def cache(self) -> APICache:
        """Cache partage avec les services adosses a ce client."""
        return self._cache

    @property
    def feature_toggles(self) -> IFeatureToggles:
        """Bascules de l'hote capturees a la construction."""
        return self._toggles

    async def request(
        self, path: str, params: Optional[dict[str, Any]] = None
    ) -> Optional[dict[str, Any]]:
        """
        Execute un GET unique sur l'API TMDB.

        Args:
            path: Chemin relatif a l'URL de base (ex: "/movie/550")
            params: Parametres de requete

        Returns:
            La reponse JSON decodee, ou None si 404
        """
        return await request_json(self._get_client(), "GET", path, params=params or {})

    async def ensure_config(self) -> ProviderConfig:
        """Garantit que la configuration du fournisseur est chargee."""
        return await self.config_gate.ensure_config()

    async def _fetch_configuration(self) -> ProviderConfig:
        data = await self.request("/configuration")
        if data is None:
            raise ProviderResponseError("/configuration", "configuration introuvable")
        return ProviderConfig.from_dict(data)

    @staticmethod
    def _params(
        language: Optional[str],
        extras: Iterable[str] = (),
        image_languages: Optional[str] = None,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if language:
            params["language"] = language
        extras = tuple(extras)
        if extras:
            params["append_to_response"] = join_extras(extras)
        if image_languages:
            params["include_image_language"] = image_languages
        return params

    @staticmethod
    def _entity_key(
        kind: str, *parts: Any, image_languages: Optional[str] = None
    ) -> str:
        if image_languages:
            parts = (*parts, f"img={image_languages}")
        return build_cache_key(kind, *parts)

    def _lookup(self, cache_key: str) -> tuple[bool, Any]:
        found, cached = self._cache.try_get(cache_key)
        if found:
            logger.debug(f"Cache TMDB: {cache_key}")
        return found, cached

    async def _fetch_and_store(
        self, cache_key: str, path: str, params: dict[str, Any]
    ) -> Optional[dict[str, Any]]:
        """Appel reseau puis mise en cache si l'entite existe."""
        data = await self.request(path, params)
        if data is None:
            logger.info(f"Introuvable sur TMDB: {path}")
            return None

        self._cache.set_details(cache_key, data)
        return data

    async def _get_entity(
        self, cache_key: str, path: str, params: dict[str, Any]
    ) -> Optional[dict[str, Any]]:
        """Schema cache-first commun a toutes les entites."""
        found, cached = self._lookup(cache_key)
        if found:
            return cached

        await self.ensure_config()
        return await self._fetch_and_store(cache_key, path, params)

    async def get_movie(
        self,
        tmdb_id: int,
        language: Optional[str],
        image_languages: Optional[str] = None,
    ) -> Optional[dict[str, Any]]:
        """
        Recupere un film par son identifiant TMDB.

        Les mots-cles sont demandes sauf si l'hote exclut les tags des films.

        Args:
            tmdb_id: ID TMDB du film
            language: Langue des metadonnees
            image_languages: Langues d'images a inclure (ex: "fr,en,null")

        Returns:
            Le film, ou None si non trouve
        """
        language = normalize_language(language)
        cache_key = self._entity_key(
            "movie", tmdb_id, language, image_languages=image_languages
        )

        extras = list(MOVIE_EXTRAS)
        if not self._toggles.exclude_tags_movies:
            extras.append(KEYWORDS_EXTRA)

        return await self._get_entity(
            cache_key,
            f"/movie/{tmdb_id}",
            self._params(language, extras, image_languages),
        )

    async def get_collection(
        self,
        tmdb_id: int,
        language: Optional[str],
        image_languages: Optional[str] = None,
    ) -> Optional[dict[str, Any]]:
        """Recupere une collection (saga) avec ses images, ou None si non trouvee."""
        language = normalize_language(language)
        cache_key = self._entity_key(
            "collection", tmdb_id, language, image_languages=image_languages
        )
        return await self._get_entity(
            cache_key,
            f"/collection/{tmdb_id}",
            self._params(language, COLLECTION_EXTRAS, image_languages),
        )

    async def get_series(
        self,
        tmdb_id: int,
        language: Optional[str],
        image_languages: Optional[str] = None,
    ) -> Optional[dict[str, Any]]:
        """
        Recupere une serie TV par son identifiant TMDB.

        Inclut les classifications et la liste des groupes d'episodes,
        utilisee par le remappage des ordres d'affichage. Les mots-cles
        sont demandes sauf si l'hote exclut les tags des series.

        Args:
            tmdb_id: ID TMDB de la serie
            language: Langue des metadonnees
            image_languages: Langues d'images a inclure

        Returns:
            La serie, ou None si non trouvee
        """
        language = normalize_language(language)
        cache_key = self._entity_key(
            "series", tmdb_id, language, image_languages=image_languages
        )

        extras = list(SERIES_EXTRAS)
        if not self._toggles.exclude_tags_series:
            extras.append(KEYWORDS_EXTRA)

        return await self._get_entity(
            cache_key,
            f"/tv/{tmdb_id}",
            self._params(language, extras, image_languages),
        )

    async def get_season(
        self,
        tv_id: int,
        season_number: int,
        language: Optional[str],
        image_languages: Optional[str] = None,
    ) -> Optional[dict[str, Any]]:
        """Recupere une saison d'une serie, ou None si non trouvee."""
        language = normalize_language(language)
        cache_key = self._entity_key(
            "season", tv_id, f"s{season_number}", language,
            image_languages=image_languages,
        )
        return await self._get_entity(
            cache_key,
            f"/tv/{tv_id}/season/{season_number}",
            self._params(language, SEASON_EXTRAS, image_languages),
        )

    async def get_episode(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        display_order: Optional[str],
        language: Optional[str],
        image_languages: Optional[str] = None,
    ) -> Optional[dict[str, Any]]:
        """
        Recupere un episode, en remappant ses numeros selon l'ordre d'affichage.

        La cle de cache porte les numeros fournis par l'appelant et l'ordre
        d'affichage; l'appel reseau utilise les numeros canoniques resolus
        par EpisodeOrderResolver (ou les numeros d'origine si la resolution
        echoue).

        Args:
            tv_id: ID TMDB de la serie
            season_number: Numero de saison cote appelant
            episode_number: Numero d'episode cote appelant (base 1)
            display_order: "absolute", "dvd", ou autre valeur (ordre de diffusion)
            language: Langue des metadonnees
            image_languages: Langues d'images a inclure

        Returns:
            L'episode, ou None si non trouve
        """
        language = normalize_language(language)
        order = DisplayOrder.parse(display_order)
        cache_key = self._entity_key(
            "episode", tv_id, f"s{season_number}e{episode_number}", order.value, language,
            image_languages=image_languages,
        )

        found, cached = self._lookup(cache_key)
        if found:
            return cached

        await self.ensure_config()

        season_number, episode_number = await self._episode_order.resolve(
            tv_id, season_number, episode_number, display_order, language, image_languages
        )

        return await self._fetch_and_store(
            cache_key,
            f"/tv/{tv_id}/season/{season_number}/episode/{episode_number}",
            self._params(language, EPISODE_EXTRAS, image_languages),
        )

    async def get_episode_group(
        self, group_id: str, language: Optional[str]
    ) -> Optional[EpisodeGroup]:
        """
        Recupere la decomposition saisons/episodes d'un groupe d'episodes.

        Appel reseau direct, sans cache: EpisodeOrderResolver met en cache
        le groupe sous la cle (serie, ordre, langue).

        Args:
            group_id: Identifiant TMDB du groupe
            language: Langue des metadonnees

        Returns:
            Le groupe, ou None si non trouve

        Raises:
            ProviderResponseError: Si un champ obligatoire manque dans la reponse
        """
        path = f"/tv/episode_group/{group_id}"
        data = await self.request(path, self._params(normalize_language(language)))
        if data is None:
            return None

        try:
            return EpisodeGroup.from_dict(data)
        except (KeyError, TypeError) as e:
            raise ProviderResponseError(path, f"groupe d'episodes incomplet ({e!r})") from e

    async def get_person(
        self, person_id: int, language: Optional[str]
    ) -> Optional[dict[str, Any]]:
        """Recupere une personne avec ses filmographies, ou None si non trouvee."""
        language = normalize_language(language)
        cache_key = self._entity_key("person", person_id, language)
        return await self._get_entity(
            cache_key,
            f"/person/{person_id}",
            self._params(language, PERSON_EXTRAS),
        )

    async def find_by_external_id(
        self,
        external_id: str,
        source: ExternalSource,
        language: Optional[str],
    ) -> Optional[dict[str, Any]]:
        """
        Recherche des entites TMDB via un identifiant externe.

        Utilise l'endpoint /find/{external_id} avec le parametre
        external_source (ex: "imdb_id" pour "tt0137523").

        Args:
            external_id: Identifiant chez le service externe
            source: Service d'origine de l'identifiant
            language: Langue des metadonnees

        Returns:
            Les listes movie_results, tv_results, person_results...,
            ou None si non trouve
        """
        language = normalize_language(language)
        cache_key = build_cache_key("find", source.value, language, external_id)

        params = self._params(language)
        params["external_source"] = source.value

        return await self._get_entity(cache_key, f"/find/{external_id}", params)

    async def close(self) -> None:
        """
        Ferme le client HTTP et libere le cache.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
        self._cache.close()

    async def __aenter__(self) -> "TMDBClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
