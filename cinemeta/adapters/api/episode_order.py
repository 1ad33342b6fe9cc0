"""
Resolution des ordres d'affichage alternatifs des episodes.

Pour les ordres "absolute" et "dvd", TMDB publie des groupes d'episodes:
chaque saison du groupe liste ses episodes avec leur numero canonique
(saison, episode) dans l'ordre de diffusion. Le resolveur traduit le
couple fourni par l'appelant en couple canonique avant l'appel reseau.

La resolution est un enrichissement au mieux: ordre inconnu, groupe
absent, saison ou episode absents du groupe donnent toujours les numeros
d'origine, sans erreur. Seules les erreurs reseau et l'annulation sont
propagees.
"""

from typing import TYPE_CHECKING, Any, Optional

from loguru import logger

from cinemeta.adapters.api.cache import APICache, build_cache_key
from cinemeta.core.value_objects import DisplayOrder, EpisodeGroup, EpisodeGroupType
from cinemeta.utils.helpers import normalize_language

if TYPE_CHECKING:
    from cinemeta.adapters.api.tmdb_client import TMDBClient


def _find_group_id(
    series: Optional[dict[str, Any]], group_type: EpisodeGroupType
) -> Optional[str]:
    """Identifiant du premier groupe d'episodes du type demande."""
    if not series:
        return None
    groups = (series.get("episode_groups") or {}).get("results") or []
    for group in groups:
        if group.get("type") == group_type:
            return group.get("id")
    return None


class EpisodeOrderResolver:
    """
    Traduit saison/episode d'un ordre d'affichage en numerotation canonique.

    Le groupe d'episodes est mis en cache sous la cle
    (serie, ordre d'affichage, langue).

    Example:
        resolver = EpisodeOrderResolver(client, cache)
        season, episode = await resolver.resolve(1399, 1, 12, "absolute", "en-US")
    """

    def __init__(self, client: "TMDBClient", cache: APICache) -> None:
        self._client = client
        self._cache = cache

    async def get_group(
        self,
        tv_id: int,
        display_order: Optional[str],
        language: Optional[str],
        image_languages: Optional[str] = None,
    ) -> Optional[EpisodeGroup]:
        """
        Recupere le groupe d'episodes correspondant a l'ordre d'affichage.

        Args:
            tv_id: ID TMDB de la serie
            display_order: Ordre d'affichage demande
            language: Langue des metadonnees
            image_languages: Langues d'images (transmis a la recuperation de la serie)

        Returns:
            Le groupe, ou None pour l'ordre par defaut, un ordre inconnu,
            ou une serie sans groupe de ce type
        """
        order = DisplayOrder.parse(display_order)
        group_type = order.group_type
        if group_type is None:
            return None

        language = normalize_language(language)
        cache_key = build_cache_key("episode_group", tv_id, order.value, language)
        found, cached = self._cache.try_get(cache_key)
        if found:
            return cached

        await self._client.ensure_config()

        series = await self._client.get_series(tv_id, language, image_languages)
        group_id = _find_group_id(series, group_type)
        if group_id is None:
            logger.debug(f"Aucun groupe d'episodes '{order.value}' pour la serie {tv_id}")
            return None

        group = await self._client.get_episode_group(group_id, language)
        if group is not None:
            self._cache.set_details(cache_key, group)
        return group

    async def resolve(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        display_order: Optional[str],
        language: Optional[str],
        image_languages: Optional[str] = None,
    ) -> tuple[int, int]:
        """
        Resout le couple (saison, episode) canonique.

        La saison du groupe est celle dont l'ordre vaut season_number;
        l'episode est celui dont l'ordre (base 0) vaut episode_number - 1.

        Returns:
            Le couple canonique, ou (season_number, episode_number) si la
            resolution echoue
        """
        group = await self.get_group(tv_id, display_order, language, image_languages)
        if group is None:
            return season_number, episode_number

        season = group.find_season(season_number)
        # L'ordre des episodes d'un groupe commence a 0
        episode = season.find_episode(episode_number - 1) if season else None
        if episode is None:
            logger.debug(
                f"S{season_number:02d}E{episode_number:02d} absent du groupe {group.id}, "
                "numeros d'origine conserves"
            )
            return season_number, episode_number

        return episode.season_number, episode.episode_number
