"""
Objets valeur pour les groupes d'episodes TMDB.

Un groupe d'episodes decrit un ordre d'affichage alternatif d'une serie
(numerotation absolue, ordre DVD...). Il contient des saisons ordonnees,
chacune contenant des episodes ordonnes. Chaque episode du groupe porte
le couple canonique (saison, episode) de l'ordre de diffusion.

Les champs "order" du fournisseur commencent a 0.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional


class EpisodeGroupType(IntEnum):
    """Codes de type des groupes d'episodes TMDB."""

    ORIGINAL_AIR_DATE = 1
    ABSOLUTE = 2
    DVD = 3
    DIGITAL = 4
    STORY_ARC = 5
    PRODUCTION = 6
    TV = 7


class DisplayOrder(Enum):
    """Ordres d'affichage reconnus pour les episodes.

    Valeurs:
        DEFAULT: Ordre de diffusion, aucun remappage
        ABSOLUTE: Numerotation absolue
        DVD: Ordre de sortie DVD
    """

    DEFAULT = ""
    ABSOLUTE = "absolute"
    DVD = "dvd"

    @classmethod
    def parse(cls, value: Optional[str]) -> "DisplayOrder":
        """
        Convertit la chaine de l'appelant en ordre d'affichage.

        La comparaison est exacte (sensible a la casse). Une valeur
        inconnue ou vide donne DEFAULT, sans erreur.
        """
        if value == cls.ABSOLUTE.value:
            return cls.ABSOLUTE
        if value == cls.DVD.value:
            return cls.DVD
        return cls.DEFAULT

    @property
    def group_type(self) -> Optional[EpisodeGroupType]:
        """Type de groupe TMDB correspondant, None pour l'ordre par defaut."""
        return _GROUP_TYPES.get(self)


_GROUP_TYPES = {
    DisplayOrder.ABSOLUTE: EpisodeGroupType.ABSOLUTE,
    DisplayOrder.DVD: EpisodeGroupType.DVD,
}


@dataclass(frozen=True)
class EpisodeGroupEpisode:
    """Episode d'un groupe, avec son numero canonique saison/episode."""

    id: int
    order: int
    season_number: int
    episode_number: int
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EpisodeGroupEpisode":
        return cls(
            id=data["id"],
            order=data["order"],
            season_number=data["season_number"],
            episode_number=data["episode_number"],
            name=data.get("name"),
        )


@dataclass(frozen=True)
class EpisodeGroupSeason:
    """Saison d'un groupe d'episodes."""

    id: str
    order: int
    episodes: tuple[EpisodeGroupEpisode, ...] = ()
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EpisodeGroupSeason":
        return cls(
            id=str(data["id"]),
            order=data["order"],
            episodes=tuple(
                EpisodeGroupEpisode.from_dict(ep) for ep in data.get("episodes") or ()
            ),
            name=data.get("name"),
        )

    def find_episode(self, order: int) -> Optional[EpisodeGroupEpisode]:
        """Retourne le premier episode dont l'ordre (base 0) correspond."""
        return next((ep for ep in self.episodes if ep.order == order), None)


@dataclass(frozen=True)
class EpisodeGroup:
    """
    Decomposition complete d'un ordre d'affichage en saisons et episodes.

    Attributs:
        id: Identifiant TMDB du groupe
        type: Type de groupe (ABSOLUTE, DVD...)
        groups: Saisons du groupe, dans l'ordre du fournisseur
        name: Nom du groupe
    """

    id: str
    type: int
    groups: tuple[EpisodeGroupSeason, ...] = ()
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EpisodeGroup":
        """Construit le groupe depuis la reponse de /tv/episode_group/{id}."""
        return cls(
            id=str(data["id"]),
            type=data.get("type", 0),
            groups=tuple(
                EpisodeGroupSeason.from_dict(season) for season in data.get("groups") or ()
            ),
            name=data.get("name"),
        )

    def find_season(self, order: int) -> Optional[EpisodeGroupSeason]:
        """Retourne la premiere saison dont l'ordre correspond."""
        return next((season for season in self.groups if season.order == order), None)
