"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- ProviderConfig, ImageConfig : Configuration distante du fournisseur
- RemoteImageInfo, ImageType, RatingType : Images distantes normalisees
- DisplayOrder, EpisodeGroupType : Ordres d'affichage et types de groupes
- EpisodeGroup, EpisodeGroupSeason, EpisodeGroupEpisode : Groupes d'episodes
- ExternalSource : Sources d'identifiants externes
"""

from cinemeta.core.value_objects.episode_groups import (
    DisplayOrder,
    EpisodeGroup,
    EpisodeGroupEpisode,
    EpisodeGroupSeason,
    EpisodeGroupType,
)
from cinemeta.core.value_objects.external import ExternalSource
from cinemeta.core.value_objects.images import ImageType, RatingType, RemoteImageInfo
from cinemeta.core.value_objects.provider_config import ImageConfig, ProviderConfig

__all__ = [
    "DisplayOrder",
    "EpisodeGroup",
    "EpisodeGroupEpisode",
    "EpisodeGroupSeason",
    "EpisodeGroupType",
    "ExternalSource",
    "ImageConfig",
    "ImageType",
    "ProviderConfig",
    "RatingType",
    "RemoteImageInfo",
]
