"""
Objets valeur pour les images distantes.

RemoteImageInfo est la forme uniforme sous laquelle les images TMDB
(affiches, fonds, photos, captures) sont exposees a l'appelant.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ImageType(Enum):
    """Role de l'image pour l'appelant.

    Valeurs:
        PRIMARY: Image principale (affiche, photo de profil, capture d'episode)
        BACKDROP: Image de fond
    """

    PRIMARY = "Primary"
    BACKDROP = "Backdrop"


class RatingType(Enum):
    """Nature de la note associee a une image."""

    SCORE = "Score"
    LIKES = "Likes"


@dataclass(frozen=True)
class RemoteImageInfo:
    """
    Image distante normalisee.

    Attributs:
        url: URL absolue de l'image (None si le chemin etait vide)
        community_rating: Note moyenne des votes TMDB
        vote_count: Nombre de votes
        width: Largeur en pixels
        height: Hauteur en pixels
        language: Langue de l'image, ajustee a la locale demandee
        provider_name: Nom du fournisseur ("TheMovieDb")
        type: Role de l'image (PRIMARY ou BACKDROP)
        rating_type: Nature de la note (toujours SCORE pour TMDB)
    """

    url: Optional[str]
    community_rating: Optional[float] = None
    vote_count: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    language: Optional[str] = None
    provider_name: str = ""
    type: ImageType = ImageType.PRIMARY
    rating_type: RatingType = RatingType.SCORE
