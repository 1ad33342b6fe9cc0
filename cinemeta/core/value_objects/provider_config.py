"""
Objets valeur pour la configuration distante du fournisseur.

La configuration TMDB (GET /configuration) donne l'URL de base des images
et, pour chaque classe d'image, la liste ordonnee des tailles disponibles.
La derniere taille de chaque liste est la plus grande ("original").
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ImageConfig:
    """
    Configuration des images renvoyee par TMDB.

    Attributs :
        base_url : URL de base HTTP des images
        secure_base_url : URL de base HTTPS des images (utilisee pour les URLs)
        backdrop_sizes : Tailles des fonds, de la plus petite a la plus grande
        logo_sizes : Tailles des logos
        poster_sizes : Tailles des affiches
        profile_sizes : Tailles des photos de personnes
        still_sizes : Tailles des captures d'episodes
    """

    base_url: str
    secure_base_url: str
    backdrop_sizes: tuple[str, ...] = ()
    logo_sizes: tuple[str, ...] = ()
    poster_sizes: tuple[str, ...] = ()
    profile_sizes: tuple[str, ...] = ()
    still_sizes: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImageConfig":
        """Construit la configuration depuis le bloc "images" de la reponse."""
        base_url = data.get("base_url") or ""
        return cls(
            base_url=base_url,
            secure_base_url=data.get("secure_base_url") or base_url,
            backdrop_sizes=tuple(data.get("backdrop_sizes") or ()),
            logo_sizes=tuple(data.get("logo_sizes") or ()),
            poster_sizes=tuple(data.get("poster_sizes") or ()),
            profile_sizes=tuple(data.get("profile_sizes") or ()),
            still_sizes=tuple(data.get("still_sizes") or ()),
        )


@dataclass(frozen=True)
class ProviderConfig:
    """
    Configuration complete du fournisseur, chargee une seule fois par client.

    Attributs :
        images : Configuration des images (URL de base et tailles)
        change_keys : Cles de modification connues du fournisseur
    """

    images: ImageConfig
    change_keys: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProviderConfig":
        """Construit la configuration depuis la reponse JSON de /configuration."""
        return cls(
            images=ImageConfig.from_dict(data.get("images") or {}),
            change_keys=tuple(data.get("change_keys") or ()),
        )
