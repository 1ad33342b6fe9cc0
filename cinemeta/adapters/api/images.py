"""
Construction des URLs d'images et normalisation des listes d'images TMDB.

Les URLs absolues sont formees de l'URL de base securisee de la
configuration, du jeton de taille et du chemin relatif renvoye par l'API
(ex: "https://image.tmdb.org/t/p/" + "original" + "/abc.jpg").
Affiches, photos, fonds et captures utilisent toujours la plus grande
taille disponible (dernier element de la liste des tailles).
"""

from typing import Any, Iterable, Optional

from cinemeta.adapters.api.config_gate import ConfigGate
from cinemeta.core.value_objects import ImageType, RatingType, RemoteImageInfo
from cinemeta.utils.constants import PROVIDER_NAME
from cinemeta.utils.helpers import adjust_image_language

# Taille toujours proposee par TMDB, utilisee si la liste est vide
ORIGINAL_SIZE = "original"


def _largest(sizes: tuple[str, ...]) -> str:
    return sizes[-1] if sizes else ORIGINAL_SIZE


class ImageUrlResolver:
    """
    Resolveur d'URLs d'images adosse a la configuration du fournisseur.

    Les methodes async garantissent le chargement de la configuration
    avant de construire les URLs. build_url() et normalize_images() sont
    synchrones et supposent la configuration deja chargee.

    Example:
        resolver = ImageUrlResolver(gate)
        url = await resolver.get_poster_url("/abc.jpg")
        infos = await resolver.convert_backdrops(movie["images"]["backdrops"], "fr-FR")
    """

    def __init__(self, config_gate: ConfigGate) -> None:
        self._gate = config_gate

    def build_url(self, size: str, path: Optional[str]) -> Optional[str]:
        """
        Construit l'URL absolue d'une image.

        Args:
            size: Jeton de taille (ex: "w500", "original")
            path: Chemin relatif renvoye par l'API (ex: "/abc.jpg")

        Returns:
            L'URL absolue, ou None si le chemin est vide

        Raises:
            ConfigurationNotLoadedError: Si la configuration n'est pas chargee
        """
        if not path:
            return None
        return f"{self._gate.config.images.secure_base_url}{size}{path}"

    async def get_poster_url(self, poster_path: Optional[str]) -> Optional[str]:
        """URL absolue d'une affiche dans la plus grande taille."""
        config = await self._gate.ensure_config()
        return self.build_url(_largest(config.images.poster_sizes), poster_path)

    async def get_profile_url(self, profile_path: Optional[str]) -> Optional[str]:
        """URL absolue d'une photo de personne dans la plus grande taille."""
        config = await self._gate.ensure_config()
        return self.build_url(_largest(config.images.profile_sizes), profile_path)

    async def convert_posters(
        self, images: Iterable[dict[str, Any]], request_language: Optional[str]
    ) -> list[RemoteImageInfo]:
        """Convertit des affiches en RemoteImageInfo (type PRIMARY)."""
        config = await self._gate.ensure_config()
        return self.normalize_images(
            images, _largest(config.images.poster_sizes), ImageType.PRIMARY, request_language
        )

    async def convert_backdrops(
        self, images: Iterable[dict[str, Any]], request_language: Optional[str]
    ) -> list[RemoteImageInfo]:
        """Convertit des fonds en RemoteImageInfo (type BACKDROP)."""
        config = await self._gate.ensure_config()
        return self.normalize_images(
            images, _largest(config.images.backdrop_sizes), ImageType.BACKDROP, request_language
        )

    async def convert_profiles(
        self, images: Iterable[dict[str, Any]], request_language: Optional[str]
    ) -> list[RemoteImageInfo]:
        """Convertit des photos de personnes en RemoteImageInfo (type PRIMARY)."""
        config = await self._gate.ensure_config()
        return self.normalize_images(
            images, _largest(config.images.profile_sizes), ImageType.PRIMARY, request_language
        )

    async def convert_stills(
        self, images: Iterable[dict[str, Any]], request_language: Optional[str]
    ) -> list[RemoteImageInfo]:
        """Convertit des captures d'episodes en RemoteImageInfo (type PRIMARY)."""
        config = await self._gate.ensure_config()
        return self.normalize_images(
            images, _largest(config.images.still_sizes), ImageType.PRIMARY, request_language
        )

    def normalize_images(
        self,
        images: Iterable[dict[str, Any]],
        size: str,
        image_type: ImageType,
        request_language: Optional[str],
    ) -> list[RemoteImageInfo]:
        """
        Normalise des descripteurs d'images TMDB.

        Args:
            images: Descripteurs bruts (file_path, vote_average, vote_count,
                    width, height, iso_639_1)
            size: Jeton de taille pour l'URL
            image_type: Role des images (PRIMARY ou BACKDROP)
            request_language: Locale demandee par l'appelant

        Returns:
            Liste de RemoteImageInfo, dans l'ordre d'entree
        """
        return [
            RemoteImageInfo(
                url=self.build_url(size, image.get("file_path")),
                community_rating=image.get("vote_average"),
                vote_count=image.get("vote_count"),
                width=image.get("width"),
                height=image.get("height"),
                language=adjust_image_language(image.get("iso_639_1"), request_language),
                provider_name=PROVIDER_NAME,
                type=image_type,
                rating_type=RatingType.SCORE,
            )
            for image in images
        ]
