"""
Interfaces ports pour le client de métadonnées.

Interface abstraite (port) définissant le contrat du client de métadonnées
distant. L'implémentation (adaptateur) est le client TMDB.

Convention commune à toutes les opérations :
- une entité absente chez le fournisseur donne None (jamais une exception),
- une erreur réseau ou protocole est propagée telle quelle,
- l'annulation de la tâche appelante est propagée sans écrire dans le cache.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from cinemeta.core.value_objects import ExternalSource


class IMetadataProvider(ABC):
    """
    Interface de base pour un fournisseur de métadonnées film/série/personne.

    Les charges utiles retournées sont les objets JSON décodés du
    fournisseur, opaques pour cette couche.
    """

    @abstractmethod
    async def get_movie(
        self,
        tmdb_id: int,
        language: Optional[str],
        image_languages: Optional[str] = None,
    ) -> Optional[dict[str, Any]]:
        """Récupère un film par son identifiant, ou None si non trouvé."""
        ...

    @abstractmethod
    async def get_collection(
        self,
        tmdb_id: int,
        language: Optional[str],
        image_languages: Optional[str] = None,
    ) -> Optional[dict[str, Any]]:
        """Récupère une collection par son identifiant, ou None si non trouvée."""
        ...

    @abstractmethod
    async def get_series(
        self,
        tmdb_id: int,
        language: Optional[str],
        image_languages: Optional[str] = None,
    ) -> Optional[dict[str, Any]]:
        """Récupère une série par son identifiant, ou None si non trouvée."""
        ...

    @abstractmethod
    async def get_season(
        self,
        tv_id: int,
        season_number: int,
        language: Optional[str],
        image_languages: Optional[str] = None,
    ) -> Optional[dict[str, Any]]:
        """Récupère une saison d'une série, ou None si non trouvée."""
        ...

    @abstractmethod
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
        Récupère un épisode, après remappage selon l'ordre d'affichage.

        Args :
            tv_id : Identifiant de la série
            season_number : Numéro de saison côté appelant
            episode_number : Numéro d'épisode côté appelant (base 1)
            display_order : "absolute", "dvd", ou autre valeur pour l'ordre par défaut
            language : Langue demandée
            image_languages : Filtre optionnel des langues d'images

        Retourne :
            L'épisode, ou None si non trouvé
        """
        ...

    @abstractmethod
    async def get_person(
        self, person_id: int, language: Optional[str]
    ) -> Optional[dict[str, Any]]:
        """Récupère une personne (acteur, équipe), ou None si non trouvée."""
        ...

    @abstractmethod
    async def find_by_external_id(
        self,
        external_id: str,
        source: ExternalSource,
        language: Optional[str],
    ) -> Optional[dict[str, Any]]:
        """Traduit un identifiant externe (IMDb, TVDB...) en identifiants natifs."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant du fournisseur (ex: 'tmdb')."""
        ...
