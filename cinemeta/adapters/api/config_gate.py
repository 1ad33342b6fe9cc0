"""
Chargement paresseux et unique de la configuration du fournisseur.

La configuration TMDB (URL de base des images, tailles disponibles) est
necessaire avant toute construction d'URL d'image et avant les appels
d'entites. Elle est chargee au premier besoin puis conservee pour toute
la vie du client.

Les appelants concurrents du premier chargement partagent une seule
requete: le premier prend le verrou et charge, les autres attendent puis
reutilisent le resultat (double verification apres acquisition).
"""

import asyncio
from typing import Awaitable, Callable, Optional

from loguru import logger

from cinemeta.adapters.api.errors import ConfigurationNotLoadedError
from cinemeta.core.value_objects import ProviderConfig


class ConfigGate:
    """
    Garde de configuration: au plus un chargement reussi par instance.

    Un echec de chargement est propage a l'appelant et laisse la garde
    vide; l'appel suivant retente le chargement.

    Example:
        gate = ConfigGate(client.fetch_configuration)
        config = await gate.ensure_config()
        sizes = config.images.poster_sizes
    """

    def __init__(self, fetch: Callable[[], Awaitable[ProviderConfig]]) -> None:
        """
        Args:
            fetch: Coroutine qui interroge le fournisseur et retourne sa configuration
        """
        self._fetch = fetch
        self._config: Optional[ProviderConfig] = None
        self._lock = asyncio.Lock()

    @property
    def has_config(self) -> bool:
        """Indique si la configuration a deja ete chargee."""
        return self._config is not None

    @property
    def config(self) -> ProviderConfig:
        """
        Configuration chargee.

        Raises:
            ConfigurationNotLoadedError: Si ensure_config() n'a pas encore abouti
        """
        if self._config is None:
            raise ConfigurationNotLoadedError()
        return self._config

    async def ensure_config(self) -> ProviderConfig:
        """
        Garantit que la configuration est chargee et la retourne.

        Retourne immediatement si elle est presente, sinon effectue un
        unique chargement partage entre les appelants concurrents.
        """
        if self._config is not None:
            return self._config

        async with self._lock:
            if self._config is None:
                logger.debug("Chargement de la configuration TMDB")
                self._config = await self._fetch()
        return self._config
