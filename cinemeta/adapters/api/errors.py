"""
Exceptions levees par les clients API externes.

Taxonomie des echecs:
- entite introuvable (404): jamais une exception, le client retourne None
- RateLimitError: l'API a repondu 429, aucune relance n'est tentee
- ProviderResponseError: reponse mal formee (corps non JSON, type inattendu)
- ConfigurationNotLoadedError: URL d'image demandee avant le chargement
  de la configuration du fournisseur

Les erreurs httpx (HTTPStatusError, TransportError) et l'annulation
asyncio sont propagees telles quelles a l'appelant.
"""

from typing import Optional


class MetadataProviderError(Exception):
    """Classe de base des erreurs propres au fournisseur de metadonnees."""


class RateLimitError(MetadataProviderError):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        """
        Initialise l'erreur avec la valeur Retry-After optionnelle.

        Args:
            retry_after: Secondes a attendre avant de relancer (optionnel)
        """
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


class ProviderResponseError(MetadataProviderError):
    """
    Reponse du fournisseur inexploitable.

    Attributes:
        path: Chemin de l'endpoint appele
        detail: Description du probleme
    """

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Reponse invalide pour {path}: {detail}")


class ConfigurationNotLoadedError(MetadataProviderError):
    """La configuration du fournisseur n'a pas encore ete chargee."""

    def __init__(self) -> None:
        super().__init__(
            "Configuration TMDB non chargee: appeler ensure_config() avant de construire des URLs"
        )
