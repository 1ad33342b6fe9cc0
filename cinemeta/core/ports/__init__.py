"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports client API :
- IMetadataProvider : Contrat du client de métadonnées distant

Ports hôte :
- IFeatureToggles : Bascules de fonctionnalités fournies par l'application hôte
- StaticFeatureToggles : Implémentation en mémoire des bascules
"""

from cinemeta.core.ports.api_clients import IMetadataProvider
from cinemeta.core.ports.feature_toggles import IFeatureToggles, StaticFeatureToggles

__all__ = [
    # Clients API
    "IMetadataProvider",
    # Hôte
    "IFeatureToggles",
    "StaticFeatureToggles",
]
