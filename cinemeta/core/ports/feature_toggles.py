"""
Port des bascules de fonctionnalités fournies par l'application hôte.

L'hôte décide si le contenu adulte est inclus dans les recherches et si les
mots-clés (tags) sont exclus des fiches films/séries. Les bascules sont
relues à chaque appel : une modification côté hôte s'applique
immédiatement, sans reconstruire le client.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class IFeatureToggles(ABC):
    """
    Interface des bascules consultées par le client de métadonnées.

    Les implémentations sont capturées à la construction du client
    (aucun accès global) et lues à chaque requête concernée.
    """

    @property
    @abstractmethod
    def exclude_tags_movies(self) -> bool:
        """True pour ne pas demander les mots-clés des films."""
        ...

    @property
    @abstractmethod
    def exclude_tags_series(self) -> bool:
        """True pour ne pas demander les mots-clés des séries."""
        ...

    @property
    @abstractmethod
    def include_adult(self) -> bool:
        """True pour inclure le contenu adulte dans les recherches."""
        ...


@dataclass
class StaticFeatureToggles(IFeatureToggles):
    """
    Bascules en mémoire, modifiables à chaud.

    Attributs :
        exclude_tags_movies : Exclut les mots-clés des films
        exclude_tags_series : Exclut les mots-clés des séries
        include_adult : Inclut le contenu adulte dans les recherches
    """

    exclude_tags_movies: bool = False
    exclude_tags_series: bool = False
    include_adult: bool = False
