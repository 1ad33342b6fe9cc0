"""
Cache memoire avec TTL pour les API externes.

Chaque entree expire une heure apres son ecriture (CACHE_TTL_SECONDS).
Aucune persistence: le cache vit aussi longtemps que le client qui le
detient et est vide a sa fermeture.

Les cles sont composites (type d'entite, identifiant ou nom, langue,
dimensions supplementaires) et construites par build_cache_key, afin que
deux requetes logiques differentes ne partagent jamais une entree.
"""

import heapq
import threading
import time
from typing import Any, Callable, Optional

from loguru import logger

from cinemeta.utils.constants import CACHE_TTL_SECONDS


def build_cache_key(kind: str, *parts: Any) -> str:
    """
    Construit une cle composite "tmdb:<kind>:<part>:<part>...".

    Les parties None deviennent une chaine vide pour que la position de
    chaque dimension reste stable. Placer en dernier la partie libre
    (titre recherche, identifiant externe).

    Example:
        build_cache_key("movie", 550, "fr-FR")  # "tmdb:movie:550:fr-FR"
    """
    return ":".join(["tmdb", kind, *("" if part is None else str(part) for part in parts)])


class APICache:
    """
    Cache memoire thread-safe avec expiration par TTL.

    Les valeurs sont opaques pour le cache et stockees entieres sous un
    verrou: un lecteur concurrent voit l'ancienne valeur ou la nouvelle,
    jamais un etat intermediaire.

    Attributes:
        DETAILS_TTL: Duree de vie des details d'entites (1h)
        SEARCH_TTL: Duree de vie des resultats de recherche (1h)

    Example:
        cache = APICache()
        cache.set_details("tmdb:movie:550:fr-FR", movie)
        found, movie = cache.try_get("tmdb:movie:550:fr-FR")
    """

    DETAILS_TTL = CACHE_TTL_SECONDS
    SEARCH_TTL = CACHE_TTL_SECONDS

    def __init__(
        self,
        max_entries: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialise un cache vide.

        Args:
            max_entries: Nombre maximum d'entrees (None = non borne)
            clock: Horloge monotone en secondes (injectable pour les tests)
        """
        self._entries: dict[str, tuple[float, Any]] = {}
        self._lock = threading.Lock()
        self._max_entries = max_entries
        self._clock = clock

    def try_get(self, key: str) -> tuple[bool, Any]:
        """
        Recherche une entree vivante.

        Args:
            key: Cle composite

        Returns:
            (True, valeur) si l'entree existe et n'a pas expire,
            (False, None) sinon. Une entree expiree est supprimee.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False, None
            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return False, None
            return True, value

    def get(self, key: str) -> Optional[Any]:
        """Retourne la valeur stockee, ou None si absente ou expiree."""
        _, value = self.try_get(key)
        return value

    def set(self, key: str, value: Any, ttl: float = CACHE_TTL_SECONDS) -> None:
        """
        Stocke une valeur avec un TTL.

        Args:
            key: Cle composite
            value: Valeur a stocker
            ttl: Duree de vie en secondes (<= 0: l'entree est supprimee)
        """
        with self._lock:
            if ttl <= 0:
                self._entries.pop(key, None)
                return
            self._entries[key] = (self._clock() + ttl, value)
            if self._max_entries is not None and len(self._entries) > self._max_entries:
                self._shrink()

    def set_details(self, key: str, value: Any) -> None:
        """Stocke le detail d'une entite (TTL d'une heure)."""
        self.set(key, value, self.DETAILS_TTL)

    def set_search(self, key: str, value: Any) -> None:
        """Stocke un resultat de recherche (TTL d'une heure)."""
        self.set(key, value, self.SEARCH_TTL)

    def _shrink(self) -> None:
        """Ramene le cache sous max_entries. Appele sous verrou."""
        now = self._clock()
        for key in [k for k, (expires_at, _) in self._entries.items() if now >= expires_at]:
            del self._entries[key]

        # Ensuite les entrees les plus proches de l'expiration
        excess = len(self._entries) - self._max_entries
        if excess > 0:
            oldest = heapq.nsmallest(excess, self._entries, key=lambda k: self._entries[k][0])
            for key in oldest:
                del self._entries[key]
            logger.debug(f"Cache API: {excess} entree(s) evincee(s)")

    def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        with self._lock:
            self._entries.clear()

    def close(self) -> None:
        """Libere toutes les entrees (a appeler a la fin)."""
        self.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
