"""
Execution d'une requete HTTP unique vers une API externe.

Une seule tentative par appel: pas de relance ni de backoff. Les codes
de retour sont traduits ainsi:
- 404: None (entite introuvable, resultat absorbe par l'appelant)
- 429: RateLimitError
- autres 4xx/5xx: httpx.HTTPStatusError
- corps non JSON ou non objet: ProviderResponseError

Usage:
    data = await request_json(client, "GET", "/movie/550", params={"language": "fr-FR"})
"""

from typing import Any, Optional

import httpx

from cinemeta.adapters.api.errors import ProviderResponseError, RateLimitError


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Extrait le delai Retry-After en secondes (format date HTTP ignore)."""
    if value and value.strip().isdigit():
        return int(value.strip())
    return None


async def request_json(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    **kwargs,
) -> Optional[dict[str, Any]]:
    """
    Execute une requete HTTP et decode la reponse JSON.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL ou chemin relatif a la base du client
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        L'objet JSON decode, ou None si la ressource n'existe pas (404)

    Raises:
        RateLimitError: Si l'API retourne 429
        httpx.HTTPStatusError: Pour les autres erreurs HTTP
        httpx.TransportError: Erreurs de connexion et timeouts
        ProviderResponseError: Si le corps n'est pas un objet JSON
    """
    response = await client.request(method, url, **kwargs)

    if response.status_code == 404:
        return None
    if response.status_code == 429:
        raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
    response.raise_for_status()

    try:
        data = response.json()
    except ValueError as e:
        raise ProviderResponseError(url, "corps de reponse non JSON") from e

    if not isinstance(data, dict):
        raise ProviderResponseError(
            url, f"objet JSON attendu, recu {type(data).__name__}"
        )
    return data
