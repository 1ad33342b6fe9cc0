"""
Fixtures pytest partagees pour les tests cinemeta.

Ce module contient les fixtures communes utilisees dans les tests:
- Horloge controlable pour tester l'expiration du cache
- Cache, bascules de l'hote et client TMDB de test
"""

import pytest

from cinemeta.adapters.api.cache import APICache
from cinemeta.adapters.api.search import SearchService
from cinemeta.adapters.api.tmdb_client import TMDBClient
from cinemeta.config import Settings
from cinemeta.core.ports.feature_toggles import StaticFeatureToggles
from tests.fixtures.mocks import FakeClock


@pytest.fixture
def fake_clock() -> FakeClock:
    """Horloge de test demarrant a t=1000s."""
    return FakeClock()


@pytest.fixture
def api_cache(fake_clock: FakeClock) -> APICache:
    """Cache memoire pilote par l'horloge de test."""
    return APICache(clock=fake_clock)


@pytest.fixture
def feature_toggles() -> StaticFeatureToggles:
    """Bascules par defaut: tags inclus, contenu adulte exclu."""
    return StaticFeatureToggles()


@pytest.fixture
def tmdb_client(api_cache: APICache, feature_toggles: StaticFeatureToggles) -> TMDBClient:
    """TMDBClient avec cle v3 de test et cache reel."""
    return TMDBClient(api_key="test_api_key", cache=api_cache, feature_toggles=feature_toggles)


@pytest.fixture
def search_service(tmdb_client: TMDBClient) -> SearchService:
    """SearchService partageant le cache et les bascules du client."""
    return SearchService(tmdb_client)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings de test avec fichier de log temporaire."""
    return Settings(
        tmdb_api_key="test_api_key",
        log_file=tmp_path / "test.log",
    )
