"""
Tests for TMDBClient - TMDB metadata client implementation.

Uses respx to mock httpx calls and verifies:
- Every entity operation returns the decoded payload
- Cache is checked BEFORE any API call (cache-first pattern)
- Results are cached for one hour, not-found results are never cached
- Configuration is fetched once, before the first entity call
- Feature toggles drive the keywords extra
- Cancellation and network errors leave the cache untouched
"""

import asyncio
import copy

import httpx
import pytest
import respx

from cinemeta.adapters.api.cache import APICache
from cinemeta.adapters.api.errors import MetadataProviderError, ProviderResponseError
from cinemeta.adapters.api.tmdb_client import TMDBClient
from cinemeta.core.ports.api_clients import IMetadataProvider
from cinemeta.core.ports.feature_toggles import StaticFeatureToggles
from cinemeta.core.value_objects import EpisodeGroup, ExternalSource
from tests.fixtures.mocks import FakeClock, mock_configuration
from tests.fixtures.tmdb_responses import (
    TMDB_API,
    TMDB_COLLECTION_RESPONSE,
    TMDB_EPISODE_GROUP_RESPONSE,
    TMDB_FIND_RESPONSE,
    TMDB_MOVIE_RESPONSE,
    TMDB_PERSON_RESPONSE,
    TMDB_SEASON_RESPONSE,
    TMDB_SERIES_RESPONSE,
)


def _params(route: respx.Route) -> httpx.QueryParams:
    return route.calls.last.request.url.params


class TestTMDBClientInterface:
    """Test TMDBClient implements IMetadataProvider correctly."""

    def test_implements_interface(self, tmdb_client: TMDBClient):
        assert isinstance(tmdb_client, IMetadataProvider)

    def test_source_property_returns_tmdb(self, tmdb_client: TMDBClient):
        assert tmdb_client.source == "tmdb"


class TestTMDBAuthentication:
    """v3 keys go in the query string, v4 tokens in the Authorization header."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_v3_key_sent_as_query_param(self, tmdb_client: TMDBClient):
        route = respx.get(f"{TMDB_API}/configuration").mock(
            return_value=httpx.Response(200, json={"images": {}})
        )

        await tmdb_client.ensure_config()

        request = route.calls.last.request
        assert request.url.params["api_key"] == "test_api_key"
        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    @respx.mock
    async def test_v4_token_sent_as_bearer(self, api_cache: APICache):
        token = "eyJ" + "a" * 60
        client = TMDBClient(api_key=token, cache=api_cache)
        route = respx.get(f"{TMDB_API}/configuration").mock(
            return_value=httpx.Response(200, json={"images": {}})
        )

        await client.ensure_config()

        request = route.calls.last.request
        assert request.headers["Authorization"] == f"Bearer {token}"
        assert "api_key" not in request.url.params


class TestTMDBGetMovie:
    """Tests for TMDBClient.get_movie()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_returns_movie_with_extras(self, tmdb_client: TMDBClient):
        mock_configuration()
        route = respx.get(f"{TMDB_API}/movie/550").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_RESPONSE)
        )

        movie = await tmdb_client.get_movie(550, "fr-fr")

        assert movie["title"] == "Fight Club"
        params = _params(route)
        assert params["language"] == "fr-FR"
        extras = params["append_to_response"].split(",")
        assert {"credits", "releases", "images", "videos", "keywords"} <= set(extras)

    @pytest.mark.asyncio
    @respx.mock
    async def test_second_call_within_ttl_uses_cache(self, tmdb_client: TMDBClient):
        config_route = mock_configuration()
        route = respx.get(f"{TMDB_API}/movie/550").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_RESPONSE)
        )

        first = await tmdb_client.get_movie(550, "fr-FR")
        second = await tmdb_client.get_movie(550, "fr-FR")

        assert second is first
        assert route.call_count == 1
        assert config_route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_call_after_ttl_refetches_once(
        self, tmdb_client: TMDBClient, fake_clock: FakeClock
    ):
        config_route = mock_configuration()
        route = respx.get(f"{TMDB_API}/movie/550").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_RESPONSE)
        )

        await tmdb_client.get_movie(550, "fr-FR")
        fake_clock.advance(3600)
        await tmdb_client.get_movie(550, "fr-FR")
        await tmdb_client.get_movie(550, "fr-FR")

        assert route.call_count == 2
        assert config_route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_languages_are_cached_independently(self, tmdb_client: TMDBClient):
        mock_configuration()
        route = respx.get(f"{TMDB_API}/movie/550").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_RESPONSE)
        )

        await tmdb_client.get_movie(550, "fr-FR")
        await tmdb_client.get_movie(550, "en-US")
        await tmdb_client.get_movie(550, "fr-FR")

        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_language_is_omitted(self, tmdb_client: TMDBClient):
        mock_configuration()
        route = respx.get(f"{TMDB_API}/movie/550").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_RESPONSE)
        )

        await tmdb_client.get_movie(550, "")
        await tmdb_client.get_movie(550, None)

        assert "language" not in _params(route)
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_not_found_returns_none_and_is_not_cached(
        self, tmdb_client: TMDBClient, api_cache: APICache
    ):
        mock_configuration()
        route = respx.get(f"{TMDB_API}/movie/99999999").mock(
            return_value=httpx.Response(404, json={"status_message": "Not found"})
        )

        assert await tmdb_client.get_movie(99999999, "fr-FR") is None
        assert await tmdb_client.get_movie(99999999, "fr-FR") is None

        assert route.call_count == 2
        assert len(api_cache) == 0

    @pytest.mark.asyncio
    @respx.mock
    async def test_exclude_tags_movies_drops_keywords(
        self, tmdb_client: TMDBClient, feature_toggles: StaticFeatureToggles
    ):
        feature_toggles.exclude_tags_movies = True
        mock_configuration()
        route = respx.get(f"{TMDB_API}/movie/550").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_RESPONSE)
        )

        await tmdb_client.get_movie(550, "fr-FR")

        assert "keywords" not in _params(route)["append_to_response"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_image_languages_are_sent_and_keyed(self, tmdb_client: TMDBClient):
        mock_configuration()
        route = respx.get(f"{TMDB_API}/movie/550").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_RESPONSE)
        )

        await tmdb_client.get_movie(550, "fr-FR", image_languages="fr,null")
        assert _params(route)["include_image_language"] == "fr,null"

        await tmdb_client.get_movie(550, "fr-FR")
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_checks_cache_before_api_call(self, tmdb_client: TMDBClient, api_cache):
        """get_movie() MUST NOT touch the network on a cache hit."""
        cached = {"id": 550, "title": "cached"}
        api_cache.set_details("tmdb:movie:550:fr-FR", cached)

        movie = await tmdb_client.get_movie(550, "fr-FR")

        assert movie is cached
        assert not respx.calls


class TestTMDBOtherEntities:
    """Tests for collection, series, season, person and find operations."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_collection(self, tmdb_client: TMDBClient):
        mock_configuration()
        route = respx.get(f"{TMDB_API}/collection/10").mock(
            return_value=httpx.Response(200, json=TMDB_COLLECTION_RESPONSE)
        )

        collection = await tmdb_client.get_collection(10, "fr-FR")

        assert collection["name"] == "Star Wars - Saga"
        assert _params(route)["append_to_response"] == "images"

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_series_requests_episode_groups(self, tmdb_client: TMDBClient):
        mock_configuration()
        route = respx.get(f"{TMDB_API}/tv/1399").mock(
            return_value=httpx.Response(200, json=TMDB_SERIES_RESPONSE)
        )

        series = await tmdb_client.get_series(1399, "en-US")

        assert series["name"] == "Game of Thrones"
        extras = _params(route)["append_to_response"].split(",")
        assert "episode_groups" in extras
        assert "content_ratings" in extras
        assert "keywords" in extras

    @pytest.mark.asyncio
    @respx.mock
    async def test_exclude_tags_series_is_read_on_every_call(
        self, tmdb_client: TMDBClient, feature_toggles: StaticFeatureToggles
    ):
        mock_configuration()
        route = respx.get(f"{TMDB_API}/tv/1399").mock(
            return_value=httpx.Response(200, json=TMDB_SERIES_RESPONSE)
        )

        await tmdb_client.get_series(1399, "en-US")
        assert "keywords" in _params(route)["append_to_response"]

        feature_toggles.exclude_tags_series = True
        await tmdb_client.get_series(1399, "fr-FR")
        assert "keywords" not in _params(route)["append_to_response"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_season(self, tmdb_client: TMDBClient, api_cache: APICache):
        mock_configuration()
        respx.get(f"{TMDB_API}/tv/1399/season/1").mock(
            return_value=httpx.Response(200, json=TMDB_SEASON_RESPONSE)
        )

        season = await tmdb_client.get_season(1399, 1, "en-US")

        assert season["season_number"] == 1
        assert api_cache.get("tmdb:season:1399:s1:en-US") is season

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_person(self, tmdb_client: TMDBClient):
        mock_configuration()
        route = respx.get(f"{TMDB_API}/person/287").mock(
            return_value=httpx.Response(200, json=TMDB_PERSON_RESPONSE)
        )

        person = await tmdb_client.get_person(287, "en-US")

        assert person["name"] == "Brad Pitt"
        extras = _params(route)["append_to_response"].split(",")
        assert extras == ["tv_credits", "movie_credits", "images", "external_ids"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_find_by_external_id(self, tmdb_client: TMDBClient, api_cache: APICache):
        mock_configuration()
        route = respx.get(f"{TMDB_API}/find/tt0137523").mock(
            return_value=httpx.Response(200, json=TMDB_FIND_RESPONSE)
        )

        result = await tmdb_client.find_by_external_id(
            "tt0137523", ExternalSource.IMDB, "fr-FR"
        )

        assert result["movie_results"][0]["id"] == 550
        assert _params(route)["external_source"] == "imdb_id"
        assert api_cache.get("tmdb:find:imdb_id:fr-FR:tt0137523") is result

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_episode_group_parses_breakdown(self, tmdb_client: TMDBClient):
        respx.get(f"{TMDB_API}/tv/episode_group/5acf93e60e0a26346d0000ce").mock(
            return_value=httpx.Response(200, json=TMDB_EPISODE_GROUP_RESPONSE)
        )

        group = await tmdb_client.get_episode_group("5acf93e60e0a26346d0000ce", "en-US")

        assert isinstance(group, EpisodeGroup)
        assert group.groups[0].episodes[1].season_number == 2


class TestTMDBFailures:
    """Network failures and cancellation propagate without cache writes."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_incomplete_episode_group_raises_provider_error(
        self, tmdb_client: TMDBClient, api_cache: APICache
    ):
        """A group episode without episode_number surfaces as a provider error."""
        broken_group = copy.deepcopy(TMDB_EPISODE_GROUP_RESPONSE)
        del broken_group["groups"][0]["episodes"][0]["episode_number"]
        mock_configuration()
        respx.get(f"{TMDB_API}/tv/1399").mock(
            return_value=httpx.Response(200, json=TMDB_SERIES_RESPONSE)
        )
        respx.get(f"{TMDB_API}/tv/episode_group/5acf93e60e0a26346d0000ce").mock(
            return_value=httpx.Response(200, json=broken_group)
        )

        with pytest.raises(ProviderResponseError) as exc_info:
            await tmdb_client.get_episode(1399, 1, 1, "absolute", "en-US")

        assert isinstance(exc_info.value, MetadataProviderError)
        assert exc_info.value.path == "/tv/episode_group/5acf93e60e0a26346d0000ce"
        assert api_cache.get("tmdb:episode:1399:s1e1:absolute:en-US") is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_propagates_without_caching(
        self, tmdb_client: TMDBClient, api_cache: APICache
    ):
        mock_configuration()
        route = respx.get(f"{TMDB_API}/movie/550").mock(
            return_value=httpx.Response(500)
        )

        with pytest.raises(httpx.HTTPStatusError):
            await tmdb_client.get_movie(550, "fr-FR")

        assert route.call_count == 1
        assert api_cache.get("tmdb:movie:550:fr-FR") is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_configuration_failure_propagates(self, tmdb_client: TMDBClient):
        respx.get(f"{TMDB_API}/configuration").mock(
            side_effect=httpx.ConnectError("unreachable")
        )
        movie_route = respx.get(f"{TMDB_API}/movie/550")

        with pytest.raises(httpx.ConnectError):
            await tmdb_client.get_movie(550, "fr-FR")

        assert not movie_route.called
        assert tmdb_client.config_gate.has_config is False

    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_configuration_raises_provider_error(
        self, tmdb_client: TMDBClient
    ):
        respx.get(f"{TMDB_API}/configuration").mock(return_value=httpx.Response(404))

        with pytest.raises(ProviderResponseError):
            await tmdb_client.get_movie(550, "fr-FR")

    @pytest.mark.asyncio
    @respx.mock
    async def test_cancellation_leaves_cache_untouched(
        self, tmdb_client: TMDBClient, api_cache: APICache
    ):
        mock_configuration()
        started = asyncio.Event()

        async def slow_response(request):
            started.set()
            await asyncio.sleep(10)
            return httpx.Response(200, json=TMDB_MOVIE_RESPONSE)

        respx.get(f"{TMDB_API}/movie/550").mock(side_effect=slow_response)

        task = asyncio.create_task(tmdb_client.get_movie(550, "fr-FR"))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert api_cache.get("tmdb:movie:550:fr-FR") is None


class TestTMDBClientLifecycle:
    """Tests for client lifecycle management."""

    @pytest.mark.asyncio
    async def test_close_cleans_up_resources(self, api_cache: APICache):
        client = TMDBClient(api_key="test_api_key", cache=api_cache)
        api_cache.set_details("key", "value")

        _ = client._get_client()
        await client.close()

        assert client._client is None
        assert len(api_cache) == 0

    @pytest.mark.asyncio
    async def test_async_context_manager_closes(self, api_cache: APICache):
        async with TMDBClient(api_key="test_api_key", cache=api_cache) as client:
            http_client = client._get_client()

        assert http_client.is_closed
