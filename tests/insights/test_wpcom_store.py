"""Tests for WPComInsightsStore.

The store composes StatsClient, so the tests mock the client rather than
aiohttp directly. One end-to-end case runs against a local aiohttp server.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from src.wpstats.api.client import StatsClient
from src.wpstats.api.exceptions import (
    APIError,
    AuthenticationError,
    ConnectionError,
    InvalidResponseError,
    NotFoundError,
    ServerError,
    TimeoutError,
)
from src.wpstats.config import StatsConfig
from src.wpstats.insights.adapters.labels import StringCatalogLabels
from src.wpstats.insights.adapters.wpcom_store import WPComInsightsStore
from src.wpstats.insights.domain.entities import (
    SiteRef,
    StoreError,
    StoreErrorType,
    TagsFetched,
    TagsFetchFailed,
)
from src.wpstats.insights.domain.items import FailureResult, LabelId
from src.wpstats.insights.use_cases.tags_and_categories import TagsAndCategoriesUseCase

RESPONSE = {"tags": [{"tags": [{"type": "tag", "name": "python", "link": "l"}], "views": 3}]}


@pytest.fixture
def mock_client():
    client = MagicMock(spec=StatsClient)
    client.get = AsyncMock(return_value=RESPONSE)
    return client


@pytest.fixture
def store(mock_client):
    return WPComInsightsStore(mock_client, tags_max=6)


@pytest.fixture
def site():
    return SiteRef(site_id=99)


class TestWPComInsightsStore:
    def test_endpoint_constant(self):
        assert WPComInsightsStore.TAGS_ENDPOINT == "/sites/{site_id}/stats/tags"

    def test_tags_max_defaults_to_client_config(self):
        client = MagicMock(spec=StatsClient)
        client.config = StatsConfig(access_token="t", tags_max=25)

        assert WPComInsightsStore(client).tags_max == 25

    async def test_fetches_and_maps(self, store, mock_client, site):
        outcome = await store.fetch_tags(site, forced=False)

        mock_client.get.assert_awaited_once_with("/sites/99/stats/tags", params={"max": 6})
        assert isinstance(outcome, TagsFetched)
        assert outcome.model.groups[0].members[0].name == "python"
        assert outcome.model.groups[0].views == 3

    async def test_unforced_fetch_uses_cache(self, store, mock_client, site):
        first = await store.fetch_tags(site, forced=False)
        second = await store.fetch_tags(site, forced=False)

        assert mock_client.get.await_count == 1
        assert first == second

    async def test_forced_fetch_bypasses_cache(self, store, mock_client, site):
        await store.fetch_tags(site, forced=False)
        await store.fetch_tags(site, forced=True)

        assert mock_client.get.await_count == 2

    async def test_cache_is_per_site(self, store, mock_client):
        await store.fetch_tags(SiteRef(site_id=1), forced=False)
        await store.fetch_tags(SiteRef(site_id=2), forced=False)

        assert mock_client.get.await_count == 2

    async def test_invalidate_drops_cache(self, store, mock_client, site):
        await store.fetch_tags(site, forced=False)
        store.invalidate(site)
        await store.fetch_tags(site, forced=False)

        assert mock_client.get.await_count == 2

    async def test_failure_is_not_cached(self, store, mock_client, site):
        mock_client.get = AsyncMock(side_effect=[ServerError(status_code=503), RESPONSE])

        first = await store.fetch_tags(site, forced=False)
        second = await store.fetch_tags(site, forced=False)

        assert isinstance(first, TagsFetchFailed)
        assert isinstance(second, TagsFetched)

    @pytest.mark.parametrize(
        "error,expected_type",
        [
            (AuthenticationError("Token rejected", status_code=403), StoreErrorType.AUTHORIZATION_REQUIRED),
            (NotFoundError("Site", "99"), StoreErrorType.NOT_FOUND),
            (TimeoutError("Request timed out"), StoreErrorType.TIMEOUT),
            (APIError("GET failed", status_code=418), StoreErrorType.API_ERROR),
            (ServerError("Server error (500)"), StoreErrorType.API_ERROR),
            (ConnectionError("No route"), StoreErrorType.GENERIC_ERROR),
        ],
    )
    async def test_client_errors_become_store_errors(self, store, mock_client, site, error, expected_type):
        mock_client.get = AsyncMock(side_effect=error)

        outcome = await store.fetch_tags(site, forced=True)

        assert isinstance(outcome, TagsFetchFailed)
        assert outcome.error.type == expected_type
        assert outcome.error.message == error.message

    async def test_malformed_payload_is_invalid_response(self, store, mock_client, site):
        mock_client.get = AsyncMock(return_value={"tags": [{"tags": []}]})

        outcome = await store.fetch_tags(site, forced=True)

        assert isinstance(outcome, TagsFetchFailed)
        assert outcome.error.type == StoreErrorType.INVALID_RESPONSE

    async def test_undecodable_body_is_invalid_response(self, store, mock_client, site):
        mock_client.get = AsyncMock(
            side_effect=InvalidResponseError("Response from /sites/99/stats/tags is not valid JSON")
        )

        outcome = await store.fetch_tags(site, forced=True)

        assert outcome == TagsFetchFailed(
            StoreError(
                StoreErrorType.INVALID_RESPONSE,
                "Response from /sites/99/stats/tags is not valid JSON",
            )
        )


class TestUndecodableResponseEndToEnd:
    """A broken body from the API still ends in a published failure."""

    @pytest.fixture
    async def server(self):
        async def broken_json(request):
            return web.Response(text="<html>oops", content_type="application/json")

        app = web.Application()
        app.router.add_get("/rest/sites/1/stats/tags", broken_json)

        test_server = TestServer(app)
        await test_server.start_server()
        yield test_server
        await test_server.close()

    async def test_use_case_publishes_failure(self, server):
        config = StatsConfig(access_token="t", base_url=str(server.make_url("/rest")))
        published = []

        async with StatsClient(config) as client:
            use_case = TagsAndCategoriesUseCase(WPComInsightsStore(client), StringCatalogLabels())
            use_case.live_data.subscribe(published.append)
            await use_case.fetch(SiteRef(site_id=1), refresh=True)

        assert len(published) == 1
        assert isinstance(published[0], FailureResult)
        assert published[0].failed_label == LabelId.TAGS_AND_CATEGORIES
        assert "not valid JSON" in published[0].error_message
