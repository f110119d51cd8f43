"""Tests for the TagsAndCategoriesUseCase.

These tests use mock ports to test the use case in isolation.
"""

import asyncio
from typing import Any

import pytest

from src.wpstats.api.exceptions import ContractViolationError
from src.wpstats.insights.domain.entities import (
    OutcomeEvent,
    SiteRef,
    StoreError,
    StoreErrorType,
    TagEntry,
    TagGroup,
    TagsFetched,
    TagsFetchFailed,
    TagsModel,
)
from src.wpstats.insights.domain.items import (
    EMPTY,
    ExpandableItem,
    FailureResult,
    IconRef,
    Item,
    LabelId,
    Link,
    ListResult,
    ResultType,
    Title,
)
from src.wpstats.insights.domain.ports import ICachePolicy, IInsightsStore, ILabelProvider
from src.wpstats.insights.use_cases.tags_and_categories import TagsAndCategoriesUseCase


class MockInsightsStore(IInsightsStore):
    """Mock implementation of IInsightsStore for testing."""

    def __init__(self, outcome: OutcomeEvent | None = None):
        self.outcome = outcome or TagsFetched(TagsModel())
        self.calls: list[tuple[SiteRef, bool]] = []

    async def fetch_tags(self, site: SiteRef, forced: bool) -> OutcomeEvent:
        self.calls.append((site, forced))
        return self.outcome


class GatedInsightsStore(IInsightsStore):
    """Store whose responses are released by the test, one future per call."""

    def __init__(self):
        self.pending: list[asyncio.Future] = []

    async def fetch_tags(self, site: SiteRef, forced: bool) -> OutcomeEvent:
        future = asyncio.get_running_loop().create_future()
        self.pending.append(future)
        return await future


class MockLabels(ILabelProvider):
    def render(self, label_id: LabelId, *args: Any) -> str:
        return "category name"


class StaticPolicy(ICachePolicy):
    def __init__(self, answer: bool):
        self.answer = answer
        self.calls: list[bool] = []

    def should_fetch(self, refresh: bool) -> bool:
        self.calls.append(refresh)
        return self.answer


def tag(name: str) -> TagEntry:
    return TagEntry(name=name, kind="tag", link=f"{name}.com")


@pytest.fixture
def site():
    return SiteRef(site_id=42, domain="example.wordpress.com")


def collect(use_case: TagsAndCategoriesUseCase) -> list:
    published: list = []
    use_case.live_data.subscribe(published.append)
    return published


class TestTagsAndCategoriesUseCase:
    """Tests for fetch/publish behavior."""

    async def test_maps_tags_to_list_result(self, site):
        store = MockInsightsStore(
            TagsFetched(
                TagsModel(
                    groups=(
                        TagGroup(members=(tag("tag1"),), views=10),
                        TagGroup(members=(tag("tag1"), tag("tag2")), views=15),
                    )
                )
            )
        )
        use_case = TagsAndCategoriesUseCase(store, MockLabels())
        published = collect(use_case)

        await use_case.fetch(site, refresh=True, forced=False)

        assert len(published) == 1
        result = published[0]
        assert result.type == ResultType.LIST_INSIGHTS
        assert result.items == (
            Title(LabelId.TAGS_AND_CATEGORIES),
            Item("tag1", "10", IconRef.TAG),
            ExpandableItem(
                header=Item("category name", "15", IconRef.FOLDER_MULTIPLE),
                expanded_items=(Item("tag1", None, IconRef.TAG), Item("tag2", None, IconRef.TAG)),
            ),
            Link(LabelId.VIEW_MORE),
        )

    async def test_maps_empty_tags(self, site):
        use_case = TagsAndCategoriesUseCase(MockInsightsStore(), MockLabels())
        published = collect(use_case)

        await use_case.fetch(site, refresh=True, forced=False)

        assert published == [ListResult(items=(Title(LabelId.TAGS_AND_CATEGORIES), EMPTY))]

    async def test_maps_error_to_failure_result(self, site):
        store = MockInsightsStore(
            TagsFetchFailed(StoreError(StoreErrorType.GENERIC_ERROR, "Generic error"))
        )
        use_case = TagsAndCategoriesUseCase(store, MockLabels())
        published = collect(use_case)

        await use_case.fetch(site, refresh=True, forced=False)

        result = published[0]
        assert result.type == ResultType.FAILED
        assert result.failed_label == LabelId.TAGS_AND_CATEGORIES
        assert result.error_message == "Generic error"

    @pytest.mark.parametrize("error_type", list(StoreErrorType))
    async def test_failure_is_independent_of_error_type(self, site, error_type):
        message = "  Raw message, unchanged!  "
        store = MockInsightsStore(TagsFetchFailed(StoreError(error_type, message)))
        use_case = TagsAndCategoriesUseCase(store, MockLabels())

        await use_case.fetch(site, refresh=True, forced=False)

        assert use_case.live_data.value == FailureResult(LabelId.TAGS_AND_CATEGORIES, message)

    @pytest.mark.parametrize("forced", [True, False])
    async def test_forced_is_forwarded_to_store(self, site, forced):
        store = MockInsightsStore()
        use_case = TagsAndCategoriesUseCase(store, MockLabels())

        await use_case.fetch(site, refresh=True, forced=forced)

        assert store.calls == [(site, forced)]

    async def test_skips_fetch_when_value_present_and_no_refresh(self, site):
        store = MockInsightsStore()
        use_case = TagsAndCategoriesUseCase(store, MockLabels())
        published = collect(use_case)

        await use_case.fetch(site, refresh=False, forced=False)
        await use_case.fetch(site, refresh=False, forced=False)

        assert len(store.calls) == 1
        assert len(published) == 1

    async def test_refresh_fetches_again(self, site):
        store = MockInsightsStore()
        use_case = TagsAndCategoriesUseCase(store, MockLabels())
        published = collect(use_case)

        await use_case.fetch(site, refresh=False, forced=False)
        await use_case.fetch(site, refresh=True, forced=False)

        assert len(store.calls) == 2
        assert len(published) == 2

    async def test_clear_allows_fetch_without_refresh(self, site):
        store = MockInsightsStore()
        use_case = TagsAndCategoriesUseCase(store, MockLabels())

        await use_case.fetch(site, refresh=False, forced=False)
        use_case.clear()
        await use_case.fetch(site, refresh=False, forced=False)

        assert len(store.calls) == 2

    async def test_custom_cache_policy_decides(self, site):
        store = MockInsightsStore()
        policy = StaticPolicy(False)
        use_case = TagsAndCategoriesUseCase(store, MockLabels(), cache_policy=policy)
        published = collect(use_case)

        await use_case.fetch(site, refresh=True, forced=True)

        assert policy.calls == [True]
        assert store.calls == []
        assert published == []

    async def test_publishes_only_after_store_resolves(self, site):
        store = GatedInsightsStore()
        use_case = TagsAndCategoriesUseCase(store, MockLabels())
        published = collect(use_case)

        task = asyncio.create_task(use_case.fetch(site, refresh=True))
        await asyncio.sleep(0)
        assert published == []

        store.pending[0].set_result(TagsFetched(TagsModel()))
        await task
        assert len(published) == 1

    async def test_last_store_response_to_resolve_wins(self, site):
        store = GatedInsightsStore()
        use_case = TagsAndCategoriesUseCase(store, MockLabels())

        first = asyncio.create_task(use_case.fetch(site, refresh=True))
        second = asyncio.create_task(use_case.fetch(site, refresh=True))
        await asyncio.sleep(0)
        assert len(store.pending) == 2

        store.pending[1].set_result(
            TagsFetched(TagsModel(groups=(TagGroup(members=(tag("newer"),), views=1),)))
        )
        await second
        store.pending[0].set_result(
            TagsFetchFailed(StoreError(StoreErrorType.TIMEOUT, "slow request"))
        )
        await first

        assert use_case.live_data.value == FailureResult(LabelId.TAGS_AND_CATEGORIES, "slow request")

    async def test_cancelled_fetch_publishes_nothing(self, site):
        store = GatedInsightsStore()
        use_case = TagsAndCategoriesUseCase(store, MockLabels())
        published = collect(use_case)

        task = asyncio.create_task(use_case.fetch(site, refresh=True))
        await asyncio.sleep(0)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert published == []

    async def test_contract_violation_propagates_without_publish(self, site):
        store = MockInsightsStore(TagsFetched(TagsModel(groups=(TagGroup(members=(), views=1),))))
        use_case = TagsAndCategoriesUseCase(store, MockLabels())
        published = collect(use_case)

        with pytest.raises(ContractViolationError):
            await use_case.fetch(site, refresh=True)

        assert published == []
