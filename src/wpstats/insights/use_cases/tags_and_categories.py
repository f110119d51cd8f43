"""Tags and Categories Use Case - Fetches and publishes the tags block.

Workflow:
1. Ask the cache policy whether to fetch (StatefulUseCase.fetch)
2. Fetch the dataset from the store (via IInsightsStore)
3. Map success into block items (via TagsAndCategoriesMapper)
   or failure into a FailureResult
4. Publish the result to live_data observers
"""

import logging
from typing import Optional

from ..domain.entities import SiteRef, TagsFetched, TagsFetchFailed
from ..domain.items import FailureResult, InsightsResult, LabelId, ListResult
from ..domain.ports import ICachePolicy, IInsightsStore, ILabelProvider
from .base import StatefulUseCase
from .tags_mapper import TagsAndCategoriesMapper

logger = logging.getLogger(__name__)


class TagsAndCategoriesUseCase(StatefulUseCase):
    """Orchestrates the tags and categories insights block.

    Store errors are translated 1:1 into FailureResult carrying the block
    label and the store's message unchanged. Mapper contract violations are
    not caught.

    Example:
        use_case = TagsAndCategoriesUseCase(
            insights_store=WPComInsightsStore(client),
            labels=StringCatalogLabels(),
        )
        use_case.live_data.subscribe(render)
        await use_case.fetch(site, refresh=True, forced=False)
    """

    def __init__(
        self,
        insights_store: IInsightsStore,
        labels: ILabelProvider,
        cache_policy: Optional[ICachePolicy] = None,
    ):
        """Initialize the use case with its dependencies.

        Args:
            insights_store: Port for fetching the tags dataset
            labels: Port for rendering folded category names
            cache_policy: Optional override of the default fetch decision
        """
        super().__init__(cache_policy)
        self.store = insights_store
        self.mapper = TagsAndCategoriesMapper(labels)

    async def load(self, site: SiteRef, forced: bool) -> InsightsResult:
        logger.info(f"Fetching tags and categories for site {site} (forced={forced})")

        outcome = await self.store.fetch_tags(site, forced)

        if isinstance(outcome, TagsFetched):
            items = self.mapper.map_to_items(outcome.model)
            logger.info(
                f"Mapped {len(outcome.model)} tag groups into {len(items)} items for site {site}"
            )
            return ListResult(items=tuple(items))

        if isinstance(outcome, TagsFetchFailed):
            logger.warning(
                f"Tags fetch failed for site {site}: "
                f"{outcome.error.type.value}: {outcome.error.message}"
            )
            return FailureResult(
                failed_label=LabelId.TAGS_AND_CATEGORIES,
                error_message=outcome.error.message,
            )

        raise TypeError(f"Unexpected store outcome: {outcome!r}")
