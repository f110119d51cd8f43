"""Shared behavior for insights use cases.

Every insights block follows the same flow: decide whether a fetch is needed,
load the block's result from its store, publish the result to observers.
Subclasses only implement ``load``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..domain.entities import SiteRef
from ..domain.items import InsightsResult
from ..domain.ports import ICachePolicy
from .live_data import LiveResult

logger = logging.getLogger(__name__)


class FetchWhenStalePolicy(ICachePolicy):
    """Fetch when a refresh is requested or nothing has been published yet."""

    def __init__(self, live_data: LiveResult):
        self.live_data = live_data

    def should_fetch(self, refresh: bool) -> bool:
        return refresh or self.live_data.value is None


class StatefulUseCase(ABC):
    """Base class for insights use cases that publish through LiveResult.

    Attributes:
        live_data: Holder observers subscribe to
        cache_policy: Decides whether ``fetch`` calls the store at all
    """

    def __init__(self, cache_policy: Optional[ICachePolicy] = None):
        self.live_data: LiveResult[InsightsResult] = LiveResult()
        self.cache_policy = cache_policy or FetchWhenStalePolicy(self.live_data)

    async def fetch(self, site: SiteRef, refresh: bool = False, forced: bool = False) -> None:
        """Load and publish a new result for the site.

        Publishes exactly once when the cache policy allows the fetch, after
        the store resolves. If the task is cancelled while waiting on the
        store, nothing is published.

        Args:
            site: Site to fetch stats for
            refresh: Ask for a new value even if one is already published
            forced: Forwarded to the store to bypass its cache
        """
        if not self.cache_policy.should_fetch(refresh):
            logger.debug(f"{self.__class__.__name__}: skipping fetch for {site}")
            return

        result = await self.load(site, forced)
        self.live_data.publish(result)

    def clear(self) -> None:
        """Forget the published result, e.g. when the selected site changes."""
        self.live_data.clear()

    @abstractmethod
    async def load(self, site: SiteRef, forced: bool) -> InsightsResult:
        """Fetch from the store and build the result to publish."""
        ...
