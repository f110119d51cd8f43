"""WordPress.com insights store adapter.

Implements IInsightsStore on top of StatsClient. Keeps the last successful
dataset per site in memory so that unforced fetches can be served without a
network call.
"""

import logging
from typing import TYPE_CHECKING, Optional

from ...api.exceptions import (
    APIError,
    AuthenticationError,
    ContractViolationError,
    InvalidResponseError,
    NotFoundError,
    StatsError,
    TimeoutError,
)
from ...config import DEFAULT_TAGS_MAX
from ..domain.entities import (
    OutcomeEvent,
    SiteRef,
    StoreError,
    StoreErrorType,
    TagsFetched,
    TagsFetchFailed,
    TagsModel,
)
from ..domain.ports import IInsightsStore
from .field_mapper import TagsFieldMapper

if TYPE_CHECKING:
    from ...api.client import StatsClient

logger = logging.getLogger(__name__)


def _error_type_for(error: StatsError) -> StoreErrorType:
    """Classify a client exception into a store error type."""
    if isinstance(error, AuthenticationError):
        return StoreErrorType.AUTHORIZATION_REQUIRED
    if isinstance(error, NotFoundError):
        return StoreErrorType.NOT_FOUND
    if isinstance(error, TimeoutError):
        return StoreErrorType.TIMEOUT
    if isinstance(error, InvalidResponseError):
        return StoreErrorType.INVALID_RESPONSE
    if isinstance(error, APIError):
        return StoreErrorType.API_ERROR
    return StoreErrorType.GENERIC_ERROR


class WPComInsightsStore(IInsightsStore):
    """WordPress.com REST adapter for insights data.

    ``tags_max`` is the display cap: the endpoint returns at most that many
    groups and nothing downstream truncates further.
    """

    TAGS_ENDPOINT = "/sites/{site_id}/stats/tags"

    def __init__(
        self,
        client: "StatsClient",
        field_mapper: Optional[TagsFieldMapper] = None,
        tags_max: Optional[int] = None,
    ):
        """Initialize the store.

        Args:
            client: StatsClient inside its async context
            field_mapper: Optional mapper override
            tags_max: Groups requested per fetch; defaults to the client config
        """
        self.client = client
        self.field_mapper = field_mapper or TagsFieldMapper()
        if tags_max is None:
            config = getattr(client, "config", None)
            tags_max = config.tags_max if config else DEFAULT_TAGS_MAX
        self.tags_max = tags_max
        self._tags_cache: dict[int, TagsModel] = {}

    async def fetch_tags(self, site: SiteRef, forced: bool) -> OutcomeEvent:
        if not forced:
            cached = self._tags_cache.get(site.site_id)
            if cached is not None:
                logger.debug(f"Serving cached tags for site {site}")
                return TagsFetched(cached)

        endpoint = self.TAGS_ENDPOINT.format(site_id=site.site_id)

        try:
            raw = await self.client.get(endpoint, params={"max": self.tags_max})
            model = self.field_mapper.map_to_model(raw)
        except ContractViolationError:
            raise
        except StatsError as e:
            error_type = _error_type_for(e)
            logger.warning(f"Tags fetch for site {site} failed ({error_type.value}): {e}")
            return TagsFetchFailed(StoreError(type=error_type, message=e.message))

        self._tags_cache[site.site_id] = model
        logger.info(f"Fetched {len(model)} tag groups for site {site}")
        return TagsFetched(model)

    def invalidate(self, site: Optional[SiteRef] = None) -> None:
        """Drop cached data for one site, or for all sites."""
        if site is None:
            self._tags_cache.clear()
        else:
            self._tags_cache.pop(site.site_id, None)
