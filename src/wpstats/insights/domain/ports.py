"""Port interfaces for insights use cases.

Ports define the contracts between the use cases and the infrastructure.
Adapters implement these ports in the adapters layer; use cases depend only
on the interfaces.

Following the Hexagonal Architecture (Ports and Adapters) pattern.
"""

from abc import ABC, abstractmethod
from typing import Any

from .entities import OutcomeEvent, SiteRef
from .items import LabelId


class IInsightsStore(ABC):
    """Port for fetching insights data.

    Implementations own caching and the network call. Failures are reported
    as a TagsFetchFailed outcome rather than raised.
    """

    @abstractmethod
    async def fetch_tags(self, site: SiteRef, forced: bool) -> OutcomeEvent:
        """Fetch the tags and categories dataset for a site.

        Args:
            site: Site to fetch stats for
            forced: Bypass any cached data and hit the network

        Returns:
            TagsFetched with the dataset, or TagsFetchFailed with a StoreError
        """
        ...


class ILabelProvider(ABC):
    """Port for localized string rendering."""

    @abstractmethod
    def render(self, label_id: LabelId, *args: Any) -> str:
        """Render a label, substituting positional arguments.

        Args:
            label_id: Label to render
            *args: Substitution arguments

        Returns:
            The rendered string
        """
        ...


class ICachePolicy(ABC):
    """Port for deciding whether a fetch should happen at all."""

    @abstractmethod
    def should_fetch(self, refresh: bool) -> bool:
        """Return True when the use case should call the store.

        Args:
            refresh: Caller asked for a new value even if one is published
        """
        ...
