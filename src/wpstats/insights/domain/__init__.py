"""Domain layer - Pure domain entities and port interfaces.

This layer contains:
- Entities: The raw tags dataset and store outcomes
- Items: Presentation items and results
- Ports: Abstract interfaces defining contracts for adapters

No infrastructure dependencies allowed in this layer.
"""

from .entities import (
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
from .items import (
    EMPTY,
    BlockItemType,
    BlockListItem,
    Empty,
    ExpandableItem,
    FailureResult,
    IconRef,
    InsightsResult,
    Item,
    LabelId,
    Link,
    ListResult,
    ResultType,
    Title,
)
from .ports import ICachePolicy, IInsightsStore, ILabelProvider

__all__ = [
    # Dataset Entities
    "SiteRef",
    "TagEntry",
    "TagGroup",
    "TagsModel",
    # Store Outcome
    "OutcomeEvent",
    "StoreError",
    "StoreErrorType",
    "TagsFetched",
    "TagsFetchFailed",
    # Presentation Items
    "BlockItemType",
    "BlockListItem",
    "EMPTY",
    "Empty",
    "ExpandableItem",
    "IconRef",
    "Item",
    "LabelId",
    "Link",
    "Title",
    # Results
    "FailureResult",
    "InsightsResult",
    "ListResult",
    "ResultType",
    # Ports
    "ICachePolicy",
    "IInsightsStore",
    "ILabelProvider",
]
