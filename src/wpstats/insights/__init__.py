"""Insights module - Clean Architecture implementation of stats insight blocks.

Architecture:
    domain/     - Dataset entities, presentation items and port interfaces
    use_cases/  - Fetch orchestration, mapping and result publication
    adapters/   - Infrastructure implementations (WordPress.com API, labels)
"""

from .domain.entities import (
    SiteRef,
    StoreError,
    StoreErrorType,
    TagEntry,
    TagGroup,
    TagsFetched,
    TagsFetchFailed,
    TagsModel,
)
from .domain.items import (
    EMPTY,
    ExpandableItem,
    FailureResult,
    IconRef,
    Item,
    LabelId,
    Link,
    ListResult,
    Title,
)
from .domain.ports import ICachePolicy, IInsightsStore, ILabelProvider
from .use_cases.tags_and_categories import TagsAndCategoriesUseCase

__all__ = [
    # Dataset Entities
    "SiteRef",
    "TagEntry",
    "TagGroup",
    "TagsModel",
    # Store Outcome
    "StoreError",
    "StoreErrorType",
    "TagsFetched",
    "TagsFetchFailed",
    # Items and Results
    "EMPTY",
    "ExpandableItem",
    "FailureResult",
    "IconRef",
    "Item",
    "LabelId",
    "Link",
    "ListResult",
    "Title",
    # Ports
    "ICachePolicy",
    "IInsightsStore",
    "ILabelProvider",
    # Use Cases
    "TagsAndCategoriesUseCase",
]
