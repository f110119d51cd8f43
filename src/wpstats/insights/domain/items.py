"""Presentation items and results published by insights use cases.

Each item is an immutable value with structural equality and a ``type``
discriminator, so consumers can branch on ``item.type`` or ``isinstance``.
Labels and icons are references; rendering them is the UI layer's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class LabelId(str, Enum):
    """String resources referenced by items and rendered by ILabelProvider."""

    TAGS_AND_CATEGORIES = "stats_view_tags_and_categories"
    VIEW_MORE = "stats_insights_view_more"
    CATEGORY_FOLDED_NAME = "stats_category_folded_name"


class IconRef(str, Enum):
    """Icons shown next to list rows."""

    TAG = "ic_tag_grey_dark_24dp"
    FOLDER_MULTIPLE = "ic_folder_multiple_grey_dark_24dp"


# ============================================
# Block List Items
# ============================================


class BlockItemType(str, Enum):
    """Discriminator for block list items."""

    TITLE = "title"
    ITEM = "item"
    EXPANDABLE_ITEM = "expandable_item"
    EMPTY = "empty"
    LINK = "link"


@dataclass(frozen=True)
class Title:
    text: LabelId
    type: BlockItemType = field(default=BlockItemType.TITLE, init=False)


@dataclass(frozen=True)
class Item:
    """A single row. ``value`` is None when the row shows no count."""

    text: str
    value: Optional[str]
    icon: IconRef
    type: BlockItemType = field(default=BlockItemType.ITEM, init=False)


@dataclass(frozen=True)
class ExpandableItem:
    """A row that expands to show its member rows."""

    header: Item
    expanded_items: tuple[Item, ...]
    type: BlockItemType = field(default=BlockItemType.EXPANDABLE_ITEM, init=False)


@dataclass(frozen=True)
class Empty:
    """Marker shown when the dataset has no rows."""

    type: BlockItemType = field(default=BlockItemType.EMPTY, init=False)


EMPTY = Empty()


@dataclass(frozen=True)
class Link:
    text: LabelId
    type: BlockItemType = field(default=BlockItemType.LINK, init=False)


BlockListItem = Union[Title, Item, ExpandableItem, Empty, Link]


# ============================================
# Results
# ============================================


class ResultType(str, Enum):
    """Discriminator for published results."""

    LIST_INSIGHTS = "list_insights"
    FAILED = "failed"


@dataclass(frozen=True)
class ListResult:
    """Successful result: ordered items ready for display."""

    items: tuple[BlockListItem, ...]
    type: ResultType = field(default=ResultType.LIST_INSIGHTS, init=False)


@dataclass(frozen=True)
class FailureResult:
    """Failed result: the block's label and the raw error message."""

    failed_label: LabelId
    error_message: str
    type: ResultType = field(default=ResultType.FAILED, init=False)


InsightsResult = Union[ListResult, FailureResult]
