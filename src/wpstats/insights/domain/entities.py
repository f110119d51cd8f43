"""Domain entities for stats insights.

These are pure data structures with no infrastructure dependencies.
They describe the raw "tags and categories" dataset as the store returns it
and the outcome of a store fetch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# ============================================
# Site
# ============================================


@dataclass(frozen=True)
class SiteRef:
    """Identifies the site whose stats are fetched.

    Attributes:
        site_id: WordPress.com site ID (used in API paths and cache keys)
        domain: Optional human-readable domain, for logging only
    """

    site_id: int
    domain: Optional[str] = None

    def __str__(self) -> str:
        return self.domain or str(self.site_id)


# ============================================
# Tags and Categories Dataset
# ============================================


@dataclass(frozen=True)
class TagEntry:
    """A single tag or category record.

    Attributes:
        name: Display name of the tag or category
        kind: Raw API type, "tag" or "category"
        link: Public URL of the tag/category archive
        views: Per-member view count when the API reports one. Display
            always uses the group aggregate instead.
    """

    name: str
    kind: str
    link: str
    views: int = 0

    @property
    def is_category(self) -> bool:
        return self.kind == "category"


@dataclass(frozen=True)
class TagGroup:
    """One row of the dataset.

    A group with one member is a standalone tag; two or more members form a
    folded category. ``views`` is the aggregate reported by the source and is
    not required to equal anything derived from the members.
    """

    members: tuple[TagEntry, ...]
    views: int

    @property
    def is_category(self) -> bool:
        """Business rule: more than one member folds into a category row."""
        return len(self.members) > 1


@dataclass(frozen=True)
class TagsModel:
    """Ordered groups returned by a single store fetch. May be empty."""

    groups: tuple[TagGroup, ...] = ()

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def is_empty(self) -> bool:
        return not self.groups


# ============================================
# Store Outcome
# ============================================


class StoreErrorType(str, Enum):
    """Categories of store-side failures."""

    GENERIC_ERROR = "generic_error"
    AUTHORIZATION_REQUIRED = "authorization_required"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    API_ERROR = "api_error"
    INVALID_RESPONSE = "invalid_response"


@dataclass(frozen=True)
class StoreError:
    """Error reported by the store. The message is shown to users as-is."""

    type: StoreErrorType
    message: str


@dataclass(frozen=True)
class TagsFetched:
    """Successful store outcome."""

    model: TagsModel


@dataclass(frozen=True)
class TagsFetchFailed:
    """Failed store outcome."""

    error: StoreError


OutcomeEvent = Union[TagsFetched, TagsFetchFailed]
