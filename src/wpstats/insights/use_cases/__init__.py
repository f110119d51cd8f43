"""Use cases layer - Business logic orchestration for insights blocks."""

from .base import FetchWhenStalePolicy, StatefulUseCase
from .live_data import LiveResult
from .tags_and_categories import TagsAndCategoriesUseCase
from .tags_mapper import TagsAndCategoriesMapper

__all__ = [
    "FetchWhenStalePolicy",
    "LiveResult",
    "StatefulUseCase",
    "TagsAndCategoriesMapper",
    "TagsAndCategoriesUseCase",
]
