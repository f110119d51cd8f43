"""Adapters layer - Infrastructure implementations of insights ports."""

from .field_mapper import TagsFieldMapper
from .labels import ENGLISH_LABELS, StringCatalogLabels
from .wpcom_store import WPComInsightsStore

__all__ = [
    "ENGLISH_LABELS",
    "StringCatalogLabels",
    "TagsFieldMapper",
    "WPComInsightsStore",
]
