"""String catalog adapter implementing ILabelProvider.

Templates use ``str.format`` positional placeholders ({0}, {1}, ...).
"""

from typing import Any, Optional

from ..domain.items import LabelId
from ..domain.ports import ILabelProvider

ENGLISH_LABELS: dict[LabelId, str] = {
    LabelId.TAGS_AND_CATEGORIES: "Tags & Categories",
    LabelId.VIEW_MORE: "View more",
    LabelId.CATEGORY_FOLDED_NAME: "{0} | {1}",
}


class StringCatalogLabels(ILabelProvider):
    """Renders labels from an in-memory catalog.

    Missing entries in a custom catalog fall back to English.
    """

    def __init__(self, catalog: Optional[dict[LabelId, str]] = None):
        self.catalog = {**ENGLISH_LABELS, **(catalog or {})}

    def render(self, label_id: LabelId, *args: Any) -> str:
        try:
            template = self.catalog[label_id]
        except KeyError:
            raise KeyError(f"No label for {label_id!r}") from None
        return template.format(*args)
