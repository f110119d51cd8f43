"""Maps the tags and categories dataset to block list items.

The mapper is pure: the same TagsModel always yields equal items, and the
only collaborator is the label provider used to build folded category names.
"""

import logging

from ...api.exceptions import ContractViolationError
from ..domain.entities import TagGroup, TagsModel
from ..domain.items import (
    EMPTY,
    BlockListItem,
    ExpandableItem,
    IconRef,
    Item,
    LabelId,
    Link,
    Title,
)
from ..domain.ports import ILabelProvider

logger = logging.getLogger(__name__)


class TagsAndCategoriesMapper:
    """Turns TagsModel into the ordered items of the tags and categories block.

    Output shape:
        [Title, EMPTY]                              for an empty dataset
        [Title, <one row per group>..., Link]       otherwise

    A single-member group becomes an Item with the group's views. A group with
    several members becomes an ExpandableItem whose header carries the folded
    name and the group's views, and whose member rows carry no value.
    """

    def __init__(self, labels: ILabelProvider):
        self.labels = labels

    def map_to_items(self, model: TagsModel) -> list[BlockListItem]:
        items: list[BlockListItem] = [Title(LabelId.TAGS_AND_CATEGORIES)]

        if model.is_empty:
            items.append(EMPTY)
            return items

        for group in model.groups:
            if not group.members:
                raise ContractViolationError(
                    "Tag group has no members",
                    details={"views": group.views},
                )
            if group.is_category:
                items.append(self._map_category(group))
            else:
                items.append(self._map_tag(group))

        items.append(Link(LabelId.VIEW_MORE))
        return items

    def _map_tag(self, group: TagGroup) -> Item:
        return Item(
            text=group.members[0].name,
            value=str(group.views),
            icon=IconRef.TAG,
        )

    def _map_category(self, group: TagGroup) -> ExpandableItem:
        header = Item(
            text=self._folded_name(group),
            value=str(group.views),
            icon=IconRef.FOLDER_MULTIPLE,
        )
        expanded = tuple(
            Item(text=member.name, value=None, icon=IconRef.TAG)
            for member in group.members
        )
        return ExpandableItem(header=header, expanded_items=expanded)

    def _folded_name(self, group: TagGroup) -> str:
        """Join member names pairwise through the folded-name label."""
        name = group.members[0].name
        for member in group.members[1:]:
            name = self.labels.render(LabelId.CATEGORY_FOLDED_NAME, name, member.name)
        return name
