"""Field mapper adapter for transforming stats API responses into domain entities.

Encapsulates the shape of the ``/sites/{site}/stats/tags`` response:

    {
        "date": "2024-01-01",
        "tags": [
            {"tags": [{"type": "tag", "name": "python", "link": "https://..."}], "views": 10},
            ...
        ]
    }
"""

from typing import Any

from ...api.exceptions import InvalidResponseError
from ..domain.entities import TagEntry, TagGroup, TagsModel


class TagsFieldMapper:
    """Maps the tags endpoint JSON to a TagsModel.

    This class handles:
    - Missing or null group list (treated as an empty dataset)
    - Missing view counts (treated as 0)
    - Type conversion of view counts to int
    Anything else that does not match the expected shape raises
    InvalidResponseError.
    """

    def map_to_model(self, raw: dict[str, Any]) -> TagsModel:
        """Transform the API response dictionary into a TagsModel.

        Args:
            raw: Parsed JSON response

        Returns:
            TagsModel with groups in response order
        """
        if not isinstance(raw, dict):
            raise InvalidResponseError(f"Expected an object, got {type(raw).__name__}")

        groups = raw.get("tags") or []
        if not isinstance(groups, list):
            raise InvalidResponseError("'tags' must be a list")

        return TagsModel(groups=tuple(self._map_group(g, i) for i, g in enumerate(groups)))

    def _map_group(self, raw: Any, index: int) -> TagGroup:
        if not isinstance(raw, dict):
            raise InvalidResponseError(f"Tag group {index} is not an object")

        members = raw.get("tags") or []
        if not isinstance(members, list):
            raise InvalidResponseError(f"Tag group {index} members must be a list")
        if not members:
            raise InvalidResponseError(f"Tag group {index} has no members")

        return TagGroup(
            members=tuple(self._map_entry(m, index) for m in members),
            views=self._parse_views(raw.get("views"), index),
        )

    def _map_entry(self, raw: Any, index: int) -> TagEntry:
        if not isinstance(raw, dict) or "name" not in raw:
            raise InvalidResponseError(f"Tag group {index} has a malformed member")
        name = raw["name"]
        if isinstance(name, bool) or not isinstance(name, (str, int)):
            raise InvalidResponseError(f"Tag group {index} has a member with invalid name: {name!r}")
        return TagEntry(
            name=str(name),
            kind=raw.get("type") or "tag",
            link=raw.get("link") or "",
            views=self._parse_views(raw.get("views"), index),
        )

    def _parse_views(self, value: Any, index: int) -> int:
        if value is None:
            return 0
        # bool is an int subclass; floats must not be truncated
        if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
            raise InvalidResponseError(f"Tag group {index} has non-integral views: {value!r}")
        try:
            views = int(value)
        except (TypeError, ValueError) as e:
            raise InvalidResponseError(
                f"Tag group {index} has non-numeric views: {value!r}", cause=e
            )
        if views < 0:
            raise InvalidResponseError(f"Tag group {index} has negative views: {views}")
        return views
