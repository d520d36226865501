"""Mini README: Registry of named group ledgers.

Structure:
    * GroupRegistry - insertion-ordered mapping of group names to ``Group``.

Groups are appended in creation order and listed back in that order. There
is no removal: a group lives as long as its registry.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from ..logging_utils import get_logger
from .errors import DuplicateName, NotFound
from .group import Group

LOGGER = get_logger(__name__)


class GroupRegistry:
    """Simple registry mapping group names to their ledgers."""

    def __init__(self) -> None:
        # dicts keep insertion order, which is the listing order
        self._groups: Dict[str, Group] = {}

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[Group]:
        return iter(self._groups.values())

    def __contains__(self, name: object) -> bool:
        return name in self._groups

    def add_group(self, name: str) -> Group:
        """Create an empty group at the end of the registry."""

        if name in self._groups:
            raise DuplicateName("group", name)
        group = Group(name)
        self._groups[name] = group
        LOGGER.info("Created group '%s'", name)
        return group

    def find_group(self, name: str) -> Optional[Group]:
        """Return the matching group, or ``None`` when it does not exist."""

        return self._groups.get(name)

    def get_group(self, name: str) -> Group:
        """Retrieve a group, raising ``NotFound`` when missing."""

        group = self._groups.get(name)
        if group is None:
            raise NotFound("group", name)
        return group

    def list_groups(self) -> List[str]:
        """Return group names in the order they were added."""

        return list(self._groups)

    def export_snapshot(self) -> List[Dict[str, object]]:
        """Export every group for JSON rendering."""

        return [group.as_dict() for group in self._groups.values()]
