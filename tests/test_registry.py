"""Mini README: Tests for the group registry.

Ensures groups are listed in creation order, duplicates are rejected without
side effects, and lookups distinguish "absent" from an error.
"""

import pytest

from groupledger.ledger import DuplicateName, Group, GroupRegistry, NotFound


def test_groups_are_listed_in_insertion_order():
    registry = GroupRegistry()
    for name in ("west", "east", "north"):
        registry.add_group(name)

    assert registry.list_groups() == ["west", "east", "north"]
    assert len(registry) == 3


def test_duplicate_group_is_rejected():
    registry = GroupRegistry()
    west = registry.add_group("west")
    west.add_user("alice")

    with pytest.raises(DuplicateName):
        registry.add_group("west")

    assert registry.list_groups() == ["west"]
    assert registry.find_group("west") is west
    assert registry.find_group("west").list_users() == ["alice"]


def test_find_group_returns_none_when_missing():
    registry = GroupRegistry()

    assert registry.find_group("south") is None
    assert "south" not in registry


def test_get_group_raises_not_found():
    registry = GroupRegistry()
    registry.add_group("west")

    assert isinstance(registry.get_group("west"), Group)
    with pytest.raises(NotFound) as excinfo:
        registry.get_group("south")
    assert str(excinfo.value) == "Group south not found"


def test_export_snapshot_lists_every_group():
    registry = GroupRegistry()
    registry.add_group("west").add_user("alice")
    registry.add_group("east")

    snapshot = registry.export_snapshot()

    assert [entry["name"] for entry in snapshot] == ["west", "east"]
    assert snapshot[0]["users"] == [{"name": "alice", "balance": 0.0}]
