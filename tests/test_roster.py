"""Mini README: Tests for the balance-sorted user roster.

Structure:
    * insertion tests - new users join at the front and duplicates are rejected.
    * credit tests - a balance change moves the user forward past lower or equal balances.
    * least_balance tests - prefix scan of tied users and the empty roster signal.
"""

from __future__ import annotations

import pytest

from groupledger.ledger import DuplicateName, EmptyCollection, NotFound, Roster


def _roster(*names: str) -> Roster:
    roster = Roster(group_name="test")
    for name in names:
        roster.add(name)
    return roster


def test_new_users_join_at_the_front() -> None:
    roster = _roster("alice", "bob", "carol")

    assert roster.names() == ["carol", "bob", "alice"]
    assert all(user.balance == 0 for user in roster)


def test_new_user_joins_front_even_below_negative_balances() -> None:
    roster = _roster("alice")
    roster.credit("alice", -4.0)

    roster.add("carol")

    assert roster.names() == ["carol", "alice"]
    assert roster.find("alice").balance == pytest.approx(-4.0)
    # the prefix scan starts from the front user regardless of lower balances later on
    assert [user.name for user in roster.least_balance()] == ["carol"]


def test_duplicate_user_is_rejected_without_changes() -> None:
    roster = _roster("alice", "bob")

    with pytest.raises(DuplicateName):
        roster.add("alice")

    assert roster.names() == ["bob", "alice"]
    assert len(roster) == 2


def test_credit_moves_user_after_equal_and_lower_balances() -> None:
    roster = _roster("alice", "bob", "carol")
    roster.credit("alice", 5.0)
    roster.credit("bob", 5.0)

    # bob reaches alice's balance and moves past her
    assert roster.names() == ["carol", "alice", "bob"]

    roster.credit("carol", 7.0)
    assert roster.names() == ["alice", "bob", "carol"]


def test_credit_keeps_position_when_still_below_successor() -> None:
    roster = _roster("alice", "bob")
    roster.credit("alice", 10.0)
    roster.credit("bob", 3.0)

    assert roster.names() == ["bob", "alice"]
    assert roster.find("bob").balance == pytest.approx(3.0)


def test_negative_credit_never_moves_user_backward() -> None:
    roster = _roster("alice", "bob")
    roster.credit("bob", 4.0)
    roster.credit("bob", -9.0)

    # forward-only repositioning leaves bob after alice despite the lower balance
    assert roster.names() == ["alice", "bob"]
    assert roster.find("bob").balance == pytest.approx(-5.0)


def test_credit_unknown_user_raises_not_found() -> None:
    roster = _roster("alice")

    with pytest.raises(NotFound):
        roster.credit("nobody", 1.0)


def test_least_balance_returns_tied_prefix() -> None:
    roster = _roster("alice", "bob", "carol")
    roster.credit("carol", 2.0)

    assert [user.name for user in roster.least_balance()] == ["bob", "alice"]


def test_least_balance_on_empty_roster_signals_empty() -> None:
    with pytest.raises(EmptyCollection):
        Roster(group_name="east").least_balance()


def test_remove_detaches_user() -> None:
    roster = _roster("alice", "bob")

    removed = roster.remove("alice")

    assert removed.name == "alice"
    assert "alice" not in roster
    assert roster.find("alice") is None
    with pytest.raises(NotFound):
        roster.remove("alice")
