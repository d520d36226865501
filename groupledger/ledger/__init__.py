"""Mini README: In-memory group ledgers with balance-sorted rosters.

This package holds the registry of groups, each group's roster of users
sorted by balance, and its transaction log. The ``registry`` module is the
entry point; ``errors`` lists the recoverable failures callers should
expect.
"""

from .errors import DuplicateName, EmptyCollection, LedgerError, NotFound
from .group import Group
from .registry import GroupRegistry
from .roster import Roster, User
from .transactions import Transaction, TransactionLog

__all__ = [
    "DuplicateName",
    "EmptyCollection",
    "Group",
    "GroupRegistry",
    "LedgerError",
    "NotFound",
    "Roster",
    "Transaction",
    "TransactionLog",
    "User",
]
