"""Mini README: Group ledger tying a roster to its transaction log.

Structure:
    * Group - named ledger exposing user, transaction and query operations.

Every mutating operation works on a single group and finishes before
returning, so callers never observe a user removed while their transactions
remain, or a transaction logged without the matching balance update.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..logging_utils import get_logger
from .errors import NotFound
from .roster import Roster, User
from .transactions import Transaction, TransactionLog

LOGGER = get_logger(__name__)


class Group:
    """A named set of users and the transactions they have posted."""

    def __init__(self, name: str) -> None:
        self._name = name
        self.users = Roster(group_name=name)
        self.transactions = TransactionLog()

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Group(name={self._name!r}, users={len(self.users)}, transactions={len(self.transactions)})"

    # Users -----------------------------------------------------------------

    def add_user(self, name: str) -> User:
        """Add a zero-balance user; raises ``DuplicateName`` if taken."""

        return self.users.add(name)

    def remove_user(self, name: str) -> None:
        """Remove a user together with every transaction they posted."""

        self.users.remove(name)
        self.remove_transactions_for(name)
        LOGGER.info("Removed user '%s' from group '%s'", name, self._name)

    def find_user(self, name: str) -> Optional[User]:
        return self.users.find(name)

    def list_users(self) -> List[str]:
        """User names ordered from lowest to highest balance."""

        return self.users.names()

    def least_balance_users(self) -> List[str]:
        """Names of every user tied for the lowest balance.

        Raises ``EmptyCollection`` when the group has no users, which callers
        should treat differently from an empty result.
        """

        return [user.name for user in self.users.least_balance()]

    def user_balance(self, name: str) -> float:
        user = self.users.find(name)
        if user is None:
            raise NotFound("user", name, f"group {self._name}")
        return user.balance

    # Transactions ----------------------------------------------------------

    def post_transaction(self, user_name: str, amount: float) -> Transaction:
        """Log ``amount`` for a live user and reposition them in the roster."""

        if user_name not in self.users:
            raise NotFound("user", user_name, f"group {self._name}")
        transaction = self.transactions.prepend(user_name, amount)
        self.users.credit(user_name, transaction.amount)
        LOGGER.debug(
            "Posted %s for user '%s' in group '%s'", transaction.amount, user_name, self._name
        )
        return transaction

    def recent_transactions(self, count: int) -> List[Tuple[str, float]]:
        """Return up to ``count`` (name, amount) pairs, most recent first."""

        return [transaction.as_tuple() for transaction in self.transactions.recent(count)]

    def remove_transactions_for(self, user_name: str) -> int:
        return self.transactions.remove_for(user_name)

    def as_dict(self) -> Dict[str, object]:
        """Export the group with users in roster order and the log newest first."""

        return {
            "name": self._name,
            "users": [user.as_dict() for user in self.users],
            "transactions": [transaction.as_dict() for transaction in self.transactions],
        }
