"""Mini README: Per-group transaction log, most recent entry first.

Structure:
    * Transaction - dataclass pairing a user name with an amount.
    * TransactionLog - prepend-only history with pruning by user name.

Transactions keep a copy of the user name rather than a reference to the
user, so the log tolerates a user disappearing until ``remove_for`` prunes
their entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single amount posted under a user's name."""

    user_name: str
    amount: float

    def as_tuple(self) -> Tuple[str, float]:
        return (self.user_name, self.amount)

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {"user_name": self.user_name, "amount": self.amount}


class TransactionLog:
    """Reverse-chronological sequence of transactions."""

    def __init__(self) -> None:
        # index 0 is the most recent entry
        self._entries: List[Transaction] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._entries)

    def prepend(self, user_name: str, amount: float) -> Transaction:
        """Record a new transaction at the head of the log."""

        transaction = Transaction(user_name=user_name, amount=float(amount))
        self._entries.insert(0, transaction)
        return transaction

    def recent(self, count: int) -> List[Transaction]:
        """Return up to ``count`` of the most recent transactions."""

        if count <= 0:
            return []
        return self._entries[:count]

    def remove_for(self, user_name: str) -> int:
        """Drop every transaction posted under ``user_name``; return how many."""

        kept = [entry for entry in self._entries if entry.user_name != user_name]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        if removed:
            LOGGER.debug("Pruned %s transactions for user '%s'", removed, user_name)
        return removed
