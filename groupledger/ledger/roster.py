"""Mini README: Per-group user roster kept in ascending balance order.

Structure:
    * User - dataclass holding a name and a running balance.
    * Roster - ordered collection of users, lowest payer first.

New users join at the front with a zero balance. After a balance changes the
roster moves that single user forward past every neighbour whose balance is
less than or equal to the new one, which is one step of insertion sort. Users
are never moved backward, so a negative amount can leave the roster out of
order; callers posting refunds should be aware of this limitation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from ..logging_utils import get_logger
from .errors import DuplicateName, EmptyCollection, NotFound

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class User:
    """Member of a group with the total amount they have paid."""

    name: str
    balance: float = 0.0

    def as_dict(self) -> Dict[str, object]:
        """Export the user with serialisable values."""

        return {"name": self.name, "balance": self.balance}


class Roster:
    """Users of one group, sorted by non-decreasing balance."""

    def __init__(self, group_name: str = "") -> None:
        self.group_name = group_name
        self._users: List[User] = []

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def __contains__(self, name: object) -> bool:
        return self._index_of(name) is not None

    def _index_of(self, name: object) -> Optional[int]:
        for index, user in enumerate(self._users):
            if user.name == name:
                return index
        return None

    def _scope(self) -> str:
        return f"group {self.group_name}" if self.group_name else ""

    def add(self, name: str) -> User:
        """Insert a new zero-balance user at the front of the roster."""

        if name in self:
            raise DuplicateName("user", name, self._scope())
        user = User(name=name)
        self._users.insert(0, user)
        LOGGER.debug("Added user '%s' to %s", name, self._scope() or "roster")
        return user

    def remove(self, name: str) -> User:
        """Detach and return the named user."""

        index = self._index_of(name)
        if index is None:
            raise NotFound("user", name, self._scope())
        return self._users.pop(index)

    def find(self, name: str) -> Optional[User]:
        """Return the named user, or ``None`` when absent."""

        index = self._index_of(name)
        return None if index is None else self._users[index]

    def names(self) -> List[str]:
        """Return user names in roster order."""

        return [user.name for user in self._users]

    def least_balance(self) -> List[User]:
        """Return the leading users that share the lowest balance."""

        if not self._users:
            raise EmptyCollection(self._scope() or "roster")
        lowest = self._users[0].balance
        leaders: List[User] = []
        for user in self._users:
            if user.balance != lowest:
                break
            leaders.append(user)
        return leaders

    def credit(self, name: str, amount: float) -> User:
        """Add ``amount`` to a user's balance and move them forward if needed."""

        index = self._index_of(name)
        if index is None:
            raise NotFound("user", name, self._scope())
        user = self._users[index]
        user.balance += amount

        destination = index
        while (
            destination + 1 < len(self._users)
            and self._users[destination + 1].balance <= user.balance
        ):
            destination += 1
        if destination != index:
            # popping shifts later users left, so ``destination`` now sits right
            # after the last user we walked past
            self._users.pop(index)
            self._users.insert(destination, user)
            LOGGER.debug(
                "Moved user '%s' from position %s to %s (balance=%s)",
                name,
                index,
                destination,
                user.balance,
            )
        return user
