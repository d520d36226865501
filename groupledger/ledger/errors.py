"""Mini README: Recoverable error taxonomy for ledger operations.

Structure:
    * LedgerError - common base so callers can catch every business failure.
    * DuplicateName - a group or user with the same name already exists.
    * NotFound - the referenced group or user is absent.
    * EmptyCollection - a query ran against a group with no users.

All three are expected outcomes that the command interpreter reports to the
operator. Resource exhaustion is deliberately not represented here.
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for recoverable ledger failures."""


class DuplicateName(LedgerError, ValueError):
    """Raised when inserting a name that is already taken."""

    def __init__(self, kind: str, name: str, scope: str = "") -> None:
        self.kind = kind
        self.name = name
        self.scope = scope
        where = f" in {scope}" if scope else ""
        super().__init__(f"{kind.capitalize()} {name} already exists{where}")


class NotFound(LedgerError, KeyError):
    """Raised when a named group or user does not exist."""

    def __init__(self, kind: str, name: str, scope: str = "") -> None:
        self.kind = kind
        self.name = name
        self.scope = scope
        where = f" in {scope}" if scope else ""
        super().__init__(f"{kind.capitalize()} {name} not found{where}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class EmptyCollection(LedgerError, LookupError):
    """Raised when a group has no users to answer a query."""

    def __init__(self, scope: str) -> None:
        self.scope = scope
        super().__init__(f"{scope} has no users")
