"""Mini README: Line-oriented command interpreter for the group ledger.

Structure:
    * CommandResult - output lines, return code and quit flag for one command.
    * CommandInterpreter - parses a command line and dispatches to the registry.

Each command is a name followed by whitespace separated arguments, for
example ``add_xct west alice 12.5``. Ledger failures are turned into a single
diagnostic line with return code -1 so a session can continue after a bad
command; only unexpected errors propagate.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..configuration import GroupLedgerSettings, get_settings
from ..ledger import DuplicateName, EmptyCollection, GroupRegistry, LedgerError, NotFound
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

SYNTAX_ERROR = "Incorrect syntax."

HELP_TEXT = [
    "list_groups",
    "add_group <group_name>",
    "list_users <group_name>",
    "user_balance <group_name> <user_name>",
    "under_paid <group_name>",
    "add_user <group_name> <user_name>",
    "remove_user <group_name> <user_name>",
    "add_xct <group_name> <user_name> <amount>",
    "recent_xct <group_name> [<num_xct>]",
    "snapshot [<group_name>]",
    "help",
    "quit",
]


class CommandSyntaxError(ValueError):
    """Raised when a command line cannot be parsed."""


@dataclass(slots=True)
class CommandResult:
    """Outcome of executing a single command line."""

    output: List[str] = field(default_factory=list)
    code: int = 0
    quit: bool = False

    @property
    def ok(self) -> bool:
        return self.code == 0


Handler = Callable[[Sequence[str]], List[str]]


def _parse_amount(value: str) -> float:
    try:
        amount = float(value)
    except ValueError as error:
        raise CommandSyntaxError(f"Invalid amount: {value}") from error
    if not math.isfinite(amount):
        raise CommandSyntaxError(f"Amount must be finite: {value}")
    return amount


def _parse_count(value: str) -> int:
    try:
        return int(value)
    except ValueError as error:
        raise CommandSyntaxError(f"Invalid count: {value}") from error


class CommandInterpreter:
    """Execute ledger commands against a ``GroupRegistry``."""

    def __init__(
        self,
        registry: Optional[GroupRegistry] = None,
        settings: Optional[GroupLedgerSettings] = None,
    ) -> None:
        self.registry = registry if registry is not None else GroupRegistry()
        self.settings = settings or get_settings()
        # name -> (handler, minimum args, maximum args)
        self._commands: Dict[str, Tuple[Handler, int, int]] = {
            "list_groups": (self._list_groups, 0, 0),
            "add_group": (self._add_group, 1, 1),
            "list_users": (self._list_users, 1, 1),
            "user_balance": (self._user_balance, 2, 2),
            "under_paid": (self._under_paid, 1, 1),
            "add_user": (self._add_user, 2, 2),
            "remove_user": (self._remove_user, 2, 2),
            "add_xct": (self._add_xct, 3, 3),
            "recent_xct": (self._recent_xct, 1, 2),
            "snapshot": (self._snapshot, 0, 1),
            "help": (self._help, 0, 0),
        }

    def execute(self, line: str) -> CommandResult:
        """Run one command line and report its output and return code."""

        tokens = line.split()
        if not tokens:
            return CommandResult()
        name, args = tokens[0], tokens[1:]
        if name == "quit" and not args:
            return CommandResult(quit=True)

        entry = self._commands.get(name)
        if entry is None or not entry[1] <= len(args) <= entry[2]:
            LOGGER.warning("Rejected command line: %s", line.strip())
            return CommandResult(output=[SYNTAX_ERROR], code=-1)

        handler = entry[0]
        try:
            output = handler(args)
        except CommandSyntaxError as error:
            LOGGER.warning("Rejected command '%s': %s", name, error)
            return CommandResult(output=[SYNTAX_ERROR], code=-1)
        except LedgerError as error:
            LOGGER.warning("Command '%s' failed: %s", name, error)
            return CommandResult(output=[self._describe(error, args)], code=-1)
        return CommandResult(output=output)

    def execute_many(self, lines: Iterable[str]) -> Iterator[Tuple[str, CommandResult]]:
        """Lazily run lines, yielding each with its result, until one requests quit.

        Lines are read only as results are consumed, so a caller that stops
        iterating early leaves the remaining lines unexecuted.
        """

        for line in lines:
            result = self.execute(line)
            yield line, result
            if result.quit:
                return

    def format_amount(self, amount: float) -> str:
        return self.settings.amount_format % amount

    @staticmethod
    def _describe(error: LedgerError, args: Sequence[str]) -> str:
        """Render a ledger failure as the operator-facing diagnostic."""

        if isinstance(error, NotFound) and error.kind == "group":
            return f"Group {error.name} does not exist"
        if isinstance(error, NotFound):
            return f"User {error.name} is not in group {args[0]}"
        if isinstance(error, DuplicateName) and error.kind == "group":
            return f"Group {error.name} already exists"
        if isinstance(error, DuplicateName):
            return f"User {error.name} is already in group {args[0]}"
        if isinstance(error, EmptyCollection):
            return f"Group {args[0]} has no users"
        return str(error)

    # Handlers --------------------------------------------------------------

    def _help(self, args: Sequence[str]) -> List[str]:
        return list(HELP_TEXT)

    def _list_groups(self, args: Sequence[str]) -> List[str]:
        return self.registry.list_groups()

    def _add_group(self, args: Sequence[str]) -> List[str]:
        self.registry.add_group(args[0])
        return []

    def _list_users(self, args: Sequence[str]) -> List[str]:
        return self.registry.get_group(args[0]).list_users()

    def _user_balance(self, args: Sequence[str]) -> List[str]:
        group = self.registry.get_group(args[0])
        return [self.format_amount(group.user_balance(args[1]))]

    def _under_paid(self, args: Sequence[str]) -> List[str]:
        return self.registry.get_group(args[0]).least_balance_users()

    def _add_user(self, args: Sequence[str]) -> List[str]:
        self.registry.get_group(args[0]).add_user(args[1])
        return []

    def _remove_user(self, args: Sequence[str]) -> List[str]:
        self.registry.get_group(args[0]).remove_user(args[1])
        return []

    def _add_xct(self, args: Sequence[str]) -> List[str]:
        amount = _parse_amount(args[2])
        self.registry.get_group(args[0]).post_transaction(args[1], amount)
        return []

    def _recent_xct(self, args: Sequence[str]) -> List[str]:
        count = _parse_count(args[1]) if len(args) > 1 else self.settings.default_recent_count
        group = self.registry.get_group(args[0])
        return [
            f"{user_name}: {self.format_amount(amount)}"
            for user_name, amount in group.recent_transactions(count)
        ]

    def _snapshot(self, args: Sequence[str]) -> List[str]:
        if args:
            payload: object = self.registry.get_group(args[0]).as_dict()
        else:
            payload = self.registry.export_snapshot()
        return json.dumps(payload, indent=2).splitlines()
