"""Mini README: Operator-facing interfaces for groupledger.

Exports the command interpreter that the console entry point drives. Future
interfaces (for example a curses dashboard) should live alongside it.
"""

from .commands import CommandInterpreter, CommandResult, CommandSyntaxError

__all__ = ["CommandInterpreter", "CommandResult", "CommandSyntaxError"]
