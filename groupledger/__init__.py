"""Mini README: Core package initializer for the groupledger toolkit.

This module exposes convenience imports so that command modules and tests
can reach the group registry and logging helpers without needing to know
the exact module structure. The ledger itself is in-memory only; nothing
here opens files or network connections.
"""

from .ledger import GroupRegistry
from .logging_utils import get_logger

__all__ = ["GroupRegistry", "get_logger"]
