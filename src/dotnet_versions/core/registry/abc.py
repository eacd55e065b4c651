"""Hierarchical key-value store interface (the Windows registry and stand-ins).

This module defines the abstract interface used by the version readers to walk
registry keys, following the ops pattern with ABC-based dependency injection
for testability.

Architecture:
- ConfigTree: Abstract base class defining the interface
- WindowsRegistry: Production implementation backed by winreg
- TomlRegistry: File-backed implementation reading a TOML snapshot
- opened_key(): Context manager that always releases the handle
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyHandle:
    """Open key returned by a ConfigTree.

    Attributes:
        path: Backslash-separated path from the local-machine root, for logging
        native: Backend-specific object (winreg HKEY, TOML table, ...)
    """

    path: str
    native: Any


RegistryValue = str | int


def join_key_path(parent: str, child: str) -> str:
    """Join two backslash-separated key paths, ignoring empty segments."""
    parts = [p for p in parent.split("\\") + child.split("\\") if p]
    return "\\".join(parts)


# ============================================================================
# Abstract Interface
# ============================================================================


class ConfigTree(ABC):
    """Abstract interface for read-only registry access.

    All implementations (real, file-backed and fake) must implement this
    interface. Absent keys and values are reported as None, never raised.
    """

    @abstractmethod
    def open_key(self, path: str, parent: KeyHandle | None = None) -> KeyHandle | None:
        """Open a key below parent, or below the local-machine root.

        Args:
            path: Backslash-separated relative path (case-insensitive)
            parent: Already-open key to resolve path against

        Returns:
            Handle to the key, or None if the key does not exist
        """
        ...

    @abstractmethod
    def list_subkeys(self, key: KeyHandle) -> list[str]:
        """List the names of the immediate child keys."""
        ...

    @abstractmethod
    def get_value(self, key: KeyHandle, name: str) -> RegistryValue | None:
        """Read a named value from the key.

        Returns:
            The value as str or int, or None if the value does not exist
        """
        ...

    @abstractmethod
    def close_key(self, key: KeyHandle) -> None:
        """Release the handle. Calling it more than once is allowed."""
        ...


@contextmanager
def opened_key(
    tree: ConfigTree, path: str, parent: KeyHandle | None = None
) -> Iterator[KeyHandle | None]:
    """Open a key for the duration of a with block.

    Yields None when the key does not exist. The handle is closed on every
    exit path, including exceptions raised inside the block.
    """
    key = tree.open_key(path, parent)
    if key is None:
        logger.debug("Key not found: %s", path)
        yield None
        return
    try:
        yield key
    finally:
        tree.close_key(key)


def read_text(tree: ConfigTree, key: KeyHandle, name: str) -> str:
    """Read a value as text, returning an empty string when it is absent.

    Integer values (REG_DWORD) are rendered in decimal, so an Install flag of
    1 reads as "1".
    """
    value = tree.get_value(key, name)
    if value is None:
        return ""
    return str(value)
