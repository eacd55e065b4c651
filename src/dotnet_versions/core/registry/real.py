"""Real registry access using the Windows winreg module.

winreg only exists on Windows, so it is imported when the backend is
constructed rather than at module import time. All operations follow LBYL
philosophy for expected absences (missing keys and values return None);
other OS errors bubble to the caller.
"""

import importlib
import logging
from types import ModuleType

from dotnet_versions.core.registry.abc import (
    ConfigTree,
    KeyHandle,
    RegistryValue,
    join_key_path,
)

logger = logging.getLogger(__name__)


def load_winreg() -> ModuleType:
    """Import winreg, raising RuntimeError off Windows."""
    try:
        return importlib.import_module("winreg")
    except ImportError as e:
        raise RuntimeError("winreg is available only on Windows") from e


class WindowsRegistry(ConfigTree):
    """Read-only view of HKEY_LOCAL_MACHINE through winreg.

    Example:
        registry = WindowsRegistry()
        with opened_key(registry, r"SOFTWARE\\Microsoft") as key:
            if key is not None:
                print(registry.list_subkeys(key))
    """

    def __init__(self, winreg: ModuleType | None = None) -> None:
        """Bind to the winreg module (injectable for tests)."""
        self._winreg = winreg if winreg is not None else load_winreg()

    def open_key(self, path: str, parent: KeyHandle | None = None) -> KeyHandle | None:
        """Open a key with KEY_READ access, returning None if it is missing."""
        root = parent.native if parent is not None else self._winreg.HKEY_LOCAL_MACHINE
        full_path = join_key_path(parent.path if parent is not None else "", path)
        try:
            native = self._winreg.OpenKey(root, path.strip("\\"), 0, self._winreg.KEY_READ)
        except FileNotFoundError:
            return None
        return KeyHandle(path=full_path, native=native)

    def list_subkeys(self, key: KeyHandle) -> list[str]:
        """Enumerate child key names in registry order."""
        subkey_count = self._winreg.QueryInfoKey(key.native)[0]
        return [self._winreg.EnumKey(key.native, i) for i in range(subkey_count)]

    def get_value(self, key: KeyHandle, name: str) -> RegistryValue | None:
        """Read a value; REG_SZ comes back as str, REG_DWORD as int."""
        try:
            value, _value_type = self._winreg.QueryValueEx(key.native, name)
        except FileNotFoundError:
            return None
        if isinstance(value, str | int):
            return value
        logger.debug("Value %s\\%s has unsupported type %s", key.path, name, type(value).__name__)
        return str(value)

    def close_key(self, key: KeyHandle) -> None:
        """Close the underlying HKEY."""
        self._winreg.CloseKey(key.native)
