"""File-backed registry reading a TOML snapshot.

Used on machines without a native registry, and for inspecting a registry
export taken elsewhere. The document root is the local-machine hive: nested
tables are keys, every other entry is a value.

Example snapshot:
    [SOFTWARE.Microsoft."NET Framework Setup".NDP."v2.0.50727"]
    Version = "2.0.50727.4927"
    SP = 2
    Install = 1
"""

import tomllib
from pathlib import Path
from typing import Any

from dotnet_versions.core.registry.abc import (
    ConfigTree,
    KeyHandle,
    RegistryValue,
    join_key_path,
)


def _find_case_insensitive(table: dict[str, Any], name: str) -> str | None:
    if name in table:
        return name
    lowered = name.lower()
    for candidate in table:
        if candidate.lower() == lowered:
            return candidate
    return None


class TomlRegistry(ConfigTree):
    """In-memory registry tree loaded from parsed TOML data."""

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    @classmethod
    def from_file(cls, path: Path) -> "TomlRegistry":
        """Load a snapshot file.

        Raises:
            ValueError: If the file does not exist or is not valid TOML
        """
        if not path.exists():
            raise ValueError(f"Registry snapshot not found: {path}")
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid registry snapshot {path}: {e}") from e
        return cls(data)

    @classmethod
    def empty(cls) -> "TomlRegistry":
        """Registry with no keys at all."""
        return cls({})

    def open_key(self, path: str, parent: KeyHandle | None = None) -> KeyHandle | None:
        node: dict[str, Any] = parent.native if parent is not None else self._data
        for segment in (s for s in path.split("\\") if s):
            name = _find_case_insensitive(node, segment)
            if name is None or not isinstance(node[name], dict):
                return None
            node = node[name]
        full_path = join_key_path(parent.path if parent is not None else "", path)
        return KeyHandle(path=full_path, native=node)

    def list_subkeys(self, key: KeyHandle) -> list[str]:
        return [name for name, item in key.native.items() if isinstance(item, dict)]

    def get_value(self, key: KeyHandle, name: str) -> RegistryValue | None:
        found = _find_case_insensitive(key.native, name)
        if found is None:
            return None
        value = key.native[found]
        if isinstance(value, dict):
            return None
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, str | int):
            return value
        return str(value)

    def close_key(self, key: KeyHandle) -> None:
        # Nothing to release for in-memory tables.
        pass
