"""Registry access subpackage.

This subpackage provides an abstraction over registry reads with a native
Windows backend and a TOML snapshot backend.
"""

from dotnet_versions.core.registry.abc import (
    ConfigTree,
    KeyHandle,
    RegistryValue,
    opened_key,
    read_text,
)
from dotnet_versions.core.registry.real import WindowsRegistry
from dotnet_versions.core.registry.toml import TomlRegistry

__all__ = [
    "ConfigTree",
    "KeyHandle",
    "RegistryValue",
    "TomlRegistry",
    "WindowsRegistry",
    "opened_key",
    "read_text",
]
