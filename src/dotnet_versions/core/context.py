"""Application context with dependency injection."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from dotnet_versions.core.global_config import GlobalConfig, load_global_config
from dotnet_versions.core.registry import ConfigTree, TomlRegistry, WindowsRegistry
from dotnet_versions.core.shell import RealShell, Shell
from dotnet_versions.core.user_prompt import InteractivePrompt, UserPrompt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectorContext:
    """Immutable context holding all dependencies for detection.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    registry: ConfigTree
    shell: Shell
    prompt: UserPrompt
    global_config: GlobalConfig


def select_registry(global_config: GlobalConfig) -> ConfigTree:
    """Pick the registry backend for this machine.

    A configured snapshot file wins, so a Windows export can be inspected
    anywhere. Without one, Windows uses the live registry and other
    platforms get an empty tree.

    Raises:
        ValueError: If the configured snapshot file is missing or malformed
    """
    if global_config.registry_file is not None:
        logger.debug("Using registry snapshot %s", global_config.registry_file)
        return TomlRegistry.from_file(global_config.registry_file)
    if sys.platform == "win32":
        logger.debug("Using the Windows registry")
        return WindowsRegistry()
    logger.debug("No registry on %s; registry readers will report nothing", sys.platform)
    return TomlRegistry.empty()


def create_context(config_path: Path | None = None) -> DetectorContext:
    """Create production context with real implementations.

    Called once at CLI entry point when tests have not injected one.

    Args:
        config_path: Config file override (defaults to ~/.dotnet-versions/config.toml)

    Raises:
        ValueError: If the config or registry snapshot file is malformed
    """
    global_config = load_global_config(config_path)
    return DetectorContext(
        registry=select_registry(global_config),
        shell=RealShell(),
        prompt=InteractivePrompt(),
        global_config=global_config,
    )
