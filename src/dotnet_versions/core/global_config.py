"""Global configuration data structures and loading.

Provides immutable config data loaded from ~/.dotnet-versions/config.toml.
The file is optional: every setting has a default.
"""

import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_QUERY_COMMANDS = (
    "dotnet --list-runtimes",
    "dotnet --version",
    "dotnet --list-sdks",
)


def default_shell() -> str:
    """Shell used to run the runtime queries on this platform."""
    return "cmd.exe" if sys.platform == "win32" else "/bin/sh"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable configuration data.

    Loaded once at CLI entry point and stored in DetectorContext.
    All fields are read-only after construction.
    """

    shell: str
    query_commands: tuple[str, ...]
    registry_file: Path | None

    @staticmethod
    def defaults() -> "GlobalConfig":
        return GlobalConfig(
            shell=default_shell(),
            query_commands=DEFAULT_QUERY_COMMANDS,
            registry_file=None,
        )


def global_config_path() -> Path:
    """Get the path to the global config file."""
    return Path.home() / ".dotnet-versions" / "config.toml"


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load config from ~/.dotnet-versions/config.toml.

    Example config:
      shell = "pwsh"
      query_commands = ["dotnet --list-runtimes"]
      registry_file = "snapshots/build-agent.toml"

    Args:
        path: Config file path (defaults to ~/.dotnet-versions/config.toml)

    Returns:
        GlobalConfig with loaded values, or defaults if the file is absent

    Raises:
        ValueError: If the file is not valid TOML or a setting has the wrong type
    """
    config_path = path if path is not None else global_config_path()

    if not config_path.exists():
        return GlobalConfig.defaults()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid config file {config_path}: {e}") from e

    shell = data.get("shell", default_shell())
    if not isinstance(shell, str) or not shell:
        raise ValueError(f"'shell' must be a non-empty string in {config_path}")

    commands = data.get("query_commands", list(DEFAULT_QUERY_COMMANDS))
    if not isinstance(commands, list) or not all(isinstance(c, str) for c in commands):
        raise ValueError(f"'query_commands' must be a list of strings in {config_path}")

    registry_file: Path | None = None
    raw_registry_file = data.get("registry_file")
    if raw_registry_file is not None:
        if not isinstance(raw_registry_file, str) or not raw_registry_file:
            raise ValueError(f"'registry_file' must be a non-empty string in {config_path}")
        registry_file = Path(raw_registry_file).expanduser()
        if not registry_file.is_absolute():
            registry_file = config_path.parent / registry_file

    return GlobalConfig(
        shell=shell,
        query_commands=tuple(commands),
        registry_file=registry_file,
    )
