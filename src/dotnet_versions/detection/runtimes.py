"""Query of the .NET (Core) runtimes and SDKs through the dotnet CLI."""

from dotnet_versions.core.global_config import GlobalConfig
from dotnet_versions.core.shell import Shell


def query_dotnet_runtimes(shell: Shell, global_config: GlobalConfig) -> str:
    """Run the configured dotnet queries in one shell session.

    Returns:
        The shell's combined stdout, empty if the shell could not start
    """
    return shell.run_script(global_config.shell, list(global_config.query_commands))
