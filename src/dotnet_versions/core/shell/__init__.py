from dotnet_versions.core.shell.abc import Shell
from dotnet_versions.core.shell.real import RealShell

__all__ = ["RealShell", "Shell"]
