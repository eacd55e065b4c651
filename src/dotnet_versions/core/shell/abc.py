"""Shell session interface for running external queries.

This module defines the abstract interface for feeding commands to a shell
and collecting its output, enabling dependency injection for testing.
"""

from abc import ABC, abstractmethod


class Shell(ABC):
    """Abstract interface for shell sessions.

    Real implementations spawn a process. Fake implementations are pure
    in-memory for unit tests and never touch the OS.
    """

    @abstractmethod
    def run_script(self, shell: str, commands: list[str]) -> str:
        """Run commands in one shell session and return its combined stdout.

        Each command is written to the shell's stdin on its own line, in
        order. Stdin is then closed and the call blocks until the shell exits.

        Args:
            shell: Shell executable (e.g., "cmd.exe" or "/bin/sh")
            commands: Command lines to feed to the shell

        Returns:
            Everything the shell wrote to stdout, or an empty string if the
            shell could not be launched
        """
        ...
