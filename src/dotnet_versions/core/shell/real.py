"""Real shell sessions using subprocess."""

import logging
import subprocess

from dotnet_versions.core.shell.abc import Shell

logger = logging.getLogger(__name__)


class RealShell(Shell):
    """Production implementation piping commands into a shell process.

    Stdout is captured; stderr is inherited so that error text from the
    queried tools reaches the terminal untouched. There is no timeout.
    """

    def run_script(self, shell: str, commands: list[str]) -> str:
        script = "".join(f"{command}\n" for command in commands)
        try:
            process = subprocess.Popen(
                [shell],
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as e:
            logger.debug("Could not launch shell %s: %s", shell, e)
            return ""

        # Popen's context manager closes the pipes and waits for the process.
        with process:
            stdout, _ = process.communicate(script)

        logger.debug("Shell %s exited with code %s", shell, process.returncode)
        return stdout or ""
