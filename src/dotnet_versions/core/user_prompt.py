"""End-of-run keypress wait."""

from abc import ABC, abstractmethod

import click


class UserPrompt(ABC):
    """Holds the console open until the user acknowledges the report.

    Skipped entirely in batch mode, so scripts can capture the report and
    move on.
    """

    @abstractmethod
    def wait_for_key(self) -> None:
        """Block until a single key is pressed."""


class InteractivePrompt(UserPrompt):
    """Waits for one keypress without echoing it."""

    def wait_for_key(self) -> None:
        click.getchar(echo=False)
