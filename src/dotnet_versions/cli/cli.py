import logging
import os

import click

from dotnet_versions.cli.flags import is_batch_mode, is_help_command
from dotnet_versions.cli.output import machine_output, user_output
from dotnet_versions.core.context import DetectorContext, create_context
from dotnet_versions.detection.report import run_detection

logger = logging.getLogger(__name__)

# Enable debug logging if DOTNET_VERSIONS_DEBUG environment variable is set
if os.getenv("DOTNET_VERSIONS_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

USAGE_LINES = (
    "Writes all the currently installed versions of .NET Framework platform in the system.",
    "Use --b, -b or /b to use in a batch, showing only the installed versions, "
    "without any extra informational lines.",
)

# Flags use DOS-style spellings ("/b", "-?", "--help"), so click must pass
# every argument through untouched instead of parsing options itself.
CONTEXT_SETTINGS = dict(
    help_option_names=[],
    ignore_unknown_options=True,
    allow_extra_args=True,
)


RAW_ARGS_KEY = "dotnet_versions.raw_args"


class RawArgsCommand(click.Command):
    """Command that keeps the argument list exactly as typed.

    click drops a leading "--" while parsing; flag recognition must see it.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


@click.command("dotnet-versions", cls=RawArgsCommand, context_settings=CONTEXT_SETTINGS)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Write the .NET runtimes and .NET Framework versions installed on this machine."""
    arguments: list[str] = ctx.meta.get(RAW_ARGS_KEY, list(args))
    logger.debug("Arguments: %s", arguments)

    if is_help_command(arguments):
        for line in USAGE_LINES:
            machine_output(line)
        return

    batch_mode = is_batch_mode(arguments)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e

    detector_ctx: DetectorContext = ctx.obj
    run_detection(detector_ctx)

    if not batch_mode:
        detector_ctx.prompt.wait_for_key()


def main() -> None:
    """CLI entry point used by the `dotnet-versions` console script."""
    cli()
