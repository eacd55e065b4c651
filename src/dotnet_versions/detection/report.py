"""Runs the detection steps and writes the report."""

from dotnet_versions.cli.output import machine_output
from dotnet_versions.core.context import DetectorContext
from dotnet_versions.detection.legacy import read_legacy_versions
from dotnet_versions.detection.models import VersionEntry
from dotnet_versions.detection.modern import read_modern_version
from dotnet_versions.detection.runtimes import query_dotnet_runtimes


def write_version(entry: VersionEntry) -> None:
    line = entry.format()
    if line is not None:
        machine_output(line)


def run_detection(ctx: DetectorContext) -> None:
    """Run the runtime query, legacy reader and modern reader in order.

    Each step writes as it goes; nothing is merged, sorted or deduplicated.
    """
    runtimes_output = query_dotnet_runtimes(ctx.shell, ctx.global_config)
    if runtimes_output:
        machine_output(runtimes_output)

    for entry in read_legacy_versions(ctx.registry):
        write_version(entry)

    modern = read_modern_version(ctx.registry)
    if modern is not None:
        write_version(modern)
