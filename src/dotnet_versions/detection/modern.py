"""Detection of .NET Framework 4.5 and later."""

import logging

from dotnet_versions.core.registry import ConfigTree, opened_key
from dotnet_versions.detection.models import VersionEntry
from dotnet_versions.detection.release_codes import version_for_release

logger = logging.getLogger(__name__)

V4_FULL_KEY_PATH = r"SOFTWARE\Microsoft\NET Framework Setup\NDP\v4\Full"


def read_modern_version(tree: ConfigTree) -> VersionEntry | None:
    """Read the single 4.5+ install record.

    A direct Version value wins. Otherwise the Release code is translated
    through the release-code table; unknown codes report nothing.

    Returns:
        The entry to print, or None if nothing should be printed
    """
    with opened_key(tree, V4_FULL_KEY_PATH) as key:
        if key is None:
            return None

        version = tree.get_value(key, "Version")
        if version is not None:
            entry = VersionEntry(str(version))
            return entry if entry.format() is not None else None

        release = tree.get_value(key, "Release")
        if release is None:
            return None
        if not isinstance(release, int):
            logger.debug("Ignoring non-numeric Release value %r", release)
            return None

        display_version = version_for_release(release)
        if display_version is None:
            logger.debug("Unknown release code %d", release)
            return None
        return VersionEntry(display_version)
