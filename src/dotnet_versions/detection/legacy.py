"""Detection of .NET Framework versions below 4.5.

These releases live under NDP as one key per version ("v2.0.50727",
"v3.5", ...). Older layouts put Version/SP/Install directly on that key;
v4.0 moves them one level down into per-profile keys ("Client", "Full").
"""

import logging
from collections.abc import Iterator

from dotnet_versions.core.registry import ConfigTree, KeyHandle, opened_key, read_text
from dotnet_versions.detection.models import VersionEntry

logger = logging.getLogger(__name__)

NDP_KEY_PATH = r"SOFTWARE\Microsoft\NET Framework Setup\NDP"
VERSION_KEY_PREFIX = "v"
# Covered by the modern reader through v4\Full.
EXCLUDED_VERSION_KEY = "v4"


def _entry_for_key(tree: ConfigTree, key: KeyHandle) -> tuple[str, VersionEntry | None]:
    """Read Version/SP/Install from a key and decide what to report.

    Returns:
        Tuple of (raw version, entry to print or None)
    """
    version = read_text(tree, key, "Version")
    service_pack = read_text(tree, key, "SP")
    install = read_text(tree, key, "Install")

    if not install:
        # No install flag: the key is the version record itself.
        return version, VersionEntry(version)
    if install == "1":
        return version, VersionEntry(version, service_pack or None)
    logger.debug("Skipping %s: Install=%s", key.path, install)
    return version, None


def read_legacy_versions(tree: ConfigTree) -> Iterator[VersionEntry]:
    """Yield the pre-4.5 versions found under the NDP key.

    Each yielded entry has a non-blank version. Nothing is yielded when the
    NDP key is absent. Only keys named "v..." are considered, "v4" is never
    visited, and traversal stops one level below the version key.
    """
    with opened_key(tree, NDP_KEY_PATH) as ndp_key:
        if ndp_key is None:
            return

        for version_key_name in tree.list_subkeys(ndp_key):
            if version_key_name == EXCLUDED_VERSION_KEY:
                logger.debug("Skipping %s, reported by the 4.5+ reader", version_key_name)
                continue
            if not version_key_name.startswith(VERSION_KEY_PREFIX):
                continue

            with opened_key(tree, version_key_name, ndp_key) as version_key:
                if version_key is None:
                    continue

                version, entry = _entry_for_key(tree, version_key)
                if entry is not None and entry.format() is not None:
                    yield entry
                if version:
                    continue

                for profile_name in tree.list_subkeys(version_key):
                    with opened_key(tree, profile_name, version_key) as profile_key:
                        if profile_key is None:
                            continue
                        _, entry = _entry_for_key(tree, profile_key)
                        if entry is not None and entry.format() is not None:
                            yield entry
