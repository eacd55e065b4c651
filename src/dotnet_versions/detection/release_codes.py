"""Release codes recorded by .NET Framework 4.5 and later installers.

The v4\\Full key stores an opaque, increasing Release DWORD. Only the builds
listed here are translated; newer codes stay unreported until they are added.
"""

from collections.abc import Mapping
from types import MappingProxyType

RELEASE_CODES: tuple[tuple[int, str], ...] = (
    (528040, "4.8"),
    (461808, "4.7.2"),
    (461308, "4.7.1"),
    (460798, "4.7"),
    (394802, "4.6.2"),
    (394254, "4.6.1"),
    (393295, "4.6"),
    (379893, "4.5.2"),
    (378675, "4.5.1"),
    (378389, "4.5"),
)

_VERSION_BY_CODE: Mapping[int, str] = MappingProxyType(dict(RELEASE_CODES))


def version_for_release(release: int) -> str | None:
    """Translate a release code by exact match, or None if it is unknown."""
    return _VERSION_BY_CODE.get(release)
