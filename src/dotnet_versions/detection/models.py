from dataclasses import dataclass


@dataclass(frozen=True)
class VersionEntry:
    """One detected version, rendered as soon as it is found.

    Attributes:
        version: Display version (e.g., "2.0.50727.4927")
        service_pack: Service pack level, or None when there is none
    """

    version: str
    service_pack: str | None = None

    def format(self) -> str | None:
        """Render "<version>" or "<version> Service Pack <level>".

        Returns None when the version is blank, so callers print nothing.
        """
        version = self.version.strip()
        if not version:
            return None
        if self.service_pack:
            return f"{version} Service Pack {self.service_pack}"
        return version
