"""
Package descriptor: one tracked package flowing through the audit pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class PackageDescriptor:
    """
    Identity and version state of one installed package.

    Attributes:
        name: Package name
        group: Package-list group the entry was declared under
        aur: Resolve the remote version from the AUR instead of the official repos
        version: Installed version (None until looked up)
        remote_version: Latest published version (None until reconciled or if unknown)
    """
    name: str
    group: str
    aur: bool = False
    version: str | None = None
    remote_version: str | None = None

    def with_remote_version(self, remote_version: str | None) -> PackageDescriptor:
        """Return a copy carrying the resolved remote version.

        Raises:
            ValueError: If a remote version was already attached
        """
        if self.remote_version is not None:
            raise ValueError(f"Remote version for {self.group}/{self.name} already resolved")
        return replace(self, remote_version=remote_version)

    def to_dict(self) -> dict:
        """Convert to dictionary for rendering."""
        return {
            "name": self.name,
            "group": self.group,
            "aur": self.aur,
            "version": self.version,
            "remote_version": self.remote_version,
        }
