"""
Package list loading and validation.

The package list is a YAML document mapping group names to ordered lists of
entries. An entry is either a bare package name or a mapping:

    base:
      - linux
      - { name: yay-bin, aur: true }

``useSecondarySource`` is accepted as an alias for ``aur``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_LIST = "package-list.yml"

SECONDARY_SOURCE_KEYS = ("aur", "useSecondarySource")


class ConfigError(ValueError):
    """Raised when the package list is missing or malformed."""
    pass


@dataclass(frozen=True)
class PackageEntry:
    """
    A single package-list entry after shorthand expansion.

    Attributes:
        name: Package name as known to pacman and the remote registries
        aur: Look the package up in the AUR instead of the official repos
    """
    name: str
    aur: bool = False

    @staticmethod
    def from_raw(raw: Any, group: str = "") -> PackageEntry:
        """Create PackageEntry from a bare name or a mapping.

        Raises:
            ConfigError: If the entry has no usable name or a non-boolean flag
        """
        where = f" in group '{group}'" if group else ""

        if isinstance(raw, str):
            if not raw.strip():
                raise ConfigError(f"Empty package name{where}")
            return PackageEntry(name=raw.strip())

        if not isinstance(raw, dict):
            raise ConfigError(f"Invalid entry{where}: {raw!r}")

        name = raw.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ConfigError(f"Entry{where} is missing a package name: {raw!r}")

        flags = [raw[key] for key in SECONDARY_SOURCE_KEYS if key in raw]
        if len(flags) > 1 and flags[0] != flags[1]:
            raise ConfigError(f"'{name}'{where}: conflicting values for {' and '.join(SECONDARY_SOURCE_KEYS)}")
        aur = flags[0] if flags else False
        if not isinstance(aur, bool):
            raise ConfigError(f"'{name}'{where}: source flag must be true or false, got {aur!r}")

        return PackageEntry(name=name.strip(), aur=aur)


PackageList = dict[str, list[PackageEntry]]


def parse_package_list(data: Any) -> PackageList:
    """
    Validate a decoded package list document.

    Args:
        data: Result of decoding the YAML document

    Returns:
        Mapping of group name to entries, in document order

    Raises:
        ConfigError: If the document does not have the expected shape
    """
    if not isinstance(data, dict):
        raise ConfigError("Package list must be a mapping of group names to package lists")

    package_list: PackageList = {}
    for group, entries in data.items():
        group = str(group)
        if entries is None:
            package_list[group] = []
            continue
        if not isinstance(entries, list):
            raise ConfigError(f"Group '{group}' must contain a list of packages")
        package_list[group] = [PackageEntry.from_raw(raw, group) for raw in entries]

    return package_list


def load_package_list(path: str | Path = DEFAULT_PACKAGE_LIST) -> PackageList:
    """
    Load the package list from a YAML file.

    Args:
        path: Path to the package list

    Returns:
        Parsed and validated package list

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    path = Path(path)
    logger.debug(f"Loading package list from: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Could not read package list {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in package list {path}: {e}") from e

    package_list = parse_package_list(data)
    count = sum(len(entries) for entries in package_list.values())
    logger.debug(f"Loaded {count} entries in {len(package_list)} groups from {path}")
    return package_list
