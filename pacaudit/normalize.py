"""
Flatten the grouped package list into installed package descriptors.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Sequence

from .config import PackageEntry
from .descriptor import PackageDescriptor
from .local_state import get_installed_version

logger = logging.getLogger(__name__)

VersionLookup = Callable[[str], "str | None"]


def normalize_entries(
    package_list: Mapping[str, Sequence[PackageEntry | str]],
    version_lookup: VersionLookup = get_installed_version,
) -> list[PackageDescriptor]:
    """
    Build descriptors for every installed package in the list.

    Groups keep their document order and entries keep their order within a
    group. Packages whose installed version cannot be determined are dropped.
    The same name in two groups yields two descriptors.

    Args:
        package_list: Mapping of group name to entries (PackageEntry or bare name)
        version_lookup: Returns the installed version of a package, or None

    Returns:
        Descriptors with ``version`` set and ``remote_version`` unset
    """
    descriptors: list[PackageDescriptor] = []

    for group, entries in package_list.items():
        for raw in entries or ():
            entry = raw if isinstance(raw, PackageEntry) else PackageEntry.from_raw(raw, group)
            version = version_lookup(entry.name)
            if not version:
                logger.debug(f"Skipping {entry.name} ({group}): not installed")
                continue
            descriptors.append(PackageDescriptor(
                name=entry.name,
                group=group,
                aur=entry.aur,
                version=version,
            ))

    return descriptors
