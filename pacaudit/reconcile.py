"""
Concurrent resolution of remote versions for installed packages.

Descriptors are resolved on a bounded thread pool. Results are written back
by input position, so the output order never depends on completion order.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Sequence

from .collectors import resolve_primary, resolve_secondary
from .descriptor import PackageDescriptor

logger = logging.getLogger(__name__)

MAX_CONCURRENCY = 10

Resolver = Callable[[str], "str | None"]


def resolve_remote_version(
    descriptor: PackageDescriptor,
    primary: Resolver = resolve_primary,
    secondary: Resolver = resolve_secondary,
) -> str | None:
    """
    Look up the latest version for one descriptor.

    AUR packages go to ``secondary``, everything else to ``primary``.
    """
    logger.info(f"Checking {descriptor.name}")
    resolver = secondary if descriptor.aur else primary
    return resolver(descriptor.name)


def reconcile(
    descriptors: Sequence[PackageDescriptor],
    max_workers: int = MAX_CONCURRENCY,
    primary: Resolver = resolve_primary,
    secondary: Resolver = resolve_secondary,
) -> list[PackageDescriptor]:
    """
    Attach the latest published version to every descriptor.

    At most ``max_workers`` lookups run at once; queued items start in input
    order as workers free up. Blocks until every lookup has finished.

    Args:
        descriptors: Normalized descriptors without a remote version
        max_workers: Maximum number of concurrent lookups
        primary: Resolver for official repository packages
        secondary: Resolver for AUR packages

    Returns:
        New descriptors in input order with ``remote_version`` populated
        (None where no version could be resolved)
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")
    if not descriptors:
        return []

    remote_versions: list[str | None] = [None] * len(descriptors)

    with ThreadPoolExecutor(max_workers=min(max_workers, len(descriptors))) as executor:
        future_to_idx = {
            executor.submit(resolve_remote_version, descriptor, primary, secondary): idx
            for idx, descriptor in enumerate(descriptors)
        }

        for future in as_completed(future_to_idx):
            idx = future_to_idx[future]
            try:
                remote_versions[idx] = future.result()
            except Exception as e:
                # Resolvers are not supposed to raise; contain it to this package
                logger.debug(f"Lookup for {descriptors[idx].name} raised: {e}")
                remote_versions[idx] = None

    return [
        descriptor.with_remote_version(remote_version)
        for descriptor, remote_version in zip(descriptors, remote_versions)
    ]
