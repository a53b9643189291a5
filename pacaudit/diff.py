"""
Selection and ordering of packages with a newer published version.
"""

from __future__ import annotations

from functools import cmp_to_key
from operator import attrgetter
from typing import Any, Callable, Iterable, Union

from .descriptor import PackageDescriptor

KeyExtractor = Callable[[Any], Any]
SortField = Union[str, tuple[KeyExtractor, bool]]

# group, then official repos before AUR, then name
REPORT_ORDER: tuple[SortField, ...] = ("group", "aur", "name")


def _default_cmp(a: Any, b: Any) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def sort_by(*fields: SortField) -> Callable[[Any, Any], int]:
    """
    Build a comparison function from ordered sort fields.

    Each field is either an attribute name (ascending) or a
    ``(key_extractor, reverse)`` pair. Fields are compared in order; the
    first non-equal field decides.

    Returns:
        ``cmp(a, b)`` returning -1, 0 or 1, usable with ``functools.cmp_to_key``
    """
    comparators: list[tuple[KeyExtractor, int]] = []
    for field in fields:
        if isinstance(field, str):
            comparators.append((attrgetter(field), 1))
        else:
            key, reverse = field
            comparators.append((key, -1 if reverse else 1))

    def compare(a: Any, b: Any) -> int:
        for key, direction in comparators:
            result = _default_cmp(key(a), key(b)) * direction
            if result:
                return result
        return 0

    return compare


def needs_update(descriptor: PackageDescriptor) -> bool:
    """True if a remote version is known and differs from the installed one."""
    return bool(descriptor.remote_version) and descriptor.remote_version != descriptor.version


def pending_updates(descriptors: Iterable[PackageDescriptor]) -> list[PackageDescriptor]:
    """
    Outdated packages in report order.

    Versions are compared as plain strings. The sort is stable, so exact
    ties keep their input order.
    """
    outdated = [d for d in descriptors if needs_update(d)]
    return sorted(outdated, key=cmp_to_key(sort_by(*REPORT_ORDER)))
