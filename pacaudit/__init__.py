"""
pacaudit - Freshness audit for curated Arch Linux package lists.

Core Modules:
- Configuration: grouped package list loading and validation
- Local state: installed versions from the pacman database
- Collectors: latest versions from archlinux.org and the AUR
- Reconciliation: bounded-concurrency remote lookups
- Diff and rendering: outdated packages in report order
"""

__version__ = "1.0.0"

from .config import ConfigError, PackageEntry, load_package_list, parse_package_list
from .descriptor import PackageDescriptor
from .local_state import get_installed_version, parse_pacman_version
from .normalize import normalize_entries
from .collectors import (
    CollectionError,
    NetworkError,
    ParseError,
    resolve_primary,
    resolve_secondary,
)
from .reconcile import MAX_CONCURRENCY, reconcile
from .diff import needs_update, pending_updates, sort_by
from .render import render_table, print_summary
from .logging_config import setup_logging

__all__ = [
    "__version__",
    # Configuration
    "ConfigError",
    "PackageEntry",
    "load_package_list",
    "parse_package_list",
    # Local state
    "PackageDescriptor",
    "get_installed_version",
    "parse_pacman_version",
    "normalize_entries",
    # Collectors
    "CollectionError",
    "NetworkError",
    "ParseError",
    "resolve_primary",
    "resolve_secondary",
    # Reconciliation
    "MAX_CONCURRENCY",
    "reconcile",
    # Diff and rendering
    "needs_update",
    "pending_updates",
    "sort_by",
    "render_table",
    "print_summary",
    # Logging
    "setup_logging",
]
