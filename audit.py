#!/usr/bin/env python3
"""
pacaudit - Report installed Arch Linux packages that have a newer version.

Reads a grouped package list, looks up installed versions with pacman,
queries archlinux.org (or the AUR for entries marked ``aur: true``) and
prints the packages whose published version differs.

Usage:
    audit.py                          # Use ./package-list.yml
    audit.py --config ~/packages.yml  # Use another package list
    audit.py --quiet                  # Hide per-package progress
"""

from __future__ import annotations

import argparse
import sys

from pacaudit.collectors import resolve_primary, resolve_secondary
from pacaudit.config import DEFAULT_PACKAGE_LIST, ConfigError, load_package_list
from pacaudit.descriptor import PackageDescriptor
from pacaudit.diff import pending_updates
from pacaudit.local_state import get_installed_version
from pacaudit.logging_config import setup_logging
from pacaudit.normalize import VersionLookup, normalize_entries
from pacaudit.reconcile import Resolver, reconcile
from pacaudit.render import print_summary, render_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pacaudit",
        description="Report installed packages whose latest published version differs.",
    )
    parser.add_argument(
        "-c", "--config",
        default=DEFAULT_PACKAGE_LIST,
        help=f"Package list to audit (default: {DEFAULT_PACKAGE_LIST})",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Hide progress output")
    parser.add_argument("--log-file", help="Also write a debug log to this file")
    return parser


def run_audit(
    config_path: str,
    version_lookup: VersionLookup = get_installed_version,
    primary: Resolver = resolve_primary,
    secondary: Resolver = resolve_secondary,
) -> tuple[list[PackageDescriptor], list[PackageDescriptor]]:
    """Run the full pipeline.

    Args:
        config_path: Package list to audit
        version_lookup: Installed version lookup (pacman by default)
        primary: Resolver for official repository packages
        secondary: Resolver for AUR packages

    Returns:
        Tuple of (all reconciled descriptors, outdated descriptors in report order)

    Raises:
        ConfigError: If the package list cannot be loaded
    """
    package_list = load_package_list(config_path)
    descriptors = normalize_entries(package_list, version_lookup)
    reconciled = reconcile(descriptors, primary=primary, secondary=secondary)
    return reconciled, pending_updates(reconciled)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    try:
        reconciled, pending = run_audit(args.config)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    render_table(pending)
    if not args.quiet:
        print_summary(len(reconciled), len(pending))
    return 0


if __name__ == "__main__":
    sys.exit(main())
