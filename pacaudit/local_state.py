"""
Installed package versions from the local pacman database.
"""

from __future__ import annotations

import logging
import os
import re
import subprocess

logger = logging.getLogger(__name__)

PACMAN = "pacman"
TIMEOUT_SECONDS = 10

VERSION_LINE_RE = re.compile(r"^Version\s*:\s*(.*)$", re.MULTILINE)
EPOCH_RE = re.compile(r"^\d+:")


def parse_pacman_version(output: str) -> str | None:
    """Extract the version from ``pacman -Qi`` output.

    The epoch prefix is dropped so the result compares against the remote
    registries, which report versions without it (e.g. "1:19.03.2-1" -> "19.03.2-1").

    Args:
        output: Raw stdout of ``pacman -Qi <name>``

    Returns:
        Version string, or None if no Version field is present
    """
    match = VERSION_LINE_RE.search(output)
    if not match:
        return None
    version = EPOCH_RE.sub("", match.group(1).strip())
    return version or None


def get_installed_version(name: str, timeout: int = TIMEOUT_SECONDS) -> str | None:
    """
    Get the installed version of a package.

    Args:
        name: Package name
        timeout: Timeout in seconds for the pacman query

    Returns:
        Installed version, or None if the package is not installed
    """
    try:
        result = subprocess.run(
            [PACMAN, "-Qi", name],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
            env={**os.environ, "LC_ALL": "C"},  # Untranslated field labels
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"pacman query failed for {name}: {e}")
        return None

    if result.returncode != 0:
        logger.debug(f"{name}: not installed")
        return None

    return parse_pacman_version(result.stdout)
