"""
Latest-version lookups against the Arch Linux package registries.

Both resolvers return None on any failure so a single unreachable package
never aborts the batch.
"""

import json
import logging
import urllib.parse
import urllib.request
from typing import Any

from . import __version__

logger = logging.getLogger(__name__)

TIMEOUT_SECONDS = 10
USER_AGENT = f"pacaudit/{__version__}"

OFFICIAL_SEARCH_URL = "https://archlinux.org/packages/search/json/"
AUR_RPC_URL = "https://aur.archlinux.org/rpc/"


class CollectionError(Exception):
    """Raised when version collection fails."""
    pass


class NetworkError(CollectionError):
    """Raised when network requests fail."""
    pass


class ParseError(CollectionError):
    """Raised when response parsing fails."""
    pass


def http_get(url: str, timeout: int = TIMEOUT_SECONDS) -> bytes:
    """Perform HTTP GET request.

    Args:
        url: URL to fetch
        timeout: Timeout in seconds

    Returns:
        Response body as bytes

    Raises:
        NetworkError: If request fails or returns a non-2xx status
    """
    try:
        req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
        with urllib.request.urlopen(req, timeout=timeout) as response:
            return response.read()
    except Exception as e:
        raise NetworkError(f"Failed to fetch {url}: {e}") from e


def fetch_first_result(url: str) -> dict[str, Any] | None:
    """Fetch a search endpoint and return its first result.

    Raises:
        NetworkError: If the request fails
        ParseError: If the body is not a JSON object with a results list
    """
    try:
        data = json.loads(http_get(url))
    except ValueError as e:
        raise ParseError(f"Invalid JSON from {url}: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Unexpected response from {url}")
    results = data.get("results") or []
    if not isinstance(results, list):
        raise ParseError(f"Unexpected results field from {url}")

    first = results[0] if results else None
    return first if isinstance(first, dict) else None


def official_search_url(name: str) -> str:
    return f"{OFFICIAL_SEARCH_URL}?{urllib.parse.urlencode({'name': name})}"


def aur_search_url(name: str) -> str:
    return f"{AUR_RPC_URL}?{urllib.parse.urlencode({'v': 5, 'type': 'search', 'arg': name})}"


def resolve_primary(name: str) -> str | None:
    """Latest version of a package in the official repositories.

    Args:
        name: Exact package name

    Returns:
        "<pkgver>-<pkgrel>" of the first search result, or None if unknown
    """
    try:
        info = fetch_first_result(official_search_url(name))
    except CollectionError as e:
        logger.debug(f"archlinux.org lookup failed for {name}: {e}")
        return None

    if not info or "pkgver" not in info or "pkgrel" not in info:
        logger.debug(f"archlinux.org {name}: no result")
        return None

    version = f"{info['pkgver']}-{info['pkgrel']}"
    logger.debug(f"archlinux.org {name}: {version}")
    return version


def resolve_secondary(name: str) -> str | None:
    """Latest version of a package in the AUR.

    Args:
        name: Package name to search for

    Returns:
        Version of the first search result as reported by the AUR, or None if unknown
    """
    try:
        info = fetch_first_result(aur_search_url(name))
    except CollectionError as e:
        logger.debug(f"AUR lookup failed for {name}: {e}")
        return None

    version = info.get("Version") if info else None
    if not version:
        logger.debug(f"AUR {name}: no result")
        return None

    logger.debug(f"AUR {name}: {version}")
    return str(version)
