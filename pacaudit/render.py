"""
Output rendering for the pending-update report.
"""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from wcwidth import wcswidth

from .descriptor import PackageDescriptor

# ANSI color codes
YELLOW = "\033[33m"
BOLD_GREEN = "\033[1;32m"
RESET = "\033[0m"

HEADERS = ("#", "name", "group", "aur", "version", "remote_version")

# version, remote_version
COLUMN_COLORS = {4: YELLOW, 5: BOLD_GREEN}


def colorize(text: str, color: str, enabled: bool) -> str:
    """Wrap text in an ANSI color unless disabled or empty."""
    if not enabled or not text:
        return text
    return f"{color}{text}{RESET}"


def display_width(text: str) -> int:
    """Terminal column width of text (falls back to len for unprintables)."""
    width = wcswidth(text)
    return width if width >= 0 else len(text)


def pad(text: str, width: int) -> str:
    return text + " " * max(0, width - display_width(text))


def table_rows(descriptors: Sequence[PackageDescriptor]) -> list[tuple[str, ...]]:
    """Plain-text cells for each descriptor, in the given order."""
    rows = []
    for idx, d in enumerate(descriptors):
        rows.append((
            str(idx),
            d.name,
            d.group,
            "yes" if d.aur else "no",
            d.version or "",
            d.remote_version or "",
        ))
    return rows


def render_table(
    descriptors: Sequence[PackageDescriptor],
    stream: TextIO | None = None,
    use_color: bool | None = None,
) -> None:
    """Render descriptors as an aligned table.

    Args:
        descriptors: Packages to show, already in report order
        stream: Output stream (stdout by default)
        use_color: Color installed/remote versions (default: when stream is a TTY)
    """
    stream = stream or sys.stdout
    if use_color is None:
        use_color = hasattr(stream, "isatty") and stream.isatty()

    if not descriptors:
        print("All packages are up to date.", file=stream)
        return

    rows = table_rows(descriptors)
    widths = [
        max(display_width(cell) for cell in column)
        for column in zip(HEADERS, *rows)
    ]

    # Widths come from plain text; padding stays outside color codes
    print("  ".join(pad(h, w) for h, w in zip(HEADERS, widths)).rstrip(), file=stream)
    print("  ".join("-" * w for w in widths), file=stream)
    for row in rows:
        cells = []
        for idx, (cell, width) in enumerate(zip(row, widths)):
            padding = "" if idx == len(row) - 1 else " " * (width - display_width(cell))
            if idx in COLUMN_COLORS:
                cell = colorize(cell, COLUMN_COLORS[idx], use_color)
            cells.append(cell + padding)
        print("  ".join(cells), file=stream)


def print_summary(total: int, pending: int, stream: TextIO | None = None) -> None:
    """Print summary line.

    Args:
        total: Number of installed packages that were checked
        pending: Number of outdated packages
        stream: Output stream (stderr by default)
    """
    print(f"\n{total} packages checked, {pending} outdated", file=stream or sys.stderr)
